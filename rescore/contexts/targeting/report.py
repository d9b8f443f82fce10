"""
Plain-text rendering of compatibility reports for the terminal.
"""

from rescore.contexts.targeting.compatibility import (
    EDUCATION_WEIGHT,
    EXPERIENCE_WEIGHT,
    SKILLS_WEIGHT,
    CompatibilityReport,
)
from rescore.utils.report_formatter import Column, TableFormatter, format_percentage


def format_report(report: CompatibilityReport, title: str = "COMPATIBILITY REPORT") -> str:
    """
    Render a report as an aligned score table followed by bullet lists.

    Args:
        report: Report to render
        title: Section header text

    Returns:
        Multi-line report string
    """
    analysis = report.detailed_analysis
    columns = [
        Column("Dimension", 14),
        Column("Weight", 8, ">"),
        Column("Score", 8, ">"),
    ]

    table = TableFormatter(columns)
    table.add_section_header(title)
    table.add_table_header()
    table.add_separator()
    table.add_row(["Skills", format_percentage(SKILLS_WEIGHT, 1, 0), report.skills_score])
    table.add_row(["Experience", format_percentage(EXPERIENCE_WEIGHT, 1, 0), report.experience_score])
    table.add_row(["Education", format_percentage(EDUCATION_WEIGHT, 1, 0), report.education_score])
    table.add_separator()
    table.add_row(["Overall", "", report.overall_score])
    table.add_blank_line()

    table.add_text(f"Experience level: {analysis.experience_level}")
    table.add_text(f"Education match: {'yes' if analysis.education_match else 'no'}")
    table.add_blank_line()

    table.add_bullets("Matched skills", analysis.skills_matched)
    table.add_bullets("Missing skills", report.missing_skills)
    table.add_bullets("Strengths", analysis.strengths)
    table.add_bullets("Improvements", analysis.improvements)
    table.add_bullets("Recommendations", report.recommendations)

    return table.render()
