#!/usr/bin/env python3
"""
Score a plain-text resume against a plain-text job posting.

Usage:
    python scripts/score_resume.py resume.txt job.txt
    python scripts/score_resume.py resume.txt job.txt --json
    python scripts/score_resume.py resume.txt job.txt -o outs/reports/acme.json
    python scripts/score_resume.py resume.txt job.txt --log
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from rescore.contexts.intake.document_loader import load_document_text
from rescore.contexts.intake.exceptions import DocumentLoadError, EmptyDocumentError
from rescore.contexts.targeting.compatibility import calculate_compatibility, validate_inputs
from rescore.contexts.targeting.logger import (
    _log_info,
    _log_success,
    log_compatibility_result,
    setup_targeting_logger,
)
from rescore.contexts.targeting.report import format_report
from rescore.utils.timestamp import now

load_dotenv()

LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Score a resume against a job posting",
    add_completion=False,
)


@app.command()
def main(
    candidate_file: Annotated[
        Path,
        typer.Argument(help="Resume as a plain-text file", exists=True, dir_okay=False),
    ],
    job_file: Annotated[
        Path,
        typer.Argument(help="Job posting as a plain-text file", exists=True, dir_okay=False),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the report as JSON instead of a table"),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Also write the JSON report to this file", dir_okay=False),
    ] = None,
    log: Annotated[
        bool,
        typer.Option("--log/--no-log", help="Write a session log under LOGS_PATH"),
    ] = False,
):
    """Print the compatibility report for one resume and one job posting."""
    try:
        candidate_text = load_document_text(candidate_file)
        job_text = load_document_text(job_file)
        validate_inputs(candidate_text, job_text)
    except (DocumentLoadError, EmptyDocumentError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if log:
        log_file = setup_targeting_logger(
            LOGS_PATH / f"score_{now()}",
            candidate=candidate_file.name,
            job=job_file.name,
        )
        _log_info(f"Scoring {candidate_file.name} against {job_file.name}")

    report = calculate_compatibility(candidate_text, job_text)

    if log:
        log_compatibility_result(report, verbose=True)
        _log_success(f"Log written to {log_file}")

    body = json.dumps(report.to_dict(), indent=2)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(body + "\n", encoding="utf-8")

    if as_json:
        typer.echo(body)
    else:
        typer.echo(format_report(report, title=f"{candidate_file.name} vs {job_file.name}"))

    if output:
        typer.echo(f"\nReport saved to: {output}")


if __name__ == "__main__":
    app()
