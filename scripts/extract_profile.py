#!/usr/bin/env python3
"""
Show the profile extracted from a plain-text resume or job posting.

Usage:
    python scripts/extract_profile.py resume.txt
    python scripts/extract_profile.py job.txt --json
"""

import json
from pathlib import Path

import typer
from typing_extensions import Annotated

from rescore.contexts.intake.document_loader import parse_document
from rescore.contexts.intake.exceptions import DocumentLoadError

app = typer.Typer(help="Show extracted skills, experience, education and certifications.")


@app.command()
def main(
    document: Annotated[
        Path,
        typer.Argument(help="Plain-text resume or job posting", exists=True, dir_okay=False),
    ],
    as_json: Annotated[bool, typer.Option("--json", help="Print the profile as JSON")] = False,
):
    """Extract and display one document's profile."""
    try:
        parsed = parse_document(document)
    except DocumentLoadError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(parsed.profile.to_dict(), indent=2))
        return

    typer.echo(f"Loading {document.name} ({len(parsed.raw_text)} chars)")
    for label, values in parsed.profile.to_dict().items():
        typer.echo(f"\n=== {label.title()} ({len(values)}) ===")
        for value in values:
            typer.echo(f"  {value}")


if __name__ == "__main__":
    app()
