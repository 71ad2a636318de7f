"""project-knowledge CLI - extract conventions and patterns from C#/TypeScript projects.

Usage:
    project-knowledge --project <path> --output <path> [options]
    project-knowledge -p /path/to/repo -o repo/.claude/config/project-knowledge.json
    project-knowledge -p . -o knowledge.json --verbose
"""

from __future__ import annotations

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .analyzer import analyze_project, write_knowledge
from .errors import AnalysisError
from .knowledge import ProjectKnowledge
from .log import configure_logging

console = Console()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--project", "-p", "project", required=True, help="Path to the project root directory")
@click.option("--output", "-o", "output", required=True, help="Path to write the output JSON file")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress all output except errors")
@click.version_option(version=__version__, prog_name="project-knowledge")
def main(project: str, output: str, verbose: bool, quiet: bool):
    """Extract naming, architecture, pattern, domain and testing conventions.

    Scans the C# and TypeScript sources under PROJECT and writes a
    project-knowledge JSON report to OUTPUT.

    Examples:

        project-knowledge -p /path/to/repo -o /path/to/repo/.claude/config/project-knowledge.json

        project-knowledge -p . -o output.json --verbose
    """
    configure_logging(verbose=verbose, quiet=quiet)

    if not quiet:
        console.print()
        console.print(Panel.fit(
            f"[bold cyan]Project Analyzer v{__version__}[/] - Convention Extractor",
            border_style="cyan",
        ))

    try:
        knowledge = analyze_project(project)
        path = write_knowledge(knowledge, output)
    except AnalysisError as e:
        raise click.ClickException(f"Analysis failed: {e}")
    except OSError as e:
        raise click.ClickException(f"Could not write {output}: {e}")

    if not quiet:
        _print_summary(knowledge)
        console.print()
        console.print(f"[green]Project knowledge saved to: {path}[/]")


def _print_summary(knowledge: ProjectKnowledge) -> None:
    """Print a compact table of the detected conventions."""
    table = Table(title="Project Knowledge", show_header=False, border_style="dim")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in knowledge.summary_rows():
        table.add_row(key, value)
    console.print(table)


if __name__ == "__main__":
    main()
