# src/textfathom/cli.py
"""
textfathom Command Line Interface (CLI).

This module implements the terminal interface using `typer` and `rich`.

Features
--------
- **Reports**: Prints the fixed-layout statistics report inside a Rich panel.
- **Accumulation**: Several files can feed one session for a combined report.
- **JSON Output**: `--json` emits the `AnalysisSummary` contract instead.
- **Word Lists**: `--words` lists every unique word with its occurrences.

Usage
-----
    # Analyse a file
    $ textfathom analyse docs/sample.txt

    # Combined statistics over several files
    $ textfathom analyse chapter1.txt chapter2.txt --accumulate

    # Analyse a literal string, or stdin when no text is given
    $ echo "The cat sat on the mat." | textfathom block --json
"""

from __future__ import annotations

import sys
import traceback
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from textfathom import __version__
from textfathom.core.report import format_word_list
from textfathom.core.session import AnalysisSession

load_dotenv()

app = typer.Typer(
    help="textfathom: readability statistics (Fog, Flesch, Flesch-Kincaid) for English text.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers: Rendering
# --------------------------------------------------------------------------- #


def _render(session: AnalysisSession, *, as_json: bool, words: bool, title: str) -> None:
    """Print the session's statistics as a report panel or as JSON."""
    if as_json:
        summary = session.summary(include_words=words)
        # Plain print: Rich markup would mangle brackets inside the JSON.
        typer.echo(summary.model_dump_json(indent=2))
        return

    console.print(Panel(Text(session.report().rstrip("\n")), title=title, border_style="cyan"))
    if words:
        _render_words(session)


def _render_words(session: AnalysisSession) -> None:
    """Print the unique word table, most frequent first."""
    frequencies = session.unique_words()
    if not frequencies:
        console.print("[dim]No words found.[/dim]")
        return

    table = Table(title="Unique words", show_lines=False)
    table.add_column("Count", justify="right", style="magenta")
    table.add_column("Word", style="green")
    for word, count in sorted(frequencies.items(), key=lambda kv: (-kv[1], kv[0])):
        table.add_row(str(count), word)
    console.print(table)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def analyse(
    files: Annotated[
        list[Path],
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="One or more plain-text files to analyse.",
        ),
    ],
    accumulate: Annotated[
        bool,
        typer.Option(
            "--accumulate/--separate",
            "-a",
            help="Combine all files into one set of statistics.",
        ),
    ] = False,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Emit the analysis summary as JSON."),
    ] = False,
    words: Annotated[
        bool,
        typer.Option("--words", "-w", help="Also list every unique word."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    Analyse text files and print their readability statistics.

    Without `--accumulate` each file gets its own report. With it, the files
    feed one session and a single combined report is printed; note that the
    sentence count then reflects the last file only.
    """
    session = AnalysisSession()

    try:
        for index, path in enumerate(files):
            session.analyse_file(path, accumulate=accumulate and index > 0)
            if not accumulate:
                _render(session, as_json=as_json, words=words, title=path.name)
    except Exception as e:
        console.print(f"\n[bold red]Analysis Error:[/bold red] {e}")
        if verbose:
            traceback.print_exc()
        raise typer.Exit(code=1) from e

    if accumulate:
        _render(session, as_json=as_json, words=words, title=f"{len(files)} files")


@app.command()  # type: ignore[misc]
def block(
    text: Annotated[
        str | None,
        typer.Argument(help="Text to analyse. Reads standard input when omitted."),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Emit the analysis summary as JSON."),
    ] = False,
    words: Annotated[
        bool,
        typer.Option("--words", "-w", help="Also list every unique word."),
    ] = False,
) -> None:
    """Analyse a literal block of text (or standard input)."""
    if text is None:
        text = sys.stdin.read()

    session = AnalysisSession()
    try:
        session.analyse_block(text)
    except Exception as e:
        console.print(f"\n[bold red]Analysis Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    _render(session, as_json=as_json, words=words, title="text block")


@app.command()  # type: ignore[misc]
def wordlist(
    file: Annotated[
        Path,
        typer.Argument(exists=True, file_okay=True, dir_okay=False, readable=True),
    ],
) -> None:
    """Print `<count> :<word>` for every unique word of a file, sorted by word."""
    session = AnalysisSession()
    session.analyse_file(file)
    typer.echo(format_word_list(session.unique_words()), nl=False)


@app.command()  # type: ignore[misc]
def version() -> None:
    """Print the installed textfathom version."""
    typer.echo(__version__)


if __name__ == "__main__":
    app()
