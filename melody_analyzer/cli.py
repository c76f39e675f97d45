"""Command-line interface for Melody Analyzer.

Provides commands for:
- analyze: Find the vocal track and report its melodic features
- info: Show MIDI file information
- tracks: Show the vocal plausibility score of every track
- extract: Write the vocal track to its own MIDI file
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .core import Outcome

app = typer.Typer(
    name="melody-analyzer",
    help="Vocal melody analysis for MIDI files",
    rich_markup_mode="markdown",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _unwrap_or_exit(outcome: Outcome):
    """Return the outcome's value, or print its error and exit with code 1."""
    if not outcome.ok:
        console.print(f"[red]Error ({outcome.error.value}): {escape(outcome.message)}[/red]")
        raise typer.Exit(1)
    return outcome.value


@app.command()
def analyze(
    input_file: Path = typer.Argument(..., help="Input MIDI file"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    summary: bool = typer.Option(
        False, "--summary", help="Print a short melody summary only"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Analyze the vocal melody of a MIDI file.

    **Examples:**

        melody-analyzer analyze song.mid

        melody-analyzer analyze song.mid --json
    """
    from .service import MelodyAnalysisService
    from .output import result_to_dict, format_melody_info, pitch_label

    _setup_logging(verbose)

    service = MelodyAnalysisService()
    result = _unwrap_or_exit(service.analyze(input_file))

    if json_output:
        console.print_json(data=result_to_dict(result))
        return

    if summary:
        console.print(format_melody_info(result))
        return

    console.print(f"\n[bold blue]Melody Analysis: {escape(input_file.name)}[/bold blue]\n")
    console.print(f"  Vocal track: {result.track_index} ({escape(result.track_name)})")
    console.print(f"  Notes: {result.total_notes}")
    low, high = result.note_range
    console.print(f"  Range: {pitch_label(low)} - {pitch_label(high)} ({low}-{high})")
    console.print(
        f"  [green]Mode: {result.mode.detected_mode}[/green] "
        f"(confidence: {result.mode.confidence:.2f})"
    )
    if result.mode.scale_notes:
        console.print(f"  Scale: {' '.join(result.mode.scale_notes)}")

    _show_distribution_table("Rhythm", result.rhythm.as_dict())
    _show_distribution_table("Intervals", result.intervals.as_dict())


@app.command()
def info(
    input_file: Path = typer.Argument(..., help="Input MIDI file"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
):
    """Show information about a MIDI file."""
    from .service import MelodyAnalysisService
    from .output import file_info_to_dict

    service = MelodyAnalysisService()
    file_info = _unwrap_or_exit(service.get_file_info(input_file))

    if json_output:
        console.print_json(data=file_info_to_dict(file_info))
        return

    console.print(f"\n[bold]MIDI Info:[/bold] {escape(input_file.name)}")
    console.print(f"  Tracks: {file_info.track_count}")
    console.print(f"  Duration: {file_info.duration:.2f} seconds")
    console.print(f"  Ticks per quarter note: {file_info.ticks_per_quarter_note}")
    console.print(f"  Tempo: {file_info.tempo_bpm} BPM")


@app.command()
def tracks(
    input_file: Path = typer.Argument(..., help="Input MIDI file"),
    json_output: bool = typer.Option(
        False, "--json", help="Output results as JSON (for scripting)"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Score every track for vocal plausibility."""
    from .service import MelodyAnalysisService
    from .inference import VocalTrackScorer
    from .output import candidates_to_list

    _setup_logging(verbose)

    service = MelodyAnalysisService()
    candidates = _unwrap_or_exit(service.rank_tracks(input_file))

    if json_output:
        console.print_json(data=candidates_to_list(candidates))
        return

    if not candidates:
        console.print("[yellow]No tracks with notes found![/yellow]")
        return

    best = VocalTrackScorer.best(candidates)
    _show_candidates_table(candidates, best.track_index)


@app.command()
def extract(
    input_file: Path = typer.Argument(..., help="Input MIDI file"),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Output MIDI file path"
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose", help="Verbose output"
    ),
):
    """Write the detected vocal track to its own MIDI file."""
    from .service import MelodyAnalysisService

    _setup_logging(verbose)

    if output is None:
        output = input_file.with_name(f"{input_file.stem}_melody.mid")

    service = MelodyAnalysisService()
    written = _unwrap_or_exit(service.export_melody(input_file, output))
    console.print(f"[green]Melody written to:[/green] {escape(str(written))}")


def _show_distribution_table(title: str, values: dict) -> None:
    """Display a percentage distribution in a table."""
    table = Table(title=title)
    table.add_column("Category", style="cyan")
    table.add_column("Share (%)", style="yellow", justify="right")

    for key, percent in values.items():
        table.add_row(key, f"{percent:.1f}")

    console.print(table)


def _show_candidates_table(candidates, selected_index: int) -> None:
    """Display vocal track candidates in a table."""
    table = Table(title="Vocal Track Candidates")
    table.add_column("Track", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Notes", style="yellow")
    table.add_column("Range", style="blue")
    table.add_column("Score", style="magenta")

    for c in candidates:
        marker = " *" if c.track_index == selected_index else ""
        table.add_row(
            f"{c.track_index}{marker}",
            escape(c.track_name),
            str(c.note_count),
            f"{c.pitch_range[0]}-{c.pitch_range[1]}",
            f"{c.score:.0f}",
        )

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
