"""PlankFlow CLI.

Runs a guided plank workout in the terminal against the real clock and prints
the session summary at the end.
"""

import asyncio
import sys
from pathlib import Path

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# Bootstrap must be imported after standard library imports
# but before plankflow imports to set up sys.path correctly
try:
    import cli.bootstrap
except ImportError:
    _project_root = Path(__file__).parent.parent
    if str(_project_root) not in sys.path:
        sys.path.insert(0, str(_project_root))

from plankflow.config.settings import settings
from plankflow.core.logger import configure_from_settings
from plankflow.feedback.sink import TerminalFeedbackSink
from plankflow.preferences.models import Preferences
from plankflow.preferences.store import InMemoryPreferencesStore
from plankflow.session.models import SessionSummary
from plankflow.session.summary import format_duration_ms
from plankflow.workouts.catalog import WORKOUT
from plankflow.workouts.display import display_exercise, format_clock
from plankflow.workouts.errors import InvalidLevelError, InvalidTimeScaleError
from plankflow.workouts.levels import (
    EXERCISE_BY_LEVEL,
    LEVEL_LABELS,
    config_from_level,
    validate_level,
    validate_time_scale,
)
from plankflow.workouts.runner import WorkoutRunner
from plankflow.workouts.state_machine import WorkoutState, initial_state

console = Console()

app = typer.Typer(
    name="plankflow",
    help="PlankFlow - guided plank workouts in your terminal",
    add_completion=False,
)


def _print_state_change(runner: WorkoutRunner, previous: WorkoutState, current: WorkoutState) -> None:
    if current.phase == previous.phase and current.current_index == previous.current_index:
        if current.last_switched_index is not None and previous.last_switched_index is None:
            console.print("[bold magenta]Switch sides[/bold magenta]")
        return

    exercise = display_exercise(current, runner.catalog)
    name = exercise.name if exercise is not None else ""
    position = f"{current.current_index + 1}/{len(runner.catalog)}"
    duration = format_clock(current.time_left)

    if current.phase == "countdown":
        console.print(f"[yellow]Get into position[/yellow] {name} ({duration})")
    elif current.phase == "exercise":
        console.print(f"[bold green]Hold steady[/bold green] {name} [dim]{position}[/dim] ({duration})")
    elif current.phase == "break":
        console.print(f"[cyan]Rest[/cyan] up next: {name} ({duration})")


def _summary_panel(summary: SessionSummary) -> Panel:
    lines = Text()
    lines.append(f"Total plank time: {format_duration_ms(summary.total_plank_ms)}\n")
    lines.append(f"Longest hold:     {format_duration_ms(summary.longest_hold_ms)}\n")
    if summary.calories is None:
        lines.append("Calories:         set your weight to estimate", style="dim")
    else:
        lines.append(f"Calories:         {summary.calories} kcal")
    return Panel(lines, title="Workout complete", border_style="green")


@app.command()
def levels() -> None:
    """Show the timings of every difficulty level."""
    table = Table(title="Difficulty levels")
    table.add_column("Level", justify="right")
    table.add_column("Name")
    table.add_column("Plank hold", justify="right")
    table.add_column("Short rest", justify="right")
    table.add_column("Long rest", justify="right")

    for level, label in enumerate(LEVEL_LABELS):
        config = config_from_level(level)
        table.add_row(
            str(level),
            label,
            f"{config.exercise_duration}s",
            f"{config.short_break}s",
            f"{config.long_break}s",
        )
    console.print(table)


@app.command()
def exercises() -> None:
    """List the exercises of the workout with their form cues."""
    for position, exercise in enumerate(WORKOUT, start=1):
        title = f"{position}. {exercise.name}"
        if exercise.can_mirror:
            title += " [magenta](both sides)[/magenta]"
        console.print(title)
        for cue in exercise.description:
            console.print(f"   [dim]- {cue}[/dim]")


@app.command()
def run(
    level: int = typer.Option(settings.default_level, "--level", "-l", help="Difficulty level (0-4)"),
    weight: float | None = typer.Option(None, "--weight", "-w", help="Body weight, used for the calorie estimate"),
    imperial: bool = typer.Option(False, "--imperial", help="Weight is given in pounds"),
    time_scale: float = typer.Option(settings.time_scale, "--time-scale", help="Duration multiplier (e.g. 0.1 for a dry run)"),
    sound: bool = typer.Option(True, "--sound/--no-sound", help="Play cue sounds"),
    vibration: bool = typer.Option(True, "--vibration/--no-vibration", help="Show vibration cues"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Run a full workout. Press Ctrl+C to abort."""
    configure_from_settings(settings, debug=debug)

    try:
        validate_level(level)
        validate_time_scale(time_scale, EXERCISE_BY_LEVEL[level])
    except (InvalidLevelError, InvalidTimeScaleError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    preferences = Preferences(
        unit_system="imperial" if imperial else "metric",
        sound_enabled=sound,
        vibration_enabled=vibration,
    )
    if weight is not None:
        try:
            preferences = preferences.with_display_weight(weight)
        except ValueError as e:
            console.print(f"[red]Invalid weight: {weight}[/red]")
            raise typer.Exit(1) from e

    state = initial_state(level=level, time_scale=time_scale, countdown=settings.countdown_seconds)
    runner = WorkoutRunner(
        state=state,
        preferences=InMemoryPreferencesStore(preferences),
        feedback=TerminalFeedbackSink(console),
    )
    runner.on_state_change = lambda previous, current: _print_state_change(runner, previous, current)

    console.print(
        Panel(
            Text(f"{LEVEL_LABELS[level]}: {state.config.exercise_duration}s hold, "
                 f"{state.config.short_break}s rest, {state.config.long_break}s long rest"),
            title="PlankFlow",
            border_style="cyan",
        )
    )

    try:
        summary = asyncio.run(runner.run(interval_seconds=settings.tick_interval_seconds))
    except KeyboardInterrupt:
        runner.abort()
        runner.abort()
        console.print("[yellow]Workout aborted[/yellow]")
        raise typer.Exit(130) from None

    if summary is None:
        console.print("[yellow]Nothing to summarize[/yellow]")
        raise typer.Exit(1)
    console.print(_summary_panel(summary))
    logger.debug(f"Summary: {summary.model_dump()}")


if __name__ == "__main__":
    app()
