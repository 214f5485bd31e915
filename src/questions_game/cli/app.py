"""
Questions Game CLI: play the guessing game and inspect its question tree.

The tree lives in a text file (kb/questions.txt by default). Playing loads it,
runs rounds until the player stops, and writes the grown tree back.
"""

from __future__ import annotations

from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from questions_game.cli.formatters import build_stats_table, build_tree_view, format_round_summary
from questions_game.cli.load_helpers import load_or_exit
from questions_game.cli.paths import resolve_export_path, tree_path
from questions_game.core.prompt import ConsolePrompter, InputExhausted
from questions_game.core.tree.models import default_tree
from questions_game.core.tree.utils import compute_stats
from questions_game.io.serializer import export_tree_dict
from questions_game.services.game_service import GameSession
from questions_game.utils.logging import configure_logging

app = typer.Typer(help="Questions Game CLI: play 20 questions and inspect the question tree.")
console = Console()

WIN_MESSAGE = "Great, I got it right!"
THINK_MESSAGE = "Please think of an object for me to guess."
AGAIN_PROMPT = "Do you want to go again?"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Questions Game CLI."""
    configure_logging(verbose)


@app.command()
def play(
    tree: str | None = typer.Option(None, "--tree", help="Path to the question tree file"),
    save: bool = typer.Option(True, "--save/--no-save", help="Write the tree back after playing"),
    fresh: bool = typer.Option(False, "--fresh", help="Ignore the existing tree and start from scratch"),
) -> None:
    """Play rounds until you stop, learning from every wrong guess."""
    path = tree_path(tree)
    start = default_tree() if fresh else load_or_exit(path, console=console, allow_missing=True)

    prompter = ConsolePrompter(console)
    session = GameSession(prompter, start)
    prompter.tell("[bold]Welcome to the questions game.[/bold]")

    try:
        while True:
            prompter.tell(f"\n{THINK_MESSAGE}")
            result = session.play_round()
            if result.won:
                prompter.tell(WIN_MESSAGE)
            console.print(f"[dim]{format_round_summary(result)}[/dim]")
            if not prompter.ask_yes_no(AGAIN_PROMPT):
                break
    except InputExhausted as err:
        console.print(f"\n[red]Input ended:[/red] {escape(str(err))}")
        console.print("[yellow]Tree not saved[/yellow]")
        raise typer.Exit(code=1)

    console.print(f"\nRounds: {session.rounds_played}, won: {session.wins}, learned: {session.losses}")
    if save:
        session.save(path)
        console.print(f"[green]Saved[/green] question tree to {escape(path)}")


@app.command()
def show(
    tree: str | None = typer.Option(None, "--tree", help="Path to the question tree file"),
) -> None:
    """Print the question tree."""
    path = tree_path(tree)
    root = load_or_exit(path, console=console)
    console.print(build_tree_view(root))


@app.command()
def validate(
    tree: str | None = typer.Option(None, "--tree", help="Path to the question tree file"),
) -> None:
    """Check that the tree file parses and report its size."""
    path = tree_path(tree)
    root = load_or_exit(path, console=console)
    console.print(f"[green]OK[/green] Loaded question tree from {escape(path)}")
    console.print(build_stats_table(compute_stats(root)))


@app.command()
def export(
    tree: str | None = typer.Option(None, "--tree", help="Path to the question tree file"),
    output: str | None = typer.Option(None, "--output", "-o", help="YAML output path (default: outputs/<tree>.yaml)"),
) -> None:
    """Export the tree as nested YAML."""
    path = tree_path(tree)
    root = load_or_exit(path, console=console)
    out_path = resolve_export_path(path, output)
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(export_tree_dict(root), f, sort_keys=False, allow_unicode=True)
    console.print(f"[green]Exported[/green] question tree to {escape(out_path)}")


if __name__ == "__main__":
    app()
