from __future__ import annotations

"""Shared helpers for loading question trees with CLI-friendly errors."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from questions_game.core.tree.models import QuestionNode, default_tree
from questions_game.io.errors import MalformedTreeFile
from questions_game.io.serializer import load_tree


def load_or_exit(
    path: str,
    *,
    console: Console,
    allow_missing: bool = False,
) -> QuestionNode:
    """Load the tree at ``path``, exiting with code 1 when it cannot be read.

    With ``allow_missing`` a missing file yields the default single-answer tree.
    """
    if not Path(path).exists():
        if allow_missing:
            console.print(f"[yellow]Starting fresh, no tree found at[/yellow] {escape(path)}")
            return default_tree()
        console.print(f"[red]Path not found:[/red] {escape(path)}")
        raise typer.Exit(code=1)
    try:
        return load_tree(path)
    except MalformedTreeFile as err:
        console.print(f"[red]Failed to load tree:[/red] {escape(str(err))}")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit"]
