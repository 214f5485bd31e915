"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import List, Tuple

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from questions_game.core.engine import RoundResult
from questions_game.core.tree.models import QuestionNode
from questions_game.core.tree.utils import TreeStats


def _node_label(node: QuestionNode, prefix: str = "") -> str:
    if node.is_leaf:
        return f"{prefix}[green]{escape(node.text)}[/green]"
    return f"{prefix}[bold cyan]{escape(node.text)}[/bold cyan]"


def build_tree_view(tree: QuestionNode, title: str | None = None) -> Tree:
    """Render the question tree with yes/no labels on each edge."""
    if title:
        root = Tree(escape(title))
        top = root.add(_node_label(tree))
    else:
        root = top = Tree(_node_label(tree))
    stack: List[Tuple[QuestionNode, Tree]] = [(tree, top)]
    while stack:
        node, view = stack.pop()
        if node.is_leaf:
            continue
        yes_view = view.add(_node_label(node.yes, "[dim]yes:[/dim] "))
        no_view = view.add(_node_label(node.no, "[dim]no:[/dim] "))
        stack.append((node.no, no_view))
        stack.append((node.yes, yes_view))
    return root


def build_stats_table(stats: TreeStats, title: str = "Question tree") -> Table:
    table = Table(title=title)
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Nodes", str(stats.nodes))
    table.add_row("Questions", str(stats.questions))
    table.add_row("Answers", str(stats.answers))
    table.add_row("Height", str(stats.height))
    return table


def format_round_summary(result: RoundResult) -> str:
    """One-line summary of a finished round."""
    if result.won:
        return f"Guessed [green]{escape(result.guess)}[/green] after {result.questions_asked} question(s)"
    return (
        f"Learned [green]{escape(result.learned or '')}[/green] "
        f"(new question: [cyan]{escape(result.question or '')}[/cyan])"
    )


__all__ = ["build_tree_view", "build_stats_table", "format_round_summary"]
