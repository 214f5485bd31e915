"""Traversal helpers and statistics for question trees."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from pydantic import BaseModel

from questions_game.core.tree.models import Answer, QuestionNode, replace_child


class TreeStats(BaseModel):
    """Size summary of a question tree."""

    nodes: int
    questions: int
    answers: int
    height: int


def iter_nodes(tree: QuestionNode) -> Iterator[QuestionNode]:
    """Yield every node in pre-order, yes subtree before no subtree."""
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        if not node.is_leaf:
            stack.append(node.no)
            stack.append(node.yes)


def count_nodes(tree: QuestionNode) -> int:
    return sum(1 for _ in iter_nodes(tree))


def count_answers(tree: QuestionNode) -> int:
    return sum(1 for node in iter_nodes(tree) if node.is_leaf)


def count_questions(tree: QuestionNode) -> int:
    return sum(1 for node in iter_nodes(tree) if not node.is_leaf)


def tree_height(tree: QuestionNode) -> int:
    """Number of questions on the longest root-to-answer path."""
    height = 0
    stack: List[Tuple[QuestionNode, int]] = [(tree, 0)]
    while stack:
        node, depth = stack.pop()
        if node.is_leaf:
            height = max(height, depth)
            continue
        stack.append((node.yes, depth + 1))
        stack.append((node.no, depth + 1))
    return height


def compute_stats(tree: QuestionNode) -> TreeStats:
    answers = count_answers(tree)
    questions = count_questions(tree)
    return TreeStats(
        nodes=answers + questions,
        questions=questions,
        answers=answers,
        height=tree_height(tree),
    )


def rebuild_path(path: Sequence[Tuple[QuestionNode, Answer]], subtree: QuestionNode) -> QuestionNode:
    """
    Rebuild the questions along ``path`` so they lead to ``subtree``.

    Args:
        path: (question, answer) pairs from the root down to the parent of the
            replaced node
        subtree: New node for the slot reached by the last step

    Returns:
        The new root. With an empty path this is ``subtree`` itself.
    """
    node = subtree
    for question, answer in reversed(path):
        node = replace_child(question, answer, node)
    return node


__all__ = [
    "TreeStats",
    "iter_nodes",
    "count_nodes",
    "count_answers",
    "count_questions",
    "tree_height",
    "compute_stats",
    "rebuild_path",
]
