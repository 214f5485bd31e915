"""
Line-oriented persistence for question trees.

Each node is written as two lines, in pre-order with the yes subtree before
the no subtree:

    Q:
    Is it alive?
    A:
    cat
    A:
    rock

``A:`` introduces an answer and ``Q:`` a question; the following line holds
the node text verbatim.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from questions_game.core.tree.models import QuestionNode, make_branch, make_leaf
from questions_game.io.errors import MalformedTreeFile
from questions_game.utils.logging import log_calls

logger = logging.getLogger(__name__)

ANSWER_MARKER = "A:"
QUESTION_MARKER = "Q:"

TreeSource = Union[str, Path, IO[str]]


def write_tree(tree: QuestionNode) -> List[str]:
    """Serialize ``tree`` to a list of lines (without line terminators)."""
    lines: List[str] = []
    stack = [tree]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            lines.append(ANSWER_MARKER)
            lines.append(node.text)
        else:
            lines.append(QUESTION_MARKER)
            lines.append(node.text)
            stack.append(node.no)
            stack.append(node.yes)
    return lines


def _strip_terminator(line: str) -> str:
    """Remove one line terminator (\\n or \\r\\n), keeping any other trailing text."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _numbered(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    for number, line in enumerate(lines, start=1):
        yield number, _strip_terminator(line)


def _next_line(
    lines: Iterator[Tuple[int, str]],
    last_number: int,
    expected: str,
    source: Optional[str],
) -> Tuple[int, str]:
    try:
        return next(lines)
    except StopIteration:
        raise MalformedTreeFile(
            f"Unexpected end of input, expected {expected}",
            source=source,
            line_number=last_number + 1,
        ) from None


def read_tree(lines: Iterable[str], *, source: Optional[str] = None) -> QuestionNode:
    """
    Parse a tree from ``lines``.

    Exactly one top-level record is read. Blank lines after it are ignored;
    anything else after it is rejected.

    Args:
        lines: Tree file lines; trailing newlines are stripped
        source: Name used in error messages (usually the file path)

    Returns:
        Root of the parsed tree

    Raises:
        MalformedTreeFile: On an unknown marker, a truncated record or
            trailing content
    """
    numbered = _numbered(lines)
    # Each frame is a question still waiting for children: [text, yes_child]
    pending: List[list] = []
    last_number = 0

    while True:
        last_number, marker = _next_line(numbered, last_number, "an 'A:' or 'Q:' marker", source)
        if marker not in (ANSWER_MARKER, QUESTION_MARKER):
            raise MalformedTreeFile(
                f"Expected 'A:' or 'Q:' marker, got {marker!r}",
                source=source,
                line_number=last_number,
            )
        last_number, text = _next_line(numbered, last_number, f"text after {marker!r}", source)

        if marker == QUESTION_MARKER:
            pending.append([text, None])
            continue

        node = make_leaf(text)
        while pending:
            frame = pending[-1]
            if frame[1] is None:
                frame[1] = node
                break
            pending.pop()
            node = make_branch(frame[0], frame[1], node)
        else:
            break

    for number, line in numbered:
        if line.strip():
            raise MalformedTreeFile(
                "Unexpected content after the end of the tree",
                source=source,
                line_number=number,
            )
    return node


def dumps_tree(tree: QuestionNode) -> str:
    return "".join(f"{line}\n" for line in write_tree(tree))


def loads_tree(text: str, *, source: Optional[str] = None) -> QuestionNode:
    return read_tree(text.split("\n"), source=source)


@log_calls()
def load_tree(source: TreeSource) -> QuestionNode:
    """
    Load a tree from a file path or an open text stream.

    Raises:
        MalformedTreeFile: If the content is not a valid tree
        FileNotFoundError: If ``source`` is a path that does not exist
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        with open(path, "r", encoding="utf-8") as f:
            tree = read_tree(f, source=str(path))
        logger.info("Loaded question tree from %s", path)
        return tree
    return read_tree(source, source=getattr(source, "name", None))


@log_calls()
def save_tree(tree: QuestionNode, sink: TreeSource) -> None:
    """Write the whole tree to a file path (replacing it) or a text stream."""
    content = dumps_tree(tree)
    if isinstance(sink, (str, Path)):
        path = Path(sink)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info("Saved question tree to %s", path)
        return
    sink.write(content)


def export_tree_dict(tree: QuestionNode) -> Dict[str, Any]:
    """Nested dict form of the tree, omitting the empty slots of answers."""
    return tree.model_dump(exclude_none=True)


__all__ = [
    "ANSWER_MARKER",
    "QUESTION_MARKER",
    "write_tree",
    "read_tree",
    "dumps_tree",
    "loads_tree",
    "load_tree",
    "save_tree",
    "export_tree_dict",
]
