"""
Question tree data models.

The knowledge base of the game is a binary decision tree:
- Answer (leaf): the name of an object the computer can guess
- Question (branch): a yes/no question with a child for each answer

Tree Structure:
    Is it alive?
    ├── yes: Does it bark?
    │   ├── yes: dog
    │   └── no: cat
    └── no: rock

Nodes are frozen. A round of play never edits a node in place; it rebuilds
the visited path and hands back a new root (see ``replace_child``).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

DEFAULT_ANSWER = "computer"


class Answer(str, Enum):
    """Direction taken out of a question node."""

    YES = "yes"
    NO = "no"

    @classmethod
    def from_bool(cls, value: bool) -> "Answer":
        return cls.YES if value else cls.NO


class QuestionNode(BaseModel):
    """
    A node of the question tree.

    A node with no children is an answer (leaf) and ``text`` names an object.
    A node with both children is a question (branch) and ``text`` is the
    question asked before following ``yes`` or ``no``.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    yes: Optional[QuestionNode] = None
    no: Optional[QuestionNode] = None

    @model_validator(mode="after")
    def validate_children(self) -> "QuestionNode":
        """A question needs both children; an answer needs neither."""
        if (self.yes is None) != (self.no is None):
            raise ValueError("question node requires both a yes and a no child")
        return self

    @property
    def is_leaf(self) -> bool:
        return self.yes is None and self.no is None

    def child(self, answer: Answer) -> QuestionNode:
        """Return the child reached by ``answer``."""
        if self.is_leaf:
            raise ValueError(f"answer node '{self.text}' has no children")
        return self.yes if answer == Answer.YES else self.no


QuestionNode.model_rebuild()


def make_leaf(text: str) -> QuestionNode:
    """Create an answer node."""
    return QuestionNode(text=text)


def make_branch(text: str, yes: QuestionNode, no: QuestionNode) -> QuestionNode:
    """Create a question node with both children."""
    return QuestionNode(text=text, yes=yes, no=no)


def is_leaf(node: QuestionNode) -> bool:
    return node.is_leaf


def default_tree() -> QuestionNode:
    """Tree used by a fresh game: a single placeholder answer."""
    return make_leaf(DEFAULT_ANSWER)


def replace_child(branch: QuestionNode, answer: Answer, child: QuestionNode) -> QuestionNode:
    """
    Return a copy of ``branch`` with the ``answer`` slot pointing at ``child``.

    The other slot keeps its existing subtree by reference.

    Raises:
        ValueError: If ``branch`` is an answer node
    """
    if branch.is_leaf:
        raise ValueError(f"cannot attach a child to answer node '{branch.text}'")
    if answer == Answer.YES:
        return make_branch(branch.text, child, branch.no)
    return make_branch(branch.text, branch.yes, child)
