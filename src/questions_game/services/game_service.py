"""Game Service: Holds the current question tree across rounds."""

from __future__ import annotations

import logging
from typing import Optional

from questions_game.core.engine import RoundResult, play_round
from questions_game.core.prompt import Prompter
from questions_game.core.tree.models import QuestionNode, default_tree
from questions_game.core.tree.utils import TreeStats, compute_stats
from questions_game.io.serializer import TreeSource, load_tree, save_tree

logger = logging.getLogger(__name__)


class GameSession:
    """
    Owns a question tree and plays rounds against it.

    The stored tree is replaced only when a round completes, so an error
    raised mid-round leaves it untouched.
    """

    def __init__(self, prompter: Prompter, tree: Optional[QuestionNode] = None):
        """
        Initialize a session.

        Args:
            prompter: Source of the player's answers
            tree: Starting tree (a single placeholder answer if None)
        """
        self.prompter = prompter
        self.tree = tree if tree is not None else default_tree()
        self.wins = 0
        self.losses = 0

    @property
    def rounds_played(self) -> int:
        return self.wins + self.losses

    def play_round(self) -> RoundResult:
        result = play_round(self.tree, self.prompter)
        self.tree = result.tree
        if result.won:
            self.wins += 1
        else:
            self.losses += 1
        logger.debug("Round %d finished: %s", self.rounds_played, result.outcome.value)
        return result

    def load(self, source: TreeSource) -> QuestionNode:
        """Replace the current tree with one read from ``source``.

        Raises:
            MalformedTreeFile: If ``source`` is not a valid tree; the current
                tree is kept
        """
        self.tree = load_tree(source)
        return self.tree

    def save(self, sink: TreeSource) -> None:
        save_tree(self.tree, sink)

    def stats(self) -> TreeStats:
        return compute_stats(self.tree)


__all__ = ["GameSession"]
