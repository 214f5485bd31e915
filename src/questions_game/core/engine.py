"""
Guess-and-learn engine.

One round walks the tree from the root, asking each question until it reaches
an answer and guesses it. A wrong guess is turned into a new question that
tells the player's object apart from the guessed one.

Rounds are pure with respect to the tree: the input tree is never modified,
and the returned tree shares every subtree the round did not touch.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from questions_game.core.prompt import Prompter
from questions_game.core.tree.models import Answer, QuestionNode, make_branch, make_leaf
from questions_game.core.tree.utils import rebuild_path

logger = logging.getLogger(__name__)

GUESS_PROMPT = "Would your object happen to be {answer}?"
NAME_PROMPT = "What is the name of your object?"
QUESTION_PROMPT = "Please give me a yes/no question that distinguishes between your object and mine-->"
ANSWER_PROMPT = "And what is the answer for your object?"


class RoundOutcome(str, Enum):
    """How a round ended."""

    WIN = "win"  # The guess was right
    LEARNED = "learned"  # The guess was wrong and the tree grew


class RoundStep(BaseModel):
    """A question asked during a round and the answer given."""

    model_config = ConfigDict(frozen=True)

    question: str
    answer: Answer


class RoundResult(BaseModel):
    """Result of one round of play."""

    model_config = ConfigDict(frozen=True)

    outcome: RoundOutcome
    tree: QuestionNode
    guess: str
    learned: Optional[str] = None
    question: Optional[str] = None
    steps: List[RoundStep] = Field(default_factory=list)

    @property
    def won(self) -> bool:
        return self.outcome == RoundOutcome.WIN

    @property
    def questions_asked(self) -> int:
        return len(self.steps)


def learn(guessed: QuestionNode, prompter: Prompter) -> QuestionNode:
    """
    Build the question that replaces a wrongly guessed answer.

    The player's object goes on the side matching their answer to the new
    question; the old answer takes the other side.
    """
    new_answer = make_leaf(prompter.ask_text(NAME_PROMPT))
    question = prompter.ask_text(QUESTION_PROMPT)
    if prompter.ask_yes_no(ANSWER_PROMPT):
        return make_branch(question, new_answer, guessed)
    return make_branch(question, guessed, new_answer)


def play_round(tree: QuestionNode, prompter: Prompter) -> RoundResult:
    """
    Play one round over ``tree``.

    Args:
        tree: Current root
        prompter: Source of the player's answers

    Returns:
        RoundResult whose ``tree`` is the root to keep. On a win it is
        ``tree`` itself.

    Raises:
        Whatever the prompter raises (e.g. InputExhausted); ``tree`` is left
        as it was.
    """
    path: List[Tuple[QuestionNode, Answer]] = []
    node = tree
    while not node.is_leaf:
        answer = Answer.from_bool(prompter.ask_yes_no(node.text))
        path.append((node, answer))
        node = node.child(answer)

    steps = [RoundStep(question=question.text, answer=answer) for question, answer in path]

    if prompter.ask_yes_no(GUESS_PROMPT.format(answer=node.text)):
        logger.info("Guessed '%s' after %d question(s)", node.text, len(steps))
        return RoundResult(outcome=RoundOutcome.WIN, tree=tree, guess=node.text, steps=steps)

    replacement = learn(node, prompter)
    new_answer = replacement.yes if replacement.no is node else replacement.no
    logger.info("Learned '%s' with question '%s'", new_answer.text, replacement.text)
    return RoundResult(
        outcome=RoundOutcome.LEARNED,
        tree=rebuild_path(path, replacement),
        guess=node.text,
        learned=new_answer.text,
        question=replacement.text,
        steps=steps,
    )


__all__ = [
    "GUESS_PROMPT",
    "NAME_PROMPT",
    "QUESTION_PROMPT",
    "ANSWER_PROMPT",
    "RoundOutcome",
    "RoundStep",
    "RoundResult",
    "learn",
    "play_round",
]
