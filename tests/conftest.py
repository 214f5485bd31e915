"""
Shared fixtures for question game tests.
"""

import pytest

from questions_game.core.prompt import ScriptedPrompter
from questions_game.core.tree.models import QuestionNode, make_branch, make_leaf


@pytest.fixture
def alive_tree() -> QuestionNode:
    """Is it alive? yes -> cat, no -> rock."""
    return make_branch("Is it alive?", make_leaf("cat"), make_leaf("rock"))


@pytest.fixture
def animal_tree() -> QuestionNode:
    """A three-level tree with questions on both sides of the root."""
    return make_branch(
        "Is it alive?",
        make_branch("Does it bark?", make_leaf("dog"), make_leaf("cat")),
        make_branch("Is it man-made?", make_leaf("computer"), make_leaf("rock")),
    )


@pytest.fixture
def scripted():
    """Factory for scripted prompters."""

    def _make(*responses: str) -> ScriptedPrompter:
        return ScriptedPrompter(responses)

    return _make
