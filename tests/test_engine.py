"""
Tests for the guess-and-learn round engine.

Tests cover:
- Winning rounds leave the tree untouched
- Learning rounds grow the tree by one question and one answer
- Only the visited path is rebuilt
- Prompter failures propagate without changing the tree
"""

import pytest

from questions_game.core.engine import (
    ANSWER_PROMPT,
    GUESS_PROMPT,
    NAME_PROMPT,
    QUESTION_PROMPT,
    RoundOutcome,
    learn,
    play_round,
)
from questions_game.core.prompt import InputExhausted
from questions_game.core.tree.models import Answer, default_tree, make_branch, make_leaf
from questions_game.core.tree.utils import count_nodes
from questions_game.io.serializer import write_tree


class TestWin:
    """Tests for correct guesses."""

    def test_win_returns_same_tree(self, alive_tree, scripted):
        """Answering y, y wins and returns the input tree itself."""
        prompter = scripted("y", "y")

        result = play_round(alive_tree, prompter)

        assert result.outcome == RoundOutcome.WIN
        assert result.won
        assert result.tree is alive_tree
        assert result.guess == "cat"
        assert result.learned is None
        assert count_nodes(result.tree) == 3

    def test_win_asks_question_then_guess(self, alive_tree, scripted):
        prompter = scripted("n", "y")

        result = play_round(alive_tree, prompter)

        assert prompter.prompts == ["Is it alive?", GUESS_PROMPT.format(answer="rock")]
        assert result.guess == "rock"
        assert result.questions_asked == 1
        assert result.steps[0].question == "Is it alive?"
        assert result.steps[0].answer == Answer.NO

    def test_win_on_single_leaf(self, scripted):
        tree = default_tree()
        prompter = scripted("y")

        result = play_round(tree, prompter)

        assert result.won
        assert result.tree is tree
        assert result.questions_asked == 0
        assert prompter.prompts == ["Would your object happen to be computer?"]


class TestLearn:
    """Tests for wrong guesses."""

    def test_learn_yes_side(self, alive_tree, scripted):
        """New object answering yes goes on the yes side."""
        prompter = scripted("y", "n", "dog", "Does it bark?", "y")

        result = play_round(alive_tree, prompter)

        assert result.outcome == RoundOutcome.LEARNED
        assert result.tree.yes == make_branch("Does it bark?", make_leaf("dog"), make_leaf("cat"))
        assert result.tree.no is alive_tree.no
        assert result.learned == "dog"
        assert result.guess == "cat"
        assert result.question == "Does it bark?"

    def test_learn_no_side(self, alive_tree, scripted):
        """New object answering no goes on the no side."""
        prompter = scripted("y", "n", "fish", "Does it have legs?", "n")

        result = play_round(alive_tree, prompter)

        assert result.tree.yes == make_branch("Does it have legs?", make_leaf("cat"), make_leaf("fish"))
        assert result.learned == "fish"

    def test_learn_adds_two_nodes(self, animal_tree, scripted):
        before = count_nodes(animal_tree)
        prompter = scripted("n", "n", "n", "tree", "Is it green?", "y")

        result = play_round(animal_tree, prompter)

        assert count_nodes(result.tree) == before + 2

    def test_old_leaf_is_kept_as_sibling(self, alive_tree, scripted):
        prompter = scripted("n", "n", "plant", "Does it grow?", "y")

        result = play_round(alive_tree, prompter)

        assert result.tree.no.no is alive_tree.no

    def test_learn_from_fresh_tree(self, scripted):
        """The root answer itself is replaced by the new question."""
        prompter = scripted("n", "cat", "Is it alive?", "y")

        result = play_round(default_tree(), prompter)

        assert write_tree(result.tree) == ["Q:", "Is it alive?", "A:", "cat", "A:", "computer"]

    def test_learn_prompt_order(self, scripted):
        prompter = scripted("n", "cat", "Is it alive?", "n")

        play_round(default_tree(), prompter)

        assert prompter.prompts[1:] == [NAME_PROMPT, QUESTION_PROMPT, ANSWER_PROMPT]

    def test_input_tree_not_modified(self, animal_tree, scripted):
        snapshot = write_tree(animal_tree)
        prompter = scripted("y", "y", "n", "wolf", "Is it wild?", "y")

        result = play_round(animal_tree, prompter)

        assert write_tree(animal_tree) == snapshot
        assert result.tree is not animal_tree

    def test_learn_helper(self, scripted):
        old = make_leaf("cat")
        prompter = scripted("dog", "Does it bark?", "Y")

        branch = learn(old, prompter)

        assert branch.yes.text == "dog"
        assert branch.no is old


class TestPathIntegrity:
    """Tests that only the visited path is rebuilt."""

    def test_untouched_subtrees_shared(self, animal_tree, scripted):
        prompter = scripted("y", "n", "n", "hamster", "Is it small?", "y")

        result = play_round(animal_tree, prompter)

        root = result.tree
        assert root.text == animal_tree.text
        assert root.no is animal_tree.no
        assert root.yes.text == "Does it bark?"
        assert root.yes.yes is animal_tree.yes.yes
        assert root.yes.no == make_branch("Is it small?", make_leaf("hamster"), make_leaf("cat"))

    def test_repeated_rounds_grow_tree(self, scripted):
        tree = default_tree()
        tree = play_round(tree, scripted("n", "cat", "Is it alive?", "y")).tree
        tree = play_round(tree, scripted("y", "n", "dog", "Does it bark?", "y")).tree
        result = play_round(tree, scripted("y", "y", "y"))

        assert result.won
        assert result.guess == "dog"
        assert write_tree(tree) == [
            "Q:",
            "Is it alive?",
            "Q:",
            "Does it bark?",
            "A:",
            "dog",
            "A:",
            "cat",
            "A:",
            "computer",
        ]


class TestFailures:
    """Tests for prompter failures."""

    def test_input_exhausted_during_questions(self, animal_tree, scripted):
        with pytest.raises(InputExhausted):
            play_round(animal_tree, scripted("y"))

    def test_input_exhausted_during_learn(self, alive_tree, scripted):
        snapshot = write_tree(alive_tree)

        with pytest.raises(InputExhausted):
            play_round(alive_tree, scripted("y", "n", "dog"))

        assert write_tree(alive_tree) == snapshot

    def test_invalid_answers_are_asked_again(self, alive_tree, scripted):
        prompter = scripted("maybe", " Y ", "yes", "y")

        result = play_round(alive_tree, prompter)

        assert result.won
        assert prompter.prompts.count("Is it alive?") == 2
        assert prompter.remaining == 0
