"""
Question tree module.

Components:
- QuestionNode: Answer (leaf) or question (branch) node
- Answer: Direction taken out of a question
- make_leaf / make_branch / is_leaf: Node constructors and predicate
- rebuild_path: Rebuild the questions above a replaced node

Example:
    from questions_game.core.tree import make_branch, make_leaf

    tree = make_branch("Is it alive?", make_leaf("cat"), make_leaf("rock"))
"""

from questions_game.core.tree.models import (
    DEFAULT_ANSWER,
    Answer,
    QuestionNode,
    default_tree,
    is_leaf,
    make_branch,
    make_leaf,
    replace_child,
)
from questions_game.core.tree.utils import (
    TreeStats,
    compute_stats,
    count_nodes,
    rebuild_path,
    tree_height,
)

__all__ = [
    "DEFAULT_ANSWER",
    "Answer",
    "QuestionNode",
    "default_tree",
    "is_leaf",
    "make_branch",
    "make_leaf",
    "replace_child",
    "TreeStats",
    "compute_stats",
    "count_nodes",
    "rebuild_path",
    "tree_height",
]
