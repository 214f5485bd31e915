"""
Tests for the question tree.

Test organization:
- test_models.py: QuestionNode constructors, predicate and validation
- test_utils.py: Traversal, statistics and path rebuilding
- test_serialization.py: A:/Q: text format reading and writing
"""
