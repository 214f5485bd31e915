"""Questions game: a 20 questions player that learns from its mistakes."""

__version__ = "0.1.0"
