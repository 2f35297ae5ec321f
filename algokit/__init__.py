"""Classic algorithms and data structures: sorting, searching, graphs, hashing and puzzles."""

__version__ = "0.1.0"