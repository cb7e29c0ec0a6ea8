"""A terminal tower defense game: game logic, ANSI drawing, key input and a command-line loop."""

__version__ = "0.1.0"