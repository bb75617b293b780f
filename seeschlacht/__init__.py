"""Two-player battleship game for the terminal, with its board logic usable on its own."""

__version__ = "0.1.0"