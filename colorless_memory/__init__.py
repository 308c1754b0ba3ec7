"""Two-player networked memory card game: lobby server, client game logic and pygame interface."""

__version__ = "0.1.0"