"""Renderer for a multiplayer grid-eating board game: board, player panels and results screen."""

__version__ = "0.1.0"