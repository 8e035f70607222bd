"""Arcade game: dodge bouncing balls and collect stars, with display-free game logic."""

__version__ = "0.1.0"