"""A falling-block puzzle game: pieces, the well, game rules and a pygame window."""

__version__ = "0.1.0"