"""A turn-based console card game played from a deck file and a players file."""

__version__ = "1.0.0"
__all__ = ["cards", "factory", "game", "messages", "players"]