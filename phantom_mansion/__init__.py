"""Game logic for a haunted-mansion puzzle adventure: rectangles, the player character, items, code locks and the title menu."""

__version__ = "0.1.0"
__all__ = ["geometry", "character", "menu"]