"""In-memory Hearthstone card catalog with search and filter views."""

__version__ = "1.0.0"
