"""Bagh-Chal (goats and tigers) rules engine with undo/redo history."""

__version__ = "0.1.0"
