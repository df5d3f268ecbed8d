"""Move-choice capabilities plugged into a game."""

from .chooser import MoveChooser, RandomChooser, ScriptedChooser

__all__ = ["MoveChooser", "RandomChooser", "ScriptedChooser"]
