"""Errors raised by the board primitives and the rules engine.

Every ``BoardError`` is raised before the board is touched, so a failed
operation leaves no side effect behind.
"""

from __future__ import annotations


class BoardError(ValueError):
    """Base class for rejected board operations."""


class OutOfBoundsError(BoardError, IndexError):
    """Coordinate lies outside the cell grid or the intersection grid."""


class OccupiedError(BoardError):
    """Destination already holds a live piece of the same kind."""


class NegationError(BoardError):
    """Stone placement touches an occupied cell (Rule of Negation)."""


class BlockedError(BoardError):
    """A stone slide cannot move even a single step."""


class NoAttackersError(BoardError):
    """Combat was attempted on a checker nobody can attack."""


class IllegalMoveError(RuntimeError):
    """A move handed to the game could not be applied."""
