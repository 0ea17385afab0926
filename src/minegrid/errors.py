"""
Exceptions raised by the Minesweeper engine.

Each one subclasses the builtin a caller would already expect, so
``except ValueError`` and friends keep working.
"""


class InvalidArgument(ValueError):
    """Construction or sampling with arguments outside their domain."""


class OutOfRange(IndexError):
    """Grid coordinates outside ``[0, size)``."""


class IllegalState(RuntimeError):
    """Operation not allowed in the current game state."""
