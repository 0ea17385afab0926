"""
Minesweeper game engine.

Provides grid construction, mine placement, flood-fill revealing
and win/loss tracking.
"""
from .cell import Cell, CellState, CellView
from .engine import GameConfig, GameEngine, GameState
from .errors import IllegalState, InvalidArgument, OutOfRange
from .render import render_ansi
from .sampling import sample_indices

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "GameConfig",
    "GameEngine",
    "GameState",
    "IllegalState",
    "InvalidArgument",
    "OutOfRange",
    "render_ansi",
    "sample_indices",
]
