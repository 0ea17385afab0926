"""
Cell module for the Minesweeper engine.

Represents individual cells on the grid with their state
(hidden/revealed) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()


# ============================================================================
# Cell Data Classes
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden or revealed).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell changed state, False if already revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    def to_observation(self) -> int:
        """-1 if hidden, 9 for a revealed mine, else the adjacent count."""
        if self.state == CellState.HIDDEN:
            return -1
        if self.is_mine:
            return 9
        return self.adjacent_mines

    def view(self, row: int, col: int) -> "CellView":
        """Snapshot this cell at the given position."""
        return CellView(
            row=row,
            col=col,
            is_mine=self.is_mine,
            is_revealed=self.is_revealed,
            adjacent_mines=self.adjacent_mines,
        )


@dataclass(frozen=True)
class CellView:
    """Read-only copy of a cell handed out to callers."""

    row: int
    col: int
    is_mine: bool
    is_revealed: bool
    adjacent_mines: int

    @property
    def is_hidden(self) -> bool:
        return not self.is_revealed
