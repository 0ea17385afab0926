"""
Game engine for Minesweeper.

Implements the grid with mine placement, neighbor counting,
flood-fill revealing, and win/loss tracking.
"""
import operator
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator, List, Optional, Sequence, Set, Tuple

import numpy as np

from .cell import Cell, CellState, CellView
from .errors import IllegalState, InvalidArgument, OutOfRange
from .sampling import sample_indices

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a Minesweeper game.

    Attributes:
        size: Number of rows and columns of the square grid.
        num_mines: Requested mine count. Stored as given; placement
            clamps it to [0, size * size] without raising.
        seed: Seed for the engine's own random source.
    """

    size: int = 9
    num_mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise InvalidArgument(
                f"Grid size must be positive, got {self.size}"
            )

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def mines_to_place(self) -> int:
        """Requested mine count clamped to what the grid can hold."""
        return max(0, min(self.num_mines, self.total_cells))

    @classmethod
    def from_density(
        cls, size: int, density: float, seed: Optional[int] = None
    ) -> "GameConfig":
        """
        Build a configuration from a mine density.

        Args:
            size: Grid size.
            density: Fraction of cells holding mines, e.g. 0.35.
            seed: Optional random seed.
        """
        return cls(size=size, num_mines=int(size * size * density), seed=seed)


# ============================================================================
# Engine Class
# ============================================================================

class GameEngine:
    """
    Minesweeper game engine.

    Owns the grid of cells. Mines are placed and neighbor counts are
    computed once at construction; afterwards only reveals change state.
    Callers read the grid through value snapshots (CellView, numpy
    copies), never through the live cells.

    Not thread-safe: a host sharing one engine between threads must
    serialize whole reveal() calls.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Build the grid, place mines at random and count neighbors.

        Args:
            config: Game configuration (default: 9x9 with 10 mines).
            rng: Random source; defaults to random.Random(config.seed).
        """
        self._setup(config or GameConfig(), rng, None)

    @classmethod
    def create(
        cls,
        size: int,
        num_mines: int,
        rng: Optional[random.Random] = None,
    ) -> "GameEngine":
        """
        Create an engine with randomly placed mines.

        Raises:
            InvalidArgument: If size is not positive.
        """
        return cls(GameConfig(size=size, num_mines=num_mines), rng=rng)

    @classmethod
    def from_mines(
        cls, size: int, mine_positions: Sequence[Position]
    ) -> "GameEngine":
        """
        Create an engine with mines at the given (row, col) positions.

        Raises:
            InvalidArgument: If size is not positive or a position repeats.
            OutOfRange: If a position lies outside the grid.
        """
        positions = list(mine_positions)
        config = GameConfig(size=size, num_mines=len(positions))
        engine = cls.__new__(cls)
        engine._setup(config, None, positions)
        return engine

    def _setup(
        self,
        config: GameConfig,
        rng: Optional[random.Random],
        mine_positions: Optional[List[Position]],
    ) -> None:
        self._config = config
        self._size = config.size
        self._total_cells = config.total_cells
        self._rng = rng if rng is not None else random.Random(config.seed)
        self._game_state = GameState.PLAYING
        self._mine_count = 0
        self._cells_revealed = 0
        self._safe_revealed = 0

        self._init_grid()
        if mine_positions is None:
            positions = self._choose_mine_positions()
        else:
            positions = self._check_mine_positions(mine_positions)
        self._place_mines(positions)
        self._calculate_adjacent_mines()

    def __repr__(self) -> str:
        return (
            f"GameEngine(size={self._size}, mines={self._mine_count}, "
            f"state={self._game_state.name})"
        )

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        self._grid = [
            [Cell() for _ in range(self._size)]
            for _ in range(self._size)
        ]

    def _choose_mine_positions(self) -> List[Position]:
        """Pick distinct random positions for the configured mine count."""
        indices = sample_indices(
            self._total_cells, self._config.mines_to_place, self._rng
        )
        return [divmod(index, self._size) for index in indices]

    def _check_mine_positions(
        self, mine_positions: Sequence[Position]
    ) -> List[Position]:
        """Validate an explicit mine layout."""
        checked: List[Position] = []
        seen: Set[Position] = set()
        for row, col in mine_positions:
            position = self._require_valid_position(row, col)
            if position in seen:
                raise InvalidArgument(f"Duplicate mine position ({row}, {col})")
            seen.add(position)
            checked.append(position)
        return checked

    def _place_mines(self, positions: Sequence[Position]) -> None:
        for row, col in positions:
            self._grid[row][col].is_mine = True
        self._mine_count = len(positions)

    def _calculate_adjacent_mines(self) -> None:
        """Store neighbor mine counts on every cell, mines included."""
        for row in range(self._size):
            for col in range(self._size):
                self._grid[row][col].adjacent_mines = sum(
                    1 for neighbor_row, neighbor_col
                    in self._get_neighbors(row, col)
                    if self._grid[neighbor_row][neighbor_col].is_mine
                )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """Up to 8 in-bounds positions around (row, col)."""
        return [
            (neighbor_row, neighbor_col)
            for neighbor_row in range(max(0, row - 1), min(self._size, row + 2))
            for neighbor_col in range(max(0, col - 1), min(self._size, col + 2))
            if (neighbor_row, neighbor_col) != (row, col)
        ]

    def _require_valid_position(self, row: Any, col: Any) -> Position:
        """
        Normalize a coordinate pair to ints inside the grid.

        Integer-like values (including numpy integers) are accepted;
        anything else, floats included, is rejected.

        Raises:
            InvalidArgument: If a coordinate is not an integer.
            OutOfRange: If the position lies outside the grid.
        """
        try:
            row, col = operator.index(row), operator.index(col)
        except TypeError as err:
            raise InvalidArgument(
                f"Coordinates must be integers, got ({row!r}, {col!r})"
            ) from err
        if not (0 <= row < self._size and 0 <= col < self._size):
            raise OutOfRange(
                f"Position ({row}, {col}) outside {self._size}x"
                f"{self._size} grid"
            )
        return row, col

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        If the cell is a mine, the game is lost and nothing else is
        revealed. If it has no adjacent mines, its connected zero region
        and that region's border are revealed too.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the cell was revealed, False if it already was.

        Raises:
            InvalidArgument: If a coordinate is not an integer.
            OutOfRange: If the position lies outside the grid.
            IllegalState: If the game is already won or lost.
        """
        row, col = self._require_valid_position(row, col)
        cell = self._grid[row][col]
        if cell.is_revealed:
            return False
        if self._game_state != GameState.PLAYING:
            raise IllegalState(
                f"Cannot reveal ({row}, {col}): game is "
                f"{self._game_state.name}"
            )

        self._mark_revealed(cell)
        if cell.is_mine:
            self._game_state = GameState.LOST
            return True

        if cell.adjacent_mines == 0:
            self._flood_fill(row, col)

        self._check_win_condition()
        return True

    def _mark_revealed(self, cell: Cell) -> None:
        cell.reveal()
        self._cells_revealed += 1
        if not cell.is_mine:
            self._safe_revealed += 1

    def _flood_fill(self, row: int, col: int) -> None:
        """Reveal the zero region around (row, col) with an explicit stack."""
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_revealed or neighbor.is_mine:
                    continue
                self._mark_revealed(neighbor)
                if neighbor.adjacent_mines == 0:
                    stack.append((neighbor_row, neighbor_col))

    def _check_win_condition(self) -> None:
        if self._game_state != GameState.PLAYING:
            return
        if self._safe_revealed >= self._total_cells - self._mine_count:
            self._game_state = GameState.WON

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def config(self) -> GameConfig:
        """Configuration the engine was built from (immutable)."""
        return self._config

    @property
    def game_state(self) -> GameState:
        return self._game_state

    @property
    def is_playing(self) -> bool:
        return self._game_state == GameState.PLAYING

    @property
    def is_over(self) -> bool:
        """Check if a mine has been revealed."""
        return self._game_state == GameState.LOST

    @property
    def is_won(self) -> bool:
        """Check if every safe cell has been revealed."""
        return self._game_state == GameState.WON

    @property
    def size(self) -> int:
        return self._size

    @property
    def num_mines(self) -> int:
        """Mine count as configured, before clamping."""
        return self._config.num_mines

    @property
    def mine_count(self) -> int:
        """Number of mines actually placed."""
        return self._mine_count

    @property
    def revealed_count(self) -> int:
        return self._cells_revealed

    def get_cell(self, row: int, col: int) -> CellView:
        """
        Get a snapshot of the cell at a position.

        Raises:
            InvalidArgument: If a coordinate is not an integer.
            OutOfRange: If the position lies outside the grid.
        """
        row, col = self._require_valid_position(row, col)
        return self._grid[row][col].view(row, col)

    def cells(self) -> Iterator[CellView]:
        """Iterate snapshots of every cell in row-major order."""
        for row, cells in enumerate(self._grid):
            for col, cell in enumerate(cells):
                yield cell.view(row, col)

    def get_observation(self) -> np.ndarray:
        """
        Get grid state as a fresh int8 array.

        -1 is hidden, 0-8 a revealed count, 9 a revealed mine.
        """
        return np.array(
            [[cell.to_observation() for cell in cells] for cells in self._grid],
            dtype=np.int8,
        )

    def get_mine_mask(self) -> np.ndarray:
        """Get a read-only boolean array of mine positions."""
        mask = np.array(
            [[cell.is_mine for cell in cells] for cells in self._grid],
            dtype=bool,
        )
        mask.setflags(write=False)
        return mask

    def get_valid_actions(self) -> List[Position]:
        """Hidden (row, col) positions; empty once the game ends."""
        if self._game_state != GameState.PLAYING:
            return []
        return [
            (row, col)
            for row, cells in enumerate(self._grid)
            for col, cell in enumerate(cells)
            if cell.state == CellState.HIDDEN
        ]
