"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minegrid import Cell, GameConfig, GameEngine


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def default_engine() -> GameEngine:
    """Create a default 9x9 engine with 10 mines and a fixed seed."""
    return GameEngine(GameConfig(9, 10, seed=1234))


@pytest.fixture
def empty_engine() -> GameEngine:
    """Create an engine with no mines for cascade testing."""
    return GameEngine.create(5, 0)


@pytest.fixture
def corner_mine_engine() -> GameEngine:
    """
    5x5 grid with a single mine in the bottom-right corner.

    Counts:
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 1 1
        0 0 0 1 *
    """
    return GameEngine.from_mines(5, [(4, 4)])


@pytest.fixture
def walled_engine() -> GameEngine:
    """
    5x5 grid with a wall of mines in column 2.

    Left region (columns 0-1) and right region (columns 3-4) are
    separated; revealing one side must never cross the wall.
    """
    return GameEngine.from_mines(5, [(row, 2) for row in range(5)])


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(42)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> GameConfig:
    """Create a valid game configuration."""
    return GameConfig(9, 10)
