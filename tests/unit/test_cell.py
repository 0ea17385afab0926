"""
Unit tests for Cell and CellView.

Tests cell state management, reveal behavior, observation conversion
and snapshots.
"""
import dataclasses

import pytest
from minegrid import Cell, CellState, CellView


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_revealed is False

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        cell = Cell()
        assert cell.adjacent_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True

    def test_reveal_changes_state_to_revealed(self, hidden_cell: Cell) -> None:
        """Revealing a cell should change its state."""
        hidden_cell.reveal()
        assert hidden_cell.state == CellState.REVEALED
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, numbered_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        assert numbered_cell.reveal() is False
        assert numbered_cell.is_revealed is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_hidden_mine_observation_is_negative_one(
        self, mine_cell: Cell
    ) -> None:
        """Hidden mines look like any other hidden cell."""
        assert mine_cell.to_observation() == -1

    def test_revealed_empty_cell_observation_is_zero(
        self, hidden_cell: Cell
    ) -> None:
        """Revealed cell with 0 adjacent mines returns 0."""
        hidden_cell.reveal()
        assert hidden_cell.to_observation() == 0

    @pytest.mark.parametrize("count", range(1, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9 for observation."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9


# ============================================================================
# Cell Snapshot Tests
# ============================================================================

class TestCellView:
    """Test read-only cell snapshots."""

    def test_view_copies_fields(self, numbered_cell: Cell) -> None:
        """View should carry position and cell content."""
        view = numbered_cell.view(2, 3)
        assert view == CellView(
            row=2, col=3, is_mine=False, is_revealed=True, adjacent_mines=3
        )
        assert view.is_hidden is False

    def test_view_is_frozen(self, hidden_cell: Cell) -> None:
        """Views cannot be modified."""
        view = hidden_cell.view(0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            view.is_revealed = True

    def test_view_does_not_track_later_changes(
        self, hidden_cell: Cell
    ) -> None:
        """A view is a snapshot, not a live reference."""
        view = hidden_cell.view(0, 0)
        hidden_cell.reveal()
        assert view.is_hidden is True
