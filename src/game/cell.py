"""
Cell module for Minesweeper game.

A cell is covered, opened, or marked with a flag; those three are one
state so a flagged cell can never also be open.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Covered, opened, or flagged."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# Codes used in Board.get_observation() snapshots; 0-8 are opened counts
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9

_FLAG_TOGGLE = {
    CellState.HIDDEN: CellState.FLAGGED,
    CellState.FLAGGED: CellState.HIDDEN,
}


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    One square of the minefield.

    Attributes:
        is_mine: Set during placement, never changed afterwards.
        adjacent_mines: Mines in the surrounding 8 squares; unused on a mine.
        state: Covered, opened, or flagged.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """Open a covered cell; False if it is flagged or already open."""
        if not self.is_hidden:
            return False
        self.state = CellState.REVEALED
        return True

    def expose(self) -> bool:
        """Open the cell even if flagged; False if it was already open."""
        if self.is_revealed:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """Flag or unflag a covered cell; False once it is open."""
        next_state = _FLAG_TOGGLE.get(self.state)
        if next_state is None:
            return False
        self.state = next_state
        return True

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    def snapshot_code(self) -> int:
        """Integer shown for this cell in a board snapshot."""
        if self.is_flagged:
            return OBS_FLAGGED
        if self.is_hidden:
            return OBS_HIDDEN
        return OBS_MINE if self.is_mine else self.adjacent_mines
