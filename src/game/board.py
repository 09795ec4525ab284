"""
Board module for Minesweeper game.

Implements the game board with mine placement, adjacency counting,
flood-fill revealing, and outcome checks.
"""
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell


Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameOutcome(Enum):
    """Derived outcome of a game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class RevealKind(Enum):
    """What a reveal request did to the board."""

    BLOCKED = auto()
    MINE_HIT = auto()
    REVEALED = auto()


@dataclass(frozen=True)
class RevealResult:
    """
    Result of a single reveal request.

    Attributes:
        kind: Whether the reveal was blocked, hit a mine, or opened cells.
        position: The (row, col) that was requested.
        opened: Safe cells newly opened by this request, seed cell first.
    """

    kind: RevealKind
    position: Position
    opened: Tuple[Position, ...] = ()

    @property
    def opened_count(self) -> int:
        """Number of safe cells opened by this request."""
        return len(self.opened)


def _check_dimensions(rows: int, cols: int) -> None:
    if rows < 1 or cols < 1:
        raise ValueError("Board dimensions must be positive")


def _check_mine_count(count: int, total_cells: int) -> None:
    if count < 0:
        raise ValueError("Number of mines cannot be negative")
    max_mines = total_cells - 1
    if count > max_mines:
        raise ValueError(f"Too many mines (max {max_mines})")


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        _check_dimensions(self.rows, self.cols)
        _check_mine_count(self.num_mines, self.rows * self.cols)


# The one session preset: 9x9 with 10 mines
CLASSIC = BoardConfig(9, 9, 10)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the operations that populate and mutate it.
    Mines are placed once, adjacency is computed once after placement, and
    the outcome is always derived from cell state rather than stored.
    """

    rows: int = 9
    cols: int = 9
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _total_mines: int = 0
    _mines_placed: bool = False
    _adjacency_computed: bool = False

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        _check_dimensions(self.rows, self.cols)
        self._init_grid()

    @classmethod
    def generate(
        cls, config: BoardConfig, rng: Optional[random.Random] = None
    ) -> "Board":
        """
        Build a ready-to-play board from a configuration.

        Args:
            config: Board dimensions and mine count.
            rng: Random source for mine placement (default: random module).

        Returns:
            Board with mines placed and adjacency counts computed.
        """
        board = cls(config.rows, config.cols)
        board.place_mines(config.num_mines, rng)
        board.compute_adjacency()
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.cols)]
            for _ in range(self.rows)
        ]

    def place_mines(
        self, count: int, rng: Optional[random.Random] = None
    ) -> None:
        """
        Place mines uniformly at random.

        Picks random (row, col) pairs and skips cells that already hold a
        mine until `count` mines are down.

        Args:
            count: Number of mines to place; must be below rows * cols.
            rng: Random source (default: random module).
        """
        self._check_can_place(count)
        rng = rng or random
        placed = 0
        while placed < count:
            row = rng.randrange(self.rows)
            col = rng.randrange(self.cols)
            cell = self._grid[row][col]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1
        self._finish_placement(count)

    def place_mines_at(self, positions: Iterable[Position]) -> None:
        """
        Place mines at fixed positions instead of random ones.

        Args:
            positions: Distinct in-bounds (row, col) pairs.
        """
        mine_positions = list(positions)
        if len(set(mine_positions)) != len(mine_positions):
            raise ValueError("Mine positions must be distinct")
        for row, col in mine_positions:
            if not self.in_bounds(row, col):
                raise ValueError(f"Mine position out of bounds: ({row}, {col})")
        self._check_can_place(len(mine_positions))
        for row, col in mine_positions:
            self._grid[row][col].is_mine = True
        self._finish_placement(len(mine_positions))

    def _check_can_place(self, count: int) -> None:
        """Fail fast on a second placement or an impossible count."""
        if self._mines_placed:
            raise RuntimeError("Mines have already been placed")
        _check_mine_count(count, self.rows * self.cols)

    def _finish_placement(self, count: int) -> None:
        self._total_mines = count
        self._mines_placed = True

    def compute_adjacency(self) -> None:
        """Calculate adjacent mine counts for all non-mine cells."""
        if self._adjacency_computed:
            raise RuntimeError("Adjacency has already been computed")
        if self.revealed_count > 0:
            raise RuntimeError("Adjacency must be computed before any reveal")
        for row in range(self.rows):
            for col in range(self.cols):
                if not self._grid[row][col].is_mine:
                    count = self._count_adjacent_mines(row, col)
                    self._grid[row][col].adjacent_mines = count
        self._adjacency_computed = True

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the edge-clipped Moore neighborhood.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        If the cell is empty (0 adjacent mines), the surrounding empty
        region and its numbered border are opened as well.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            BLOCKED if out of bounds, revealed or flagged; MINE_HIT if the
            cell holds a mine; otherwise REVEALED with the opened cells.
        """
        if not self._adjacency_computed:
            raise RuntimeError("Adjacency must be computed before revealing")

        position = (row, col)
        if not self.in_bounds(row, col):
            return RevealResult(RevealKind.BLOCKED, position)

        cell = self._grid[row][col]
        if not cell.reveal():
            return RevealResult(RevealKind.BLOCKED, position)

        if cell.is_mine:
            return RevealResult(RevealKind.MINE_HIT, position)

        opened = [position]
        if cell.adjacent_mines == 0:
            opened.extend(self._flood_from(row, col))
        return RevealResult(RevealKind.REVEALED, position, tuple(opened))

    def _flood_from(self, row: int, col: int) -> List[Position]:
        """Open the empty region around an already revealed zero cell."""
        opened = []
        pending = deque([(row, col)])
        while pending:
            current_row, current_col = pending.popleft()
            for neighbor_row, neighbor_col in self.neighbors(
                current_row, current_col
            ):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_mine or not neighbor.reveal():
                    continue
                opened.append((neighbor_row, neighbor_col))
                if neighbor.adjacent_mines == 0:
                    pending.append((neighbor_row, neighbor_col))
        return opened

    def toggle_flag(self, row: int, col: int) -> Optional[bool]:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            The new flagged value, or None if the cell is out of bounds
            or already revealed.
        """
        if not self.in_bounds(row, col):
            return None
        cell = self._grid[row][col]
        if not cell.toggle_flag():
            return None
        return cell.is_flagged

    def reveal_all_mines(self) -> None:
        """Reveal every mine on the board, leaving safe cells untouched."""
        for cell in self._cells():
            if cell.is_mine:
                cell.expose()

    def check_outcome(self) -> GameOutcome:
        """Derive the game outcome from the current cell states."""
        safe_revealed = 0
        for cell in self._cells():
            if not cell.is_revealed:
                continue
            if cell.is_mine:
                return GameOutcome.LOST
            safe_revealed += 1
        if safe_revealed == self.rows * self.cols - self._total_mines:
            return GameOutcome.WON
        return GameOutcome.IN_PROGRESS

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def _cells(self) -> Iterable[Cell]:
        for board_row in self._grid:
            yield from board_row

    @property
    def total_mines(self) -> int:
        """Number of mines placed on the board."""
        return self._total_mines

    @property
    def mines_placed(self) -> bool:
        """Check if mines have been placed."""
        return self._mines_placed

    @property
    def adjacency_computed(self) -> bool:
        """Check if adjacency counts have been computed."""
        return self._adjacency_computed

    @property
    def revealed_count(self) -> int:
        """Number of revealed cells, mines included."""
        return sum(1 for cell in self._cells() if cell.is_revealed)

    @property
    def revealed_safe_count(self) -> int:
        """Number of revealed cells without a mine."""
        return sum(
            1 for cell in self._cells() if cell.is_revealed and not cell.is_mine
        )

    @property
    def flag_count(self) -> int:
        """Number of flagged cells."""
        return sum(1 for cell in self._cells() if cell.is_flagged)

    @property
    def remaining_flags(self) -> int:
        """Mines left to flag, as shown on a mine counter."""
        return self._total_mines - self.flag_count

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row in range(self.rows):
            for col in range(self.cols):
                obs[row, col] = self._grid[row][col].snapshot_code()
        return obs

    def mine_positions(self) -> List[Position]:
        """List the (row, col) positions that hold a mine."""
        return [
            (row, col)
            for row in range(self.rows)
            for col in range(self.cols)
            if self._grid[row][col].is_mine
        ]
