"""
Pytest configuration and shared fixtures.
"""
import os
import random
import sys
from pathlib import Path

import pytest

# Headless pygame for renderer and audio tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from game import Board, BoardConfig, Cell, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def classic_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return Board.generate(BoardConfig(9, 9, 10), random.Random(1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    board = Board(5, 5)
    board.place_mines_at([])
    board.compute_adjacency()
    return board


@pytest.fixture
def corner_board() -> Board:
    """Create a 9x9 board with mines fixed at (0, 0) and (0, 1)."""
    board = Board(9, 9)
    board.place_mines_at([(0, 0), (0, 1)])
    board.compute_adjacency()
    return board


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with mines at (0, 0) and (2, 2)."""
    board = Board(3, 3)
    board.place_mines_at([(0, 0), (2, 2)])
    board.compute_adjacency()
    return board


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def corner_session(corner_board: Board) -> GameSession:
    """Session on the two-corner-mine board."""
    return GameSession(corner_board)


@pytest.fixture
def small_session(small_board: Board) -> GameSession:
    """Session on the 3x3 two-mine board."""
    return GameSession(small_board)


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
