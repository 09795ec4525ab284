"""
Minesweeper game module.

Provides the board model, cell state, and the interaction session that
turns clicks into board operations and sound cues.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    GameOutcome,
    RevealKind,
    RevealResult,
    CLASSIC,
)
from .session import (
    ButtonKind,
    Cue,
    CueState,
    GameSession,
    InputEvent,
    pixel_to_cell,
)

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameOutcome",
    "RevealKind",
    "RevealResult",
    "CLASSIC",
    "ButtonKind",
    "Cue",
    "CueState",
    "GameSession",
    "InputEvent",
    "pixel_to_cell",
]
