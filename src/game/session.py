"""
Session module for Minesweeper game.

Turns discrete pointer events into board operations and decides which
sound cues each state transition should trigger.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .board import Board, BoardConfig, GameOutcome, RevealKind


# ============================================================================
# Input and Cue Types
# ============================================================================

class ButtonKind(Enum):
    """Pointer buttons the game reacts to."""

    PRIMARY = auto()
    SECONDARY = auto()


@dataclass(frozen=True)
class InputEvent:
    """A click already mapped onto grid coordinates."""

    button: ButtonKind
    row: int
    col: int


class Cue(Enum):
    """Sound cues, valued by the asset file that plays them."""

    REVEAL = "number.mp3"
    BOOM = "boom.mp3"
    FLAG = "flag.mp3"
    GAME_OVER = "over.mp3"
    WIN = "win.mp3"


@dataclass
class CueState:
    """
    Play-once bookkeeping for the terminal cues.

    Attributes:
        played_boom: Mine explosion cue has fired.
        played_game_over: Loss cue has fired.
        played_win: Win cue has fired.
    """

    played_boom: bool = False
    played_game_over: bool = False
    played_win: bool = False


def pixel_to_cell(x: int, y: int, cell_size: int) -> Tuple[int, int]:
    """Map pointer coordinates to a (row, col) pair; bounds are not checked."""
    return int(y // cell_size), int(x // cell_size)


# ============================================================================
# Game Session
# ============================================================================

@dataclass
class GameSession:
    """
    One game from first click to win or loss.

    Owns the board and the cue bookkeeping. Once the outcome is terminal
    every further event is ignored.
    """

    board: Board
    cue_state: CueState = field(default_factory=CueState)
    outcome: GameOutcome = GameOutcome.IN_PROGRESS

    @classmethod
    def new(
        cls, config: BoardConfig, rng: Optional[random.Random] = None
    ) -> "GameSession":
        """Start a session on a freshly generated board."""
        return cls(Board.generate(config, rng))

    @property
    def is_over(self) -> bool:
        """Check if the game has reached a terminal outcome."""
        return self.outcome != GameOutcome.IN_PROGRESS

    def handle(self, event: InputEvent) -> List[Cue]:
        """
        Apply one input event to the board.

        Args:
            event: Button and grid position of the click.

        Returns:
            Cues to play for this event, in order.
        """
        if self.is_over:
            return []
        if event.button == ButtonKind.PRIMARY:
            return self._handle_reveal(event.row, event.col)
        return self._handle_flag(event.row, event.col)

    def _handle_reveal(self, row: int, col: int) -> List[Cue]:
        result = self.board.reveal(row, col)

        if result.kind == RevealKind.BLOCKED:
            return []

        if result.kind == RevealKind.MINE_HIT:
            self.board.reveal_all_mines()
            self.outcome = self.board.check_outcome()
            return self._loss_cues()

        cues = [Cue.REVEAL] * result.opened_count
        self.outcome = self.board.check_outcome()
        if self.outcome == GameOutcome.WON and not self.cue_state.played_win:
            self.cue_state.played_win = True
            cues.append(Cue.WIN)
        return cues

    def _loss_cues(self) -> List[Cue]:
        cues = []
        if not self.cue_state.played_boom:
            self.cue_state.played_boom = True
            cues.append(Cue.BOOM)
        if not self.cue_state.played_game_over:
            self.cue_state.played_game_over = True
            cues.append(Cue.GAME_OVER)
        return cues

    def _handle_flag(self, row: int, col: int) -> List[Cue]:
        if self.board.toggle_flag(row, col) is None:
            return []
        return [Cue.FLAG]
