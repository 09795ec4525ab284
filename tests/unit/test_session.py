"""
Unit tests for GameSession.

Tests how clicks drive the board and which cues each transition fires.
"""
import random

import pytest
from game import (
    Board,
    BoardConfig,
    ButtonKind,
    Cue,
    GameOutcome,
    GameSession,
    InputEvent,
    pixel_to_cell,
)


def click(row: int, col: int) -> InputEvent:
    return InputEvent(ButtonKind.PRIMARY, row, col)


def right_click(row: int, col: int) -> InputEvent:
    return InputEvent(ButtonKind.SECONDARY, row, col)


# ============================================================================
# Pointer Mapping Tests
# ============================================================================

class TestPixelToCell:
    """Test pointer coordinate mapping."""

    @pytest.mark.parametrize(
        "x, y, expected",
        [
            (0, 0, (0, 0)),
            (59, 59, (0, 0)),
            (60, 0, (0, 1)),
            (125, 300, (5, 2)),
            (10, 560, (9, 0)),
        ],
    )
    def test_floor_division_by_cell_size(self, x, y, expected) -> None:
        """Coordinates map to (row, col) by whole cells."""
        assert pixel_to_cell(x, y, 60) == expected


# ============================================================================
# Reveal Cue Tests
# ============================================================================

class TestRevealCues:
    """Test cues for primary clicks."""

    def test_one_cue_per_opened_cell(self, small_session: GameSession) -> None:
        """A flood fires one reveal cue per newly opened cell."""
        cues = small_session.handle(click(0, 2))
        assert cues == [Cue.REVEAL] * 4
        assert small_session.outcome == GameOutcome.IN_PROGRESS

    def test_blocked_reveal_is_silent(self, small_session: GameSession) -> None:
        """Revealing an open cell fires nothing."""
        small_session.handle(click(1, 1))
        assert small_session.handle(click(1, 1)) == []

    def test_out_of_bounds_click_is_silent(
        self, small_session: GameSession
    ) -> None:
        """Clicks in the status strip are ignored."""
        assert small_session.handle(click(3, 0)) == []

    def test_win_cue_after_last_reveal(self, small_session: GameSession) -> None:
        """The final reveal fires its reveal cues and then the win cue."""
        small_session.handle(click(0, 2))
        cues = small_session.handle(click(2, 0))
        assert cues == [Cue.REVEAL] * 3 + [Cue.WIN]
        assert small_session.outcome == GameOutcome.WON
        assert small_session.cue_state.played_win is True

    def test_whole_board_flood_wins(self, corner_session: GameSession) -> None:
        """One click that clears the board also wins."""
        cues = corner_session.handle(click(5, 5))
        assert cues.count(Cue.REVEAL) == 79
        assert cues[-1] == Cue.WIN


# ============================================================================
# Loss Tests
# ============================================================================

class TestLoss:
    """Test stepping on a mine."""

    def test_mine_fires_boom_then_game_over(
        self, small_session: GameSession
    ) -> None:
        """Loss fires the explosion and the game-over cue once each."""
        cues = small_session.handle(click(0, 0))
        assert cues == [Cue.BOOM, Cue.GAME_OVER]
        assert small_session.outcome == GameOutcome.LOST
        assert small_session.cue_state.played_boom is True
        assert small_session.cue_state.played_game_over is True

    def test_loss_reveals_every_mine(self, small_session: GameSession) -> None:
        """All mines are shown, safe cells stay hidden."""
        small_session.handle(click(2, 2))
        board = small_session.board
        assert board.get_cell(0, 0).is_revealed is True
        assert board.get_cell(2, 2).is_revealed is True
        assert board.get_cell(1, 1).is_hidden is True


# ============================================================================
# Flag Cue Tests
# ============================================================================

class TestFlagCues:
    """Test cues for secondary clicks."""

    def test_flag_and_unflag_both_cue(self, small_session: GameSession) -> None:
        """Each successful toggle fires a flag cue."""
        assert small_session.handle(right_click(0, 0)) == [Cue.FLAG]
        assert small_session.board.get_cell(0, 0).is_flagged is True
        assert small_session.handle(right_click(0, 0)) == [Cue.FLAG]
        assert small_session.board.get_cell(0, 0).is_flagged is False

    def test_flag_on_revealed_cell_is_silent(
        self, small_session: GameSession
    ) -> None:
        """Flagging an open cell fires nothing."""
        small_session.handle(click(1, 1))
        assert small_session.handle(right_click(1, 1)) == []

    def test_flagged_cell_blocks_reveal(self, small_session: GameSession) -> None:
        """A flagged mine cannot be stepped on."""
        small_session.handle(right_click(0, 0))
        assert small_session.handle(click(0, 0)) == []
        assert small_session.outcome == GameOutcome.IN_PROGRESS


# ============================================================================
# Terminal State Tests
# ============================================================================

class TestTerminalStates:
    """Test that finished games ignore input."""

    def test_input_ignored_after_loss(self, small_session: GameSession) -> None:
        """No further reveals, flags or cues once lost."""
        small_session.handle(click(0, 0))
        before = small_session.board.get_observation()

        assert small_session.handle(click(1, 1)) == []
        assert small_session.handle(right_click(0, 1)) == []
        assert (small_session.board.get_observation() == before).all()

    def test_input_ignored_after_win(self, corner_session: GameSession) -> None:
        """Clicking a hidden mine after winning does nothing."""
        corner_session.handle(click(5, 5))
        assert corner_session.handle(click(0, 0)) == []
        assert corner_session.outcome == GameOutcome.WON

    def test_cue_state_prevents_replay(self) -> None:
        """Terminal cues already marked as played do not fire again."""
        board = Board(3, 3)
        board.place_mines_at([(0, 0)])
        board.compute_adjacency()
        session = GameSession(board)
        session.cue_state.played_boom = True
        assert session.handle(click(0, 0)) == [Cue.GAME_OVER]


# ============================================================================
# Construction Tests
# ============================================================================

class TestNewSession:
    """Test session construction."""

    def test_new_session_is_in_progress(self) -> None:
        """A fresh session starts in progress with nothing played."""
        session = GameSession.new(BoardConfig(9, 9, 10), random.Random(3))
        assert session.outcome == GameOutcome.IN_PROGRESS
        assert session.is_over is False
        assert session.board.total_mines == 10
        assert session.cue_state.played_win is False

    def test_same_seed_same_layout(self) -> None:
        """Seeded sessions are reproducible."""
        config = BoardConfig(9, 9, 10)
        first = GameSession.new(config, random.Random(42))
        second = GameSession.new(config, random.Random(42))
        assert first.board.mine_positions() == second.board.mine_positions()
