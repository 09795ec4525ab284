"""
Minesweeper window and interaction loop.

Usage:
    python main.py [--seed N] [--assets DIR] [--fps N] [--mute]
"""
import argparse
import random
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pygame

from game import (
    BoardConfig,
    ButtonKind,
    CLASSIC,
    Cue,
    GameOutcome,
    GameSession,
    InputEvent,
    pixel_to_cell,
)
from .audio import SoundBank
from .renderer import Renderer, load_mine_image


DEFAULT_ASSET_DIR = Path(__file__).resolve().parent.parent.parent / "assets"

# pygame mouse button numbers
MOUSE_LEFT = 1
MOUSE_RIGHT = 3


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class AppConfig:
    """
    Session parameters for the windowed game.

    Attributes:
        board: Board dimensions and mine count.
        cell_size: Edge length of one cell in pixels.
        status_height: Height of the text strip under the grid.
        fps: Frame rate limit.
        title: Window caption.
        asset_dir: Directory holding the sounds and the mine image.
        muted: Skip audio entirely.
        seed: Seed for mine placement; None for a fresh random layout.
    """

    board: BoardConfig = field(default_factory=lambda: CLASSIC)
    cell_size: int = 60
    status_height: int = 50
    fps: int = 60
    title: str = "Minesweeper"
    asset_dir: Path = DEFAULT_ASSET_DIR
    muted: bool = False
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.cell_size < 1:
            raise ValueError("cell_size must be positive")
        if self.status_height < 0:
            raise ValueError("status_height cannot be negative")
        if self.fps < 1:
            raise ValueError("fps must be positive")

    @property
    def window_size(self) -> Tuple[int, int]:
        """Pixel size of the game window."""
        return (
            self.board.cols * self.cell_size,
            self.board.rows * self.cell_size + self.status_height,
        )


def event_from_mouse(
    button: int, pos: Tuple[int, int], cell_size: int
) -> Optional[InputEvent]:
    """Translate a pygame mouse press into a grid event, or None."""
    if button == MOUSE_LEFT:
        kind = ButtonKind.PRIMARY
    elif button == MOUSE_RIGHT:
        kind = ButtonKind.SECONDARY
    else:
        return None
    row, col = pixel_to_cell(pos[0], pos[1], cell_size)
    return InputEvent(kind, row, col)


# ============================================================================
# Application
# ============================================================================

class MinesweeperApp:
    """Owns the window, the session, and the audio for one game."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()

        rng = random.Random(self.config.seed) if self.config.seed is not None else None
        self.session = GameSession.new(self.config.board, rng)
        self.sounds = SoundBank(str(self.config.asset_dir), muted=self.config.muted)
        self.renderer = Renderer(self.config.cell_size, self.config.status_height)

        self.screen: Optional[pygame.Surface] = None
        self.clock: Optional[pygame.time.Clock] = None

    def open(self) -> None:
        """Create the window and load assets."""
        pygame.init()
        pygame.display.set_caption(self.config.title)
        self.screen = pygame.display.set_mode(self.config.window_size)
        self.clock = pygame.time.Clock()

        self.renderer.mine_image = load_mine_image(
            str(self.config.asset_dir), self.config.cell_size
        )
        self.sounds.load()

    def process(self, button: int, pos: Tuple[int, int]) -> List[Cue]:
        """Feed one mouse press through the session and play its cues."""
        event = event_from_mouse(button, pos, self.config.cell_size)
        if event is None:
            return []
        cues = self.session.handle(event)
        for cue in cues:
            self.sounds.play(cue)
        return cues

    def draw(self) -> None:
        """Render the current frame to the window."""
        self.renderer.draw(self.screen, self.session.board, self.session.outcome)
        pygame.display.flip()

    def run(self) -> GameOutcome:
        """
        Run the frame loop until the window is closed.

        Returns:
            Outcome of the session when the window closed.
        """
        if self.screen is None:
            self.open()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self.process(event.button, event.pos)

            self.draw()
            self.clock.tick(self.config.fps)

        return self.session.outcome

    def close(self) -> None:
        """Release audio and the window."""
        self.sounds.close()
        pygame.quit()
        self.screen = None


# ============================================================================
# Entry Point
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - classic 9x9 board with 10 mines"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    parser.add_argument(
        "--assets",
        type=Path,
        default=DEFAULT_ASSET_DIR,
        help="Directory with number/boom/flag/over/win.mp3 and boomm.png",
    )
    parser.add_argument(
        "--fps", type=int, default=60, help="Frame rate limit"
    )
    parser.add_argument(
        "--mute", action="store_true", help="Run without sound"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and play one game."""
    args = build_parser().parse_args(argv)
    seed = args.seed if args.seed is not None else random.randrange(2**32)

    config = AppConfig(
        asset_dir=args.assets,
        fps=args.fps,
        muted=args.mute,
        seed=seed,
    )
    print(
        f"Board: {config.board.rows}x{config.board.cols} "
        f"with {config.board.num_mines} mines (seed {seed})"
    )

    app: Optional[MinesweeperApp] = None
    try:
        app = MinesweeperApp(config)
        outcome = app.run()
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 0
    except Exception as e:
        print(f"Error running minesweeper: {e}")
        return 1
    finally:
        if app is not None:
            app.close()

    print(f"Game closed: {outcome.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
