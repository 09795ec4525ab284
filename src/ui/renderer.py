"""
Board renderer.

Draws the board snapshot and the status strip onto a pygame surface
every frame. Works the same on a window surface and an off-screen one.
"""
import os
from typing import Optional, Tuple

import numpy as np
import pygame

from game import Board, GameOutcome
from game.cell import OBS_FLAGGED, OBS_HIDDEN, OBS_MINE


Color = Tuple[int, int, int]

# --- Visuals ---
COLOR_BG: Color = (48, 99, 47)
COLOR_HIDDEN: Tuple[Color, Color] = ((190, 224, 145), (170, 214, 135))
COLOR_REVEALED: Tuple[Color, Color] = ((240, 210, 170), (225, 195, 150))
COLOR_OUTLINE: Color = (110, 110, 110)
COLOR_COUNT: Color = (0, 121, 241)
COLOR_FLAG: Color = (230, 41, 55)
COLOR_MINE: Color = (40, 40, 40)
COLOR_LOST: Color = (230, 41, 55)
COLOR_WON: Color = (0, 228, 48)
COLOR_TEXT: Color = (245, 245, 245)

MINE_IMAGE = "boomm.png"
HINT_TEXT = "Left-click: Reveal | Right-click: Flag"


def load_mine_image(asset_dir: str, cell_size: int) -> Optional[pygame.Surface]:
    """Load the exploded-mine picture scaled to one cell, if present."""
    path = os.path.join(asset_dir, MINE_IMAGE)
    if not os.path.exists(path):
        print(f"Image file not found: {path}")
        return None
    try:
        image = pygame.image.load(path)
    except pygame.error as e:
        print(f"Error loading image {path}: {e}")
        return None
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return pygame.transform.smoothscale(image, (cell_size, cell_size))


class Renderer:
    """Immediate-mode drawing of a board and its outcome."""

    def __init__(
        self,
        cell_size: int = 60,
        status_height: int = 50,
        mine_image: Optional[pygame.Surface] = None,
    ) -> None:
        pygame.font.init()
        self.cell_size = cell_size
        self.status_height = status_height
        self.mine_image = mine_image

        self.font_count = pygame.font.SysFont("Consolas", 32, bold=True)
        self.font_banner = pygame.font.SysFont("Verdana", 30, bold=True)
        self.font_hint = pygame.font.SysFont("Verdana", 18)

    def surface_size(self, board: Board) -> Tuple[int, int]:
        """Window size needed to show `board` plus the status strip."""
        return (
            board.cols * self.cell_size,
            board.rows * self.cell_size + self.status_height,
        )

    def draw(
        self, surface: pygame.Surface, board: Board, outcome: GameOutcome
    ) -> None:
        """Draw one complete frame."""
        surface.fill(COLOR_BG)
        self._draw_grid(surface, board)
        self._draw_status(surface, board, outcome)

    def _draw_grid(self, surface: pygame.Surface, board: Board) -> None:
        obs = board.get_observation()
        for (row, col), value in np.ndenumerate(obs):
            rect = pygame.Rect(
                col * self.cell_size, row * self.cell_size,
                self.cell_size, self.cell_size,
            )
            shade = (row + col) % 2

            if value in (OBS_HIDDEN, OBS_FLAGGED):
                pygame.draw.rect(surface, COLOR_HIDDEN[shade], rect)
                pygame.draw.rect(surface, COLOR_OUTLINE, rect, 1)
                if value == OBS_FLAGGED:
                    self._draw_flag(surface, rect)
                continue

            pygame.draw.rect(surface, COLOR_REVEALED[shade], rect)
            if value == OBS_MINE:
                self._draw_mine(surface, rect)
            elif value > 0:
                self._draw_count(surface, rect, int(value))

    def _draw_flag(self, surface: pygame.Surface, rect: pygame.Rect) -> None:
        cx, cy = rect.center
        pygame.draw.polygon(
            surface,
            COLOR_FLAG,
            [(cx - 8, cy + 8), (cx - 8, cy - 12), (cx + 8, cy - 2)],
        )

    def _draw_mine(self, surface: pygame.Surface, rect: pygame.Rect) -> None:
        if self.mine_image is not None:
            surface.blit(self.mine_image, rect.topleft)
            return
        pygame.draw.circle(surface, COLOR_MINE, rect.center, self.cell_size // 4)

    def _draw_count(
        self, surface: pygame.Surface, rect: pygame.Rect, count: int
    ) -> None:
        text = self.font_count.render(str(count), True, COLOR_COUNT)
        surface.blit(text, text.get_rect(center=rect.center))

    def _draw_status(
        self, surface: pygame.Surface, board: Board, outcome: GameOutcome
    ) -> None:
        top = board.rows * self.cell_size

        if outcome == GameOutcome.LOST:
            text = self.font_banner.render("GAME OVER!", True, COLOR_LOST)
            surface.blit(text, (10, top + 10))
        elif outcome == GameOutcome.WON:
            text = self.font_banner.render("YOU WIN!", True, COLOR_WON)
            surface.blit(text, (10, top + 10))
        else:
            text = self.font_hint.render(HINT_TEXT, True, COLOR_TEXT)
            surface.blit(text, (10, top + 15))

            counter = self.font_hint.render(
                f"{board.remaining_flags:03d}", True, COLOR_FLAG
            )
            counter_rect = counter.get_rect(
                topright=(surface.get_width() - 10, top + 15)
            )
            surface.blit(counter, counter_rect)
