"""
Minesweeper front end.

Window, drawing, and sound cues built on pygame.
"""
from .audio import SoundBank
from .renderer import Renderer, load_mine_image
from .app import AppConfig, MinesweeperApp, event_from_mouse, main

__all__ = [
    "SoundBank",
    "Renderer",
    "load_mine_image",
    "AppConfig",
    "MinesweeperApp",
    "event_from_mouse",
    "main",
]
