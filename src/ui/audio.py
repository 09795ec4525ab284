"""
Sound cue playback through pygame.mixer.
"""
import os
from typing import Dict, Optional

import pygame

from game import Cue


class SoundBank:
    """
    Loads one sound per cue from an asset directory and plays them.

    Missing files and an unavailable audio device are reported and then
    ignored, so the game keeps running without sound.
    """

    def __init__(self, asset_dir: str, muted: bool = False) -> None:
        self.asset_dir = asset_dir
        self.muted = muted
        self._sounds: Dict[Cue, Optional[pygame.mixer.Sound]] = {}
        self._mixer_ready = False

    def load(self) -> int:
        """
        Initialise the mixer and load every cue file that exists.

        Returns:
            Number of sounds loaded.
        """
        if self.muted:
            return 0

        paths = {cue: os.path.join(self.asset_dir, cue.value) for cue in Cue}
        available = {cue: path for cue, path in paths.items() if os.path.exists(path)}
        for cue, path in paths.items():
            if cue not in available:
                print(f"Sound file not found: {path}")
                self._sounds[cue] = None
        if not available:
            return 0

        try:
            pygame.mixer.init()
        except pygame.error as e:
            print(f"Audio device unavailable, continuing without sound: {e}")
            return 0
        self._mixer_ready = True

        loaded = 0
        for cue, path in available.items():
            try:
                self._sounds[cue] = pygame.mixer.Sound(path)
                loaded += 1
            except pygame.error as e:
                print(f"Error loading sound {path}: {e}")
                self._sounds[cue] = None
        return loaded

    def is_loaded(self, cue: Cue) -> bool:
        """Check if a sound is available for `cue`."""
        return self._sounds.get(cue) is not None

    def play(self, cue: Cue) -> None:
        """Play the sound for `cue`, if there is one."""
        if self.muted:
            return
        sound = self._sounds.get(cue)
        if sound is not None:
            sound.play()

    def close(self) -> None:
        """Release loaded sounds and the mixer."""
        self._sounds.clear()
        if self._mixer_ready:
            pygame.mixer.quit()
            self._mixer_ready = False
