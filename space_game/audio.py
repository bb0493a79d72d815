"""
Sound effects
"""

import os
from typing import Dict, Protocol

import pygame

from space_game.utils import load_sound, logger

EFFECTS = ("hero_shoot", "enemy_shoot")


class SoundBoard(Protocol):
    """
    Fire-and-forget sound playback
    """

    def play(self, effect: str) -> None:
        """Play the named effect"""


class SilentSoundBoard:
    """
    Sound board that plays nothing
    """

    def play(self, effect: str) -> None:
        pass


class PygameSoundBoard:
    """
    Sound board backed by pygame.mixer
    """

    def __init__(self, assets_dir: str, volume: float = 0.1):
        """
        :param assets_dir: Directory holding ``<effect>.wav`` files
        :type assets_dir: str

        :param volume: Playback volume between 0 and 1
        :type volume: float
        """
        self._sounds: Dict[str, pygame.mixer.Sound] = {}

        try:
            pygame.mixer.init()
        except pygame.error as e:
            logger.warning(f"Sound disabled, mixer unavailable: {e}")
            return

        for effect in EFFECTS:
            path = os.path.join(assets_dir, f"{effect}.wav")
            if not os.path.isfile(path):
                logger.warning(f"Missing sound {path}, {effect} will be silent")
                continue
            self._sounds[effect] = load_sound(path, volume)

    def play(self, effect: str) -> None:
        sound = self._sounds.get(effect)
        if sound is not None:
            sound.play()
