"""
Random creation of adversaries and their shots
"""

from __future__ import annotations

import random
from typing import Optional

from space_game.constants import SPAWN_ODDS
from space_game.entities import (
    Entity,
    Footprints,
    make_adversary,
    make_adversary_projectile,
)
from space_game.geometry import Field


class Spawner:
    """
    Rolls the dice once per tick for each spawn decision

    Each roll succeeds with probability ``1 / odds`` independently of the
    previous ones.
    """

    def __init__(self, rng: Optional[random.Random] = None, odds: int = SPAWN_ODDS):
        """
        :param rng: Random generator, seeded by the caller for replays
        :type rng: random.Random

        :param odds: One success in this many rolls on average
        :type odds: int
        """
        if odds < 1:
            raise ValueError(f"odds must be at least 1, got {odds}")
        self.rng = rng or random.Random()
        self.odds = odds

    def roll(self) -> bool:
        """
        :return: True once in ``odds`` times on average
        :rtype: bool
        """
        return self.rng.randint(0, self.odds - 1) == 0

    def maybe_spawn_adversary(
        self, field: Field, footprints: Footprints
    ) -> Optional[Entity]:
        """
        Create an adversary at a random spot of the top edge on a lucky roll

        :param field: Play field
        :type field: Field

        :param footprints: Visual sizes per kind
        :type footprints: dict

        :return: The new adversary or None
        :rtype: Entity
        """
        if not self.roll():
            return None
        return make_adversary(self.rng.randint(0, field.width), footprints)

    def maybe_fire(self, adversary: Entity, footprints: Footprints) -> Optional[Entity]:
        """
        Create a shot below the adversary on a lucky roll

        :param adversary: The shooter
        :type adversary: Entity

        :param footprints: Visual sizes per kind
        :type footprints: dict

        :return: The new projectile or None
        :rtype: Entity
        """
        if not self.roll():
            return None
        return make_adversary_projectile(adversary, footprints)
