"""
Interaction rules between entity kinds
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from space_game.constants import (
    HIT_DAMAGE,
    HIT_POINTS,
    INTERCEPT_POINTS,
    RAM_DAMAGE,
    RAM_POINTS,
    SHOT_DOWN_POINTS,
)
from space_game.geometry import overlaps
from space_game.utils import logger

if TYPE_CHECKING:
    from space_game.session import GameSession


@dataclass
class Hits:
    """
    How many times each rule fired during one pass
    """

    rammed: int = 0
    shot_down: int = 0
    intercepted: int = 0
    hit: int = 0

    @property
    def total(self) -> int:
        return self.rammed + self.shot_down + self.intercepted + self.hit


def resolve_collisions(session: GameSession) -> Hits:
    """
    Apply the collision rules once, in their fixed order

    1. player rams an adversary: adversary dies, health -10, score +10
    2. player projectile hits an adversary: both die, score +10
    3. projectiles meet: both die, score +1
    4. adversary projectile hits the player: it dies, health -5, score +1

    Entities already dead, whether from an earlier rule or from leaving
    the field, are skipped. Health is not clamped here.

    :param session: Session holding the entities
    :type session: GameSession

    :return: Rule counters
    :rtype: Hits
    """
    hits = Hits()
    player = session.player

    for adversary in session.adversaries:
        if adversary.alive and overlaps(player, adversary):
            adversary.alive = False
            player.take_damage(RAM_DAMAGE)
            player.add_score(RAM_POINTS)
            hits.rammed += 1
            logger.debug("bang")

    for adversary in session.adversaries:
        if not adversary.alive:
            continue
        for projectile in session.player_projectiles:
            if projectile.alive and overlaps(adversary, projectile):
                adversary.alive = False
                projectile.alive = False
                player.add_score(SHOT_DOWN_POINTS)
                hits.shot_down += 1
                logger.debug("boom")
                break

    for shot in session.adversary_projectiles:
        if not shot.alive:
            continue
        for projectile in session.player_projectiles:
            if projectile.alive and overlaps(shot, projectile):
                shot.alive = False
                projectile.alive = False
                player.add_score(INTERCEPT_POINTS)
                hits.intercepted += 1
                break

    for shot in session.adversary_projectiles:
        if shot.alive and overlaps(player, shot):
            shot.alive = False
            player.take_damage(HIT_DAMAGE)
            player.add_score(HIT_POINTS)
            hits.hit += 1

    return hits
