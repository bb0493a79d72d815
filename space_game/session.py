"""
Game session: owns every entity and runs the per-tick pipeline
"""

from __future__ import annotations

import random
from enum import Enum
from typing import List, Optional

from space_game.audio import SilentSoundBoard, SoundBoard
from space_game.collisions import Hits, resolve_collisions
from space_game.constants import GAME_OVER_CAPTION, HEIGHT, TITLE_CAPTION, WIDTH
from space_game.controls import InputBuffer
from space_game.entities import (
    Entity,
    Footprints,
    default_footprints,
    make_background,
    make_player,
    render,
    update,
)
from space_game.geometry import Field
from space_game.render import Hud, RecordingSurface, Surface
from space_game.scheduler import FixedRateDriver
from space_game.spawner import Spawner
from space_game.utils import logger


class Phase(Enum):
    """
    Session states
    """

    TITLE = "title"
    RUNNING = "running"
    GAME_OVER = "game_over"


class GameSession:  # pylint: disable=too-many-instance-attributes
    """
    The player, the background and the three lists of dynamic entities

    The session is armed on its driver from construction: first with
    :meth:`title_frame`, then with :meth:`tick` once :meth:`start` is
    called. The terminal check disarms the driver; only a new
    :meth:`start` arms it again.
    """

    def __init__(
        self,
        field: Optional[Field] = None,
        surface: Optional[Surface] = None,
        sounds: Optional[SoundBoard] = None,
        driver: Optional[FixedRateDriver] = None,
        rng: Optional[random.Random] = None,
        footprints: Optional[Footprints] = None,
    ):  # pylint: disable=too-many-arguments,too-many-positional-arguments
        """
        :param field: Play field size
        :type field: Field

        :param surface: Where frames are drawn
        :type surface: Surface

        :param sounds: Sound effect player
        :type sounds: SoundBoard

        :param driver: Fixed-rate driver the session arms
        :type driver: FixedRateDriver

        :param rng: Random generator for every spawn decision
        :type rng: random.Random

        :param footprints: Visual size per kind
        :type footprints: dict
        """
        self.field = field or Field(WIDTH, HEIGHT)
        self.surface = surface if surface is not None else RecordingSurface()
        self.sounds = sounds if sounds is not None else SilentSoundBoard()
        self.driver = driver or FixedRateDriver()
        self.spawner = Spawner(rng)
        self.footprints = footprints or default_footprints(self.field)
        self.controls = InputBuffer()

        self.player = make_player(self.field, self.footprints)
        self.background = make_background(self.field, self.footprints)
        self.adversaries: List[Entity] = []
        self.player_projectiles: List[Entity] = []
        self.adversary_projectiles: List[Entity] = []

        self.phase = Phase.TITLE
        self.driver.start(self.title_frame)

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def sprites(self) -> List[Entity]:
        """
        Every entity in drawing order: background, player, adversaries,
        player projectiles, adversary projectiles
        """
        return (
            [self.background, self.player]
            + self.adversaries
            + self.player_projectiles
            + self.adversary_projectiles
        )

    @property
    def hud(self) -> Hud:
        return Hud(self.player.health, self.player.score, self.player.high_score)

    def start(self) -> None:
        """
        Start a new game from the title screen or after a game over

        Does nothing while a game is running.
        """
        if self.running:
            logger.debug("Start ignored, game already running")
            return

        self.player.reset(self.field)
        self.adversaries = []
        self.player_projectiles = []
        self.adversary_projectiles = []
        # the key that started the game must not also shoot
        self.controls.drop_fire()

        self.driver.stop()
        self.driver.start(self.tick)
        self.phase = Phase.RUNNING
        logger.info("game started")

    def title_frame(self) -> None:
        """
        Draw the title screen: background, player and caption
        """
        self.surface.begin_frame()
        render(self.background, self.surface, self.field)
        render(self.player, self.surface, self.field)
        self.surface.draw_caption(TITLE_CAPTION)

    def tick(self) -> None:
        """
        Run one step of the game
        """
        self.update_sprites()
        self.detect_collisions()
        self.spawn_adversary()
        self.refresh_screen()
        self.clean_sprite_lists()
        self.check_game_over()

    def update_sprites(self) -> None:
        """
        Update every entity alive at the start of the step

        Entities created during the step are not moved until the next one.
        """
        for sprite in self.sprites:
            update(sprite, self)

    def detect_collisions(self) -> Hits:
        return resolve_collisions(self)

    def spawn_adversary(self) -> Optional[Entity]:
        adversary = self.spawner.maybe_spawn_adversary(self.field, self.footprints)
        if adversary is not None:
            self.adversaries.append(adversary)
        return adversary

    def refresh_screen(self) -> None:
        """
        Draw every entity, then the HUD on top
        """
        self.surface.begin_frame()
        for sprite in self.sprites:
            render(sprite, self.surface, self.field)
        self.surface.draw_hud(self.hud)

    def clean_sprite_lists(self) -> None:
        """
        Drop dead adversaries and projectiles, keeping the order of the rest
        """
        self.adversaries = [s for s in self.adversaries if s.alive]
        self.player_projectiles = [s for s in self.player_projectiles if s.alive]
        self.adversary_projectiles = [
            s for s in self.adversary_projectiles if s.alive
        ]
        logger.debug(f"sprite count: {len(self.sprites)}")

    def check_game_over(self) -> bool:
        """
        Stop the game when the player's health is gone

        :return: True if the game just ended
        :rtype: bool
        """
        if self.player.health > 0:
            return False

        self.driver.stop()
        self.surface.draw_caption(GAME_OVER_CAPTION)
        self.phase = Phase.GAME_OVER
        logger.info(
            f"Game over, score {self.player.score}, high score {self.player.high_score}"
        )
        return True
