"""
Space Game application
"""

import random
from typing import Optional

import pygame

from space_game.audio import PygameSoundBoard
from space_game.config import Settings
from space_game.controls import Intent
from space_game.display import PygameSurface
from space_game.geometry import Field
from space_game.scheduler import FixedRateDriver
from space_game.session import GameSession
from space_game.utils import logger, setup_logging

KEY_INTENTS = {
    pygame.K_a: Intent.LEFT,
    pygame.K_LEFT: Intent.LEFT,
    pygame.K_d: Intent.RIGHT,
    pygame.K_RIGHT: Intent.RIGHT,
    pygame.K_w: Intent.FIRE,
    pygame.K_UP: Intent.FIRE,
    pygame.K_SPACE: Intent.FIRE,
}


def key_intent(key: int) -> Optional[Intent]:
    """
    Translate a pygame key code

    :param key: pygame key code
    :type key: int

    :return: Intent of the key, None if the game ignores it
    :rtype: Intent
    """
    return KEY_INTENTS.get(key)


class SpaceGame:
    """
    Host of a game session: window, keyboard and the fixed-rate loop
    """

    _carry_on = True

    def __init__(self, settings: Optional[Settings] = None):
        """
        :param settings: Run-time settings, read from the environment if omitted
        :type settings: Settings

        :raise SystemExit: If an asset exists but cannot be loaded
        """
        self.settings = settings or Settings.from_env()
        setup_logging(self.settings.log_level)
        logger.info(self.settings.to_dict())

        pygame.init()
        field = Field(self.settings.width, self.settings.height)

        self._surface = PygameSurface(
            self.settings.title, field, self.settings.assets_dir, self.settings.font_name
        )
        self._driver = FixedRateDriver(self.settings.tick_ms)
        self._clock = pygame.time.Clock()
        self.session = GameSession(
            field=field,
            surface=self._surface,
            sounds=PygameSoundBoard(self.settings.assets_dir, self.settings.volume),
            driver=self._driver,
            rng=random.Random(self.settings.seed),
            footprints=self._surface.footprints(),
        )

    def handle_event(self, event: pygame.event.Event) -> None:
        """
        Route one pygame event

        Key presses are latched into the session's input buffer; any key
        press while no game is running starts one.

        :param event: pygame event
        :type event: pygame.event.Event
        """
        if event.type == pygame.QUIT:
            logger.debug("Quitting the game")
            self._carry_on = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._carry_on = False
                return
            intent = key_intent(event.key)
            if intent is not None:
                self.session.controls.press(intent)
            if not self.session.running:
                self.session.start()
        elif event.type == pygame.KEYUP:
            intent = key_intent(event.key)
            if intent is not None:
                self.session.controls.release(intent)

    def handle_events(self) -> None:
        """
        Handle the pending events
        """
        for event in pygame.event.get():
            self.handle_event(event)

    def run(self) -> None:
        """
        Run the game until the window is closed
        """
        logger.debug("Running the game")

        while self._carry_on:
            self._clock.tick(round(self._driver.rate))
            self.handle_events()
            if self._driver.step():
                self._surface.present()

        pygame.quit()


def run(settings: Optional[Settings] = None) -> None:
    """
    Main entry point for Space Game
    """
    SpaceGame(settings).run()


if __name__ == "__main__":
    run()
