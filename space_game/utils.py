"""
Space Game utils
"""

import logging

import pygame

logger = logging.getLogger("space_game")


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root handler once for the whole game

    :param level: Name of the logging level
    :type level: str
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.setLevel(level.upper())


def load_image(filename: str, transparent: bool = False) -> pygame.Surface:
    """
    Load an image

    :param filename: Name of the file
    :type filename: str

    :param transparent: Transparency flag
    :type transparent: bool

    :return: pygame.Surface

    :raise SystemExit: If pygame cannot decode the file
    """
    try:
        image = pygame.image.load(filename)
    except pygame.error as message:
        logger.error(f"Failed to load image {filename}: {message}")
        raise SystemExit(message) from message

    if transparent:
        return image.convert_alpha()
    return image.convert()


def load_sound(filename: str, volume: float) -> pygame.mixer.Sound:
    """
    Load a sound effect

    :param filename: Name of the file
    :type filename: str

    :param volume: Playback volume between 0 and 1
    :type volume: float

    :return: pygame.mixer.Sound

    :raise SystemExit: If pygame cannot decode the file
    """
    try:
        sound = pygame.mixer.Sound(filename)
    except pygame.error as message:
        logger.error(f"Failed to load sound {filename}: {message}")
        raise SystemExit(message) from message

    sound.set_volume(volume)
    return sound


def set_screen(caption: str, width: int, height: int) -> pygame.Surface:
    """
    Set the screen

    :param caption: Caption of the screen
    :type caption: str

    :param width: Width of the screen
    :type width: int

    :param height: Height of the screen
    :type height: int

    :return: pygame.Surface
    """
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)

    return screen
