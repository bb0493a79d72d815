"""
pygame window surface
"""

import os
from typing import Dict

import pygame

from space_game.entities import Footprints, Kind, default_footprints
from space_game.geometry import Field
from space_game.render import Hud
from space_game.utils import load_image, logger, set_screen

IMAGE_FILES = {
    Kind.PLAYER: "hero.png",
    Kind.ADVERSARY: "enemy.png",
    Kind.PLAYER_PROJECTILE: "bullet_hero.png",
    Kind.ADVERSARY_PROJECTILE: "bullet_enemy.png",
    Kind.BACKGROUND: "bg.png",
}

# Fill colour of the stand-in used when an image file is missing
PLACEHOLDER_COLORS = {
    Kind.PLAYER: (80, 200, 120),
    Kind.ADVERSARY: (220, 80, 80),
    Kind.PLAYER_PROJECTILE: (180, 180, 220),
    Kind.ADVERSARY_PROJECTILE: (240, 210, 80),
    Kind.BACKGROUND: (10, 10, 40),
}

TEXT_COLOR = pygame.Color("darkblue")
HEALTH_BAR_WIDTH = 8


def health_color(health: int) -> pygame.Color:
    """
    Colour of the health bar

    :param health: Current health
    :type health: int

    :return: pygame.Color
    """
    if health > 50:
        return pygame.Color("darkgreen")
    if health > 10:
        return pygame.Color("yellow")
    return pygame.Color("darkred")


class PygameSurface:
    """
    Draws frames into the pygame display window
    """

    def __init__(
        self, title: str, field: Field, assets_dir: str, font_name: str = "orbitron"
    ):
        """
        :param title: Window caption
        :type title: str

        :param field: Play field, also the window size
        :type field: Field

        :param assets_dir: Directory holding the images
        :type assets_dir: str

        :param font_name: System font used for text
        :type font_name: str

        :raise SystemExit: If an image exists but cannot be loaded
        """
        self.field = field
        self._screen = set_screen(title, field.width, field.height)
        self._images = self._load_images(assets_dir)
        self._font = pygame.font.SysFont(font_name, 24)
        self._caption_font = pygame.font.SysFont(font_name, 48)

    def _load_images(self, assets_dir: str) -> Dict[Kind, pygame.Surface]:
        images = {}
        defaults = default_footprints(self.field)
        for kind, filename in IMAGE_FILES.items():
            path = os.path.join(assets_dir, filename)
            if os.path.isfile(path):
                logger.debug(f"Loading image {path}")
                images[kind] = load_image(path, transparent=kind is not Kind.BACKGROUND)
                continue

            logger.warning(f"Missing image {path}, drawing a placeholder")
            placeholder = pygame.Surface(defaults[kind])
            placeholder.fill(PLACEHOLDER_COLORS[kind])
            images[kind] = placeholder
        return images

    def footprints(self) -> Footprints:
        """
        Size of each loaded image, used as the collision footprint

        :return: Footprint per kind
        :rtype: dict
        """
        return {kind: image.get_size() for kind, image in self._images.items()}

    def begin_frame(self) -> None:
        self._screen.fill((0, 0, 0))

    def draw_sprite(self, kind: Kind, x: float, y: float) -> None:
        image = self._images[kind]
        self._screen.blit(image, image.get_rect(center=(round(x), round(y))))

    def draw_backdrop(self, kind: Kind, top: float) -> None:
        self._screen.blit(self._images[kind], (0, round(top)))

    def draw_hud(self, hud: Hud) -> None:
        """
        Health as a line, score on the left and high score on the right

        :param hud: Values to show
        :type hud: Hud
        """
        length = max(hud.health, 0) * (self.field.width - 2 * 20 - 2) / 100
        if length > 0:
            pygame.draw.line(
                self._screen,
                health_color(hud.health),
                (20, 20),
                (20 + length, 20),
                HEALTH_BAR_WIDTH,
            )

        score = self._font.render(f"score: {hud.score}", True, TEXT_COLOR)
        self._screen.blit(score, score.get_rect(midleft=(20, 50)))

        high_score = self._font.render(f"hiscore: {hud.high_score}", True, TEXT_COLOR)
        self._screen.blit(
            high_score, high_score.get_rect(midright=(self.field.width - 20, 50))
        )

    def draw_caption(self, text: str) -> None:
        caption = self._caption_font.render(text, True, TEXT_COLOR)
        center = (self.field.width // 2, self.field.height // 2)
        self._screen.blit(caption, caption.get_rect(center=center))

    def present(self) -> None:
        """Show the frame drawn so far"""
        pygame.display.flip()
