"""
Space Game entities

Every moving object shares the same record (:class:`Entity`); what it does
each tick and how it is drawn is looked up by its :class:`Kind` in the
``UPDATES`` and ``RENDERERS`` tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional, Tuple

from space_game.constants import (
    ADVERSARY_PROJECTILE_SPEED,
    ADVERSARY_SPEED,
    BACKGROUND_DRIFT,
    FIRE_COOLDOWN,
    FOOTPRINTS,
    PLAYER_HEALTH,
    PLAYER_PROJECTILE_SPEED,
    PLAYER_SPEED,
)
from space_game.geometry import Field, clamp

if TYPE_CHECKING:
    from space_game.render import Surface
    from space_game.session import GameSession


class Kind(str, Enum):
    """
    Closed set of entity kinds, also naming the visual of each kind
    """

    PLAYER = "player"
    ADVERSARY = "adversary"
    PLAYER_PROJECTILE = "player_projectile"
    ADVERSARY_PROJECTILE = "adversary_projectile"
    BACKGROUND = "background"


Footprints = Dict[Kind, Tuple[int, int]]


def default_footprints(field: Optional[Field] = None) -> Footprints:
    """
    Full (width, height) of each visual when no image tells otherwise

    :param field: Play field; the background always covers it
    :type field: Field

    :return: Footprint per kind
    :rtype: dict
    """
    footprints = {Kind(name): size for name, size in FOOTPRINTS.items()}
    if field is not None:
        footprints[Kind.BACKGROUND] = (field.width, field.height)
    return footprints


@dataclass
class Entity:
    """
    Moving object centred at (x, y) with half-extents (w, h)
    """

    kind: Kind
    x: float
    y: float
    sx: float = 0.0
    sy: float = 0.0
    w: float = 0.0
    h: float = 0.0
    alive: bool = True

    def move(self) -> None:
        """Translate by the velocity"""
        self.x += self.sx
        self.y += self.sy


@dataclass
class Player(Entity):
    """
    The ship controlled by the user
    """

    base_speed: float = PLAYER_SPEED
    health: int = PLAYER_HEALTH
    score: int = 0
    high_score: int = 0
    cooldown: int = 0
    cooldown_time: int = FIRE_COOLDOWN

    def reset(self, field: Field) -> None:
        """
        Put the variable stats back to their starting values

        The high score survives.

        :param field: Play field
        :type field: Field
        """
        self.health = PLAYER_HEALTH
        self.score = 0
        self.x = field.width / 2
        self.y = field.height * 7 / 8
        self.sx = 0.0
        self.cooldown = 0
        self.alive = True

    def add_score(self, points: int) -> None:
        """
        Add points to the score, raising the high score along with it

        :param points: Non-negative amount of points
        :type points: int
        """
        self.score += max(points, 0)
        self.high_score = max(self.high_score, self.score)

    def take_damage(self, amount: int) -> None:
        """
        Lower the health; it may drop below zero until the terminal check

        :param amount: Health to lose
        :type amount: int
        """
        self.health -= amount


def _half_extent(kind: Kind, footprints: Footprints) -> Tuple[float, float]:
    width, height = footprints[kind]
    return width / 2, height / 2


def make_player(field: Field, footprints: Footprints) -> Player:
    """Create the player at its starting spot"""
    w, h = _half_extent(Kind.PLAYER, footprints)
    return Player(Kind.PLAYER, field.width / 2, field.height * 7 / 8, w=w, h=h)


def make_background(field: Field, footprints: Footprints) -> Entity:
    """Create the scrolling backdrop at the field centre"""
    w, h = _half_extent(Kind.BACKGROUND, footprints)
    return Entity(
        Kind.BACKGROUND, field.width / 2, field.height / 2, sy=BACKGROUND_DRIFT, w=w, h=h
    )


def make_adversary(x: float, footprints: Footprints) -> Entity:
    """Create an adversary entering at the top edge"""
    w, h = _half_extent(Kind.ADVERSARY, footprints)
    return Entity(Kind.ADVERSARY, x, 0, sy=ADVERSARY_SPEED, w=w, h=h)


def make_player_projectile(player: Player, footprints: Footprints) -> Entity:
    """Create a shot a third of the ship's height above its centre"""
    w, h = _half_extent(Kind.PLAYER_PROJECTILE, footprints)
    y = player.y - player.h * 2 / 3
    return Entity(
        Kind.PLAYER_PROJECTILE, player.x, y, sy=PLAYER_PROJECTILE_SPEED, w=w, h=h
    )


def make_adversary_projectile(adversary: Entity, footprints: Footprints) -> Entity:
    """Create a shot at the lower edge of an adversary"""
    w, h = _half_extent(Kind.ADVERSARY_PROJECTILE, footprints)
    y = adversary.y + adversary.h
    return Entity(
        Kind.ADVERSARY_PROJECTILE,
        adversary.x,
        y,
        sy=ADVERSARY_PROJECTILE_SPEED,
        w=w,
        h=h,
    )


def fire(player: Player, session: GameSession) -> Optional[Entity]:
    """
    Shoot if the cooldown has run out

    :param player: The player
    :type player: Player

    :param session: Session owning the projectile list
    :type session: GameSession

    :return: The new projectile, or None while cooling down
    :rtype: Entity
    """
    if player.cooldown > 0:
        return None

    projectile = make_player_projectile(player, session.footprints)
    session.player_projectiles.append(projectile)
    session.sounds.play("hero_shoot")
    player.cooldown = player.cooldown_time
    return projectile


def _update_player(player: Player, session: GameSession) -> None:
    controls = session.controls
    player.sx = controls.direction * player.base_speed
    if controls.take_fire():
        fire(player, session)

    player.move()
    player.x = clamp(player.x, player.w, session.field.width - player.w)

    if player.cooldown > 0:
        player.cooldown -= 1


def _update_adversary(adversary: Entity, session: GameSession) -> None:
    adversary.move()
    if adversary.y > session.field.height:
        adversary.alive = False
        return

    shot = session.spawner.maybe_fire(adversary, session.footprints)
    if shot is not None:
        session.adversary_projectiles.append(shot)
        session.sounds.play("enemy_shoot")


def _update_player_projectile(projectile: Entity, session: GameSession) -> None:
    projectile.move()
    if projectile.y < 0:
        projectile.alive = False


def _update_adversary_projectile(projectile: Entity, session: GameSession) -> None:
    projectile.move()
    if projectile.y > session.field.height:
        projectile.alive = False


def _update_background(background: Entity, session: GameSession) -> None:
    background.move()


UPDATES: Dict[Kind, Callable] = {
    Kind.PLAYER: _update_player,
    Kind.ADVERSARY: _update_adversary,
    Kind.PLAYER_PROJECTILE: _update_player_projectile,
    Kind.ADVERSARY_PROJECTILE: _update_adversary_projectile,
    Kind.BACKGROUND: _update_background,
}


def update(entity: Entity, session: GameSession) -> None:
    """
    Advance an entity by one tick

    :param entity: Entity to update
    :type entity: Entity

    :param session: Session the entity lives in
    :type session: GameSession
    """
    UPDATES[entity.kind](entity, session)


def _render_sprite(entity: Entity, surface: Surface, field: Field) -> None:
    surface.draw_sprite(entity.kind, entity.x, entity.y)


def _render_background(background: Entity, surface: Surface, field: Field) -> None:
    # two copies one atop the other, wrapped every two field heights
    gh = field.height
    surface.draw_backdrop(background.kind, (background.y - gh / 2) % (gh * 2) - gh)
    surface.draw_backdrop(background.kind, (background.y + gh / 2) % (gh * 2) - gh)


RENDERERS: Dict[Kind, Callable] = {
    Kind.PLAYER: _render_sprite,
    Kind.ADVERSARY: _render_sprite,
    Kind.PLAYER_PROJECTILE: _render_sprite,
    Kind.ADVERSARY_PROJECTILE: _render_sprite,
    Kind.BACKGROUND: _render_background,
}


def render(entity: Entity, surface: Surface, field: Field) -> None:
    """
    Draw an entity onto a surface

    :param entity: Entity to draw
    :type entity: Entity

    :param surface: Target surface
    :type surface: Surface

    :param field: Play field
    :type field: Field
    """
    RENDERERS[entity.kind](entity, surface, field)
