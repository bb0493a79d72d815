import pytest

from space_game.controls import Intent
from space_game.entities import (
    Kind,
    default_footprints,
    fire,
    make_adversary,
    make_adversary_projectile,
    make_player_projectile,
    render,
    update,
)
from space_game.geometry import Field
from space_game.render import RecordingSurface
from tests.conftest import AlwaysRandom


def test_default_footprints_cover_every_kind():
    footprints = default_footprints(Field(300, 400))
    assert set(footprints) == set(Kind)
    assert footprints[Kind.BACKGROUND] == (300, 400)


def test_half_extents_come_from_footprints():
    footprints = default_footprints()
    footprints[Kind.ADVERSARY] = (40, 30)
    adversary = make_adversary(100, footprints)

    assert (adversary.w, adversary.h) == (20, 15)
    assert (adversary.x, adversary.y) == (100, 0)
    assert (adversary.sx, adversary.sy) == (0, 5)


def test_projectiles_start_at_the_shooter(session):
    player = session.player
    shot = make_player_projectile(player, session.footprints)
    assert shot.x == player.x
    assert shot.y == pytest.approx(player.y - player.h * 2 / 3)
    assert shot.sy == -10

    adversary = make_adversary(50, session.footprints)
    adversary.y = 100
    enemy_shot = make_adversary_projectile(adversary, session.footprints)
    assert enemy_shot.x == 50
    assert enemy_shot.y == 100 + adversary.h
    assert enemy_shot.sy == 10


def test_update_translates_by_velocity(session, make_entity):
    shot = make_entity(Kind.PLAYER_PROJECTILE, 10, 300, sx=1.5, sy=-10)
    update(shot, session)
    assert (shot.x, shot.y) == (11.5, 290)
    assert shot.alive


@pytest.mark.parametrize("direction", [Intent.LEFT, Intent.RIGHT])
@pytest.mark.parametrize("speed", [4, 50, 10_000])
def test_player_stays_inside_the_field(session, direction, speed):
    player = session.player
    player.base_speed = speed
    session.controls.press(direction)

    for _ in range(200):
        update(player, session)
        assert player.w <= player.x <= session.field.width - player.w


def test_player_moves_with_the_held_direction(session):
    player = session.player
    start = player.x
    session.controls.press(Intent.RIGHT)
    update(player, session)
    assert player.x == start + player.base_speed

    session.controls.release(Intent.RIGHT)
    update(player, session)
    assert player.x == start + player.base_speed


def test_cooldown_counts_down_to_zero(session):
    player = session.player
    player.cooldown = 3
    seen = []
    for _ in range(6):
        update(player, session)
        seen.append(player.cooldown)
    assert seen == [2, 1, 0, 0, 0, 0]


def test_fire_respects_cooldown(session, sounds):
    player = session.player
    assert fire(player, session) is not None
    assert player.cooldown == player.cooldown_time
    assert fire(player, session) is None
    assert len(session.player_projectiles) == 1
    assert sounds.played == ["hero_shoot"]


def test_player_projectile_dies_past_the_top(session, make_entity):
    shot = make_entity(Kind.PLAYER_PROJECTILE, 100, 5, sy=-10)
    update(shot, session)
    assert not shot.alive


def test_adversary_projectile_dies_past_the_bottom(session, make_entity):
    height = session.field.height
    shot = make_entity(Kind.ADVERSARY_PROJECTILE, 100, height - 5, sy=10)
    update(shot, session)
    assert not shot.alive


def test_adversary_dies_past_the_bottom(session, adversary):
    enemy = adversary(100, session.field.height)
    update(enemy, session)
    assert not enemy.alive
    assert not session.adversary_projectiles


def test_adversary_fires_on_a_lucky_roll(make_session, adversary, sounds):
    session = make_session(rng=AlwaysRandom())
    session.start()
    enemy = adversary(100, 200)

    update(enemy, session)

    assert enemy.alive
    assert len(session.adversary_projectiles) == 1
    shot = session.adversary_projectiles[0]
    assert (shot.x, shot.y) == (100, 205 + enemy.h)
    assert sounds.played == ["enemy_shoot"]


def test_adversary_holds_fire_on_unlucky_rolls(session, adversary):
    enemy = adversary(100, 200)
    for _ in range(20):
        update(enemy, session)
    assert not session.adversary_projectiles


def test_background_drifts_and_never_dies(session):
    background = session.background
    y = background.y
    for _ in range(10_000):
        update(background, session)
    assert background.y == pytest.approx(y + 5_000)
    assert background.alive


def test_background_renders_two_wrapped_copies(session):
    surface = RecordingSurface()
    height = session.field.height
    background = session.background

    render(background, surface, session.field)
    assert surface.last.backdrops == [-height, 0]

    background.y += height
    render(background, surface, session.field)
    assert surface.last.backdrops[2:] == [0, -height]


def test_sprites_render_centred(session):
    surface = RecordingSurface()
    render(session.player, surface, session.field)
    assert surface.last.sprites == [(Kind.PLAYER, (session.player.x, session.player.y))]
