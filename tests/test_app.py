import pygame
import pytest

from space_game.app import SpaceGame, key_intent
from space_game.controls import Intent
from space_game.session import Phase


@pytest.mark.parametrize(
    "key, intent",
    [
        (pygame.K_a, Intent.LEFT),
        (pygame.K_LEFT, Intent.LEFT),
        (pygame.K_d, Intent.RIGHT),
        (pygame.K_RIGHT, Intent.RIGHT),
        (pygame.K_w, Intent.FIRE),
        (pygame.K_UP, Intent.FIRE),
        (pygame.K_SPACE, Intent.FIRE),
        (pygame.K_q, None),
    ],
)
def test_key_intent(key, intent):
    assert key_intent(key) is intent


@pytest.fixture
def game(make_session):
    # skip the window setup, only the event routing is under test
    game = SpaceGame.__new__(SpaceGame)
    game.session = make_session()
    return game


def test_any_key_starts_the_game(game):
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_q))
    assert game.session.phase is Phase.RUNNING


def test_keys_feed_the_input_buffer(game):
    game.session.start()
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    assert game.session.controls.direction == -1

    game.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_RIGHT))
    assert game.session.controls.direction == -1

    game.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))
    assert game.session.controls.direction == 0

    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert game.session.controls.fire_requested


def test_escape_and_quit_stop_the_loop(game):
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    assert not game._carry_on
    assert game.session.phase is Phase.TITLE

    other = SpaceGame.__new__(SpaceGame)
    other.handle_event(pygame.event.Event(pygame.QUIT))
    assert not other._carry_on
