import random

import pytest

from space_game.entities import Entity, Kind
from space_game.render import RecordingSurface
from space_game.session import GameSession


class NeverRandom(random.Random):
    """Every spawn roll fails"""

    def randint(self, a, b):
        return b


class AlwaysRandom(random.Random):
    """Every spawn roll succeeds and adversaries appear at x=0"""

    def randint(self, a, b):
        return a


class RecordingSoundBoard:
    def __init__(self):
        self.played = []

    def play(self, effect):
        self.played.append(effect)


@pytest.fixture
def sounds():
    return RecordingSoundBoard()


@pytest.fixture
def make_session(sounds):
    def _make(rng=None, **kwargs):
        kwargs.setdefault("surface", RecordingSurface())
        kwargs.setdefault("sounds", sounds)
        return GameSession(rng=rng or NeverRandom(), **kwargs)

    return _make


@pytest.fixture
def session(make_session):
    s = make_session()
    s.start()
    return s


@pytest.fixture
def make_entity():
    def _make(kind, x, y, w=10, h=10, sx=0.0, sy=0.0):
        return Entity(kind, x, y, sx=sx, sy=sy, w=w, h=h)

    return _make


@pytest.fixture
def adversary(make_entity):
    def _make(x, y):
        return make_entity(Kind.ADVERSARY, x, y, w=24, h=24, sy=5)

    return _make
