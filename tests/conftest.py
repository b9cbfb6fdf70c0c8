"""Shared fixtures: a recording physics world and ready-made sessions."""

import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('PYGAME_HIDE_SUPPORT_PROMPT', '1')

import numpy as np
import pytest

from pooltable.session import GameSession
from pooltable.table import Table


class FakeBody:
    """Stands in for an engine body; remembers every impulse."""

    def __init__(self, x, y, radius=0.0, static=False):
        self.position = np.array([x, y], dtype=float)
        self.velocity = np.zeros(2)
        self.radius = radius
        self.static = static
        self.impulses = []

    def apply_impulse(self, ix, iy):
        self.impulses.append((ix, iy))


class FakeWorld:
    """PhysicsWorld that never moves anything; step() only counts."""

    def __init__(self):
        self.bodies = []
        self.removed = []
        self.steps = 0

    def add_circle(self, x, y, radius, restitution=0.0, friction=0.0):
        body = FakeBody(x, y, radius)
        self.bodies.append(body)
        return body

    def add_box(self, cx, cy, width, height, restitution=0.0, friction=0.0,
                static=True):
        body = FakeBody(cx, cy, static=static)
        self.bodies.append(body)
        return body

    def remove(self, body):
        self.bodies.remove(body)
        self.removed.append(body)

    def step(self):
        self.steps += 1


@pytest.fixture()
def table():
    return Table(width=800)


@pytest.fixture()
def fake_world():
    return FakeWorld()


@pytest.fixture()
def session(table, fake_world):
    return GameSession(table, world=fake_world, seed=7)
