"""Integration against the real pymunk backend."""

import math

import numpy as np
import pytest

from pooltable.engine import PymunkWorld, WorldConfig
from pooltable.session import (GameSession, RACK_RANDOM_ALL,
                               RACK_RANDOM_REDS, build_world)
from pooltable.table import Table


@pytest.fixture()
def world():
    return PymunkWorld(WorldConfig())


class TestWorldConfig:

    def test_defaults(self):
        cfg = WorldConfig()
        assert cfg.gravity == 0.0
        assert cfg.impulse_scale == pytest.approx(1e6 * cfg.dt)

    def test_explicit_impulse_scale(self):
        assert WorldConfig(impulse_scale=2.0).impulse_scale == 2.0

    @pytest.mark.parametrize("kwargs", [{'dt': 0}, {'n_substeps': 0}])
    def test_rejects_bad_values(self, kwargs):
        with pytest.raises(ValueError):
            WorldConfig(**kwargs)


class TestPymunkWorld:

    def test_gravity_disabled(self, world):
        body = world.add_circle(100, 100, 10)
        for _ in range(30):
            world.step()
        assert body.position == pytest.approx([100.0, 100.0])

    def test_add_remove(self, world):
        body = world.add_circle(50, 50, 10)
        world.add_box(0, 0, 100, 10)
        assert len(world.bodies) == 1 and len(world.statics) == 1
        world.remove(body)
        assert world.bodies == []
        assert len(world.space.shapes) == 1

    def test_position_velocity_roundtrip(self, world):
        body = world.add_circle(50, 50, 10)
        body.position = (70.0, 80.0)
        body.velocity = (1.5, -2.0)
        assert body.position == pytest.approx([70.0, 80.0])
        assert body.velocity == pytest.approx([1.5, -2.0])

    def test_impulse_changes_velocity_once(self, world):
        body = world.add_circle(200, 200, 10)
        body.apply_impulse(0.01, 0.0)
        v0 = body.velocity.copy()
        assert v0[0] > 0 and v0[1] == pytest.approx(0.0)
        world.step()
        # damping only ever slows it down
        assert 0 < body.velocity[0] <= v0[0]

    def test_time_advances(self, world):
        world.step()
        world.step()
        assert world.time == pytest.approx(2 * world.config.dt)


class TestSessionOnPymunk:

    def test_cushions_registered(self):
        table = Table()
        world = build_world(table)
        assert len(world.statics) == 4
        assert world.bodies == []

    def test_rack_keeps_world_in_sync(self):
        session = GameSession(seed=1)
        assert len(session.world.bodies) == 18
        session.rack(RACK_RANDOM_REDS)
        assert len(session.world.bodies) == 16
        session.rack(RACK_RANDOM_ALL)
        session.rack(RACK_RANDOM_ALL)
        assert len(session.world.bodies) == 18
        assert len(session.world.space.bodies) >= 18

    def test_shot_moves_cue_ball_along_aim(self):
        session = GameSession(seed=1, mouse_mode=False)
        session.cue.angle = math.pi
        start = session.cue_ball.position.copy()
        session.shoot_key()
        for _ in range(5):
            session.update()
        moved = session.cue_ball.position - start
        assert moved[0] < -1.0
        assert abs(moved[1]) < 1e-6

    def test_balls_stay_on_table(self):
        session = GameSession(seed=2, mouse_mode=False)
        session.cue.angle = 0.0
        session.shoot_key()
        for _ in range(240):
            session.update()
        for ball in session.balls:
            x, y = ball.position
            assert -1.0 <= x <= session.table.width + 1.0
            assert -1.0 <= y <= session.table.height + 1.0
        assert sum(b.is_cue_ball for b in session.balls) == 1
        assert np.all(np.isfinite(session.cue_ball.velocity))
