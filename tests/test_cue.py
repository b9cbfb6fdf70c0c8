import math

import pytest

import pooltable as P
from pooltable.cue import ARMED, DISARMED, IDLE_AIMING, Cue
from tests.conftest import FakeBody


class TestCue:

    def test_defaults(self):
        cue = Cue()
        assert cue.is_aiming is True
        assert cue.power == P.CUE_POWER
        assert cue.strength == P.SHOT_STRENGTH == 0.00035
        assert cue.angle == 0.0

    def test_aim_at_uses_atan2(self):
        cue = Cue()
        cue.aim_at((100, 100), (100, 50))
        assert cue.angle == pytest.approx(-math.pi / 2)
        cue.aim_at((100, 100), (0, 100))
        assert cue.angle == pytest.approx(math.pi)

    @pytest.mark.parametrize("theta,power", [(0.0, 50), (0.3, 50), (-2.0, 80), (math.pi / 2, 10)])
    def test_impulse(self, theta, power):
        cue = Cue(power=power)
        cue.angle = theta
        ix, iy = cue.impulse()
        assert ix == pytest.approx(power * 0.00035 * math.cos(theta))
        assert iy == pytest.approx(power * 0.00035 * math.sin(theta))

    def test_shoot_applies_one_impulse(self):
        cue = Cue()
        cue.angle = 0.7
        body = FakeBody(0, 0)
        cue.shoot(body, mouse_mode=False)
        assert len(body.impulses) == 1
        ix, iy = body.impulses[0]
        assert ix == pytest.approx(50 * 0.00035 * math.cos(0.7))
        assert iy == pytest.approx(50 * 0.00035 * math.sin(0.7))

    def test_mouse_shot_disarms(self):
        cue = Cue()
        cue.shoot(FakeBody(0, 0), mouse_mode=True)
        assert cue.is_aiming is False
        assert cue.state(mouse_mode=True) == DISARMED

    def test_keyboard_shot_keeps_flag(self):
        cue = Cue()
        cue.shoot(FakeBody(0, 0), mouse_mode=False)
        assert cue.is_aiming is True

    def test_states(self):
        cue = Cue()
        assert cue.state(mouse_mode=True) == ARMED
        assert cue.state(mouse_mode=False) == IDLE_AIMING
        cue.is_aiming = False
        assert cue.state(mouse_mode=False) == IDLE_AIMING

    def test_aim_line_visibility(self):
        cue = Cue()
        cue.is_aiming = False
        assert not cue.shows_aim_line(mouse_mode=True)
        assert cue.shows_aim_line(mouse_mode=False)
        cue.is_aiming = True
        assert cue.shows_aim_line(mouse_mode=True)

    def test_aim_line_endpoints(self):
        cue = Cue()
        cue.angle = math.pi / 2
        start, end = cue.aim_line((160, 200))
        assert start == (160.0, 200.0)
        assert end == pytest.approx((160.0, 300.0))

    def test_rotate_wraps(self):
        cue = Cue()
        cue.rotate(P.AIM_STEP)
        assert cue.angle == pytest.approx(P.AIM_STEP)
        cue.angle = math.pi - 0.01
        cue.rotate(0.02)
        assert cue.angle == pytest.approx(-math.pi + 0.01)
