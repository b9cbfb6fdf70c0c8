"""
Cue: aim angle, shot power and the armed flag.

    mouse mode:     angle follows the pointer; press on the cue ball arms,
                    release while armed shoots and disarms
    keyboard mode:  angle turned by explicit rotate commands; shoot fires
                    at once and the aim line is always shown

Shot impulse = (cos θ, sin θ) · power · strength, applied once.
"""

import math
from typing import Tuple

import pooltable as P
from pooltable.engine import RigidBody

IDLE_AIMING = 'idle-aiming'
ARMED = 'armed'
DISARMED = 'disarmed'


class Cue:

    def __init__(self, power: float = P.CUE_POWER,
                 strength: float = P.SHOT_STRENGTH):
        self.is_aiming = True
        self.power = power
        self.strength = strength
        self.angle = 0.0

    def state(self, mouse_mode: bool) -> str:
        if not mouse_mode:
            return IDLE_AIMING
        return ARMED if self.is_aiming else DISARMED

    def aim_at(self, origin, target):
        dx = target[0] - origin[0]
        dy = target[1] - origin[1]
        self.angle = math.atan2(dy, dx)

    def rotate(self, delta: float):
        self.angle = math.atan2(math.sin(self.angle + delta),
                                math.cos(self.angle + delta))

    def impulse(self) -> Tuple[float, float]:
        scale = self.power * self.strength
        return math.cos(self.angle) * scale, math.sin(self.angle) * scale

    def shoot(self, body: RigidBody, mouse_mode: bool) -> Tuple[float, float]:
        ix, iy = self.impulse()
        body.apply_impulse(ix, iy)
        if mouse_mode:
            self.is_aiming = False
        return ix, iy

    def shows_aim_line(self, mouse_mode: bool) -> bool:
        return self.is_aiming or not mouse_mode

    def aim_line(self, origin, length: float = P.AIM_LINE_LENGTH):
        """((x0, y0), (x1, y1)) from the cue ball along the aim."""
        x, y = float(origin[0]), float(origin[1])
        return (x, y), (x + math.cos(self.angle) * length,
                        y + math.sin(self.angle) * length)
