import numpy as np

import pooltable as P
from pooltable.engine import PhysicsWorld

CUE_COLOR = 'white'


class Ball:
    """One physics body plus a colour tag. Registers itself on creation."""

    def __init__(self, world: PhysicsWorld, x: float, y: float, color: str,
                 radius: float):
        if color not in P.BALL_COLORS:
            raise ValueError(f"Unknown ball color: {color!r}")
        self.world = world
        self.color = color
        self.radius = radius
        self.body = world.add_circle(x, y, radius,
                                     restitution=P.BALL_RESTITUTION,
                                     friction=P.BALL_FRICTION)
        self.removed = False

    def __repr__(self):
        x, y = self.position
        return f"Ball({self.color}, x={x:.1f}, y={y:.1f})"

    @property
    def is_cue_ball(self) -> bool:
        return self.color == CUE_COLOR

    @property
    def position(self) -> np.ndarray:
        return np.asarray(self.body.position, dtype=float)

    @property
    def velocity(self) -> np.ndarray:
        return np.asarray(self.body.velocity, dtype=float)

    def place(self, x: float, y: float):
        """Teleport to (x, y) and stop dead."""
        self.body.position = np.array([x, y], dtype=float)
        self.body.velocity = np.zeros(2)

    def remove(self):
        if not self.removed:
            self.world.remove(self.body)
            self.removed = True
