"""
Rigid-body seam: the game layer only talks to these two protocols.

- RigidBody:    position / velocity get+set, one-shot impulse
- PhysicsWorld: register circles and boxes, deregister, advance one tick

PymunkWorld is the shipped backend; tests swap in a recording fake.
Zero gravity: the table is seen from above.
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol

import numpy as np
import pymunk

import pooltable as P


class RigidBody(Protocol):
    position: np.ndarray
    velocity: np.ndarray

    def apply_impulse(self, ix: float, iy: float) -> None:
        ...


class PhysicsWorld(Protocol):
    def add_circle(self, x: float, y: float, radius: float,
                   restitution: float = P.BALL_RESTITUTION,
                   friction: float = P.BALL_FRICTION) -> RigidBody:
        ...

    def add_box(self, cx: float, cy: float, width: float, height: float,
                restitution: float = P.CUSHION_RESTITUTION,
                friction: float = P.CUSHION_FRICTION,
                static: bool = True) -> RigidBody:
        ...

    def remove(self, body: RigidBody) -> None:
        ...

    def step(self) -> None:
        ...


@dataclass
class WorldConfig:
    dt: float = P.DT
    n_substeps: int = P.N_SUBSTEPS
    gravity: float = P.GRAVITY
    damping: float = P.DAMPING
    ball_density: float = P.BALL_DENSITY
    # Shots arrive as per-step forces (mass·px/ms²). None → 1e6 · dt, which
    # turns one such force into the velocity change it causes over one step.
    impulse_scale: Optional[float] = None

    def __post_init__(self):
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.n_substeps < 1:
            raise ValueError(f"n_substeps must be >= 1, got {self.n_substeps}")
        if self.impulse_scale is None:
            self.impulse_scale = 1e6 * self.dt


class PymunkBody:
    """RigidBody backed by one pymunk body + shape pair."""

    def __init__(self, body: pymunk.Body, shape: pymunk.Shape,
                 impulse_scale: float = 1.0):
        self.body = body
        self.shape = shape
        self.impulse_scale = impulse_scale

    @property
    def position(self) -> np.ndarray:
        return np.array([self.body.position.x, self.body.position.y])

    @position.setter
    def position(self, p):
        self.body.position = float(p[0]), float(p[1])

    @property
    def velocity(self) -> np.ndarray:
        return np.array([self.body.velocity.x, self.body.velocity.y])

    @velocity.setter
    def velocity(self, v):
        self.body.velocity = float(v[0]), float(v[1])

    def apply_impulse(self, ix: float, iy: float) -> None:
        s = self.impulse_scale
        self.body.apply_impulse_at_world_point((ix * s, iy * s),
                                               self.body.position)


class PymunkWorld:
    """
    pymunk.Space wrapper.

    Step: space.step(dt / n_substeps) × n_substeps
    """

    def __init__(self, config: Optional[WorldConfig] = None):
        self.config = config or WorldConfig()
        self.space = pymunk.Space()
        self.space.gravity = (0.0, self.config.gravity)
        self.space.damping = self.config.damping
        self.bodies: List[PymunkBody] = []
        self.statics: List[PymunkBody] = []
        self.time: float = 0.0

    def add_circle(self, x: float, y: float, radius: float,
                   restitution: float = P.BALL_RESTITUTION,
                   friction: float = P.BALL_FRICTION) -> PymunkBody:
        mass = self.config.ball_density * np.pi * radius ** 2
        body = pymunk.Body(mass, pymunk.moment_for_circle(mass, 0, radius))
        body.position = float(x), float(y)
        shape = pymunk.Circle(body, radius)
        shape.elasticity = restitution
        shape.friction = friction
        self.space.add(body, shape)

        handle = PymunkBody(body, shape, self.config.impulse_scale)
        self.bodies.append(handle)
        return handle

    def add_box(self, cx: float, cy: float, width: float, height: float,
                restitution: float = P.CUSHION_RESTITUTION,
                friction: float = P.CUSHION_FRICTION,
                static: bool = True) -> PymunkBody:
        if static:
            body = pymunk.Body(body_type=pymunk.Body.STATIC)
        else:
            mass = self.config.ball_density * width * height
            body = pymunk.Body(mass, pymunk.moment_for_box(mass, (width, height)))
        body.position = float(cx), float(cy)
        shape = pymunk.Poly.create_box(body, (width, height))
        shape.elasticity = restitution
        shape.friction = friction
        self.space.add(body, shape)

        handle = PymunkBody(body, shape, self.config.impulse_scale)
        (self.statics if static else self.bodies).append(handle)
        return handle

    def remove(self, body: PymunkBody) -> None:
        self.space.remove(body.body, body.shape)
        if body in self.bodies:
            self.bodies.remove(body)
        else:
            self.statics.remove(body)

    def step(self) -> None:
        sub_dt = self.config.dt / self.config.n_substeps
        for _ in range(self.config.n_substeps):
            self.space.step(sub_dt)
        self.time += self.config.dt
