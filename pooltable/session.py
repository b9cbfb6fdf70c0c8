"""
Game session: owns the table, balls, cue and input mode.

Tick: world step → pocket check (reverse order) → cue aim

Racks:
  RACK_START        15-red triangle, blue on the centre spot, black on its spot
  RACK_RANDOM_REDS  15 reds at uniform-random positions
  RACK_RANDOM_ALL   15 reds + blue + black at uniform-random positions
Every rack ends with a fresh white ball at the spawn point.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

import pooltable as P
from pooltable.ball import CUE_COLOR, Ball
from pooltable.cue import Cue
from pooltable.engine import PhysicsWorld, PymunkWorld, WorldConfig
from pooltable.table import Table

_logger = logging.getLogger(__name__)

RACK_START = 1
RACK_RANDOM_REDS = 2
RACK_RANDOM_ALL = 3
RACK_MODES = (RACK_START, RACK_RANDOM_REDS, RACK_RANDOM_ALL)


def build_world(table: Table, config: Optional[WorldConfig] = None) -> PymunkWorld:
    """pymunk world with the four static cushions in place."""
    world = PymunkWorld(config)
    for c in table.cushions:
        world.add_box(c.cx, c.cy, c.width, c.height,
                      restitution=P.CUSHION_RESTITUTION,
                      friction=P.CUSHION_FRICTION)
    return world


class GameSession:

    def __init__(self, table: Optional[Table] = None,
                 world: Optional[PhysicsWorld] = None,
                 cue: Optional[Cue] = None,
                 mouse_mode: bool = True,
                 rack_mode: int = RACK_START,
                 seed: Optional[int] = None):
        self.table = table or Table()
        self.world = world if world is not None else build_world(self.table)
        self.cue = cue or Cue()
        self.mouse_mode = mouse_mode
        self.rng = np.random.RandomState(seed)
        self.balls: List[Ball] = []
        self.cue_ball: Optional[Ball] = None
        self.pointer: Tuple[float, float] = self.table.cue_spawn
        self.rack_mode = rack_mode
        self.rack(rack_mode)

    # Racking

    def rack(self, mode: int):
        if mode not in RACK_MODES:
            raise ValueError(f"Unknown rack mode: {mode}")
        if mode == RACK_START:
            self.setup_balls()
        elif mode == RACK_RANDOM_REDS:
            self.randomize_balls(include_colors=False)
        else:
            self.randomize_balls(include_colors=True)
        self.create_cue_ball()
        self.rack_mode = mode
        _logger.info("Racked mode %d: %d balls", mode, len(self.balls))

    def clear_balls(self):
        for ball in self.balls:
            ball.remove()
        self.balls = []
        self.cue_ball = None

    def setup_balls(self):
        self.clear_balls()
        t = self.table
        d = t.ball_diameter
        start_x = t.width * P.RACK_APEX_X
        start_y = t.height / 2

        for row in range(P.RACK_ROWS):
            for i in range(row + 1):
                x = start_x + row * d * P.RACK_ROW_SHIFT
                y = start_y + i * d - row * d / 2
                self._add_ball(x, y, 'red')

        self._add_ball(t.width * P.BLUE_SPOT[0], t.height * P.BLUE_SPOT[1], 'blue')
        self._add_ball(t.width * P.BLACK_SPOT[0], t.height * P.BLACK_SPOT[1], 'black')

    def randomize_balls(self, include_colors: bool = False):
        self.clear_balls()
        for _ in range(P.N_REDS):
            self._add_ball(*self.random_position(), 'red')
        if include_colors:
            for color in ('blue', 'black'):
                self._add_ball(*self.random_position(), color)

    def random_position(self) -> Tuple[float, float]:
        (x0, x1), (y0, y1) = self.table.placement_bounds
        return float(self.rng.uniform(x0, x1)), float(self.rng.uniform(y0, y1))

    def create_cue_ball(self) -> Ball:
        self.cue_ball = self._add_ball(*self.table.cue_spawn, CUE_COLOR)
        return self.cue_ball

    def _add_ball(self, x: float, y: float, color: str) -> Ball:
        ball = Ball(self.world, x, y, color, self.table.ball_radius)
        self.balls.append(ball)
        return ball

    # Pockets

    def pocket_of(self, ball: Ball) -> Optional[int]:
        """Index of the first pocket the ball has dropped into, else None."""
        pockets = self.table.pocket_array
        x, y = ball.position
        dist = np.hypot(pockets[:, 0] - x, pockets[:, 1] - y)
        hits = np.flatnonzero(dist < self.table.pot_distance)
        return int(hits[0]) if hits.size else None

    def reset_cue_ball(self):
        self.cue_ball.place(*self.table.cue_spawn)

    def check_pockets(self) -> List[Ball]:
        """Pot object balls, respawn the cue ball. Returns the balls removed."""
        potted = []
        for i in range(len(self.balls) - 1, -1, -1):
            ball = self.balls[i]
            pocket = self.pocket_of(ball)
            if pocket is None:
                continue
            if ball is self.cue_ball:
                _logger.debug("Cue ball in pocket %d, respawning", pocket)
                self.reset_cue_ball()
            else:
                _logger.debug("%s potted in pocket %d", ball.color, pocket)
                ball.remove()
                del self.balls[i]
                potted.append(ball)
        return potted

    # Tick

    def aim(self):
        if self.mouse_mode:
            self.cue.aim_at(self.cue_ball.position, self.pointer)

    def update(self) -> List[Ball]:
        self.world.step()
        potted = self.check_pockets()
        self.aim()
        return potted

    # Input commands

    @property
    def mode_label(self) -> str:
        return "Toggle Mode: Mouse" if self.mouse_mode else "Toggle Mode: Keyboard"

    def toggle_mode(self) -> bool:
        self.mouse_mode = not self.mouse_mode
        _logger.info("Switched to %s mode", "mouse" if self.mouse_mode else "keyboard")
        return self.mouse_mode

    def move_pointer(self, x: float, y: float):
        self.pointer = (float(x), float(y))

    def press(self, x: float, y: float) -> bool:
        """Arm the cue if the press lands on the cue ball (mouse mode)."""
        self.move_pointer(x, y)
        if not self.mouse_mode:
            return False
        cx, cy = self.cue_ball.position
        if np.hypot(x - cx, y - cy) < self.table.ball_diameter:
            self.cue.is_aiming = True
            return True
        return False

    def release(self, x: float, y: float) -> bool:
        """Shoot if armed (mouse mode)."""
        self.move_pointer(x, y)
        if self.mouse_mode and self.cue.is_aiming:
            self.shoot()
            return True
        return False

    def shoot(self) -> Tuple[float, float]:
        impulse = self.cue.shoot(self.cue_ball.body, self.mouse_mode)
        _logger.debug("Shot at %.3f rad, impulse (%.5f, %.5f)",
                      self.cue.angle, *impulse)
        return impulse

    def shoot_key(self) -> bool:
        """Space bar: shoot, keyboard mode only."""
        if self.mouse_mode:
            return False
        self.shoot()
        return True

    def rotate_cue(self, direction: int) -> bool:
        """Arrow keys: turn the aim, keyboard mode only."""
        if self.mouse_mode:
            return False
        self.cue.rotate(direction * P.AIM_STEP)
        return True

    def color_counts(self) -> dict:
        counts = {}
        for ball in self.balls:
            counts[ball.color] = counts.get(ball.color, 0) + 1
        return counts
