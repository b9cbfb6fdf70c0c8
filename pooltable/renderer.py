import math
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import numpy as np

os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
import pygame

import pooltable as P
from pooltable.controls import TOGGLE_BUTTON, handle_event
from pooltable.session import GameSession


@dataclass
class AppearanceConfig:
    """Colours and stroke widths. Never touch game state."""
    felt_color: Tuple[int, int, int] = P.FELT_COLOR
    line_color: Tuple[int, int, int] = P.LINE_COLOR
    pocket_color: Tuple[int, int, int] = P.POCKET_COLOR
    aim_color: Tuple[int, int, int] = P.AIM_COLOR
    aim_width: int = P.AIM_WIDTH
    line_width: int = 2
    ball_colors: Dict[str, Tuple[int, int, int]] = field(
        default_factory=lambda: dict(P.BALL_COLORS))
    show_label: bool = True


class Renderer:
    """Maps session state → pixel frames."""

    def __init__(self, config: Optional[AppearanceConfig] = None):
        self.config = config or AppearanceConfig()
        self._font = None

    def draw(self, surface: pygame.Surface, session: GameSession):
        cfg = self.config
        table = session.table
        surface.fill(cfg.felt_color)
        self._draw_table(surface, table)

        pr = table.pocket_radius
        for pocket in table.pockets:
            pygame.draw.circle(surface, cfg.pocket_color,
                               (round(pocket.x), round(pocket.y)), round(pr))

        for ball in session.balls:
            x, y = ball.position
            center = (round(x), round(y))
            r = max(1, round(ball.radius))
            pygame.draw.circle(surface, cfg.ball_colors[ball.color], center, r)
            pygame.draw.circle(surface, (0, 0, 0), center, r, 1)

        if session.cue.shows_aim_line(session.mouse_mode):
            start, end = session.cue.aim_line(session.cue_ball.position)
            pygame.draw.line(surface, cfg.aim_color, start, end, cfg.aim_width)

        if cfg.show_label:
            self._draw_label(surface, session.mode_label)

    def _draw_table(self, surface: pygame.Surface, table):
        cfg = self.config
        pygame.draw.rect(surface, cfg.line_color,
                         pygame.Rect(0, 0, round(table.width), round(table.height)),
                         cfg.line_width)

        # D zone: right-hand half circle around the cue spawn
        cx, cy = table.d_zone_center
        r = table.d_zone_radius
        rect = pygame.Rect(round(cx - r), round(cy - r), round(2 * r), round(2 * r))
        pygame.draw.arc(surface, cfg.line_color, rect,
                        -math.pi / 2, math.pi / 2, cfg.line_width)

    def _draw_label(self, surface: pygame.Surface, text: str):
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 22)
        pygame.draw.rect(surface, (230, 230, 230), TOGGLE_BUTTON)
        pygame.draw.rect(surface, (0, 0, 0), TOGGLE_BUTTON, 1)
        label = self._font.render(text, True, (0, 0, 0))
        surface.blit(label, (TOGGLE_BUTTON.x + 6, TOGGLE_BUTTON.y + 5))

    def render(self, session: GameSession) -> np.ndarray:
        """Render single frame → (H, W, 3) uint8."""
        size = (round(session.table.width), round(session.table.height))
        surface = pygame.Surface(size)
        self.draw(surface, session)
        return pygame.surfarray.array3d(surface).transpose(1, 0, 2)

    def play(self, session: GameSession, fps: int = P.FPS):
        """Run the game in a pygame window. Press Q or close window to exit."""
        pygame.init()
        size = (round(session.table.width), round(session.table.height))
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption('Pool Table')
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if not handle_event(session, event):
                    running = False

            session.update()
            self.draw(screen, session)
            pygame.display.flip()
            clock.tick(fps)

        pygame.quit()
        self._font = None
