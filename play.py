"""
Play: a pool table you can shoot around.
Run: venv/bin/python play.py
Keys: 1/2/3 re-rack, M toggles mouse/keyboard mode, Space shoots and
←/→ aim in keyboard mode, Q quits. In mouse mode press on the cue ball,
drag to aim and release to shoot.
"""
import logging

from pooltable.renderer import Renderer
from pooltable.session import GameSession
from pooltable.table import Table
import pooltable as P

logging.basicConfig(level=logging.INFO, format='%(levelname)s %(name)s: %(message)s')

table = Table(width=P.TABLE_WIDTH)
session = GameSession(table)

print(f"Table: {table.width:.0f} x {table.height:.0f}, ball d={table.ball_diameter:.2f}, "
      f"pocket d={table.pocket_diameter:.2f}")
print(f"Balls on table: {len(session.balls)}")

Renderer().play(session, fps=P.FPS)
