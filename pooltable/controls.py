"""
pygame events → session commands.

  1 / 2 / 3        re-rack (start / random reds / random all)
  space            shoot (keyboard mode)
  ← / →            turn the aim (keyboard mode)
  m, label click   toggle mouse / keyboard mode
  mouse            move aims, press on cue ball arms, release shoots
"""

import pygame

from pooltable.session import (GameSession, RACK_RANDOM_ALL,
                               RACK_RANDOM_REDS, RACK_START)

RACK_KEYS = {
    pygame.K_1: RACK_START,
    pygame.K_2: RACK_RANDOM_REDS,
    pygame.K_3: RACK_RANDOM_ALL,
}

TOGGLE_BUTTON = pygame.Rect(10, 10, 190, 24)


def handle_event(session: GameSession, event) -> bool:
    """Apply one event. Returns False when the loop should stop."""
    if event.type == pygame.QUIT:
        return False

    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_q:
            return False
        if event.key in RACK_KEYS:
            session.rack(RACK_KEYS[event.key])
        elif event.key == pygame.K_SPACE:
            session.shoot_key()
        elif event.key == pygame.K_LEFT:
            session.rotate_cue(-1)
        elif event.key == pygame.K_RIGHT:
            session.rotate_cue(1)
        elif event.key == pygame.K_m:
            session.toggle_mode()

    elif event.type == pygame.MOUSEMOTION:
        session.move_pointer(*event.pos)

    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if TOGGLE_BUTTON.collidepoint(event.pos):
            session.toggle_mode()
        else:
            session.press(*event.pos)

    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        if not TOGGLE_BUTTON.collidepoint(event.pos):
            session.release(*event.pos)

    return True
