"""Key mapping: pygame keys -> game actions"""
from typing import List, Optional
import pygame
from tetris_events import Event

LEFT, RIGHT, DOWN, ROTATE, PAUSE, START, RESTART, QUIT = (
    "left", "right", "down", "rotate", "pause", "start", "restart", "quit")

KEYMAP = {
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_UP: ROTATE, pygame.K_w: ROTATE, pygame.K_r: ROTATE,
    pygame.K_SPACE: PAUSE, pygame.K_p: PAUSE,
    pygame.K_RETURN: START, pygame.K_KP_ENTER: START,
    pygame.K_n: RESTART,
    pygame.K_ESCAPE: QUIT,
}

def action_for(key: int) -> Optional[str]:
    return KEYMAP.get(key)

def dispatch(game, action: Optional[str]) -> List[Event]:
    """Apply an action to the game. Unknown or None actions do nothing."""
    if action == LEFT: return game.move(-1)
    if action == RIGHT: return game.move(1)
    if action == DOWN: return game.soft_drop()
    if action == ROTATE: return game.rotate()
    if action == PAUSE: return game.toggle_pause()
    if action == START: return game.start()
    if action == RESTART: return game.restart()
    return []
