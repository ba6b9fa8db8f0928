import pygame

from tetris_events import Event, START
from tetris_game import Game, PLAYING
from tetris_input import (DOWN, LEFT, PAUSE, QUIT, RESTART, RIGHT, ROTATE,
                          START as START_ACTION, action_for, dispatch)


def test_default_key_bindings():
    assert action_for(pygame.K_LEFT) == action_for(pygame.K_a) == LEFT
    assert action_for(pygame.K_RIGHT) == action_for(pygame.K_d) == RIGHT
    assert action_for(pygame.K_DOWN) == action_for(pygame.K_s) == DOWN
    assert action_for(pygame.K_UP) == action_for(pygame.K_r) == ROTATE
    assert action_for(pygame.K_SPACE) == action_for(pygame.K_p) == PAUSE
    assert action_for(pygame.K_RETURN) == START_ACTION
    assert action_for(pygame.K_n) == RESTART
    assert action_for(pygame.K_ESCAPE) == QUIT


def test_unknown_key_is_ignored():
    g = Game(20, 10, seed=1)
    g.start()
    x, y = g.current.x, g.current.y
    assert action_for(pygame.K_F12) is None
    assert dispatch(g, action_for(pygame.K_F12)) == []
    assert (g.current.x, g.current.y) == (x, y)


def test_dispatch_drives_the_game():
    g = Game(20, 10, seed=1)
    assert dispatch(g, START_ACTION) == [Event(START)]
    assert g.state == PLAYING
    x = g.current.x
    dispatch(g, LEFT)
    assert g.current.x == x - 1
    dispatch(g, DOWN)
    assert g.current.y == 1
