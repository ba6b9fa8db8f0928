"""
Game controller: owns the board, the active/next pieces and the session.

Every public operation is synchronous and returns the list of events it
produced, so rendering and audio stay outside of the rules.

    menu ──start──▶ playing ◀──toggle_pause──▶ paused
                       │
                     lock with row 0 occupied
                       ▼
                    gameOver ──start──▶ playing
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional

from tetris_config import CONFIG, level_for_lines, drop_interval_ms
from tetris_board import Board, new_board, piece_collides, merge, sweep, top_row_filled
from tetris_events import Event, START, ROTATE, LOCK, LINE_CLEAR, GAME_OVER, PAUSE, RESUME
from tetris_piece import Piece
from tetris_rng import PieceGenerator

log = logging.getLogger(__name__)

MENU = "menu"
PLAYING = "playing"
PAUSED = "paused"
GAME_OVER_STATE = "gameOver"


@dataclass
class Session:
    score: int = 0
    lines: int = 0
    level: int = 1
    drop_ms: int = 1000
    state: str = MENU

    @staticmethod
    def fresh(state: str = MENU) -> "Session":
        return Session(0, 0, 1, drop_interval_ms(1), state)


class Game:
    def __init__(self, rows: Optional[int] = None, cols: Optional[int] = None,
                 seed: Optional[int] = None, generator=None):
        self.rows = rows or CONFIG["ROWS"]
        self.cols = cols or CONFIG["COLS"]
        self.board: Board = new_board(self.rows, self.cols)
        # anything with next_piece() will do; tests feed fixed sequences
        self.gen = generator or PieceGenerator(self.cols, seed)
        self.session = Session.fresh()
        self.current: Piece = self.gen.next_piece()
        self.next: Piece = self.gen.next_piece()
        self.drop_acc = 0.0

    @property
    def state(self) -> str:
        return self.session.state

    @property
    def playing(self) -> bool:
        return self.session.state == PLAYING

    # ---------- state transitions ----------
    def _reset(self):
        self.board = new_board(self.rows, self.cols)
        self.session = Session.fresh(PLAYING)
        self.current = self.gen.next_piece()
        self.next = self.gen.next_piece()
        self.drop_acc = 0.0

    def start(self) -> List[Event]:
        if self.session.state not in (MENU, GAME_OVER_STATE):
            return []
        self._reset()
        log.info("game started (%dx%d)", self.rows, self.cols)
        return [Event(START)]

    def restart(self) -> List[Event]:
        self._reset()
        log.info("game restarted")
        return [Event(START)]

    def toggle_pause(self) -> List[Event]:
        s = self.session
        if s.state == PLAYING:
            s.state = PAUSED
            log.debug("paused")
            return [Event(PAUSE)]
        if s.state == PAUSED:
            s.state = PLAYING
            log.debug("resumed")
            return [Event(RESUME)]
        return []

    # ---------- piece commands ----------
    def move(self, dx: int) -> List[Event]:
        if not self.playing:
            return []
        t = self.current.moved(dx, 0)
        if not piece_collides(self.board, t):
            self.current = t
        return []

    def rotate(self) -> List[Event]:
        """Rotate clockwise in place; a colliding rotation is dropped."""
        if not self.playing:
            return []
        t = self.current.rotated()
        if not piece_collides(self.board, t):
            self.current = t
        return [Event(ROTATE)]

    def soft_drop(self) -> List[Event]:
        if not self.playing:
            return []
        return self._step_down()

    def update(self, dt_ms: float) -> List[Event]:
        """Advance the gravity timer; at most one row per call."""
        if not self.playing:
            return []
        self.drop_acc += dt_ms
        if self.drop_acc > self.session.drop_ms:
            return self._step_down()
        return []

    # ---------- gravity, lock, clear ----------
    def _step_down(self) -> List[Event]:
        self.drop_acc = 0.0
        t = self.current.moved(0, 1)
        if not piece_collides(self.board, t):
            self.current = t
            return []
        return self._lock()

    def _lock(self) -> List[Event]:
        merge(self.board, self.current)
        log.debug("locked %s at (%d, %d)", self.current.t, self.current.x, self.current.y)
        events = [Event(LOCK)]
        cleared = self._clear_lines()
        if cleared:
            events.append(Event(LINE_CLEAR, cleared))
        if top_row_filled(self.board):
            self.session.state = GAME_OVER_STATE
            log.info("game over: score %d, lines %d, level %d",
                     self.session.score, self.session.lines, self.session.level)
            events.append(Event(GAME_OVER))
            return events
        self.current = self.next
        self.next = self.gen.next_piece()
        return events

    def _clear_lines(self) -> int:
        self.board, c = sweep(self.board)
        if c:
            s = self.session
            s.lines += c
            s.score += c * CONFIG["LINE_SCORE"] * s.level
            s.level = level_for_lines(s.lines)
            s.drop_ms = drop_interval_ms(s.level)
            log.debug("cleared %d line(s); score %d level %d", c, s.score, s.level)
        return c
