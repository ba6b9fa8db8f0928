"""Piece model, shapes, clockwise rotation"""
from dataclasses import dataclass
from typing import List

Shape = List[List[int]]

SHAPES = {
    "I": [[1,1,1,1]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1]],
    "J": [[1,0,0],[1,1,1]],
    "L": [[0,0,1],[1,1,1]],
    "S": [[1,1,0],[0,1,1]],
    "Z": [[0,1,1],[1,1,0]],
}

COLORS = {
    "I": "#00ffff",
    "O": "#ffff00",
    "T": "#ff00ff",
    "J": "#00ff00",
    "L": "#ff8800",
    "S": "#0088ff",
    "Z": "#ff0088",
}

def rotate_cw(m: Shape) -> Shape: return [list(r) for r in zip(*m[::-1])]

@dataclass
class Piece:
    t: str
    shape: Shape
    color: str
    x: int = 0
    y: int = 0

    @staticmethod
    def spawn(t: str, cols: int) -> "Piece":
        s = [r[:] for r in SHAPES[t]]
        w = len(s[0])
        return Piece(t, s, COLORS[t], cols//2 - w//2, 0)

    @property
    def width(self) -> int: return len(self.shape[0])

    @property
    def height(self) -> int: return len(self.shape)

    def moved(self, dx: int, dy: int) -> "Piece":
        return Piece(self.t, [r[:] for r in self.shape], self.color, self.x+dx, self.y+dy)

    def rotated(self) -> "Piece":
        """Same piece turned 90 degrees clockwise, position unchanged."""
        return Piece(self.t, rotate_cw(self.shape), self.color, self.x, self.y)

    def cells(self):
        """Absolute (x, y) of every occupied cell."""
        return [(self.x+c, self.y+r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]
