"""Uniform piece generator"""
import random
from typing import Optional
from tetris_piece import Piece, SHAPES

class PieceGenerator:
    PIECES = list(SHAPES)

    def __init__(self, cols: int, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        # an explicit rng wins over the seed
        self.rng = rng if rng is not None else random.Random(seed)
        self.cols = cols

    def next_type(self) -> str:
        return self.rng.choice(self.PIECES)

    def next_piece(self) -> Piece:
        return Piece.spawn(self.next_type(), self.cols)
