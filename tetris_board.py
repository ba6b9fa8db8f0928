"""Board helpers: collide, merge, sweep"""
from typing import Optional, List, Tuple
from tetris_piece import Piece, Shape

Board = List[List[Optional[str]]]

def new_board(rows: int, cols: int) -> Board:
    if rows < 4 or cols < 4:
        raise ValueError(f"board must be at least 4x4, got {rows}x{cols}")
    return [[None]*cols for _ in range(rows)]

def collide(board: Board, shape: Shape, px: int, py: int) -> bool:
    rows, cols = len(board), len(board[0])
    for y,row in enumerate(shape):
        for x,v in enumerate(row):
            if not v: continue
            bx,by = px+x, py+y
            if bx<0 or bx>=cols or by>=rows: return True
            # rows above the top are never checked
            if by>=0 and board[by][bx]: return True
    return False

def piece_collides(board: Board, piece: Piece) -> bool:
    return collide(board, piece.shape, piece.x, piece.y)

def merge(board: Board, piece: Piece):
    for y,r in enumerate(piece.shape):
        for x,v in enumerate(r):
            if v:
                by = piece.y+y
                if by>=0: board[by][piece.x+x]=piece.color

def sweep(board: Board) -> Tuple[Board, int]:
    """Drop every full row; return a fresh compacted board and the count."""
    cols = len(board[0])
    kept = [row[:] for row in board if not all(row)]
    c = len(board) - len(kept)
    return [[None]*cols for _ in range(c)] + kept, c

def top_row_filled(board: Board) -> bool:
    return any(board[0])
