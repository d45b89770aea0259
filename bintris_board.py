"""Board helpers: collide, merge, 2x2 block clear, gravity, cascade"""
import logging
from typing import List, Optional
from bintris_piece import Piece, Grid, COLS, ROWS, EMPTY

log = logging.getLogger(__name__)

Board = List[List[int]]

def new_board() -> Board:
    return [[EMPTY]*COLS for _ in range(ROWS)]

def collide(board: Board, piece: Piece, dx: int = 0, dy: int = 0,
            shape: Optional[Grid] = None) -> bool:
    """Return True if the piece, shifted by (dx, dy) and optionally given a
    candidate shape, leaves the walls/floor or overlaps a locked cell.

    Rows above the top are only checked against the side walls.
    """
    shape = piece.shape if shape is None else shape
    for y,row in enumerate(shape):
        for x,v in enumerate(row):
            if not v: continue
            bx,by = piece.x+x+dx, piece.y+y+dy
            if bx<0 or bx>=COLS or by>=ROWS: return True
            if by>=0 and board[by][bx]: return True
    return False

def merge(board: Board, piece: Piece):
    for bx,by,v in piece.cells():
        if by>=0: board[by][bx]=v

def clear_blocks(board: Board) -> int:
    """Empty every 2x2 square of one digit and return how many matched.

    Matches are collected on the untouched board first, so overlapping
    squares all count and a shared cell is simply cleared twice.
    """
    marked=set(); c=0
    for y in range(ROWS-1):
        for x in range(COLS-1):
            v=board[y][x]
            if v and board[y][x+1]==v and board[y+1][x]==v and board[y+1][x+1]==v:
                marked.update(((x,y),(x+1,y),(x,y+1),(x+1,y+1))); c+=1
    for x,y in marked:
        board[y][x]=EMPTY
    return c

def apply_gravity(board: Board):
    for x in range(COLS):
        stack=[board[y][x] for y in range(ROWS) if board[y][x]]
        col=[EMPTY]*(ROWS-len(stack))+stack
        for y in range(ROWS):
            board[y][x]=col[y]

def settle(board: Board) -> int:
    """Clear, drop and re-check until a pass finds nothing; returns total matches."""
    total=0; passes=0
    while True:
        c=clear_blocks(board)
        if not c: break
        total+=c; passes+=1
        apply_gravity(board)
    if passes>1:
        log.debug("cascade: %d blocks over %d passes", total, passes)
    return total

def block_count(board: Board) -> int:
    return sum(1 for r in board for v in r if v)
