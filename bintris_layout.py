# bintris_layout.py
from dataclasses import dataclass
from bintris_config import CONFIG
from bintris_piece import COLS, ROWS

@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

    @property
    def board_center(self):
        return self.board_x + self.board_w // 2, self.board_y + self.board_h // 2

def compute_dims() -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = max(180, cell * 6)

    board_w = COLS * cell
    board_h = ROWS * cell

    board_x = board_y = panel_y = margin
    panel_x = board_x + board_w + margin

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=panel_x + panel_w + margin,
        total_h=margin + board_h + margin,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y,
    )
