import os

CONFIG = {
    "CELL_SIZE": 30,
    "DAS_MS": 170,
    "ARR_MS": 50,
    "SEED": None,
    "BEST_SCORE_PATH": os.path.join(os.path.expanduser("~"), ".binary_tetris", "best.json"),
    "LOG_LEVEL": "INFO",
}
