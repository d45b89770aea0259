import pytest
from conftest import make_board

from bintris_board import block_count
from bintris_game import (Game, Session, drop_interval, MOVED, LOCKED,
                          IDLE, RUNNING, PAUSED, OVER)
from bintris_piece import Piece, COLS, ROWS, ZERO, ONE
from bintris_rng import BinaryRandom


class RecordingBest:
    def __init__(self):
        self.submitted = []

    def submit(self, score):
        self.submitted.append(score)
        return True


@pytest.fixture
def game(clock):
    g = Game(BinaryRandom(42), RecordingBest(), clock)
    g.start()
    return g


def place(game, name, bits, x, y=0):
    p = Piece.spawn(name, bits)
    p.x, p.y = x, y
    game.current = p
    return p


def test_start_enters_running(game):
    assert game.state == RUNNING
    assert game.current is not None and game.next is not None
    assert game.session == Session()
    assert game.scheduler.active
    assert block_count(game.board) == 0


def test_idle_actions_are_noops(clock):
    g = Game(BinaryRandom(1), None, clock)
    assert g.state == IDLE
    assert not g.move(1)
    assert not g.rotate(1)
    assert g.soft_drop() is None
    assert g.hard_drop() == 0
    assert not g.swap_values()
    assert not g.toggle_pause()
    assert g.state == IDLE


def test_move_respects_walls(game):
    p = place(game, "I", [0] * 4, 0)
    assert not game.move(-1)
    assert p.x == 0
    assert game.move(1)
    assert p.x == 1
    for _ in range(COLS):
        game.move(1)
    assert p.x == COLS - 4


def test_rotation_rejected_atomically(game):
    p = place(game, "I", [0, 1, 0, 1], 0, ROWS - 1)
    shape = [r[:] for r in p.shape]
    assert not game.rotate(1)
    assert p.shape == shape
    assert (p.x, p.y) == (0, ROWS - 1)


def test_rotation_both_directions(game):
    p = place(game, "T", [0, 1, 1, 0], 4, 5)
    assert game.rotate(1)
    assert game.rotate(-1)
    assert p.shape == Piece.spawn("T", [0, 1, 1, 0]).shape


def test_swap_values_only_touches_current_piece(game):
    game.board[ROWS - 1][0] = ZERO
    p = place(game, "O", [0, 0, 1, 1], 4)
    assert game.swap_values()
    assert [v for _, _, v in sorted(p.cells())] == [ONE, ZERO, ONE, ZERO]
    assert game.board[ROWS - 1][0] == ZERO


def test_hard_drop_two_by_two_reaches_floor(game):
    p = place(game, "O", [0, 1, 1, 0], 3)
    assert game.hard_drop() == ROWS - 2
    assert game.board[ROWS - 2][3:5] == [ZERO, ONE]
    assert game.board[ROWS - 1][3:5] == [ONE, ZERO]
    assert game.current is not p


def test_hard_drop_homogeneous_square_clears_itself(game):
    place(game, "O", [0, 0, 0, 0], 3)
    assert game.hard_drop() == ROWS - 2
    assert block_count(game.board) == 0
    assert game.session.score == 50


def test_soft_drop_moves_then_locks(game):
    place(game, "I", [1, 0, 1, 0], 0, ROWS - 2)
    version = game.board_version
    assert game.soft_drop() == MOVED
    assert game.soft_drop() == LOCKED
    assert game.board_version > version
    assert game.board[ROWS - 1][:4] == [ONE, ZERO, ONE, ZERO]


def test_two_matches_in_one_lock_score_100(game):
    game.board = make_board("0011")
    place(game, "I", [0, 0, 1, 1], 0)
    game.hard_drop()
    assert game.session.score == 100
    assert game.session.lines == 1
    assert block_count(game.board) == 0


def test_cascade_points_are_summed(game):
    game.board = make_board("1", "0", "0", "1", "01")
    p = place(game, "I", [1, 0, 0, 1], 1)
    p.shape = p.rotated(1)
    game.hard_drop()
    # zero square clears, the ones above fall into a second square
    assert game.session.score == 100
    assert game.board[ROWS - 1][:2] == [ZERO, ONE]
    assert block_count(game.board) == 2


def test_level_progression():
    s = Session()
    assert not s.add_points(450)
    assert (s.level, s.drop_interval_ms, s.lines) == (1, 1000, 4)
    assert s.add_points(50)
    assert (s.level, s.drop_interval_ms) == (2, 900)
    assert s.add_points(500)
    assert (s.level, s.drop_interval_ms, s.lines) == (3, 850, 10)


def test_drop_interval_floor():
    assert drop_interval(1) == 950
    assert drop_interval(18) == 100
    assert drop_interval(40) == 100


def test_level_up_speeds_up_scheduler(game):
    game.session.score = 450
    game.board = make_board("0011")
    place(game, "I", [0, 0, 1, 1], 0)
    game.hard_drop()
    assert game.session.level == 2
    assert game.scheduler.interval_ms == 900


def test_spawn_collision_ends_game(game):
    for y in (0, 1):
        game.board[y] = [ONE] * COLS
    before = [r[:] for r in game.board]
    game.next = Piece.spawn("O", [0, 0, 0, 0])
    game.spawn_next()
    assert game.state == OVER
    assert game.board == before
    assert not game.scheduler.active
    assert game.best.submitted == [0]
    assert not game.move(1)
    assert not game.toggle_pause()


def test_pause_cancels_and_resume_rebases(game, clock):
    assert game.toggle_pause()
    assert game.state == PAUSED
    assert not game.scheduler.active
    assert game.soft_drop() is None
    clock.advance(5000)
    assert not game.update()
    assert game.toggle_pause()
    assert game.state == RUNNING
    assert game.scheduler.baseline == clock.now
    assert not game.update()


def test_update_drops_after_interval(game, clock):
    y = game.current.y
    clock.advance(1000)
    assert not game.update()
    clock.advance(1)
    assert game.update()
    assert game.current.y == y + 1


def test_reset_returns_to_idle(game):
    game.board[ROWS - 1][0] = ONE
    game.reset()
    assert game.state == IDLE
    assert game.current is None and game.next is None
    assert block_count(game.board) == 0
    assert not game.scheduler.active


def test_start_again_after_game_over(game):
    game.session.score = 950
    game.board = make_board("0011")
    place(game, "I", [0, 0, 1, 1], 0)
    game.hard_drop()
    assert (game.session.level, game.scheduler.interval_ms) == (3, 850)
    game.board[0] = [ONE] * COLS
    game.board[1] = [ONE] * COLS
    game.spawn_next()
    assert game.state == OVER
    game.start()
    assert game.state == RUNNING
    assert block_count(game.board) == 0
    assert game.session == Session()
    assert game.scheduler.interval_ms == 1000
    assert game.scheduler.active


def test_new_game_keeps_a_session_in_progress(game):
    game.board = make_board("0011")
    place(game, "I", [0, 0, 1, 1], 0)
    game.hard_drop()
    assert not game.new_game()
    assert game.session.score == 100
    game.toggle_pause()
    assert not game.new_game()
    assert game.state == PAUSED
    game.board[0] = [ONE] * COLS
    game.board[1] = [ONE] * COLS
    game.toggle_pause()
    game.spawn_next()
    assert game.state == OVER
    assert game.new_game()
    assert game.state == RUNNING
    assert game.session.score == 0


def test_new_game_from_idle(clock):
    g = Game(BinaryRandom(3), None, clock)
    assert g.new_game()
    assert g.state == RUNNING


def test_board_dimensions_survive_play(game):
    for _ in range(30):
        if game.state != RUNNING:
            break
        game.swap_values()
        game.rotate(1)
        game.move(-1)
        game.hard_drop()
    assert len(game.board) == ROWS
    assert all(len(r) == COLS for r in game.board)
    assert all(v in (0, ZERO, ONE) for r in game.board for v in r)
