"""
Tests for the board, win detection and move validation.
"""

import pytest

from tictactoe.game_state import GameState, InvalidMove, Player
from tictactoe.move_validator import MoveValidator
from tictactoe.win_checker import WIN_LINES, StatusKind, WinChecker


def test_new_game_is_empty_with_x_to_move():
    game = GameState()
    assert game.empty_cells() == list(range(9))
    assert game.current_player == Player.X
    assert game.status().kind == StatusKind.IN_PROGRESS


def test_apply_move_and_turn_switch():
    game = GameState()
    game.apply_move(4, Player.X)
    assert game.board[4] == Player.X
    assert game.current_player == Player.O
    assert 4 not in game.empty_cells()


@pytest.mark.parametrize("pos", [-1, 9, 42])
def test_apply_move_out_of_range(pos):
    game = GameState()
    with pytest.raises(InvalidMove):
        game.apply_move(pos, Player.X)
    assert game.board == [None] * 9


def test_apply_move_on_occupied_cell_leaves_board_unchanged():
    game = GameState.from_string("X.. .O. ...")
    before = list(game.board)

    with pytest.raises(InvalidMove) as excinfo:
        game.apply_move(4, Player.X)

    assert excinfo.value.position == 4
    assert game.board == before


def test_undo_move():
    game = GameState()
    game.apply_move(0, Player.X)
    game.undo_move(0)
    assert game.board == [None] * 9

    with pytest.raises(InvalidMove):
        game.undo_move(0)


def test_empty_cells_are_ascending():
    game = GameState.from_string("X.O / .X. / O..")
    assert game.empty_cells() == [1, 3, 5, 7, 8]


def test_win_lines_are_fixed():
    assert len(WIN_LINES) == 8
    assert WIN_LINES[0] == (0, 1, 2)
    assert WIN_LINES[-1] == (2, 4, 6)


@pytest.mark.parametrize("board, player, line", [
    ("XXX / OO. / ...", Player.X, (0, 1, 2)),
    ("OX. / OX. / .XO", Player.X, (1, 4, 7)),
    ("XX. / OOO / X.X", Player.O, (3, 4, 5)),
    ("O.X / .X. / XO.", Player.X, (2, 4, 6)),
])
def test_winner_finds_line(board, player, line):
    game = GameState.from_string(board)
    assert game.winner(player) == line
    assert game.winner(player.opposite()) is None


def test_winner_returns_first_line_in_order():
    # X holds both row 0 and column 0
    game = GameState.from_string("XXX / XOO / XOO")
    assert game.winner(Player.X) == (0, 1, 2)


def test_status_won_reports_line():
    game = GameState.from_string("XX. / OOO / X.X")
    status = game.status()
    assert status.kind == StatusKind.WON
    assert status.winner == Player.O
    assert status.line == (3, 4, 5)
    assert status.is_over


def test_status_draw():
    game = GameState.from_string("XOX / XOO / OXX")
    status = game.status()
    assert status.kind == StatusKind.DRAW
    assert status.winner is None
    assert status.line is None
    assert status.is_over


def test_win_on_last_move_is_not_a_draw():
    game = GameState.from_string("XOX / OXO / OXX")
    assert game.status().kind == StatusKind.WON
    assert game.status().winner == Player.X


def test_win_checker_prefers_first_player_given():
    board = [Player.O, Player.O, Player.O, Player.X, Player.X, Player.X, None, None, None]
    status = WinChecker.get_status(board, (Player.O, Player.X))
    assert status.winner == Player.O


def test_reset_and_copy():
    game = GameState.from_string("XO. / ... / ...")
    clone = game.copy()
    clone.apply_move(8, Player.X)

    assert game.board[8] is None

    game.reset()
    assert game.board == [None] * 9


@pytest.mark.parametrize("text", [
    "XXX / ... / ...",   # X too far ahead
    "O.. / ... / ...",   # O moved first
    "XO. / ...",         # too few cells
    "XO? / ... / ...",   # unknown symbol
])
def test_from_string_rejects_bad_boards(text):
    with pytest.raises(InvalidMove):
        GameState.from_string(text)


def test_render_shows_indices_for_empty_cells():
    game = GameState.from_string("X.. / .O. / ...")
    lines = game.render().splitlines()
    assert lines[0] == " X | 1 | 2"
    assert lines[2] == " 3 | O | 5"


def test_validator():
    validator = MoveValidator()
    game = GameState.from_string("X.. / ... / ...")

    assert validator.validate_move(game, 4, Player.O).is_valid

    result = validator.validate_move(game, 0, Player.O)
    assert not result.is_valid
    assert "occupied" in result.error_message

    assert not validator.validate_move(game, 9, Player.O).is_valid
    assert not validator.validate_move(game, 4, Player.X).is_valid


def test_validator_rejects_moves_after_game_over():
    validator = MoveValidator()
    game = GameState.from_string("XXX / OO. / ...")

    result = validator.validate_move(game, 5, Player.O)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"
