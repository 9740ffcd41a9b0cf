"""
Tests for the game state and move validator.
"""

import pytest

from logic.game_state import GameState, Mark, board_from_string, count_marks
from logic.move_validator import MoveValidator


def test_initial_state():
    game = GameState()

    assert game.current_mark == Mark.X
    assert game.get_empty_cells() == list(range(9))
    assert not game.is_game_over


def test_make_move_switches_turn_and_records_history():
    game = GameState()

    assert game.make_move(4)
    assert game.make_move(0)

    assert game.board[4] == Mark.X
    assert game.board[0] == Mark.O
    assert game.current_mark == Mark.X
    assert [m.index for m in game.moves] == [4, 0]
    assert [m.move_number for m in game.moves] == [0, 1]


def test_make_move_on_occupied_cell_fails():
    game = GameState()
    game.make_move(4)

    assert not game.make_move(4)
    assert game.board[4] == Mark.X
    assert game.current_mark == Mark.O


def test_make_move_after_game_over_fails():
    game = GameState()
    game.is_game_over = True

    assert not game.make_move(0)
    assert game.board[0] is None


def test_copy_is_independent():
    game = GameState()
    game.make_move(4)

    clone = game.copy()
    clone.make_move(0)

    assert game.board[0] is None
    assert len(game.moves) == 1


def test_board_from_string():
    board = board_from_string("XO_ _X_ __O")

    assert board[0] == Mark.X
    assert board[1] == Mark.O
    assert board[2] is None
    assert count_marks(board) == 4


def test_board_from_string_wrong_length():
    with pytest.raises(ValueError):
        board_from_string("XO")


def test_format_board_numbers_free_cells():
    game = GameState()
    game.make_move(0)

    text = game.format_board()

    assert text.splitlines()[0] == " X | 2 | 3"


@pytest.mark.parametrize("index, message", [
    (-1, "Invalid cell"),
    (9, "Invalid cell"),
    (4, "already occupied"),
])
def test_validator_rejects(index, message):
    game = GameState()
    game.make_move(4)

    result = MoveValidator().validate_move(game, index)

    assert not result.is_valid
    assert message in result.error_message


def test_validator_accepts_empty_cell():
    game = GameState()

    result = MoveValidator().validate_move(game, 0)

    assert result.is_valid
    assert result.error_message is None


def test_validator_game_over():
    game = GameState()
    game.is_game_over = True
    validator = MoveValidator()

    assert not validator.validate_move(game, 0).is_valid
    assert validator.get_valid_moves(game) == []


def test_validator_valid_moves():
    game = GameState()
    game.make_move(4)

    assert MoveValidator().get_valid_moves(game) == [0, 1, 2, 3, 5, 6, 7, 8]
