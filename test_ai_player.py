"""
Tests for the minimax AI player.
"""

import pytest

from logic.ai_player import AIPlayer, select_move
from logic.config import GameConfig
from logic.game_state import GameState, Mark, board_from_string, empty_board
from logic.win_checker import evaluate, GameStatus


X, O = Mark.X, Mark.O


def play_out_all_games(board, to_move, ai_mark, select=select_move):
    """
    Play every possible opponent reply against the AI.

    Returns a dict counting the final outcomes: wins, draws and losses
    from the AI's point of view.
    """
    results = {"win": 0, "draw": 0, "loss": 0}

    def play(board, to_move):
        outcome = evaluate(board)
        if outcome.status == GameStatus.WON:
            results["win" if outcome.winner == ai_mark else "loss"] += 1
            return
        if outcome.status == GameStatus.DRAW:
            results["draw"] += 1
            return

        if to_move == ai_mark:
            index = select(board, ai_mark)
            assert board[index] is None
            board[index] = ai_mark
            play(board, to_move.opposite())
            board[index] = None
        else:
            for index in range(GameConfig.BOARD_CELLS):
                if board[index] is None:
                    board[index] = to_move
                    play(board, to_move.opposite())
                    board[index] = None

    play(list(board), to_move)
    return results


def test_empty_board_plays_center():
    assert select_move(empty_board(), X) == 4


def test_second_move_takes_corner_when_center_taken():
    board = board_from_string("___ _X_ ___")

    assert select_move(board, O) == 0


def test_second_move_takes_center_when_free():
    board = board_from_string("X__ ___ ___")

    assert select_move(board, O) == 4


def test_blocks_diagonal_threat():
    board = board_from_string("XO_ OX_ ___")

    assert select_move(board, O) == 8


def test_blocking_position_is_never_lost():
    board = board_from_string("XO_ OX_ ___")

    results = play_out_all_games(board, O, ai_mark=O)

    assert results["loss"] == 0


def test_takes_immediate_win():
    # O completes the top row
    board = board_from_string("OO_ _X_ _X_")

    assert select_move(board, O) == 2


def test_blocks_row_threat():
    board = board_from_string("XX_ _O_ ___")

    assert select_move(board, O) == 2


def test_single_empty_cell_is_returned():
    board = board_from_string("XOX XOO OX_")

    assert select_move(board, X) == 8


def test_search_does_not_mutate_board():
    board = board_from_string("X__ _O_ __X")
    before = list(board)

    select_move(board, O)

    assert board == before


def test_search_returns_score_and_index():
    ai = AIPlayer(O)
    board = board_from_string("XO_ OX_ ___")

    result = ai.search(board)

    assert result.index == 8
    assert result.score == GameConfig.DRAW_SCORE
    assert ai.nodes_evaluated > 0


def test_search_scores_forced_win():
    ai = AIPlayer(X)
    # X completes the left column at 3; 1 only draws
    board = board_from_string("X_O _O_ X__")

    result = ai.search(board)

    assert result.score == GameConfig.WIN_SCORE
    assert result.index == 3


def test_search_scores_lost_position():
    ai = AIPlayer(O)
    # X has two open threats (2 and 3); O can only block one
    board = board_from_string("XX_ _O_ X_O")

    result = ai.search(board)

    assert result.score == GameConfig.LOSS_SCORE


@pytest.mark.parametrize("ai_mark", [X, O])
def test_never_returns_occupied_cell_on_reachable_boards(ai_mark):
    # Walk every reachable position with the AI to move
    seen = set()

    def walk(board, to_move):
        key = tuple(board)
        if key in seen or evaluate(board).is_over:
            return
        seen.add(key)

        if to_move == ai_mark:
            index = select_move(board, ai_mark)
            assert board[index] is None

        for i in range(GameConfig.BOARD_CELLS):
            if board[i] is None:
                board[i] = to_move
                walk(board, to_move.opposite())
                board[i] = None

    walk(empty_board(), X)
    assert seen


@pytest.mark.parametrize("ai_mark", [X, O])
def test_ai_never_loses(ai_mark):
    results = play_out_all_games(empty_board(), X, ai_mark=ai_mark)

    assert results["loss"] == 0
    assert results["win"] > 0


def test_prefer_fast_wins_picks_immediate_win():
    # X wins now at 2; depth-independent scoring may delay it
    board = board_from_string("XX_ OO_ ___")
    ai = AIPlayer(X, prefer_fast_wins=True)

    result = ai.search(board)

    assert result.index == 2
    assert result.score == GameConfig.WIN_SCORE - 1


@pytest.mark.parametrize("ai_mark", [X, O])
def test_prefer_fast_wins_never_loses(ai_mark):
    def fast_select(board, mark):
        return AIPlayer(mark, prefer_fast_wins=True).select_move(board)

    results = play_out_all_games(empty_board(), X, ai_mark=ai_mark, select=fast_select)

    assert results["loss"] == 0


def test_get_best_move_checks_turn():
    game = GameState()
    ai = AIPlayer(O)

    assert ai.get_best_move(game) is None

    game.make_move(4)
    assert ai.get_best_move(game) == 0


def test_get_best_move_after_game_over():
    game = GameState()
    game.is_game_over = True

    assert AIPlayer(X).get_best_move(game) is None


def plain_minimax(board, player, ai_mark):
    """
    Minimax without pruning, same move order and scores as AIPlayer.

    Returns (score, index, nodes visited).
    """
    outcome = evaluate(board)
    if outcome.status == GameStatus.WON:
        score = GameConfig.WIN_SCORE if outcome.winner == ai_mark else GameConfig.LOSS_SCORE
        return score, None, 1
    if outcome.status == GameStatus.DRAW:
        return GameConfig.DRAW_SCORE, None, 1

    nodes = 1
    best_score, best_index = None, None
    for index in range(GameConfig.BOARD_CELLS):
        if board[index] is not None:
            continue
        board[index] = player
        score, _, child_nodes = plain_minimax(board, player.opposite(), ai_mark)
        board[index] = None
        nodes += child_nodes

        if (best_score is None
                or (player == ai_mark and score > best_score)
                or (player != ai_mark and score < best_score)):
            best_score, best_index = score, index

    return best_score, best_index, nodes


@pytest.mark.parametrize("text, ai_mark", [
    ("X__ _O_ ___", X),
    ("X__ _O_ __X", O),
    ("_X_ _O_ ___", X),
])
def test_pruning_visits_fewer_nodes_with_same_answer(text, ai_mark):
    board = board_from_string(text)
    ai = AIPlayer(ai_mark)

    result = ai.search(board)
    score, index, nodes = plain_minimax(list(board), ai_mark, ai_mark)

    assert (result.score, result.index) == (score, index)
    assert ai.nodes_evaluated < nodes
