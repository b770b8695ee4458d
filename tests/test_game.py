import random

import pytest

from mancala.game import (
    INITIAL_STONES,
    PLAYER1_STORE,
    PLAYER2_STORE,
    TOTAL_PITS,
    InvalidMoveError,
    MancalaGame,
)

TOTAL_STONES = INITIAL_STONES * 12


def play(game, moves):
    for pit in moves:
        game.make_move(pit)
    return game


def test_initial_board():
    game = MancalaGame()
    assert len(game.board) == TOTAL_PITS
    assert game.stones(PLAYER1_STORE) == 0
    assert game.stones(PLAYER2_STORE) == 0
    assert all(game.stones(p) == INITIAL_STONES for p in range(6))
    assert all(game.stones(p) == INITIAL_STONES for p in range(7, 13))
    assert game.player1_turn is True
    assert sum(game.board) == TOTAL_STONES


def test_initial_possible_moves_and_not_over():
    game = MancalaGame()
    assert game.possible_moves() == [0, 1, 2, 3, 4, 5]
    assert game.is_game_over() is False
    assert game.winner() == 0
    assert game.score(1) == 0
    assert game.score(2) == 0


@pytest.mark.parametrize("pit", [-1, 6, 13, 14, 7, 12])
def test_invalid_moves_for_player1(pit):
    game = MancalaGame()
    assert game.is_valid_move(pit) is False
    with pytest.raises(InvalidMoveError):
        game.make_move(pit)
    assert game.board == MancalaGame().board


def test_stones_outside_board_is_zero():
    game = MancalaGame()
    assert game.stones(-1) == 0
    assert game.stones(TOTAL_PITS) == 0


def test_extra_turn_when_last_stone_in_store():
    game = MancalaGame()
    assert game.make_move(2) is True
    assert game.player1_turn is True
    assert game.board == (4, 4, 0, 5, 5, 5, 1, 4, 4, 4, 4, 4, 4, 0)
    assert game.is_valid_move(2) is False


def test_turn_passes_and_player2_moves():
    game = play(MancalaGame(), [2])
    assert game.make_move(5) is False
    assert game.player1_turn is False
    assert game.possible_moves() == [7, 8, 9, 10, 11, 12]
    assert game.is_valid_move(0) is False


def test_player2_skips_player1_store():
    game = play(MancalaGame(), [2, 5])
    before = game.stones(PLAYER1_STORE)
    game.make_move(12)
    assert game.stones(PLAYER1_STORE) == before
    assert game.stones(PLAYER2_STORE) == 1
    assert game.player1_turn is True


def test_capture_of_opposing_pit():
    game = play(MancalaGame(), [2, 5, 12])
    assert game.stones(5) == 0
    opposing = game.stones(7)
    store_before = game.score(1)
    game.make_move(0)
    assert game.stones(5) == 0
    assert game.stones(7) == 0
    assert game.score(1) == store_before + opposing + 1
    assert game.board == (0, 6, 2, 6, 6, 0, 8, 0, 5, 5, 5, 4, 0, 1)
    assert game.player1_turn is False
    assert sum(game.board) == TOTAL_STONES


def test_no_capture_when_opposing_pit_empty():
    game = play(MancalaGame(), [2, 5, 7])
    assert game.stones(7) == 0
    assert game.stones(5) == 0
    store_before = game.score(1)
    game.make_move(1)
    assert game.stones(5) == 1
    assert game.score(1) == store_before


def test_copy_is_independent():
    game = play(MancalaGame(), [2])
    clone = game.copy()
    assert clone.board == game.board
    assert clone.player1_turn == game.player1_turn
    clone.make_move(5)
    assert clone.board != game.board
    assert game.player1_turn is True


def test_make_move_return_matches_turn_change():
    game = MancalaGame()
    rng = random.Random(7)
    while not game.is_game_over():
        mover = game.player1_turn
        same = game.make_move(rng.choice(game.possible_moves()))
        assert same == (game.player1_turn == mover)


@pytest.mark.parametrize("seed", range(8))
def test_random_games_end_consistently(seed):
    rng = random.Random(seed)
    game = MancalaGame()
    for _ in range(2000):
        if game.is_game_over():
            break
        moves = game.possible_moves()
        assert moves
        assert all(game.is_valid_move(p) for p in moves)
        game.make_move(rng.choice(moves))
        assert sum(game.board) == TOTAL_STONES
        assert all(count >= 0 for count in game.board)
    assert game.is_game_over()
    assert game.score(1) + game.score(2) == TOTAL_STONES
    assert [p for p in range(TOTAL_PITS) if p not in (6, 13) and game.stones(p)] == []
    p1, p2 = game.score(1), game.score(2)
    expected = 1 if p1 > p2 else 2 if p2 > p1 else 0
    assert game.winner() == expected
    assert game.possible_moves() == []
    with pytest.raises(InvalidMoveError):
        game.make_move(0)


def test_invalid_move_error_carries_pit():
    game = MancalaGame()
    with pytest.raises(InvalidMoveError) as info:
        game.make_move(9)
    assert info.value.pit == 9
    assert isinstance(info.value, ValueError)