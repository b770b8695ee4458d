"""Computer opponent: minimax search with alpha-beta pruning.

The AI plays as player 2. Scores are positive when a position favours
player 2 and negative when it favours player 1.
"""

from __future__ import annotations

from mancala.game import (
    PLAYER1_PITS,
    PLAYER1_STORE,
    PLAYER2_PITS,
    PLAYER2_STORE,
    TOTAL_PITS,
    MancalaGame,
)

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5
DEFAULT_DIFFICULTY = 2

_DEPTH_BY_DIFFICULTY = {1: 2, 2: 3, 3: 4, 4: 5, 5: 7}

WIN_SCORE = 10000


class MancalaAI:
    """Chooses moves for player 2 by searching the game tree."""

    def __init__(self, difficulty: int = DEFAULT_DIFFICULTY) -> None:
        self.difficulty = difficulty

    def __repr__(self) -> str:
        return f"{type(self).__name__}(difficulty={self._difficulty})"

    @property
    def difficulty(self) -> int:
        """Difficulty level from 1 to 5; out-of-range values are clamped."""
        return self._difficulty

    @difficulty.setter
    def difficulty(self, value: int) -> None:
        self._difficulty = max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, value))

    @property
    def max_depth(self) -> int:
        """Search depth that follows from the difficulty level."""
        return _DEPTH_BY_DIFFICULTY[self._difficulty]

    def find_best_move(self, game: MancalaGame) -> int | None:
        """The best pit to play for the player to move, or None if there is none.

        The given game is left untouched.
        """
        moves = game.possible_moves()
        if not moves:
            return None

        best_move = moves[0]
        best_score: float = float("-inf")
        for move in moves:
            simulation = game.copy()
            simulation.make_move(move)
            score = self._minimax(
                simulation, self.max_depth - 1, False, float("-inf"), float("inf")
            )
            if score > best_score:
                best_score = score
                best_move = move
        return best_move

    def _minimax(
        self,
        game: MancalaGame,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
    ) -> float:
        if depth == 0 or game.is_game_over():
            return evaluate_board(game)

        moves = game.possible_moves()
        if not moves:
            return evaluate_board(game)

        best: float = float("-inf") if maximizing else float("inf")
        for move in moves:
            simulation = game.copy()
            same_player = simulation.make_move(move)
            if same_player:
                score = self._minimax(simulation, depth, maximizing, alpha, beta)
            else:
                score = self._minimax(simulation, depth - 1, not maximizing, alpha, beta)

            if maximizing:
                best = max(best, score)
                alpha = max(alpha, best)
            else:
                best = min(best, score)
                beta = min(beta, best)
            if beta <= alpha:
                break
        return best


def evaluate_board(game: MancalaGame) -> int:
    """Heuristic value of a position from player 2's point of view."""
    if game.is_game_over():
        winner = game.winner()
        if winner == 2:
            return WIN_SCORE
        if winner == 1:
            return -WIN_SCORE
        return 0

    return (
        stones_difference(game) * 3
        + extra_turn_potential(game)
        + capture_potential(game) * 2
        + stone_distribution(game)
    )


def stones_difference(game: MancalaGame) -> int:
    """Player 2's store minus player 1's store."""
    return game.score(2) - game.score(1)


def _mover_side(game: MancalaGame) -> tuple[range, int, int]:
    """Pits, store and sign for the player to move (+1 for player 2)."""
    if game.player1_turn:
        return PLAYER1_PITS, PLAYER1_STORE, -1
    return PLAYER2_PITS, PLAYER2_STORE, 1


def extra_turn_potential(game: MancalaGame) -> int:
    """Five points for each pit of the mover whose stones reach exactly their store."""
    pits, store, sign = _mover_side(game)
    score = sum(
        5
        for pit in pits
        if game.stones(pit) == (store - pit + TOTAL_PITS) % TOTAL_PITS
    )
    return sign * score


def capture_potential(game: MancalaGame) -> int:
    """Stones the mover could capture by landing in one of their empty pits."""
    pits, _, sign = _mover_side(game)
    score = 0
    for target in pits:
        if game.stones(target) != 0:
            continue
        for source in pits:
            if source == target:
                continue
            distance = (target - source + TOTAL_PITS) % TOTAL_PITS
            if game.stones(source) == distance:
                opposing = game.stones(TOTAL_PITS - 2 - target)
                if opposing > 0:
                    score += opposing + 1
    return sign * score


def stone_distribution(game: MancalaGame) -> int:
    """Favour more stones, and more non-empty pits, on player 2's side."""
    ai_stones = [game.stones(pit) for pit in PLAYER2_PITS]
    human_stones = [game.stones(pit) for pit in PLAYER1_PITS]
    stones_diff = sum(ai_stones) - sum(human_stones)
    pits_diff = sum(1 for s in ai_stones if s > 0) - sum(1 for s in human_stones if s > 0)
    return stones_diff + pits_diff * 2