"""Board state and rules of Kalah-style Mancala."""

from __future__ import annotations

PLAYER1_STORE = 6
PLAYER2_STORE = 13
TOTAL_PITS = 14
PITS_PER_PLAYER = 6
INITIAL_STONES = 4

STORES = (PLAYER1_STORE, PLAYER2_STORE)
PLAYER1_PITS = range(0, PLAYER1_STORE)
PLAYER2_PITS = range(PLAYER1_STORE + 1, PLAYER2_STORE)


class InvalidMoveError(ValueError):
    """Raised when a pit cannot be played by the player whose turn it is."""

    def __init__(self, pit: int) -> None:
        super().__init__(f"invalid move: pit {pit}")
        self.pit = pit


class MancalaGame:
    """A two-player Mancala game with captures and extra turns.

    Pits 0-5 belong to player 1 and pit 6 is their store; pits 7-12 belong
    to player 2 and pit 13 is their store. Player 1 moves first.
    """

    def __init__(self) -> None:
        self._board = [
            0 if pit in STORES else INITIAL_STONES for pit in range(TOTAL_PITS)
        ]
        self._player1_turn = True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(board={self._board!r}, "
            f"player1_turn={self._player1_turn!r})"
        )

    @property
    def player1_turn(self) -> bool:
        """True when player 1 is to move."""
        return self._player1_turn

    @property
    def board(self) -> tuple[int, ...]:
        """Stone counts of all fourteen pits, stores included."""
        return tuple(self._board)

    def _side(self, pits: range) -> list[int]:
        return self._board[pits.start:pits.stop]

    def is_game_over(self) -> bool:
        """True when every pit on either side is empty."""
        return not any(self._side(PLAYER1_PITS)) or not any(self._side(PLAYER2_PITS))

    def winner(self) -> int:
        """Return 1 or 2 for the winning player, 0 for a tie or an unfinished game."""
        if not self.is_game_over():
            return 0
        player1 = self._board[PLAYER1_STORE] + sum(self._side(PLAYER1_PITS))
        player2 = self._board[PLAYER2_STORE] + sum(self._side(PLAYER2_PITS))
        if player1 > player2:
            return 1
        if player2 > player1:
            return 2
        return 0

    def score(self, player: int) -> int:
        """Stones in the store of player 1, or of player 2 for any other value."""
        return self._board[PLAYER1_STORE if player == 1 else PLAYER2_STORE]

    def _own_pits(self) -> range:
        return PLAYER1_PITS if self._player1_turn else PLAYER2_PITS

    def _own_store(self) -> int:
        return PLAYER1_STORE if self._player1_turn else PLAYER2_STORE

    def _opponent_store(self) -> int:
        return PLAYER2_STORE if self._player1_turn else PLAYER1_STORE

    def is_valid_move(self, pit: int) -> bool:
        """True when the pit is a non-empty pit of the player to move."""
        return pit in self._own_pits() and self._board[pit] > 0

    def make_move(self, pit: int) -> bool:
        """Sow the stones of ``pit`` and apply captures, turn changes and game end.

        Returns True when the same player is to move next, which happens when
        the last stone lands in their own store or when the move ends the game.
        Raises InvalidMoveError if the pit cannot be played.
        """
        if not self.is_valid_move(pit):
            raise InvalidMoveError(pit)

        mover = self._player1_turn
        skipped = self._opponent_store()
        stones = self._board[pit]
        self._board[pit] = 0
        current = pit
        while stones:
            current = (current + 1) % TOTAL_PITS
            if current == skipped:
                continue
            self._board[current] += 1
            stones -= 1

        if current in self._own_pits() and self._board[current] == 1:
            opposing = TOTAL_PITS - 2 - current
            if self._board[opposing] > 0:
                self._board[self._own_store()] += self._board[opposing] + 1
                self._board[opposing] = 0
                self._board[current] = 0

        if self.is_game_over():
            self._collect_remaining_stones()
        elif current != self._own_store():
            self._player1_turn = not self._player1_turn

        return self._player1_turn == mover

    def _collect_remaining_stones(self) -> None:
        for pits, store in ((PLAYER1_PITS, PLAYER1_STORE), (PLAYER2_PITS, PLAYER2_STORE)):
            for pit in pits:
                self._board[store] += self._board[pit]
                self._board[pit] = 0

    def stones(self, pit: int) -> int:
        """Stones in ``pit``; 0 for an index outside the board."""
        return self._board[pit] if 0 <= pit < TOTAL_PITS else 0

    def possible_moves(self) -> list[int]:
        """Non-empty pits of the player to move, in ascending order."""
        return [pit for pit in self._own_pits() if self._board[pit] > 0]

    def copy(self) -> MancalaGame:
        """An independent game with the same board and turn."""
        clone = MancalaGame()
        clone._board = list(self._board)
        clone._player1_turn = self._player1_turn
        return clone