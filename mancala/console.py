"""Two-player Mancala played at a text terminal."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from mancala.game import (
    INITIAL_STONES,
    PLAYER1_PITS,
    PLAYER1_STORE,
    PLAYER2_PITS,
    PLAYER2_STORE,
    TOTAL_PITS,
    InvalidMoveError,
)

_STORE_GAP = " " * 18
_PROMPT = "'s turn. Choose pit (0-5 for P1, 7-12 for P2): "


class ConsoleMancala:
    """A hot-seat Mancala game in which a capture always takes the landing stone.

    ``board`` holds the fourteen pit counts (stores at 6 and 13) and
    ``player1_turn`` tells whose move it is.
    """

    def __init__(self) -> None:
        self.board = [
            0 if pit in (PLAYER1_STORE, PLAYER2_STORE) else INITIAL_STONES
            for pit in range(TOTAL_PITS)
        ]
        self.player1_turn = True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(board={self.board!r}, "
            f"player1_turn={self.player1_turn!r})"
        )

    def render(self) -> str:
        """The board as text: player 2's row on top, stores at the sides."""
        top = "".join(f"{self.board[pit]} " for pit in reversed(PLAYER2_PITS))
        bottom = "".join(f"{self.board[pit]} " for pit in PLAYER1_PITS)
        return (
            f"\n   {top}\n"
            f"{self.board[PLAYER2_STORE]}{_STORE_GAP}{self.board[PLAYER1_STORE]}\n"
            f"   {bottom}\n"
        )

    def is_game_over(self) -> bool:
        """True when one side has no stones left in its pits."""
        player1 = sum(self.board[pit] for pit in PLAYER1_PITS)
        player2 = sum(self.board[pit] for pit in PLAYER2_PITS)
        return player1 == 0 or player2 == 0

    def is_valid_move(self, pit: int) -> bool:
        """True when ``pit`` is a non-empty pit of the player to move."""
        own = PLAYER1_PITS if self.player1_turn else PLAYER2_PITS
        return pit in own and self.board[pit] != 0

    def collect_remaining_stones(self) -> None:
        """Move the stones left on each side into that side's store."""
        for pits, store in ((PLAYER1_PITS, PLAYER1_STORE), (PLAYER2_PITS, PLAYER2_STORE)):
            for pit in pits:
                self.board[store] += self.board[pit]
                self.board[pit] = 0

    def play_turn(self, pit: int) -> bool:
        """Sow the stones of ``pit``; return True when the mover earns an extra turn.

        Raises InvalidMoveError if the pit cannot be played.
        """
        if not self.is_valid_move(pit):
            raise InvalidMoveError(pit)

        if self.player1_turn:
            own, store, skipped = PLAYER1_PITS, PLAYER1_STORE, PLAYER2_STORE
        else:
            own, store, skipped = PLAYER2_PITS, PLAYER2_STORE, PLAYER1_STORE

        stones = self.board[pit]
        self.board[pit] = 0
        index = pit
        while stones:
            index = (index + 1) % TOTAL_PITS
            if index == skipped:
                continue
            self.board[index] += 1
            stones -= 1

        if index in own and self.board[index] == 1:
            opposite = TOTAL_PITS - 2 - index
            self.board[store] += self.board[opposite] + 1
            self.board[index] = 0
            self.board[opposite] = 0

        if index == store:
            return True
        self.player1_turn = not self.player1_turn
        return False

    def result_message(self) -> str:
        """Who won, judged by the stores alone."""
        player1 = self.board[PLAYER1_STORE]
        player2 = self.board[PLAYER2_STORE]
        if player1 > player2:
            return "Player 1 wins!"
        if player1 < player2:
            return "Player 2 wins!"
        return "It's a tie!"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def play(input_stream: TextIO | None = None, output_stream: TextIO | None = None) -> str | None:
    """Run a whole game reading pit numbers from ``input_stream``.

    Returns the result message, or None if the input ran out first.
    """
    source = sys.stdin if input_stream is None else input_stream
    out = sys.stdout if output_stream is None else output_stream

    game = ConsoleMancala()
    tokens = _tokens(source)
    while not game.is_game_over():
        out.write(game.render())
        out.write(("Player 1" if game.player1_turn else "Player 2") + _PROMPT)
        token = next(tokens, None)
        if token is None:
            out.write("\n")
            return None
        try:
            pit = int(token)
        except ValueError:
            pit = -1
        if not game.is_valid_move(pit):
            out.write("Invalid move. Try again.\n")
            continue
        if game.play_turn(pit):
            out.write("Extra turn!\n")

    game.collect_remaining_stones()
    out.write(game.render())
    out.write("Game over!\n")
    message = game.result_message()
    out.write(message + "\n")
    return message


def main(argv: list[str] | None = None) -> int:
    """Play a two-player game on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="mancala-console", description="Play two-player Mancala in the terminal."
    )
    parser.parse_args(argv)
    play(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())