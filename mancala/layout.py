"""Screen geometry of the board: where pits and stores are drawn."""

from __future__ import annotations

from dataclasses import dataclass

from mancala.game import (
    PITS_PER_PLAYER,
    PLAYER1_PITS,
    PLAYER1_STORE,
    PLAYER2_PITS,
    PLAYER2_STORE,
    TOTAL_PITS,
)

PIT_RADIUS = 40.0
STORE_WIDTH = 60.0
STORE_HEIGHT = 180.0
BOARD_MARGIN_X = 100.0
BOARD_MARGIN_Y = 150.0
PIT_SPACING = 100.0
OUTLINE_THICKNESS = 2.0


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle; the right and bottom edges are exclusive."""

    left: float
    top: float
    width: float
    height: float

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies inside the rectangle."""
        return (
            self.left <= x < self.left + self.width
            and self.top <= y < self.top + self.height
        )

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)


def _outlined(x: float, y: float, width: float, height: float) -> Rect:
    return Rect(
        x - OUTLINE_THICKNESS,
        y - OUTLINE_THICKNESS,
        width + 2 * OUTLINE_THICKNESS,
        height + 2 * OUTLINE_THICKNESS,
    )


def pit_rect(pit: int) -> Rect:
    """Bounding box of a playing pit, outline included.

    Player 1's pits run right to left along the bottom row, player 2's
    left to right along the top row.
    """
    diameter = 2 * PIT_RADIUS
    if pit in PLAYER1_PITS:
        x = BOARD_MARGIN_X + (PITS_PER_PLAYER - 1 - pit) * PIT_SPACING
        y = BOARD_MARGIN_Y + PIT_SPACING
    elif pit in PLAYER2_PITS:
        x = BOARD_MARGIN_X + (pit - PLAYER1_STORE - 1) * PIT_SPACING
        y = BOARD_MARGIN_Y
    else:
        raise ValueError(f"not a playing pit: {pit}")
    return _outlined(x, y, diameter, diameter)


def store_rect(store: int) -> Rect:
    """Bounding box of a store, outline included."""
    if store == PLAYER1_STORE:
        x = BOARD_MARGIN_X + PIT_SPACING * PITS_PER_PLAYER + 20
    elif store == PLAYER2_STORE:
        x = BOARD_MARGIN_X - STORE_WIDTH - 20
    else:
        raise ValueError(f"not a store: {store}")
    return _outlined(x, BOARD_MARGIN_Y, STORE_WIDTH, STORE_HEIGHT)


def pit_at(x: float, y: float) -> int | None:
    """The playing pit under a screen position, or None if there is none."""
    for pit in range(TOTAL_PITS):
        if pit in (PLAYER1_STORE, PLAYER2_STORE):
            continue
        if pit_rect(pit).contains(x, y):
            return pit
    return None