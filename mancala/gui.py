"""Graphical game against the computer, drawn with pygame."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, auto

from mancala.ai import MancalaAI
from mancala.game import PLAYER1_STORE, PLAYER2_STORE, TOTAL_PITS, MancalaGame
from mancala.layout import (
    BOARD_MARGIN_X,
    BOARD_MARGIN_Y,
    OUTLINE_THICKNESS,
    PIT_RADIUS,
    STORE_HEIGHT,
    Rect,
    pit_at,
    pit_rect,
    store_rect,
)

WINDOW_SIZE = (800, 600)
FRAME_RATE = 60
AI_DELAY_MS = 500

EASY, MEDIUM, HARD = 1, 3, 5

BACKGROUND = (240, 240, 240)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
BUTTON_COLOR = (200, 200, 255)
BUTTON_HIGHLIGHT = (150, 150, 255)
PLAYER1_STORE_COLOR = (200, 200, 255)
PLAYER2_STORE_COLOR = (255, 200, 200)
PLAYER1_PIT_COLOR = (200, 255, 200)
PLAYER2_PIT_COLOR = (255, 255, 200)


class GameState(Enum):
    """Screen the application is showing."""

    MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class Button:
    """A labelled menu button."""

    x: float
    y: float
    width: float
    height: float
    text: str

    @property
    def rect(self) -> Rect:
        """Bounding box, outline included."""
        return Rect(
            self.x - OUTLINE_THICKNESS,
            self.y - OUTLINE_THICKNESS,
            self.width + 2 * OUTLINE_THICKNESS,
            self.height + 2 * OUTLINE_THICKNESS,
        )

    def contains(self, x: float, y: float) -> bool:
        """True when the point lies on the button."""
        return self.rect.contains(x, y)


class GameController:
    """State of the application: menu, a game against the AI, and its end.

    The human plays player 1 by clicking pits; the AI replies through
    ``ai_step``.
    """

    def __init__(self) -> None:
        self.game = MancalaGame()
        self.ai = MancalaAI(MEDIUM)
        self.state = GameState.MENU
        self.running = True
        self.difficulty_buttons = (
            (Button(300, 200, 200, 50, "Easy AI"), EASY),
            (Button(300, 275, 200, 50, "Medium AI"), MEDIUM),
            (Button(300, 350, 200, 50, "Hard AI"), HARD),
        )
        self.quit_button = Button(300, 425, 200, 50, "Quit")

    @property
    def buttons(self) -> tuple[Button, ...]:
        """All menu buttons in drawing order."""
        return tuple(button for button, _ in self.difficulty_buttons) + (self.quit_button,)

    def handle_click(self, x: float, y: float) -> None:
        """React to a left click at screen position (x, y)."""
        if self.state is GameState.MENU:
            for button, level in self.difficulty_buttons:
                if button.contains(x, y):
                    self.ai.difficulty = level
                    self.game = MancalaGame()
                    self.state = GameState.PLAYING
                    return
            if self.quit_button.contains(x, y):
                self.running = False
        elif self.state is GameState.PLAYING:
            if not self.game.player1_turn:
                return
            pit = pit_at(x, y)
            if pit is not None and self.game.is_valid_move(pit):
                self.game.make_move(pit)
                if self.game.is_game_over():
                    self.state = GameState.GAME_OVER
        else:
            self.state = GameState.MENU

    def ai_step(self) -> int | None:
        """Let the AI make one move if it is its turn; return the pit it played."""
        if self.state is not GameState.PLAYING or self.game.player1_turn:
            return None
        move = self.ai.find_best_move(self.game)
        if move is not None:
            self.game.make_move(move)
        if self.game.is_game_over():
            self.state = GameState.GAME_OVER
        return move

    def status_text(self) -> tuple[str, ...]:
        """Headline lines shown for the current screen."""
        if self.state is GameState.MENU:
            return ("Mancala Game", "Select Difficulty:")
        lines = ["Player 1's Turn" if self.game.player1_turn else "Player 2's Turn"]
        if self.game.is_game_over():
            winner = self.game.winner()
            if winner == 0:
                lines.append("Game Over! It's a tie!")
            else:
                lines.append(f"Game Over! Player {winner} wins!")
        if self.state is GameState.GAME_OVER:
            lines.append("Click anywhere to return to the menu")
        return tuple(lines)


class _Fonts:
    def __init__(self, pygame_module) -> None:
        self._pygame = pygame_module
        self._cache: dict[int, object] = {}

    def __call__(self, size: int):
        if size not in self._cache:
            self._cache[size] = self._pygame.font.SysFont("arial", size)
        return self._cache[size]


def _draw_menu(pygame, screen, fonts, controller: GameController) -> None:
    title, subtitle = controller.status_text()
    screen.blit(fonts(40).render(title, True, BLACK), (270, 100))
    screen.blit(fonts(24).render(subtitle, True, BLACK), (310, 160))
    mouse_x, mouse_y = pygame.mouse.get_pos()
    for button in controller.buttons:
        color = BUTTON_HIGHLIGHT if button.contains(mouse_x, mouse_y) else BUTTON_COLOR
        pygame.draw.rect(screen, color, pygame.Rect(button.x, button.y, button.width, button.height))
        outer = button.rect
        pygame.draw.rect(
            screen,
            BLACK,
            pygame.Rect(outer.left, outer.top, outer.width, outer.height),
            width=int(OUTLINE_THICKNESS),
        )
        label = fonts(20).render(button.text, True, BLACK)
        center = (button.x + button.width / 2, button.y + button.height / 2)
        screen.blit(label, label.get_rect(center=center))


def _draw_store(pygame, screen, fonts, game: MancalaGame, store: int) -> None:
    outer = store_rect(store)
    color = PLAYER1_STORE_COLOR if store == PLAYER1_STORE else PLAYER2_STORE_COLOR
    inner = pygame.Rect(
        outer.left + OUTLINE_THICKNESS,
        outer.top + OUTLINE_THICKNESS,
        outer.width - 2 * OUTLINE_THICKNESS,
        outer.height - 2 * OUTLINE_THICKNESS,
    )
    pygame.draw.rect(screen, color, inner)
    pygame.draw.rect(
        screen,
        BLACK,
        pygame.Rect(outer.left, outer.top, outer.width, outer.height),
        width=int(OUTLINE_THICKNESS),
    )
    count = fonts(24).render(str(game.stones(store)), True, BLACK)
    screen.blit(count, count.get_rect(center=outer.center))
    label_text = "Player 1" if store == PLAYER1_STORE else "Player 2"
    label = fonts(16).render(label_text, True, BLACK)
    screen.blit(
        label,
        label.get_rect(midtop=(outer.center[0], outer.top + outer.height + 10)),
    )


def _draw_pit(pygame, screen, fonts, game: MancalaGame, pit: int) -> None:
    bounds = pit_rect(pit)
    center = bounds.center
    color = PLAYER1_PIT_COLOR if pit < PLAYER1_STORE else PLAYER2_PIT_COLOR
    pygame.draw.circle(screen, color, center, PIT_RADIUS)
    pygame.draw.circle(
        screen, BLACK, center, PIT_RADIUS + OUTLINE_THICKNESS, width=int(OUTLINE_THICKNESS)
    )
    count = fonts(20).render(str(game.stones(pit)), True, BLACK)
    screen.blit(count, count.get_rect(center=center))
    if game.is_valid_move(pit):
        pygame.draw.circle(screen, GREEN, center, PIT_RADIUS + 3, width=3)


def _draw_board(pygame, screen, fonts, controller: GameController) -> None:
    game = controller.game
    for pit in range(TOTAL_PITS):
        if pit in (PLAYER1_STORE, PLAYER2_STORE):
            _draw_store(pygame, screen, fonts, game, pit)
        else:
            _draw_pit(pygame, screen, fonts, game, pit)

    lines = controller.status_text()
    screen.blit(
        fonts(24).render(lines[0], True, BLACK),
        (BOARD_MARGIN_X, BOARD_MARGIN_Y + STORE_HEIGHT + 50),
    )
    for line in lines[1:]:
        if line.startswith("Game Over!"):
            screen.blit(
                fonts(28).render(line, True, RED),
                (BOARD_MARGIN_X, BOARD_MARGIN_Y + STORE_HEIGHT + 90),
            )
        else:
            screen.blit(fonts(20).render(line, True, BLUE), (250, 500))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    import argparse

    import pygame

    parser = argparse.ArgumentParser(
        prog="mancala", description="Play Mancala against the computer."
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Mancala Game")
        clock = pygame.time.Clock()
        fonts = _Fonts(pygame)
        controller = GameController()

        while controller.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    controller.running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    controller.handle_click(*event.pos)

            screen.fill(BACKGROUND)
            if controller.state is GameState.MENU:
                _draw_menu(pygame, screen, fonts, controller)
            else:
                _draw_board(pygame, screen, fonts, controller)
            pygame.display.flip()
            clock.tick(FRAME_RATE)

            if controller.state is GameState.PLAYING and not controller.game.player1_turn:
                pygame.time.wait(AI_DELAY_MS)
                controller.ai_step()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())