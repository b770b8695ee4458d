# mancala

This package plays Mancala in the Kalah style. The board has two rows of six pits and one store for each player, and every small pit starts with four stones. You can play against a computer opponent in a pygame window. Two people can also play each other at a terminal.

## Installing

```
pip install .
```

Installing the package also installs `pygame`, which the windowed game needs.

## Playing

### Against the computer

```
mancala
```

The command opens an 800×600 window with a menu. Choose an opponent there: **Easy AI**, **Medium AI** or **Hard AI**, or choose **Quit**. These set the search difficulty to 1, 3 and 5.

You are Player 1 and you play the bottom row. Click a pit to sow it. Pits you are allowed to move from have a green outline. The computer is Player 2. It makes its moves itself, with a short pause before each one. When the game is over, the winner is shown, and a click anywhere takes you back to the menu.

### Two players at a terminal

```
mancala-console
```

Player 1 owns pits 0–5 and Player 2 owns pits 7–12. The board is printed before every move. On your turn, type a pit number. If the number is not one of your non-empty pits, or is not a number at all, you get "Invalid move. Try again." and are asked again. If standard input ends before the game is over, the game stops without a result.

The terminal game is for two people. It has no computer opponent.

## Rules

- Stones are sown one per pit, going towards your own store. The sowing skips your opponent's store.
- If your last stone lands in your own store, you move again.
- If your last stone lands in an empty pit on your side, that is a capture:
  - In the windowed game, you capture that stone and the stones in the pit opposite it. This only happens when the opposite pit has stones in it.
  - In the terminal game, the capture always happens, even when the opposite pit is empty.
- The game ends when all the pits on one side are empty. Each player then adds the stones left on their own side to their store. The player with more stones wins. Equal totals are a tie.

## Using the library

```python
from mancala.game import MancalaGame
from mancala.ai import MancalaAI

game = MancalaGame()
game.make_move(0)            # Player 1 sows pit 0; the turn passes to Player 2
ai = MancalaAI(3)
while not game.player1_turn and not game.is_game_over():
    game.make_move(ai.find_best_move(game))
print(game.board, game.score(1), game.score(2), game.winner())
```

### `mancala.game`

`MancalaGame` holds the fourteen pits: 0–5 and store 6 for Player 1, and 7–12 and store 13 for Player 2.

- `make_move(pit)` plays a pit. It returns `True` when the same player moves next, which is the case after an extra turn or when the move ends the game. It raises `InvalidMoveError`, a subclass of `ValueError`, for a pit that cannot be played.
- `is_valid_move(pit)` and `possible_moves()` tell you which pits can be played.
- `stones(pit)`, `score(player)`, `board`, `player1_turn`, `is_game_over()` and `winner()` describe the position. `winner()` returns 1 or 2, or 0 for a tie or an unfinished game.
- `copy()` returns an independent copy of the game.

### `mancala.ai`

`MancalaAI(difficulty)` runs a minimax search with alpha-beta pruning for Player 2.

- The difficulty goes from 1 to 5. Values outside that range are clamped.
- The search depth for each difficulty is 2, 3, 4, 5 and 7 (`max_depth`).
- `find_best_move(game)` returns a pit, or `None` if no move is possible.
- `evaluate_board(game)` is the heuristic it uses. It is positive when the position favours Player 2. It is built from `stones_difference`, `extra_turn_potential`, `capture_potential` and `stone_distribution`.

### Other modules

- `mancala.layout` gives the screen position of each pit (`pit_rect`) and store (`store_rect`). `pit_at(x, y)` finds the pit under a point.
- `mancala.console` has `ConsoleMancala` and `play(input_stream, output_stream)` for the terminal game.
- `mancala.gui` has `GameController`, which handles the menu, the clicks and the AI moves separately from the drawing.

## Running the tests

```
pip install .[test]
pytest
```