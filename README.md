# tictacnet

Play tic-tac-toe in a window against a small neural network.

On start-up the network (9 inputs, 18 hidden units, 9 outputs, sigmoid
activations, learning rate 0.1) plays games against itself, training after
every move: a move that wins is pushed towards 1.0, a move that loses towards
0.0, and any other move towards 0.5. You then play X against it; the network
plays O by choosing the empty cell with the highest output.

## Installing

```
pip install .
```

## Playing

```
tictacnet
```

Options:

- `--games N` — number of self-play training games before play starts
  (default 10000).
- `--seed N` — seed for the random initial weights, for repeatable training.

Click a cell to place your X. The network answers at once. When someone wins,
or the board is full, the result (`User wins!`, `AI wins!` or `Draw!`) is
printed and a new game begins after a one-second pause. Close the window to
quit.

The trained network is kept only for the session; it is not saved to disk.

## Using the pieces

The package can also be used as a library:

- `tictacnet.matrix.Matrix` — a small row-major float matrix. Build one with
  `Matrix(rows, cols, data=None)`, `Matrix.from_rows(...)` or
  `Matrix.column(...)`; index it by flat position or `(row, col)`; combine
  with `dot` (or `@`), `+` and `-`; and use `transpose`, `apply`, `fill`,
  `randomize(low, high, rng=None)` and `format`. Mismatched shapes raise
  `ValueError`.
- `tictacnet.neuralnet.NeuralNet` — a one-hidden-layer network with
  `predict(inputs)` and `train(inputs, target)`; inputs and targets may be a
  column `Matrix` or any iterable of floats. `sigmoid` and `dsigmoid` are
  available from the same module.
- `tictacnet.game` — `check_win`, `is_full`, `best_move`, `self_play` and
  `create_player` for the game logic and training.
- `tictacnet.app` — the window: `main`, `draw_grid`, `cell_at` and
  `circle_points`.

```python
import random
from tictacnet.game import create_player, best_move, check_win

net = create_player(random.Random(1), games=500)
board = [1, 0, 0,
         0, 0, 0,
         0, 0, 0]
print(best_move(net, board))   # index of the cell the network picks
print(check_win([1, 1, 1, 0, -1, -1, 0, 0, 0]))   # 1: X has won
```

Board cells hold `1` for X (the user), `-1` for O (the network) and `0` for
empty. `best_move` returns `None` on a full board, and `self_play` returns
the winner of each game (`0` for a draw).

## Tests

```
pip install .[test]
pytest
```