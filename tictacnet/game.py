"""Tic-tac-toe rules and a network that learns to play them by self-play."""

from __future__ import annotations

import random
from collections.abc import Sequence

from tictacnet.matrix import Matrix
from tictacnet.neuralnet import NeuralNet

USER = 1
AI = -1
EMPTY = 0
BOARD_CELLS = 9

# Lines are checked in pairs: row i together with column i, then both diagonals.
_LINE_GROUPS = (
    ((0, 1, 2), (0, 3, 6)),
    ((3, 4, 5), (1, 4, 7)),
    ((6, 7, 8), (2, 5, 8)),
    ((0, 4, 8), (2, 4, 6)),
)

_REWARD_WIN = 1.0
_REWARD_LOSS = 0.0
_REWARD_NEUTRAL = 0.5


def _check_board(grid: Sequence[int]) -> None:
    if len(grid) != BOARD_CELLS:
        raise ValueError(f"a board has {BOARD_CELLS} cells, got {len(grid)}")


def check_win(grid: Sequence[int]) -> int:
    """Return 1 if X has three in a line, -1 if O has, 0 otherwise."""
    _check_board(grid)
    for group in _LINE_GROUPS:
        sums = [sum(grid[i] for i in line) for line in group]
        if 3 in sums:
            return USER
        if -3 in sums:
            return AI
    return EMPTY


def is_full(grid: Sequence[int]) -> bool:
    """True when no cell of the board is empty."""
    _check_board(grid)
    return all(cell != EMPTY for cell in grid)


def _pick(output: Matrix, board: Sequence[int]) -> int | None:
    empties = [i for i, cell in enumerate(board) if cell == EMPTY]
    if not empties:
        return None
    return max(empties, key=lambda i: output[i])


def best_move(net: NeuralNet, board: Sequence[int]) -> int | None:
    """The empty cell the network scores highest, or None on a full board."""
    _check_board(board)
    return _pick(net.predict(Matrix.column(board)), board)


def self_play(net: NeuralNet, games: int) -> list[int]:
    """Let the network play ``games`` games against itself, training after every move.

    Returns the winner of each game (0 for a draw).
    """
    winners = []
    for _ in range(games):
        board = [EMPTY] * BOARD_CELLS
        player = USER
        moves = 0
        winner = EMPTY
        while winner == EMPTY and moves < BOARD_CELLS:
            inputs = Matrix.column(board)
            output = net.predict(inputs)
            move = _pick(output, board)
            if move is None:
                break
            board[move] = player
            moves += 1
            winner = check_win(board)

            target = Matrix.column(output)
            if winner == player:
                target[move] = _REWARD_WIN
            elif winner == -player:
                target[move] = _REWARD_LOSS
            else:
                target[move] = _REWARD_NEUTRAL
            net.train(inputs, target)
            player = -player
        winners.append(winner)
    return winners


def create_player(rng: random.Random | None = None, games: int = 10000) -> NeuralNet:
    """Build a 9-18-9 network and train it through ``games`` self-play games."""
    net = NeuralNet(BOARD_CELLS, 18, BOARD_CELLS, 0.1, rng)
    self_play(net, games)
    return net