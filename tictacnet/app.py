"""A window in which a person plays tic-tac-toe against the trained network."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterator, Sequence

import pygame

from tictacnet.game import AI, EMPTY, USER, best_move, check_win, create_player, is_full

WINDOW_WIDTH = 300
WINDOW_HEIGHT = 300
CELL_SIZE = 100
GRID_SIZE = 3

BACKGROUND = (20, 20, 20)
CELL_FILL = (30, 30, 30)
CELL_BORDER = (80, 80, 80)
X_COLOR = (0, 200, 0)
O_COLOR = (200, 0, 0)


def circle_points(x0: int, y0: int, radius: int) -> Iterator[tuple[int, int]]:
    """Yield the points of a circle outline using an integer midpoint walk."""
    x = radius - 1
    y = 0
    dx = 1
    dy = 1
    err = dx - (radius << 1)
    while x >= y:
        yield x0 + x, y0 + y
        yield x0 + y, y0 + x
        yield x0 - y, y0 + x
        yield x0 - x, y0 + y
        yield x0 - x, y0 - y
        yield x0 - y, y0 - x
        yield x0 + y, y0 - x
        yield x0 + x, y0 - y
        if err <= 0:
            y += 1
            err += dy
            dy += 2
        if err > 0:
            x -= 1
            dx += 2
            err += dx - (radius << 1)


def draw_grid(surface: pygame.Surface, grid: Sequence[int]) -> None:
    """Draw the board: 1 as a green X, -1 as red rings, 0 as an empty cell."""
    for idx, value in enumerate(grid):
        cy, cx = divmod(idx, GRID_SIZE)
        left, top = cx * CELL_SIZE, cy * CELL_SIZE
        cell = pygame.Rect(left, top, CELL_SIZE, CELL_SIZE)
        surface.fill(CELL_FILL, cell)
        pygame.draw.rect(surface, CELL_BORDER, cell, 1)
        if value == USER:
            near, far = 10, CELL_SIZE - 10
            pygame.draw.line(surface, X_COLOR, (left + near, top + near), (left + far, top + far))
            pygame.draw.line(surface, X_COLOR, (left + far, top + near), (left + near, top + far))
        elif value == AI:
            centre_x, centre_y = left + CELL_SIZE // 2, top + CELL_SIZE // 2
            for r in range(0, CELL_SIZE // 2 - 10, 2):
                for point in circle_points(centre_x, centre_y, r):
                    surface.set_at(point, O_COLOR)


def cell_at(x: int, y: int) -> int | None:
    """Board index under window pixel (x, y), or None outside the board."""
    mx, my = x // CELL_SIZE, y // CELL_SIZE
    if 0 <= mx < GRID_SIZE and 0 <= my < GRID_SIZE:
        return my * GRID_SIZE + mx
    return None


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against a neural network.")
    parser.add_argument("--games", type=int, default=10000, help="self-play training games")
    parser.add_argument("--seed", type=int, default=None, help="seed for weight initialisation")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Tic-Tac-Toe AI")
        net = create_player(random.Random(args.seed), args.games)

        grid = [EMPTY] * (GRID_SIZE * GRID_SIZE)
        turn = USER
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                if event.type == pygame.MOUSEBUTTONDOWN and turn == USER:
                    idx = cell_at(*event.pos)
                    if idx is not None and grid[idx] == EMPTY:
                        grid[idx] = USER
                        turn = AI

            if turn == AI:
                move = best_move(net, grid)
                if move is not None:
                    grid[move] = AI
                    turn = USER

            winner = check_win(grid)
            if winner != EMPTY:
                print(f"{'User' if winner == USER else 'AI'} wins!")
                pygame.time.delay(1000)
                grid = [EMPTY] * len(grid)
                turn = USER
            elif is_full(grid):
                print("Draw!")
                pygame.time.delay(1000)
                grid = [EMPTY] * len(grid)
                turn = USER

            screen.fill(BACKGROUND)
            draw_grid(screen, grid)
            pygame.display.flip()
            pygame.time.delay(16)
    finally:
        pygame.quit()
    return 0