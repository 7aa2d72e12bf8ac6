"""Tic-tac-toe against a small neural network trained by self-play."""

__version__ = "0.1.0"