"""A single-hidden-layer feed-forward network trained by backpropagation."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable

from tictacnet.matrix import Matrix


def sigmoid(x: float) -> float:
    """Logistic function, computed without overflow for large ``|x|``."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def dsigmoid(y: float) -> float:
    """Derivative of the sigmoid, given its output ``y``."""
    return y * (1.0 - y)


def _as_column(values: Matrix | Iterable[float]) -> Matrix:
    return values if isinstance(values, Matrix) else Matrix.column(values)


class NeuralNet:
    """Input -> sigmoid hidden layer -> sigmoid output layer."""

    def __init__(
        self,
        input_size: int,
        hidden_size: int,
        output_size: int,
        learning_rate: float = 0.1,
        rng: random.Random | None = None,
    ) -> None:
        self.input_size = input_size
        self.hidden_size = hidden_size
        self.output_size = output_size
        self.learning_rate = learning_rate
        self.weights_ih = Matrix(hidden_size, input_size)
        self.weights_ho = Matrix(output_size, hidden_size)
        self.bias_h = Matrix(hidden_size, 1)
        self.bias_o = Matrix(output_size, 1)
        for m in (self.weights_ih, self.weights_ho, self.bias_h, self.bias_o):
            m.randomize(-1.0, 1.0, rng)

    def _check_input(self, inputs: Matrix) -> None:
        if inputs.shape != (self.input_size, 1):
            raise ValueError(
                f"expected a {self.input_size}x1 input, got {inputs.rows}x{inputs.cols}"
            )

    def _forward(self, inputs: Matrix) -> tuple[Matrix, Matrix]:
        hidden = self.weights_ih.dot(inputs) + self.bias_h
        hidden.apply(sigmoid)
        output = self.weights_ho.dot(hidden) + self.bias_o
        output.apply(sigmoid)
        return hidden, output

    def predict(self, inputs: Matrix | Iterable[float]) -> Matrix:
        """Return the output column for ``inputs``."""
        column = _as_column(inputs)
        self._check_input(column)
        return self._forward(column)[1]

    def train(
        self, inputs: Matrix | Iterable[float], target: Matrix | Iterable[float]
    ) -> None:
        """Run one step of gradient descent toward ``target``."""
        column = _as_column(inputs)
        goal = _as_column(target)
        self._check_input(column)
        if goal.shape != (self.output_size, 1):
            raise ValueError(
                f"expected a {self.output_size}x1 target, got {goal.rows}x{goal.cols}"
            )
        lr = self.learning_rate

        hidden, output = self._forward(column)
        error = goal - output
        d_output = Matrix(
            output.rows, output.cols,
            (e * dsigmoid(o) for e, o in zip(error, output)),
        )

        delta_ho = d_output.dot(hidden.transpose())
        self.weights_ho.data = [w + lr * d for w, d in zip(self.weights_ho, delta_ho)]
        self.bias_o.data = [b + lr * d for b, d in zip(self.bias_o, d_output)]

        # The hidden error is propagated through the already updated output weights.
        hidden_error = self.weights_ho.transpose().dot(d_output)
        d_hidden = Matrix(
            hidden.rows, hidden.cols,
            (e * dsigmoid(h) for e, h in zip(hidden_error, hidden)),
        )

        delta_ih = d_hidden.dot(column.transpose())
        self.weights_ih.data = [w + lr * d for w, d in zip(self.weights_ih, delta_ih)]
        self.bias_h.data = [b + lr * d for b, d in zip(self.bias_h, d_hidden)]