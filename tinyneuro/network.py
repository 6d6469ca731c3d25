"""A feed-forward network with one hidden layer trained by backpropagation."""

from __future__ import annotations

import math
import random
from typing import Sequence

from tinyneuro.matrix import Matrix


def sigmoid(x: float) -> float:
    """Logistic function, computed without overflow for large inputs."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def derivative_sigmoid(y: float) -> float:
    """Derivative of the sigmoid, given its output ``y``."""
    return y * (1.0 - y)


class NeuralNetwork:
    """Input, one hidden and one output layer, all with sigmoid activation."""

    def __init__(
        self,
        input_nodes: int,
        hidden_nodes: int,
        output_nodes: int,
        learning_rate: float = 0.1,
        rng: random.Random | None = None,
        verbose: bool = False,
    ) -> None:
        self.input_nodes = input_nodes
        self.hidden_nodes = hidden_nodes
        self.output_nodes = output_nodes
        self.learning_rate = learning_rate
        self.verbose = verbose
        rng = rng or random.Random()

        self.weights_ih = Matrix(hidden_nodes, input_nodes)
        self.weights_ho = Matrix(output_nodes, hidden_nodes)
        self.bias_h = Matrix(hidden_nodes, 1)
        self.bias_o = Matrix(output_nodes, 1)
        self.hidden_layer = Matrix(hidden_nodes, 1)
        self.output_layer = Matrix(output_nodes, 1)
        for matrix in (self.weights_ih, self.weights_ho, self.bias_h, self.bias_o):
            matrix.randomize(-1, 1, rng)

    def _column(self, values: Sequence[float], expected: int, what: str) -> Matrix:
        if len(values) != expected:
            raise ValueError(f"expected {expected} {what}, got {len(values)}")
        return Matrix.from_list(values).transpose()

    def feedforward(self, inputs: Sequence[float]) -> list[float]:
        """Propagate ``inputs`` through the network and return the outputs."""
        column = self._column(inputs, self.input_nodes, "inputs")
        if self.verbose:
            print("Inputs:" + Matrix.from_list(inputs).format(), end="")

        hidden = self.weights_ih @ column
        hidden.add(self.bias_h)
        hidden.map(sigmoid)
        self.hidden_layer = hidden

        output = self.weights_ho @ hidden
        output.add(self.bias_o)
        output.map(sigmoid)
        self.output_layer = output

        if self.verbose:
            print("Output: \n" + output.format(), end="")
        return output.to_list()

    def train(
        self,
        inputs: Sequence[float],
        targets: Sequence[float],
        outputs: Sequence[float] | None = None,
    ) -> None:
        """Adjust weights and biases by one backpropagation step.

        ``outputs`` are the values returned by the preceding ``feedforward``
        call on ``inputs``; when omitted, a feedforward pass is run first.
        """
        if outputs is None:
            outputs = self.feedforward(inputs)
        input_column = self._column(inputs, self.input_nodes, "inputs")
        target_column = self._column(targets, self.output_nodes, "targets")
        output_column = self._column(outputs, self.output_nodes, "outputs")

        output_errors = target_column.subtract(output_column)

        gradient = self.output_layer.mapped(derivative_sigmoid)
        gradient.hadamard(output_errors)
        gradient.scale(self.learning_rate)
        weight_ho_deltas = gradient @ self.hidden_layer.transpose()
        self.bias_o.add(gradient)

        hidden_errors = self.weights_ho.transpose() @ output_errors
        hidden_gradient = self.hidden_layer.mapped(derivative_sigmoid)
        hidden_gradient.hadamard(hidden_errors)
        hidden_gradient.scale(self.learning_rate)
        weight_ih_deltas = hidden_gradient @ input_column.transpose()
        self.bias_h.add(hidden_gradient)

        self.weights_ih.add(weight_ih_deltas)
        self.weights_ho.add(weight_ho_deltas)