# tinyneuro

A small feedforward neural network with one hidden layer and sigmoid
activations. It trains by plain backpropagation and runs on a minimal
pure-Python `Matrix` type, with no dependencies beyond the standard library.

## Install

    pip install .

## Command line

    tinyneuro [--epochs N] [--seed S] [--verbose]

This trains a 2-2-1 network on the XOR truth table and then runs it on the
four inputs, printing each input and the network's output, followed by a
closing message.

- `--epochs N`: number of passes over the four XOR samples (default 10000;
  a negative value is rejected).
- `--seed S`: seed for the random initial weights and biases, so that runs
  can be repeated.
- `--verbose`: also print every feedforward pass made during training.

The same entry point runs with `python -m tinyneuro.cli`.

## Library use

```python
import random

from tinyneuro.matrix import Matrix
from tinyneuro.network import NeuralNetwork, sigmoid, derivative_sigmoid
from tinyneuro.cli import train_xor

nn = NeuralNetwork(2, 2, 1, learning_rate=0.1, rng=random.Random(1), verbose=False)
train_xor(nn, epochs=10000)

outputs = nn.feedforward([1, 0])
print(outputs)               # a list with one value between 0 and 1

# Training one example by hand
inputs, target = [0, 1], [1]
outputs = nn.feedforward(inputs)
nn.train(inputs, target, outputs)
```

### NeuralNetwork

`NeuralNetwork(input_nodes, hidden_nodes, output_nodes, learning_rate=0.1,
rng=None, verbose=False)` sets up weights and biases drawn uniformly from
-1 to 1 using `rng` (a `random.Random`; a fresh one when omitted).

- `feedforward(inputs)` takes a sequence of `input_nodes` numbers and
  returns the output layer as a list. With `verbose` set it prints the
  inputs and outputs.
- `train(inputs, targets, outputs=None)` makes one backpropagation step,
  updating the weights and biases in place. `outputs` should be what the
  preceding `feedforward(inputs)` returned; if it is left out, a
  feedforward pass is run first.

Inputs, targets or outputs of the wrong length raise `ValueError`.

`sigmoid(x)` is the logistic function; `derivative_sigmoid(y)` is its
derivative expressed through the sigmoid's output `y`.

`train_xor(network, epochs=10000)` trains any network with two inputs and
one output on the four XOR samples and returns it.

### Matrix

`Matrix(rows, cols)` starts filled with zeros; negative dimensions raise
`ValueError`. `Matrix.from_list` builds a single-row matrix and
`Matrix.from_rows` builds one from nested lists (rows of unequal length
raise `ValueError`). The `rows`, `cols`, `shape` and `data` attributes
expose its size and contents, and matrices compare equal when shape and
values match.

- in place: `scale`, `add_scalar`, `add`, `hadamard`, `map`, `randomize`
- returning a new matrix: `subtract`, `matmul` (also `a @ b`), `transpose`,
  `mapped`, `copy`
- output: `to_list` (values row by row) and `format` (text, one line per
  row, each value followed by a space)

`add`, `subtract` and `hadamard` on matrices of different shapes, and
`matmul` on shapes that do not fit, raise `ValueError`.

## Limits

The network has exactly one hidden layer and uses sigmoid activation
throughout. There is no way to save a trained network to a file or load
one back; weights live only in memory for the life of the object.