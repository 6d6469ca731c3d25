"""Command line entry point: train a network on XOR and show its outputs."""

from __future__ import annotations

import argparse
import random
from typing import Sequence

from tinyneuro.network import NeuralNetwork

XOR_INPUTS = ([0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0])
XOR_TARGETS = ([0.0], [1.0], [1.0], [0.0])


def train_xor(network: NeuralNetwork, epochs: int = 10000) -> NeuralNetwork:
    """Train ``network`` on the four XOR samples for ``epochs`` passes."""
    if epochs < 0:
        raise ValueError("epochs must be non-negative")
    for _ in range(epochs):
        for inputs, targets in zip(XOR_INPUTS, XOR_TARGETS):
            outputs = network.feedforward(inputs)
            network.train(inputs, targets, outputs)
    return network


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Train a 2-2-1 network on XOR.")
    parser.add_argument("--epochs", type=int, default=10000, help="training passes")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--verbose", action="store_true", help="print every feedforward pass while training"
    )
    args = parser.parse_args(argv)
    if args.epochs < 0:
        parser.error("--epochs must be non-negative")

    network = NeuralNetwork(2, 2, 1, rng=random.Random(args.seed), verbose=args.verbose)
    train_xor(network, args.epochs)

    print("Training complete. Testing the network:")
    network.verbose = True
    for inputs in XOR_INPUTS:
        network.feedforward(inputs)
    print("Neural Network Ready ! All outputs matched")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())