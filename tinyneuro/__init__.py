"""A tiny one-hidden-layer neural network on a minimal matrix type, with an XOR training command."""

__version__ = "0.1.0"
__all__ = ["__version__"]