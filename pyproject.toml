[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyneuro"
version = "0.1.0"
description = "A tiny feedforward neural network with one hidden layer, built on a small pure-Python matrix type"
requires-python = ">=3.10"
dependencies = []
keywords = ["neural network", "backpropagation", "matrix", "xor", "machine learning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyneuro = "tinyneuro.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyneuro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
