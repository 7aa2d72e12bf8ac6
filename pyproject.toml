[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tictacnet"
version = "0.1.0"
description = "Tic-tac-toe against a small neural network trained by self-play"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["tic-tac-toe", "neural network", "self-play", "game", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tictacnet = "tictacnet.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tictacnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
