[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hanoi-tower"
version = "0.1.0"
description = "Tower of Hanoi puzzle game with a reusable game-logic core and solver"
requires-python = ">=3.10"
keywords = ["hanoi", "tower of hanoi", "puzzle", "game", "pygame", "solver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hanoi-tower = "hanoi_tower.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hanoi_tower"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
