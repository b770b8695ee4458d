[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mancala"
version = "0.1.0"
description = "Kalah-style Mancala with a minimax computer opponent, a pygame board and a two-player console game"
requires-python = ">=3.10"
keywords = ["mancala", "kalah", "board game", "minimax", "alpha-beta", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mancala = "mancala.gui:main"
mancala-console = "mancala.console:main"

[tool.hatch.build.targets.wheel]
packages = ["mancala"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
