[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consoleplay"
version = "0.1.0"
description = "Small console games, calculators and classic algorithm demos"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "games",
    "tictactoe",
    "rock-paper-scissors",
    "ohms-law",
    "stopwatch",
    "birthday-problem",
    "binary",
    "sorting",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consoleplay-ohms = "consoleplay.ohms_law:main"
consoleplay-stopwatch = "consoleplay.stopwatch:main"
consoleplay-birthday = "consoleplay.birthday:main"
consoleplay-binary = "consoleplay.binary:main"
consoleplay-algorithms = "consoleplay.algorithms:main"
consoleplay-rps = "consoleplay.rock_paper_scissors:main"
consoleplay-tictactoe = "consoleplay.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["consoleplay"]

[tool.pytest.ini_options]
addopts = "-ra"
