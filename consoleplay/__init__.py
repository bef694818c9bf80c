"""Console games, an Ohm's law calculator, a binary converter, a stopwatch,
a birthday-problem simulation and search and sort demonstrations."""

__version__ = "0.1.0"