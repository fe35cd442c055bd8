"""Graph search algorithms, a grid-cleaning robot and a command-line front end."""

__version__ = "0.1.0"