"""Generate, explore and solve n-dimensional wrap-around mazes in the terminal."""

__version__ = "0.1.0"