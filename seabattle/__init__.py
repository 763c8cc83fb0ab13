"""Sea Battle: human vs. CPU Battleship on a square grid."""

__version__ = "0.1.0"
