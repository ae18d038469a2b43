"""Console exercises, a word game, a team roster and a brick-breaker arcade game."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "students",
    "text",
    "wordle",
    "vector2d",
    "dynarray",
    "roster",
    "breakout",
]