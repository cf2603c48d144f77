"""Solutions to classic programming puzzles on grids, arrays, numbers, strings and dates."""

__version__ = "0.1.0"

__all__ = ["arrays", "dates", "everyday", "grids", "numbers", "permutations", "strings"]