"""Solutions to classic sorting, array, matrix and puzzle exercises."""

__version__ = "0.1.0"
__all__ = ["sorting", "matrix", "arrays", "puzzles"]