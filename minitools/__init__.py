"""Small utilities for arithmetic, base conversion, matrices, statistics, text, student records and tic-tac-toe."""

__version__ = "0.1.0"