"""
TicTacToe
=========
A Tic-Tac-Toe game against a computer that never loses.
The human clicks cells in a small window, the computer answers with
the move chosen by an exhaustive minimax search.

Marks: X always moves first, O second.
"""

__version__ = "1.0.0"
