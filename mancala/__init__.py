"""Kalah-style Mancala: game rules, a minimax opponent, a pygame board and a console game."""

__version__ = "0.1.0"