"""Pomotodo - a terminal task list with a pomodoro focus timer."""

__version__ = "0.1.0"
