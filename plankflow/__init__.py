"""PlankFlow: guided plank workout timer with session recording."""

__version__ = "0.1.0"
