"""daybook: a personal list of non-overlapping appointments."""

__version__ = "0.1.0"
