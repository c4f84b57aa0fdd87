"""The Drake: rules engine for a two-player tactical board game."""

__version__ = "0.1.0"
