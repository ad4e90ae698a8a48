"""Fishing: a shedding card game engine with pluggable bot strategies."""

__version__ = "0.1.0"
