"""Ataxx rules engine and alpha-beta AI."""

__version__ = "1.0.0"
