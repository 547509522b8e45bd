"""JUMP BOI: a terminal side-scroller where you jump over whatever comes at you."""

__version__ = "0.1.0"
