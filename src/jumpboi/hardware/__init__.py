"""Device abstractions shared by the terminal and window front ends."""

from jumpboi.hardware.base import Display, TextDisplay, KeySource

__all__ = ["Display", "TextDisplay", "KeySource"]
