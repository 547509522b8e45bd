"""Pygame desktop window, an alternative to the terminal front end."""
