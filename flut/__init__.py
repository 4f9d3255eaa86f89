"""A small pygame widget toolkit with layout, animation helpers, event routing and a worm game."""

__version__ = "0.1.0"