"""A console puzzle game of fitting toys into holes by shape, colour and size."""

__version__ = "0.1.0"