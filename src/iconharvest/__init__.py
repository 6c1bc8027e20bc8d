"""Discover icons in third-party icon packages and derive their feature names."""

__version__ = "0.1.0"
