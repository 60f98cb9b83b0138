"""Circulation desk for a small lending library: books, clients, loans and returns."""

__version__ = "0.1.0"

__all__ = ["__version__"]