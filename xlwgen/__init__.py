"""Tokenise C++ declarations, resolve function types and generate add-in wrapper code."""

__version__ = "0.1.0"