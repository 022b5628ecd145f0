"""Lexical analyser for a small keyword-based teaching language."""

__version__ = "0.1.0"
__all__ = ["__version__"]