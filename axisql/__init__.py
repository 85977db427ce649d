"""A tiny in-memory SQL-like database engine with a shell and a script interpreter."""

__version__ = "0.1.0"
__all__ = ["database", "functions", "interpreter", "cli", "demo"]