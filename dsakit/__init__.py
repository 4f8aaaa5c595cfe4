"""Classic data structures, a lending-library catalogue and a book record file."""

__version__ = "0.1.0"