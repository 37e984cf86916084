"""Tab separated value parsing into an immutable in-memory table."""

from .parsing import EmptyInputError, TsvError, TsvTable, parse

__all__ = [
    "EmptyInputError",
    "TsvError",
    "TsvTable",
    "parse",
    "loading",
    "parsing",
]
