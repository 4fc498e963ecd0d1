"""
Errors raised by randhelper.

Wrong input is a programmer error: these surface immediately and are never retried.
"""


class InvalidArgument(ValueError):
    """An argument is outside the domain of a sampling operation."""


class EmptyCollectionError(InvalidArgument):
    """choose() was given a collection with no elements."""
