"""Exceptions raised by DazzleForest.

Only malformed input raises. A query that finds nothing returns None or an
empty list, and structural edits that have nothing to do are silent no-ops.
"""


class ForestError(Exception):
    """Base class for all DazzleForest errors."""
    pass


class InvalidArgumentError(ForestError, ValueError):
    """Raised when an argument has the wrong shape or value.

    Covers non-forest inputs, missing names or keys, callbacks that are not
    callable and unrecognized option tokens.
    """
    pass


class DecodeError(ForestError, ValueError):
    """Raised when external text cannot be decoded into a forest."""
    pass
