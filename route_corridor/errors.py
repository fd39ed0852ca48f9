# -*- coding: utf-8 -*-
"""
Error kinds raised while building corridors.
"""


class CorridorError(Exception):
    """Base class for all corridor errors."""


class InvalidArgument(CorridorError, ValueError):
    """Non-positive offset, malformed or out-of-range coordinate."""


class DegenerateInput(CorridorError):
    """Zero-length segment; the bearing between its endpoints is undefined.

    This is a skip condition for the builder rather than a failure.
    """


class UnionFailure(CorridorError):
    """The overlay could not resolve a numerically degenerate configuration."""
