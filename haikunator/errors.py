#!/usr/bin/env python3
"""
Haikunator Errors
=================
Exception hierarchy for name generation.

All errors derive from ``HaikunatorError``, which is a ``ValueError`` so
callers that already guard generation with ``except ValueError`` keep working.
"""


class HaikunatorError(ValueError):
    """Base class for all name generation errors."""


class InvalidConfiguration(HaikunatorError):
    """Token settings (or a bulk count) cannot produce a name."""


class EmptyWordList(HaikunatorError):
    """An adjective or noun list resolved to zero entries."""


class CapacityExceeded(HaikunatorError):
    """
    More unique names were requested than the configuration can produce.

    Attributes
    ----------
    requested : int
        Number of names asked for
    capacity : int
        Number of distinct names the configuration can produce
    """

    def __init__(self, message: str, requested: int = None, capacity: int = None):
        super().__init__(message)
        self.requested = requested
        self.capacity = capacity


class UniquenessExhausted(CapacityExceeded):
    """The bulk retry budget ran out before enough unique names were found."""


class RandomnessUnavailable(HaikunatorError):
    """No strong randomness source exists and no weak fallback was allowed."""


__all__ = [
    'HaikunatorError',
    'InvalidConfiguration',
    'EmptyWordList',
    'CapacityExceeded',
    'UniquenessExhausted',
    'RandomnessUnavailable',
]
