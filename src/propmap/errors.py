"""
Exception types raised inside propmap.

Public map operations never let these escape: the persistence layer
catches them, logs them and reports a failed write status instead.
They are still raised by encoders and stores so that those components
can be used and tested on their own.
"""

from __future__ import annotations


class PropMapError(Exception):
    """Base class for all propmap errors."""


class EncodeError(PropMapError):
    """A value could not be converted to its stored text form."""


class DecodeError(PropMapError):
    """Stored text could not be converted back to a value."""


class StoreError(PropMapError):
    """The backing store rejected a read or write."""
