"""Exceptions raised by the map factories and the maps they return."""

from __future__ import annotations


class MapsError(Exception):
    """Base class for micro_maps errors."""


class InvalidArgumentError(MapsError, ValueError):
    """An argument has the right type but an unusable value."""


class NullArgumentError(MapsError, TypeError):
    """A required map argument was None."""


class UnsupportedOperationError(MapsError, TypeError):
    """A mutation was attempted on an immutable map."""
