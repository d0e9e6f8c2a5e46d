"""Caller contract violations raised by the generation core."""

from __future__ import annotations


class GenerationError(ValueError):
    """Base class for rejected generation requests."""


class InvalidDateRangeError(GenerationError):
    """start > end, or the range spans more months than allowed."""


class InvalidModeError(GenerationError):
    """Generation mode is not 'full' or 'extend'."""


class ExtendConflictError(GenerationError):
    """Existing records cannot be extended without rewriting them."""
