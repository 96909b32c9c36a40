"""Exceptions raised by the style model."""
from __future__ import annotations


class InvalidStyleError(ValueError):
    """Raised when a style value cannot be interpreted and no safe default exists."""
