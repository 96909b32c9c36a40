"""Process-wide default values consumed by style entities."""
from __future__ import annotations

from dataclasses import dataclass, replace

from docx_styles.model.errors import InvalidStyleError
from docx_styles.model.options import is_real_number
from docx_styles.utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_FONT_NAME = "Arial"
DEFAULT_FONT_SIZE = 10
DEFAULT_FONT_COLOR = "000000"
DEFAULT_CONTENT_HINT = "default"


@dataclass(frozen=True, slots=True)
class StyleDefaults:
    """Fallback values used whenever a style setter rejects its input."""

    font_name: str = DEFAULT_FONT_NAME
    font_size: float = DEFAULT_FONT_SIZE
    font_color: str = DEFAULT_FONT_COLOR
    content_hint: str = DEFAULT_CONTENT_HINT

    def __post_init__(self) -> None:
        for field_name in ("font_name", "font_color", "content_hint"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise InvalidStyleError(f"Default {field_name} must be a non-empty string")
        size = self.font_size
        if not is_real_number(size) or size <= 0:
            raise InvalidStyleError("Default font_size must be a positive number")


_BUILTIN_DEFAULTS = StyleDefaults()
_active_defaults = _BUILTIN_DEFAULTS


def get_defaults() -> StyleDefaults:
    """Return the defaults currently in effect."""
    return _active_defaults


def set_defaults(**changes: object) -> StyleDefaults:
    """Replace selected default values and return the new defaults."""
    global _active_defaults
    _active_defaults = replace(_active_defaults, **changes)
    LOGGER.info("Style defaults updated: %s", ", ".join(sorted(changes)))
    return _active_defaults


def reset_defaults() -> StyleDefaults:
    """Restore the built-in defaults."""
    global _active_defaults
    _active_defaults = _BUILTIN_DEFAULTS
    return _active_defaults
