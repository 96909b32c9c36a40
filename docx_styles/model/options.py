"""Generic option-mapping dispatch and value coercion shared by style entities.

Style entities are frequently configured from loosely typed input such as
markup attributes or author-supplied dictionaries. Each entity registers a
dispatch table of option name to setter when it is created; ``apply_options``
then routes every key of a mapping through that table, leaving validation to
the individual setters.
"""
from __future__ import annotations

import math
import re
from typing import Any, Callable, Dict, Mapping, Optional

from docx_styles.model.errors import InvalidStyleError
from docx_styles.utils.logger import get_logger

LOGGER = get_logger(__name__)

LINE_HEIGHT_KEY = "line-height"

OptionSetter = Callable[[Any], Any]

_LINE_HEIGHT_STRIP = re.compile(r"[^0-9.,]")


def normalize_option_key(key: str) -> str:
    """Fold an option name so ``fgColor``, ``fg_color`` and ``_fgcolor`` match."""
    return key.lstrip("_").replace("-", "").replace("_", "").casefold()


def is_real_number(value: object) -> bool:
    """True for finite ints and floats, excluding booleans."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def coerce_positive_number(value: object) -> Optional[float]:
    """Return ``value`` as a positive number, or None when it is not one.

    Numbers are returned unchanged; numeric strings are parsed as floats.
    """
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not is_real_number(value) or value <= 0:
        return None
    return value


def coerce_int(value: object, *, minimum: Optional[int] = None) -> Optional[int]:
    """Return ``value`` as an int, or None when it is not an integral number."""
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not is_real_number(value) or value != int(value):
        return None
    result = int(value)
    if minimum is not None and result < minimum:
        return None
    return result


def coerce_line_height(value: object) -> float:
    """Interpret ``value`` as a positive line-height multiplier.

    Strings are stripped of everything except digits and decimal separators,
    with a comma read as a decimal point, so ``"1,5pt"`` becomes ``1.5``.
    """
    if isinstance(value, str):
        cleaned = _LINE_HEIGHT_STRIP.sub("", value).replace(",", ".")
        try:
            value = float(cleaned)
        except ValueError:
            raise InvalidStyleError("Line height must be a valid number") from None
    if not is_real_number(value) or value <= 0:
        raise InvalidStyleError("Line height must be a valid number")
    return value


def non_empty_string(value: object) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


class StyleOptionsMixin:
    """Adds ``apply_options`` and ``set_style_value`` to a style entity.

    Subclasses call ``_register_options`` from ``__init__`` with a mapping of
    option names to bound setters.
    """

    _dispatch: Dict[str, OptionSetter]
    set_line_height: OptionSetter

    def _register_options(self, setters: Mapping[str, OptionSetter]) -> None:
        self._dispatch = {normalize_option_key(name): setter for name, setter in setters.items()}

    def option_names(self) -> list[str]:
        """Return the normalized option names this entity understands."""
        return sorted(self._dispatch)

    def set_style_value(self, key: str, value: object):
        """Route a single option to its setter; unknown keys are ignored."""
        setter = self._dispatch.get(normalize_option_key(key)) if isinstance(key, str) else None
        if setter is None:
            LOGGER.debug("Ignoring unknown %s option: %s", type(self).__name__, key)
            return self
        setter(value)
        return self

    def apply_options(self, options: Optional[Mapping[str, object]] = None):
        """Apply every option of ``options`` in the order supplied."""
        for key, value in (options or {}).items():
            if key == LINE_HEIGHT_KEY:
                self.set_line_height(value)
            else:
                self.set_style_value(key, value)
        return self
