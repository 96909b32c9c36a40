"""Paragraph-level formatting attached to font and paragraph style presets."""
from __future__ import annotations

from typing import Mapping, Optional

from docx_styles.model.options import (
    StyleOptionsMixin,
    coerce_int,
    coerce_line_height,
    non_empty_string,
)
from docx_styles.utils.logger import get_logger

LOGGER = get_logger(__name__)


class Alignment:
    """Values accepted by ``ParagraphStyle.set_align`` (w:jc tokens)."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    BOTH = "both"
    DISTRIBUTE = "distribute"


_ALIGNMENTS = {
    Alignment.LEFT,
    Alignment.CENTER,
    Alignment.RIGHT,
    Alignment.BOTH,
    Alignment.DISTRIBUTE,
}
_ALIGNMENT_ALIASES = {"justify": Alignment.BOTH, "start": Alignment.LEFT, "end": Alignment.RIGHT}


class ParagraphStyle(StyleOptionsMixin):
    """Paragraph formatting: alignment, spacing, indentation and pagination flags.

    Spacing and indentation are kept in twips, the unit WordprocessingML uses.
    ``line_height`` is a multiplier and stays ``None`` until something sets it.
    """

    def __init__(self, options: Optional[Mapping[str, object]] = None) -> None:
        self._align: Optional[str] = None
        self._space_before: Optional[int] = None
        self._space_after: Optional[int] = None
        self._spacing: Optional[int] = None
        self._indent: Optional[int] = None
        self._hanging: Optional[int] = None
        self._line_height: Optional[float] = None
        self._keep_next = False
        self._keep_lines = False
        self._page_break_before = False
        self._widow_control = True
        self._based_on: Optional[str] = None
        self._next: Optional[str] = None
        self._register_options(
            {
                "align": self.set_align,
                "space_before": self.set_space_before,
                "space_after": self.set_space_after,
                "spacing": self.set_spacing,
                "indent": self.set_indent,
                "hanging": self.set_hanging,
                "line_height": self.set_line_height,
                "keep_next": self.set_keep_next,
                "keep_lines": self.set_keep_lines,
                "page_break_before": self.set_page_break_before,
                "widow_control": self.set_widow_control,
                "based_on": self.set_based_on,
                "next": self.set_next,
            }
        )
        if options:
            self.apply_options(options)

    def __repr__(self) -> str:
        return (
            f"ParagraphStyle(align={self._align!r}, line_height={self._line_height!r}, "
            f"space_before={self._space_before!r}, space_after={self._space_after!r})"
        )

    # ------------------------------------------------------------------
    # Alignment

    @property
    def align(self) -> Optional[str]:
        return self._align

    @align.setter
    def align(self, value: object) -> None:
        self.set_align(value)

    def set_align(self, value: object) -> "ParagraphStyle":
        token = value.strip().lower() if isinstance(value, str) else None
        if token in _ALIGNMENT_ALIASES:
            token = _ALIGNMENT_ALIASES[token]
        if token not in _ALIGNMENTS:
            if value is not None:
                LOGGER.debug("Unsupported paragraph alignment %r; clearing", value)
            token = None
        self._align = token
        return self

    # ------------------------------------------------------------------
    # Spacing (twips)

    @property
    def space_before(self) -> Optional[int]:
        return self._space_before

    @space_before.setter
    def space_before(self, value: object) -> None:
        self.set_space_before(value)

    def set_space_before(self, value: object) -> "ParagraphStyle":
        self._space_before = coerce_int(value, minimum=0)
        return self

    @property
    def space_after(self) -> Optional[int]:
        return self._space_after

    @space_after.setter
    def space_after(self, value: object) -> None:
        self.set_space_after(value)

    def set_space_after(self, value: object) -> "ParagraphStyle":
        self._space_after = coerce_int(value, minimum=0)
        return self

    @property
    def spacing(self) -> Optional[int]:
        """Exact or at-least line spacing in twips."""
        return self._spacing

    @spacing.setter
    def spacing(self, value: object) -> None:
        self.set_spacing(value)

    def set_spacing(self, value: object) -> "ParagraphStyle":
        self._spacing = coerce_int(value, minimum=0)
        return self

    # ------------------------------------------------------------------
    # Indentation (twips)

    @property
    def indent(self) -> Optional[int]:
        return self._indent

    @indent.setter
    def indent(self, value: object) -> None:
        self.set_indent(value)

    def set_indent(self, value: object) -> "ParagraphStyle":
        self._indent = coerce_int(value)
        return self

    @property
    def hanging(self) -> Optional[int]:
        return self._hanging

    @hanging.setter
    def hanging(self, value: object) -> None:
        self.set_hanging(value)

    def set_hanging(self, value: object) -> "ParagraphStyle":
        self._hanging = coerce_int(value)
        return self

    # ------------------------------------------------------------------
    # Line height

    @property
    def line_height(self) -> Optional[float]:
        return self._line_height

    @line_height.setter
    def line_height(self, value: object) -> None:
        self.set_line_height(value)

    def set_line_height(self, value: object) -> "ParagraphStyle":
        """Set the line-height multiplier; raises ``InvalidStyleError`` on bad input."""
        self._line_height = coerce_line_height(value)
        return self

    # ------------------------------------------------------------------
    # Pagination flags

    @property
    def keep_next(self) -> bool:
        return self._keep_next

    @keep_next.setter
    def keep_next(self, value: object) -> None:
        self.set_keep_next(value)

    def set_keep_next(self, value: object) -> "ParagraphStyle":
        self._keep_next = value if isinstance(value, bool) else False
        return self

    @property
    def keep_lines(self) -> bool:
        return self._keep_lines

    @keep_lines.setter
    def keep_lines(self, value: object) -> None:
        self.set_keep_lines(value)

    def set_keep_lines(self, value: object) -> "ParagraphStyle":
        self._keep_lines = value if isinstance(value, bool) else False
        return self

    @property
    def page_break_before(self) -> bool:
        return self._page_break_before

    @page_break_before.setter
    def page_break_before(self, value: object) -> None:
        self.set_page_break_before(value)

    def set_page_break_before(self, value: object) -> "ParagraphStyle":
        self._page_break_before = value if isinstance(value, bool) else False
        return self

    @property
    def widow_control(self) -> bool:
        return self._widow_control

    @widow_control.setter
    def widow_control(self, value: object) -> None:
        self.set_widow_control(value)

    def set_widow_control(self, value: object) -> "ParagraphStyle":
        self._widow_control = value if isinstance(value, bool) else True
        return self

    # ------------------------------------------------------------------
    # Style chaining

    @property
    def based_on(self) -> Optional[str]:
        return self._based_on

    @based_on.setter
    def based_on(self, value: object) -> None:
        self.set_based_on(value)

    def set_based_on(self, value: object) -> "ParagraphStyle":
        self._based_on = non_empty_string(value)
        return self

    @property
    def next(self) -> Optional[str]:
        """Identifier of the style applied to the following paragraph."""
        return self._next

    @next.setter
    def next(self, value: object) -> None:
        self.set_next(value)

    def set_next(self, value: object) -> "ParagraphStyle":
        self._next = non_empty_string(value)
        return self
