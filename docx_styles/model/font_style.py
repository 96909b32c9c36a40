"""Character-level style entity used for text runs and style presets."""
from __future__ import annotations

from enum import Enum
from typing import Mapping, Optional, Union

from docx_styles.model.defaults import get_defaults
from docx_styles.model.options import (
    StyleOptionsMixin,
    coerce_line_height,
    coerce_positive_number,
    non_empty_string,
)
from docx_styles.model.paragraph_style import ParagraphStyle
from docx_styles.utils.logger import get_logger

LOGGER = get_logger(__name__)


class StyleType(str, Enum):
    """Classification used by writers to pick output element names."""

    TEXT = "text"
    LINK = "link"
    TITLE = "title"
    PARAGRAPH = "paragraph"
    TABLE = "table"


class ParagraphOwnership(str, Enum):
    """How a FontStyle holds its paragraph style."""

    OWNED = "owned"
    SHARED = "shared"


class VerticalAlign(str, Enum):
    """Baseline position of a run (w:vertAlign tokens)."""

    BASELINE = "baseline"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"


class Underline:
    """Underline tokens understood by WordprocessingML."""

    NONE = "none"
    DASH = "dash"
    DASH_HEAVY = "dashHeavy"
    DASH_LONG = "dashLong"
    DASH_LONG_HEAVY = "dashLongHeavy"
    DOUBLE = "dbl"
    DOT_DASH = "dotDash"
    DOT_DASH_HEAVY = "dotDashHeavy"
    DOT_DOT_DASH = "dotDotDash"
    DOT_DOT_DASH_HEAVY = "dotDotDashHeavy"
    DOTTED = "dotted"
    DOTTED_HEAVY = "dottedHeavy"
    HEAVY = "heavy"
    SINGLE = "single"
    WAVY = "wavy"
    WAVY_DOUBLE = "wavyDbl"
    WAVY_HEAVY = "wavyHeavy"
    WORDS = "words"


UNDERLINE_TOKENS = frozenset(
    value for key, value in vars(Underline).items() if not key.startswith("_")
)


class Highlight:
    """Named highlight colors accepted for ``fg_color``."""

    YELLOW = "yellow"
    LIGHT_GREEN = "green"
    CYAN = "cyan"
    MAGENTA = "magenta"
    BLUE = "blue"
    RED = "red"
    DARK_BLUE = "darkBlue"
    DARK_CYAN = "darkCyan"
    DARK_GREEN = "darkGreen"
    DARK_MAGENTA = "darkMagenta"
    DARK_RED = "darkRed"
    DARK_YELLOW = "darkYellow"
    DARK_GRAY = "darkGray"
    LIGHT_GRAY = "lightGray"
    BLACK = "black"


ParagraphStyleInput = Union[ParagraphStyle, Mapping[str, object], None]


def _resolve_style_type(style_type: object) -> Union[StyleType, str]:
    if isinstance(style_type, StyleType):
        return style_type
    if isinstance(style_type, str) and style_type:
        try:
            return StyleType(style_type)
        except ValueError:
            return style_type
    return StyleType.TEXT


class FontStyle(StyleOptionsMixin):
    """Typeface, size, emphasis, decoration and color of a run of text.

    Every setter accepts loosely typed input and substitutes a safe default
    when the value cannot be used; only line height raises, because it is
    forwarded to the associated paragraph style. Setters return ``self`` so
    calls can be chained, and the matching properties route assignments
    through the same setters.

    ``paragraph_style`` may be an existing ``ParagraphStyle`` (shared with the
    caller), a mapping of paragraph options (a new style is built and owned by
    this font) or ``None``.
    """

    def __init__(
        self,
        style_type: Union[StyleType, str] = StyleType.TEXT,
        paragraph_style: ParagraphStyleInput = None,
    ) -> None:
        self._style_type = _resolve_style_type(style_type)
        self._paragraph_style: Optional[ParagraphStyle] = None
        self._paragraph_ownership: Optional[ParagraphOwnership] = None
        if isinstance(paragraph_style, ParagraphStyle):
            self._paragraph_style = paragraph_style
            self._paragraph_ownership = ParagraphOwnership.SHARED
        elif isinstance(paragraph_style, Mapping):
            self._paragraph_style = ParagraphStyle().apply_options(paragraph_style)
            self._paragraph_ownership = ParagraphOwnership.OWNED
        elif paragraph_style is not None:
            LOGGER.debug("Ignoring unsupported paragraph style input: %r", type(paragraph_style).__name__)

        defaults = get_defaults()
        self._name: str = defaults.font_name
        self._size: float = defaults.font_size
        self._bold = False
        self._italic = False
        self._strikethrough = False
        self._vertical_align = VerticalAlign.BASELINE
        self._underline: str = Underline.NONE
        self._color: str = defaults.font_color
        self._fg_color: Optional[str] = None
        self._bg_color: Optional[str] = None
        self._line_height: float = 1.0
        self._hint: str = defaults.content_hint

        self._register_options(
            {
                "name": self.set_name,
                "size": self.set_size,
                "bold": self.set_bold,
                "italic": self.set_italic,
                "strikethrough": self.set_strikethrough,
                "superscript": self.set_superscript,
                "subscript": self.set_subscript,
                "vertical_align": self.set_vertical_align,
                "underline": self.set_underline,
                "color": self.set_color,
                "fg_color": self.set_fg_color,
                "bg_color": self.set_bg_color,
                "line_height": self.set_line_height,
                "hint": self.set_hint,
            }
        )

    def __repr__(self) -> str:
        return (
            f"FontStyle(style_type={self.style_type_name!r}, name={self._name!r}, size={self._size!r}, "
            f"bold={self._bold}, italic={self._italic}, underline={self._underline!r})"
        )

    # ------------------------------------------------------------------
    # Construction-time state

    @property
    def style_type(self) -> Union[StyleType, str]:
        return self._style_type

    @property
    def style_type_name(self) -> str:
        """Plain string form of ``style_type``."""
        if isinstance(self._style_type, StyleType):
            return self._style_type.value
        return self._style_type

    @property
    def paragraph_style(self) -> Optional[ParagraphStyle]:
        return self._paragraph_style

    @property
    def paragraph_ownership(self) -> Optional[ParagraphOwnership]:
        return self._paragraph_ownership

    # ------------------------------------------------------------------
    # Typeface

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: object) -> None:
        self.set_name(value)

    def set_name(self, value: object) -> "FontStyle":
        self._name = non_empty_string(value) or get_defaults().font_name
        return self

    @property
    def size(self) -> float:
        """Point size."""
        return self._size

    @size.setter
    def size(self, value: object) -> None:
        self.set_size(value)

    def set_size(self, value: object) -> "FontStyle":
        size = coerce_positive_number(value)
        if size is None:
            LOGGER.debug("Invalid font size %r; using default", value)
            size = get_defaults().font_size
        self._size = size
        return self

    @property
    def hint(self) -> str:
        """Content-type hint telling consumers which font slot to use."""
        return self._hint

    @hint.setter
    def hint(self, value: object) -> None:
        self.set_hint(value)

    def set_hint(self, value: object) -> "FontStyle":
        self._hint = non_empty_string(value) or get_defaults().content_hint
        return self

    # ------------------------------------------------------------------
    # Emphasis

    @property
    def bold(self) -> bool:
        return self._bold

    @bold.setter
    def bold(self, value: object) -> None:
        self.set_bold(value)

    def set_bold(self, value: object) -> "FontStyle":
        self._bold = value if isinstance(value, bool) else False
        return self

    @property
    def italic(self) -> bool:
        return self._italic

    @italic.setter
    def italic(self, value: object) -> None:
        self.set_italic(value)

    def set_italic(self, value: object) -> "FontStyle":
        self._italic = value if isinstance(value, bool) else False
        return self

    @property
    def strikethrough(self) -> bool:
        return self._strikethrough

    @strikethrough.setter
    def strikethrough(self, value: object) -> None:
        self.set_strikethrough(value)

    def set_strikethrough(self, value: object) -> "FontStyle":
        self._strikethrough = value if isinstance(value, bool) else False
        return self

    # ------------------------------------------------------------------
    # Baseline position: superscript and subscript are views of one state.

    @property
    def vertical_align(self) -> VerticalAlign:
        return self._vertical_align

    @vertical_align.setter
    def vertical_align(self, value: object) -> None:
        self.set_vertical_align(value)

    def set_vertical_align(self, value: object) -> "FontStyle":
        try:
            self._vertical_align = VerticalAlign(value)
        except ValueError:
            self._vertical_align = VerticalAlign.BASELINE
        return self

    @property
    def superscript(self) -> bool:
        return self._vertical_align is VerticalAlign.SUPERSCRIPT

    @superscript.setter
    def superscript(self, value: object) -> None:
        self.set_superscript(value)

    def set_superscript(self, value: object) -> "FontStyle":
        """Switch to superscript, or to subscript when ``value`` is not True."""
        enabled = value if isinstance(value, bool) else False
        self._vertical_align = VerticalAlign.SUPERSCRIPT if enabled else VerticalAlign.SUBSCRIPT
        return self

    @property
    def subscript(self) -> bool:
        return self._vertical_align is VerticalAlign.SUBSCRIPT

    @subscript.setter
    def subscript(self, value: object) -> None:
        self.set_subscript(value)

    def set_subscript(self, value: object) -> "FontStyle":
        """Switch to subscript, or to superscript when ``value`` is not True."""
        enabled = value if isinstance(value, bool) else False
        self._vertical_align = VerticalAlign.SUBSCRIPT if enabled else VerticalAlign.SUPERSCRIPT
        return self

    # ------------------------------------------------------------------
    # Decoration

    @property
    def underline(self) -> str:
        return self._underline

    @underline.setter
    def underline(self, value: object) -> None:
        self.set_underline(value)

    def set_underline(self, value: object) -> "FontStyle":
        """Store an underline token; empty or non-string input means ``"none"``."""
        if not isinstance(value, str) or not value:
            value = Underline.NONE
        elif value not in UNDERLINE_TOKENS:
            LOGGER.debug("Unrecognised underline token %r stored as-is", value)
        self._underline = value
        return self

    # ------------------------------------------------------------------
    # Colors

    @property
    def color(self) -> str:
        return self._color

    @color.setter
    def color(self, value: object) -> None:
        self.set_color(value)

    def set_color(self, value: object) -> "FontStyle":
        self._color = non_empty_string(value) or get_defaults().font_color
        return self

    @property
    def fg_color(self) -> Optional[str]:
        """Highlight color; ``None`` means unset."""
        return self._fg_color

    @fg_color.setter
    def fg_color(self, value: Optional[str]) -> None:
        self.set_fg_color(value)

    def set_fg_color(self, value: Optional[str]) -> "FontStyle":
        self._fg_color = value
        return self

    @property
    def bg_color(self) -> Optional[str]:
        """Shading color; ``None`` means unset."""
        return self._bg_color

    @bg_color.setter
    def bg_color(self, value: Optional[str]) -> None:
        self.set_bg_color(value)

    def set_bg_color(self, value: Optional[str]) -> "FontStyle":
        self._bg_color = value
        return self

    # ------------------------------------------------------------------
    # Line height

    @property
    def line_height(self) -> float:
        return self._line_height

    @line_height.setter
    def line_height(self, value: object) -> None:
        self.set_line_height(value)

    def set_line_height(self, value: object) -> "FontStyle":
        """Set the line-height multiplier and forward it to the paragraph style.

        Raises ``InvalidStyleError`` when ``value`` is not a positive number;
        the current value is left untouched in that case. Without a paragraph
        style the value is stored locally only.
        """
        line_height = coerce_line_height(value)
        self._line_height = line_height
        if self._paragraph_style is None:
            LOGGER.debug("No paragraph style attached; line height %s kept on font only", line_height)
        else:
            self._paragraph_style.set_line_height(line_height)
        return self
