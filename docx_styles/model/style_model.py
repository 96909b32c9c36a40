"""Style model captures named style presets built from font and paragraph styles."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from docx_styles.model.errors import InvalidStyleError
from docx_styles.model.font_style import FontStyle, StyleType
from docx_styles.model.paragraph_style import ParagraphStyle

OptionMap = Mapping[str, object]

DEFAULT_PARAGRAPH_STYLE_ID = "Normal"
TITLE_STYLE_PREFIX = "Heading"


@dataclass(slots=True)
class StyleDefinition:
    """Named style preset after resolving inheritance."""

    style_id: str
    style_type: Union[StyleType, str]
    name: Optional[str]
    font: Optional[FontStyle] = None
    paragraph: Optional[ParagraphStyle] = None
    based_on: Optional[str] = None
    next_style: Optional[str] = None
    linked_style: Optional[str] = None
    is_default: bool = False
    ui_priority: Optional[int] = None
    is_primary: bool = False
    aliases: Optional[str] = None


class StylesCatalog:
    """Collection of named styles keyed by identifier."""

    def __init__(self, styles: Optional[Mapping[str, StyleDefinition]] = None):
        self._styles = dict(styles or {})

    def __len__(self) -> int:
        return len(self._styles)

    def __contains__(self, style_id: object) -> bool:
        return style_id in self._styles

    def get(self, style_id: Optional[str]) -> Optional[StyleDefinition]:
        """Return the style definition given its identifier."""
        if style_id is None:
            return None
        return self._styles.get(style_id)

    def all(self) -> Mapping[str, StyleDefinition]:
        """Return read-only view of registered styles."""
        return dict(self._styles)

    def default_for(self, style_type: Union[StyleType, str]) -> Optional[StyleDefinition]:
        """Return the default style for the given style type if defined."""
        for style in self._styles.values():
            if style.style_type == style_type and style.is_default:
                return style
        return None

    def register(self, definition: StyleDefinition) -> StyleDefinition:
        """Add or replace a style definition."""
        self._styles[definition.style_id] = definition
        return definition

    # ------------------------------------------------------------------
    # Registry helpers mirroring the document API

    def add_font_style(
        self,
        name: str,
        font_options: Optional[OptionMap] = None,
        paragraph_options: Optional[OptionMap] = None,
    ) -> FontStyle:
        """Register a character style, optionally carrying paragraph options."""
        return self._add_font(name, StyleType.TEXT, font_options, paragraph_options)

    def add_link_style(self, name: str, font_options: Optional[OptionMap] = None) -> FontStyle:
        """Register a hyperlink style."""
        return self._add_font(name, StyleType.LINK, font_options, None)

    def add_title_style(
        self,
        depth: int,
        font_options: Optional[OptionMap] = None,
        paragraph_options: Optional[OptionMap] = None,
    ) -> FontStyle:
        """Register the heading style for ``depth`` as ``Heading{depth}``."""
        if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
            raise InvalidStyleError(f"Title depth must be a positive integer, got {depth!r}")
        return self._add_font(f"{TITLE_STYLE_PREFIX}{depth}", StyleType.TITLE, font_options, paragraph_options)

    def add_paragraph_style(self, name: str, options: Optional[OptionMap] = None) -> ParagraphStyle:
        """Register a paragraph style."""
        paragraph = ParagraphStyle(options)
        self.register(
            StyleDefinition(
                style_id=name,
                style_type=StyleType.PARAGRAPH,
                name=name,
                paragraph=paragraph,
                based_on=paragraph.based_on,
                next_style=paragraph.next,
            )
        )
        return paragraph

    def set_default_paragraph_style(self, options: Optional[OptionMap] = None) -> ParagraphStyle:
        """Register the ``Normal`` paragraph style and mark it as the default."""
        paragraph = self.add_paragraph_style(DEFAULT_PARAGRAPH_STYLE_ID, options)
        definition = self._styles[DEFAULT_PARAGRAPH_STYLE_ID]
        definition.is_default = True
        return paragraph

    def _add_font(
        self,
        name: str,
        style_type: StyleType,
        font_options: Optional[OptionMap],
        paragraph_options: Optional[OptionMap],
    ) -> FontStyle:
        font = FontStyle(style_type, dict(paragraph_options) if paragraph_options else None)
        font.apply_options(font_options)
        self.register(
            StyleDefinition(
                style_id=name,
                style_type=style_type,
                name=name,
                font=font,
                paragraph=font.paragraph_style,
            )
        )
        return font
