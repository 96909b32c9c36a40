"""Extract style definitions from styles.xml and produce a catalog of style entities."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Optional
from xml.etree import ElementTree as ET

from docx_styles.model.errors import InvalidStyleError
from docx_styles.model.font_style import FontStyle, StyleType
from docx_styles.model.options import LINE_HEIGHT_KEY, coerce_line_height
from docx_styles.model.paragraph_style import ParagraphStyle
from docx_styles.model.style_model import StyleDefinition, StylesCatalog
from docx_styles.utils.logger import get_logger
from docx_styles.utils.units import half_points_to_points, line_units_to_multiplier
from docx_styles.utils.xml_utils import Namespaces, get_attr, local_name

LOGGER = get_logger(__name__)

OptionDict = Dict[str, object]

_FALSE_TOGGLES = {"0", "false", "off"}
_TYPE_BY_XML = {
    "character": StyleType.TEXT,
    "paragraph": StyleType.PARAGRAPH,
    "table": StyleType.TABLE,
}
_TITLE_ID = re.compile(r"^(Heading[1-9]|Title)$")
_LINK_IDS = {"Hyperlink"}


@dataclass(slots=True)
class _RawStyle:
    """Style attributes and option mappings read before inheritance."""

    style_id: str
    xml_type: str
    name: Optional[str]
    font_options: OptionDict = field(default_factory=dict)
    paragraph_options: OptionDict = field(default_factory=dict)
    based_on: Optional[str] = None
    next_style: Optional[str] = None
    linked_style: Optional[str] = None
    is_default: bool = False
    ui_priority: Optional[int] = None
    is_primary: bool = False
    aliases: Optional[str] = None


class StylesParser:
    """Parse Word styles, resolve inheritance and build style entities."""

    def __init__(self, styles_xml: ET.ElementTree) -> None:
        self._styles_xml = styles_xml

    def parse(self) -> StylesCatalog:
        """Parse the XML tree and return a resolved catalog."""
        raw_styles = self._collect_styles()
        resolved = self._resolve_inheritance(raw_styles)
        return StylesCatalog({style_id: self._build_definition(raw) for style_id, raw in resolved.items()})

    def _collect_styles(self) -> Dict[str, _RawStyle]:
        styles: Dict[str, _RawStyle] = {}
        root = self._styles_xml.getroot()
        for style_el in root.findall("w:style", Namespaces.WORD):
            style_id = get_attr(style_el, "w:styleId")
            if not style_id:
                continue
            rpr = style_el.find("w:rPr", Namespaces.WORD)
            ppr = style_el.find("w:pPr", Namespaces.WORD)
            styles[style_id] = _RawStyle(
                style_id=style_id,
                xml_type=get_attr(style_el, "w:type") or "paragraph",
                name=self._child_val(style_el, "w:name"),
                font_options=self._run_options(rpr) if rpr is not None else {},
                paragraph_options=self._paragraph_options(ppr) if ppr is not None else {},
                based_on=self._child_val(style_el, "w:basedOn"),
                next_style=self._child_val(style_el, "w:next"),
                linked_style=self._child_val(style_el, "w:link"),
                is_default=get_attr(style_el, "w:default") == "1",
                ui_priority=self._to_int(self._child_val(style_el, "w:uiPriority")),
                is_primary=style_el.find("w:qFormat", Namespaces.WORD) is not None,
                aliases=self._child_val(style_el, "w:alias"),
            )
        return styles

    # ------------------------------------------------------------------
    # Property blocks -> option mappings

    def _run_options(self, rpr: ET.Element) -> OptionDict:
        options: OptionDict = {}
        for child in list(rpr):
            tag = local_name(child.tag)
            if tag == "rFonts":
                name = get_attr(child, "w:ascii") or get_attr(child, "w:hAnsi")
                if name:
                    options["name"] = name
                hint = get_attr(child, "w:hint")
                if hint:
                    options["hint"] = hint
            elif tag == "sz":
                size = self._to_float(get_attr(child, "w:val"))
                if size is not None:
                    options["size"] = half_points_to_points(size)
            elif tag == "b":
                options["bold"] = self._toggle(child)
            elif tag == "i":
                options["italic"] = self._toggle(child)
            elif tag == "strike":
                options["strikethrough"] = self._toggle(child)
            elif tag == "u":
                options["underline"] = get_attr(child, "w:val")
            elif tag == "color":
                options["color"] = get_attr(child, "w:val")
            elif tag == "highlight":
                options["fg_color"] = get_attr(child, "w:val")
            elif tag == "shd":
                options["bg_color"] = get_attr(child, "w:fill")
            elif tag == "vertAlign":
                options["vertical_align"] = get_attr(child, "w:val")
            else:
                LOGGER.debug("Skipping unmapped run property: %s", tag)
        return options

    def _paragraph_options(self, ppr: ET.Element) -> OptionDict:
        options: OptionDict = {}
        for child in list(ppr):
            tag = local_name(child.tag)
            if tag == "jc":
                options["align"] = get_attr(child, "w:val")
            elif tag == "spacing":
                self._spacing_options(child, options)
            elif tag == "ind":
                left = get_attr(child, "w:left") or get_attr(child, "w:start")
                if left is not None:
                    options["indent"] = left
                hanging = get_attr(child, "w:hanging")
                if hanging is not None:
                    options["hanging"] = hanging
            elif tag == "keepNext":
                options["keep_next"] = self._toggle(child)
            elif tag == "keepLines":
                options["keep_lines"] = self._toggle(child)
            elif tag == "pageBreakBefore":
                options["page_break_before"] = self._toggle(child)
            elif tag == "widowControl":
                options["widow_control"] = self._toggle(child)
            else:
                LOGGER.debug("Skipping unmapped paragraph property: %s", tag)
        return options

    def _spacing_options(self, spacing_el: ET.Element, options: OptionDict) -> None:
        before = get_attr(spacing_el, "w:before")
        if before is not None:
            options["space_before"] = before
        after = get_attr(spacing_el, "w:after")
        if after is not None:
            options["space_after"] = after
        line = self._to_float(get_attr(spacing_el, "w:line"))
        if line is None:
            return
        rule = (get_attr(spacing_el, "w:lineRule") or "auto").lower()
        if rule in {"exact", "atleast"}:
            options["spacing"] = line
            return
        try:
            options[LINE_HEIGHT_KEY] = coerce_line_height(line_units_to_multiplier(line))
        except InvalidStyleError:
            LOGGER.debug("Skipping invalid line spacing value: %s", line)

    # ------------------------------------------------------------------
    # Inheritance

    def _resolve_inheritance(self, raw_styles: Dict[str, _RawStyle]) -> Dict[str, _RawStyle]:
        resolved: Dict[str, _RawStyle] = {}

        def resolve(style_id: str, stack: Optional[list[str]] = None) -> _RawStyle:
            if style_id in resolved:
                return resolved[style_id]
            if stack is None:
                stack = []
            if style_id in stack:
                return raw_styles[style_id]
            stack.append(style_id)
            style = raw_styles[style_id]
            parent = None
            if style.based_on and style.based_on in raw_styles:
                parent = resolve(style.based_on, stack)
            resolved_style = _RawStyle(
                style_id=style.style_id,
                xml_type=style.xml_type,
                name=style.name,
                font_options={**(parent.font_options if parent else {}), **style.font_options},
                paragraph_options=self._merge_paragraph_options(
                    parent.paragraph_options if parent else {}, style.paragraph_options
                ),
                based_on=style.based_on,
                next_style=style.next_style,
                linked_style=style.linked_style or (parent.linked_style if parent else None),
                is_default=style.is_default,
                ui_priority=style.ui_priority if style.ui_priority is not None else (parent.ui_priority if parent else None),
                is_primary=style.is_primary or (parent.is_primary if parent else False),
                aliases=style.aliases or (parent.aliases if parent else None),
            )
            resolved[style_id] = resolved_style
            stack.pop()
            return resolved_style

        for style_id in raw_styles:
            resolve(style_id)
        return resolved

    def _merge_paragraph_options(self, parent_options: OptionDict, child_options: OptionDict) -> OptionDict:
        merged = dict(parent_options)
        # A child's line rule replaces the parent's, whichever form either uses.
        if LINE_HEIGHT_KEY in child_options or "spacing" in child_options:
            merged.pop(LINE_HEIGHT_KEY, None)
            merged.pop("spacing", None)
        merged.update(child_options)
        return merged

    # ------------------------------------------------------------------
    # Entity construction

    def _build_definition(self, raw: _RawStyle) -> StyleDefinition:
        style_type = self._style_type(raw)
        paragraph = ParagraphStyle(raw.paragraph_options) if raw.paragraph_options else None
        font = None
        line_height = raw.paragraph_options.get(LINE_HEIGHT_KEY)
        if raw.font_options or line_height is not None:
            font = FontStyle(style_type, paragraph)
            font.apply_options(raw.font_options)
            if line_height is not None:
                font.apply_options({LINE_HEIGHT_KEY: line_height})
        return StyleDefinition(
            style_id=raw.style_id,
            style_type=style_type,
            name=raw.name,
            font=font,
            paragraph=paragraph,
            based_on=raw.based_on,
            next_style=raw.next_style,
            linked_style=raw.linked_style,
            is_default=raw.is_default,
            ui_priority=raw.ui_priority,
            is_primary=raw.is_primary,
            aliases=raw.aliases,
        )

    def _style_type(self, raw: _RawStyle) -> StyleType | str:
        if raw.style_id in _LINK_IDS:
            return StyleType.LINK
        if _TITLE_ID.match(raw.style_id):
            return StyleType.TITLE
        return _TYPE_BY_XML.get(raw.xml_type, raw.xml_type)

    # ------------------------------------------------------------------
    # Attribute helpers

    def _child_val(self, element: ET.Element, child_name: str) -> Optional[str]:
        return get_attr(element.find(child_name, Namespaces.WORD), "w:val")

    def _toggle(self, element: ET.Element) -> bool:
        value = get_attr(element, "w:val")
        return value is None or value.lower() not in _FALSE_TOGGLES

    def _to_int(self, value: Optional[str]) -> Optional[int]:
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    def _to_float(self, value: Optional[str]) -> Optional[float]:
        if value is None:
            return None
        try:
            return float(value)
        except ValueError:
            return None
