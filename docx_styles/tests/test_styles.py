"""Unit tests for style parsing and the style catalog."""
import unittest
from xml.etree import ElementTree as ET

from docx_styles.model.errors import InvalidStyleError
from docx_styles.model.font_style import ParagraphOwnership, StyleType, Underline
from docx_styles.model.style_model import StylesCatalog
from docx_styles.parser.styles_parser import StylesParser
from docx_styles.utils.xml_utils import parse_xml


class StylesParserTest(unittest.TestCase):
    """Ensure styles.xml becomes configured style entities."""

    def test_run_properties_become_font_options(self) -> None:
        xml = """
        <w:styles xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:style w:type="character" w:styleId="Emphasis">
            <w:name w:val="Emphasis"/>
            <w:rPr>
              <w:rFonts w:ascii="Georgia" w:hAnsi="Georgia" w:hint="eastAsia"/>
              <w:b/>
              <w:i w:val="0"/>
              <w:strike w:val="true"/>
              <w:sz w:val="28"/>
              <w:u w:val="dbl"/>
              <w:color w:val="1F497D"/>
              <w:highlight w:val="yellow"/>
              <w:shd w:val="clear" w:fill="EEECE1"/>
              <w:vertAlign w:val="superscript"/>
              <w:lang w:val="en-US"/>
            </w:rPr>
          </w:style>
        </w:styles>
        """
        catalog = StylesParser(ET.ElementTree(ET.fromstring(xml))).parse()
        style = catalog.get("Emphasis")
        self.assertIsNotNone(style)
        assert style  # for type checkers
        self.assertEqual(style.style_type, StyleType.TEXT)
        self.assertIsNone(style.paragraph)
        font = style.font
        assert font
        self.assertEqual(font.name, "Georgia")
        self.assertEqual(font.hint, "eastAsia")
        self.assertTrue(font.bold)
        self.assertFalse(font.italic)
        self.assertTrue(font.strikethrough)
        self.assertEqual(font.size, 14)
        self.assertEqual(font.underline, Underline.DOUBLE)
        self.assertEqual(font.color, "1F497D")
        self.assertEqual(font.fg_color, "yellow")
        self.assertEqual(font.bg_color, "EEECE1")
        self.assertTrue(font.superscript)
        self.assertFalse(font.subscript)

    def test_paragraph_line_height_reaches_font(self) -> None:
        xml = """
        <w:styles xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:style w:type="paragraph" w:styleId="Body">
            <w:pPr>
              <w:jc w:val="both"/>
              <w:spacing w:before="120" w:after="240" w:line="360" w:lineRule="auto"/>
              <w:ind w:left="720" w:hanging="360"/>
              <w:keepNext/>
              <w:widowControl w:val="0"/>
            </w:pPr>
          </w:style>
        </w:styles>
        """
        catalog = StylesParser(ET.ElementTree(ET.fromstring(xml))).parse()
        style = catalog.get("Body")
        assert style
        paragraph = style.paragraph
        assert paragraph
        self.assertEqual(paragraph.align, "both")
        self.assertEqual(paragraph.space_before, 120)
        self.assertEqual(paragraph.space_after, 240)
        self.assertEqual(paragraph.line_height, 1.5)
        self.assertEqual(paragraph.indent, 720)
        self.assertEqual(paragraph.hanging, 360)
        self.assertTrue(paragraph.keep_next)
        self.assertFalse(paragraph.widow_control)
        font = style.font
        assert font
        self.assertEqual(font.line_height, 1.5)
        self.assertIs(font.paragraph_style, paragraph)
        self.assertIs(font.paragraph_ownership, ParagraphOwnership.SHARED)

    def test_exact_line_rule_sets_spacing(self) -> None:
        xml = """
        <w:styles xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:style w:type="paragraph" w:styleId="Fixed">
            <w:pPr><w:spacing w:line="280" w:lineRule="exact"/></w:pPr>
          </w:style>
          <w:style w:type="paragraph" w:styleId="Broken">
            <w:pPr><w:spacing w:line="0"/></w:pPr>
          </w:style>
        </w:styles>
        """
        catalog = StylesParser(parse_xml(xml.encode("utf-8"))).parse()
        fixed = catalog.get("Fixed")
        assert fixed and fixed.paragraph
        self.assertEqual(fixed.paragraph.spacing, 280)
        self.assertIsNone(fixed.paragraph.line_height)
        self.assertIsNone(fixed.font)
        broken = catalog.get("Broken")
        assert broken
        self.assertIsNone(broken.paragraph)
        self.assertIsNone(broken.font)

    def test_style_inheritance_merges_options(self) -> None:
        xml = """
        <w:styles xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:style w:type="paragraph" w:styleId="Base" w:default="1">
            <w:rPr><w:b/><w:sz w:val="22"/></w:rPr>
          </w:style>
          <w:style w:type="paragraph" w:styleId="Heading1">
            <w:basedOn w:val="Base"/>
            <w:rPr><w:i/><w:sz w:val="32"/></w:rPr>
          </w:style>
        </w:styles>
        """
        catalog = StylesParser(ET.ElementTree(ET.fromstring(xml))).parse()
        heading = catalog.get("Heading1")
        assert heading and heading.font
        self.assertEqual(heading.style_type, StyleType.TITLE)
        self.assertTrue(heading.font.bold)
        self.assertTrue(heading.font.italic)
        self.assertEqual(heading.font.size, 16)
        self.assertFalse(heading.is_default)
        default = catalog.default_for(StyleType.PARAGRAPH)
        assert default
        self.assertEqual(default.style_id, "Base")

    def test_child_line_rule_replaces_parent_rule(self) -> None:
        xml = """
        <w:styles xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:style w:type="paragraph" w:styleId="Airy">
            <w:pPr><w:spacing w:line="480" w:lineRule="auto" w:after="100"/></w:pPr>
          </w:style>
          <w:style w:type="paragraph" w:styleId="Tight">
            <w:basedOn w:val="Airy"/>
            <w:pPr><w:spacing w:line="240" w:lineRule="exact"/></w:pPr>
          </w:style>
          <w:style w:type="paragraph" w:styleId="Loose">
            <w:basedOn w:val="Tight"/>
            <w:pPr><w:spacing w:line="360"/></w:pPr>
          </w:style>
        </w:styles>
        """
        catalog = StylesParser(ET.ElementTree(ET.fromstring(xml))).parse()
        tight = catalog.get("Tight")
        assert tight and tight.paragraph
        self.assertEqual(tight.paragraph.spacing, 240)
        self.assertIsNone(tight.paragraph.line_height)
        self.assertEqual(tight.paragraph.space_after, 100)
        self.assertIsNone(tight.font)
        loose = catalog.get("Loose")
        assert loose and loose.paragraph and loose.font
        self.assertEqual(loose.paragraph.line_height, 1.5)
        self.assertIsNone(loose.paragraph.spacing)
        self.assertEqual(loose.font.line_height, 1.5)

    def test_metadata_and_cycles(self) -> None:
        xml = """
        <w:styles xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
          <w:style w:type="character" w:styleId="Hyperlink">
            <w:name w:val="Hyperlink"/>
            <w:alias w:val="Link"/>
            <w:uiPriority w:val="99"/>
            <w:qFormat/>
            <w:basedOn w:val="Loop"/>
            <w:rPr><w:u w:val="single"/></w:rPr>
          </w:style>
          <w:style w:type="character" w:styleId="Loop">
            <w:basedOn w:val="Hyperlink"/>
            <w:link w:val="LinkedStyle"/>
            <w:rPr><w:color w:val="0000FF"/></w:rPr>
          </w:style>
        </w:styles>
        """
        catalog = StylesParser(ET.ElementTree(ET.fromstring(xml))).parse()
        link = catalog.get("Hyperlink")
        assert link and link.font
        self.assertEqual(link.style_type, StyleType.LINK)
        self.assertIs(link.font.style_type, StyleType.LINK)
        self.assertEqual(link.aliases, "Link")
        self.assertEqual(link.ui_priority, 99)
        self.assertTrue(link.is_primary)
        self.assertEqual(link.font.underline, Underline.SINGLE)
        self.assertEqual(link.font.color, "0000FF")
        self.assertEqual(link.linked_style, "LinkedStyle")


class StylesCatalogTest(unittest.TestCase):
    """Registry helpers create and register style entities."""

    def setUp(self) -> None:
        self.catalog = StylesCatalog()

    def test_add_font_style_with_paragraph_options(self) -> None:
        font = self.catalog.add_font_style("Quote", {"italic": True, "line-height": 1.3}, {"align": "center"})
        style = self.catalog.get("Quote")
        assert style
        self.assertIs(style.font, font)
        self.assertIs(style.paragraph, font.paragraph_style)
        self.assertIs(font.paragraph_ownership, ParagraphOwnership.OWNED)
        assert font.paragraph_style
        self.assertEqual(font.paragraph_style.align, "center")
        self.assertEqual(font.paragraph_style.line_height, 1.3)
        self.assertTrue(font.italic)

    def test_add_title_and_link_styles(self) -> None:
        title = self.catalog.add_title_style(2, {"size": 16, "bold": True})
        link = self.catalog.add_link_style("Link", {"color": "0000FF", "underline": Underline.SINGLE})
        self.assertIn("Heading2", self.catalog)
        self.assertIs(title.style_type, StyleType.TITLE)
        self.assertIs(link.style_type, StyleType.LINK)
        self.assertEqual(len(self.catalog), 2)
        with self.assertRaises(InvalidStyleError):
            self.catalog.add_title_style(0)

    def test_default_paragraph_style(self) -> None:
        paragraph = self.catalog.set_default_paragraph_style({"space_after": 200})
        default = self.catalog.default_for(StyleType.PARAGRAPH)
        assert default
        self.assertEqual(default.style_id, "Normal")
        self.assertIs(default.paragraph, paragraph)
        self.assertEqual(paragraph.space_after, 200)

    def test_invalid_line_height_propagates(self) -> None:
        with self.assertRaises(InvalidStyleError):
            self.catalog.add_font_style("Bad", {"line-height": "n/a"})
        self.assertIsNone(self.catalog.get("Bad"))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
