import unittest

from xmlcsv.ingestor import ingest_table
from xmlcsv.parser import parse_markup
from xmlcsv.serializer import XML_DECLARATION, render_markup, serialize_markup, serialize_terms
from xmlcsv.terms import NO_TERM, ClosingTag, OpeningTag, Text
from xmlcsv.tree import make_root


class SerializeTermsTests(unittest.TestCase):
    def test_leaf_element_terms(self) -> None:
        root = parse_markup("<a>hi</a>")
        self.assertEqual(
            serialize_terms(root),
            [Text(""), OpeningTag("a"), Text("hi"), ClosingTag("a"), Text("\n")],
        )

    def test_tree_without_top_level_element_is_invalid(self) -> None:
        with self.assertRaises(ValueError):
            serialize_terms(make_root())

    def test_only_first_top_level_element_is_emitted(self) -> None:
        root = parse_markup("<a>1</a><b>2</b>")
        output = serialize_markup(root)

        self.assertIn("<a>1</a>", output)
        self.assertNotIn("<b>", output)


class RenderMarkupTests(unittest.TestCase):
    def test_ingested_table_renders_indented_markup(self) -> None:
        root = ingest_table("name,age\nAlice,30\n")
        expected = (
            '<?xml version="1.0"?>\n'
            "<root2>\n"
            "  <element>\n"
            "    <name>Alice</name>\n"
            "    <age>30</age>\n"
            "  </element>\n"
            "</root2>\n"
        )
        self.assertEqual(serialize_markup(root), expected)

    def test_custom_indent(self) -> None:
        root = parse_markup("<a><b>1</b></a>")
        self.assertEqual(serialize_markup(root, indent="\t"), XML_DECLARATION + "<a>\n\t<b>1</b>\n</a>\n")

    def test_no_term_renders_nothing(self) -> None:
        self.assertEqual(render_markup([NO_TERM], declaration=""), "")

    def test_data_is_written_verbatim(self) -> None:
        root = make_root()
        root.add_child("note", "a & b")
        self.assertTrue(serialize_markup(root).endswith("<note>a & b</note>\n"))


class RoundTripTests(unittest.TestCase):
    def test_markup_round_trip_preserves_structure(self) -> None:
        source = """<?xml version="1.0"?>
<catalog>
  <book>
    <title>The Left Hand of Darkness</title>
    <author>Le Guin</author>
  </book>
  <book>
    <title>Solaris</title>
    <notes>translated<edition>2nd</edition></notes>
  </book>
</catalog>
"""
        first = parse_markup(source)
        second = parse_markup(serialize_markup(first))

        self.assertEqual(second.children, first.children)


if __name__ == "__main__":
    unittest.main()
