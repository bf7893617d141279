"""
Tests for color and style attribute decoding.
"""

import unittest

from svgops.core.errors import InvalidColor, InvalidNumber, UnsupportedTransform
from svgops.core.geometry import AffineTransform
from svgops.core.style import Color, StyleAttributes, parse_color, read_style


class TestParseColor(unittest.TestCase):
    """Test parse_color."""

    def test_six_digits_implies_opaque(self):
        color = parse_color("#ff0000")
        self.assertTrue(color.set)
        self.assertEqual(color.value, 0xffff0000)

    def test_eight_digits_explicit_alpha(self):
        color = parse_color("#11223380")
        self.assertEqual(color.value, 0x80112233)
        self.assertEqual((color.alpha, color.red, color.green, color.blue),
                         (0x80, 0x11, 0x22, 0x33))

    def test_uppercase_hex(self):
        self.assertEqual(parse_color("#ABCDEF").value, 0xffabcdef)

    def test_none(self):
        self.assertFalse(parse_color("none").set)
        self.assertFalse(parse_color(None).set)

    def test_invalid(self):
        for text in ("red", "#fff", "#12345g", "#1234567", "", "rgb(0,0,0)", "#ff0000 "):
            with self.assertRaises(InvalidColor, msg=text):
                parse_color(text)

    def test_hex_round_trip(self):
        color = parse_color("#00ff0080")
        self.assertEqual(color.to_hex(), "#8000ff00")
        self.assertEqual(Color.from_hex(color.to_hex()), color)
        self.assertIsNone(Color.unset().to_hex())
        self.assertEqual(Color.from_hex(None), Color.unset())


class TestReadStyle(unittest.TestCase):
    """Test read_style."""

    def test_defaults(self):
        style = read_style({})
        self.assertEqual(style, StyleAttributes())
        self.assertEqual(style.stroke_width, 0.0)
        self.assertEqual(style.linecap, "")
        self.assertFalse(style.is_painted)

    def test_all_attributes(self):
        style = read_style({
            'transform': 'matrix(1,0,0,1,5,5)',
            'fill': '#000000',
            'stroke': '#ffffff',
            'stroke-width': '2.5',
            'stroke-linecap': 'round',
            'stroke-linejoin': 'bevel',
        })
        self.assertEqual(style.transform, AffineTransform(1, 0, 0, 1, 5, 5))
        self.assertEqual(style.fill.value, 0xff000000)
        self.assertEqual(style.stroke.value, 0xffffffff)
        self.assertEqual(style.stroke_width, 2.5)
        self.assertEqual(style.linecap, 'round')
        self.assertEqual(style.linejoin, 'bevel')
        self.assertTrue(style.is_painted)

    def test_stroke_only_is_painted(self):
        self.assertTrue(read_style({'stroke': '#123456'}).is_painted)

    def test_errors(self):
        with self.assertRaises(InvalidColor):
            read_style({'fill': 'blue'})
        with self.assertRaises(InvalidNumber):
            read_style({'stroke-width': '1px'})
        with self.assertRaises(UnsupportedTransform):
            read_style({'transform': 'translate(1,1)'})


if __name__ == '__main__':
    unittest.main()
