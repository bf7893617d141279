"""
svgops Style Resolver

Decodes the paint related attributes of a shape element. Styles are read
from presentation attributes on the shape itself only; nothing is
inherited from enclosing groups.
"""

from dataclasses import dataclass, field
from typing import Mapping

from .errors import InvalidColor
from .geometry import AffineTransform, parse_transform
from .numbers import parse_number

_HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


@dataclass(frozen=True)
class Color:
    """A packed 0xAARRGGBB color. An unset color means "no paint"."""
    set: bool = False
    value: int = 0

    @classmethod
    def unset(cls) -> 'Color':
        return cls()

    @classmethod
    def from_argb(cls, value: int) -> 'Color':
        return cls(True, value & 0xFFFFFFFF)

    @classmethod
    def from_hex(cls, text) -> 'Color':
        """Inverse of to_hex(); None gives an unset color."""
        if text is None:
            return cls.unset()
        return cls.from_argb(int(text.lstrip('#'), 16))

    @property
    def alpha(self) -> int:
        return (self.value >> 24) & 0xFF

    @property
    def red(self) -> int:
        return (self.value >> 16) & 0xFF

    @property
    def green(self) -> int:
        return (self.value >> 8) & 0xFF

    @property
    def blue(self) -> int:
        return self.value & 0xFF

    def to_hex(self):
        if not self.set:
            return None
        return f"#{self.value:08x}"


def parse_color(text) -> Color:
    """
    Parse a paint attribute.

    "none" and a missing attribute are unset. "#RRGGBB" is fully opaque;
    "#RRGGBBAA" carries its own alpha. Anything else is InvalidColor.
    """
    if text is None or text == 'none':
        return Color.unset()
    if not text.startswith('#'):
        raise InvalidColor(text)
    digits = text[1:]
    if len(digits) not in (6, 8) or not set(digits) <= _HEX_DIGITS:
        raise InvalidColor(text)
    rgb = int(digits[:6], 16)
    # Six digits carry no alpha channel: imply full opacity.
    alpha = int(digits[6:], 16) if len(digits) == 8 else 0xFF
    return Color.from_argb((alpha << 24) | rgb)


@dataclass(frozen=True)
class StyleAttributes:
    """Paint and placement attributes of one shape element."""
    transform: AffineTransform = field(default_factory=AffineTransform)
    fill: Color = field(default_factory=Color)
    stroke: Color = field(default_factory=Color)
    stroke_width: float = 0.0
    linecap: str = ""
    linejoin: str = ""

    @property
    def is_painted(self) -> bool:
        """Shapes with neither fill nor stroke draw nothing."""
        return self.fill.set or self.stroke.set


def read_style(attrs: Mapping[str, str]) -> StyleAttributes:
    """Decode the style attributes of an element's attribute mapping."""
    stroke_width = attrs.get('stroke-width')
    return StyleAttributes(
        transform=parse_transform(attrs.get('transform')),
        fill=parse_color(attrs.get('fill')),
        stroke=parse_color(attrs.get('stroke')),
        stroke_width=0.0 if stroke_width is None else parse_number(stroke_width, 'stroke-width'),
        linecap=attrs.get('stroke-linecap', ''),
        linejoin=attrs.get('stroke-linejoin', '')
    )
