"""
Numeric scanning for attribute text.

Number grammar: an optional leading '-', then digits with at most one
'.'. Exponents and a leading '+' are not part of the grammar, so
"1e5" scans as 1 followed by unrecognized text. Separators between
numbers are whitespace and commas.
"""

import re
from typing import List, Tuple

from .errors import InvalidNumber

_NUMBER = re.compile(r'-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)')
_SEPARATORS = ' ,\t\n\r\f\v'


def _scan(text: str) -> Tuple[List[float], int]:
    """Scan numbers from the start of text. Returns (values, end offset)."""
    values = []
    pos = 0
    while True:
        while pos < len(text) and text[pos] in _SEPARATORS:
            pos += 1
        match = _NUMBER.match(text, pos)
        if match is None:
            return values, pos
        values.append(float(match.group(0)))
        pos = match.end()


def scan_number_list(text: str) -> List[float]:
    """
    Extract every leading number from text.

    Scanning stops silently at the first token that is not a number; the
    rest of the text is dropped. Callers that need an exact count must
    check the length of the result themselves.
    """
    values, _ = _scan(text)
    return values


def scan_leading_number(text: str) -> Tuple[int, float, bool]:
    """
    Extract a single number at the very start of text.

    Returns (consumed length, value, success). No separators are skipped.
    """
    match = _NUMBER.match(text)
    if match is None:
        return 0, 0.0, False
    return match.end(), float(match.group(0)), True


def parse_number_list(text: str, attribute: str = "") -> List[float]:
    """Like scan_number_list, but trailing garbage raises InvalidNumber."""
    values, pos = _scan(text)
    if text[pos:].strip(_SEPARATORS):
        raise InvalidNumber(text, attribute)
    return values


def parse_number(text: str, attribute: str = "") -> float:
    """Parse exactly one number, surrounding whitespace allowed."""
    stripped = text.strip()
    consumed, value, ok = scan_leading_number(stripped)
    if not ok or consumed != len(stripped):
        raise InvalidNumber(text, attribute)
    return value
