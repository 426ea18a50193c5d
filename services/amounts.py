"""
Amount Service

Parses the numeric prefix of an ingredient line and formats decimal
amounts back into the nearest common cooking fraction.
"""

import math
import re
from collections import namedtuple

from constants import UNICODE_FRACTIONS, DISPLAY_FRACTIONS

# Result of a successful amount match: decimal value and characters consumed
AmountMatch = namedtuple('AmountMatch', ['value', 'length'])

_FRACTION_CHARS = ''.join(UNICODE_FRACTIONS)

# Order matters! Whole + unicode, unicode alone, mixed, simple, then numbers
_WHOLE_UNICODE = re.compile(r'^(\d+)\s*([' + _FRACTION_CHARS + r'])', re.ASCII)
_UNICODE = re.compile(r'^([' + _FRACTION_CHARS + r'])')
_MIXED_FRACTION = re.compile(r'^(\d+)\s+(\d+)/(\d+)', re.ASCII)
_SIMPLE_FRACTION = re.compile(r'^(\d+)/(\d+)', re.ASCII)
_NUMBER = re.compile(r'^\d+\.?\d*', re.ASCII)


def parse_amount(text):
    """
    Match an amount at the start of text.

    Handles "1½", "½", "1 1/2", "1/2", "1.5" and "2". Returns an
    AmountMatch or None when the text does not start with an amount. A
    zero denominator, or a literal too large for a float, is a miss, not
    an error.
    """
    if not text:
        return None

    try:
        match = _match_amount(text)
    except (OverflowError, ValueError):
        return None

    if match is None or not math.isfinite(match.value):
        return None
    return match


def _match_amount(text):
    match = _WHOLE_UNICODE.match(text)
    if match:
        value = int(match.group(1)) + UNICODE_FRACTIONS[match.group(2)]
        return AmountMatch(value, match.end())

    match = _UNICODE.match(text)
    if match:
        return AmountMatch(UNICODE_FRACTIONS[match.group(1)], match.end())

    match = _MIXED_FRACTION.match(text)
    if match:
        whole, num, denom = (int(g) for g in match.groups())
        if denom == 0:
            return None
        return AmountMatch(whole + num / denom, match.end())

    match = _SIMPLE_FRACTION.match(text)
    if match:
        num, denom = int(match.group(1)), int(match.group(2))
        if denom == 0:
            return None
        return AmountMatch(num / denom, match.end())

    match = _NUMBER.match(text)
    if match:
        return AmountMatch(float(match.group(0)), match.end())

    return None


def _closest_fraction(decimal):
    """Nearest display fraction to decimal; the smaller one wins a tie."""
    closest, glyph = 0, ''
    min_diff = 1
    for frac, frac_glyph in DISPLAY_FRACTIONS:
        diff = abs(decimal - frac)
        if diff < min_diff:
            min_diff = diff
            closest, glyph = frac, frac_glyph
    return closest, glyph


def format_amount(value):
    """Convert a decimal amount to a display string like '1 ½'."""
    if value is None or not math.isfinite(value):
        return ''
    if value <= 0:
        return '0'

    # Split into whole and decimal parts
    whole = math.floor(value)
    closest, glyph = _closest_fraction(value - whole)

    # Rounding up to the next whole number
    if closest >= 1:
        whole += 1
        glyph = ''

    parts = []
    if whole > 0:
        parts.append(str(whole))
    if glyph:
        parts.append(glyph)

    # Fall back to decimal for tiny amounts with no close fraction
    if not parts:
        return f"{value:.2f}"
    return ' '.join(parts)
