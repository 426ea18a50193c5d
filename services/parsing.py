"""
Parsing Service

Breaks a free-form ingredient line into amount, unit, item and notes.
"""

import re
from collections import namedtuple
from dataclasses import dataclass, asdict
from typing import Optional

from constants import UNIT_VOCABULARY, ARTICLE_QUANTIFIERS
from utils.sanitizer import clean_ingredient_text, normalize_whitespace
from .amounts import parse_amount
from .shopping import normalize_unit

# Result of a unit match: lowercase token as written and characters consumed
UnitMatch = namedtuple('UnitMatch', ['token', 'length'])

_PARENTHETICAL = re.compile(r'\(([^)]+)\)')
_LEADING_OF = re.compile(r'^of\s+', re.IGNORECASE)

# Longest token first so "tablespoons" wins over "tablespoon"
_UNIT_PATTERNS = [
    (unit, re.compile(r'^' + re.escape(unit) + r'\.?(?:\s+|$)', re.IGNORECASE))
    for unit in sorted(UNIT_VOCABULARY, key=len, reverse=True)
]


@dataclass(frozen=True)
class ParsedIngredient:
    """Structured form of one ingredient line."""
    original: str
    amount: Optional[float] = None
    unit: Optional[str] = None
    item: str = ''
    notes: Optional[str] = None
    # Unit token as written ("cups", "tbsp"); unit holds the canonical form
    unit_text: Optional[str] = None

    def to_dict(self):
        return asdict(self)


def parse_unit(text):
    """Match a unit token at the start of text, or return None."""
    if not text:
        return None
    for unit, pattern in _UNIT_PATTERNS:
        match = pattern.match(text)
        if match:
            return UnitMatch(unit, match.end())
    return None


def _parse_article_unit(text):
    """Match "a pinch", "an ounce": an article standing in for the amount."""
    article, _, rest = text.partition(' ')
    if article.lower() not in ARTICLE_QUANTIFIERS:
        return None, text
    match = parse_unit(rest)
    if match is None:
        return None, text
    return match, rest


def parse_ingredient(text):
    """
    Parse ingredient text like '1 1/2 cups flour, sifted'.

    Never raises: each stage that does not match leaves the text alone, so
    anything unrecognised ends up in item.
    """
    original = text if text is not None else ''
    text = clean_ingredient_text(original)
    notes = []

    # First parenthetical group anywhere in the line becomes a note
    paren = _PARENTHETICAL.search(text)
    if paren:
        note = paren.group(1).strip()
        if note:
            notes.append(note)
        text = normalize_whitespace(text[:paren.start()] + ' ' + text[paren.end():])

    # Everything after the first comma is a note too
    head, comma, tail = text.partition(',')
    if comma:
        text = head.strip()
        tail = tail.strip()
        if tail:
            notes.append(tail)

    amount = None
    amount_match = parse_amount(text)
    if amount_match:
        amount = amount_match.value
        text = text[amount_match.length:].strip()

    unit_match = parse_unit(text)
    if unit_match is None and amount is None:
        unit_match, text = _parse_article_unit(text)

    unit = unit_text = None
    if unit_match:
        unit_text = unit_match.token
        unit = normalize_unit(unit_text)
        text = text[unit_match.length:].strip()

    item = _LEADING_OF.sub('', text).strip()

    return ParsedIngredient(
        original=original,
        amount=amount,
        unit=unit,
        item=item,
        notes=', '.join(notes) or None,
        unit_text=unit_text,
    )


def parse_ingredients(lines):
    """Parse an ordered sequence of lines, skipping blank ones."""
    return [parse_ingredient(line) for line in lines if line and str(line).strip()]
