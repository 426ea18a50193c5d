"""
Scaling Service

Applies a serving multiplier to parsed ingredients and re-renders them.
"""

from dataclasses import replace

from .amounts import format_amount
from .parsing import parse_ingredient


def scale_amount(amount, multiplier):
    """Scale an ingredient amount."""
    return amount * multiplier


def scale_ingredient(parsed, multiplier):
    """Return a copy of parsed with its amount scaled; no amount, no change."""
    if parsed.amount is None or multiplier == 1:
        return parsed
    return replace(parsed, amount=scale_amount(parsed.amount, multiplier))


def render_scaled(parsed, multiplier):
    """
    Rebuild an ingredient line with a scaled amount.

    Lines without an amount, and any line at multiplier 1, come back as the
    original text so the author's formatting survives.
    """
    if parsed.amount is None or multiplier == 1:
        return parsed.original

    parts = [format_amount(scale_amount(parsed.amount, multiplier))]

    unit = parsed.unit_text or parsed.unit
    if unit:
        parts.append(unit)
    if parsed.item:
        parts.append(parsed.item)

    text = ' '.join(parts)
    if parsed.notes:
        text += ', ' + parsed.notes
    return text


def render_all(lines, multiplier):
    """Parse and render every line at the given multiplier."""
    return [render_scaled(parse_ingredient(line), multiplier) for line in lines]
