"""
Input Clean-up Module

Normalizes ingredient lines and recipe metadata before they are parsed or
stored. Output is served as JSON, so nothing here HTML-escapes.
"""

import re
from urllib.parse import urlparse

from constants import MAX_LENGTHS, ALLOWED_URL_SCHEMES

# Whitespace including non-breaking and zero-width spaces
_WHITESPACE = re.compile(r'[\s\u00a0\u2000-\u200b]+')
_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def normalize_whitespace(text):
    """Collapse every whitespace run to a single space and trim."""
    return _WHITESPACE.sub(' ', text).strip()


def clean_ingredient_text(text, max_length=MAX_LENGTHS['ingredient_text']):
    """
    Prepare a single ingredient line for parsing.

    Args:
        text: Raw ingredient line (can be None)
        max_length: Maximum length kept

    Returns:
        Whitespace-normalized text without control characters
    """
    if not text:
        return ''

    if not isinstance(text, str):
        text = str(text)

    # Whitespace first so newlines and tabs become spaces, not nothing
    text = normalize_whitespace(text)
    text = _CONTROL_CHARS.sub('', text)

    if len(text) > max_length:
        text = text[:max_length].rstrip()

    return text


def sanitize_recipe_title(title, max_length=MAX_LENGTHS['recipe_title'], default='Untitled Recipe'):
    """Clean a recipe title for storage, falling back to a default."""
    if not title:
        return default

    if not isinstance(title, str):
        title = str(title)

    title = _CONTROL_CHARS.sub('', normalize_whitespace(title))

    if len(title) > max_length:
        title = title[:max_length - 3] + '...'

    return title or default


def sanitize_url(url, max_length=MAX_LENGTHS['image_url']):
    """
    Reject URLs with dangerous schemes.

    Returns:
        The URL if it is http(s) or relative, empty string otherwise
    """
    if not url or not isinstance(url, str):
        return ''

    url = url.strip()
    if len(url) > max_length:
        return ''

    try:
        scheme = urlparse(url).scheme.lower()
    except ValueError:
        return ''

    if scheme not in ALLOWED_URL_SCHEMES:
        return ''

    # Catches "javascript:" hidden behind whitespace or odd casing
    if 'javascript:' in url.lower().replace(' ', ''):
        return ''

    return url
