"""
Content Service

Finds the ingredient lines in recipe content. Content arrives as a
sequence of heading and list blocks; a two-state machine picks the first
list after each "ingredients" heading.
"""

from collections import namedtuple
from enum import Enum

from bs4 import BeautifulSoup

from .parsing import parse_ingredients

# kind is 'heading' or 'list'; text is set for headings, items for lists
ContentBlock = namedtuple('ContentBlock', ['kind', 'text', 'items'])

HEADING_TAGS = ('h2', 'h3', 'h4', 'strong', 'b')
LIST_TAGS = ('ul', 'ol')


class SectionState(Enum):
    OUTSIDE = 'outside'
    INSIDE = 'inside'


def heading(text):
    return ContentBlock('heading', text, ())


def item_list(items):
    return ContentBlock('list', '', tuple(items))


def next_state(state, block):
    """Transition on a heading; lists are handled by the caller."""
    if block.kind != 'heading':
        return state
    text = (block.text or '').lower()
    if 'ingredient' in text:
        return SectionState.INSIDE
    if 'instruction' in text or 'direction' in text:
        return SectionState.OUTSIDE
    return state


def find_ingredient_lines(blocks):
    """Collect the items of the first list following each ingredients heading."""
    state = SectionState.OUTSIDE
    lines = []
    for block in blocks:
        if block.kind == 'list':
            if state is SectionState.INSIDE:
                lines.extend(text for text in block.items if text)
                state = SectionState.OUTSIDE
            continue
        state = next_state(state, block)
    return lines


def blocks_from_html(html):
    """Turn recipe HTML into heading and list blocks, in document order."""
    if not html:
        return []

    soup = BeautifulSoup(html, 'html.parser')
    blocks = []
    for element in soup.find_all(HEADING_TAGS + LIST_TAGS):
        if element.name in LIST_TAGS:
            items = [li.get_text(' ', strip=True) for li in element.find_all('li')]
            blocks.append(item_list(text for text in items if text))
        else:
            blocks.append(heading(element.get_text(' ', strip=True)))
    return blocks


def extract_ingredients(html):
    """Parse every ingredient line found in recipe HTML."""
    return parse_ingredients(find_ingredient_lines(blocks_from_html(html)))
