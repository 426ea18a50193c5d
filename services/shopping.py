"""
Shopping List Service

Merges parsed ingredients from several recipes into one persisted shopping
list and applies the check/remove/clear mutations to it.
"""

import logging
import uuid
from collections import OrderedDict
from datetime import datetime, timezone

from constants import UNIT_SYNONYMS, SHOPPING_LIST_KEY, OTHER_GROUP_KEY, OTHER_GROUP_TITLE
from .amounts import format_amount

logger = logging.getLogger(__name__)


def normalize_item_key(item):
    """
    Normalize an item name for duplicate detection.

    Lowercases, collapses whitespace and drops one trailing "s". Irregular
    plurals are not folded ("leaves" becomes "leave", not "leaf").
    """
    if not item:
        return ''
    key = ' '.join(item.lower().split())
    if key.endswith('s'):
        key = key[:-1]
    return key


def normalize_unit(unit):
    """Map a unit token to its canonical singular form ('tbsp' -> 'tablespoon')."""
    if not unit:
        return ''
    unit = unit.strip().lower()
    return UNIT_SYNONYMS.get(unit, unit)


def merge_key(item, unit):
    """Normalization key used to detect duplicate ingredients."""
    return f"{normalize_item_key(item)}|{normalize_unit(unit)}"


def _same_recipe(a, b):
    # Ids arrive as ints from JSON bodies and as strings from URLs
    return a is not None and b is not None and str(a) == str(b)


def _provenance(entry):
    """Contributing recipe ids, titles and amount shares, in contribution order."""
    ids = entry.get('recipe_ids')
    if ids is None:
        ids = [entry.get('recipe_id')]
    titles = entry.get('recipe_titles')
    if titles is None or len(titles) != len(ids):
        titles = [entry.get('recipe_title')] * len(ids)
    shares = entry.get('recipe_amounts')
    if shares is None or len(shares) != len(ids):
        # Older entries carry no shares; credit the whole amount to the first recipe
        shares = [entry.get('amount')] + [None] * (len(ids) - 1)
    return list(ids), list(titles), list(shares)


def _split_notes(notes):
    return [note for note in (notes or '').split(', ') if note]


def generate_item_id():
    return 'item_' + uuid.uuid4().hex


def format_item(entry):
    """Format a shopping list entry for display: amount, unit, item."""
    parts = []
    if entry.get('amount') is not None:
        parts.append(format_amount(entry['amount']))
    if entry.get('unit'):
        parts.append(entry['unit'])
    if entry.get('item'):
        parts.append(entry['item'])
    return ' '.join(parts)


class ShoppingList:
    """Aggregator owning the persisted shopping list."""

    def __init__(self, store, key=SHOPPING_LIST_KEY):
        self.store = store
        self.key = key

    def items(self):
        data = self.store.get(self.key)
        return data if isinstance(data, list) else []

    def _save(self, entries):
        """Persist entries; on a failed write return what the store still holds."""
        if not self.store.set(self.key, entries):
            logger.warning("Shopping list not saved, keeping stored state")
            return self.items()
        return entries

    def get(self, item_id):
        return next((e for e in self.items() if e.get('id') == item_id), None)

    def count(self):
        return len(self.items())

    def is_empty(self):
        return not self.items()

    def has_recipe(self, recipe_id):
        return any(
            _same_recipe(rid, recipe_id)
            for entry in self.items()
            for rid in _provenance(entry)[0]
        )

    def add_items(self, ingredients, recipe_id, recipe_title):
        """
        Add parsed ingredients from one recipe, merging duplicates.

        Entries sharing a normalization key are combined: amounts add when
        both sides have one, notes merge without repeats, and the recipe
        joins the entry's provenance. Returns the updated list.
        """
        entries = self.items()

        index = {}
        for entry in entries:
            index.setdefault(merge_key(entry.get('item'), entry.get('unit')), entry)

        added = merged = 0
        for ing in ingredients:
            name = ing.item or ing.original
            key = merge_key(name, ing.unit)
            existing = index.get(key)
            if existing is not None:
                self._merge(existing, ing, recipe_id, recipe_title)
                merged += 1
                continue

            entry = {
                'id': generate_item_id(),
                'item': name,
                'amount': ing.amount,
                'unit': ing.unit,
                'notes': ing.notes,
                'recipe_id': recipe_id,
                'recipe_title': recipe_title,
                'recipe_ids': [recipe_id],
                'recipe_titles': [recipe_title],
                'recipe_amounts': [ing.amount],
                'checked': False,
                'added_at': datetime.now(timezone.utc).isoformat(),
            }
            entries.append(entry)
            index[key] = entry
            added += 1

        logger.debug("Recipe %s: %d new entries, %d merged", recipe_id, added, merged)
        return self._save(entries)

    @staticmethod
    def _merge(entry, ing, recipe_id, recipe_title):
        ids, titles, shares = _provenance(entry)

        # A missing amount on either side leaves the existing amount alone
        contributed = None
        if ing.amount is not None and entry.get('amount') is not None:
            entry['amount'] += ing.amount
            contributed = ing.amount

        notes = _split_notes(entry.get('notes'))
        for note in _split_notes(ing.notes):
            if note not in notes:
                notes.append(note)
        entry['notes'] = ', '.join(notes) or None

        position = next((i for i, rid in enumerate(ids) if _same_recipe(rid, recipe_id)), None)
        if position is None:
            ids.append(recipe_id)
            titles.append(recipe_title)
            shares.append(contributed)
        elif contributed is not None:
            shares[position] = (shares[position] or 0) + contributed
        entry['recipe_ids'] = ids
        entry['recipe_titles'] = titles
        entry['recipe_amounts'] = shares

    def toggle_checked(self, item_id):
        entries = self.items()
        for entry in entries:
            if entry.get('id') == item_id:
                entry['checked'] = not entry.get('checked', False)
                return self._save(entries)
        return entries

    def remove(self, item_id):
        entries = self.items()
        kept = [e for e in entries if e.get('id') != item_id]
        if len(kept) == len(entries):
            return entries
        return self._save(kept)

    def clear_checked(self):
        return self._save([e for e in self.items() if not e.get('checked')])

    def clear_all(self):
        return self._save([])

    def clear_by_recipe(self, recipe_id):
        """
        Drop a recipe's contribution.

        Entries only that recipe contributed are removed. Merged entries stay,
        less that recipe's share of the amount, with the next contributor
        promoted to recipe_id/recipe_title.
        """
        kept = []
        for entry in self.items():
            ids, titles, shares = _provenance(entry)
            remaining = [
                (rid, title, share) for rid, title, share in zip(ids, titles, shares)
                if not _same_recipe(rid, recipe_id)
            ]
            if len(remaining) == len(ids):
                kept.append(entry)
                continue
            if not remaining:
                continue
            entry['recipe_ids'] = [rid for rid, _, _ in remaining]
            entry['recipe_titles'] = [title for _, title, _ in remaining]
            entry['recipe_amounts'] = [share for _, _, share in remaining]
            entry['recipe_id'], entry['recipe_title'] = remaining[0][:2]

            known = [share for share in entry['recipe_amounts'] if share is not None]
            entry['amount'] = sum(known) if known else None
            kept.append(entry)
        return self._save(kept)

    def group_by_recipe(self):
        """Group entries by first contributing recipe, in list order."""
        groups = OrderedDict()
        for entry in self.items():
            recipe_id = entry.get('recipe_id')
            if recipe_id is None or recipe_id == '':
                recipe_id = OTHER_GROUP_KEY
                title = OTHER_GROUP_TITLE
            else:
                title = entry.get('recipe_title') or OTHER_GROUP_TITLE
            group = groups.setdefault(recipe_id, {'title': title, 'items': []})
            group['items'].append(entry)
        return groups
