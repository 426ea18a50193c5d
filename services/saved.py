"""
Saved Recipes Service

Keeps the "save for later" list and the per-recipe scale preference in the
key-value store.
"""

import logging
from datetime import datetime, timezone

from constants import SAVED_RECIPES_KEY, SCALE_PREFIX, MIN_MULTIPLIER, MAX_MULTIPLIER, MAX_LENGTHS
from utils.sanitizer import sanitize_recipe_title, sanitize_url
from .metadata import MetadataFetchError

logger = logging.getLogger(__name__)


def _same_id(a, b):
    return str(a) == str(b)


class SavedRecipes:
    """Saved recipe entries: {id, title, slug, image, saved_at}."""

    def __init__(self, store, key=SAVED_RECIPES_KEY):
        self.store = store
        self.key = key

    def all(self):
        data = self.store.get(self.key)
        return data if isinstance(data, list) else []

    def is_saved(self, recipe_id):
        return any(_same_id(r.get('id'), recipe_id) for r in self.all())

    def toggle(self, recipe):
        """
        Save a recipe, or un-save it when it is already saved.

        Args:
            recipe: Mapping with id, title and optionally slug and image

        Returns:
            True if the recipe is saved after the call
        """
        saved = self.all()
        recipe_id = recipe['id']
        kept = [r for r in saved if not _same_id(r.get('id'), recipe_id)]

        if len(kept) != len(saved):
            self.store.set(self.key, kept)
            return False

        kept.append({
            'id': recipe_id,
            'title': sanitize_recipe_title(recipe.get('title')),
            'slug': str(recipe.get('slug') or '')[:MAX_LENGTHS['recipe_slug']],
            'image': sanitize_url(recipe.get('image')),
            'saved_at': datetime.now(timezone.utc).isoformat(),
        })
        self.store.set(self.key, kept)
        return True

    def remove(self, recipe_id):
        kept = [r for r in self.all() if not _same_id(r.get('id'), recipe_id)]
        self.store.set(self.key, kept)
        return kept

    def clear(self):
        self.store.set(self.key, [])
        return []

    def display_data(self, client=None):
        """
        Saved recipes for display, refreshed from the host when possible.

        One request, no retry. A failed or empty refresh falls back to the
        locally stored entries.
        """
        saved = self.all()
        if not saved or client is None:
            return saved

        try:
            recipes = client.fetch([r['id'] for r in saved])
        except MetadataFetchError as e:
            logger.warning("Recipe metadata refresh failed, using stored data: %s", e)
            return saved

        return recipes or saved


class ScalePreferences:
    """Serving multiplier chosen for each recipe."""

    def __init__(self, store, prefix=SCALE_PREFIX):
        self.store = store
        self.prefix = prefix

    def _key(self, recipe_id):
        return f"{self.prefix}{recipe_id}"

    def get(self, recipe_id, default=1.0):
        value = self.store.get(self._key(recipe_id))
        try:
            multiplier = float(value)
        except (TypeError, ValueError):
            return default
        if not MIN_MULTIPLIER <= multiplier <= MAX_MULTIPLIER:
            return default
        return multiplier

    def set(self, recipe_id, multiplier):
        return self.store.set(self._key(recipe_id), float(multiplier))
