"""
Recipe Page Controller

Ties the parser, the scaling engine, the shopping list and the saved
recipes together for one recipe page.
"""

from dataclasses import dataclass
from typing import Optional

from .parsing import parse_ingredients
from .saved import SavedRecipes, ScalePreferences
from .scaling import render_scaled, scale_ingredient
from .shopping import ShoppingList


class NotARecipeError(Exception):
    """Raised when a recipe-only action runs on a non-recipe page."""
    pass


@dataclass(frozen=True)
class RecipeContext:
    """What the host tells us about the page being viewed."""
    post_id: Optional[object] = None
    title: str = ''
    slug: str = ''
    image: str = ''
    is_recipe: bool = False


class RecipePage:
    def __init__(self, context, store):
        self.context = context
        self.shopping = ShoppingList(store)
        self.saved = SavedRecipes(store)
        self.scales = ScalePreferences(store)

    def _require_recipe(self):
        if not self.context.is_recipe or self.context.post_id is None:
            raise NotARecipeError("This page is not a recipe")

    def current_scale(self):
        self._require_recipe()
        return self.scales.get(self.context.post_id)

    def change_scale(self, multiplier):
        """Persist the multiplier for this recipe and return it."""
        self._require_recipe()
        self.scales.set(self.context.post_id, multiplier)
        return multiplier

    def scaled_lines(self, lines, multiplier=None):
        """Render ingredient lines at multiplier, or at the saved preference."""
        if multiplier is None:
            multiplier = self.current_scale()
        return [render_scaled(parsed, multiplier) for parsed in parse_ingredients(lines)]

    def add_to_shopping_list(self, lines, multiplier=None):
        """
        Add this recipe's ingredients, scaled to multiplier or the saved preference.

        Returns the number of ingredients added; 0 means none were found.
        """
        self._require_recipe()
        ingredients = parse_ingredients(lines)
        if not ingredients:
            return 0

        if multiplier is None:
            multiplier = self.current_scale()
        ingredients = [scale_ingredient(ing, multiplier) for ing in ingredients]
        self.shopping.add_items(ingredients, self.context.post_id, self.context.title)
        return len(ingredients)

    def is_saved(self):
        self._require_recipe()
        return self.saved.is_saved(self.context.post_id)

    def toggle_save(self):
        """Save or un-save this recipe; returns the new saved state."""
        self._require_recipe()
        return self.saved.toggle({
            'id': self.context.post_id,
            'title': self.context.title,
            'slug': self.context.slug,
            'image': self.context.image,
        })
