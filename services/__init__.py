"""
Services Package

Parsing, scaling and aggregation logic for the recipe features.
"""

from .amounts import (
    AmountMatch,
    parse_amount,
    format_amount,
)

from .shopping import (
    normalize_item_key,
    normalize_unit,
    merge_key,
    format_item,
    ShoppingList,
)

from .parsing import (
    ParsedIngredient,
    parse_unit,
    parse_ingredient,
    parse_ingredients,
)

from .scaling import (
    scale_amount,
    scale_ingredient,
    render_scaled,
    render_all,
)

from .storage import (
    MemoryStore,
    DatabaseStore,
)

from .metadata import (
    MetadataFetchError,
    RecipeMetadataClient,
)

from .saved import (
    SavedRecipes,
    ScalePreferences,
)

from .content import (
    ContentBlock,
    SectionState,
    find_ingredient_lines,
    blocks_from_html,
    extract_ingredients,
)

from .recipe_page import (
    NotARecipeError,
    RecipeContext,
    RecipePage,
)

__all__ = [
    # Amounts
    'AmountMatch',
    'parse_amount',
    'format_amount',
    # Shopping
    'normalize_item_key',
    'normalize_unit',
    'merge_key',
    'format_item',
    'ShoppingList',
    # Parsing
    'ParsedIngredient',
    'parse_unit',
    'parse_ingredient',
    'parse_ingredients',
    # Scaling
    'scale_amount',
    'scale_ingredient',
    'render_scaled',
    'render_all',
    # Storage
    'MemoryStore',
    'DatabaseStore',
    # Metadata
    'MetadataFetchError',
    'RecipeMetadataClient',
    # Saved recipes
    'SavedRecipes',
    'ScalePreferences',
    # Content
    'ContentBlock',
    'SectionState',
    'find_ingredient_lines',
    'blocks_from_html',
    'extract_ingredients',
    # Recipe page
    'NotARecipeError',
    'RecipeContext',
    'RecipePage',
]
