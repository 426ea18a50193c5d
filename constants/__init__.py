"""
Constants Package

Lookup tables and limits shared by the services.
"""

from .units import (
    UNIT_VOCABULARY,
    UNIT_SYNONYMS,
    UNICODE_FRACTIONS,
    DISPLAY_FRACTIONS,
    ARTICLE_QUANTIFIERS,
)

from .storage import (
    SAVED_RECIPES_KEY,
    SHOPPING_LIST_KEY,
    SCALE_PREFIX,
    OTHER_GROUP_KEY,
    OTHER_GROUP_TITLE,
)

from .validation import (
    SERVING_MULTIPLIERS,
    MIN_MULTIPLIER,
    MAX_MULTIPLIER,
    MAX_LENGTHS,
    ALLOWED_URL_SCHEMES,
)
