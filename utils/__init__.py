# Utility modules for recipe features
from .sanitizer import (
    normalize_whitespace, clean_ingredient_text,
    sanitize_recipe_title, sanitize_url
)
