"""
Validation Constants

Limits applied to user input before it reaches the parser and the stores.
"""

# Multipliers offered by the servings selector
SERVING_MULTIPLIERS = (0.5, 1, 2, 3, 4)

# Bounds for any multiplier accepted from a request
MIN_MULTIPLIER = 0.1
MAX_MULTIPLIER = 100

# Maximum field lengths
MAX_LENGTHS = {
    'ingredient_text': 500,
    'recipe_title': 200,
    'recipe_slug': 200,
    'image_url': 500,
}

# Allowed URL schemes for recipe images
ALLOWED_URL_SCHEMES = {'http', 'https', ''}
