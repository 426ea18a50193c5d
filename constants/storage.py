"""
Storage Keys

Keys used against the key-value store. Values stored under them are JSON.
"""

SAVED_RECIPES_KEY = 'saved_recipes'
SHOPPING_LIST_KEY = 'shopping_list'

# Per-recipe scale preference: SCALE_PREFIX + recipe id
SCALE_PREFIX = 'recipe_scale_'

# Group key and title for shopping list entries without a recipe
OTHER_GROUP_KEY = 'other'
OTHER_GROUP_TITLE = 'Other Items'
