"""
Unit Constants and Fraction Tables

Contains the unit vocabulary recognised by the ingredient parser, the
synonym table used to fold units into one canonical form, and the
fraction tables used for parsing and display.
"""

# Unit tokens the parser recognises after an amount (matched case-insensitively,
# longest token first)
UNIT_VOCABULARY = (
    'tablespoons', 'tablespoon', 'tbsp',
    'teaspoons', 'teaspoon', 'tsp',
    'cups', 'cup',
    'ounces', 'ounce', 'oz',
    'pounds', 'pound', 'lbs', 'lb',
    'grams', 'gram', 'g',
    'kilograms', 'kilogram', 'kg',
    'milliliters', 'milliliter', 'ml',
    'liters', 'liter', 'l',
    'pinches', 'pinch',
    'dashes', 'dash',
    'cloves', 'clove',
    'slices', 'slice',
    'pieces', 'piece',
    'cans', 'can',
    'packages', 'package', 'pkg',
    'bunches', 'bunch',
    'heads', 'head',
    'stalks', 'stalk',
    'sprigs', 'sprig',
    'leaves', 'leaf',
    'small', 'medium', 'large',
)

# Unit synonyms (lowercase token -> canonical singular unit)
UNIT_SYNONYMS = {
    'tbsp': 'tablespoon', 'tablespoons': 'tablespoon',
    'tsp': 'teaspoon', 'teaspoons': 'teaspoon',
    'oz': 'ounce', 'ounces': 'ounce',
    'lb': 'pound', 'lbs': 'pound', 'pounds': 'pound',
    'g': 'gram', 'grams': 'gram',
    'kg': 'kilogram', 'kilograms': 'kilogram',
    'ml': 'milliliter', 'milliliters': 'milliliter',
    'l': 'liter', 'liters': 'liter',
    'cups': 'cup',
    'cloves': 'clove',
    'slices': 'slice',
    'pieces': 'piece',
    'cans': 'can',
    'packages': 'package', 'pkg': 'package',
    'bunches': 'bunch',
    'heads': 'head',
    'stalks': 'stalk',
    'sprigs': 'sprig',
    'leaves': 'leaf',
    'pinches': 'pinch',
    'dashes': 'dash',
}

# Unicode fraction characters mapping (fixed approximations, not exact rationals)
UNICODE_FRACTIONS = {
    '\u00bd': 0.5,      # ½
    '\u2153': 0.333,    # ⅓
    '\u2154': 0.667,    # ⅔
    '\u00bc': 0.25,     # ¼
    '\u00be': 0.75,     # ¾
    '\u2155': 0.2,      # ⅕
    '\u2156': 0.4,      # ⅖
    '\u2157': 0.6,      # ⅗
    '\u2158': 0.8,      # ⅘
    '\u2159': 0.167,    # ⅙
    '\u215a': 0.833,    # ⅚
    '\u215b': 0.125,    # ⅛
    '\u215c': 0.375,    # ⅜
    '\u215d': 0.625,    # ⅝
    '\u215e': 0.875,    # ⅞
}

# Display grid for formatting, ascending. A value of 1 rolls over into the
# whole part; 0 and 1 have no glyph.
DISPLAY_FRACTIONS = (
    (0, ''),
    (0.125, '\u215b'),  # ⅛
    (0.25, '\u00bc'),  # ¼
    (0.333, '\u2153'),  # ⅓
    (0.375, '\u215c'),  # ⅜
    (0.5, '\u00bd'),  # ½
    (0.625, '\u215d'),  # ⅝
    (0.667, '\u2154'),  # ⅔
    (0.75, '\u00be'),  # ¾
    (0.875, '\u215e'),  # ⅞
    (1, ''),
)

# Articles that may stand in for an amount before a unit ("a pinch of salt")
ARTICLE_QUANTIFIERS = ('a', 'an')
