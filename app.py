import logging

from flask import Flask, request, jsonify, abort
from flask_migrate import Migrate

from config import get_config
from constants import MIN_MULTIPLIER, MAX_MULTIPLIER, SERVING_MULTIPLIERS
from models import db
from services import (
    DatabaseStore, ShoppingList, SavedRecipes, ScalePreferences,
    RecipeContext, RecipePage, RecipeMetadataClient,
    parse_ingredients, render_all, extract_ingredients,
    find_ingredient_lines, blocks_from_html, format_item,
)

app = Flask(__name__)
app.config.from_object(get_config())
app.logger.setLevel(app.config['LOG_LEVEL'])

db.init_app(app)
migrate = Migrate(app, db)

store = DatabaseStore(db)


def safe_float(value, default=None, min_val=None, max_val=None):
    """Safely parse a float value with optional bounds."""
    try:
        result = float(value) if value not in (None, '') else default
        if result is None:
            return default
        if min_val is not None:
            result = max(min_val, result)
        if max_val is not None:
            result = min(max_val, result)
        return result
    except (ValueError, TypeError):
        return default


def json_body():
    """Request JSON object, or 400."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        abort(400, description='Expected a JSON object')
    return body


def ingredient_lines(body):
    """Ingredient lines from a request body, or 400."""
    lines = body.get('lines')
    if not isinstance(lines, list):
        abort(400, description='"lines" must be a list of strings')
    limit = app.config['MAX_INGREDIENT_LINES']
    return [str(line) for line in lines[:limit] if line is not None]


def multiplier_from(body, default=None):
    return safe_float(body.get('multiplier'), default, MIN_MULTIPLIER, MAX_MULTIPLIER)


def metadata_client():
    url = app.config.get('RECIPE_METADATA_URL')
    if not url:
        return None
    return RecipeMetadataClient(url, timeout=app.config['METADATA_TIMEOUT'])


def shopping_list_payload(shopping):
    """Shopping list state for display, grouped by recipe."""
    items = [dict(entry, display=format_item(entry)) for entry in shopping.items()]
    groups = [
        {'recipe_id': recipe_id, 'title': group['title'],
         'items': [dict(entry, display=format_item(entry)) for entry in group['items']]}
        for recipe_id, group in shopping.group_by_recipe().items()
    ]
    return {'empty': not items, 'count': len(items), 'items': items, 'groups': groups}


@app.errorhandler(400)
@app.errorhandler(404)
def json_error(error):
    return jsonify({'error': error.description}), error.code


# ============================================
# ROUTES - HOME
# ============================================

@app.route('/')
def index():
    return jsonify({
        'shopping_list_count': ShoppingList(store).count(),
        'saved_recipe_count': len(SavedRecipes(store).all()),
        'serving_multipliers': list(SERVING_MULTIPLIERS),
    })

# ============================================
# ROUTES - INGREDIENTS
# ============================================

@app.route('/api/ingredients/parse', methods=['POST'])
def ingredients_parse():
    lines = ingredient_lines(json_body())
    return jsonify({'ingredients': [p.to_dict() for p in parse_ingredients(lines)]})

@app.route('/api/ingredients/scale', methods=['POST'])
def ingredients_scale():
    body = json_body()
    lines = ingredient_lines(body)
    multiplier = multiplier_from(body)
    if multiplier is None:
        recipe_id = body.get('recipe_id')
        multiplier = ScalePreferences(store).get(recipe_id) if recipe_id is not None else 1.0
    return jsonify({'multiplier': multiplier, 'lines': render_all(lines, multiplier)})

@app.route('/api/ingredients/extract', methods=['POST'])
def ingredients_extract():
    html = json_body().get('html') or ''
    if not isinstance(html, str):
        abort(400, description='"html" must be a string')
    return jsonify({
        'lines': find_ingredient_lines(blocks_from_html(html)),
        'ingredients': [p.to_dict() for p in extract_ingredients(html)],
    })

# ============================================
# ROUTES - SHOPPING LIST
# ============================================

@app.route('/shopping-list')
def shopping_list():
    return jsonify(shopping_list_payload(ShoppingList(store)))

@app.route('/shopping-list/add', methods=['POST'])
def shopping_add():
    body = json_body()
    recipe_id = body.get('recipe_id')
    if recipe_id is None:
        abort(400, description='"recipe_id" is required')

    context = RecipeContext(post_id=recipe_id, title=body.get('recipe_title') or '', is_recipe=True)
    page = RecipePage(context, store)
    added = page.add_to_shopping_list(ingredient_lines(body), multiplier_from(body))

    payload = shopping_list_payload(page.shopping)
    payload['added'] = added
    if not added:
        payload['message'] = 'No ingredients found'
    else:
        payload['message'] = f"{added} ingredients added to shopping list"
    return jsonify(payload)

@app.route('/shopping-list/check/<item_id>', methods=['POST'])
def shopping_check(item_id):
    shopping = ShoppingList(store)
    if shopping.get(item_id) is None:
        abort(404, description='No such shopping list item')
    shopping.toggle_checked(item_id)
    return jsonify(shopping_list_payload(shopping))

@app.route('/shopping-list/delete/<item_id>', methods=['POST'])
def shopping_delete(item_id):
    shopping = ShoppingList(store)
    if shopping.get(item_id) is None:
        abort(404, description='No such shopping list item')
    shopping.remove(item_id)
    return jsonify(shopping_list_payload(shopping))

@app.route('/shopping-list/clear-checked', methods=['POST'])
def shopping_clear_checked():
    shopping = ShoppingList(store)
    shopping.clear_checked()
    return jsonify(shopping_list_payload(shopping))

@app.route('/shopping-list/clear-all', methods=['POST'])
def shopping_clear_all():
    shopping = ShoppingList(store)
    shopping.clear_all()
    return jsonify(shopping_list_payload(shopping))

@app.route('/shopping-list/clear-recipe/<recipe_id>', methods=['POST'])
def shopping_clear_recipe(recipe_id):
    shopping = ShoppingList(store)
    shopping.clear_by_recipe(recipe_id)
    return jsonify(shopping_list_payload(shopping))

# ============================================
# ROUTES - SAVED RECIPES
# ============================================

@app.route('/saved-recipes')
def saved_recipes():
    return jsonify({'recipes': SavedRecipes(store).display_data(metadata_client())})

@app.route('/saved-recipes/toggle', methods=['POST'])
def saved_toggle():
    body = json_body()
    if body.get('id') is None:
        abort(400, description='"id" is required')
    saved = SavedRecipes(store).toggle(body)
    return jsonify({'saved': saved, 'message': 'Recipe saved!' if saved else 'Recipe removed from saved'})

@app.route('/saved-recipes/clear', methods=['POST'])
def saved_clear():
    return jsonify({'recipes': SavedRecipes(store).clear()})

# ============================================
# ROUTES - SCALE PREFERENCE
# ============================================

@app.route('/recipe/<recipe_id>/scale', methods=['GET', 'POST'])
def recipe_scale(recipe_id):
    scales = ScalePreferences(store)
    if request.method == 'POST':
        multiplier = multiplier_from(json_body())
        if multiplier is None:
            abort(400, description='"multiplier" must be a number')
        scales.set(recipe_id, multiplier)
    return jsonify({'recipe_id': recipe_id, 'multiplier': scales.get(recipe_id)})


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db():
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    logging.basicConfig(level=app.config['LOG_LEVEL'])
    init_db()
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
