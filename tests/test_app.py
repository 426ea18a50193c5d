"""Tests for the HTTP routes."""

import pytest


def add_lines(client, recipe_id, title, lines, **extra):
    body = {'recipe_id': recipe_id, 'recipe_title': title, 'lines': lines}
    body.update(extra)
    return client.post('/shopping-list/add', json=body)


def test_index(client):
    data = client.get('/').get_json()
    assert data['shopping_list_count'] == 0
    assert data['saved_recipe_count'] == 0
    assert data['serving_multipliers'] == [0.5, 1, 2, 3, 4]


class TestIngredientRoutes:
    def test_parse(self, client):
        response = client.post('/api/ingredients/parse', json={'lines': ['2 tbsp olive oil (extra virgin)', '']})
        assert response.status_code == 200
        [parsed] = response.get_json()['ingredients']
        assert parsed['amount'] == 2
        assert parsed['unit'] == 'tablespoon'
        assert parsed['item'] == 'olive oil'
        assert parsed['notes'] == 'extra virgin'

    def test_parse_needs_lines(self, client):
        response = client.post('/api/ingredients/parse', json={'lines': 'one line'})
        assert response.status_code == 400
        assert 'lines' in response.get_json()['error']

    def test_parse_needs_json_object(self, client):
        response = client.post('/api/ingredients/parse', data='not json', content_type='text/plain')
        assert response.status_code == 400

    def test_scale(self, client):
        data = client.post('/api/ingredients/scale', json={
            'lines': ['1 cup sugar', 'Salt to taste'], 'multiplier': 0.5,
        }).get_json()
        assert data['multiplier'] == 0.5
        assert data['lines'] == ['½ cup sugar', 'Salt to taste']

    def test_scale_clamps_multiplier(self, client):
        data = client.post('/api/ingredients/scale', json={'lines': ['1 egg'], 'multiplier': 1000}).get_json()
        assert data['multiplier'] == 100

    def test_scale_uses_saved_preference(self, client):
        client.post('/recipe/9/scale', json={'multiplier': 3})
        data = client.post('/api/ingredients/scale', json={'lines': ['2 eggs'], 'recipe_id': 9}).get_json()
        assert data['multiplier'] == 3
        assert data['lines'] == ['6 eggs']

    def test_scale_defaults_to_one(self, client):
        data = client.post('/api/ingredients/scale', json={'lines': ['2 eggs']}).get_json()
        assert data['multiplier'] == 1.0
        assert data['lines'] == ['2 eggs']

    def test_extract(self, client):
        html = '<h3>Ingredients</h3><ul><li>2 cups rice</li></ul><h3>Directions</h3><ol><li>Cook</li></ol>'
        data = client.post('/api/ingredients/extract', json={'html': html}).get_json()
        assert data['lines'] == ['2 cups rice']
        assert data['ingredients'][0]['item'] == 'rice'

    def test_extract_rejects_non_string(self, client):
        response = client.post('/api/ingredients/extract', json={'html': ['<ul></ul>']})
        assert response.status_code == 400


class TestShoppingListRoutes:
    def test_empty_list(self, client):
        data = client.get('/shopping-list').get_json()
        assert data == {'empty': True, 'count': 0, 'items': [], 'groups': []}

    def test_add_and_merge(self, client):
        add_lines(client, 1, 'Bread', ['2 cups flour', '1 tsp salt'])
        data = add_lines(client, 2, 'Cake', ['1 cup flour']).get_json()

        assert data['added'] == 1
        assert data['message'] == '1 ingredients added to shopping list'
        assert data['count'] == 2
        flour = data['items'][0]
        assert flour['amount'] == 3
        assert flour['display'] == '3 cup flour'
        assert flour['recipe_ids'] == [1, 2]
        assert [g['title'] for g in data['groups']] == ['Bread']

    def test_add_scaled(self, client):
        data = add_lines(client, 1, 'Bread', ['2 cups flour'], multiplier=2).get_json()
        assert data['items'][0]['amount'] == 4

    def test_add_without_ingredients(self, client):
        data = add_lines(client, 1, 'Bread', ['']).get_json()
        assert data['added'] == 0
        assert data['message'] == 'No ingredients found'
        assert data['empty'] is True

    def test_add_needs_recipe_id(self, client):
        response = client.post('/shopping-list/add', json={'lines': ['1 egg']})
        assert response.status_code == 400

    def test_check_and_delete(self, client):
        items = add_lines(client, 1, 'Bread', ['2 cups flour', '1 egg']).get_json()['items']
        flour_id = items[0]['id']

        data = client.post(f'/shopping-list/check/{flour_id}').get_json()
        assert data['items'][0]['checked'] is True

        data = client.post('/shopping-list/clear-checked').get_json()
        assert [i['item'] for i in data['items']] == ['egg']

        egg_id = data['items'][0]['id']
        data = client.post(f'/shopping-list/delete/{egg_id}').get_json()
        assert data['empty'] is True

    @pytest.mark.parametrize('action', ['check', 'delete'])
    def test_unknown_item(self, client, action):
        response = client.post(f'/shopping-list/{action}/item_missing')
        assert response.status_code == 404
        assert response.get_json()['error'] == 'No such shopping list item'

    def test_clear_recipe(self, client):
        add_lines(client, 1, 'Bread', ['2 cups flour', '1 egg'])
        add_lines(client, 2, 'Cake', ['1 cup flour'])
        data = client.post('/shopping-list/clear-recipe/1').get_json()
        assert [i['item'] for i in data['items']] == ['flour']
        assert data['items'][0]['recipe_title'] == 'Cake'
        assert data['items'][0]['amount'] == 1

    def test_clear_all(self, client):
        add_lines(client, 1, 'Bread', ['2 cups flour'])
        data = client.post('/shopping-list/clear-all').get_json()
        assert data['empty'] is True
        assert client.get('/').get_json()['shopping_list_count'] == 0


class TestSavedRecipeRoutes:
    def test_toggle_and_list(self, client):
        data = client.post('/saved-recipes/toggle', json={'id': 7, 'title': 'Curry'}).get_json()
        assert data == {'saved': True, 'message': 'Recipe saved!'}

        recipes = client.get('/saved-recipes').get_json()['recipes']
        assert [r['title'] for r in recipes] == ['Curry']

        data = client.post('/saved-recipes/toggle', json={'id': 7}).get_json()
        assert data['saved'] is False

    def test_toggle_needs_id(self, client):
        assert client.post('/saved-recipes/toggle', json={'title': 'x'}).status_code == 400

    def test_clear(self, client):
        client.post('/saved-recipes/toggle', json={'id': 7, 'title': 'Curry'})
        assert client.post('/saved-recipes/clear').get_json() == {'recipes': []}


class TestScaleRoutes:
    def test_default(self, client):
        assert client.get('/recipe/3/scale').get_json() == {'recipe_id': '3', 'multiplier': 1.0}

    def test_set(self, client):
        client.post('/recipe/3/scale', json={'multiplier': 2})
        assert client.get('/recipe/3/scale').get_json()['multiplier'] == 2.0

    def test_set_needs_number(self, client):
        response = client.post('/recipe/3/scale', json={'multiplier': 'lots'})
        assert response.status_code == 400


def test_huge_amount_does_not_break_shopping_list(client):
    line = '1' + '0' * 400 + ' cups flour'
    response = add_lines(client, 1, 'Bread', [line])
    assert response.status_code == 200

    data = client.get('/shopping-list').get_json()
    assert data['items'][0]['amount'] is None
    assert data['items'][0]['display'] == line


def test_toggle_with_numeric_slug(client):
    response = client.post('/saved-recipes/toggle', json={'id': 1, 'slug': 5})
    assert response.status_code == 200
    assert response.get_json()['saved'] is True
