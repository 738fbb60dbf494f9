"""
Tests for the Flask integration: template filters and JSON endpoints.
Run with: pytest tests/test_app.py
"""

import pytest
from flask import render_template_string

from app import app


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_template_filters():
    with app.test_request_context():
        assert render_template_string('{{ 2.5|fraction }}') == '2½'
        assert render_template_string('{{ 0.5|scale_label }}') == '½x'
        rendered = render_template_string(
            '{{ entry|ingredient_line }}',
            entry={'amount': 0.75, 'unit': 'cup', 'ingredient': 'sugar'},
        )
        assert rendered == '¾ cup sugar'


def test_presets(client):
    response = client.get('/api/scale/presets')
    assert response.status_code == 200
    data = response.get_json()
    assert data['min'] == 0.25
    assert data['max'] == 10
    labels = [preset['label'] for preset in data['presets']]
    assert labels[0] == '¼x'
    assert '1x (Original)' in labels


def test_parse_endpoint(client):
    response = client.post('/api/ingredients/parse', json={
        'lines': ['2 cups flour', 'a pinch of salt', '   '],
    })
    assert response.status_code == 200
    ingredients = response.get_json()['ingredients']
    assert len(ingredients) == 2
    assert ingredients[0]['amounts'] == [2.0]
    assert ingredients[0]['unit'] == 'cups'
    assert ingredients[1]['parseable'] is False
    assert ingredients[1]['ingredient'] == 'a pinch of salt'


def test_scale_endpoint(client):
    response = client.post('/api/ingredients/scale', json={
        'scale': 2,
        'lines': ['1-2 tbsp olive oil', 'a pinch of salt'],
        'entries': [
            {'amount': 1.5, 'unit': 'cups', 'ingredient': 'milk'},
            {'ingredient': 'salt to taste'},
        ],
    })
    assert response.status_code == 200
    data = response.get_json()
    assert data['label'] == '2x'
    assert data['lines'][0]['scaled'] == '2-4 tbsp olive oil'
    assert data['lines'][0]['amounts'] == [2.0, 4.0]
    assert data['lines'][1]['scaled'] == 'a pinch of salt'
    assert data['entries'][0]['amount'] == 3.0
    assert data['entries'][0]['display'] == '3 cups milk'
    assert data['entries'][1]['amount'] is None
    assert data['entries'][1]['display'] == 'salt to taste'


def test_scale_defaults_to_original(client):
    response = client.post('/api/ingredients/scale', json={'lines': ['2 cups flour']})
    assert response.status_code == 200
    data = response.get_json()
    assert data['label'] == '1x (Original)'
    assert data['lines'][0]['scaled'] == '2 cups flour'


def test_invalid_scale_is_rejected(client):
    for scale in (0, -2, 'lots', 50):
        response = client.post('/api/ingredients/scale', json={'scale': scale, 'lines': []})
        assert response.status_code == 400
        assert 'error' in response.get_json()


def test_malformed_bodies_are_rejected(client):
    response = client.post('/api/ingredients/parse', data='not json', content_type='text/plain')
    assert response.status_code == 400

    response = client.post('/api/ingredients/parse', json={'lines': '2 cups flour'})
    assert response.status_code == 400

    response = client.post('/api/ingredients/scale', json={'scale': 2, 'entries': [{'amount': 'x'}]})
    assert response.status_code == 400

    response = client.post('/api/ingredients/scale', json={'scale': 2, 'entries': ['milk']})
    assert response.status_code == 400

    for amount in ('nan', 'inf', -2):
        response = client.post(
            '/api/ingredients/scale',
            json={'scale': 2, 'entries': [{'amount': amount, 'ingredient': 'flour'}]},
        )
        assert response.status_code == 400
        assert 'error' in response.get_json()


def test_overflowing_line_comes_back_as_written(client):
    line = '1' + '0' * 308 + ' cups flour'
    response = client.post('/api/ingredients/scale', json={'scale': 10, 'lines': [line]})
    assert response.status_code == 200
    scaled = response.get_json()['lines'][0]
    assert scaled['scaled'] == line
    assert scaled['amounts'] == []
