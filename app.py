import logging

from flask import Flask, jsonify, request

from config import get_config
from models import IngredientEntry
from services import (
    ScaleFactorError,
    format_amount,
    format_ingredient_entry,
    get_scale_label,
    parse_ingredient,
    parse_ingredients,
    scale_ingredient,
    scale_ingredients,
    scaled_amounts,
    validate_scale_factor,
)
from utils import clean_ingredient_text

app = Flask(__name__)
app.config.from_object(get_config())
app.json.ensure_ascii = False

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)


# Register Jinja filters for the recipe detail page

@app.template_filter('fraction')
def fraction_filter(value):
    """{{ ingredient.amount|fraction }} -> '1½'"""
    return format_amount(value, app.config['FRACTION_STYLE'])


@app.template_filter('scale_label')
def scale_label_filter(value):
    return get_scale_label(value)


@app.template_filter('ingredient_line')
def ingredient_line_filter(entry):
    """Render a structured entry (object or dict) as one display line."""
    if isinstance(entry, dict):
        entry = IngredientEntry.from_dict(entry)
    return format_ingredient_entry(entry, app.config['FRACTION_STYLE'])


# JSON request helpers

class RequestBodyError(ValueError):
    """Malformed request body."""
    pass


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise RequestBodyError('Request body must be a JSON object')
    return data


def _lines_from(data):
    lines = data.get('lines') or []
    if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
        raise RequestBodyError("'lines' must be a list of strings")
    if len(lines) > app.config['MAX_INGREDIENT_LINES']:
        raise RequestBodyError(f"At most {app.config['MAX_INGREDIENT_LINES']} lines per request")
    max_length = app.config['MAX_INGREDIENT_LENGTH']
    cleaned = (clean_ingredient_text(line, max_length) for line in lines)
    return [line for line in cleaned if line]


def _entries_from(data):
    entries = data.get('entries') or []
    if not isinstance(entries, list) or not all(isinstance(item, dict) for item in entries):
        raise RequestBodyError("'entries' must be a list of objects")
    if len(entries) > app.config['MAX_INGREDIENT_LINES']:
        raise RequestBodyError(f"At most {app.config['MAX_INGREDIENT_LINES']} entries per request")
    try:
        return [IngredientEntry.from_dict(item) for item in entries]
    except (TypeError, ValueError) as e:
        raise RequestBodyError(f"Invalid ingredient entry: {e}") from e


@app.errorhandler(RequestBodyError)
def handle_bad_request(error):
    app.logger.warning("Rejected request to %s: %s", request.path, error)
    return jsonify({'error': str(error)}), 400


@app.errorhandler(ScaleFactorError)
def handle_scale_factor_error(error):
    app.logger.warning("Rejected scale factor on %s: %s", request.path, error)
    return jsonify({'error': str(error)}), 400


# Routes

@app.route('/api/scale/presets')
def scale_presets():
    """Scale factors offered by the recipe scale slider."""
    presets = app.config['SCALE_PRESETS']
    return jsonify({
        'min': app.config['MIN_SCALE'],
        'max': app.config['MAX_SCALE'],
        'presets': [{'scale': scale, 'label': get_scale_label(scale)} for scale in presets],
    })


@app.route('/api/ingredients/parse', methods=['POST'])
def parse_lines():
    """Parse free-text ingredient lines into amount, unit and ingredient."""
    data = _json_body()
    parsed = parse_ingredients(_lines_from(data))
    return jsonify({'ingredients': [item.to_dict() for item in parsed]})


@app.route('/api/ingredients/scale', methods=['POST'])
def scale_lines():
    """
    Scale a recipe's ingredients for preview.

    Accepts free-text 'lines' and/or structured 'entries' together with a
    'scale' factor. Unparseable lines come back as written.
    """
    data = _json_body()
    scale = validate_scale_factor(
        data.get('scale', 1),
        app.config['MIN_SCALE'],
        app.config['MAX_SCALE'],
    )
    style = app.config['FRACTION_STYLE']

    lines = []
    for line in _lines_from(data):
        parsed = parse_ingredient(line)
        lines.append({
            'original': parsed.original,
            'scaled': scale_ingredient(parsed, scale, style),
            'amounts': list(scaled_amounts(parsed, scale)),
            'parseable': parsed.parseable,
        })

    entries = []
    for entry in scale_ingredients(_entries_from(data), scale):
        item = entry.to_dict()
        item['display'] = format_ingredient_entry(entry, style)
        entries.append(item)

    return jsonify({
        'scale': scale,
        'label': get_scale_label(scale),
        'lines': lines,
        'entries': entries,
    })


if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False))
