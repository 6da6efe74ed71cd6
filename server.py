from typing import Optional

import requests
import structlog
from flask import Flask, request, jsonify
from flask_cors import CORS

from bidi_styles.breakpoints import load_breakpoint_table, validate
from bidi_styles.config import Settings, load_settings
from bidi_styles.direction import DirectionResolver
from bidi_styles.errors import StyleError, UnknownBreakpoint
from bidi_styles.html_parser import HTMLParser
from bidi_styles.logging_config import configure_logging
from bidi_styles.logical import LogicalPropertyResolver
from bidi_styles.rules import render_rule_set

logger = structlog.get_logger(__name__)

FETCH_HEADERS = {
    'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
}

BOX_PARAMETERS = ('top', 'end', 'bottom', 'start', 'left', 'right')
RADIUS_PARAMETERS = ('top_start', 'top_end', 'bottom_end', 'bottom_start')


def _pick(data: dict, names) -> dict:
    return {name: data[name] for name in names if name in data}


def _json_object():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or load_settings()
    table = load_breakpoint_table(settings.breakpoints)
    resolver = LogicalPropertyResolver(DirectionResolver(settings.rtl_enabled, settings.rtl_selector))

    app = Flask(__name__)
    CORS(app)  # Enable CORS for all routes

    operations = {
        'padding': lambda data: resolver.padding(selector=data.get('selector', '&'), **_pick(data, BOX_PARAMETERS)),
        'margin': lambda data: resolver.margin(selector=data.get('selector', '&'), **_pick(data, BOX_PARAMETERS)),
        'position': lambda data: resolver.position(selector=data.get('selector', '&'), **_pick(data, BOX_PARAMETERS)),
        'border-radius': lambda data: resolver.border_radius(
            selector=data.get('selector', '&'), **_pick(data, RADIUS_PARAMETERS)
        ),
        'text-align': lambda data: resolver.text_align(
            data.get('value'), data.get('modifier', ''), selector=data.get('selector', '&')
        ),
    }

    @app.errorhandler(UnknownBreakpoint)
    def unknown_breakpoint(e):
        return jsonify({'error': str(e)}), 404

    @app.errorhandler(StyleError)
    def style_error(e):
        return jsonify({'error': str(e)}), 400

    @app.route('/resolve/<operation>', methods=['POST'])
    def resolve(operation):
        if operation not in operations:
            return jsonify({'error': f'Unknown operation: {operation}'}), 404
        data = _json_object()
        if data is None:
            return jsonify({'error': 'Request body must be a JSON object'}), 400
        for key in ('selector', 'parent_selector'):
            if key in data and not isinstance(data[key], str):
                return jsonify({'error': f'{key} must be a string'}), 400
        rule_set = operations[operation](data)
        payload = rule_set.to_dict()
        payload['css'] = render_rule_set(rule_set, data.get('parent_selector'))
        return jsonify(payload)

    @app.route('/breakpoints', methods=['GET'])
    def breakpoints():
        return jsonify({
            'breakpoints': [{'name': e.name, 'min_width': str(e.min_width)} for e in table],
            'warnings': [w.to_dict() for w in validate(table)],
        })

    @app.route('/breakpoints/<name>', methods=['GET'])
    def breakpoint(name):
        min_width = table.min_width(name)
        max_width = table.max_width(name)
        up = table.scope_up(name, lambda: [])
        down = table.scope_down(name, lambda: [])
        return jsonify({
            'name': name,
            'min_width': str(min_width) if min_width is not None else None,
            'max_width': str(max_width) if max_width is not None else None,
            'next': table.next_name(name),
            'infix': table.infix(name),
            'media_up': up.to_dict()['media'],
            'media_down': down.to_dict()['media'],
        })

    @app.route('/resolveDocument', methods=['POST'])
    def resolve_document():
        try:
            data = _json_object()
            if data is None:
                return jsonify({'error': 'Request body must be a JSON object'}), 400

            if 'url' in data:
                response = requests.get(data['url'], headers=FETCH_HEADERS)
                if response.status_code != 200:
                    return jsonify({'error': f'Failed to fetch URL. Status code: {response.status_code}'}), response.status_code
                html = response.text
            elif 'html' in data:
                html = data['html']
            else:
                return jsonify({'error': 'Either URL or HTML content must be provided'}), 400

            parser = HTMLParser(resolver, table)
            return jsonify(parser.parse(html).to_dict())

        except StyleError:
            raise
        except Exception as e:
            logger.exception("resolve_document_failed")
            return jsonify({'error': str(e)}), 500

    return app


if __name__ == '__main__':
    settings = load_settings()
    configure_logging(settings.log_level)
    create_app(settings).run(debug=True, port=5000)
