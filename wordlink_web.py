#!/usr/bin/env python3
"""
Wordlink Web - HTTP API and client host for the word-categorization puzzle
Serves puzzles as JSON under /api and the bundled client for every other path.
"""

import argparse
import logging
import os
from typing import Optional

from flask import Flask, jsonify, request, send_from_directory

import wordlink
from app.services import GameNotFoundError, PuzzleService, UnknownWordError

web_logger = logging.getLogger('wordlink.web')

INDEX_FILE = 'index.html'


def create_app(service: PuzzleService, public_dir: str = 'public') -> Flask:
    """Build the Flask application around an already-loaded *service*."""
    app = Flask(__name__, static_folder=None)
    public_dir = os.path.abspath(public_dir)

    @app.route('/api/newgame')
    def api_new_game():
        """Serve a puzzle: random, by id, and/or limited to given words"""
        kid_mode = wordlink.parse_bool(request.args.get('kidmode'))
        game_id = request.args.get('id') or None
        words = wordlink.parse_word_list(request.args.get('words'))
        try:
            puzzle = service.new_game(kid_mode, game_id=game_id, words=words)
        except GameNotFoundError as e:
            web_logger.info("newgame 404: %s", e)
            return jsonify({'error': str(e)}), 404
        except UnknownWordError as e:
            web_logger.info("newgame 400: %s", e)
            return jsonify({'error': str(e)}), 400
        return jsonify(puzzle)

    @app.route('/api/games')
    def api_games():
        """List game ids for an audience"""
        kid_mode = wordlink.parse_bool(request.args.get('kidmode'))
        return jsonify({'games': service.list_games(kid_mode)})

    @app.route('/api/status')
    def api_status():
        """Get application status"""
        return jsonify({'ready': True, 'games': service.store.counts()})

    @app.route('/api/openapi.json')
    def api_openapi_spec():
        """Serve the OpenAPI 3.0 specification as JSON."""
        from openapi_spec import build_spec
        server_url = request.url_root.rstrip('/')
        return jsonify(build_spec(server_url=server_url))

    @app.route('/api/docs')
    def api_swagger_ui():
        """Serve an interactive Swagger UI for the Wordlink REST API."""
        openapi_url = '/api/openapi.json'
        html = f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Wordlink API Documentation</title>
  <link rel="stylesheet"
        href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css">
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
  <script>
    SwaggerUIBundle({{
      url: "{openapi_url}",
      dom_id: "#swagger-ui",
      presets: [SwaggerUIBundle.presets.apis, SwaggerUIBundle.SwaggerUIStandalonePreset],
      layout: "BaseLayout",
      deepLinking: true,
    }});
  </script>
</body>
</html>"""
        return html, 200, {'Content-Type': 'text/html; charset=utf-8'}

    @app.route('/api/<path:_unused>')
    def api_not_found(_unused):
        return jsonify({'error': 'Not found'}), 404

    @app.route('/', defaults={'path': ''})
    @app.route('/<path:path>')
    def client(path):
        """Serve a client asset, falling back to index.html"""
        if path and os.path.isfile(os.path.join(public_dir, path)):
            return send_from_directory(public_dir, path)
        if not os.path.isfile(os.path.join(public_dir, INDEX_FILE)):
            return jsonify({'error': 'Client not installed'}), 404
        return send_from_directory(public_dir, INDEX_FILE)

    return app


def _add_file_handler(log_level: str) -> None:
    try:
        os.makedirs('logs', exist_ok=True)
        fh = logging.FileHandler('logs/wordlink_web.log')
        fh.setFormatter(logging.Formatter('[%(asctime)s] %(levelname)s %(name)s: %(message)s'))
        fh.setLevel(getattr(logging, log_level.upper(), logging.INFO))
        logging.getLogger('wordlink').addHandler(fh)
    except OSError:
        web_logger.warning('Could not create log file handler')


def main(argv: Optional[list] = None):
    """Main entry point for the web server"""
    parser = argparse.ArgumentParser(description='Wordlink Web server')
    parser.add_argument('--config', default='config.json', help='Path to config file')
    parser.add_argument('--host', help='Interface to bind (overrides config)')
    parser.add_argument('--port', type=int, help='Port to listen on (overrides config)')
    parser.add_argument('--debug', action='store_true', help='Run Flask in debug mode')
    args = parser.parse_args(argv)

    config = wordlink.load_config(args.config)
    log_level = config.get('log_level', 'WARNING')
    wordlink.setup_logging(log_level)
    _add_file_handler(log_level)

    service = wordlink.build_puzzle_service(config)
    app = create_app(service, public_dir=config['public_dir'])

    host = args.host or config['host']
    port = args.port or config['port']
    print("\n" + "="*60)
    print("Wordlink server is starting...")
    print("="*60)
    print(f"\nOpen your browser and go to:\n  http://{host}:{port}")
    print("\nPress Ctrl+C to stop the server")
    print("="*60 + "\n")

    try:
        app.run(host=host, port=port, debug=args.debug)
    except KeyboardInterrupt:
        print("\nWordlink server stopped\n")


if __name__ == "__main__":
    main()
