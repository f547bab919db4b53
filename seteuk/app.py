#!/usr/bin/env python3
"""
SeTeuk Master - AI School Record (세특) Drafting Assistant
=========================================================
Run: python3 -m seteuk.app
Then open: http://localhost:3000
"""

import logging
import threading

from flask import Flask, send_from_directory
from flask_cors import CORS

from seteuk.config import HOST, PORT, DEBUG, STATIC_DIR, config
from seteuk.draft_state import DraftState
from seteuk.routes import register_routes

logger = logging.getLogger(__name__)


def create_app(draft_state=None):
    """Build the Flask app with the SeTeuk blueprint and a fresh in-memory state."""
    app = Flask(__name__, static_folder=str(STATIC_DIR), static_url_path='')
    CORS(app)

    if draft_state is None:
        draft_state = DraftState()
    register_routes(app, draft_state)

    @app.route('/')
    def serve_frontend():
        """Serve the form page."""
        return send_from_directory(app.static_folder, 'index.html')

    if not config.gemini_api_key:
        logger.warning("GEMINI_API_KEY not set; draft generation will fail until it is configured")

    return app


app = create_app()


if __name__ == '__main__':
    import webbrowser

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    def open_browser():
        """Open browser after short delay to let server start."""
        import time
        time.sleep(1.5)
        webbrowser.open(f'http://localhost:{PORT}')

    print()
    print("+" + "=" * 50 + "+")
    print("|  SeTeuk Master - 생활기록부 세특 작성 파트너       |")
    print("+" + "=" * 50 + "+")
    print("|                                                  |")
    print(f"|  Open in browser: http://localhost:{PORT:<14}|")
    print("|                                                  |")
    print("|  Press Ctrl+C to stop                            |")
    print("+" + "=" * 50 + "+")
    print()

    # Auto-open browser
    threading.Thread(target=open_browser, daemon=True).start()

    app.run(host=HOST, port=PORT, debug=DEBUG)
