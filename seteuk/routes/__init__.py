"""
SeTeuk Master API Routes
========================

All API route blueprints for the SeTeuk Master application.

Usage:
    from seteuk.routes import register_routes
    register_routes(app, draft_state)
"""
from .seteuk_routes import seteuk_bp, init_seteuk_routes


def register_routes(app, draft_state=None):
    """Register all route blueprints with the Flask app."""

    # Initialize routes with the shared state if provided
    if draft_state is not None:
        init_seteuk_routes(draft_state)

    app.register_blueprint(seteuk_bp)


__all__ = [
    'register_routes',
    'seteuk_bp',
    'init_seteuk_routes',
]
