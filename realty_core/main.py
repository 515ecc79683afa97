"""Flask application factory.

    app = create_app()                      # store from settings.database_path
    app = create_app(store=DocumentStore(...))  # explicit store (tests, scripts)
"""

import logging

from flask import Flask, jsonify
from flask_cors import CORS

from . import db
from .config import settings
from .db import DocumentStore
from .exceptions import DatabaseError, RealtyError

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def handle_realty_error(error: RealtyError):
    """Render any RealtyError with its class's status code."""
    response = {
        "error": {
            "type": error.__class__.__name__,
            "message": error.message
        }
    }
    # Store failures never expose driver details
    if error.details and not isinstance(error, DatabaseError):
        response["error"]["details"] = error.details
    return jsonify(response), error.status_code


def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({
        "error": {
            "type": "InternalServerError",
            "message": "An internal error occurred"
        }
    }), 500


def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


def create_app(store: DocumentStore | None = None) -> Flask:
    """Create and configure the Flask app.

    Args:
        store: Document store to serve from. Defaults to a DocumentStore
            at settings.database_path, initialized on startup.
    """
    configure_logging()

    app = Flask(__name__)
    CORS(app, origins=settings.cors_origins, supports_credentials=True)

    if store is None:
        store = DocumentStore(settings.database_path)
        try:
            store.init_db()
        except RealtyError as e:
            logger.error(f"Database initialization failed: {e.message}")
            raise

    db.init_app(app, store)

    app.register_error_handler(RealtyError, handle_realty_error)
    app.register_error_handler(500, handle_internal_error)

    app.add_url_rule("/health", "health", health)

    from .api import auth_bp, transactions_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(
        transactions_bp,
        url_prefix=f"{settings.api_prefix}/transaction"
    )

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
