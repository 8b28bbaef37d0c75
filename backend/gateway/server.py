"""
API gateway: mounts the events blueprint under /api/events.
This is the local entrypoint for development.
"""

import logging
import os
from typing import Optional, Tuple

from dotenv import load_dotenv
from flask import Flask, Response, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from backend.events_service.registry import EventRegistry
from backend.events_service.routes import LEDGER_KEY, REGISTRY_KEY, events_bp
from backend.ledger_service.client import LedgerClient, get_ledger_client

load_dotenv()

LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(message)s"


def configure_logging() -> None:
    """
    Basic console logging during API requests.
    """
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_cors_origins() -> list:
    raw = os.getenv("CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def create_app(
    registry: Optional[EventRegistry] = None,
    ledger: Optional[LedgerClient] = None,
) -> Flask:
    """
    Application factory for creating the Flask app.

    Args:
        registry (EventRegistry, optional): Store to serve. A fresh, empty one
            is created if omitted.
        ledger (LedgerClient, optional): Ledger hooks. Picked from the
            environment if omitted.

    Returns:
        Flask: The configured Flask application.
    """
    app = Flask(__name__)
    CORS(app, resources={
        r"/*": {
            "origins": get_cors_origins(),
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type"],
        }
    })

    app.extensions[REGISTRY_KEY] = registry if registry is not None else EventRegistry()
    app.extensions[LEDGER_KEY] = ledger if ledger is not None else get_ledger_client()
    logging.info(f"Ledger client: {app.extensions[LEDGER_KEY].name}")

    # --- REGISTER BLUEPRINTS ---
    app.register_blueprint(events_bp, url_prefix="/api/events")

    # --- BASIC HEALTH CHECKPOINTS ---
    @app.route("/")
    def ping() -> Tuple[Response, int]:
        """
        Root URL for simple 'online' check.
        """
        return jsonify({"status": "gateway_ok"}), 200

    @app.route("/health")
    def health() -> Tuple[Response, int]:
        """
        Health check endpoint. Reports how many events are held in memory.
        """
        count = app.extensions[REGISTRY_KEY].count()
        return jsonify({"status": "ok", "events": count}), 200

    # --- ERROR HANDLERS ---
    @app.errorhandler(HTTPException)
    def http_error(error: HTTPException) -> Tuple[Response, int]:
        return jsonify({"error": error.name}), error.code

    @app.errorhandler(Exception)
    def internal_error(error: Exception) -> Tuple[Response, int]:
        logging.exception(f"Unhandled error: {error}")
        return jsonify({"error": "Internal Server Error"}), 500

    return app


def main() -> None:
    configure_logging()
    app = create_app()
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 3000))
    debug = os.getenv("FLASK_DEBUG", "0") == "1"
    logging.info(f"Backend server listening at http://localhost:{port}")
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
