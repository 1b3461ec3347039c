"""
API gateway: combines the auth and pages blueprints.
This is the entrypoint for both development and deployment.
"""

import logging
import sys
from typing import Optional

import psycopg2
from flask import Flask, jsonify
from flask_cors import CORS

from backend.auth_service.repository import UserRepository
from backend.auth_service.routes import auth_bp
from backend.database.db_connection import create_pool
from backend.gateway.config import Settings
from backend.pages_service.routes import pages_bp


def configure_logging(level: str = "INFO") -> None:
    """Basic console logging during API requests."""
    logging.basicConfig(level=level, format="[%(levelname)s] %(asctime)s - %(message)s")


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[UserRepository] = None,
) -> Flask:
    """
    Application factory for creating the Flask app.

    Args:
        settings (Settings, optional): Configuration. Read from the
            environment when omitted.
        repository (UserRepository, optional): User store. When omitted, a
            connection pool is opened from `settings` and wrapped in one.

    Returns:
        Flask: The configured Flask application.
    """
    settings = settings or Settings.from_env()

    # Every file in the public folder is reachable at the site root
    app = Flask(
        __name__,
        static_folder=str(settings.public_dir),
        static_url_path="",
    )

    CORS(app, resources={r"/*": {"origins": settings.cors_origins}})

    if repository is None:
        pool = create_pool(settings.database_dsn, settings.db_pool_min, settings.db_pool_max)
        repository = UserRepository(pool)
    app.extensions["user_repository"] = repository

    # --- REGISTER BLUEPRINTS ---
    app.register_blueprint(auth_bp)
    app.register_blueprint(pages_bp)

    # --- BASIC HEALTH CHECKPOINT ---
    @app.route("/health")
    def health():
        """
        Health check endpoint.
        """
        return jsonify({"status": "ok"}), 200

    return app


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    try:
        app = create_app(settings)
    except psycopg2.Error:
        logging.error("Failed to start server: database unavailable")
        sys.exit(1)

    logging.info(f"Server running on port {settings.port}")
    logging.info(f"Open: http://localhost:{settings.port}")
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == "__main__":
    main()
