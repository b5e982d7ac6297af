import logging
from flask import Flask
from feedback_hub.extensions import db, migrate, cors
from feedback_hub.routes import register_routes
from feedback_hub.cli import register_commands
from feedback_hub.models.feedback import Feedback  # noqa: F401  registers the table

def create_app(config_overrides=None):
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    # Initialize database
    db.init_app(app)

    # Initialize Flask-Migrate
    migrate.init_app(app, db)

    # CORS Configuration
    cors.init_app(app,
                  origins=app.config.get("CORS_ORIGINS", []),
                  allow_headers=["Content-Type"],
                  methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"])

    register_routes(app)
    register_commands(app)

    return app
