from .home_routes import home_bp
from .feedback_routes import feedback_bp
from feedback_hub.controllers.home_controller import (
    not_found_handler,
    method_not_allowed_handler,
    internal_error_handler,
)

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(feedback_bp)

    app.register_error_handler(404, not_found_handler)
    app.register_error_handler(405, method_not_allowed_handler)
    app.register_error_handler(500, internal_error_handler)
