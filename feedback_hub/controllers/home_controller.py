import logging
from sqlalchemy.exc import SQLAlchemyError
from feedback_hub.extensions import db
from feedback_hub.utils.http import ok, error

logger = logging.getLogger(__name__)

def home_index():
    return ok({"message": "Feedback service is running"})

def health_check():
    try:
        # Ping the database
        db.session.execute(db.text('SELECT 1'))
    except SQLAlchemyError:
        logger.exception("Health check failed")
        return error("Database unavailable", 503, status="degraded", database="unhealthy")

    return ok({"status": "online", "database": "healthy"})

def not_found_handler(e):
    return error("Resource not found", 404)

def method_not_allowed_handler(e):
    return error("Method not allowed", 405)

def internal_error_handler(e):
    logger.error("Unhandled server error: %s", e)
    return error("Internal server error", 500)
