"""
Feedback Routes Module

Defines URL mappings for feedback endpoints:
- Submission (public)
- Listing and moderation
"""

from flask import Blueprint
from feedback_hub.controllers.feedback_controller import (
    list_feedback_handler,
    create_feedback_handler,
    get_feedback_handler,
    mark_reviewed_handler,
    delete_feedback_handler
)

feedback_bp = Blueprint("feedback", __name__)


@feedback_bp.get("/feedback")
def list_feedback():
    """List feedback with filters and pagination"""
    return list_feedback_handler()


@feedback_bp.post("/feedback")
def create_feedback():
    """Submit new feedback"""
    return create_feedback_handler()


@feedback_bp.get("/feedback/<feedback_id>")
def get_feedback(feedback_id):
    """Get feedback by ID"""
    return get_feedback_handler(feedback_id)


@feedback_bp.patch("/feedback/<feedback_id>/reviewed")
def mark_reviewed(feedback_id):
    """Mark feedback as reviewed"""
    return mark_reviewed_handler(feedback_id)


@feedback_bp.delete("/feedback/<feedback_id>")
def delete_feedback(feedback_id):
    """Delete feedback permanently"""
    return delete_feedback_handler(feedback_id)
