"""
Feedback Controller Module

Parses feedback HTTP requests and hands them to FeedbackService.
"""

from feedback_hub.extensions import db
from feedback_hub.services.feedback_service import FeedbackService
from feedback_hub.services.feedback_store import FeedbackStore
from feedback_hub.utils.http import arg_str, json_body, respond


def get_feedback_service() -> FeedbackService:
    return FeedbackService(FeedbackStore(db.session))


def list_feedback_handler():
    """
    List feedback with filtering and pagination.

    Query Parameters:
        - category: exact category to match
        - reviewed: "true" to return only reviewed feedback
        - page: Page number (default: 1)
        - limit: Items per page (default: 10)
        - sort: Sort spec, e.g. "-submissionTime" (default)
    """
    result = get_feedback_service().list_feedback(
        category=arg_str("category"),
        reviewed=arg_str("reviewed"),
        page=arg_str("page"),
        limit=arg_str("limit"),
        sort=arg_str("sort"),
    )
    return respond(result)


def create_feedback_handler():
    """
    Submit new feedback.

    Body Parameters:
        - feedback (required): 10 to 1000 characters after trimming
        - category (required): one of the feedback categories
    """
    data = json_body()
    result = get_feedback_service().create_feedback(data.get("feedback"), data.get("category"))
    return respond(result)


def get_feedback_handler(feedback_id: str):
    return respond(get_feedback_service().get_feedback(feedback_id))


def mark_reviewed_handler(feedback_id: str):
    return respond(get_feedback_service().mark_reviewed(feedback_id))


def delete_feedback_handler(feedback_id: str):
    return respond(get_feedback_service().delete_feedback(feedback_id))
