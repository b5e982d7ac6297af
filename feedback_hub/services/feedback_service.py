"""
Feedback Service Module

Query and command operations over feedback records:
- list with category / review filters, sorting and pagination
- create, get by id, mark reviewed, delete

Every operation returns a ServiceResponse holding an HTTP status and the
response envelope; store failures never escape an operation.
"""

import logging
from collections import namedtuple
from typing import Any, List, Optional, Tuple

from feedback_hub.models.feedback import Feedback
from feedback_hub.services.feedback_store import StoreError, StoreErrorKind
from feedback_hub.utils.pagination import MAX_ROW_OFFSET, clamp_int, page_count, skip_for

logger = logging.getLogger(__name__)

ServiceResponse = namedtuple("ServiceResponse", ["status", "body"])

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_SORT = "-submissionTime"

NOT_FOUND_MESSAGE = "Feedback not found"
INVALID_ID_MESSAGE = "Invalid feedback ID"


def parse_sort(spec: Optional[str]) -> List[Tuple[str, bool]]:
    """
    Parse a sort spec such as "-submissionTime" or "category -createdAt".

    Fields are separated by spaces or commas; a leading "-" sorts that field
    descending. Unknown fields are dropped and an empty result falls back to
    the default order. An ascending id is always the final tie-breaker.
    """
    order = []
    for token in (spec or "").replace(",", " ").split():
        descending = token.startswith("-")
        field = token.lstrip("-+")
        if Feedback.column_for(field) is not None and field not in [f for f, _ in order]:
            order.append((field, descending))
    if not order:
        order.append(("submissionTime", True))
    if "id" not in [f for f, _ in order]:
        order.append(("id", False))
    return order


def _success(status: int, **fields) -> ServiceResponse:
    body = {"success": True}
    body.update(fields)
    return ServiceResponse(status, body)


def _failure(status: int, message: str, errors: Optional[List[str]] = None) -> ServiceResponse:
    body = {"success": False, "message": message}
    if errors is not None:
        body["errors"] = errors
    return ServiceResponse(status, body)


class FeedbackService:
    def __init__(self, store):
        self.store = store

    def _from_store_error(self, exc: StoreError, server_message: str) -> ServiceResponse:
        if exc.kind is StoreErrorKind.VALIDATION:
            return _failure(400, "Validation error", exc.errors)
        if exc.kind is StoreErrorKind.MALFORMED_IDENTIFIER:
            return _failure(400, INVALID_ID_MESSAGE)
        if exc.kind is StoreErrorKind.NOT_FOUND:
            return _failure(404, NOT_FOUND_MESSAGE)
        logger.error("%s: %s", server_message, exc.message)
        return _failure(500, server_message)

    def list_feedback(
        self,
        category: Optional[str] = None,
        reviewed: Optional[str] = None,
        page: Any = DEFAULT_PAGE,
        limit: Any = DEFAULT_LIMIT,
        sort: Optional[str] = DEFAULT_SORT,
    ) -> ServiceResponse:
        """
        List feedback matching the present filters.

        Only the literal string "true" for reviewed filters on review state;
        any other value leaves it unconstrained. page and limit below 1 are
        raised to 1; a page past the last one comes back empty.
        """
        server_message = "Server error while fetching feedback"
        page = clamp_int(page, DEFAULT_PAGE, min_value=1)
        limit = clamp_int(limit, DEFAULT_LIMIT, min_value=1, max_value=MAX_ROW_OFFSET)

        filters = {}
        if category:
            filters["category"] = category
        if reviewed == "true":
            filters["isReviewed"] = True

        try:
            records = self.store.find(filters, parse_sort(sort), skip_for(page, limit), limit)
            total = self.store.count(filters)
        except StoreError as exc:
            return self._from_store_error(exc, server_message)
        except Exception:
            logger.exception("Error fetching feedback")
            return _failure(500, server_message)

        return _success(
            200,
            count=len(records),
            total=total,
            page=page,
            pages=page_count(total, limit),
            data=[record.to_dict() for record in records],
        )

    def create_feedback(self, feedback: Any, category: Any) -> ServiceResponse:
        server_message = "Server error while submitting feedback"
        if not feedback or not category:
            return _failure(400, "Feedback and category are required")

        if isinstance(feedback, str):
            feedback = feedback.strip()

        try:
            record = self.store.insert({"feedback": feedback, "category": category})
        except StoreError as exc:
            return self._from_store_error(exc, server_message)
        except Exception:
            logger.exception("Error submitting feedback")
            return _failure(500, server_message)

        return _success(201, message="Feedback submitted successfully", data=record.to_dict())

    def get_feedback(self, feedback_id: Any) -> ServiceResponse:
        server_message = "Server error while fetching feedback"
        try:
            record = self.store.find_by_id(feedback_id)
        except StoreError as exc:
            return self._from_store_error(exc, server_message)
        except Exception:
            logger.exception("Error fetching feedback %s", feedback_id)
            return _failure(500, server_message)

        if record is None:
            return _failure(404, NOT_FOUND_MESSAGE)
        return _success(200, data=record.to_dict())

    def mark_reviewed(self, feedback_id: Any) -> ServiceResponse:
        """Set isReviewed on a record. Marking a reviewed record again is a no-op success."""
        server_message = "Server error while updating feedback"
        try:
            record = self.store.update_by_id(feedback_id, {"isReviewed": True})
        except StoreError as exc:
            return self._from_store_error(exc, server_message)
        except Exception:
            logger.exception("Error updating feedback %s", feedback_id)
            return _failure(500, server_message)

        if record is None:
            return _failure(404, NOT_FOUND_MESSAGE)
        return _success(200, message="Feedback marked as reviewed", data=record.to_dict())

    def delete_feedback(self, feedback_id: Any) -> ServiceResponse:
        server_message = "Server error while deleting feedback"
        try:
            record = self.store.delete_by_id(feedback_id)
        except StoreError as exc:
            return self._from_store_error(exc, server_message)
        except Exception:
            logger.exception("Error deleting feedback %s", feedback_id)
            return _failure(500, server_message)

        if record is None:
            return _failure(404, NOT_FOUND_MESSAGE)
        return _success(200, message="Deleted successfully")
