"""
Feedback Store Module

Persistence for feedback records on top of a SQLAlchemy session:
- find / count with field filters, sorting and offset pagination
- insert and update, both validated against the record rules
- lookup and hard delete by identifier

Failures reach callers as StoreError tagged with a StoreErrorKind, so
nothing above this layer has to inspect SQLAlchemy exceptions.
"""

import logging
import uuid
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError

from feedback_hub.models.feedback import Feedback
from feedback_hub.schemas.feedback_schema import apply_defaults, validate_feedback

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ("feedback", "category", "isReviewed")


class StoreErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    MALFORMED_IDENTIFIER = "MALFORMED_IDENTIFIER"
    NOT_FOUND = "NOT_FOUND"
    OTHER = "OTHER"


class StoreError(Exception):
    def __init__(self, kind: StoreErrorKind, message: str, errors: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.errors = list(errors or [])


def normalize_id(value: Any) -> str:
    """Return the canonical form of a feedback id or raise MALFORMED_IDENTIFIER."""
    try:
        return str(uuid.UUID(str(value).strip()))
    except (TypeError, ValueError):
        raise StoreError(StoreErrorKind.MALFORMED_IDENTIFIER, f"Malformed feedback id: {value!r}")


class FeedbackStore:
    def __init__(self, session):
        self.session = session

    @contextmanager
    def _guard(self, action: str):
        try:
            yield
        except (SQLAlchemyError, OverflowError) as exc:
            self.session.rollback()
            logger.exception("Database error while %s", action)
            raise StoreError(StoreErrorKind.OTHER, f"Database error while {action}") from exc

    def _filtered(self, filters: Optional[Dict[str, Any]]):
        query = self.session.query(Feedback)
        for field, value in (filters or {}).items():
            column = Feedback.column_for(field)
            if column is None:
                raise StoreError(StoreErrorKind.OTHER, f"Unknown filter field: {field}")
            query = query.filter(column == value)
        return query

    def find(
        self,
        filters: Optional[Dict[str, Any]] = None,
        sort: Optional[List[Tuple[str, bool]]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Feedback]:
        """
        Fetch records matching every filter.

        Args:
            filters: API field name -> required value
            sort: (API field name, descending) pairs, applied in order
            skip: records to skip before the page starts
            limit: page size, None for no limit
        """
        query = self._filtered(filters)
        for field, descending in sort or []:
            column = Feedback.column_for(field)
            if column is None:
                continue
            query = query.order_by(column.desc() if descending else column.asc())
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        with self._guard("fetching feedback"):
            return query.all()

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        query = self._filtered(filters)
        with self._guard("counting feedback"):
            return query.count()

    def insert(self, candidate: Dict[str, Any]) -> Feedback:
        data, errors = validate_feedback(apply_defaults(candidate))
        if errors:
            raise StoreError(StoreErrorKind.VALIDATION, "Validation error", errors)

        record = Feedback(
            feedback=data["feedback"],
            category=data["category"],
            is_reviewed=data["isReviewed"],
            submission_time=data["submissionTime"],
        )
        with self._guard("inserting feedback"):
            self.session.add(record)
            self.session.commit()
        logger.info("Feedback %s created in category %s", record.id, record.category)
        return record

    def find_by_id(self, feedback_id: Any) -> Optional[Feedback]:
        key = normalize_id(feedback_id)
        with self._guard("fetching feedback"):
            return self.session.get(Feedback, key)

    def update_by_id(self, feedback_id: Any, patch: Dict[str, Any]) -> Optional[Feedback]:
        """
        Apply patch to a record after validating the resulting state.

        Returns the updated record, or None if no record has this id.
        """
        immutable = [field for field in patch if field not in MUTABLE_FIELDS]
        if immutable:
            raise StoreError(
                StoreErrorKind.VALIDATION,
                "Validation error",
                [f"Field cannot be updated: {field}" for field in immutable],
            )

        key = normalize_id(feedback_id)
        record = self.find_by_id(key)
        if record is None:
            return None

        candidate = record.to_candidate()
        candidate.update(patch)
        data, errors = validate_feedback(candidate)
        if errors:
            raise StoreError(StoreErrorKind.VALIDATION, "Validation error", errors)

        values = {Feedback.FIELDS[field]: data[field] for field in patch}
        with self._guard("updating feedback"):
            # Zero rows means the record was deleted after it was read
            matched = self.session.query(Feedback).filter(Feedback.id == key).update(values)
            self.session.commit()
        if not matched:
            logger.info("Feedback %s vanished before update", key)
            return None
        logger.info("Feedback %s updated: %s", key, ", ".join(sorted(patch)))
        with self._guard("fetching feedback"):
            return self.session.get(Feedback, key)

    def delete_by_id(self, feedback_id: Any) -> Optional[Feedback]:
        key = normalize_id(feedback_id)
        record = self.find_by_id(key)
        if record is None:
            return None
        with self._guard("deleting feedback"):
            deleted = self.session.query(Feedback).filter(Feedback.id == key).delete()
            self.session.commit()
        if not deleted:
            logger.info("Feedback %s already deleted", key)
            return None
        logger.info("Feedback %s deleted", key)
        return record
