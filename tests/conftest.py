from datetime import datetime, timedelta

import pytest

from feedback_hub import create_app
from feedback_hub.extensions import db
from feedback_hub.models.feedback import Feedback, generate_id
from feedback_hub.schemas.feedback_schema import apply_defaults, validate_feedback
from feedback_hub.services.feedback_store import (
    MUTABLE_FIELDS,
    FeedbackStore,
    StoreError,
    StoreErrorKind,
    normalize_id,
)


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_ENGINE_OPTIONS": {},
        "SECRET_KEY": "test-secret",
    })
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def runner(app):
    return app.test_cli_runner()


@pytest.fixture()
def seed(app):
    """Insert records straight through the store; returns their ids in insertion order."""
    def _seed(count, category="Growth", reviewed=False, start=None):
        start = start or datetime(2024, 1, 1, 9, 0, 0)
        ids = []
        with app.app_context():
            store = FeedbackStore(db.session)
            for i in range(count):
                record = store.insert({
                    "feedback": f"Feedback item number {i:02d}",
                    "category": category,
                    "isReviewed": reviewed,
                    "submissionTime": start + timedelta(minutes=i),
                })
                ids.append(record.id)
        return ids
    return _seed


class InMemoryFeedbackStore:
    """Store double keeping Feedback objects in a dict, with the same contract as FeedbackStore."""

    def __init__(self):
        self.records = {}
        self.calls = []

    def _matches(self, record, filters):
        return all(getattr(record, Feedback.FIELDS[f]) == v for f, v in (filters or {}).items())

    def find(self, filters=None, sort=None, skip=0, limit=None):
        self.calls.append("find")
        rows = [r for r in self.records.values() if self._matches(r, filters)]
        for field, descending in reversed(sort or []):
            rows.sort(key=lambda r: getattr(r, Feedback.FIELDS[field]), reverse=descending)
        end = skip + limit if limit is not None else None
        return rows[skip:end]

    def count(self, filters=None):
        self.calls.append("count")
        return len([r for r in self.records.values() if self._matches(r, filters)])

    def insert(self, candidate):
        self.calls.append("insert")
        data, errors = validate_feedback(apply_defaults(candidate))
        if errors:
            raise StoreError(StoreErrorKind.VALIDATION, "Validation error", errors)
        now = datetime.utcnow()
        record = Feedback(
            id=generate_id(),
            feedback=data["feedback"],
            category=data["category"],
            is_reviewed=data["isReviewed"],
            submission_time=data["submissionTime"],
            created_at=now,
            updated_at=now,
        )
        self.records[record.id] = record
        return record

    def find_by_id(self, feedback_id):
        self.calls.append("find_by_id")
        return self.records.get(normalize_id(feedback_id))

    def update_by_id(self, feedback_id, patch):
        self.calls.append("update_by_id")
        if any(field not in MUTABLE_FIELDS for field in patch):
            raise StoreError(StoreErrorKind.VALIDATION, "Validation error", ["Field cannot be updated"])
        record = self.records.get(normalize_id(feedback_id))
        if record is None:
            return None
        candidate = record.to_candidate()
        candidate.update(patch)
        data, errors = validate_feedback(candidate)
        if errors:
            raise StoreError(StoreErrorKind.VALIDATION, "Validation error", errors)
        for field in patch:
            setattr(record, Feedback.FIELDS[field], data[field])
        record.updated_at = datetime.utcnow()
        return record

    def delete_by_id(self, feedback_id):
        self.calls.append("delete_by_id")
        return self.records.pop(normalize_id(feedback_id), None)


class BrokenStore:
    """Every operation fails the way a lost database connection does."""

    def __init__(self, exc=None):
        self.exc = exc or StoreError(StoreErrorKind.OTHER, "connection refused by db.internal:5432")

    def _fail(self, *args, **kwargs):
        raise self.exc

    find = count = insert = find_by_id = update_by_id = delete_by_id = _fail


@pytest.fixture()
def memory_store():
    return InMemoryFeedbackStore()
