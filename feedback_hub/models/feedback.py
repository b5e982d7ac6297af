from feedback_hub.extensions import db
from datetime import datetime
import uuid


def generate_id() -> str:
    return str(uuid.uuid4())


class Feedback(db.Model):
    __tablename__ = "feedbacks"

    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    feedback = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(32), nullable=False, index=True)
    is_reviewed = db.Column(db.Boolean, nullable=False, default=False, index=True)
    submission_time = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    # API field name -> model attribute
    FIELDS = {
        "id": "id",
        "feedback": "feedback",
        "category": "category",
        "isReviewed": "is_reviewed",
        "submissionTime": "submission_time",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    }

    @classmethod
    def column_for(cls, field):
        """Return the mapped column for an API field name, or None if unknown."""
        attr = cls.FIELDS.get(field)
        return getattr(cls, attr) if attr else None

    def to_candidate(self):
        """Writable state in API field names, as fed to validation."""
        return {
            "feedback": self.feedback,
            "category": self.category,
            "isReviewed": self.is_reviewed,
            "submissionTime": self.submission_time,
        }

    def to_dict(self):
        """Convert feedback to dictionary for JSON response."""
        return {
            "id": self.id,
            "feedback": self.feedback,
            "category": self.category,
            "isReviewed": bool(self.is_reviewed),
            "submissionTime": self.submission_time.isoformat() if self.submission_time else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Feedback {self.id}: {self.category}>"
