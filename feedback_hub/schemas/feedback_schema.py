from datetime import datetime
from marshmallow import EXCLUDE, Schema, ValidationError, fields, pre_load, validate
from feedback_hub.utils.enums import FeedbackCategory

FEEDBACK_MIN_LENGTH = 10
FEEDBACK_MAX_LENGTH = 1000

CATEGORY_ERROR = "Category must be one of: " + ", ".join(FeedbackCategory.values())


class FeedbackSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    feedback = fields.Str(
        required=True,
        validate=[
            validate.Length(min=FEEDBACK_MIN_LENGTH, error="Feedback must be at least 10 characters long"),
            validate.Length(max=FEEDBACK_MAX_LENGTH, error="Feedback cannot exceed 1000 characters"),
        ],
        error_messages={
            "required": "Feedback text is required",
            "null": "Feedback text is required",
            "invalid": "Feedback must be a string",
        },
    )
    category = fields.Str(
        required=True,
        validate=validate.OneOf(FeedbackCategory.values(), error=CATEGORY_ERROR),
        error_messages={
            "required": "Category is required",
            "null": "Category is required",
            "invalid": CATEGORY_ERROR,
        },
    )
    isReviewed = fields.Bool(load_default=False)

    @pre_load
    def strip_text(self, data, **kwargs):
        # Blank strings count as missing, like an absent field
        data = dict(data)
        for name in ("feedback", "category"):
            value = data.get(name)
            if isinstance(value, str):
                value = value.strip() if name == "feedback" else value
                if value == "":
                    data.pop(name)
                else:
                    data[name] = value
        return data


_schema = FeedbackSchema()


def flatten_errors(messages):
    """Flatten marshmallow's {field: [messages]} into one list of messages."""
    if isinstance(messages, str):
        return [messages]
    if isinstance(messages, dict):
        result = []
        for value in messages.values():
            result.extend(flatten_errors(value))
        return result
    result = []
    for value in messages:
        result.extend(flatten_errors(value))
    return result


def apply_defaults(candidate):
    """Return a copy of candidate with isReviewed and submissionTime filled in."""
    data = dict(candidate)
    if data.get("isReviewed") is None:
        data["isReviewed"] = False
    if data.get("submissionTime") is None:
        data["submissionTime"] = datetime.utcnow()
    return data


def validate_feedback(candidate):
    """
    Check a feedback candidate against every record rule.

    Returns (data, errors). On success data holds the normalized candidate
    (trimmed feedback, other keys passed through) and errors is empty. On
    failure data is None and errors lists one message per violated rule.
    """
    try:
        loaded = _schema.load(candidate)
    except ValidationError as err:
        return None, flatten_errors(err.messages)
    data = dict(candidate)
    data.update(loaded)
    return data, []
