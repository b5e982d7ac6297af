from enum import Enum

class FeedbackCategory(str, Enum):
    # Persisted literals; existing records depend on these exact strings
    WORK_ENVIRONMENT = "Work Environment"
    LEADERSHIP = "Leadership"
    GROWTH = "Growth"
    OTHERS = "Others"

    @classmethod
    def values(cls):
        return [member.value for member in cls]
