"""Wire schemas for assistant API responses and requests."""

from assistant_models.schemas.base import FieldError, WireFormatError, WireModel
from assistant_models.schemas.citations import (
    ContentSpan,
    MostRelevantMissedAlternative,
    Reference,
    SupplementaryWebLink,
)
from assistant_models.schemas.code import CodeQuery, ProgrammingLanguage
from assistant_models.schemas.customization import Customization
from assistant_models.schemas.enums import UserIntent
from assistant_models.schemas.prompts import FollowupPrompt

__all__ = [
    "CodeQuery",
    "ContentSpan",
    "Customization",
    "FieldError",
    "FollowupPrompt",
    "MostRelevantMissedAlternative",
    "ProgrammingLanguage",
    "Reference",
    "SupplementaryWebLink",
    "UserIntent",
    "WireFormatError",
    "WireModel",
]
