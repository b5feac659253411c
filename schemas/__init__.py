from schemas.options import (
    DEFAULT_FROM,
    DEFAULT_RESPONSE_TO,
    DEFAULT_TO,
    LetterCase,
    LetterCaseOptions,
)
from schemas.profile import ProfileUpdate

__all__ = [
    "DEFAULT_FROM",
    "DEFAULT_RESPONSE_TO",
    "DEFAULT_TO",
    "LetterCase",
    "LetterCaseOptions",
    "ProfileUpdate",
]
