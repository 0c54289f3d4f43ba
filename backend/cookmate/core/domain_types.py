"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - All valid states encoded as Enums — no raw string matching
    - Enum values equal the strings persisted in the DB CHECK constraints
    - SUPPORTED_LANGUAGES is the single source of truth for language codes

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - Identity is frozen: it is derived once per request from the bearer token
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

SubjectId = NewType("SubjectId", UUID)  # identity-provider subject (users.auth_id)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, as resolved from a verified bearer token."""
    subject_id: SubjectId
    email: str | None = None


# ─── Enums ───────────────────────────────────────────────────────

class Role(str, Enum):
    RESIDENT = "RESIDENT"
    WORKER = "WORKER"


class WorkerType(str, Enum):
    COOK = "COOK"
    MAID = "MAID"
    BOTH = "BOTH"


class Cuisine(str, Enum):
    NORTH = "NORTH"
    SOUTH = "SOUTH"
    BOTH = "BOTH"


class NeedType(str, Enum):
    COOK = "COOK"
    MAID = "MAID"
    BOTH = "BOTH"


class Urgency(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class TranslationContext(str, Enum):
    """Prompt presets for the translation proxy."""
    SERVICE = "service"
    REQUIREMENT = "requirement"
    PROFILE = "profile"
    GENERAL = "general"


# ─── Languages ───────────────────────────────────────────────────

SUPPORTED_LANGUAGES: dict[str, str] = {
    "en": "English",
    "hi": "Hindi",
    "ta": "Tamil",
    "te": "Telugu",
    "kn": "Kannada",
    "ml": "Malayalam",
    "bn": "Bengali",
    "mr": "Marathi",
    "gu": "Gujarati",
    "pa": "Punjabi",
}

DEFAULT_LANGUAGE = "en"


def is_supported_language(code: str) -> bool:
    return code in SUPPORTED_LANGUAGES
