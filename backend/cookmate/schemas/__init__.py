"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate at system boundary before any persistence call
    - Request bodies use camelCase keys on the wire; snake_case in Python
    - Domain enums from core/ used for enum fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - CamelModel base: one alias generator instead of per-field aliases
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request bodies: accepts camelCase (wire) or snake_case keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
