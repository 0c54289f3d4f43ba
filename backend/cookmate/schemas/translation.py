"""Translation Schemas — bodies for /translate, /translate-batch, /detect-language.

Invariants:
    - text / every batch entry is non-empty
    - Language codes are plain strings here; support is checked by the route so an
      unknown code yields UNSUPPORTED_LANGUAGE rather than a generic validation error
"""

from typing import Annotated

from pydantic import Field

from cookmate.core.domain_types import TranslationContext
from cookmate.schemas import CamelModel


class TranslateRequest(CamelModel):
    text: str = Field(min_length=1)
    from_language: str
    to_language: str
    context: TranslationContext | None = None


class TranslateBatchRequest(CamelModel):
    texts: list[Annotated[str, Field(min_length=1)]]
    from_language: str
    to_language: str
    context: TranslationContext | None = None


class DetectLanguageRequest(CamelModel):
    text: str = Field(min_length=1)
