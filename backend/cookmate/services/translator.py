"""Translator — best-effort translation and language detection through the language model.

Invariants:
    - Same source and target language returns the text unchanged, no API call
    - Any language-service failure returns the original text (translate) or "en" (detect)
    - translate_batch preserves input order; at most BATCH_SIZE calls in flight
    - detect_language only ever returns a code from SUPPORTED_LANGUAGES

Design Decisions:
    - Stateless: no cache, every call goes to the model (multi-worker safe)
    - Chunked asyncio.gather: chunk boundaries cap concurrent upstream calls and
      gather() keeps results in input order
    - An empty model answer counts as a failure and falls back to the original text
    - Errors logged at WARNING: a degraded translation is not an application error
"""

import asyncio
import logging

from cookmate.core.domain_types import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    TranslationContext,
)
from cookmate.core.translation_prompts import (
    build_detection_prompt,
    build_translation_prompt,
    clean_translation,
    normalize_language_code,
)
from cookmate.infrastructure.anthropic_client import extract_text

logger = logging.getLogger(__name__)

BATCH_SIZE = 5


class Translator:
    """Translation proxy over a ResilientAnthropicClient-compatible client."""

    def __init__(self, client, model: str, max_tokens: int = 1024):
        self._client = client
        self._model = model
        self._max_tokens = max_tokens

    async def _complete(self, prompt: str) -> str:
        response = await self._client.create_message(
            model=self._model,
            max_tokens=self._max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        return extract_text(response)

    async def translate(
        self,
        text: str,
        from_language: str,
        to_language: str,
        context: TranslationContext = TranslationContext.GENERAL,
    ) -> str:
        if from_language == to_language:
            return text
        try:
            prompt = build_translation_prompt(
                text, from_language, to_language, context,
            )
            translated = clean_translation(await self._complete(prompt))
        except Exception as e:
            logger.warning(
                "Translation failed (%s -> %s): %s", from_language, to_language, e,
            )
            return text
        return translated or text

    async def translate_batch(
        self,
        texts: list[str],
        from_language: str,
        to_language: str,
        context: TranslationContext = TranslationContext.GENERAL,
    ) -> list[str]:
        results: list[str] = []
        try:
            for start in range(0, len(texts), BATCH_SIZE):
                chunk = texts[start:start + BATCH_SIZE]
                results.extend(await asyncio.gather(*(
                    self.translate(text, from_language, to_language, context)
                    for text in chunk
                )))
        except Exception as e:
            logger.warning("Batch translation failed: %s", e)
            return list(texts)
        return results

    async def detect_language(self, text: str) -> str:
        try:
            code = normalize_language_code(
                await self._complete(build_detection_prompt(text)),
            )
        except Exception as e:
            logger.warning("Language detection failed: %s", e)
            return DEFAULT_LANGUAGE
        return code if code in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
