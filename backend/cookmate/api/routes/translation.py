"""Translation Routes — public translation, batch translation and language detection.

Invariants:
    - Language codes outside SUPPORTED_LANGUAGES are rejected with 400 before any model call
    - Translation never fails the request: the translator degrades to original text / "en"
"""

from fastapi import APIRouter, Depends

from cookmate.api.dependencies import get_translator
from cookmate.core.domain_types import (
    SUPPORTED_LANGUAGES,
    TranslationContext,
    is_supported_language,
)
from cookmate.core.errors import UnsupportedLanguageError
from cookmate.schemas.translation import (
    DetectLanguageRequest,
    TranslateBatchRequest,
    TranslateRequest,
)
from cookmate.services.translator import Translator

router = APIRouter(tags=["translation"])


def _require_supported(*codes: str) -> None:
    unsupported = [c for c in codes if not is_supported_language(c)]
    if unsupported:
        raise UnsupportedLanguageError(unsupported)


@router.get("/languages")
async def list_languages():
    return {"languages": SUPPORTED_LANGUAGES}


@router.post("/translate")
async def translate(
    body: TranslateRequest, translator: Translator = Depends(get_translator),
):
    _require_supported(body.from_language, body.to_language)
    translated = await translator.translate(
        body.text, body.from_language, body.to_language,
        body.context or TranslationContext.GENERAL,
    )
    return {
        "originalText": body.text,
        "translatedText": translated,
        "fromLanguage": body.from_language,
        "toLanguage": body.to_language,
        "context": body.context,
    }


@router.post("/translate-batch")
async def translate_batch(
    body: TranslateBatchRequest, translator: Translator = Depends(get_translator),
):
    _require_supported(body.from_language, body.to_language)
    translated = await translator.translate_batch(
        body.texts, body.from_language, body.to_language,
        body.context or TranslationContext.GENERAL,
    )
    return {
        "originalTexts": body.texts,
        "translatedTexts": translated,
        "fromLanguage": body.from_language,
        "toLanguage": body.to_language,
        "context": body.context,
    }


@router.post("/detect-language")
async def detect_language(
    body: DetectLanguageRequest, translator: Translator = Depends(get_translator),
):
    code = await translator.detect_language(body.text)
    return {
        "text": body.text,
        "detectedLanguage": code,
        "languageName": SUPPORTED_LANGUAGES[code],
    }
