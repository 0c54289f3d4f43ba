"""Translation Prompts — prompt builders and output cleanup for the translation proxy.

Invariants:
    - All functions are PURE: no IO, no async
    - Every translation prompt carries the preservation rules (phones, emails,
      prices, Block/Flat addresses, timestamps, usernames stay untouched)
    - clean_translation strips at most one leading and one trailing quote

Design Decisions:
    - Context presets as a dict keyed by TranslationContext: "general" adds no preamble
    - Language names (not codes) in the prompt: the model handles "Tamil" better than "ta"
"""

import re

from cookmate.core.domain_types import SUPPORTED_LANGUAGES, TranslationContext

_CONTEXT_PREAMBLES: dict[TranslationContext, str] = {
    TranslationContext.SERVICE: "This is about cooking/maid services. ",
    TranslationContext.REQUIREMENT: "This is about household service requirements. ",
    TranslationContext.PROFILE: "This is profile information for a service provider. ",
    TranslationContext.GENERAL: "",
}

_TRANSLATION_RULES = """IMPORTANT RULES:
1. Translate descriptive content, cooking terms, and service descriptions
2. DO NOT translate: phone numbers, email addresses, prices (₹), specific addresses (Block/Flat numbers), timestamps, usernames
3. Keep English words that are commonly understood: "Block", "Flat", numbers, "₹", "By:", phone numbers, time formats
4. Focus on translating the actual service/requirement description and user-facing labels like "Priority", "Preferred Time", "Budget", "Location"
5. Preserve formatting, emojis, and structure exactly
6. Translate priority labels such as "LOW Priority" but keep "Block J Flat 103" as is
7. Keep cooking terms, food names, and service-related terminology accurate for Indian context

Only return the translated text, nothing else."""

_SURROUNDING_QUOTES = re.compile(r"^[\"']|[\"']$")


def build_translation_prompt(
    text: str,
    from_language: str,
    to_language: str,
    context: TranslationContext = TranslationContext.GENERAL,
) -> str:
    """Build the instruction sent to the language model for one string."""
    preamble = _CONTEXT_PREAMBLES.get(context, "")
    from_name = SUPPORTED_LANGUAGES[from_language]
    to_name = SUPPORTED_LANGUAGES[to_language]
    return (
        f"{preamble}Translate the following text from {from_name} to {to_name}.\n\n"
        f"{_TRANSLATION_RULES}\n\n"
        f'Text to translate: "{text}"'
    )


def build_detection_prompt(text: str) -> str:
    """Ask the model for exactly one code from the supported list."""
    choices = ", ".join(
        f"{code} ({name})" for code, name in SUPPORTED_LANGUAGES.items()
    )
    return (
        "Detect the language of this text. Respond with only the language "
        f"code from this list:\n{choices}\n\n"
        f'Text: "{text}"\n\n'
        'Response format: Just the language code (e.g., "hi")'
    )


def clean_translation(raw: str) -> str:
    """Trim model output and drop the quotes models like to wrap answers in."""
    return _SURROUNDING_QUOTES.sub("", raw.strip())


def normalize_language_code(raw: str) -> str:
    return raw.strip().lower()
