"""Claude API wrapper using tool use for structured vault entries."""
import logging

import anthropic
from pydantic import ValidationError

from config import settings
from languages import Language, get_language, target_for
from schemas.entry import DictionaryEntry

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a Lead Linguist for Northern Namibian languages.
Your primary mission is to distinguish between Oshikwanyama and Oshidonga.
Rule 1: If the user provides an Oshidonga word but expects Oshikwanyama, flag it.
Example: "ongulohi" is Oshidonga; the Oshikwanyama equivalent is "onguloshi" (Evening).
Rule 2: Provide a full linguistic analysis for the Knowledge Vault."""

ENTRY_TOOL = {
    "name": "submit_vault_entry",
    "description": "Submit the analysed word as a Knowledge Vault entry.",
    "input_schema": {
        "type": "object",
        "properties": {
            "oshikwanyama_word": {
                "type": "string",
                "description": "The canonical Oshikwanyama form of the word.",
            },
            "english_word": {
                "type": "string",
                "description": "The English word.",
            },
            "category": {
                "type": "string",
                "description": "Omaludi oitja: noun class / plural form of the Oshikwanyama word.",
            },
            "word_type": {
                "type": "string",
                "description": "Part of speech: noun, verb, adjective, adverb, pronoun, phrase, other.",
            },
            "usage_example_oshikwanyama": {
                "type": "string",
                "description": "A short sentence using the word in Oshikwanyama.",
            },
            "usage_example_english": {
                "type": "string",
                "description": "The English translation of the example sentence.",
            },
            "detected_dialect": {
                "type": "string",
                "description": "Specify 'oshikwanyama' or 'oshidonga' or 'english'.",
            },
            "dialect_correction_note": {
                "type": "string",
                "description": "Explain if it was Oshidonga and what the correction was.",
            },
        },
        "required": [
            "oshikwanyama_word",
            "english_word",
            "category",
            "word_type",
            "usage_example_oshikwanyama",
            "usage_example_english",
        ],
    },
}


def _get_client() -> anthropic.AsyncAnthropic:
    if not settings.ANTHROPIC_API_KEY:
        raise RuntimeError("ANTHROPIC_API_KEY is not configured")
    return anthropic.AsyncAnthropic(api_key=settings.ANTHROPIC_API_KEY)


def _user_message(text: str, source_lang: Language) -> str:
    source = get_language(source_lang)["name"]
    target = get_language(target_for(source_lang))["name"]
    return (
        f'Input: "{text}" | Source: {source} | Target: {target}.\n'
        "Is this word actually from a different dialect (e.g. Oshidonga)? "
        "Analyze and return the correct Oshikwanyama form. "
        "Use the submit_vault_entry tool to return your result."
    )


def _to_entry(payload: dict) -> DictionaryEntry | None:
    if not payload.get("english_word") or not payload.get("oshikwanyama_word"):
        logger.warning("Synthesized entry is missing a word field: %s", payload)
        return None
    try:
        return DictionaryEntry.model_validate(payload)
    except ValidationError as e:
        logger.warning("Synthesized entry failed validation: %s", e)
        return None


async def synthesize(text: str, source_lang: Language, retries: int = 1) -> DictionaryEntry | None:
    """Ask Claude for a vault entry for one word.

    Returns None on any failure: missing key, API error, no tool block or an
    incomplete record.
    """
    for attempt in range(1 + retries):
        try:
            client = _get_client()
            response = await client.messages.create(
                model=settings.ANTHROPIC_MODEL,
                max_tokens=1024,
                system=SYSTEM_PROMPT,
                tools=[ENTRY_TOOL],
                tool_choice={"type": "tool", "name": "submit_vault_entry"},
                messages=[{"role": "user", "content": _user_message(text, source_lang)}],
            )

            for block in response.content:
                if block.type == "tool_use" and block.name == "submit_vault_entry":
                    return _to_entry(block.input)

            logger.warning("No tool use block in synthesis response (attempt %d)", attempt)

        except Exception as e:
            logger.error("Claude synthesis API error (attempt %d): %s", attempt, e)
            if attempt < retries:
                continue
            return None

    return None
