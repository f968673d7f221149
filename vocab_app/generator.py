# vocab_app/generator.py
"""
Definition Generator.

Asks the chat model for a meaning, then for an example sentence built on that
meaning. Any failure along the way replaces both fields with fixed
placeholder text, so ``generate`` always returns a complete ``Word``.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol

from .schema import Word

logger = logging.getLogger(__name__)


class Completer(Protocol):
    async def complete(self, prompt: str) -> Optional[str]: ...


def meaning_prompt(word: str) -> str:
    return (
        f"Define the word '{word}' in simple, clear terms. "
        "Provide only the definition without any extra text."
    )


def sentence_prompt(word: str, meaning: str) -> str:
    return (
        f"Create a simple, clear example sentence using the word '{word}' "
        f"which means '{meaning}'. "
        "Return only the sentence without quotes or extra text. "
        "Make it natural and easy to understand."
    )


def fallback_meaning(word: str) -> str:
    return f"Definition for: {word}"


def fallback_sentence(word: str) -> str:
    return f"Example sentence with {word}."


def _clean(text: Optional[str]) -> str:
    return text.strip() if text is not None else ""


class DefinitionGenerator:
    def __init__(self, client: Completer):
        self.client = client

    async def generate(self, word: str) -> Word:
        try:
            meaning = _clean(await self.client.complete(meaning_prompt(word)))
            sentence = _clean(await self.client.complete(sentence_prompt(word, meaning)))
        except Exception as e:
            logger.warning("Generation failed for %r, using placeholder text: %s", word, e)
            return Word(word=word, meaning=fallback_meaning(word), sentence=fallback_sentence(word))
        return Word(word=word, meaning=meaning, sentence=sentence)
