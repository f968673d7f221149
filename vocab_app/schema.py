# vocab_app/schema.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .models import WordRow


class Word(BaseModel):
    """Wire/display shape of a word entry."""
    id: Optional[int] = None
    word: Optional[str] = None
    meaning: Optional[str] = None
    sentence: Optional[str] = None


SAMPLE_WORD = Word(
    id=1,
    word="Jubilant",
    meaning="Expressing great happiness",
    sentence="The jubilant crowd cheered loudly.",
)


def to_row(word: Word) -> WordRow:
    # id is assigned by the database
    return WordRow(word=word.word, meaning=word.meaning, sentence=word.sentence)


def to_word(row: WordRow) -> Word:
    return Word(id=row.id, word=row.word, meaning=row.meaning, sentence=row.sentence)
