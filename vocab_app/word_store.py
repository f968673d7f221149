# vocab_app/word_store.py
"""
Word Store: the durable collection of word entries.

Two backends share one contract:

- ``SqlWordStore``: SQLAlchemy table ``words_db``; ids come from the database.
- ``InMemoryWordStore``: process-lifetime registry owned by whoever builds it.

``delete`` removes every entry whose word matches case-insensitively and
always reports ``True``, also when nothing matched. ``update`` is not
supported and raises ``UpdateNotSupportedError``.
"""
from __future__ import annotations

import asyncio
from typing import List, Protocol

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import async_sessionmaker

from .models import WordRow
from .schema import Word, to_row, to_word

CREATED_MESSAGE = "word added successfully"


class UpdateNotSupportedError(NotImplementedError):
    pass


class WordStore(Protocol):
    async def create(self, word: Word) -> str: ...
    async def list_all(self) -> List[Word]: ...
    async def delete(self, word_text: str) -> bool: ...
    async def update(self, word: Word) -> str: ...


def _same_word(stored, wanted: str) -> bool:
    return stored is not None and stored.casefold() == wanted.casefold()


class SqlWordStore:
    def __init__(self, session_factory: async_sessionmaker):
        self._sessions = session_factory

    async def create(self, word: Word) -> str:
        async with self._sessions() as session:
            session.add(to_row(word))
            await session.commit()
        return CREATED_MESSAGE

    async def list_all(self) -> List[Word]:
        async with self._sessions() as session:
            res = await session.execute(select(WordRow).order_by(WordRow.id))
            return [to_word(row) for row in res.scalars().all()]

    async def delete(self, word_text: str) -> bool:
        async with self._sessions() as session:
            await session.execute(
                delete(WordRow).where(func.lower(WordRow.word) == func.lower(word_text))
            )
            await session.commit()
        return True

    async def update(self, word: Word) -> str:
        raise UpdateNotSupportedError("updating word entries is not supported")


class InMemoryWordStore:
    def __init__(self):
        self._words: List[Word] = []
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def create(self, word: Word) -> str:
        async with self._lock:
            self._words.append(word.model_copy(update={"id": self._next_id}))
            self._next_id += 1
        return CREATED_MESSAGE

    async def list_all(self) -> List[Word]:
        return [w.model_copy() for w in self._words]

    async def delete(self, word_text: str) -> bool:
        async with self._lock:
            self._words = [w for w in self._words if not _same_word(w.word, word_text)]
        return True

    async def update(self, word: Word) -> str:
        raise UpdateNotSupportedError("updating word entries is not supported")
