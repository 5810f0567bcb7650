"""In-memory store of open document texts."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """
    asyncio reader/writer lock.

    Any number of readers may hold the lock together; a writer holds it
    alone. Once a writer is waiting, newly arriving readers queue behind it
    so a steady stream of queries cannot starve an edit.
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        async with self._cond:
            await self._cond.wait_for(
                lambda: not self._writer and not self._writers_waiting
            )
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        async with self._cond:
            self._writers_waiting += 1
            try:
                await self._cond.wait_for(
                    lambda: not self._writer and not self._readers
                )
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()


class DocumentSessionStore:
    """
    Authoritative full text of every open document, keyed by URI.

    Only full-text synchronization is supported: each change replaces the
    stored text. Readers get the string itself, which is immutable, so a
    later change never alters a snapshot a handler is already working on.
    """

    def __init__(self) -> None:
        self._texts: dict[str, str] = {}
        self._lock = ReadWriteLock()

    async def open(self, uri: str, text: str) -> None:
        async with self._lock.write():
            self._texts[uri] = text

    async def change(self, uri: str, text: str) -> None:
        async with self._lock.write():
            if uri not in self._texts:
                logger.debug("Change received before open for %s", uri)
            self._texts[uri] = text

    async def read(self, uri: str) -> str | None:
        async with self._lock.read():
            return self._texts.get(uri)

    async def close(self, uri: str) -> None:
        async with self._lock.write():
            self._texts.pop(uri, None)

    async def uris(self) -> list[str]:
        async with self._lock.read():
            return list(self._texts)
