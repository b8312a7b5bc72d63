"""
Storage port and adapters for verified articles and the verification log.

The engine only talks to the two port methods; curation helpers
(`add_verified_article`) are used by seed scripts and tests.
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Protocol

import redis.asyncio as redis
from pydantic import ValidationError
from redis.exceptions import RedisError

from .config import Settings
from .errors import StoreUnavailable
from .models import VerificationLogEntry, VerifiedArticleRecord

logger = logging.getLogger(__name__)


class StoragePort(Protocol):
    """
    What the verification engine needs from a store.

    Adapters raise StoreUnavailable for backend faults. A lookup fault is
    then handled per the strict lookup setting; a log-append fault of any
    kind only drops the log entry.
    """

    async def find_verified_articles(self, fingerprint: str) -> list[VerifiedArticleRecord]:
        ...

    async def append_log_entry(self, entry: VerificationLogEntry) -> str:
        ...


class MemoryStore:
    """In-process store used for development and tests."""

    name = "memory"

    def __init__(self) -> None:
        self._articles: dict[str, VerifiedArticleRecord] = {}
        self._log: dict[str, VerificationLogEntry] = {}
        self._lock = asyncio.Lock()

    async def connect(self) -> None:
        logger.info("Using in-memory verification store")

    async def close(self) -> None:
        pass

    async def ping(self) -> bool:
        return True

    async def find_verified_articles(self, fingerprint: str) -> list[VerifiedArticleRecord]:
        async with self._lock:
            record = self._articles.get(fingerprint)
        return [record] if record is not None else []

    async def append_log_entry(self, entry: VerificationLogEntry) -> str:
        entry_id = str(uuid.uuid4())
        async with self._lock:
            self._log[entry_id] = entry
        return entry_id

    async def add_verified_article(self, record: VerifiedArticleRecord) -> None:
        async with self._lock:
            self._articles[record.fingerprint] = record

    async def get_log_entry(self, entry_id: str) -> VerificationLogEntry | None:
        async with self._lock:
            return self._log.get(entry_id)

    async def count_log_entries(self) -> int:
        async with self._lock:
            return len(self._log)


class RedisStore:
    """Redis-backed store; every backend failure surfaces as StoreUnavailable."""

    name = "redis"

    def __init__(self, url: str, *, key_prefix: str = "newsverify", socket_timeout: float = 5.0) -> None:
        self._url = url
        self._prefix = key_prefix
        self._socket_timeout = socket_timeout
        self.client: redis.Redis | None = None

    async def connect(self) -> None:
        self.client = redis.from_url(
            self._url,
            decode_responses=True,
            socket_connect_timeout=self._socket_timeout,
            socket_timeout=self._socket_timeout,
        )
        if await self.ping():
            logger.info("Redis connected successfully")
        else:
            logger.warning("Redis unreachable at startup; store calls will fail until it recovers")

    async def close(self) -> None:
        if self.client is not None:
            await self.client.aclose()
            self.client = None

    async def ping(self) -> bool:
        if self.client is None:
            return False
        try:
            return bool(await self.client.ping())
        except (RedisError, OSError) as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    def _article_key(self, fingerprint: str) -> str:
        return f"{self._prefix}:verified:{fingerprint}"

    def _log_key(self, entry_id: str) -> str:
        return f"{self._prefix}:verification:{entry_id}"

    @property
    def _log_index_key(self) -> str:
        return f"{self._prefix}:verifications"

    def _require_client(self, operation: str) -> redis.Redis:
        if self.client is None:
            raise StoreUnavailable(operation, "redis client not connected")
        return self.client

    async def find_verified_articles(self, fingerprint: str) -> list[VerifiedArticleRecord]:
        client = self._require_client("lookup")
        try:
            raw = await client.get(self._article_key(fingerprint))
        except (RedisError, OSError) as exc:
            raise StoreUnavailable("lookup", str(exc)) from exc
        if raw is None:
            return []
        try:
            return [VerifiedArticleRecord.model_validate_json(raw)]
        except ValidationError as exc:
            raise StoreUnavailable("lookup", f"corrupt verified article {fingerprint[:16]}") from exc

    async def append_log_entry(self, entry: VerificationLogEntry) -> str:
        client = self._require_client("log-append")
        entry_id = str(uuid.uuid4())
        try:
            async with client.pipeline(transaction=True) as pipe:
                pipe.set(self._log_key(entry_id), entry.model_dump_json())
                pipe.rpush(self._log_index_key, entry_id)
                await pipe.execute()
        except (RedisError, OSError) as exc:
            raise StoreUnavailable("log-append", str(exc)) from exc
        return entry_id

    async def add_verified_article(self, record: VerifiedArticleRecord) -> None:
        client = self._require_client("curate")
        try:
            await client.set(self._article_key(record.fingerprint), record.model_dump_json())
        except (RedisError, OSError) as exc:
            raise StoreUnavailable("curate", str(exc)) from exc

    async def get_log_entry(self, entry_id: str) -> VerificationLogEntry | None:
        client = self._require_client("log-read")
        try:
            raw = await client.get(self._log_key(entry_id))
        except (RedisError, OSError) as exc:
            raise StoreUnavailable("log-read", str(exc)) from exc
        return VerificationLogEntry.model_validate_json(raw) if raw else None

    async def count_log_entries(self) -> int:
        client = self._require_client("log-read")
        try:
            return await client.llen(self._log_index_key)
        except (RedisError, OSError) as exc:
            raise StoreUnavailable("log-read", str(exc)) from exc


def build_store(settings: Settings) -> MemoryStore | RedisStore:
    if settings.store_backend == "redis":
        return RedisStore(
            settings.redis_url,
            key_prefix=settings.redis_key_prefix,
            socket_timeout=settings.redis_socket_timeout,
        )
    return MemoryStore()
