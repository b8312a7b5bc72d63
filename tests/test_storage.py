"""
Unit tests for the storage adapters
"""

import uuid

import pytest

from newsverify.errors import StoreUnavailable
from newsverify.fingerprint import fingerprint
from newsverify.models import TrustedSource, VerificationLogEntry, VerifiedArticleRecord
from newsverify.storage import MemoryStore, RedisStore, build_store
from newsverify.config import Settings


def _record(content="Curated article body"):
    return VerifiedArticleRecord(
        fingerprint=fingerprint(content),
        title_en="Curated",
        source=TrustedSource(name_en="Reuters", name_ta="ராய்ட்டர்ஸ்"),
        original_url="https://www.reuters.com/world/article",
    )


def _entry():
    return VerificationLogEntry(
        content_type="text",
        fingerprint=fingerprint("hello"),
        content_text="hello",
        verification_result="fake",
        classification="man_made",
        confidence_score=0.85,
        details={"analysis_en": "..."},
    )


@pytest.mark.asyncio
async def test_memory_storage():
    """Test in-memory storage"""
    store = MemoryStore()
    await store.connect()

    record = _record()
    assert await store.find_verified_articles(record.fingerprint) == []

    await store.add_verified_article(record)
    assert await store.find_verified_articles(record.fingerprint) == [record]

    entry_id = await store.append_log_entry(_entry())
    other_id = await store.append_log_entry(_entry())
    assert entry_id != other_id
    assert (await store.get_log_entry(entry_id)).content_text == "hello"
    assert await store.count_log_entries() == 2
    assert await store.ping() is True


@pytest.mark.asyncio
async def test_memory_storage_keeps_one_record_per_fingerprint():
    store = MemoryStore()
    record = _record()
    await store.add_verified_article(record)
    await store.add_verified_article(record.model_copy(update={"title_en": "Updated"}))

    records = await store.find_verified_articles(record.fingerprint)
    assert len(records) == 1
    assert records[0].title_en == "Updated"


@pytest.mark.asyncio
async def test_redis_store_requires_connection():
    store = RedisStore("redis://localhost:6379/0")
    assert await store.ping() is False
    with pytest.raises(StoreUnavailable):
        await store.find_verified_articles(fingerprint("x"))
    with pytest.raises(StoreUnavailable):
        await store.append_log_entry(_entry())


@pytest.mark.asyncio
async def test_redis_store_unreachable_raises_store_unavailable():
    store = RedisStore("redis://127.0.0.1:1/0", socket_timeout=0.2)
    await store.connect()
    try:
        with pytest.raises(StoreUnavailable) as excinfo:
            await store.find_verified_articles(fingerprint("x"))
        assert excinfo.value.operation == "lookup"
        with pytest.raises(StoreUnavailable):
            await store.append_log_entry(_entry())
    finally:
        await store.close()


@pytest.mark.asyncio
async def test_redis_storage():
    """Test Redis storage (if available)"""
    store = RedisStore("redis://localhost:6379/15", key_prefix=f"test-{uuid.uuid4().hex[:8]}", socket_timeout=1.0)
    await store.connect()
    if not await store.ping():
        await store.close()
        pytest.skip("Redis not available")

    try:
        record = _record("Redis curated article")
        await store.add_verified_article(record)
        assert await store.find_verified_articles(record.fingerprint) == [record]
        assert await store.find_verified_articles(fingerprint("missing")) == []

        entry_id = await store.append_log_entry(_entry())
        stored = await store.get_log_entry(entry_id)
        assert stored.verification_result == "fake"
        assert await store.count_log_entries() == 1

        await store.client.set(store._article_key(fingerprint("corrupt")), "{not json")
        with pytest.raises(StoreUnavailable):
            await store.find_verified_articles(fingerprint("corrupt"))
    finally:
        keys = [key async for key in store.client.scan_iter(f"{store._prefix}:*")]
        if keys:
            await store.client.delete(*keys)
        await store.close()


def test_build_store_selects_backend():
    assert isinstance(build_store(Settings(store_backend="memory")), MemoryStore)
    assert isinstance(build_store(Settings(store_backend="redis")), RedisStore)
