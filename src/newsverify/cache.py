from __future__ import annotations

import logging

from .models import VerifiedArticleRecord
from .storage import StoragePort

logger = logging.getLogger(__name__)


class VerifiedArticleCache:
    """Exact-match lookup of curated articles by content fingerprint."""

    def __init__(self, store: StoragePort) -> None:
        self._store = store

    async def lookup(self, fingerprint: str) -> VerifiedArticleRecord | None:
        # StoreUnavailable propagates; whether to degrade is the caller's call.
        records = await self._store.find_verified_articles(fingerprint)
        if not records:
            return None
        if len(records) > 1:
            logger.warning(
                "Store integrity: %d verified articles share fingerprint %s; using the first",
                len(records),
                fingerprint[:16],
            )
        return records[0]
