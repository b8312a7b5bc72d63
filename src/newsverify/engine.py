from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .cache import VerifiedArticleCache
from .classifier import HeuristicClassifier
from .errors import InternalError, StoreUnavailable
from .fingerprint import fingerprint
from .metrics import Metrics
from .models import (
    AuthenticFromCache,
    ContentSubmission,
    Verdict,
    VerificationLogEntry,
)
from .storage import StoragePort

logger = logging.getLogger(__name__)


@dataclass
class VerificationEngine:
    """
    Fingerprint, look up, classify and log a single submission.

    A cache hit always wins over the heuristic classifier. Log failures never
    withhold the verdict; the returned verdict then carries `id=None`.
    """

    store: StoragePort
    classifier: HeuristicClassifier = field(default_factory=HeuristicClassifier)
    strict_cache_lookup: bool = False
    metrics: Metrics = field(default_factory=Metrics)

    def __post_init__(self) -> None:
        self._cache = VerifiedArticleCache(self.store)

    async def verify_payload(self, payload: Any) -> Verdict:
        """Validate a raw `{contentType, content}` mapping, then verify it."""
        return await self.verify(ContentSubmission.from_payload(payload))

    async def verify(self, submission: ContentSubmission) -> Verdict:
        try:
            content_fingerprint = fingerprint(submission.content)
        except Exception as exc:
            raise InternalError(f"fingerprinting failed: {exc}") from exc

        verdict = await self._resolve(submission, content_fingerprint)
        self.metrics.record_verdict(from_cache=isinstance(verdict, AuthenticFromCache))

        entry_id = await self._record(submission, content_fingerprint, verdict)
        return verdict.with_id(entry_id)

    async def _resolve(
        self,
        submission: ContentSubmission,
        content_fingerprint: str,
    ) -> Verdict:
        try:
            record = await self._cache.lookup(content_fingerprint)
        except StoreUnavailable as exc:
            self.metrics.record_store_error()
            if self.strict_cache_lookup:
                logger.error(f"Verified-article lookup failed: {exc}")
                raise
            logger.warning(f"Verified-article lookup failed, falling back to heuristics: {exc}")
            record = None

        if record is not None:
            logger.info(f"Cache hit for {content_fingerprint[:16]} ({record.source.name_en})")
            return AuthenticFromCache(article=record)

        try:
            verdict = self.classifier.classify(submission.content)
        except Exception as exc:
            raise InternalError(f"classification failed: {exc}") from exc
        logger.info(
            f"Heuristic verdict for {content_fingerprint[:16]}: "
            f"{verdict.result}/{verdict.classification} ({verdict.confidence})"
        )
        return verdict

    async def _record(
        self,
        submission: ContentSubmission,
        content_fingerprint: str,
        verdict: Verdict,
    ) -> str | None:
        entry = VerificationLogEntry.from_verdict(submission, content_fingerprint, verdict)
        try:
            return await self.store.append_log_entry(entry)
        except StoreUnavailable as exc:
            self.metrics.record_store_error()
            logger.warning(f"Verification log entry lost: {exc}")
            return None
        except Exception as exc:
            self.metrics.record_store_error()
            logger.error(f"Verification log entry lost to unexpected store fault: {exc}", exc_info=True)
            return None
