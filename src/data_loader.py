"""
Seed loader for curated verified articles.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from newsverify.fingerprint import fingerprint
from newsverify.models import VerifiedArticleRecord

logger = logging.getLogger(__name__)


def load_json(path: Path) -> Any:
    """Load a JSON file with UTF-8 encoding."""
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _entries(raw: Any) -> list:
    if isinstance(raw, dict):
        raw = raw.get("articles", [])
    return raw if isinstance(raw, list) else []


def load_verified_articles(path: str | os.PathLike[str]) -> List[VerifiedArticleRecord]:
    """
    Load curated articles from a JSON list (or `{"articles": [...]}`).

    Each entry needs either a `fingerprint` or the raw `content`, which is
    fingerprinted here. Invalid entries are skipped; for duplicate
    fingerprints the first entry wins.
    """
    data_path = Path(path)
    if not data_path.exists():
        logger.warning("Verified articles file %s does not exist; nothing to load", data_path)
        return []

    entries = _entries(load_json(data_path))
    records: List[VerifiedArticleRecord] = []
    seen: set[str] = set()

    for index, item in enumerate(entries):
        if not isinstance(item, dict):
            logger.warning("Skip verified article #%d: expected an object", index)
            continue
        payload = dict(item)
        content = payload.pop("content", None)
        if not payload.get("fingerprint") and isinstance(content, str):
            payload["fingerprint"] = fingerprint(content)
        try:
            record = VerifiedArticleRecord.model_validate(payload)
        except ValidationError as exc:
            logger.warning("Skip verified article #%d: %d validation errors", index, exc.error_count())
            continue
        if record.fingerprint in seen:
            logger.warning("Skip verified article #%d: duplicate fingerprint %s", index, record.fingerprint[:16])
            continue
        seen.add(record.fingerprint)
        records.append(record)

    logger.info("Loaded %d verified articles from %s", len(records), data_path)
    return records
