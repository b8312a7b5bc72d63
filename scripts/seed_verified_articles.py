#!/usr/bin/env python3
"""
Push curated verified articles from a JSON file into the configured store.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT / "src") not in sys.path:
    sys.path.insert(0, str(ROOT / "src"))

from data_loader import load_verified_articles  # noqa: E402
from newsverify.config import get_settings  # noqa: E402
from newsverify.storage import build_store  # noqa: E402


async def seed(path: str) -> int:
    settings = get_settings()
    store = build_store(settings)
    await store.connect()
    try:
        records = load_verified_articles(path)
        for record in records:
            await store.add_verified_article(record)
    finally:
        await store.close()
    print(f"Seeded {len(records)} verified articles into the {store.name} store")
    return len(records)


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed verified articles into the NewsVerify store.")
    parser.add_argument(
        "--file",
        default=str(ROOT / "data" / "verified_articles.json"),
        help="Path to the verified articles JSON (default: data/verified_articles.json)",
    )
    args = parser.parse_args()

    asyncio.run(seed(args.file))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
