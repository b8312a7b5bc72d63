import json
from pathlib import Path

from data_loader import load_verified_articles
from newsverify.fingerprint import fingerprint

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def _write(path, payload):
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_bundled_seed_file_loads():
    records = load_verified_articles(DATA_DIR / "verified_articles.json")
    assert len(records) == 2
    assert all(record.source.name_ta for record in records)


def test_content_is_fingerprinted(tmp_path):
    path = _write(tmp_path / "articles.json", [
        {"content": "Some   Verified Article", "source": {"name_en": "AP"}, "published_date": "2024-01-02"},
    ])
    [record] = load_verified_articles(path)
    assert record.fingerprint == fingerprint("some verified article")
    assert record.published_date.isoformat() == "2024-01-02"


def test_invalid_and_duplicate_entries_are_skipped(tmp_path):
    fp = fingerprint("first")
    path = _write(tmp_path / "articles.json", {"articles": [
        {"fingerprint": fp, "title_en": "First", "source": {"name_en": "AP"}},
        {"fingerprint": fp, "title_en": "Duplicate", "source": {"name_en": "AP"}},
        {"fingerprint": "not-a-hash", "source": {"name_en": "AP"}},
        {"content": "no source given"},
        "not an object",
    ]})
    records = load_verified_articles(path)
    assert [record.title_en for record in records] == ["First"]


def test_missing_file_loads_nothing(tmp_path):
    assert load_verified_articles(tmp_path / "missing.json") == []
