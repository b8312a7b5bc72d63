import re

import pytest

from newsverify.fingerprint import fingerprint, normalize_content


def test_case_and_whitespace_runs_collapse():
    assert fingerprint("Breaking NEWS") == fingerprint("breaking   news")
    assert fingerprint("  Breaking\tNews\n") == fingerprint("breaking news")


def test_known_sha256_digest():
    assert fingerprint("breaking news") == "f4718fbf2d9f31454bf60d5323d38db39d7b5c699ed6e2b38ee55b767686e6b3"
    assert fingerprint("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_whitespace_only_matches_empty():
    assert fingerprint(" \n\t ") == fingerprint("")


def test_fixed_length_lowercase_hex():
    assert re.fullmatch(r"[0-9a-f]{64}", fingerprint("Any content at all, even Tamil: செய்தி"))


def test_deterministic():
    text = "The council approved the budget on Monday."
    assert fingerprint(text) == fingerprint(text)


def test_distinct_inputs_give_distinct_fingerprints():
    corpus = [
        "The council approved the budget on Monday.",
        "The council rejected the budget on Monday.",
        "The council approved the budget on Tuesday.",
        "data:image/png;base64,iVBORw0KGgo=",
        "data:image/png;base64,iVBORw0KGgp=",
        "breaking news",
        "breakingnews",
    ]
    assert len({fingerprint(text) for text in corpus}) == len(corpus)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  Hello   World  ", "hello world"),
        ("A\r\nB", "a b"),
        ("", ""),
    ],
)
def test_normalize_content(raw, expected):
    assert normalize_content(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["a\u00a0b", "a\u2003b", "a\u3000b", "a\ufeffb", "\ufeffa b", "a\u2028b"],
)
def test_unicode_spaces_collapse(raw):
    assert normalize_content(raw) == "a b"


@pytest.mark.parametrize("raw", ["a\x1cb", "a\x1fb", "a\x85b"])
def test_separator_controls_are_not_whitespace(raw):
    assert normalize_content(raw) == raw
    assert fingerprint(raw) != fingerprint("a b")
