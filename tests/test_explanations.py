import pytest

from newsverify.explanations import localize_details, render_cache_analysis, render_heuristic_analysis
from newsverify.models import ContentSignals, TrustedSource


def _signals(**overrides):
    values = dict(
        fake_score=3,
        authentic_score=0,
        has_proper_sources=True,
        has_emotional_language=False,
        is_short_and_vague=False,
    )
    values.update(overrides)
    return ContentSignals(**values)


def test_cache_analysis_uses_localized_source_name():
    source = TrustedSource(name_en="The Hindu", name_ta="தி இந்து")
    assert "The Hindu" in render_cache_analysis(source, "en")
    assert "தி இந்து" in render_cache_analysis(source, "ta")


def test_cache_analysis_falls_back_to_english_name():
    source = TrustedSource(name_en="Reuters")
    assert "Reuters" in render_cache_analysis(source, "ta")


def test_fake_analysis_without_fired_structural_signals():
    text = render_heuristic_analysis("fake", _signals(), "en")
    assert text == (
        "This content exhibits characteristics common in misinformation. "
        "We recommend verifying with trusted news outlets."
    )


def test_uncertain_analysis():
    text = render_heuristic_analysis("uncertain", _signals(), "en")
    assert text.startswith("Unable to definitively classify this content.")


def test_unsupported_locale_is_rejected():
    with pytest.raises(ValueError):
        render_heuristic_analysis("fake", _signals(), "fr")
    with pytest.raises(ValueError):
        localize_details({}, "fr")


def test_localize_details_selects_one_locale():
    details = {
        "title_en": "Rate unchanged",
        "title_ta": "விகிதம் மாற்றமில்லை",
        "source_name_en": "The Hindu",
        "analysis_en": "English analysis",
        "analysis_ta": "தமிழ் பகுப்பாய்வு",
        "original_url": "https://example.com/a",
        "published_date": "2024-06-07",
    }
    assert localize_details(details, "ta") == {
        "title": "விகிதம் மாற்றமில்லை",
        "source_name": "The Hindu",
        "analysis": "தமிழ் பகுப்பாய்வு",
        "original_url": "https://example.com/a",
        "published_date": "2024-06-07",
    }
    assert localize_details(details, "en")["title"] == "Rate unchanged"
