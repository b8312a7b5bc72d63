"""
Per-locale analysis text for verdicts.

The engine always renders every supported locale; callers pick one with
`localize_details`. Every function takes the locale explicitly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from .models import ContentSignals, TrustedSource

SUPPORTED_LOCALES = ("en", "ta")

_TEMPLATES: dict[str, dict[str, str]] = {
    "en": {
        "cache_match": "This content matches verified news from {source}, a trusted source with high reliability.",
        "fake": (
            "This content exhibits characteristics common in misinformation{reasons}. "
            "We recommend verifying with trusted news outlets."
        ),
        "fake.emotional": "excessive emotional language",
        "fake.vague": "vague or incomplete information",
        "fake.no_sources": "lack of credible sources",
        "authentic": (
            "This content shows indicators of reliable reporting: {sources}balanced language, "
            "and verifiable claims. However, always cross-reference with multiple trusted sources."
        ),
        "authentic.sources": "includes proper sources, ",
        "uncertain": (
            "Unable to definitively classify this content. We recommend verifying with "
            "multiple trusted news sources before sharing."
        ),
    },
    "ta": {
        "cache_match": "இந்த உள்ளடக்கம் {source} என்ற நம்பகமான ஆதாரத்தில் இருந்து சரிபார்க்கப்பட்ட செய்திகளுடன் பொருந்துகிறது.",
        "fake": (
            "இந்த உள்ளடக்கம் தவறான தகவல்களில் பொதுவான பண்புகளை வெளிப்படுத்துகிறது{reasons}. "
            "நம்பகமான செய்தி நிறுவனங்களுடன் சரிபார்க்க பரிந்துரைக்கிறோம்."
        ),
        "fake.emotional": "அதிகப்படியான உணர்ச்சி மொழி",
        "fake.vague": "தெளிவற்ற அல்லது முழுமையற்ற தகவல்",
        "fake.no_sources": "நம்பகமான ஆதாரங்கள் இல்லை",
        "authentic": (
            "இந்த உள்ளடக்கம் நம்பகமான அறிக்கையின் குறிகாட்டிகளைக் காட்டுகிறது: {sources}சமநிலையான மொழி "
            "மற்றும் சரிபார்க்கக்கூடிய கூற்றுகள். எனினும், எப்போதும் பல நம்பகமான ஆதாரங்களுடன் குறுக்கு குறிப்பு."
        ),
        "authentic.sources": "சரியான ஆதாரங்களை உள்ளடக்கியது, ",
        "uncertain": (
            "இந்த உள்ளடக்கத்தை திட்டவட்டமாக வகைப்படுத்த முடியவில்லை. பகிர்வதற்கு முன் பல நம்பகமான "
            "செய்தி ஆதாரங்களுடன் சரிபார்க்க பரிந்துரைக்கிறோம்."
        ),
    },
}


def _templates(locale: str) -> dict[str, str]:
    try:
        return _TEMPLATES[locale]
    except KeyError:
        raise ValueError(f"Unsupported locale: {locale!r}") from None


def render_cache_analysis(source: "TrustedSource", locale: str) -> str:
    templates = _templates(locale)
    name = source.name_en
    if locale == "ta" and source.name_ta:
        name = source.name_ta
    return templates["cache_match"].format(source=name)


def render_heuristic_analysis(result: str, signals: "ContentSignals", locale: str) -> str:
    """Explain a heuristic verdict from the signals that fired."""
    templates = _templates(locale)
    if result == "fake":
        reasons = []
        if signals.has_emotional_language:
            reasons.append(templates["fake.emotional"])
        if signals.is_short_and_vague:
            reasons.append(templates["fake.vague"])
        if not signals.has_proper_sources:
            reasons.append(templates["fake.no_sources"])
        joined = f": {', '.join(reasons)}" if reasons else ""
        return templates["fake"].format(reasons=joined)
    if result == "authentic":
        sources = templates["authentic.sources"] if signals.has_proper_sources else ""
        return templates["authentic"].format(sources=sources)
    return templates["uncertain"]


def localize_details(details: dict[str, str], locale: str) -> dict[str, str]:
    """
    Select one locale from a bilingual details mapping.

    `title_en`/`title_ta` collapse to `title` and so on, falling back to the
    English value when the requested locale is missing. Locale-neutral keys
    such as `original_url` are kept as they are.
    """
    _templates(locale)
    suffixes = {f"_{code}" for code in SUPPORTED_LOCALES}
    localized: dict[str, str] = {}
    for key, value in details.items():
        suffix = next((s for s in suffixes if key.endswith(s)), None)
        if suffix is None:
            localized[key] = value
            continue
        base = key[: -len(suffix)]
        if suffix == f"_{locale}":
            localized[base] = value
        elif suffix == "_en":
            localized.setdefault(base, value)
    return localized
