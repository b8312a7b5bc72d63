from __future__ import annotations

import re
from dataclasses import dataclass

from .models import (
    MAX_CONFIDENCE,
    AuthenticHeuristic,
    ContentSignals,
    FakeHeuristic,
    HeuristicVerdict,
    UncertainHeuristic,
)


@dataclass(frozen=True)
class ScoringTable:
    """Fixed weights and thresholds of the heuristic classifier."""

    fake_phrases: tuple[str, ...] = (
        "breaking",
        "shocking",
        "unbelievable",
        "urgent",
        "viral",
        "must see",
        "you won't believe",
    )
    authentic_phrases: tuple[str, ...] = (
        "according to",
        "reported by",
        "official statement",
        "confirmed by",
        "study shows",
    )
    emotional_language_weight: int = 2
    short_and_vague_weight: int = 1
    proper_sources_weight: int = 2
    short_length: int = 100

    fake_threshold: float = 0.6
    authentic_threshold: float = 0.4
    base_confidence: float = 0.65
    confidence_slope: float = 0.5
    max_confidence: float = MAX_CONFIDENCE


class HeuristicClassifier:
    """Score unmatched content from lexical and structural signals."""

    SOURCE_PATTERN = re.compile(r"https?://", re.IGNORECASE)
    EMOTIONAL_PATTERN = re.compile(r"!{2,}|\?{2,}|[A-Z]{5,}")
    # Same ASCII word three or more times in a row, separated only by whitespace.
    REPEATED_WORD_PATTERN = re.compile(r"((?a:\b\w+\b))(\s+\1){2,}", re.IGNORECASE)

    def __init__(self, table: ScoringTable | None = None) -> None:
        self.table = table or ScoringTable()

    def signals(self, content: str) -> ContentSignals:
        table = self.table
        lowered = content.lower()
        fake_hits = tuple(phrase for phrase in table.fake_phrases if phrase in lowered)
        authentic_hits = tuple(phrase for phrase in table.authentic_phrases if phrase in lowered)

        has_proper_sources = bool(self.SOURCE_PATTERN.search(content))
        has_emotional_language = bool(self.EMOTIONAL_PATTERN.search(content))
        is_short_and_vague = len(content) < table.short_length

        fake_score = len(fake_hits)
        authentic_score = len(authentic_hits)
        if has_emotional_language:
            fake_score += table.emotional_language_weight
        if is_short_and_vague:
            fake_score += table.short_and_vague_weight
        if has_proper_sources:
            authentic_score += table.proper_sources_weight

        return ContentSignals(
            fake_score=fake_score,
            authentic_score=authentic_score,
            has_proper_sources=has_proper_sources,
            has_emotional_language=has_emotional_language,
            is_short_and_vague=is_short_and_vague,
            fake_phrases=fake_hits,
            authentic_phrases=authentic_hits,
        )

    def classify(self, content: str) -> HeuristicVerdict:
        table = self.table
        signals = self.signals(content)
        fake_ratio = signals.fake_ratio

        if fake_ratio > table.fake_threshold:
            classification = "ai_generated" if self.has_repetitive_patterns(content) else "man_made"
            return FakeHeuristic(
                classification=classification,
                confidence=self._confidence(fake_ratio - table.fake_threshold),
                signals=signals,
            )
        if fake_ratio < table.authentic_threshold:
            return AuthenticHeuristic(
                confidence=self._confidence(table.authentic_threshold - fake_ratio),
                signals=signals,
            )
        return UncertainHeuristic(signals=signals)

    def has_repetitive_patterns(self, content: str) -> bool:
        return bool(self.REPEATED_WORD_PATTERN.search(content))

    def _confidence(self, margin: float) -> float:
        table = self.table
        confidence = table.base_confidence + margin * table.confidence_slope
        return min(confidence, table.max_confidence)
