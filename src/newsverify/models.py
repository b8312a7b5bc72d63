from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import explanations
from .errors import MalformedSubmission

ContentType = Literal["text", "image", "video"]
WireResult = Literal["true", "fake", "uncertain"]
Classification = Literal["man_made", "ai_generated", "authentic", "uncertain"]

# The external contract tags the positive case as "true", not "authentic".
RESULT_WIRE_TAGS: dict[str, str] = {
    "authentic": "true",
    "fake": "fake",
    "uncertain": "uncertain",
}

CACHE_MATCH_CONFIDENCE = 0.95
UNCERTAIN_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.95


class ContentSubmission(BaseModel):
    """Request body: `{contentType, content}`; media content is an opaque data URL."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    content_type: ContentType = Field(..., alias="contentType")
    content: str

    @classmethod
    def from_payload(cls, payload: Any) -> "ContentSubmission":
        """Validate a raw `{contentType, content}` mapping."""
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            fields = sorted({".".join(str(part) for part in err["loc"]) or "body" for err in exc.errors()})
            raise MalformedSubmission(f"invalid submission fields: {', '.join(fields)}") from None

    @property
    def is_media(self) -> bool:
        return self.content_type != "text"


class TrustedSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name_en: str = Field(..., min_length=1)
    name_ta: str | None = None


class VerifiedArticleRecord(BaseModel):
    """Curated article keyed by the fingerprint of its content."""

    model_config = ConfigDict(frozen=True)

    fingerprint: str = Field(..., pattern=r"^[0-9a-f]{64}$")
    title_en: str | None = None
    title_ta: str | None = None
    source: TrustedSource
    published_date: date | None = None
    original_url: str | None = None


class ContentSignals(BaseModel):
    """Lexical and structural signals the heuristic classifier scored."""

    model_config = ConfigDict(frozen=True)

    fake_score: int = Field(..., ge=0)
    authentic_score: int = Field(..., ge=0)
    has_proper_sources: bool
    has_emotional_language: bool
    is_short_and_vague: bool
    fake_phrases: tuple[str, ...] = ()
    authentic_phrases: tuple[str, ...] = ()

    @property
    def fake_ratio(self) -> float:
        total = self.fake_score + self.authentic_score
        if total == 0:
            return 0.5
        return self.fake_score / total


class VerifyResponse(BaseModel):
    """Wire shape returned to the caller."""

    id: str | None = None
    result: WireResult
    classification: Classification
    confidence: float = Field(..., ge=0.0, le=MAX_CONFIDENCE)
    details: dict[str, str] = Field(default_factory=dict)


class _VerdictBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    confidence: float = Field(..., ge=0.0, le=MAX_CONFIDENCE)

    def with_id(self, entry_id: str | None):
        return self.model_copy(update={"id": entry_id})

    def to_response(self) -> VerifyResponse:
        return VerifyResponse(
            id=self.id,
            result=RESULT_WIRE_TAGS[self.result],
            classification=self.classification,
            confidence=self.confidence,
            details={key: value for key, value in self.details.items() if value is not None},
        )


class AuthenticFromCache(_VerdictBase):
    kind: Literal["authentic_from_cache"] = "authentic_from_cache"
    result: Literal["authentic"] = "authentic"
    classification: Literal["authentic"] = "authentic"
    confidence: float = Field(CACHE_MATCH_CONFIDENCE, ge=0.0, le=MAX_CONFIDENCE)
    article: VerifiedArticleRecord

    @property
    def details(self) -> dict[str, str]:
        article = self.article
        details = {
            "title_en": article.title_en,
            "title_ta": article.title_ta,
            "source_name_en": article.source.name_en,
            "source_name_ta": article.source.name_ta,
            "published_date": article.published_date.isoformat() if article.published_date else None,
            "original_url": article.original_url,
        }
        for locale in explanations.SUPPORTED_LOCALES:
            details[f"analysis_{locale}"] = explanations.render_cache_analysis(article.source, locale)
        return details


class _HeuristicVerdict(_VerdictBase):
    signals: ContentSignals

    @property
    def details(self) -> dict[str, str]:
        return {
            f"analysis_{locale}": explanations.render_heuristic_analysis(self.result, self.signals, locale)
            for locale in explanations.SUPPORTED_LOCALES
        }


class FakeHeuristic(_HeuristicVerdict):
    kind: Literal["fake_heuristic"] = "fake_heuristic"
    result: Literal["fake"] = "fake"
    classification: Literal["man_made", "ai_generated"]


class AuthenticHeuristic(_HeuristicVerdict):
    kind: Literal["authentic_heuristic"] = "authentic_heuristic"
    result: Literal["authentic"] = "authentic"
    classification: Literal["authentic"] = "authentic"


class UncertainHeuristic(_HeuristicVerdict):
    kind: Literal["uncertain_heuristic"] = "uncertain_heuristic"
    result: Literal["uncertain"] = "uncertain"
    classification: Literal["uncertain"] = "uncertain"
    confidence: float = Field(UNCERTAIN_CONFIDENCE, ge=0.0, le=MAX_CONFIDENCE)


HeuristicVerdict = Union[FakeHeuristic, AuthenticHeuristic, UncertainHeuristic]
Verdict = Annotated[
    Union[AuthenticFromCache, FakeHeuristic, AuthenticHeuristic, UncertainHeuristic],
    Field(discriminator="kind"),
]


class VerificationLogEntry(BaseModel):
    """One row of the append-only verification request log."""

    content_type: ContentType
    fingerprint: str
    content_text: str | None = None
    content_ref: str | None = None
    verification_result: WireResult
    classification: Classification
    confidence_score: float
    details: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_verdict(
        cls,
        submission: ContentSubmission,
        content_fingerprint: str,
        verdict: Verdict,
    ) -> "VerificationLogEntry":
        response = verdict.to_response()
        # Media blobs are referenced by fingerprint instead of being stored inline.
        return cls(
            content_type=submission.content_type,
            fingerprint=content_fingerprint,
            content_text=None if submission.is_media else submission.content,
            content_ref=f"fingerprint:{content_fingerprint}" if submission.is_media else None,
            verification_result=response.result,
            classification=response.classification,
            confidence_score=response.confidence,
            details=response.details,
        )
