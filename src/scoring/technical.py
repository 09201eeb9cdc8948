"""Technical audit sub-scores derived from content features and the URL."""

from __future__ import annotations

from .models import ContentFeatures, TechnicalAuditResult
from .utils import average, clamp, round_half_up

LARGE_PAGE_WORDS = 5000
LIGHT_PAGE_CHARS = 50_000


def _performance_score(features: ContentFeatures) -> int:
    score = 70 - round_half_up(features.images / 5)
    if features.word_count > LARGE_PAGE_WORDS:
        score -= 10
    if features.content_length < LIGHT_PAGE_CHARS:
        score += 20
    return clamp(score)


def _security_score(url: str) -> int:
    if not url.startswith("https://"):
        return 40
    return clamp(80 + (20 if "www." in url else 0))


def score_technical(features: ContentFeatures, url: str) -> TechnicalAuditResult:
    """Audit performance, accessibility, mobile, security and markup quality.

    Raw page size comes from ``features.content_length``; *url* only feeds the
    security heuristic.
    """
    performance = _performance_score(features)
    accessibility = clamp(
        (25 if features.headers > 0 else 0)
        + (25 if features.has_title else 0)
        + (15 if features.images > 0 else 0)
        + 35
    )
    mobile = clamp(
        (20 if features.paragraphs > 3 else 40)
        + (30 if features.word_count < 2000 else 20)
        + 30
    )
    security = _security_score(url)
    code_quality = clamp(
        (20 if features.headers > 0 else 0)
        + (15 if features.links > 0 else 0)
        + (15 if features.has_title else 0)
        + 50
    )

    return TechnicalAuditResult(
        performance_score=performance,
        accessibility_score=accessibility,
        mobile_optimization_score=mobile,
        security_score=security,
        code_quality_score=code_quality,
        overall_score=average([performance, accessibility, mobile, security, code_quality]),
    )
