"""DE Score aggregation: combines the sub-analyses into the final report."""

from __future__ import annotations

import logging

from .errors import InsufficientContentError
from .features import extract_features
from .models import (
    DEScoreResult,
    ScoreBreakdown,
    SEOAnalysisResult,
    TechnicalAuditResult,
    WallflowerAnalysisResult,
)
from .seo import score_seo
from .technical import score_technical
from .utils import average, clamp
from .wallflower import score_wallflower

logger = logging.getLogger(__name__)

MIN_CONTENT_LENGTH = 50


def operations_score(
    seo: SEOAnalysisResult,
    technical: TechnicalAuditResult,
    wallflower: WallflowerAnalysisResult,
) -> int:
    score = 50
    if seo.overall_score > 70:
        score += 15
    if technical.overall_score > 70:
        score += 15
    if wallflower.overall_score > 70:
        score += 20
    return clamp(score)


def paid_score(
    seo: SEOAnalysisResult,
    technical: TechnicalAuditResult,
    wallflower: WallflowerAnalysisResult,
) -> int:
    score = 40
    if seo.overall_score > 60:
        score += 20
    if technical.performance_score > 70:
        score += 20
    if wallflower.brand_presence_score > 60:
        score += 20
    return clamp(score)


def compute_de_score(
    content: str,
    url: str,
    min_content_length: int = MIN_CONTENT_LENGTH,
) -> DEScoreResult:
    """Score scraped *content* for *url*.

    Raises :class:`InsufficientContentError` when the content is shorter than
    *min_content_length* characters. The computation is pure: identical inputs
    always produce identical results.
    """
    if len(content) < min_content_length:
        raise InsufficientContentError(url, len(content), min_content_length)

    features = extract_features(content)
    seo = score_seo(features)
    technical = score_technical(features, url)
    wallflower = score_wallflower(features)

    operations = operations_score(seo, technical, wallflower)
    paid = paid_score(seo, technical, wallflower)
    brand = average([wallflower.overall_score, seo.overall_score, technical.overall_score])
    total = average([brand, operations, paid])

    logger.debug(
        "de score computed",
        extra={"url": url, "content_length": features.content_length, "total_score": total},
    )

    return DEScoreResult(
        brand_score=brand,
        operations_score=operations,
        paid_score=paid,
        total_score=total,
        breakdown=ScoreBreakdown(
            url=url,
            features=features,
            seo=seo,
            technical=technical,
            wallflower=wallflower,
        ),
    )
