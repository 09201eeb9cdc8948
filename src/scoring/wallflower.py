"""Content-richness ("wallflower") sub-scores."""

from __future__ import annotations

from .models import ContentFeatures, WallflowerAnalysisResult
from .utils import average, clamp, round_half_up


def score_wallflower(features: ContentFeatures) -> WallflowerAnalysisResult:
    richness = clamp(
        round_half_up(features.word_count / 50)
        + features.paragraphs * 5
        + features.headers * 3
    )
    visual = clamp(features.images * 15 + (20 if features.headers > 0 else 0) + 30)
    engagement = clamp(
        features.links * 10
        + (25 if features.word_count > 500 else 10)
        + (15 if features.paragraphs > 5 else 5)
        + 20
    )
    brand_presence = clamp(
        (30 if features.has_title else 0)
        + (20 if features.has_meta_description else 0)
        + (30 if features.word_count > 300 else 10)
        + (20 if features.images > 0 else 0)
    )

    return WallflowerAnalysisResult(
        content_richness_score=richness,
        visual_elements_score=visual,
        user_engagement_score=engagement,
        brand_presence_score=brand_presence,
        overall_score=average([richness, visual, engagement, brand_presence]),
    )
