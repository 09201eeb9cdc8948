"""On-page SEO sub-scores."""

from __future__ import annotations

from .models import ContentFeatures, SEOAnalysisResult
from .utils import average, clamp, round_half_up


def _content_length_score(word_count: int) -> int:
    if word_count < 300:
        return clamp(round_half_up(word_count / 3))
    return clamp(60 + round_half_up((word_count - 300) / 50))


def score_seo(features: ContentFeatures) -> SEOAnalysisResult:
    title = clamp(60 + (40 if features.headers > 0 else 0)) if features.has_title else 20

    if features.has_meta_description:
        # Ideal meta description window is 160-320 characters
        in_window = 160 < features.content_length < 320
        meta_description = clamp(70 + (30 if in_window else 0))
    else:
        meta_description = 10

    heading_structure = clamp(features.headers * 15)
    content_length = _content_length_score(features.word_count)
    keyword_density = (
        clamp(50 + round_half_up(features.word_count / 100))
        if features.word_count > 100
        else 30
    )
    internal_links = clamp(features.links * 20)
    image_optimization = clamp(40 + features.images * 10) if features.images > 0 else 20

    return SEOAnalysisResult(
        title_score=title,
        meta_description_score=meta_description,
        heading_structure_score=heading_structure,
        content_length_score=content_length,
        keyword_density_score=keyword_density,
        internal_links_score=internal_links,
        image_optimization_score=image_optimization,
        overall_score=average([
            title,
            meta_description,
            heading_structure,
            content_length,
            keyword_density,
            internal_links,
            image_optimization,
        ]),
    )
