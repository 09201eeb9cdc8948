"""Pydantic models for feature sets and score reports."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContentFeatures(_CamelModel):
    word_count: int = Field(default=0, ge=0)
    paragraphs: int = Field(default=0, ge=0)
    headers: int = Field(default=0, ge=0)
    links: int = Field(default=0, ge=0)
    images: int = Field(default=0, ge=0)
    has_title: bool = False
    has_meta_description: bool = False
    content_length: int = Field(default=0, ge=0)


class SEOAnalysisResult(_CamelModel):
    title_score: int
    meta_description_score: int
    heading_structure_score: int
    content_length_score: int
    keyword_density_score: int
    internal_links_score: int
    image_optimization_score: int
    overall_score: int


class TechnicalAuditResult(_CamelModel):
    performance_score: int
    accessibility_score: int
    mobile_optimization_score: int
    security_score: int
    code_quality_score: int
    overall_score: int


class WallflowerAnalysisResult(_CamelModel):
    content_richness_score: int
    visual_elements_score: int
    user_engagement_score: int
    brand_presence_score: int
    overall_score: int


class ScoreBreakdown(_CamelModel):
    url: str
    features: ContentFeatures
    seo: SEOAnalysisResult
    technical: TechnicalAuditResult
    wallflower: WallflowerAnalysisResult


class DEScoreResult(_CamelModel):
    brand_score: int
    operations_score: int
    paid_score: int
    total_score: int
    breakdown: ScoreBreakdown
