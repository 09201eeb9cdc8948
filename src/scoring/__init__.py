"""Digital Existence Score calculator."""

from .aggregate import compute_de_score
from .errors import InsufficientContentError, ScoringError
from .features import extract_features
from .models import (
    ContentFeatures,
    DEScoreResult,
    ScoreBreakdown,
    SEOAnalysisResult,
    TechnicalAuditResult,
    WallflowerAnalysisResult,
)
from .seo import score_seo
from .technical import score_technical
from .utils import average
from .wallflower import score_wallflower

__all__ = [
    "ContentFeatures",
    "DEScoreResult",
    "InsufficientContentError",
    "ScoreBreakdown",
    "ScoringError",
    "SEOAnalysisResult",
    "TechnicalAuditResult",
    "WallflowerAnalysisResult",
    "average",
    "compute_de_score",
    "extract_features",
    "score_seo",
    "score_technical",
    "score_wallflower",
]
