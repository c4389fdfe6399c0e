"""Analysis modules: categorization, per-category summaries, separability ranking."""

from .categorizer import (
    QUALITY_BINS,
    CategorizationResult,
    CategoryBins,
    QualityCategorizer,
    categorize,
    categorize_value,
)
from .correlation_analyzer import CorrelationAnalyzer, CorrelationResult
from .discriminator_ranker import (
    DiscriminatorRanker,
    FeatureSeparability,
    RankingResult,
    rank_features,
    separability,
)
from .summarizer import (
    CategorySummary,
    GroupedSummaryAnalyzer,
    SummaryResult,
    summarize_feature,
    summarize_values,
)


__all__ = [
    "QUALITY_BINS",
    "CategorizationResult",
    "CategoryBins",
    "CategorySummary",
    "CorrelationAnalyzer",
    "CorrelationResult",
    "DiscriminatorRanker",
    "FeatureSeparability",
    "GroupedSummaryAnalyzer",
    "QualityCategorizer",
    "RankingResult",
    "SummaryResult",
    "categorize",
    "categorize_value",
    "rank_features",
    "separability",
    "summarize_feature",
    "summarize_values",
]
