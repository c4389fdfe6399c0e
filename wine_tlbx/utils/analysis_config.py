"""Shared analysis configuration (binning, extreme categories, scoring)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from wine_tlbx.analysis.categorizer import QUALITY_BINS, CategoryBins


@dataclass(frozen=True)
class AnalysisConfig:
    """Reusable defaults for the categorize -> summarize -> rank pipeline.

    Attributes:
        bins: Category bins applied to the quality score.
        low_category: Lower extreme category compared by the ranker.
        high_category: Upper extreme category compared by the ranker.
        location: Location statistic used for the separability gap.
        on_out_of_range: Policy for target values outside the bins.
        with_correlation: Attach Pearson r / p-value vs the raw target to each ranked feature.
    """

    bins: CategoryBins = field(default=QUALITY_BINS)
    low_category: str = "Low"
    high_category: str = "High"
    location: Literal["median", "mean"] = "median"
    on_out_of_range: Literal["raise", "exclude"] = "raise"
    with_correlation: bool = True

    def __post_init__(self) -> None:
        for label in (self.low_category, self.high_category):
            if label not in self.bins.labels:
                raise ValueError(f"Unknown category '{label}'. Expected one of {list(self.bins.labels)}.")
        if self.low_category == self.high_category:
            raise ValueError("low_category and high_category must differ.")


# Default configuration used by the dataset factories
DEFAULT_ANALYSIS_CFG = AnalysisConfig()


__all__ = ["DEFAULT_ANALYSIS_CFG", "AnalysisConfig"]
