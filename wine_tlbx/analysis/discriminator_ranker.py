"""Rank features by how well they separate two extreme categories."""

import logging
import math
import warnings
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import asdict, dataclass, replace
from typing import Literal

import pandas as pd

from wine_tlbx.data.views import DatasetView
from wine_tlbx.errors import DegenerateStatisticWarning

from .base_analyser import BaseAnalyser
from .summarizer import CategorySummary, summarize_feature


logger = logging.getLogger(__name__)

Location = Literal["median", "mean"]


@dataclass(frozen=True)
class FeatureSeparability:
    """Separability of one feature between the low and high extreme categories.

    Attributes:
        feature: Feature name.
        score: ``|loc_high - loc_low| / pooled_iqr``; ``inf`` for a positive gap with zero
            pooled IQR, ``0.0`` when the statistics are undefined. Never ``NaN``.
        iqr_non_overlap: True when the two interquartile ranges are disjoint.
        degenerate: True when either category has fewer than two rows, zero variance or zero IQR.
        gap: Absolute difference of the location statistic (``None`` if undefined).
        pooled_iqr: Mean of the two IQRs (``None`` if undefined).
        correlation: Pearson r of the feature against the raw (non-binned) target.
        p_value: Two-sided p-value of ``correlation``; reported only, never used for ranking.
    """

    feature: str
    score: float
    iqr_non_overlap: bool
    degenerate: bool = False
    gap: float | None = None
    pooled_iqr: float | None = None
    correlation: float | None = None
    p_value: float | None = None

    def as_triple(self) -> tuple[str, float, bool]:
        return self.feature, self.score, self.iqr_non_overlap


def separability(
    low: CategorySummary,
    high: CategorySummary,
    *,
    location: Location = "median",
) -> FeatureSeparability:
    r"""Score how far apart and how non-overlapping two category distributions are.

    :math:`s = |\ell_{high} - \ell_{low}| / \tfrac{1}{2}(IQR_{low} + IQR_{high})`
    where :math:`\ell` is the category median (robust default) or mean.

    The pooled IQR is guarded: a zero spread yields ``inf`` for a positive gap and
    ``0.0`` otherwise, and the feature is flagged ``degenerate``.

    Args:
        low: Summary of the feature in the low category.
        high: Summary of the feature in the high category.
        location: ``"median"`` or ``"mean"``.

    Returns:
        FeatureSeparability for ``low.feature``.
    """
    if location not in {"median", "mean"}:
        raise ValueError(f"Invalid location='{location}'. Use 'median' or 'mean'.")
    if low.feature != high.feature:
        raise ValueError(f"Summaries belong to different features: '{low.feature}' vs '{high.feature}'.")

    feature = low.feature
    loc_low, loc_high = getattr(low, location), getattr(high, location)
    iqr_low, iqr_high = low.iqr, high.iqr

    if any(v is None or not math.isfinite(v) for v in (loc_low, loc_high, iqr_low, iqr_high)):
        warnings.warn(
            f"Cannot score '{feature}': undefined or non-finite statistics ('{low.category}' has {low.count} "
            f"and '{high.category}' has {high.count} observation(s)).",
            DegenerateStatisticWarning,
            stacklevel=2,
        )
        return FeatureSeparability(feature=feature, score=0.0, iqr_non_overlap=False, degenerate=True)

    gap = abs(loc_high - loc_low)
    pooled_iqr = (iqr_low + iqr_high) / 2
    zero_spread = low.std == 0 or high.std == 0 or iqr_low == 0 or iqr_high == 0

    if pooled_iqr > 0:
        score = gap / pooled_iqr
    else:
        score = math.inf if gap > 0 else 0.0

    return FeatureSeparability(
        feature=feature,
        score=score,
        iqr_non_overlap=low.q3 < high.q1 or high.q3 < low.q1,
        degenerate=zero_spread,
        gap=gap,
        pooled_iqr=pooled_iqr,
    )


def _sort_key(item: FeatureSeparability) -> tuple[float, bool, str]:
    return -item.score, not item.iqr_non_overlap, item.feature


def rank_features(
    summaries_by_feature: Mapping[str, Mapping[str, CategorySummary]],
    *,
    low: str = "Low",
    high: str = "High",
    location: Location = "median",
) -> list[FeatureSeparability]:
    """Score each feature and order by descending separability.

    Ties are broken by the IQR non-overlap flag (disjoint first), then by feature name,
    so the order is total and reproducible.

    Args:
        summaries_by_feature: ``{feature: {category: CategorySummary}}``.
        low: Name of the low extreme category.
        high: Name of the high extreme category.
        location: Location statistic for the gap.

    Returns:
        Features ordered from most to least discriminating.
    """
    scored = []
    for feature, by_category in summaries_by_feature.items():
        missing = [c for c in (low, high) if c not in by_category]
        if missing:
            raise ValueError(f"Summaries for '{feature}' lack categories {missing}.")
        item = separability(by_category[low], by_category[high], location=location)
        logger.debug("separability %s: score=%.4f non_overlap=%s", feature, item.score, item.iqr_non_overlap)
        scored.append(item)
    return sorted(scored, key=_sort_key)


@dataclass(frozen=True)
class RankingResult:
    """Ordered feature separability between two extreme categories.

    Attributes:
        ranking: FeatureSeparability records, most discriminating first.
        low_category: Low extreme category used for scoring.
        high_category: High extreme category used for scoring.
        location: Location statistic used for the gap.
        pretty_by_col: Mapping from raw feature names to presentation labels.
    """

    ranking: tuple[FeatureSeparability, ...]
    low_category: str
    high_category: str
    location: Location
    pretty_by_col: dict[str, str]

    def triples(self) -> list[tuple[str, float, bool]]:
        """Return ``(feature, score, iqr_non_overlap)`` in rank order."""
        return [item.as_triple() for item in self.ranking]

    def top(self, n: int) -> list[str]:
        """Names of the ``n`` most discriminating features."""
        return [item.feature for item in self.ranking[:n]]

    def to_frame(self) -> pd.DataFrame:
        return (
            pd.DataFrame([asdict(item) for item in self.ranking], columns=list(FeatureSeparability.__dataclass_fields__))
            .assign(
                rank=lambda d: range(1, len(d) + 1),
                pretty_name=lambda d: d.feature.map(lambda f: self.pretty_by_col.get(f, f)),
            )
            .set_index("rank")
        )


class DiscriminatorRanker(BaseAnalyser):
    """Rank view features by separability of the low vs high target categories.

    The ranking is descriptive. Pearson correlation against the raw target is
    attached as corroborating evidence but does not influence the order.

    Example:
        >>> from wine_tlbx.data import WineQualityDataset
        >>> ds = WineQualityDataset.from_csv()
        >>> ranking = ds.make_discriminator_ranker().fit().result()
        >>> ranking.top(4)
    """

    def __init__(
        self,
        view: DatasetView,
        categories: pd.Series,
        low: str = "Low",
        high: str = "High",
        location: Location = "median",
        with_correlation: bool = True,
        features: Iterable[str] | None = None,
    ) -> None:
        """Initialize the ranker.

        Args:
            view: Dataset view holding the features (and the target, for correlations)
            categories: Categorical labels aligned on the view's index
            low: Low extreme category (default: "Low")
            high: High extreme category (default: "High")
            location: Location statistic for the gap (default: "median")
            with_correlation: Attach Pearson r / p-value against ``view.target_col``
            features: Optional subset of features (defaults to numeric non-target columns)
        """
        if location not in {"median", "mean"}:
            raise ValueError(f"Invalid location='{location}'. Use 'median' or 'mean'.")
        declared = _declared_categories(categories)
        for label in (low, high):
            if label not in declared:
                raise ValueError(f"Unknown category '{label}'. Expected one of {declared}.")

        self._view = view
        self._categories = categories
        self.low = low
        self.high = high
        self.location = location
        self.with_correlation = with_correlation
        self._features: Sequence[str] = (
            list(features)
            if features is not None
            else [c for c in view.numeric_cols if c != view.target_col]
        )
        self._ranking: list[FeatureSeparability] | None = None

    def fit(self) -> "DiscriminatorRanker":
        """Summarize each feature per category and rank by separability.

        Returns:
            Self for method chaining.
        """
        summaries = {
            feature: {
                rec.category: rec
                for rec in summarize_feature(self._view.df[feature], self._categories, feature=feature)
            }
            for feature in self._features
        }
        ranking = rank_features(summaries, low=self.low, high=self.high, location=self.location)

        if self.with_correlation and self._view.target_col:
            ranking = self._attach_correlations(ranking)

        logger.info(
            "Ranked %d features (%s vs %s, location=%s); top: %s",
            len(ranking),
            self.low,
            self.high,
            self.location,
            ", ".join(item.feature for item in ranking[:4]),
        )
        self._ranking = ranking
        return self

    def _attach_correlations(self, ranking: list[FeatureSeparability]) -> list[FeatureSeparability]:
        from wine_tlbx.analysis.correlation_analyzer import CorrelationAnalyzer  # noqa: PLC0415

        columns = [*self._features, self._view.target_col]
        sub_view = DatasetView(
            df=self._view.df.loc[:, columns],
            pretty_by_col=self._view.pretty_by_col,
            numeric_cols=columns,
            target_col=self._view.target_col,
        )
        target_corr = CorrelationAnalyzer(sub_view).get_target_correlations().set_index("feature")
        return [
            replace(
                item,
                correlation=float(target_corr.at[item.feature, "correlation"]),
                p_value=float(target_corr.at[item.feature, "p_value"]),
            )
            for item in ranking
        ]

    def result(self) -> RankingResult:
        if self._ranking is None:
            raise ValueError("Must call fit() before result()")
        return RankingResult(
            ranking=tuple(self._ranking),
            low_category=self.low,
            high_category=self.high,
            location=self.location,
            pretty_by_col={f: self._view.pretty_by_col.get(f, f) for f in self._features},
        )


def _declared_categories(categories: pd.Series) -> list[str]:
    if isinstance(categories.dtype, pd.CategoricalDtype):
        return [str(c) for c in categories.cat.categories]
    return sorted(str(c) for c in categories.unique())
