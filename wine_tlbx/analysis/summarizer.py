"""Per-category summary statistics for numeric features."""

import warnings
from collections.abc import Iterable
from dataclasses import asdict, dataclass

import pandas as pd

from wine_tlbx.data.views import DatasetView
from wine_tlbx.errors import DegenerateStatisticWarning

from .base_analyser import BaseAnalyser


@dataclass(frozen=True)
class CategorySummary:
    """Five-number summary plus mean/std of one feature within one category.

    Statistics that are undefined for the category size are ``None`` (never ``0``
    or ``NaN``): an empty category has only ``count``; a single observation
    additionally has ``mean``, ``min`` and ``max``.
    Quartiles use linear interpolation between order statistics.
    """

    feature: str
    category: str
    count: int
    mean: float | None = None
    std: float | None = None
    min: float | None = None
    q1: float | None = None
    median: float | None = None
    q3: float | None = None
    max: float | None = None

    @property
    def iqr(self) -> float | None:
        """Interquartile range ``Q3 - Q1`` (``None`` when quartiles are undefined)."""
        if self.q1 is None or self.q3 is None:
            return None
        return self.q3 - self.q1

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def is_degenerate(self) -> bool:
        """True when quartile and variance statistics are undefined (fewer than two rows)."""
        return self.count < 2


def summarize_values(values: pd.Series, *, feature: str, category: str) -> CategorySummary:
    """Summarize one group of observations.

    Emits :class:`DegenerateStatisticWarning` for groups with fewer than two rows.
    """
    clean = values.dropna().astype(float)
    n = int(clean.size)

    if n < 2:
        warnings.warn(
            f"Category '{category}' has {n} observation(s) for '{feature}'; quartiles and std are undefined.",
            DegenerateStatisticWarning,
            stacklevel=2,
        )
    if n == 0:
        return CategorySummary(feature=feature, category=category, count=0)
    if n == 1:
        value = float(clean.iloc[0])
        return CategorySummary(feature=feature, category=category, count=1, mean=value, min=value, max=value)

    q1, median, q3 = clean.quantile([0.25, 0.5, 0.75], interpolation="linear").tolist()
    return CategorySummary(
        feature=feature,
        category=category,
        count=n,
        mean=float(clean.mean()),
        std=float(clean.std(ddof=1)),
        min=float(clean.min()),
        q1=float(q1),
        median=float(median),
        q3=float(q3),
        max=float(clean.max()),
    )


def summarize_feature(
    values: pd.Series,
    categories: pd.Series,
    *,
    feature: str | None = None,
) -> list[CategorySummary]:
    """Summarize ``values`` per category, one record per declared category.

    Args:
        values: Feature values.
        categories: Categorical labels aligned on the index of ``values``. Rows missing
            from ``categories`` (e.g. excluded as out of range) are ignored.
        feature: Feature name recorded in the summaries (defaults to ``values.name``).

    Returns:
        List of CategorySummary in category order; empty categories are included.
    """
    feature = feature or str(values.name)
    aligned = values.loc[values.index.intersection(categories.index)]
    labels = categories.loc[aligned.index]
    order = list(labels.cat.categories) if isinstance(labels.dtype, pd.CategoricalDtype) else sorted(labels.unique())

    return [
        summarize_values(aligned[labels == category], feature=feature, category=str(category))
        for category in order
    ]


@dataclass(frozen=True)
class SummaryResult:
    """Per-feature, per-category summaries.

    Attributes:
        records: Summaries ordered by feature (view order) then category order.
        pretty_by_col: Mapping from raw feature names to presentation labels.
    """

    records: tuple[CategorySummary, ...]
    pretty_by_col: dict[str, str]

    @property
    def features(self) -> list[str]:
        return list(dict.fromkeys(rec.feature for rec in self.records))

    def for_feature(self, feature: str) -> dict[str, CategorySummary]:
        """Return ``{category: summary}`` for one feature."""
        found = {rec.category: rec for rec in self.records if rec.feature == feature}
        if not found:
            raise ValueError(f"No summaries for feature '{feature}'.")
        return found

    def get(self, feature: str, category: str) -> CategorySummary:
        by_category = self.for_feature(feature)
        if category not in by_category:
            raise ValueError(f"Unknown category '{category}'. Expected one of {list(by_category)}.")
        return by_category[category]

    def to_frame(self) -> pd.DataFrame:
        """Tidy table with one row per (feature, category); undefined statistics are ``<NA>``."""
        stat_cols = ["mean", "std", "min", "q1", "median", "q3", "max"]
        frame = pd.DataFrame([asdict(rec) for rec in self.records], columns=["feature", "category", "count", *stat_cols])
        return frame.astype({"count": "int64", **dict.fromkeys(stat_cols, "Float64")}).assign(
            iqr=lambda d: d["q3"] - d["q1"],
        )


class GroupedSummaryAnalyzer(BaseAnalyser):
    """Summarize every numeric feature of a view per category.

    Example:
        >>> from wine_tlbx.data import WineQualityDataset
        >>> ds = WineQualityDataset.from_csv()
        >>> summary = ds.make_summary_analyzer().fit().result()
        >>> summary.get("alcohol", "High").median
    """

    def __init__(
        self,
        view: DatasetView,
        categories: pd.Series,
        features: Iterable[str] | None = None,
    ) -> None:
        """Initialize the summary analyzer.

        Args:
            view: Dataset view holding the feature columns
            categories: Categorical labels aligned on the view's index
            features: Optional subset of features (defaults to the view's numeric columns)
        """
        self._view = view
        self._categories = categories
        self._features = list(features) if features is not None else list(view.numeric_cols)
        missing = [f for f in self._features if f not in view.df.columns]
        if missing:
            raise ValueError(f"Features not found in view: {missing}")
        self._records: tuple[CategorySummary, ...] | None = None

    def fit(self) -> "GroupedSummaryAnalyzer":
        """Compute summaries for each feature.

        Returns:
            Self for method chaining.
        """
        self._records = tuple(
            rec
            for feature in self._features
            for rec in summarize_feature(self._view.df[feature], self._categories, feature=feature)
        )
        return self

    def result(self) -> SummaryResult:
        if self._records is None:
            raise ValueError("Must call fit() before result()")
        return SummaryResult(
            records=self._records,
            pretty_by_col={f: self._view.pretty_by_col.get(f, f) for f in self._features},
        )
