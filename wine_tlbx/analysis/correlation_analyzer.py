"""Pearson correlations among wine features and against the quality score."""

from dataclasses import dataclass
from typing import Self

import numpy as np
import pandas as pd
from scipy import stats

from wine_tlbx.data.views import DatasetView

from .base_analyser import BaseAnalyser


TARGET_CORR_COLUMNS = ["feature", "correlation", "p_value", "n"]


@dataclass(frozen=True)
class CorrelationResult:
    """Correlation outputs of one view.

    Attributes:
        matrix: Pearson matrix over the numeric columns of the view (target included).
        pretty_by_col: Display labels keyed by column name.
        feature_pairs: Upper-triangle pairs (`feature_a`, `feature_b`, `correlation`,
            `abs_correlation`, `pair`), strongest first.
        target_correlations: Per-feature r against the target with `p_value` and pairwise `n`;
            ``None`` when the view has no target.
    """

    matrix: pd.DataFrame
    pretty_by_col: dict[str, str]
    feature_pairs: pd.DataFrame
    target_correlations: pd.DataFrame | None = None


def pearson_with_p(x: pd.Series, y: pd.Series) -> tuple[float, float, int]:
    """Pearson r and two-sided p-value on the complete pairs of ``x`` and ``y``.

    Fewer than two complete pairs give ``(nan, nan, n)``.
    """
    pair = pd.concat([x, y], axis=1).dropna()
    n = len(pair)
    if n < 2:
        return np.nan, np.nan, n
    res = stats.pearsonr(pair.iloc[:, 0], pair.iloc[:, 1])
    return float(res.statistic), float(res.pvalue), n


class CorrelationAnalyzer(BaseAnalyser):
    """Correlation matrix, strongest pairs and feature-vs-quality tests for a view.

    Example:
        >>> from wine_tlbx.data import WineQualityDataset
        >>> ds = WineQualityDataset.from_csv()
        >>> corr = ds.make_correlation_analyzer().fit().result()
        >>> corr.target_correlations.head(4)
    """

    def __init__(self, view: DatasetView):
        self._view = view
        self._matrix: pd.DataFrame | None = None

    def get_correlation_matrix(self) -> pd.DataFrame:
        """Pearson matrix over the numeric columns (pairwise complete observations)."""
        if self._matrix is None:
            self._matrix = self._view.df.select_dtypes(include=["number"]).corr(method="pearson")
        return self._matrix

    def get_top_correlated_pairs(self, n: int = 20) -> pd.DataFrame:
        """The ``n`` feature pairs with the largest ``|r|``.

        Only the strict upper triangle is considered, so every pair appears once.
        """
        matrix = self.get_correlation_matrix()
        rows, cols = np.triu_indices(len(matrix.columns), k=1)
        pairs = pd.DataFrame(
            {
                "feature_a": matrix.index[rows].astype(str),
                "feature_b": matrix.columns[cols].astype(str),
                "correlation": matrix.to_numpy()[rows, cols],
            },
        ).dropna(subset=["correlation"])
        pairs["abs_correlation"] = pairs["correlation"].abs()
        pairs["pair"] = pairs["feature_a"] + " vs " + pairs["feature_b"]
        return pairs.nlargest(n, "abs_correlation").reset_index(drop=True)

    def get_target_correlations(self) -> pd.DataFrame:
        """Correlation of every numeric feature with the target, most positive first.

        Each feature is tested on its complete pairs with the target using
        [scipy.stats.pearsonr](https://docs.scipy.org/doc/scipy/reference/generated/scipy.stats.pearsonr.html).

        Raises:
            ValueError: If the view has no target or the target is not numeric.
        """
        target_col = self._view.target_col
        if not target_col:
            raise ValueError("Dataset view has no target column configured.")
        numeric = self._view.df.select_dtypes(include=["number"])
        if target_col not in numeric.columns:
            raise ValueError(f"Target column '{target_col}' not found in data")

        target = numeric[target_col]
        rows = [
            (feature, *pearson_with_p(numeric[feature], target)) for feature in numeric.columns if feature != target_col
        ]
        return (
            pd.DataFrame(rows, columns=TARGET_CORR_COLUMNS)
            .sort_values("correlation", ascending=False)
            .reset_index(drop=True)
        )

    def fit(self) -> Self:
        self.get_correlation_matrix()
        return self

    def result(self, *, top_n_pairs: int = 20) -> CorrelationResult:
        if self._matrix is None:
            raise ValueError("Must call fit() before result()")
        has_target = bool(self._view.target_col) and self._view.target_col in self._matrix.columns
        return CorrelationResult(
            matrix=self._matrix,
            pretty_by_col=dict(self._view.pretty_by_col),
            feature_pairs=self.get_top_correlated_pairs(n=top_n_pairs),
            target_correlations=self.get_target_correlations() if has_target else None,
        )
