"""Ordered binning of a numeric target into labelled categories."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

import numpy as np
import pandas as pd

from wine_tlbx.data.views import DatasetView
from wine_tlbx.errors import OutOfRangeError

from .base_analyser import BaseAnalyser


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategoryBins:
    r"""Contiguous bins over a bounded range with one label per interval.

    Intervals are right-open except the last one, which is closed on both ends:
    :math:`[e_0, e_1), [e_1, e_2), \dots, [e_{k-1}, e_k]`. The bins are therefore
    exhaustive over :math:`[e_0, e_k]`, and the maximum of the range is classified
    instead of being orphaned.

    Attributes:
        edges: Strictly increasing break points (``k + 1`` values for ``k`` labels).
        labels: Category labels in ascending order.
    """

    edges: tuple[float, ...]
    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        edges = tuple(float(e) for e in self.edges)
        labels = tuple(str(label) for label in self.labels)
        object.__setattr__(self, "edges", edges)
        object.__setattr__(self, "labels", labels)

        if len(edges) < 2:
            raise ValueError("At least two edges are required to define a bin.")
        if any(not math.isfinite(e) for e in edges):
            raise ValueError("Bin edges must be finite.")
        if any(b <= a for a, b in zip(edges, edges[1:])):
            raise ValueError(f"Bin edges must be strictly increasing, got {edges}.")
        if len(labels) != len(edges) - 1:
            raise ValueError(f"Expected {len(edges) - 1} labels for {len(edges)} edges, got {len(labels)}.")
        if len(set(labels)) != len(labels):
            raise ValueError(f"Bin labels must be unique, got {labels}.")

    @property
    def lower(self) -> float:
        return self.edges[0]

    @property
    def upper(self) -> float:
        return self.edges[-1]

    @property
    def dtype(self) -> pd.CategoricalDtype:
        """Ordered categorical dtype enumerating every label, empty or not."""
        return pd.CategoricalDtype(categories=list(self.labels), ordered=True)

    def codes(self, values: Sequence[float] | np.ndarray | pd.Series) -> np.ndarray:
        """Map values to bin indices; ``-1`` marks values outside the range (incl. NaN)."""
        arr = np.asarray(values, dtype=float)
        edges = np.asarray(self.edges)
        codes = np.searchsorted(edges, arr, side="right") - 1
        # closed upper boundary: the range maximum belongs to the last bin
        codes = np.where(arr == edges[-1], len(self.labels) - 1, codes)
        in_range = (arr >= edges[0]) & (arr <= edges[-1])
        return np.where(in_range, codes, -1)

    def label_for(self, value: float) -> str:
        """Return the label of the single bin containing ``value``.

        Raises:
            OutOfRangeError: If ``value`` is NaN or outside ``[lower, upper]``.
        """
        code = int(self.codes([value])[0])
        if code < 0:
            raise OutOfRangeError(
                f"Value {value!r} is outside the binned range [{self.lower:g}, {self.upper:g}].",
                values=[value],
            )
        return self.labels[code]


QUALITY_BINS = CategoryBins(edges=(0, 5, 7, 10), labels=("Low", "Medium", "High"))
"""Quality score bins: Low ``[0, 5)``, Medium ``[5, 7)``, High ``[7, 10]``."""


@dataclass(frozen=True)
class CategorizationResult:
    """Outputs of binning a target column.

    Attributes:
        labels: Ordered categorical Series aligned with the (retained) input index.
        counts: Observations per category in category order, zero for empty bins.
        excluded: Index of input rows dropped as out of range (``"exclude"`` policy only).
        bins: The bins that produced the labels.
    """

    labels: pd.Series
    counts: pd.Series
    excluded: pd.Index
    bins: CategoryBins

    @property
    def n_excluded(self) -> int:
        return len(self.excluded)


def categorize(
    values: Sequence[float] | pd.Series,
    bins: CategoryBins = QUALITY_BINS,
    *,
    on_out_of_range: Literal["raise", "exclude"] = "raise",
    name: str | None = None,
) -> CategorizationResult:
    """Bin ``values`` into the categories declared by ``bins``.

    Args:
        values: Numeric target values (a Series keeps its index).
        bins: Category bins to apply.
        on_out_of_range: ``"raise"`` fails the whole batch on the first out-of-range
            value; ``"exclude"`` drops such rows and reports them in ``excluded``.
        name: Name of the label Series (defaults to ``<series name>_category``).

    Returns:
        CategorizationResult with labels, per-category counts and excluded rows.

    Raises:
        OutOfRangeError: Under the ``"raise"`` policy if any value is outside the bins.
    """
    if on_out_of_range not in {"raise", "exclude"}:
        raise ValueError(f"Invalid on_out_of_range='{on_out_of_range}'. Use 'raise' or 'exclude'.")

    series = values if isinstance(values, pd.Series) else pd.Series(list(values), dtype=float)
    codes = bins.codes(series.to_numpy(dtype=float))
    out_mask = codes < 0

    if out_mask.any():
        offending = series[out_mask]
        if on_out_of_range == "raise":
            raise OutOfRangeError(
                f"{int(out_mask.sum())} value(s) outside the binned range [{bins.lower:g}, {bins.upper:g}]: "
                f"{offending.head(5).tolist()}",
                values=offending.tolist(),
            )
        logger.warning(
            "Excluding %d out-of-range value(s) from categorization (range [%g, %g])",
            int(out_mask.sum()),
            bins.lower,
            bins.upper,
        )

    kept_codes = codes[~out_mask]
    labels = pd.Series(
        pd.Categorical.from_codes(kept_codes, dtype=bins.dtype),
        index=series.index[~out_mask],
        name=name or (f"{series.name}_category" if series.name is not None else "category"),
    )
    counts = labels.value_counts(sort=False).reindex(list(bins.labels), fill_value=0).rename("count")

    return CategorizationResult(
        labels=labels,
        counts=counts,
        excluded=series.index[out_mask],
        bins=bins,
    )


def categorize_value(value: float, bins: CategoryBins = QUALITY_BINS) -> str:
    """Return the category label of a single value (see :meth:`CategoryBins.label_for`)."""
    return bins.label_for(value)


class QualityCategorizer(BaseAnalyser):
    """Bin the target column of a dataset view into ordered categories.

    Example:
        >>> from wine_tlbx.data import WineQualityDataset
        >>> ds = WineQualityDataset.from_csv()
        >>> cat = ds.make_categorizer().fit().result()
        >>> cat.counts.to_dict()
        {'Low': 63, 'Medium': 1319, 'High': 217}
    """

    def __init__(
        self,
        view: DatasetView,
        bins: CategoryBins = QUALITY_BINS,
        on_out_of_range: Literal["raise", "exclude"] = "raise",
    ) -> None:
        """Initialize the categorizer.

        Args:
            view: Dataset view with ``target_col`` set
            bins: Category bins to apply (default: quality Low/Medium/High)
            on_out_of_range: Policy for values outside the bins
        """
        if not view.target_col or view.target_col not in view.df.columns:
            raise ValueError("Dataset view has no target column configured.")
        self._view = view
        self.bins = bins
        self.on_out_of_range = on_out_of_range
        self._result: CategorizationResult | None = None

    def fit(self) -> "QualityCategorizer":
        """Categorize the target column.

        Returns:
            Self for method chaining.
        """
        self._result = categorize(
            self._view.df[self._view.target_col],
            self.bins,
            on_out_of_range=self.on_out_of_range,
        )
        return self

    def result(self) -> CategorizationResult:
        if self._result is None:
            raise ValueError("Must call fit() before result()")
        return self._result
