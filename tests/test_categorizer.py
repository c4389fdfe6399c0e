"""Tests for quality categorization."""

import logging

import numpy as np
import pandas as pd
import pytest

from wine_tlbx.analysis.categorizer import (
    QUALITY_BINS,
    CategorizationResult,
    CategoryBins,
    QualityCategorizer,
    categorize,
    categorize_value,
)
from wine_tlbx.data.views import DatasetView
from wine_tlbx.errors import OutOfRangeError


class TestCategoryBins:
    """Test bin construction and scalar labelling."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, "Low"),
            (4.999, "Low"),
            (5, "Medium"),
            (6.999, "Medium"),
            (7, "High"),
            (10, "High"),
        ],
    )
    def test_boundaries(self, value: float, expected: str) -> None:
        """Right-open intervals, closed upper boundary on the last bin."""
        assert categorize_value(value) == expected

    def test_total_and_deterministic_over_range(self) -> None:
        """Every value in [0, 10] maps to exactly one label, the same one each time."""
        grid = np.linspace(0, 10, 1001)
        first = [categorize_value(v) for v in grid]
        second = [categorize_value(v) for v in grid]
        assert first == second
        assert set(first) == {"Low", "Medium", "High"}

    @pytest.mark.parametrize("value", [-0.001, 10.001, 11, float("nan")])
    def test_out_of_range_raises(self, value: float) -> None:
        with pytest.raises(OutOfRangeError):
            categorize_value(value)

    def test_dtype_is_ordered_with_all_labels(self) -> None:
        dtype = QUALITY_BINS.dtype
        assert dtype.ordered
        assert list(dtype.categories) == ["Low", "Medium", "High"]

    @pytest.mark.parametrize(
        ("edges", "labels", "match"),
        [
            ((0,), (), "At least two edges"),
            ((0, 5, 5, 10), ("a", "b", "c"), "strictly increasing"),
            ((0, 7, 5), ("a", "b"), "strictly increasing"),
            ((0, 5, 10), ("a",), "Expected 2 labels"),
            ((0, 5, 10), ("a", "a"), "unique"),
            ((0, float("inf")), ("a",), "finite"),
        ],
    )
    def test_invalid_bins(self, edges: tuple, labels: tuple, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            CategoryBins(edges=edges, labels=labels)

    def test_bins_are_frozen(self) -> None:
        with pytest.raises(AttributeError):
            QUALITY_BINS.labels = ("x", "y", "z")  # type: ignore[misc]


class TestCategorize:
    """Test batch categorization."""

    def test_labels_align_with_index(self) -> None:
        values = pd.Series([3, 5, 7, 8], index=[10, 11, 12, 13], name="quality")
        result = categorize(values)

        assert isinstance(result, CategorizationResult)
        assert result.labels.tolist() == ["Low", "Medium", "High", "High"]
        assert result.labels.index.tolist() == [10, 11, 12, 13]
        assert result.labels.name == "quality_category"
        assert isinstance(result.labels.dtype, pd.CategoricalDtype)

    def test_empty_category_still_enumerated(self) -> None:
        """A bin without observations reports zero instead of disappearing."""
        result = categorize([5, 6, 6, 7])
        assert result.counts.to_dict() == {"Low": 0, "Medium": 3, "High": 1}
        assert list(result.labels.cat.categories) == ["Low", "Medium", "High"]

    def test_counts_sum_to_input_size(self) -> None:
        values = pd.Series(np.random.default_rng(0).integers(0, 11, size=500))
        result = categorize(values)
        assert int(result.counts.sum()) == len(values)

    def test_raise_policy_fails_whole_batch(self) -> None:
        with pytest.raises(OutOfRangeError, match="2 value") as excinfo:
            categorize([5, 11, -1, 6])
        assert excinfo.value.values == (11.0, -1.0)

    def test_exclude_policy_reports_rows(self, caplog: pytest.LogCaptureFixture) -> None:
        values = pd.Series([5, 11, 7, -2], index=list("abcd"))
        with caplog.at_level(logging.WARNING, logger="wine_tlbx.analysis.categorizer"):
            result = categorize(values, on_out_of_range="exclude")

        assert result.excluded.tolist() == ["b", "d"]
        assert result.n_excluded == 2
        assert result.labels.index.tolist() == ["a", "c"]
        assert result.counts.to_dict() == {"Low": 0, "Medium": 1, "High": 1}
        assert "Excluding 2 out-of-range" in caplog.text

    def test_never_defaults_to_medium(self) -> None:
        result = categorize([12], on_out_of_range="exclude")
        assert len(result.labels) == 0
        assert "Medium" not in result.labels.tolist()

    def test_invalid_policy(self) -> None:
        with pytest.raises(ValueError, match="on_out_of_range"):
            categorize([5], on_out_of_range="clip")  # type: ignore[arg-type]

    def test_custom_bins(self) -> None:
        bins = CategoryBins(edges=(0, 50, 100), labels=("fail", "pass"))
        result = categorize([0, 49.9, 50, 100], bins)
        assert result.labels.tolist() == ["fail", "fail", "pass", "pass"]

    def test_input_not_mutated(self) -> None:
        values = pd.Series([3.0, 5.0, 7.0])
        snapshot = values.copy()
        categorize(values)
        pd.testing.assert_series_equal(values, snapshot)


class TestQualityCategorizer:
    """Test the analyzer wrapper."""

    @pytest.fixture
    def view(self) -> DatasetView:
        return DatasetView(
            df=pd.DataFrame({"quality": [3, 4, 5, 6, 7, 8]}),
            pretty_by_col={"quality": "Quality"},
            numeric_cols=["quality"],
            target_col="quality",
        )

    def test_fit_result(self, view: DatasetView) -> None:
        analyzer = QualityCategorizer(view)
        assert analyzer.fit() is analyzer
        assert analyzer.result().counts.to_dict() == {"Low": 2, "Medium": 2, "High": 2}

    def test_result_before_fit(self, view: DatasetView) -> None:
        with pytest.raises(ValueError, match=r"fit\(\)"):
            QualityCategorizer(view).result()

    def test_requires_target(self) -> None:
        view = DatasetView(df=pd.DataFrame({"x": [1.0]}), pretty_by_col={}, numeric_cols=["x"])
        with pytest.raises(ValueError, match="no target column"):
            QualityCategorizer(view)
