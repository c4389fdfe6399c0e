"""Dataset base class: owns the validated frame and builds views and analyzers from it."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd
from sklearn.preprocessing import StandardScaler


if TYPE_CHECKING:
    from wine_tlbx.analysis.categorizer import CategorizationResult, QualityCategorizer
    from wine_tlbx.analysis.correlation_analyzer import CorrelationAnalyzer
    from wine_tlbx.analysis.discriminator_ranker import DiscriminatorRanker
    from wine_tlbx.analysis.summarizer import GroupedSummaryAnalyzer
    from wine_tlbx.utils.analysis_config import AnalysisConfig

from .base_columns import BaseColumn
from .views import DatasetView


CATEGORY_SUFFIX = "_category"


class BaseDataset(ABC):
    """Validated table plus the column enum describing it.

    The frame passed in is never modified: standardized copies, category labels
    and views are always new objects. Subclasses set ``Col`` and implement
    :meth:`from_csv`.
    """

    Col: type[BaseColumn]

    def __init__(self, df: pd.DataFrame | None = None) -> None:
        self._df = df
        self._df_standardized: pd.DataFrame | None = None

    @classmethod
    @abstractmethod
    def from_csv(cls, *, csv_path: str | Path | None = None, sep: str | None = None) -> "BaseDataset":
        """Read, normalize and validate a delimited file into a dataset instance."""
        ...

    @property
    def df(self) -> pd.DataFrame:
        """The validated table.

        Raises:
            ValueError: If nothing has been loaded yet.
        """
        if self._df is None:
            raise ValueError("Dataset not loaded. Use from_csv() to load data.")
        return self._df

    @property
    def df_pretty(self) -> pd.DataFrame:
        """Copy of :attr:`df` with display labels as headers."""
        return self.df.rename(columns=self.get_pretty_name)

    @property
    def numeric_cols(self) -> pd.Index:
        return self.df.select_dtypes(include=["number"]).columns

    @property
    def df_standardized(self) -> pd.DataFrame:
        """Z-scored features with the raw target alongside (computed once, then cached)."""
        if self._df_standardized is None:
            self._df_standardized = self.standardize()
        return self._df_standardized

    def standardize(self, df: pd.DataFrame | None = None) -> pd.DataFrame:
        """Scale every numeric feature to zero mean and unit variance.

        Uses [sklearn's StandardScaler](https://scikit-learn.org/stable/modules/generated/sklearn.preprocessing.StandardScaler.html).
        The target is copied over unscaled so quality bins still apply to it.
        """
        source = self.df if df is None else df
        features = self.feature_columns()
        scaled = pd.DataFrame(
            StandardScaler().fit_transform(source[features]),
            columns=features,
            index=source.index,
        )
        if self.Col.TARGET in source.columns:
            scaled[self.Col.TARGET] = source[self.Col.TARGET]
        return scaled

    def get_pretty_name(self, column_name: str) -> str:
        """Display label of a column; undeclared columns get a title-cased fallback."""
        try:
            return self.Col(column_name).pretty_name
        except ValueError:
            return column_name.replace("_", " ").title()

    def view(
        self,
        columns: Iterable[str] | None = None,
        standardized: bool = False,
        target_col: str | None = None,
    ) -> DatasetView:
        """Snapshot selected columns into a :class:`DatasetView`.

        Args:
            columns: Columns to copy (all when omitted)
            standardized: Take the columns from :attr:`df_standardized`
            target_col: Column the view marks as target

        Raises:
            ValueError: If a requested column does not exist.
        """
        frame = self.df_standardized if standardized else self.df
        selected = list(columns) if columns is not None else list(frame.columns)
        unknown = [col for col in selected if col not in frame.columns]
        if unknown:
            raise ValueError(f"Columns not found in dataset: {unknown}")

        numeric = set(self.numeric_cols)
        return DatasetView(
            df=frame[selected].copy(),
            pretty_by_col={col: self.get_pretty_name(col) for col in selected},
            numeric_cols=[col for col in selected if col in numeric],
            target_col=target_col,
            is_standardized=standardized,
        )

    def feature_columns(
        self,
        include_target: bool = False,
        extra_exclude: Iterable[str] | None = None,
    ) -> list[str]:
        """Numeric columns minus identifiers, the target (unless requested) and ``extra_exclude``."""
        skip = {*self.Col.identifier_columns(), *(extra_exclude or ())}
        if not include_target:
            skip.add(self.Col.TARGET)
        return [col for col in self.numeric_cols if col not in skip]

    def analyzer_view(
        self,
        columns: Iterable[str] | None = None,
        standardized: bool = False,
        include_target: bool = True,
    ) -> DatasetView:
        """View over the features (or ``columns``), with the target appended last when included."""
        selected = list(columns) if columns is not None else self.feature_columns()
        if include_target and self.Col.TARGET not in selected:
            selected.append(self.Col.TARGET)
        return self.view(
            columns=selected,
            standardized=standardized,
            target_col=self.Col.TARGET if include_target else None,
        )

    def describe_features(self, columns: Iterable[str] | None = None) -> pd.DataFrame:
        """Whole-table univariate summary (count, mean, std, min, quartiles, max) per column.

        Quartiles use linear interpolation, matching the per-category summaries.
        """
        cols = list(columns) if columns is not None else self.feature_columns(include_target=True)
        return self.df[cols].describe(percentiles=[0.25, 0.5, 0.75]).T

    # ------------------------------------------------------------------ categories
    def categorize(self, config: "AnalysisConfig | None" = None) -> "CategorizationResult":
        """Bin the target column into the configured ordered categories."""
        return self.make_categorizer(config=config).fit().result()

    def with_categories(self, config: "AnalysisConfig | None" = None) -> pd.DataFrame:
        """Return a new DataFrame with the target category appended as ``<target>_category``.

        The source DataFrame is left untouched. Rows excluded by an ``"exclude"``
        out-of-range policy carry a missing category.
        """
        labels = self.categorize(config=config).labels
        return self.df.assign(**{f"{self.Col.TARGET}{CATEGORY_SUFFIX}": labels.reindex(self.df.index)})

    # ------------------------------------------------------------------ analyzer factories
    def make_categorizer(self, config: "AnalysisConfig | None" = None) -> "QualityCategorizer":
        """Instantiate a categorizer for the target column."""
        from wine_tlbx.analysis.categorizer import QualityCategorizer
        from wine_tlbx.utils.analysis_config import DEFAULT_ANALYSIS_CFG

        config = config or DEFAULT_ANALYSIS_CFG
        return QualityCategorizer(
            self.view(columns=[self.Col.TARGET], target_col=self.Col.TARGET),
            bins=config.bins,
            on_out_of_range=config.on_out_of_range,
        )

    def make_summary_analyzer(
        self,
        columns: Iterable[str] | None = None,
        config: "AnalysisConfig | None" = None,
    ) -> "GroupedSummaryAnalyzer":
        """Instantiate a per-category summary analyzer over the feature columns."""
        from wine_tlbx.analysis.summarizer import GroupedSummaryAnalyzer

        view = self.analyzer_view(columns=columns, include_target=False)
        return GroupedSummaryAnalyzer(view, categories=self.categorize(config=config).labels)

    def make_discriminator_ranker(
        self,
        columns: Iterable[str] | None = None,
        config: "AnalysisConfig | None" = None,
    ) -> "DiscriminatorRanker":
        """Instantiate a ranker of features by low-vs-high category separability."""
        from wine_tlbx.analysis.discriminator_ranker import DiscriminatorRanker
        from wine_tlbx.utils.analysis_config import DEFAULT_ANALYSIS_CFG

        config = config or DEFAULT_ANALYSIS_CFG
        return DiscriminatorRanker(
            self.analyzer_view(columns=columns, include_target=True),
            categories=self.categorize(config=config).labels,
            low=config.low_category,
            high=config.high_category,
            location=config.location,
            with_correlation=config.with_correlation,
        )

    def make_correlation_analyzer(
        self,
        columns: Iterable[str] | None = None,
        standardized: bool = False,
        include_target: bool = True,
    ) -> "CorrelationAnalyzer":
        """Correlation analyzer over the features, with the raw target when included."""
        from wine_tlbx.analysis.correlation_analyzer import CorrelationAnalyzer

        view = self.analyzer_view(columns=columns, standardized=standardized, include_target=include_target)
        return CorrelationAnalyzer(view)
