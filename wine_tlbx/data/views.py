"""Read-only column selections handed from datasets to analyzers."""

from collections.abc import Mapping
from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class DatasetView:
    """Frozen bundle of a frame copy and the metadata analyzers need.

    Attributes:
        df: Copy of the selected columns; analyzers read it and never write to it.
        pretty_by_col: Display label per column for report tables.
        numeric_cols: Numeric columns of ``df`` in selection order (may include the target).
        target_col: Column holding the quality score, if the view carries one.
        is_standardized: Whether the feature columns were z-scored.
    """

    df: pd.DataFrame
    pretty_by_col: Mapping[str, str]
    numeric_cols: list[str]
    target_col: str | None = None
    is_standardized: bool | None = None

    @property
    def features(self) -> pd.DataFrame:
        """Numeric columns without the target (all columns if none are marked numeric)."""
        cols = [c for c in self.numeric_cols if c != self.target_col] or list(self.df.columns)
        return self.df[cols]

    @property
    def target(self) -> pd.Series:
        if not self.target_col:
            raise ValueError("Dataset view has no target column configured.")
        return self.df[self.target_col]
