"""Loading and schema validation for the red wine quality dataset."""

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from wine_tlbx.errors import SchemaError
from wine_tlbx.utils.paths import get_dataset_path

from .base_dataset import BaseDataset
from .wine_quality_columns import WineQualityColumn as Col


logger = logging.getLogger(__name__)

# Row-id headers seen in the exports of this dataset (R's ``write.csv`` writes "X" or "").
_IDENTIFIER_ALIASES: frozenset[str] = frozenset({"x", "unnamed_0", "id", ""})


class WineQualityDataset(BaseDataset):
    """Loading and validation for the [Wine Quality (red) dataset](https://archive.ics.uci.edu/dataset/186/wine+quality).

    The loaded table is never modified. Derived columns (e.g. the quality category)
    are returned as new frames via :meth:`with_categories`.

    **Example workflow**:
    >>> from wine_tlbx.data import WineQualityDataset, WQCol
    >>> ds = WineQualityDataset.from_csv()
    >>> ds.categorize().counts.to_dict()
    {'Low': 63, 'Medium': 1319, 'High': 217}
    >>> summary = ds.make_summary_analyzer().fit().result()
    >>> summary.get(WQCol.ALCOHOL, "High").median
    >>> ranking = ds.make_discriminator_ranker().fit().result()
    >>> ranking.top(4)
    """

    Col = Col

    @classmethod
    def from_csv(
        cls,
        *,
        csv_path: str | Path | None = None,
        sep: str | None = None,
    ) -> "WineQualityDataset":
        """Load and validate the dataset from a delimited file with a header row.

        - Normalize column names (``fixed.acidity``, ``fixed acidity`` -> ``fixed_acidity``)
        - Drop the row identifier column
        - Validate presence, numeric type and completeness of all declared columns

        Args:
            csv_path: Path to the CSV file (defaults to ``_data/wineQualityReds.csv``)
            sep: Field delimiter; sniffed from the header when None (``,`` or ``;``)

        Returns:
            WineQualityDataset instance with validated data

        Raises:
            SchemaError: If a declared column is absent, non-numeric, incomplete, or the
                quality score is not integral.
        """
        csv_path = get_dataset_path("wine_quality_red") if csv_path is None else Path(csv_path)

        raw = pd.read_csv(csv_path, sep=sep, engine="python" if sep is None else "c")
        wine_df = raw.pipe(cls._normalize_col_names).pipe(cls._drop_identifier).pipe(cls._validate_schema)

        logger.info("Loaded %d rows x %d columns from %s", len(wine_df), wine_df.shape[1], csv_path)
        return cls(df=wine_df)

    @staticmethod
    def _normalize_col_names(df: pd.DataFrame) -> pd.DataFrame:
        """Standardize column names to match WineQualityColumn enum.

        Strip whitespace and quotes, convert to lowercase, replace spaces/dots/colons/hyphens with
        underscores, collapse multiple underscores.
        """
        return df.set_axis(
            df.columns.astype(str)
            .str.strip()
            .str.strip('"')
            .str.lower()
            .str.replace(r"[\s.:\-/]+", "_", regex=True)
            .str.replace(r"_+", "_", regex=True)
            .str.strip("_"),
            axis=1,
        )

    @staticmethod
    def _drop_identifier(df: pd.DataFrame) -> pd.DataFrame:
        """Drop the row-id column; it is not a feature."""
        id_cols = [col for col in df.columns if col in _IDENTIFIER_ALIASES]
        return df.drop(columns=id_cols)

    @staticmethod
    def _validate_schema(df: pd.DataFrame) -> pd.DataFrame:
        """Fail fast on missing, non-numeric, non-finite or incomplete declared columns.

        Returns:
            Frame restricted to the declared columns in enum order, each coerced to the
            dtype declared in its column metadata (integer columns must hold whole numbers).
        """
        required = Col.numeric_columns()
        missing = [col for col in required if col not in df.columns]
        if missing:
            raise SchemaError(f"Missing required column(s): {missing}. Found: {df.columns.tolist()}")

        converted = {}
        for col in required:
            values = pd.to_numeric(df[col], errors="coerce")
            bad = values.isna() & df[col].notna()
            if bad.any():
                raise SchemaError(
                    f"Column '{col}' has {int(bad.sum())} non-numeric value(s), e.g. {df.loc[bad, col].head(3).tolist()}",
                )
            if values.isna().any():
                raise SchemaError(f"Column '{col}' has {int(values.isna().sum())} missing value(s).")
            infinite = ~np.isfinite(values.to_numpy(dtype=float))
            if infinite.any():
                raise SchemaError(f"Column '{col}' has {int(infinite.sum())} non-finite value(s) (inf/-inf).")

            dtype = Col(col).dtype_name
            if pd.api.types.is_integer_dtype(dtype):
                if not np.allclose(values, np.round(values)):
                    raise SchemaError(f"Column '{col}' must hold integer values, got non-integral scores.")
                values = np.round(values)
            converted[col] = values.astype(dtype)

        return pd.DataFrame(converted, index=df.index).loc[:, required]
