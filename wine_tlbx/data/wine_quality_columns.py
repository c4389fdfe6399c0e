"""Column definitions for the red wine quality dataset."""

from .base_columns import BaseColumn, ColumnMetadata


class WineQualityColumn(BaseColumn):
    """Column names for the red variant of the [Wine Quality dataset](https://archive.ics.uci.edu/dataset/186/wine+quality) (Cortez et al., 2009).

    Columns:
    - ``id``: int - Row identifier (``X`` in the tidy CSV export; dropped on load)
    - ``fixed_acidity``: float - Tartaric acid (g/dm^3)
    - ``volatile_acidity``: float - Acetic acid (g/dm^3)
    - ``citric_acid``: float - Citric acid (g/dm^3)
    - ``residual_sugar``: float - Residual sugar (g/dm^3)
    - ``chlorides``: float - Sodium chloride (g/dm^3)
    - ``free_sulfur_dioxide``: float - Free SO2 (mg/dm^3)
    - ``total_sulfur_dioxide``: float - Total SO2 (mg/dm^3)
    - ``density``: float - Density (g/cm^3)
    - ``ph``: float - pH
    - ``sulphates``: float - Potassium sulphate (g/dm^3)
    - ``alcohol``: float - Alcohol (% by volume)
    - ``quality``: int - Median expert score between 0 and 10 (target variable)
    """

    # Identifier
    ID = "id"
    """Row identifier; not a feature."""

    # Features, in CSV header order
    FIXED_ACIDITY = "fixed_acidity"
    """Tartaric acid (g/dm^3)."""
    VOLATILE_ACIDITY = "volatile_acidity"
    """Acetic acid (g/dm^3); high levels give a vinegar taste."""
    CITRIC_ACID = "citric_acid"
    """Citric acid (g/dm^3); adds freshness."""
    RESIDUAL_SUGAR = "residual_sugar"
    """Residual sugar after fermentation (g/dm^3)."""
    CHLORIDES = "chlorides"
    """Sodium chloride (g/dm^3)."""
    FREE_SULFUR_DIOXIDE = "free_sulfur_dioxide"
    """Free SO2 (mg/dm^3)."""
    TOTAL_SULFUR_DIOXIDE = "total_sulfur_dioxide"
    """Free plus bound SO2 (mg/dm^3)."""
    DENSITY = "density"
    """Density (g/cm^3)."""
    PH = "ph"
    """pH."""
    SULPHATES = "sulphates"
    """Potassium sulphate (g/dm^3); SO2 contributor acting as antimicrobial."""
    ALCOHOL = "alcohol"
    """Alcohol (% by volume)."""

    # Target variable
    TARGET = "quality"
    """Median expert score between 0 and 10 (target variable)."""
    QUALITY = TARGET

    def metadata(self) -> ColumnMetadata:
        return _COLUMN_METADATA_WINE_QUALITY[self]


# Column metadata mapping; original names follow the UCI header
_COLUMN_METADATA_WINE_QUALITY: dict[WineQualityColumn, ColumnMetadata] = {
    WineQualityColumn.ID: ColumnMetadata(
        original_name="X",
        cleaned_name="id",
        dtype="int64",
        pretty_name="ID",
        role="identifier",
    ),
    WineQualityColumn.TARGET: ColumnMetadata(
        original_name="quality",
        cleaned_name="quality",
        dtype="int64",
        pretty_name="Quality (score 0-10)",
        role="target",
    ),
    WineQualityColumn.FIXED_ACIDITY: ColumnMetadata(
        original_name="fixed acidity",
        cleaned_name="fixed_acidity",
        dtype="float64",
        pretty_name="Fixed Acidity (g/dm³)",
        unit="g/dm³",
    ),
    WineQualityColumn.VOLATILE_ACIDITY: ColumnMetadata(
        original_name="volatile acidity",
        cleaned_name="volatile_acidity",
        dtype="float64",
        pretty_name="Volatile Acidity (g/dm³)",
        unit="g/dm³",
    ),
    WineQualityColumn.CITRIC_ACID: ColumnMetadata(
        original_name="citric acid",
        cleaned_name="citric_acid",
        dtype="float64",
        pretty_name="Citric Acid (g/dm³)",
        unit="g/dm³",
    ),
    WineQualityColumn.RESIDUAL_SUGAR: ColumnMetadata(
        original_name="residual sugar",
        cleaned_name="residual_sugar",
        dtype="float64",
        pretty_name="Residual Sugar (g/dm³)",
        unit="g/dm³",
    ),
    WineQualityColumn.CHLORIDES: ColumnMetadata(
        original_name="chlorides",
        cleaned_name="chlorides",
        dtype="float64",
        pretty_name="Chlorides (g/dm³)",
        unit="g/dm³",
    ),
    WineQualityColumn.FREE_SULFUR_DIOXIDE: ColumnMetadata(
        original_name="free sulfur dioxide",
        cleaned_name="free_sulfur_dioxide",
        dtype="float64",
        pretty_name="Free SO₂ (mg/dm³)",
        unit="mg/dm³",
    ),
    WineQualityColumn.TOTAL_SULFUR_DIOXIDE: ColumnMetadata(
        original_name="total sulfur dioxide",
        cleaned_name="total_sulfur_dioxide",
        dtype="float64",
        pretty_name="Total SO₂ (mg/dm³)",
        unit="mg/dm³",
    ),
    WineQualityColumn.DENSITY: ColumnMetadata(
        original_name="density",
        cleaned_name="density",
        dtype="float64",
        pretty_name="Density (g/cm³)",
        unit="g/cm³",
    ),
    WineQualityColumn.PH: ColumnMetadata(
        original_name="pH",
        cleaned_name="ph",
        dtype="float64",
        pretty_name="pH",
    ),
    WineQualityColumn.SULPHATES: ColumnMetadata(
        original_name="sulphates",
        cleaned_name="sulphates",
        dtype="float64",
        pretty_name="Sulphates (g/dm³)",
        unit="g/dm³",
    ),
    WineQualityColumn.ALCOHOL: ColumnMetadata(
        original_name="alcohol",
        cleaned_name="alcohol",
        dtype="float64",
        pretty_name="Alcohol (% vol)",
        unit="% vol",
    ),
}
