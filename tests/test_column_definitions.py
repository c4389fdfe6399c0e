"""Tests for column definition modules."""

import pytest

from wine_tlbx.data.base_columns import ColumnMetadata
from wine_tlbx.data.wine_quality_columns import WineQualityColumn


class TestColumnMetadata:
    """Test ColumnMetadata dataclass."""

    def test_column_metadata_creation(self) -> None:
        metadata = ColumnMetadata(
            original_name="free sulfur dioxide",
            cleaned_name="free_sulfur_dioxide",
            dtype="float64",
            pretty_name="Free SO₂ (mg/dm³)",
            unit="mg/dm³",
        )
        assert metadata.cleaned_name == "free_sulfur_dioxide"
        assert metadata.unit == "mg/dm³"

    def test_column_metadata_is_frozen(self) -> None:
        metadata = ColumnMetadata(original_name="pH", cleaned_name="ph", dtype="float64", pretty_name="pH")
        with pytest.raises(AttributeError):
            metadata.original_name = "Changed"  # type: ignore[misc]


class TestWineQualityColumn:
    """Test WineQualityColumn enum."""

    def test_target_column(self) -> None:
        assert WineQualityColumn.TARGET.value == "quality"
        assert WineQualityColumn.QUALITY is WineQualityColumn.TARGET

    def test_enum_values_are_snake_case(self) -> None:
        for col in WineQualityColumn:
            assert col.value.islower()
            assert " " not in col.value

    def test_every_member_has_metadata(self) -> None:
        for col in WineQualityColumn:
            metadata = col.metadata()
            assert isinstance(metadata, ColumnMetadata)
            assert metadata.cleaned_name == col.value

    def test_properties(self) -> None:
        assert WineQualityColumn.PH.original_name == "pH"
        assert WineQualityColumn.ALCOHOL.pretty_name == "Alcohol (% vol)"
        assert WineQualityColumn.TARGET.dtype_name == "int64"
        assert WineQualityColumn.DENSITY.unit == "g/cm³"

    def test_numeric_columns(self) -> None:
        numeric = WineQualityColumn.numeric_columns()
        assert len(numeric) == 12
        assert numeric[0] == "fixed_acidity"
        assert numeric[-1] == "quality"
        assert "id" not in numeric

    def test_declared_dtypes(self) -> None:
        dtypes = {col.value: col.dtype_name for col in WineQualityColumn}
        assert dtypes.pop("quality") == "int64"
        assert dtypes.pop("id") == "int64"
        assert set(dtypes.values()) == {"float64"}

    def test_identifier_columns(self) -> None:
        assert WineQualityColumn.identifier_columns() == ["id"]

    def test_roles_drive_column_groups(self) -> None:
        assert WineQualityColumn.ID.metadata().role == "identifier"
        assert WineQualityColumn.TARGET.metadata().role == "target"
        assert WineQualityColumn.ALCOHOL.metadata().role == "feature"
