"""Utility path resolution tests."""

import pytest

from wine_tlbx.utils.paths import get_data_dir, get_dataset_path


def test_get_data_dir() -> None:
    data_dir = get_data_dir()
    assert data_dir.is_dir()
    assert data_dir.name == "_data"


def test_get_dataset_path_unknown_file() -> None:
    with pytest.raises(FileNotFoundError, match="not_a_dataset.csv"):
        get_dataset_path("not_a_dataset.csv")


def test_get_dataset_path_wine_quality(reference_dataset) -> None:
    """Ensure real dataset path resolution works (skipped without the CSV)."""
    path = get_dataset_path("wine_quality_red")
    assert path.parent == get_data_dir()
    assert path.name == "wineQualityReds.csv"
