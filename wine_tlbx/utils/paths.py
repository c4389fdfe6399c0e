from pathlib import Path
from typing import Literal


__all__ = ["get_data_dir", "get_dataset_path"]


# Short keys for the tables shipped in ``_data/``
_KNOWN_DATASETS: dict[str, str] = {
    "wine_quality_red": "wineQualityReds.csv",
}


def get_data_dir() -> Path:
    """Return the repository's ``_data/`` directory.

    Raises:
        FileNotFoundError: If the directory does not exist.
    """
    data_dir = (Path(__file__).parents[2] / "_data").resolve()
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Data directory not found at {data_dir}")
    return data_dir


def get_dataset_path(filename: Literal["wine_quality_red"] | str) -> Path:  # noqa: PYI051
    """Resolve a dataset key (``"wine_quality_red"``) or a file name inside ``_data/``.

    Raises:
        FileNotFoundError: If the resolved file does not exist.
    """
    path = get_data_dir() / _KNOWN_DATASETS.get(filename, filename)
    if not path.is_file():
        raise FileNotFoundError(f"Dataset file '{filename}' not found at {path}")
    return path
