"""Test configuration for the wine toolbox."""

from pathlib import Path
import sys

import numpy as np
import pandas as pd
import pytest


# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

# Quality score distribution of the 1599-row red wine table.
REFERENCE_QUALITY_COUNTS: dict[int, int] = {3: 10, 4: 53, 5: 681, 6: 638, 7: 199, 8: 18}

DISCRIMINATING = ["volatile_acidity", "citric_acid", "sulphates", "alcohol"]
NON_DISCRIMINATING = [
    "fixed_acidity",
    "residual_sugar",
    "chlorides",
    "free_sulfur_dioxide",
    "total_sulfur_dioxide",
    "density",
    "ph",
]

# (raw header, base, shift per quality point, noise sd). The four discriminating features shift
# strongly; fixed acidity, density and pH drift weakly, as in the reference table.
_FEATURE_MODEL: dict[str, tuple[str, float, float, float]] = {
    "fixed_acidity": ("fixed.acidity", 8.3, 0.4, 1.7),
    "volatile_acidity": ("volatile.acidity", 0.53, -0.12, 0.08),
    "citric_acid": ("citric.acid", 0.27, 0.09, 0.08),
    "residual_sugar": ("residual.sugar", 2.5, 0.0, 1.4),
    "chlorides": ("chlorides", 0.087, 0.0, 0.015),
    "free_sulfur_dioxide": ("free.sulfur.dioxide", 15.9, 0.0, 10.0),
    "total_sulfur_dioxide": ("total.sulfur.dioxide", 46.0, 0.0, 32.0),
    "density": ("density", 0.9967, -0.0004, 0.0019),
    "ph": ("pH", 3.31, -0.035, 0.15),
    "sulphates": ("sulphates", 0.66, 0.06, 0.07),
    "alcohol": ("alcohol", 10.4, 0.6, 0.6),
}

# Every 7th Low row gets a chlorides spike: a heavy right tail that moves the Low mean
# far more than its median.
CHLORIDES_SPIKE = 0.8
CHLORIDES_SPIKE_EVERY = 7


def make_wine_frame(seed: int = 42) -> pd.DataFrame:
    """Synthetic table with the reference quality distribution and R-style headers."""
    rng = np.random.default_rng(seed)
    quality = np.repeat(list(REFERENCE_QUALITY_COUNTS), list(REFERENCE_QUALITY_COUNTS.values()))
    data: dict[str, np.ndarray] = {"X": np.arange(1, len(quality) + 1)}
    for raw_name, base, shift, sd in _FEATURE_MODEL.values():
        data[raw_name] = base + shift * (quality - 5.5) + rng.normal(0.0, sd, size=len(quality))
    low_rows = np.flatnonzero(quality < 5)
    data["chlorides"][low_rows[::CHLORIDES_SPIKE_EVERY]] += CHLORIDES_SPIKE
    data["quality"] = quality
    return pd.DataFrame(data)


@pytest.fixture(scope="session")
def wine_frame() -> pd.DataFrame:
    """Raw synthetic table as it would appear in the CSV export."""
    return make_wine_frame()


@pytest.fixture(scope="session")
def wine_csv(wine_frame: pd.DataFrame, tmp_path_factory: pytest.TempPathFactory) -> Path:
    csv_path = tmp_path_factory.mktemp("data") / "wineQualityReds.csv"
    wine_frame.to_csv(csv_path, index=False)
    return csv_path


@pytest.fixture(scope="session")
def wine_dataset(wine_csv: Path):
    """Synthetic dataset loaded through the real CSV loader."""
    from wine_tlbx.data import WineQualityDataset

    return WineQualityDataset.from_csv(csv_path=wine_csv)


@pytest.fixture(scope="session")
def reference_dataset():
    """Load the real red wine table; skipped when ``_data/wineQualityReds.csv`` is absent."""
    from wine_tlbx.data import WineQualityDataset
    from wine_tlbx.utils.paths import get_dataset_path

    try:
        csv_path = get_dataset_path("wine_quality_red")
    except FileNotFoundError:
        pytest.skip("Reference dataset _data/wineQualityReds.csv not available")
    return WineQualityDataset.from_csv(csv_path=csv_path)
