"""Data module for dataset classes."""

from .wine_quality_columns import WineQualityColumn as WQCol
from .wine_quality_dataset import WineQualityDataset


__all__ = ["WQCol", "WineQualityDataset"]
