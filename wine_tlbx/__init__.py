from .data import WineQualityDataset, WQCol
from .errors import DegenerateStatisticWarning, OutOfRangeError, SchemaError


__all__ = [
    "DegenerateStatisticWarning",
    "OutOfRangeError",
    "SchemaError",
    "WQCol",
    "WineQualityDataset",
]
