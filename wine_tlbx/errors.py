"""Error and warning types raised by the wine toolbox."""

from collections.abc import Sequence


class SchemaError(ValueError):
    """Input table is missing a required column or holds non-numeric/missing values.

    Raised by the loader before any dataset object is created, so no partial
    result ever reaches an analyzer.
    """


class OutOfRangeError(ValueError):
    """A value fell outside the range covered by the declared category bins."""

    def __init__(self, message: str, values: Sequence[float] = ()) -> None:
        super().__init__(message)
        self.values: tuple[float, ...] = tuple(values)
        """Offending values, in input order."""


class DegenerateStatisticWarning(UserWarning):
    """A category has too few observations for quartile/variance statistics."""


__all__ = ["DegenerateStatisticWarning", "OutOfRangeError", "SchemaError"]
