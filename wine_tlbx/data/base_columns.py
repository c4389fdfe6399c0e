"""Column enums and per-column metadata shared by all datasets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal


ColumnRole = Literal["feature", "target", "identifier"]


@dataclass(frozen=True)
class ColumnMetadata:
    """Static description of one column.

    Attributes:
        original_name: Header as written in the source file (before normalization).
        cleaned_name: Normalized snake_case name; equals the enum value.
        dtype: pandas dtype the loader coerces the column to.
        pretty_name: Label used in report tables.
        unit: Measurement unit, empty when dimensionless.
        role: Whether the column is a feature, the target, or a row identifier.
    """

    original_name: str
    cleaned_name: str
    dtype: str
    pretty_name: str
    unit: str = ""
    role: ColumnRole = "feature"


class BaseColumn(StrEnum):
    """StrEnum of the columns a dataset declares.

    Members compare equal to their cleaned names, so they can index DataFrames
    directly. A subclass declares a ``TARGET`` member and maps every member to
    :class:`ColumnMetadata` via :meth:`metadata`; the column groups below are
    derived from the metadata roles.
    """

    TARGET: str

    def metadata(self) -> ColumnMetadata:
        raise NotImplementedError(f"{type(self).__name__} does not provide column metadata")

    @classmethod
    def numeric_columns(cls) -> list[str]:
        """Features and target, in declaration order (identifiers excluded)."""
        return [col.value for col in cls if col.metadata().role != "identifier"]

    @classmethod
    def identifier_columns(cls) -> list[str]:
        return [col.value for col in cls if col.metadata().role == "identifier"]

    @property
    def pretty_name(self) -> str:
        return self.metadata().pretty_name

    @property
    def original_name(self) -> str:
        """Header of this column in the raw CSV."""
        return self.metadata().original_name

    @property
    def dtype_name(self) -> str:
        return self.metadata().dtype

    @property
    def unit(self) -> str:
        return self.metadata().unit
