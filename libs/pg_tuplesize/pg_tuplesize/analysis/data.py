"""Data types for tuple analysis."""

from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Row(BaseModel):
    """A single row as an ordered column name -> value mapping.

    The primary key column is tracked outside the row payload and
    only counts toward the null bitmap.
    """

    values: dict[str, Any] = Field(..., description="Column values in attribute order")
    primary_key: str = Field("id", description="Primary key column name")

    @classmethod
    def from_mapping(cls, mapping, primary_key: str = "id") -> "Row":
        """Build a Row from any mapping, e.g. a SQLAlchemy RowMapping."""
        return cls(values=dict(mapping), primary_key=primary_key)


class ColumnSize(NamedTuple):
    name: str
    size: int
    is_null: bool
    is_variable_length: bool


class TupleSizeEstimate(BaseModel):
    """Theoretical minimum tuple size, without alignment padding."""
    model_config = ConfigDict(frozen=True)

    header_size: int
    null_bitmap_size: int
    column_count: int
    columns: list[ColumnSize] = Field(default_factory=list)

    @computed_field
    @property
    def data_size(self) -> int:
        return sum(col.size for col in self.columns)

    @computed_field
    @property
    def total_bytes(self) -> int:
        return self.header_size + self.null_bitmap_size + self.data_size
