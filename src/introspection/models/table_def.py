from typing import List

from pydantic import BaseModel, Field

from .column_def import ColumnDef
from .foreign_key_def import ForeignKeyDef


class TableDef(BaseModel):
    """Introspected table definition."""

    name: str
    columns: List[ColumnDef] = Field(default_factory=list)
    relations: List[ForeignKeyDef] = Field(default_factory=list)

    model_config = {"frozen": False}

    @property
    def has_primary_key(self) -> bool:
        """Whether any column belongs to the primary key."""
        return any(column.is_primary_key for column in self.columns)

    def is_join_table(self) -> bool:
        """Whether the table only links two other tables (many-to-many)."""
        return len(self.columns) == 2 and all(
            column.relation is not None for column in self.columns
        )
