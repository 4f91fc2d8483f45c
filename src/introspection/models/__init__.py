"""Introspected database models consumed by the inferrer."""

from .column_def import AUTO_INCREMENT, ColumnDef
from .foreign_key_def import ForeignKeyDef
from .table_def import TableDef

__all__ = ["AUTO_INCREMENT", "ColumnDef", "ForeignKeyDef", "TableDef"]
