from typing import Any, Optional

from pydantic import BaseModel

from .foreign_key_def import ForeignKeyDef

# Default for InferrerSettings.AUTO_INCREMENT_SENTINEL, which the renderer checks.
AUTO_INCREMENT = "[AUTO INCREMENT]"


class ColumnDef(BaseModel):
    """Introspected column, with its native type already resolved to a canonical one.

    Attributes:
        name: Column name as stored in the database.
        type_identifier: Canonical type (e.g. "Int", "String"), or None when the
            native type has no mapping.
        data_type: Native database type, kept for reference.
        nullable: Whether the column accepts NULL.
        is_unique: Whether a unique constraint covers only this column.
        is_primary_key: Whether the column is (part of) the primary key.
        default_value: Raw default literal, AUTO_INCREMENT, or None for no default.
        comment: Database comment on the column.
        relation: Foreign key carried by the column, if any.
    """

    name: str
    type_identifier: Optional[str] = None
    data_type: Optional[str] = None
    nullable: bool = True
    is_unique: bool = False
    is_primary_key: bool = False
    default_value: Any = None
    comment: Optional[str] = None
    relation: Optional[ForeignKeyDef] = None

    model_config = {"frozen": False}
