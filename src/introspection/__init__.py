"""SDL inference from introspected database tables."""

from .config import InferrerSettings
from .inferrer import SDLInferrer
from .models import AUTO_INCREMENT, ColumnDef, ForeignKeyDef, TableDef
from .sdl import SDL, GQLField, GQLType
from .type_capabilities import TypeCapabilities

__all__ = [
    "AUTO_INCREMENT",
    "ColumnDef",
    "ForeignKeyDef",
    "GQLField",
    "GQLType",
    "InferrerSettings",
    "SDL",
    "SDLInferrer",
    "TableDef",
    "TypeCapabilities",
]
