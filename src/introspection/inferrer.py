"""Infer and print schema-definition types from introspected tables."""

import json
import logging
from typing import Any, List, Optional, Sequence

from .config import InferrerSettings
from .models import ColumnDef, TableDef
from .naming import capitalize_first_letter
from .sdl import (
    SDL,
    GQLField,
    GQLType,
    Rendered,
    RenderOutcome,
    Suppressed,
    SuppressionReason,
    comment_lines,
)
from .type_capabilities import TypeCapabilities

logger = logging.getLogger(__name__)

MISSING_PRIMARY_KEY_NOTICE = "Types without primary key not yet supported"


class SDLInferrer:
    """Turns introspected tables into schema-definition types.

    The instance only holds configuration; every call builds its output from
    the tables it is given.
    """

    def __init__(
        self,
        settings: Optional[InferrerSettings] = None,
        capabilities: Optional[TypeCapabilities] = None,
    ):
        """Initialize the inferrer.

        Args:
            settings: Rendering settings. Read from the environment when omitted.
            capabilities: Type capability lookup. Built from ``settings`` when omitted.
        """
        self.settings = settings or InferrerSettings()
        self.capabilities = capabilities or TypeCapabilities.from_settings(self.settings)

    # ------------------------------------------------------------------
    # Document mode
    # ------------------------------------------------------------------

    def infer(self, tables: Sequence[TableDef]) -> SDL:
        """Build a schema document with one type per entity table.

        Join tables are left out. Fields are only populated when
        ``INFER_POPULATE_FIELDS`` is enabled.
        """
        types = []
        for table in tables:
            if table.is_join_table():
                logger.debug(f"Skipping join table {table.name}")
                continue

            fields: List[GQLField] = []
            if self.settings.INFER_POPULATE_FIELDS:
                fields = [self.build_field(column) for column in table.columns]

            types.append(
                GQLType(
                    name=capitalize_first_letter(table.name),
                    fields=fields,
                    directives=[self.print_table_directive(table)],
                    is_embedded=False,
                )
            )

        logger.debug(f"Inferred {len(types)} types from {len(tables)} tables")
        return SDL(types=types)

    def build_field(self, column: ColumnDef) -> GQLField:
        """Build the structured field for a column using the printing policies."""
        directives = []
        relation_directive = self.print_relation_directive(column).strip()
        if relation_directive:
            directives.append(relation_directive)
        directives.extend(self.field_directives(column))

        return GQLField(
            name=self.print_field_name(column),
            type=self.print_field_type(column),
            is_required=not column.nullable,
            directives=directives,
            comment=column.comment,
            is_supported=column.type_identifier is not None,
        )

    # ------------------------------------------------------------------
    # Text mode
    # ------------------------------------------------------------------

    def print_document(self, tables: Sequence[TableDef]) -> str:
        """Print every entity table, separated by a blank line."""
        return "\n".join(
            self.print_type(table, tables) for table in tables if not table.is_join_table()
        )

    def print_type(self, table: TableDef, other_tables: Sequence[TableDef]) -> str:
        """Print the type block for ``table``.

        ``other_tables`` is the full table set, kept for relation resolution.
        """
        return self.format_type(self.render_type(table, other_tables))

    def render_type(self, table: TableDef, other_tables: Sequence[TableDef]) -> RenderOutcome:
        _ = other_tables
        name = capitalize_first_letter(table.name)
        lines = [f"type {name} {self.print_table_directive(table)} {{"]
        lines.extend(f"  {self.print_field(column)}" for column in table.columns)
        lines.append("}")
        raw = "\n".join(lines) + "\n"

        if table.has_primary_key:
            return Rendered(raw)

        logger.warning(f"Table {table.name} has no primary key, emitting it commented out")
        return Suppressed(raw, SuppressionReason.MISSING_PRIMARY_KEY)

    def format_type(self, outcome: RenderOutcome) -> str:
        if isinstance(outcome, Suppressed):
            marker = self.settings.TYPE_COMMENT_MARKER
            return f"{marker} {MISSING_PRIMARY_KEY_NOTICE}\n{comment_lines(outcome.text, marker)}"
        return outcome.text

    def print_table_directive(self, table: TableDef) -> str:
        return f'@pgTable(name: "{table.name}")'

    # ------------------------------------------------------------------
    # Field policies
    # ------------------------------------------------------------------

    def print_field(self, column: ColumnDef) -> str:
        """Print the field line for a column, commented out if its type is unmapped."""
        return self.format_field(self.render_field(column))

    def render_field(self, column: ColumnDef) -> RenderOutcome:
        comment = "" if column.comment is None else f" # {column.comment}"
        field = (
            f"{self.print_field_name(column)}: {self.print_field_type(column)}"
            f"{self.print_field_optional(column)}{self.print_relation_directive(column)}"
            f"{self.print_field_directives(column)}{comment}"
        )

        if column.type_identifier is None:
            logger.warning(
                f"Column {column.name} has unmapped type {column.data_type!r}, "
                "emitting it commented out"
            )
            return Suppressed(field, SuppressionReason.UNMAPPED_TYPE)

        return Rendered(field)

    def format_field(self, outcome: RenderOutcome) -> str:
        if isinstance(outcome, Suppressed):
            return comment_lines(outcome.text, self.settings.FIELD_COMMENT_MARKER)
        return outcome.text

    def print_field_name(self, column: ColumnDef) -> str:
        # Relation fields will drop the foreign key suffix (naming.remove_id_suffix).
        return column.name

    def print_field_type(self, column: ColumnDef) -> str:
        if column.type_identifier is not None:
            return column.type_identifier
        return column.data_type or "null"

    def print_field_optional(self, column: ColumnDef) -> str:
        return "" if column.nullable else "!"

    def print_relation_directive(self, column: ColumnDef) -> str:
        # Relations are not rendered yet.
        return ""

    def print_field_directives(self, column: ColumnDef) -> str:
        return "".join(f" {directive}" for directive in self.field_directives(column))

    def field_directives(self, column: ColumnDef) -> List[str]:
        """Return the unique, column-name and default directives, in that order."""
        directives = []
        if column.is_unique:
            directives.append("@unique")

        if column.is_primary_key and column.name != "id":
            directives.append(f'@pgColumn(name: "{column.name}")')

        default = self.print_default_directive(column)
        if default:
            directives.append(default)

        return directives

    def print_default_directive(self, column: ColumnDef) -> str:
        value = column.default_value
        if value is None or value == self.settings.AUTO_INCREMENT_SENTINEL:
            return ""

        if self.capabilities.requires_quoting(column.type_identifier):
            return f'@default(value: "{_literal(value)}")'
        return f"@default(value: {_literal(value)})"


def _literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    return str(value)
