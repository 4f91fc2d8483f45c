from pydantic import BaseModel


class ForeignKeyDef(BaseModel):
    """Foreign key from a column to a column of another table.

    Targets are referenced by table name so related tables never own each other.
    """

    column_name: str
    foreign_table_name: str
    foreign_column_name: str

    model_config = {"frozen": False}
