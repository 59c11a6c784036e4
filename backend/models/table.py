"""Pydantic schemas for introspected tables, columns and foreign keys.

Attribute names are snake_case; the JSON handed to the API layer uses the
serialization aliases below, so always dump with ``by_alias=True``.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class QualifiedIdentifier(BaseModel):
    """A (schema, name) pair naming one table or view."""
    model_config = ConfigDict(frozen=True)

    schema_name: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    def __str__(self) -> str:
        return f"{self.schema_name}.{self.name}"


class Table(BaseModel):
    schema_name: str = Field(..., serialization_alias="schema")
    name: str
    insertable: bool


class ForeignKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    referenced_table: str = Field(..., serialization_alias="table")
    referenced_column: str = Field(..., serialization_alias="column")


class Column(BaseModel):
    schema_name: str = Field(..., serialization_alias="schema")
    table: str = Field(..., exclude=True)          # kept for joins, not part of the JSON shape
    name: str
    position: int = Field(..., ge=1)               # catalog ordinal, 1-based
    nullable: bool
    data_type: str = Field(..., serialization_alias="type")
    updatable: bool
    max_len: Optional[int] = Field(None, serialization_alias="maxLen")
    precision: Optional[int] = None
    foreign_key: Optional[ForeignKey] = Field(None, serialization_alias="references")
    default_value: Optional[str] = Field(None, serialization_alias="default")
    enum_values: list[str] = Field(default_factory=list, serialization_alias="enum")


class TableDescription(BaseModel):
    """Primary key and ordered columns of a single table."""
    pkey: list[str] = Field(default_factory=list)
    columns: list[Column] = Field(default_factory=list)
