from models.table import QualifiedIdentifier, Table, ForeignKey, Column, TableDescription  # noqa: F401
