"""
Schema introspector — reads tables, columns, keys and enum types for one
PostgreSQL schema out of the catalog and assembles them into the models in
models.table.

Every operation takes an open SQLAlchemy connection (normally the one yielded
by core.db_connector.read_only_transaction). Nothing here commits, retries or
caches; query errors propagate to the caller unchanged.
"""
import logging
from typing import Optional

from sqlalchemy.engine import Connection

from core import catalog_queries
from models.table import Column, ForeignKey, QualifiedIdentifier, Table, TableDescription

logger = logging.getLogger(__name__)

ForeignKeyMap = dict[str, ForeignKey]


# ── Row mappers ───────────────────────────────────────────────────────────────

def parse_enum(aggregate: Optional[str]) -> list[str]:
    """Split a comma-joined enum label list. No aggregate means no enum."""
    if aggregate is None:
        return []
    return aggregate.split(",")


def table_from_row(row) -> Table:
    schema, name, insertable = row
    return Table(schema_name=schema, name=name, insertable=bool(insertable))


def foreign_key_from_row(row) -> tuple[str, ForeignKey]:
    """Returns (referencing column name, ForeignKey)."""
    column, foreign_table, foreign_column = row
    return column, ForeignKey(referenced_table=foreign_table, referenced_column=foreign_column)


def column_from_row(row) -> Column:
    (schema, table, name, position, nullable, col_type, updatable,
     max_len, precision, default_value, enum) = row
    return Column(
        schema_name=schema,
        table=table,
        name=name,
        position=position,
        nullable=nullable,
        data_type=col_type,
        updatable=updatable,
        max_len=max_len,
        precision=precision,
        default_value=default_value,
        enum_values=parse_enum(enum),
    )


# ── Catalog operations ────────────────────────────────────────────────────────

def _table_params(table: QualifiedIdentifier) -> dict:
    return {"schema": table.schema_name, "table": table.name}


def foreign_keys(conn: Connection, table: QualifiedIdentifier) -> ForeignKeyMap:
    """Map each referencing column of ``table`` to the key it points at.

    Rows arrive ordered by column name; when a column takes part in more than
    one constraint the last row read wins.
    """
    rows = conn.execute(catalog_queries.FOREIGN_KEYS, _table_params(table)).all()
    fks: ForeignKeyMap = {}
    for row in rows:
        column, fk = foreign_key_from_row(row)
        fks[column] = fk
    logger.debug("Found %d foreign key column(s) on %s", len(fks), table)
    return fks


def tables(conn: Connection, schema: str) -> list[Table]:
    """List tables and views of ``schema`` ordered by name."""
    rows = conn.execute(catalog_queries.TABLES, {"schema": schema}).all()
    result = [table_from_row(r) for r in rows]
    logger.info("Discovered %d tables in schema %s", len(result), schema)
    return result


def columns(conn: Connection, table: QualifiedIdentifier) -> list[Column]:
    """Columns of ``table`` in ordinal order, with enum labels and foreign keys attached."""
    rows = conn.execute(catalog_queries.COLUMNS, _table_params(table)).all()
    raw = [column_from_row(r) for r in rows]
    fks = foreign_keys(conn, table)
    attached = [
        col.model_copy(update={"foreign_key": fks.get(col.name)})
        for col in raw
    ]
    return sorted(attached, key=lambda c: c.position)


def primary_key_columns(conn: Connection, table: QualifiedIdentifier) -> list[str]:
    """Names of the primary key columns, in whatever order the catalog returns them."""
    rows = conn.execute(catalog_queries.PRIMARY_KEY_COLUMNS, _table_params(table)).all()
    return [r[0] for r in rows]


def does_proc_exist(conn: Connection, schema: str, proc: str) -> bool:
    row = conn.execute(catalog_queries.PROC_EXISTS, {"schema": schema, "proc": proc}).first()
    return row is not None


def describe_table(conn: Connection, table: QualifiedIdentifier) -> TableDescription:
    """Primary key plus ordered columns for one table."""
    cols = columns(conn, table)
    pkey = primary_key_columns(conn, table)
    logger.debug("Described %s: %d columns, pkey=%s", table, len(cols), pkey)
    return TableDescription(pkey=pkey, columns=cols)
