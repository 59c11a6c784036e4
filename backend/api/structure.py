"""GET /api/tables, /api/tables/{table}, /api/procs/{proc} — serialized schema description."""
import logging
from typing import Optional
from fastapi import APIRouter, HTTPException, Request
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from config import settings
from core.db_connector import read_only_transaction
from core.pg_structure import tables, describe_table, does_proc_exist
from models.table import QualifiedIdentifier

router = APIRouter()
logger = logging.getLogger(__name__)


def _schema(schema: Optional[str]) -> str:
    return schema or settings.DB_SCHEMA


def _identifier(schema: str, name: str) -> QualifiedIdentifier:
    try:
        return QualifiedIdentifier(schema_name=schema, name=name)
    except ValidationError as e:
        raise HTTPException(400, detail=f"Invalid table identifier: {e.errors()[0]['msg']}")


@router.get("/tables")
def list_tables(request: Request, schema: Optional[str] = None):
    schema = _schema(schema)
    try:
        with read_only_transaction(request.app.state.engine) as conn:
            result = tables(conn, schema)
    except SQLAlchemyError as e:
        logger.exception("Listing tables failed for schema %s", schema)
        raise HTTPException(503, detail=f"Catalog query failed: {e}")
    return [t.model_dump(mode="json", by_alias=True) for t in result]


@router.get("/tables/{table_name}")
def get_table(request: Request, table_name: str, schema: Optional[str] = None):
    qi = _identifier(_schema(schema), table_name)
    try:
        with read_only_transaction(request.app.state.engine) as conn:
            description = describe_table(conn, qi)
    except SQLAlchemyError as e:
        logger.exception("Describing %s failed", qi)
        raise HTTPException(503, detail=f"Catalog query failed: {e}")
    if not description.columns:
        raise HTTPException(404, detail=f"Table '{qi}' not found.")
    return description.model_dump(mode="json", by_alias=True)


@router.get("/procs/{proc_name}")
def get_proc(request: Request, proc_name: str, schema: Optional[str] = None):
    schema = _schema(schema)
    try:
        with read_only_transaction(request.app.state.engine) as conn:
            exists = does_proc_exist(conn, schema, proc_name)
    except SQLAlchemyError as e:
        logger.exception("Procedure lookup failed for %s.%s", schema, proc_name)
        raise HTTPException(503, detail=f"Catalog query failed: {e}")
    return {"schema": schema, "name": proc_name, "exists": exists}
