import json
import pytest
from pydantic import ValidationError
from models.table import Column, ForeignKey, QualifiedIdentifier, Table, TableDescription


def _column(**overrides):
    fields = dict(
        schema_name="public", table="orders", name="customer_id", position=2,
        nullable=True, data_type="integer", updatable=True,
        max_len=None, precision=32, default_value=None, enum_values=[],
    )
    fields.update(overrides)
    return Column(**fields)


def test_qualified_identifier():
    qi = QualifiedIdentifier(schema_name="public", name="orders")
    assert str(qi) == "public.orders"
    with pytest.raises(ValidationError):
        qi.name = "other"
    with pytest.raises(ValidationError):
        QualifiedIdentifier(schema_name="", name="orders")
    with pytest.raises(ValidationError):
        QualifiedIdentifier(schema_name="public", name="")


def test_table_serialization():
    t = Table(schema_name="public", name="orders", insertable=True)
    assert t.model_dump(by_alias=True) == {"schema": "public", "name": "orders", "insertable": True}


def test_foreign_key_serialization():
    fk = ForeignKey(referenced_table="customers", referenced_column="id")
    assert fk.model_dump(by_alias=True) == {"table": "customers", "column": "id"}


def test_column_serialization_shape_and_order():
    col = _column(foreign_key=ForeignKey(referenced_table="customers", referenced_column="id"))
    data = col.model_dump(by_alias=True)
    assert list(data) == [
        "schema", "name", "position", "nullable", "type", "updatable",
        "maxLen", "precision", "references", "default", "enum",
    ]
    assert data["references"] == {"table": "customers", "column": "id"}
    assert data["type"] == "integer"
    assert "table" not in data


def test_column_optional_fields_serialize_as_null():
    data = json.loads(_column(precision=None).model_dump_json(by_alias=True))
    assert data["maxLen"] is None
    assert data["precision"] is None
    assert data["references"] is None
    assert data["default"] is None
    assert data["enum"] == []


def test_column_position_is_one_based():
    with pytest.raises(ValidationError):
        _column(position=0)


def test_table_description_serialization():
    desc = TableDescription(pkey=["id"], columns=[_column(name="id", position=1)])
    data = desc.model_dump(mode="json", by_alias=True)
    assert data["pkey"] == ["id"]
    assert data["columns"][0]["name"] == "id"
    assert data["columns"][0]["schema"] == "public"
