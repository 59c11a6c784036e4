from core.db_connector import build_engine, create_engine_from_settings, read_only_transaction  # noqa: F401
from core.pg_structure import tables, columns, foreign_keys, primary_key_columns, does_proc_exist, describe_table  # noqa: F401
