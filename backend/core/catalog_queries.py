"""
Catalog statements used by the schema introspector.
Each statement reads one fact from information_schema / pg_catalog and binds
its inputs by name (:schema, :table, :proc).
"""
from sqlalchemy import text

# (column_name, foreign_table_name, foreign_column_name)
FOREIGN_KEYS = text("""
    SELECT kcu.column_name,
           ccu.table_name  AS foreign_table_name,
           ccu.column_name AS foreign_column_name
      FROM information_schema.table_constraints AS tc
      JOIN information_schema.key_column_usage AS kcu
        ON tc.constraint_name = kcu.constraint_name
      JOIN information_schema.constraint_column_usage AS ccu
        ON ccu.constraint_name = tc.constraint_name
     WHERE tc.constraint_type = 'FOREIGN KEY'
       AND tc.table_name = :table
       AND tc.table_schema = :schema
     ORDER BY kcu.column_name
""")

# (table_schema, table_name, insertable)
TABLES = text("""
    SELECT table_schema,
           table_name,
           t.is_insertable_into::boolean
             OR coalesce(v.is_trigger_insertable_into::boolean, false) AS insertable
      FROM information_schema.tables AS t
      LEFT JOIN information_schema.views AS v
           USING (table_catalog, table_schema, table_name)
     WHERE table_schema = :schema
     ORDER BY table_name
""")

# (schema, table_name, name, position, nullable, col_type, updatable,
#  max_len, precision, default_value, enum)
COLUMNS = text("""
    SELECT info.table_schema             AS schema,
           info.table_name               AS table_name,
           info.column_name              AS name,
           info.ordinal_position         AS position,
           info.is_nullable::boolean     AS nullable,
           info.data_type                AS col_type,
           info.is_updatable::boolean    AS updatable,
           info.character_maximum_length AS max_len,
           info.numeric_precision        AS precision,
           info.column_default           AS default_value,
           array_to_string(enum_info.vals, ',') AS enum
      FROM (
            SELECT table_schema, table_name, column_name, ordinal_position,
                   is_nullable, data_type, is_updatable,
                   character_maximum_length, numeric_precision,
                   column_default, udt_schema, udt_name
              FROM information_schema.columns
             WHERE table_schema = :schema
               AND table_name = :table
           ) AS info
      LEFT OUTER JOIN (
            SELECT n.nspname AS s,
                   t.typname AS n,
                   array_agg(e.enumlabel ORDER BY e.enumsortorder) AS vals
              FROM pg_catalog.pg_type t
              JOIN pg_catalog.pg_enum e ON t.oid = e.enumtypid
              JOIN pg_catalog.pg_namespace n ON n.oid = t.typnamespace
             GROUP BY s, n
           ) AS enum_info
        ON info.udt_schema = enum_info.s
       AND info.udt_name = enum_info.n
     ORDER BY position
""")

# (column_name,)
PRIMARY_KEY_COLUMNS = text("""
    SELECT kc.column_name
      FROM information_schema.table_constraints tc,
           information_schema.key_column_usage kc
     WHERE tc.constraint_type = 'PRIMARY KEY'
       AND kc.table_name = tc.table_name
       AND kc.table_schema = tc.table_schema
       AND kc.constraint_name = tc.constraint_name
       AND kc.table_schema = :schema
       AND kc.table_name = :table
""")

# (1,) or no row
PROC_EXISTS = text("""
    SELECT 1
      FROM pg_catalog.pg_namespace n
      JOIN pg_catalog.pg_proc p ON p.pronamespace = n.oid
     WHERE n.nspname = :schema
       AND p.proname = :proc
     LIMIT 1
""")
