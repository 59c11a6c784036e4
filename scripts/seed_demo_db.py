#!/usr/bin/env python3
"""
Seed a PostgreSQL database with a demo schema for pgshape development.
Usage (inside the repo root, with DB_URI set in .env or the environment):
    python scripts/seed_demo_db.py [schema]
Creates (or recreates) schema "demo" by default.
"""
import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

from sqlalchemy import text

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "backend"))

from config import settings  # noqa: E402
from core.db_connector import create_engine_from_settings  # noqa: E402


def ddl(schema: str) -> list[str]:
    return [
        f'DROP SCHEMA IF EXISTS "{schema}" CASCADE',
        f'CREATE SCHEMA "{schema}"',
        f"""
        CREATE TYPE "{schema}".order_status AS ENUM
            ('PENDING', 'PROCESSING', 'SHIPPED', 'CANCELLED', 'DELIVERED')""",
        f"""
        CREATE TABLE "{schema}".customers (
            id          SERIAL PRIMARY KEY,
            name        VARCHAR(120) NOT NULL,
            email       VARCHAR(255) UNIQUE NOT NULL,
            country     CHAR(2),
            created_at  TIMESTAMP DEFAULT now()
        )""",
        f"""
        CREATE TABLE "{schema}".products (
            id          SERIAL PRIMARY KEY,
            sku         VARCHAR(16) UNIQUE NOT NULL,
            name        TEXT NOT NULL,
            price       NUMERIC(10, 2) NOT NULL,
            stock_qty   INTEGER DEFAULT 0
        )""",
        f"""
        CREATE TABLE "{schema}".orders (
            id           SERIAL PRIMARY KEY,
            customer_id  INTEGER REFERENCES "{schema}".customers(id),
            order_date   TIMESTAMP DEFAULT now(),
            status       "{schema}".order_status NOT NULL DEFAULT 'PENDING'
        )""",
        f"""
        CREATE TABLE "{schema}".order_items (
            order_id    INTEGER REFERENCES "{schema}".orders(id),
            product_id  INTEGER REFERENCES "{schema}".products(id),
            quantity    INTEGER NOT NULL,
            unit_price  NUMERIC(10, 2) NOT NULL,
            PRIMARY KEY (order_id, product_id)
        )""",
        # Not insertable: aggregates are never auto-updatable
        f"""
        CREATE VIEW "{schema}".order_totals AS
            SELECT order_id, sum(quantity * unit_price) AS total
              FROM "{schema}".order_items
             GROUP BY order_id""",
        # Insertable only through the trigger below
        f"""
        CREATE VIEW "{schema}".customer_signups AS
            SELECT DISTINCT email, name FROM "{schema}".customers""",
        f"""
        CREATE FUNCTION "{schema}".insert_customer_signup() RETURNS trigger AS $$
        BEGIN
            INSERT INTO "{schema}".customers(name, email) VALUES (NEW.name, NEW.email);
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql""",
        f"""
        CREATE TRIGGER customer_signups_insert
            INSTEAD OF INSERT ON "{schema}".customer_signups
            FOR EACH ROW EXECUTE FUNCTION "{schema}".insert_customer_signup()""",
    ]


STATUSES = ['PENDING', 'PROCESSING', 'SHIPPED', 'CANCELLED', 'DELIVERED']


def seed(schema: str = "demo"):
    engine = create_engine_from_settings(settings)
    with engine.begin() as conn:
        for stmt in ddl(schema):
            conn.execute(text(stmt))

        for i in range(1, 51):
            conn.execute(text(f'INSERT INTO "{schema}".customers(name, email, country, created_at) '
                              'VALUES (:name, :email, :country, :created_at)'),
                         {"name": f"Customer {i}", "email": f"user{i}@example.com",
                          "country": random.choice(["US", "UK", "DE", "IN", "JP"]),
                          "created_at": datetime.now() - timedelta(days=random.randint(10, 730))})

        for i in range(1, 21):
            conn.execute(text(f'INSERT INTO "{schema}".products(sku, name, price, stock_qty) '
                              'VALUES (:sku, :name, :price, :qty)'),
                         {"sku": f"SKU-{i:04d}", "name": f"Product {i}",
                          "price": round(random.uniform(5, 500), 2), "qty": random.randint(0, 1000)})

        for _ in range(100):
            order_id = conn.execute(
                text(f'INSERT INTO "{schema}".orders(customer_id, status) '
                     'VALUES (:cust, :status) RETURNING id'),
                {"cust": random.randint(1, 50), "status": random.choice(STATUSES)},
            ).scalar_one()
            for prod_id in random.sample(range(1, 21), random.randint(1, 4)):
                conn.execute(text(f'INSERT INTO "{schema}".order_items(order_id, product_id, quantity, unit_price) '
                                  'VALUES (:o, :p, :q, :u)'),
                             {"o": order_id, "p": prod_id, "q": random.randint(1, 5),
                              "u": round(random.uniform(5, 500), 2)})

    engine.dispose()
    print(f"Demo schema seeded: {schema}")
    print("   Tables: customers, products, orders, order_items")
    print("   Views:  order_totals (read-only), customer_signups (trigger-insertable)")


if __name__ == "__main__":
    seed(sys.argv[1] if len(sys.argv) > 1 else "demo")
