"""
Shared database schema definitions.
This module provides schema creation functions used by both migrations and tests.
The service itself never creates tables.
"""

# Seed data for products
PRODUCTS_SEED_DATA = [
    ("Keyboard", 49.90),
    ("Mouse", 19.99),
    ("Monitor", 229.00),
]


def create_tables(cursor):
    """
    Create the products table.
    This function is idempotent - safe to call multiple times.
    """
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            price REAL NOT NULL
        )
    """)


def drop_tables(cursor):
    cursor.execute("DROP TABLE IF EXISTS products")


def seed_data(cursor):
    """
    Insert seed products.
    """
    cursor.executemany(
        "INSERT INTO products (name, price) VALUES (?, ?)",
        PRODUCTS_SEED_DATA
    )
