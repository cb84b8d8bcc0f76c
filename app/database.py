"""
Database connection and product store.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Optional

from app.errors import StoreError

logger = logging.getLogger(__name__)

DATABASE_PATH = os.environ.get("DATABASE_PATH", "./products.db")


def get_connection(path: Optional[str] = None) -> sqlite3.Connection:
    """Open a new connection with dict-like rows."""
    conn = sqlite3.connect(path or DATABASE_PATH)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_db(path: Optional[str] = None):
    """
    Yield a short-lived connection, committing on success.
    Used for schema provisioning, not by the request handlers.
    """
    conn = get_connection(path)
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()


class ProductStore:
    """
    Wraps the single process-lifetime connection to the products table.
    Every statement runs in autocommit mode.
    """

    def __init__(self, conn: Optional[sqlite3.Connection]):
        self.conn = conn

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Run one statement, raising StoreError on any driver failure."""
        if self.conn is None:
            raise StoreError("No database connection")
        try:
            return self.conn.execute(sql, params)
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e

    def fetch_all(self) -> list:
        """Fetch every row of the products table as a dict."""
        cursor = self._execute("SELECT * FROM products")
        try:
            rows = cursor.fetchall()
        except sqlite3.Error as e:
            raise StoreError(str(e)) from e
        return [dict(row) for row in rows]

    def insert(self, name, price) -> int:
        """Insert a product and return its new id."""
        cursor = self._execute(
            "INSERT INTO products (name, price) VALUES (?, ?)",
            (name, price)
        )
        return cursor.lastrowid

    def update(self, product_id, name, price) -> int:
        """Update a product by id and return the affected-row count."""
        cursor = self._execute(
            "UPDATE products SET name = ?, price = ? WHERE id = ?",
            (name, price, product_id)
        )
        return cursor.rowcount

    def delete(self, product_id) -> int:
        """Delete a product by id and return the affected-row count."""
        cursor = self._execute("DELETE FROM products WHERE id = ?", (product_id,))
        return cursor.rowcount

    def close(self):
        """Close the connection if one is open."""
        if self.conn is not None:
            self.conn.close()
            self.conn = None


def connect_to_database(path: Optional[str] = None) -> ProductStore:
    """
    Open the store once at startup.

    A failed connection is logged and the service keeps running; every data
    operation on the returned store then raises StoreError.
    """
    path = path or DATABASE_PATH
    try:
        # Handlers run in the server's threadpool and share this connection.
        conn = sqlite3.connect(path, check_same_thread=False, isolation_level=None)
        conn.row_factory = sqlite3.Row
    except sqlite3.Error as e:
        logger.error("Database connection error: %s", e)
        return ProductStore(None)

    logger.info("Database connection established (%s)", path)
    return ProductStore(conn)
