"""
Migration: Create products table
Version: 001
Description: Creates the products table, optionally with seed rows
"""

import logging
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import get_db
from app.schema import create_tables, drop_tables, seed_data

MIGRATION_NAME = "001_create_products_table"

logger = logging.getLogger(__name__)


def _ensure_migrations_table(cursor):
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS _migrations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE,
            applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)


def upgrade(path=None, seed=False):
    """Apply the migration."""
    with get_db(path) as conn:
        cursor = conn.cursor()
        _ensure_migrations_table(cursor)

        # Check if this migration has already been applied
        cursor.execute("SELECT 1 FROM _migrations WHERE name = ?", (MIGRATION_NAME,))
        if cursor.fetchone():
            logger.info("Migration %s already applied. Skipping.", MIGRATION_NAME)
            return

        create_tables(cursor)
        if seed:
            seed_data(cursor)

        # Record this migration
        cursor.execute("INSERT INTO _migrations (name) VALUES (?)", (MIGRATION_NAME,))

    logger.info("Migration %s applied successfully.", MIGRATION_NAME)


def downgrade(path=None):
    """Revert the migration."""
    with get_db(path) as conn:
        cursor = conn.cursor()
        _ensure_migrations_table(cursor)
        drop_tables(cursor)

        # Remove migration record
        cursor.execute("DELETE FROM _migrations WHERE name = ?", (MIGRATION_NAME,))

    logger.info("Migration %s reverted successfully.", MIGRATION_NAME)


if __name__ == "__main__":
    import argparse

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    parser = argparse.ArgumentParser(description="Run database migration")
    parser.add_argument(
        "action",
        choices=["upgrade", "downgrade"],
        help="Migration action to perform"
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Insert sample products after creating the table"
    )

    args = parser.parse_args()

    if args.action == "upgrade":
        upgrade(seed=args.seed)
    elif args.action == "downgrade":
        downgrade()
