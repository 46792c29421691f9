#!/usr/bin/env python3
"""
Migration: Add search_products_by_name_prefix Function

Installs the Postgres function behind the storefront's product search box.
It returns every product whose name starts with the given prefix
(case-insensitive), ordered by name. LIKE wildcards typed by the user are
escaped so they match literally.

Changes:
1. Creates (or replaces) search_products_by_name_prefix(prefix text) RETURNS SETOF products
2. Grants EXECUTE to the anon and authenticated roles when they exist

Usage:
    python migrations/add_search_products_by_name_prefix.py
"""

import sys
import os
import asyncio
import logging

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sqlalchemy import text
from db import get_db_session, session_commit, session_execute

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

CREATE_FUNCTION_SQL = r"""
CREATE OR REPLACE FUNCTION search_products_by_name_prefix(prefix text)
RETURNS SETOF products
LANGUAGE sql
STABLE
AS $$
    SELECT *
    FROM products
    WHERE name ILIKE replace(replace(replace(prefix, '\', '\\'), '%', '\%'), '_', '\_') || '%'
    ORDER BY name;
$$
"""

GRANT_EXECUTE_SQL = """
DO $$
BEGIN
    IF EXISTS (SELECT 1 FROM pg_roles WHERE rolname = 'anon') THEN
        GRANT EXECUTE ON FUNCTION search_products_by_name_prefix(text) TO anon;
    END IF;
    IF EXISTS (SELECT 1 FROM pg_roles WHERE rolname = 'authenticated') THEN
        GRANT EXECUTE ON FUNCTION search_products_by_name_prefix(text) TO authenticated;
    END IF;
END
$$
"""


async def run_migration():
    """Execute the search function migration."""
    logger.info("=" * 60)
    logger.info("SEARCH PRODUCTS BY NAME PREFIX MIGRATION")
    logger.info("=" * 60)

    async with get_db_session() as session:
        try:
            dialect_name = session.get_bind().dialect.name
            if dialect_name != "postgresql":
                logger.warning(f"Skipping: stored functions need Postgres (got {dialect_name})")
                return

            logger.info("Step 1: Creating search_products_by_name_prefix(prefix text)...")
            await session_execute(text(CREATE_FUNCTION_SQL), session)
            logger.info("Function created")

            logger.info("Step 2: Granting EXECUTE to API roles...")
            await session_execute(text(GRANT_EXECUTE_SQL), session)
            logger.info("Grants applied")

            logger.info("Step 3: Verifying migration...")
            result = await session_execute(
                text("SELECT COUNT(*) FROM search_products_by_name_prefix(:prefix)").bindparams(prefix=""),
                session
            )
            logger.info(f"Function returns {result.scalar()} products for an empty prefix")

            await session_commit(session)
            logger.info("MIGRATION COMPLETE!")

        except Exception as e:
            logger.error(f"Migration failed: {e}", exc_info=True)
            await session.rollback()
            raise


if __name__ == "__main__":
    asyncio.run(run_migration())
