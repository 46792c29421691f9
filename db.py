from contextlib import asynccontextmanager
from typing import Any
import uuid

from sqlalchemy import Result, CursorResult, inspect
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import Session

import config

# Note: SQLAlchemy logger configuration lives in utils/logging_config.py
engine = create_async_engine(config.DB_URL, echo=config.DB_ECHO)
session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

# Dialect-specific INSERT constructs that support ON CONFLICT
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


@asynccontextmanager
async def get_db_session() -> AsyncSession:
    async with session_maker() as session:
        yield session


async def session_execute(stmt, session: AsyncSession | Session) -> Result[Any] | CursorResult[Any]:
    if isinstance(session, AsyncSession):
        query_result = await session.execute(stmt)
        return query_result
    else:
        query_result = session.execute(stmt)
        return query_result


async def session_commit(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.commit()
    else:
        session.commit()


async def session_rollback(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.rollback()
    else:
        session.rollback()


def to_column_values(model, values: dict) -> dict:
    """
    Translate mapped attribute names to backend column names.

    Example:
        >>> to_column_values(CartItem, {"cart_id": "c1", "quantity": 2})
        {'cartId': 'c1', 'quantity': 2}
    """
    columns = inspect(model).columns
    return {columns[key].name: value for key, value in values.items()}


def upsert_statement(model, rows: list[dict], session: AsyncSession | Session):
    """
    Build an INSERT ... ON CONFLICT (pk) DO UPDATE for a batch of rows.

    Rows are keyed by attribute name. Rows without a primary key get a fresh
    uuid, and every row is padded to the union of keys so the batch renders
    as a single multi-VALUES statement. Columns present in the batch (other
    than the primary key) are overwritten on conflict.

    Args:
        model: Mapped class (Cart, CartItem, ...)
        rows: Row values keyed by attribute name, at least one row
        session: Session whose bind decides the SQL dialect

    Returns:
        Executable insert statement
    """
    dialect_name = session.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect_name)
    if insert is None:
        raise NotImplementedError(f"Upsert is not supported for dialect '{dialect_name}'")

    table = model.__table__
    pk_names = [column.name for column in table.primary_key.columns]
    column_rows = [to_column_values(model, row) for row in rows]
    for row in column_rows:
        for pk_name in pk_names:
            if row.get(pk_name) is None:
                row[pk_name] = str(uuid.uuid4())

    keys = []
    for row in column_rows:
        for key in row:
            if key not in keys:
                keys.append(key)
    column_rows = [{key: row.get(key) for key in keys} for row in column_rows]

    stmt = insert(table).values(column_rows)
    update_columns = {key: stmt.excluded[key] for key in keys if key not in pk_names}
    if not update_columns:
        return stmt.on_conflict_do_nothing(index_elements=pk_names)
    return stmt.on_conflict_do_update(index_elements=pk_names, set_=update_columns)
