"""
Row helpers shared by the admin CRUD services
"""

from typing import Any, Dict
from fastapi import HTTPException, status
from cueclub.database import database


async def fetch_row(table: str, row_id: Any, label: str) -> dict:
    """Fetch one row by id or raise 404 '<label> not found'"""
    record = await database.fetch_one(
        f"SELECT * FROM {table} WHERE id = :id",
        {"id": str(row_id)}
    )
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label} not found"
        )
    return dict(record)


async def update_row(
    table: str,
    row_id: Any,
    fields: Dict[str, Any],
    label: str,
    touch_updated_at: bool = True
) -> dict:
    """
    Apply a partial update and return the updated row

    Column names come from validated request models, never from raw input.
    """
    if not fields:
        return await fetch_row(table, row_id, label)

    assignments = [f"{column} = :{column}" for column in fields]
    if touch_updated_at:
        assignments.append("updated_at = NOW()")

    record = await database.fetch_one(
        f"""
        UPDATE {table}
        SET {", ".join(assignments)}
        WHERE id = :id
        RETURNING *
        """,
        {**fields, "id": str(row_id)}
    )
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label} not found"
        )
    return dict(record)


async def delete_row(table: str, row_id: Any, label: str) -> None:
    deleted = await database.fetch_one(
        f"DELETE FROM {table} WHERE id = :id RETURNING id",
        {"id": str(row_id)}
    )
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label} not found"
        )
