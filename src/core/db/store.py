"""Bookings store — pooled PostgreSQL access to the bookings table."""

import asyncio
import logging
from typing import Any

import psycopg
from psycopg.rows import dict_row
from psycopg_pool import AsyncConnectionPool

from core.config import Config
from core.errors import BookingStoreError, ErrorCode
from core.models.booking import Booking, BookingCreate, BookingUpdate

logger = logging.getLogger(__name__)

_BOOKING_COLUMNS = "id, place_id, court_no, phone_no, email, user_id, start_time, end_time"

_INSERT_SQL = """
    INSERT INTO bookings (place_id, court_no, phone_no, email, user_id, start_time, end_time)
    VALUES (%s, %s, %s, %s, %s, %s, %s)
    RETURNING id
"""

_SELECT_ALL_SQL = f"SELECT {_BOOKING_COLUMNS} FROM bookings"

_SELECT_BY_USER_SQL = f"SELECT {_BOOKING_COLUMNS} FROM bookings WHERE user_id = %s"

_UPDATE_SQL = "UPDATE bookings SET court_no = %s, start_time = %s, end_time = %s WHERE id = %s"

_DELETE_SQL = "DELETE FROM bookings WHERE id = %s"


class BookingStore:
    """Bookings table access over a bounded connection pool.

    With ``open_on_demand`` the pool is opened by the first operation, for
    hosts that never run the ASGI lifespan. Otherwise ``open()`` must be
    called first.
    """

    def __init__(self, config: Config, open_on_demand: bool = False) -> None:
        self._config = config
        self._open_on_demand = open_on_demand
        self._pool: AsyncConnectionPool | None = None
        self._open_lock = asyncio.Lock()

    async def open(self) -> None:
        if self._pool is not None:
            return
        pool = AsyncConnectionPool(
            conninfo=self._config.database_url,
            min_size=self._config.db_pool_min_size,
            max_size=self._config.db_pool_max_size,
            kwargs={"sslmode": self._config.db_sslmode, "row_factory": dict_row},
            open=False,
        )
        await pool.open()
        self._pool = pool

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
        self._pool = None

    async def _require_pool(self) -> AsyncConnectionPool:
        """Return the open pool, opening it first when opening on demand."""
        if self._pool is None and self._open_on_demand:
            async with self._open_lock:
                if self._pool is None:
                    logger.info("Opening bookings pool on first use")
                    try:
                        await self.open()
                    except psycopg.Error as e:
                        raise BookingStoreError(
                            f"Failed to open bookings pool: {e}", code=ErrorCode.STORE_UNAVAILABLE
                        ) from e
        if self._pool is None:
            raise BookingStoreError("BookingStore is not open. Call open() first.", code=ErrorCode.STORE_UNAVAILABLE)
        return self._pool

    async def _execute(
        self,
        sql: str,
        params: tuple[Any, ...],
        code: ErrorCode,
    ) -> tuple[list[dict[str, Any]], int]:
        """Run one statement on a pooled connection, returning (rows, rowcount).

        The connection goes back to the pool on every exit path; the pool
        commits on success and rolls back on error.
        """
        pool = await self._require_pool()
        try:
            async with pool.connection() as conn:
                async with conn.cursor() as cur:
                    await cur.execute(sql, params)
                    rows = await cur.fetchall() if cur.description else []
                    return rows, cur.rowcount
        except psycopg.Error as e:
            raise BookingStoreError(f"Bookings query failed: {e}", code=code) from e

    async def server_version(self) -> str:
        rows, _ = await self._execute("SELECT version()", (), ErrorCode.STORE_UNAVAILABLE)
        return str(rows[0]["version"])

    async def create(self, data: BookingCreate, user_id: int) -> int:
        rows, _ = await self._execute(
            _INSERT_SQL,
            (
                data.place_id,
                data.court_no,
                data.phone_no,
                data.email,
                user_id,
                data.start_time,
                data.end_time,
            ),
            ErrorCode.BOOKING_CREATE_FAILED,
        )
        return int(rows[0]["id"])

    async def list_all(self) -> list[Booking]:
        rows, _ = await self._execute(_SELECT_ALL_SQL, (), ErrorCode.BOOKING_QUERY_FAILED)
        return [Booking(**row) for row in rows]

    async def list_by_user(self, user_id: int) -> list[Booking]:
        rows, _ = await self._execute(_SELECT_BY_USER_SQL, (user_id,), ErrorCode.BOOKING_QUERY_FAILED)
        return [Booking(**row) for row in rows]

    async def update(self, booking_id: int, data: BookingUpdate) -> int:
        _, rowcount = await self._execute(
            _UPDATE_SQL,
            (data.court_no, data.start_time, data.end_time, booking_id),
            ErrorCode.BOOKING_UPDATE_FAILED,
        )
        return rowcount

    async def delete(self, booking_id: int) -> int:
        _, rowcount = await self._execute(_DELETE_SQL, (booking_id,), ErrorCode.BOOKING_DELETE_FAILED)
        return rowcount

    async def __aenter__(self) -> "BookingStore":
        await self.open()
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
