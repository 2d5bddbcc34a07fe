"""
SQLite persistence for services, customers and bookings.
"""

import asyncio
import sqlite3
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar

from ...core.enums import BookingStatus
from ...core.models import Booking, BookingDetails, Customer, CustomerUpsert, Service
from ...config import get_settings

T = TypeVar("T")

_SCHEMA = """
CREATE TABLE IF NOT EXISTS services (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT,
    price INTEGER NOT NULL CHECK (price > 0),
    duration_minutes INTEGER NOT NULL CHECK (duration_minutes > 0)
);

CREATE TABLE IF NOT EXISTS customers (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    phone TEXT NOT NULL UNIQUE,
    email TEXT NOT NULL,
    address TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS bookings (
    id TEXT PRIMARY KEY,
    customer_id TEXT NOT NULL REFERENCES customers (id),
    service_id TEXT NOT NULL REFERENCES services (id),
    booking_date TEXT NOT NULL,
    booking_time TEXT NOT NULL,
    total_amount INTEGER NOT NULL CHECK (total_amount > 0),
    notes TEXT,
    status TEXT NOT NULL DEFAULT 'confirmed',
    created_at TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_bookings_customer ON bookings (customer_id);
"""

_UPSERT_CUSTOMER = """
INSERT INTO customers (id, name, phone, email, address, created_at, updated_at)
VALUES (?, ?, ?, ?, ?, ?, ?)
ON CONFLICT (phone) DO UPDATE SET
    name = excluded.name,
    email = excluded.email,
    address = excluded.address,
    updated_at = excluded.updated_at
"""


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class BookingRepository:
    """Async facade over a SQLite database; each call runs in a worker thread."""

    def __init__(self, database_path: Optional[str] = None, timeout: float = 30.0):
        self.database_path = database_path or get_settings().database_path
        self.timeout = timeout
        self._lock = asyncio.Lock()
        self._schema_ready = False

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.database_path, timeout=self.timeout)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    async def _run(self, func: Callable[[sqlite3.Connection], T]) -> T:
        """Run ``func`` with a fresh connection, serialized across callers."""
        if not self._schema_ready:
            await self.init_schema()

        def _call() -> T:
            conn = self._connect()
            try:
                result = func(conn)
                conn.commit()
                return result
            except Exception:
                conn.rollback()
                raise
            finally:
                conn.close()

        async with self._lock:
            return await asyncio.to_thread(_call)

    async def init_schema(self) -> None:
        """Ensure the tables exist."""
        def _create() -> None:
            conn = sqlite3.connect(self.database_path, timeout=self.timeout)
            try:
                conn.executescript(_SCHEMA)
                conn.commit()
            finally:
                conn.close()

        async with self._lock:
            await asyncio.to_thread(_create)
        self._schema_ready = True

    # Catalog

    async def seed_services(self, services: Iterable[Service]) -> int:
        """Insert services that are not present yet. Returns the number inserted."""
        rows = [(s.id, s.name, s.description, s.price, s.duration_minutes) for s in services]

        def _seed(conn: sqlite3.Connection) -> int:
            before = conn.total_changes
            conn.executemany(
                "INSERT OR IGNORE INTO services (id, name, description, price, duration_minutes) "
                "VALUES (?, ?, ?, ?, ?)",
                rows,
            )
            return conn.total_changes - before

        return await self._run(_seed)

    async def list_services(self) -> List[Service]:
        """All services ordered by ascending price."""
        def _fetch(conn: sqlite3.Connection) -> List[Dict[str, Any]]:
            cur = conn.execute("SELECT * FROM services ORDER BY price ASC, name ASC")
            return [dict(row) for row in cur.fetchall()]

        return [Service(**row) for row in await self._run(_fetch)]

    async def get_service(self, service_id: str) -> Optional[Service]:
        def _fetch(conn: sqlite3.Connection) -> Optional[Dict[str, Any]]:
            row = conn.execute("SELECT * FROM services WHERE id = ?", (service_id,)).fetchone()
            return dict(row) if row else None

        row = await self._run(_fetch)
        return Service(**row) if row else None

    # Customers

    async def upsert_customer(self, data: CustomerUpsert) -> Customer:
        """Create the customer for ``data.phone`` or update it in place."""
        now = _now_iso()
        params = (str(uuid.uuid4()), data.name, data.phone, data.email, data.address, now, now)

        def _upsert(conn: sqlite3.Connection) -> Dict[str, Any]:
            conn.execute(_UPSERT_CUSTOMER, params)
            row = conn.execute("SELECT * FROM customers WHERE phone = ?", (data.phone,)).fetchone()
            return dict(row)

        return Customer(**await self._run(_upsert))

    async def count_customers(self) -> int:
        return await self._run(lambda conn: conn.execute("SELECT COUNT(*) FROM customers").fetchone()[0])

    # Bookings

    async def insert_booking(
        self,
        customer_id: str,
        service_id: str,
        booking_date: str,
        booking_time: str,
        total_amount: int,
        notes: Optional[str] = None,
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> Booking:
        booking = Booking(
            id=str(uuid.uuid4()),
            customer_id=customer_id,
            service_id=service_id,
            booking_date=booking_date,
            booking_time=booking_time,
            total_amount=total_amount,
            notes=notes,
            status=status,
            created_at=_now_iso(),
        )

        def _insert(conn: sqlite3.Connection) -> None:
            conn.execute(
                """
                INSERT INTO bookings (
                    id, customer_id, service_id, booking_date, booking_time,
                    total_amount, notes, status, created_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    booking.id,
                    booking.customer_id,
                    booking.service_id,
                    booking.booking_date,
                    booking.booking_time,
                    booking.total_amount,
                    booking.notes,
                    booking.status.value,
                    booking.created_at,
                ),
            )

        await self._run(_insert)
        return booking

    async def get_booking(self, booking_id: str) -> Optional[Booking]:
        def _fetch(conn: sqlite3.Connection) -> Optional[Dict[str, Any]]:
            row = conn.execute("SELECT * FROM bookings WHERE id = ?", (booking_id,)).fetchone()
            return dict(row) if row else None

        row = await self._run(_fetch)
        return Booking(**row) if row else None

    async def get_booking_details(self, booking_id: str) -> Optional[BookingDetails]:
        """Booking joined with its service and customer."""
        def _fetch(conn: sqlite3.Connection) -> Optional[Dict[str, Dict[str, Any]]]:
            booking = conn.execute("SELECT * FROM bookings WHERE id = ?", (booking_id,)).fetchone()
            if booking is None:
                return None
            service = conn.execute(
                "SELECT * FROM services WHERE id = ?", (booking["service_id"],)
            ).fetchone()
            customer = conn.execute(
                "SELECT * FROM customers WHERE id = ?", (booking["customer_id"],)
            ).fetchone()
            return {"booking": dict(booking), "service": dict(service), "customer": dict(customer)}

        row = await self._run(_fetch)
        return BookingDetails(**row) if row else None

    async def count_bookings(self, customer_id: Optional[str] = None) -> int:
        def _count(conn: sqlite3.Connection) -> int:
            if customer_id is None:
                return conn.execute("SELECT COUNT(*) FROM bookings").fetchone()[0]
            return conn.execute(
                "SELECT COUNT(*) FROM bookings WHERE customer_id = ?", (customer_id,)
            ).fetchone()[0]

        return await self._run(_count)
