"""SQLAlchemy-backed store for financial entries."""

from dataclasses import replace
from decimal import Decimal
from typing import Any, Mapping

from sqlalchemy import (
    Column,
    Date,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    delete,
    func,
    insert,
    select,
    update,
)

from finance_entries.application.ports.database import DatabaseEnginePort
from finance_entries.application.ports.entry_store import EntryStorePort
from finance_entries.domain.models.entries import (
    Entry,
    EntryFilter,
    EntryStatus,
    EntryType,
    User,
)
from finance_entries.utils.decimal_utils import coerce_decimal

metadata = MetaData()

entries_table = Table(
    "entries",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("description", String(255), nullable=False),
    Column("month", Integer, nullable=False),
    Column("year", Integer, nullable=False),
    Column("value", Numeric(16, 2), nullable=False),
    Column("type", String(20), nullable=False),
    Column("status", String(20)),
    Column("user_id", Integer, nullable=False, index=True),
    Column("registration_date", Date),
)


class SqlAlchemyEntryStore(EntryStorePort):
    """Entry store backed by SQLAlchemy Core.

    Writes run inside ``engine.begin()`` so each one commits or rolls back as
    a unit; reads use a plain connection.
    """

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the entries engine.
        """
        self._db_port = db_port

    def prepare_schema(self) -> None:
        """Create the entries table if it does not exist."""
        engine = self._db_port.get_entries_engine()
        metadata.create_all(engine, tables=[entries_table])

    def save(self, entry: Entry) -> Entry:
        values = self._to_row(entry)
        engine = self._db_port.get_entries_engine()
        with engine.begin() as conn:
            if entry.id is None:
                result = conn.execute(insert(entries_table).values(**values))
                entry_id = result.inserted_primary_key[0]
            else:
                result = conn.execute(
                    update(entries_table)
                    .where(entries_table.c.id == entry.id)
                    .values(**values)
                )
                if result.rowcount == 0:
                    conn.execute(
                        insert(entries_table).values(id=entry.id, **values)
                    )
                entry_id = entry.id
        return replace(entry, id=entry_id)

    def delete(self, entry: Entry) -> None:
        engine = self._db_port.get_entries_engine()
        with engine.begin() as conn:
            conn.execute(
                delete(entries_table).where(entries_table.c.id == entry.id)
            )

    def find_by_id(self, entry_id: int) -> Entry | None:
        query = select(entries_table).where(entries_table.c.id == entry_id)
        engine = self._db_port.get_entries_engine()
        with engine.connect() as conn:
            row = conn.execute(query).mappings().first()
        if row is None:
            return None
        return self._to_entry(row)

    def find_all_by_example(self, entry_filter: EntryFilter) -> list[Entry]:
        query = select(entries_table).where(
            *self._build_conditions(entry_filter)
        )
        engine = self._db_port.get_entries_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
        return [self._to_entry(row) for row in rows]

    def sum_by_type_user_status(
        self,
        user_id: int,
        entry_type: EntryType,
        status: EntryStatus,
    ) -> Decimal | None:
        query = select(func.sum(entries_table.c.value)).where(
            entries_table.c.user_id == user_id,
            entries_table.c.type == entry_type.value,
            entries_table.c.status == status.value,
        )
        engine = self._db_port.get_entries_engine()
        with engine.connect() as conn:
            total = conn.execute(query).scalar()
        if total is None:
            return None
        return coerce_decimal(total)

    @staticmethod
    def _build_conditions(entry_filter: EntryFilter) -> list:
        table = entries_table
        conditions = []
        if entry_filter.description is not None:
            conditions.append(
                func.lower(table.c.description).contains(
                    entry_filter.description.lower(),
                    autoescape=True,
                )
            )
        equalities = (
            (table.c.id, entry_filter.id),
            (table.c.month, entry_filter.month),
            (table.c.year, entry_filter.year),
            (table.c.value, entry_filter.value),
            (table.c.user_id, entry_filter.user_id),
            (table.c.registration_date, entry_filter.registration_date),
        )
        for column, expected in equalities:
            if expected is not None:
                conditions.append(column == expected)
        if entry_filter.type is not None:
            conditions.append(table.c.type == entry_filter.type.value)
        if entry_filter.status is not None:
            conditions.append(table.c.status == entry_filter.status.value)
        return conditions

    @staticmethod
    def _to_row(entry: Entry) -> dict[str, Any]:
        return {
            "description": entry.description,
            "month": entry.month,
            "year": entry.year,
            "value": entry.value,
            "type": entry.type.value if entry.type is not None else None,
            "status": entry.status.value if entry.status is not None else None,
            "user_id": entry.user_id,
            "registration_date": entry.registration_date,
        }

    @staticmethod
    def _to_entry(row: Mapping[str, Any]) -> Entry:
        return Entry(
            id=row["id"],
            description=row["description"],
            month=row["month"],
            year=row["year"],
            value=coerce_decimal(row["value"]),
            type=EntryType(row["type"]),
            status=EntryStatus(row["status"]) if row["status"] else None,
            owner=User(id=row["user_id"]),
            registration_date=row["registration_date"],
        )


__all__ = ["SqlAlchemyEntryStore", "entries_table", "metadata"]
