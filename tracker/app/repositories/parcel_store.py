"""
Parcel Store.

Single-statement access to the parcel table. Address changes and deletion
carry their status guard inside the statement's WHERE clause, so the check
and the mutation are evaluated atomically by the database.
"""

import logging
from typing import List

from sqlalchemy import select, insert, update, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from tracker.app.core.exceptions import StoreError, ParcelNotFoundError
from tracker.app.models.parcel import Parcel
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import ParcelCreate, ParcelRead

logger = logging.getLogger("tracker")

parcel_table = Parcel.__table__


class ParcelStore:
    """
    Repository over the parcel table.

    The engine is owned by the caller: the store only checks out
    connections from it and never disposes it. Every method runs exactly
    one statement in its own transaction, so one instance can be shared
    by concurrent tasks.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def _execute(self, operation: str, stmt):
        try:
            async with self.engine.begin() as conn:
                return await conn.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Store operation failed", extra={"operation": operation, "error": str(exc)})
            raise StoreError(operation, str(exc)) from exc

    async def add(self, parcel: ParcelCreate) -> int:
        """
        Insert a parcel and return the number assigned by the store.

        Raises:
            StoreError: If the insert fails
        """
        stmt = insert(parcel_table).values(
            client=parcel.client,
            status=parcel.status,
            address=parcel.address,
            created_at=parcel.created_at,
        ).returning(parcel_table.c.number)
        result = await self._execute("add", stmt)
        number = result.scalar_one()

        logger.debug("Parcel added", extra={"number": number, "client": parcel.client})
        return number

    async def get(self, number: int) -> ParcelRead:
        """
        Fetch a single parcel by number.

        Raises:
            ParcelNotFoundError: If no parcel has this number
            StoreError: If the query fails
        """
        stmt = select(parcel_table).where(parcel_table.c.number == number)
        result = await self._execute("get", stmt)
        row = result.one_or_none()

        if row is None:
            raise ParcelNotFoundError(number)

        return ParcelRead.model_validate(row)

    async def get_by_client(self, client: int) -> List[ParcelRead]:
        """
        Fetch all parcels of a client.

        No ordering is imposed; an unknown client yields an empty list.
        """
        stmt = select(parcel_table).where(parcel_table.c.client == client)
        result = await self._execute("get_by_client", stmt)

        return [ParcelRead.model_validate(row) for row in result.all()]

    async def set_status(self, number: int, status: str) -> int:
        """
        Set the status of a parcel, whatever its current status.

        Returns the number of rows updated; 0 for an unknown number.
        """
        if isinstance(status, ParcelStatus):
            status = status.value

        stmt = update(parcel_table).where(
            parcel_table.c.number == number
        ).values(status=status)
        result = await self._execute("set_status", stmt)

        logger.debug("Parcel status set", extra={"number": number, "status": status, "rows": result.rowcount})
        return result.rowcount

    async def set_address(self, number: int, address: str) -> int:
        """
        Change the address of a parcel that is still registered.

        Returns the number of rows updated. 0 means the parcel does not
        exist or has left the registered status; this is not an error.
        """
        stmt = update(parcel_table).where(
            parcel_table.c.number == number,
            parcel_table.c.status == ParcelStatus.REGISTERED.value
        ).values(address=address)
        result = await self._execute("set_address", stmt)

        logger.debug("Parcel address set", extra={"number": number, "rows": result.rowcount})
        return result.rowcount

    async def delete(self, number: int) -> int:
        """
        Delete a parcel that is still registered.

        Returns the number of rows deleted, with the same no-op semantics
        as set_address.
        """
        stmt = delete(parcel_table).where(
            parcel_table.c.number == number,
            parcel_table.c.status == ParcelStatus.REGISTERED.value
        )
        result = await self._execute("delete", stmt)

        logger.debug("Parcel deleted", extra={"number": number, "rows": result.rowcount})
        return result.rowcount
