"""
Parcel Service.

Applies tracking defaults on top of the parcel store: new parcels start as
registered with the current UTC time, and statuses move one step at a time.
"""

import logging
from datetime import datetime, timezone
from typing import List

from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.repositories.parcel_store import ParcelStore
from tracker.app.schemas.parcel import ParcelCreate, ParcelRead

logger = logging.getLogger("tracker")

# Allowed forward transitions; DELIVERED is terminal
NEXT_STATUS = {
    ParcelStatus.REGISTERED.value: ParcelStatus.SENT.value,
    ParcelStatus.SENT.value: ParcelStatus.DELIVERED.value,
}


def utc_timestamp() -> str:
    """Current UTC time in RFC 3339 form, e.g. 2024-01-31T12:00:00Z."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ParcelService:

    def __init__(self, store: ParcelStore):
        self.store = store

    async def register(self, client: int, address: str) -> ParcelRead:
        """Register a new parcel for a client."""
        parcel = ParcelCreate(
            client=client,
            status=ParcelStatus.REGISTERED,
            address=address,
            created_at=utc_timestamp()
        )
        number = await self.store.add(parcel)

        logger.info("Parcel registered", extra={"number": number, "client": client})
        return ParcelRead(number=number, **parcel.model_dump())

    async def client_parcels(self, client: int) -> List[ParcelRead]:
        return await self.store.get_by_client(client)

    async def next_status(self, number: int) -> str:
        """
        Move a parcel to its next status.

        Delivered parcels and unknown statuses are left as they are.
        Returns the status the parcel ends up with.

        Raises:
            ParcelNotFoundError: If the parcel does not exist
        """
        parcel = await self.store.get(number)
        next_status = NEXT_STATUS.get(parcel.status)

        if next_status is None:
            return parcel.status

        await self.store.set_status(number, next_status)
        logger.info(
            "Parcel status changed",
            extra={"number": number, "from_status": parcel.status, "to_status": next_status}
        )
        return next_status

    async def change_address(self, number: int, address: str) -> bool:
        """Change the address of a registered parcel; False if nothing changed."""
        return await self.store.set_address(number, address) > 0

    async def delete(self, number: int) -> bool:
        """Delete a registered parcel; False if nothing was deleted."""
        return await self.store.delete(number) > 0
