"""Guest write models - apply sparse updates and return DTOs."""

from abc import ABC, abstractmethod

from src.airtable.client import AirtableClient
from src.config.settings import Settings, settings
from src.guests.dtos import FamilyUpdateDTO, GuestDTO, GuestUpdateDTO
from src.guests.repository.mapping import FamilyRecordMapper, GuestRecordMapper


class GuestWriteModel(ABC):
    @abstractmethod
    async def update_guest(self, guest_id: str, update: GuestUpdateDTO) -> GuestDTO:
        """
        Write the set attributes of ``update`` to one guest.
        Returns the guest as stored after the update.
        """
        raise NotImplementedError

    @abstractmethod
    async def update_family(self, family_id: str, update: FamilyUpdateDTO) -> None:
        raise NotImplementedError


class AirtableGuestWriteModel(GuestWriteModel):
    """Airtable implementation of the guest write model."""

    def __init__(self, client: AirtableClient | None = None, config: Settings = settings):
        self._client = client or AirtableClient(config=config)
        self._config = config
        self._guests = GuestRecordMapper(config.guest_fields)
        self._families = FamilyRecordMapper(config.family_fields)

    async def update_guest(self, guest_id: str, update: GuestUpdateDTO) -> GuestDTO:
        record = await self._client.update_record(
            self._config.guests_table, guest_id, self._guests.to_fields(update)
        )
        return self._guests.to_guest(record)

    async def update_family(self, family_id: str, update: FamilyUpdateDTO) -> None:
        fields = self._families.to_fields(update)
        if not fields:
            return
        await self._client.update_record(self._config.families_table, family_id, fields)
