import abc

from src.airtable import formula
from src.airtable.client import AirtableClient
from src.config.settings import Settings, settings
from src.guests.dtos import FamilyDTO, GuestDTO
from src.guests.repository.mapping import FamilyRecordMapper, GuestRecordMapper


class GuestReadModel(abc.ABC):
    @abc.abstractmethod
    async def find_guests_by_name(self, name: str) -> list[GuestDTO]:
        """
        Case-insensitive exact match on the display name.
        Returns an empty list when nobody matches.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_family(self, family_id: str) -> FamilyDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_guests_by_ids(self, guest_ids: list[str]) -> list[GuestDTO]:
        """Fetch the given guests in a single lookup. Unknown ids are skipped."""
        raise NotImplementedError

    @abc.abstractmethod
    async def list_guests(self) -> list[GuestDTO]:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_guests_by_family(self, family_id: str) -> list[GuestDTO]:
        """Members of the family in its member order. Empty for an unknown family."""
        raise NotImplementedError


class AirtableGuestReadModel(GuestReadModel):
    """Airtable implementation of the guest read model."""

    def __init__(self, client: AirtableClient | None = None, config: Settings = settings):
        self._client = client or AirtableClient(config=config)
        self._config = config
        self._guests = GuestRecordMapper(config.guest_fields)
        self._families = FamilyRecordMapper(config.family_fields)

    async def find_guests_by_name(self, name: str) -> list[GuestDTO]:
        name_field = formula.field(self._config.guest_fields.name)
        expression = formula.eq(formula.lower(name_field), formula.quote(name.lower()))
        records = await self._client.list_records(self._config.guests_table, expression)
        return [self._guests.to_guest(record) for record in records]

    async def get_family(self, family_id: str) -> FamilyDTO | None:
        record = await self._client.get_record(self._config.families_table, family_id)
        if record is None:
            return None
        return self._families.to_family(record)

    async def get_guests_by_ids(self, guest_ids: list[str]) -> list[GuestDTO]:
        if not guest_ids:
            return []
        expression = formula.or_(
            *(formula.eq(formula.record_id(), formula.quote(guest_id)) for guest_id in guest_ids)
        )
        records = await self._client.list_records(self._config.guests_table, expression)
        return [self._guests.to_guest(record) for record in records]

    async def list_guests(self) -> list[GuestDTO]:
        records = await self._client.list_records(self._config.guests_table)
        return [self._guests.to_guest(record) for record in records]

    async def list_guests_by_family(self, family_id: str) -> list[GuestDTO]:
        # A linked-record column evaluates to display names inside a formula,
        # so members are resolved through the family record instead.
        family = await self.get_family(family_id)
        if family is None:
            return []
        guests = {guest.id: guest for guest in await self.get_guests_by_ids(family.member_ids)}
        return [guests[member_id] for member_id in family.member_ids if member_id in guests]
