import logging
from datetime import UTC, datetime

from src.airtable.client import AirtableError
from src.guests.dtos import FamilyUpdateDTO, GuestUpdateDTO, RSVPResultDTO
from src.guests.repository.write_models import GuestWriteModel

logger = logging.getLogger(__name__)

FAMILY_UPDATE_WARNING = "Family details could not be saved"


class SubmitRSVPWriteModel:
    """
    Record one guest's RSVP.

    The guest update decides the outcome. The family update runs afterwards and
    is best-effort: an upstream failure there is logged and reported as a
    warning on the result.
    """

    def __init__(self, guest_write_model: GuestWriteModel):
        self._guests = guest_write_model

    async def submit_rsvp(
        self,
        guest_id: str,
        guest_update: GuestUpdateDTO,
        family_id: str | None = None,
        family_update: FamilyUpdateDTO | None = None,
    ) -> RSVPResultDTO:
        stamped = GuestUpdateDTO(
            szertartas=guest_update.szertartas,
            lakodalom=guest_update.lakodalom,
            dietary_restrictions=guest_update.dietary_restrictions,
            transfer=guest_update.transfer,
            submitted_at=datetime.now(UTC).isoformat(),
        )
        guest = await self._guests.update_guest(guest_id, stamped)

        warning = None
        if family_id and family_update and family_update.has_changes:
            try:
                await self._guests.update_family(family_id, family_update)
            except AirtableError as e:
                logger.warning(f"Failed to update family {family_id} for guest {guest_id}: {e}")
                warning = FAMILY_UPDATE_WARNING

        return RSVPResultDTO(guest=guest, warning=warning)
