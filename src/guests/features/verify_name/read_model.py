import logging

from src.guests.dtos import FamilyIntegrityError, VerificationDTO
from src.guests.repository.read_models import GuestReadModel

logger = logging.getLogger(__name__)


class VerifyNameReadModel:
    """Resolve a display name to a guest and the guest's complete family."""

    def __init__(self, guest_read_model: GuestReadModel):
        self._guests = guest_read_model

    async def verify(self, name: str) -> VerificationDTO | None:
        """
        Return the verification result, or None when no guest has this name.

        Raises FamilyIntegrityError when the family grouping does not resolve
        to a complete member list. Never writes.
        """
        matches = await self._guests.find_guests_by_name(name)
        if not matches:
            return None
        if len(matches) > 1:
            logger.warning("Name %r matches %d guests, using the first", name, len(matches))

        guest = matches[0]
        if not guest.family_id:
            raise FamilyIntegrityError(f"Guest {guest.id} has no family", guest_id=guest.id)

        family = await self._guests.get_family(guest.family_id)
        if family is None:
            raise FamilyIntegrityError(
                f"Family {guest.family_id} of guest {guest.id} does not exist", guest_id=guest.id
            )
        if not family.member_ids:
            raise FamilyIntegrityError(f"Family {family.id} has no members", guest_id=guest.id)
        if guest.id not in family.member_ids:
            raise FamilyIntegrityError(
                f"Family {family.id} does not list guest {guest.id}", guest_id=guest.id
            )

        members = await self._guests.get_guests_by_ids(family.member_ids)
        by_id = {member.id: member for member in members}
        missing = [member_id for member_id in family.member_ids if member_id not in by_id]
        if missing:
            raise FamilyIntegrityError(
                f"Family {family.id} lists {len(family.member_ids)} members "
                f"but only {len(family.member_ids) - len(missing)} were found",
                guest_id=guest.id,
            )

        return VerificationDTO(
            guest=guest,
            family_members=[by_id[member_id] for member_id in family.member_ids],
            family_id=family.id,
            family_email=family.email,
            family_notes=family.notes,
        )
