"""Translation between Airtable records and the guest/family DTOs."""

from typing import Any

from src.config.settings import FamilyFieldNames, GuestFieldNames
from src.guests.dtos import FamilyDTO, FamilyUpdateDTO, GuestDTO, GuestUpdateDTO


def _text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _flag(value: Any, default: bool) -> bool:
    if value is None:
        return default
    return bool(value)


def _link(value: Any) -> str | None:
    # linked-record columns come back as a list of record ids
    if isinstance(value, list):
        return _text(value[0]) if value else None
    return _text(value)


def _links(value: Any) -> list[str]:
    if isinstance(value, list):
        return [str(item) for item in value if item]
    if value:
        return [str(value)]
    return []


class GuestRecordMapper:
    def __init__(self, fields: GuestFieldNames):
        self._fields = fields

    def to_guest(self, record: dict[str, Any]) -> GuestDTO:
        f = self._fields
        values = record.get("fields") or {}
        return GuestDTO(
            id=record["id"],
            name=_text(values.get(f.name)) or "",
            surname=_text(values.get(f.surname)),
            family_id=_link(values.get(f.family)),
            attending=_flag(values.get(f.attending), default=True),
            email=_text(values.get(f.email)),
            phone=_text(values.get(f.phone)),
            dietary_restrictions=_text(values.get(f.dietary_restrictions)),
            notes=_text(values.get(f.notes)),
            submitted_at=_text(values.get(f.submitted_at)),
            szertartas=_flag(values.get(f.szertartas), default=False),
            lakodalom=_flag(values.get(f.lakodalom), default=False),
            transfer=_flag(values.get(f.transfer), default=False),
        )

    def to_fields(self, update: GuestUpdateDTO) -> dict[str, Any]:
        """Airtable fields for ``update``; unset attributes are left out entirely."""
        f = self._fields
        candidates = {
            f.szertartas: update.szertartas,
            f.lakodalom: update.lakodalom,
            f.dietary_restrictions: update.dietary_restrictions,
            f.transfer: update.transfer,
            f.submitted_at: update.submitted_at,
        }
        return {name: value for name, value in candidates.items() if value is not None}


class FamilyRecordMapper:
    def __init__(self, fields: FamilyFieldNames):
        self._fields = fields

    def to_family(self, record: dict[str, Any]) -> FamilyDTO:
        f = self._fields
        values = record.get("fields") or {}
        return FamilyDTO(
            id=record["id"],
            member_ids=_links(values.get(f.members)),
            email=_text(values.get(f.email)),
            notes=_text(values.get(f.notes)),
        )

    def to_fields(self, update: FamilyUpdateDTO) -> dict[str, Any]:
        f = self._fields
        fields: dict[str, Any] = {}
        if update.email:
            fields[f.email] = update.email
        if update.notes:
            fields[f.notes] = update.notes
        return fields
