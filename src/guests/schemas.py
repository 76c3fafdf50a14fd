"""
Client-facing request and response models.

Shared between the proxy routers and ``src.client`` so both sides speak the
same camelCase contract.
"""

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from src.guests.dtos import GuestDTO


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelRequest(BaseModel):
    """Request bodies are accepted under their camelCase names only."""

    model_config = ConfigDict(alias_generator=to_camel)


class GuestResponse(CamelModel):
    id: str
    name: str
    surname: str | None = None
    family_id: str | None = None
    attending: bool = True
    email: str | None = None
    phone: str | None = None
    dietary_restrictions: str | None = None
    notes: str | None = None
    submitted_at: str | None = None
    szertartas: bool = False
    lakodalom: bool = False
    transfer: bool = False

    @classmethod
    def from_dto(cls, guest: GuestDTO) -> "GuestResponse":
        return cls(**asdict(guest))


class VerifyNameRequest(CamelRequest):
    name: str = Field(min_length=1)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value


class VerifyNameResponse(CamelModel):
    success: bool
    found: bool
    guest: GuestResponse
    family_members: list[GuestResponse]
    family_email: str | None = None
    family_id: str | None = None
    family_notes: str | None = None


class RSVPRequest(CamelRequest):
    guest_id: str = Field(min_length=1)
    szertartas: bool | None = None
    lakodalom: bool | None = None
    dietary_restrictions: str | None = None
    transfer: bool | None = None
    family_email: EmailStr | None = None
    family_id: str | None = None
    family_notes: str | None = None

    @field_validator("family_email", "family_id", "family_notes", mode="before")
    @classmethod
    def blank_as_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class RSVPResponse(CamelModel):
    success: bool
    guest: GuestResponse
    warning: str | None = None


class GuestsResponse(CamelModel):
    success: bool
    guests: list[GuestResponse]
