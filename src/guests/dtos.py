from dataclasses import dataclass, field


class FamilyIntegrityError(Exception):
    """Raised when a guest's family grouping does not resolve to a complete family."""

    def __init__(self, message: str, guest_id: str | None = None) -> None:
        self.guest_id = guest_id
        super().__init__(message)


@dataclass(frozen=True)
class GuestDTO:
    """A guest as seen through the internal vocabulary, defaults applied."""

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


@dataclass(frozen=True)
class FamilyDTO:
    """DTO for a family record."""

    id: str
    member_ids: list[str] = field(default_factory=list)
    email: str | None = None
    notes: str | None = None


@dataclass(frozen=True)
class VerificationDTO:
    """Result of a successful name verification. Never stored."""

    guest: GuestDTO
    family_members: list[GuestDTO]
    family_id: str
    family_email: str | None = None
    family_notes: str | None = None


@dataclass(frozen=True)
class GuestUpdateDTO:
    """
    Sparse guest update. ``None`` means "leave untouched"; an empty
    ``dietary_restrictions`` string clears the stored note.
    """

    szertartas: bool | None = None
    lakodalom: bool | None = None
    dietary_restrictions: str | None = None
    transfer: bool | None = None
    submitted_at: str | None = None


@dataclass(frozen=True)
class FamilyUpdateDTO:
    """Family-level fields. Empty values are never written."""

    email: str | None = None
    notes: str | None = None

    @property
    def has_changes(self) -> bool:
        return bool(self.email) or bool(self.notes)


@dataclass(frozen=True)
class RSVPResultDTO:
    """DTO for a submitted RSVP."""

    guest: GuestDTO
    warning: str | None = None
