"""
RSVP form controller.

Drives one guest's pass through the form: verify the name, show the family,
edit each member's answers and submit them. ``RSVPSession`` keeps everything it
needs on the instance, so every UI session gets its own state and cache.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from enum import Enum

from pydantic import EmailStr, TypeAdapter, ValidationError

from src.client.api_client import ApiClientError, RSVPApiClient
from src.client.cache import QueryCache
from src.guests.schemas import GuestResponse, RSVPRequest, RSVPResponse

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)


class RSVPStep(str, Enum):
    VERIFY = "verify"
    FAMILY_LIST = "family_list"
    RSVP = "rsvp"
    SUCCESS = "success"


TRANSITIONS: dict[RSVPStep, frozenset[RSVPStep]] = {
    RSVPStep.VERIFY: frozenset({RSVPStep.FAMILY_LIST}),
    RSVPStep.FAMILY_LIST: frozenset({RSVPStep.RSVP}),
    RSVPStep.RSVP: frozenset({RSVPStep.SUCCESS}),
    RSVPStep.SUCCESS: frozenset(),
}


class InvalidTransitionError(Exception):
    def __init__(self, current: RSVPStep, target: RSVPStep) -> None:
        self.current = current
        self.target = target
        super().__init__(f"Cannot move from {current.value} to {target.value}")


class SubmissionError(Exception):
    """Raised when the family email is invalid or a member's RSVP was rejected."""


@dataclass(frozen=True)
class MemberDraft:
    guest_id: str
    name: str
    szertartas: bool = False
    lakodalom: bool = False
    dietary_restrictions: str = ""
    transfer: bool = False

    @classmethod
    def from_guest(cls, guest: GuestResponse) -> "MemberDraft":
        return cls(
            guest_id=guest.id,
            name=guest.name,
            szertartas=guest.szertartas,
            lakodalom=guest.lakodalom,
            dietary_restrictions=guest.dietary_restrictions or "",
            transfer=guest.transfer,
        )


class RSVPSession:
    def __init__(self, api: RSVPApiClient):
        self._api = api
        self.reset()

    def reset(self) -> None:
        """Start over with an empty form and a fresh cache."""
        self.step = RSVPStep.VERIFY
        self.cache = QueryCache()
        self.guest: GuestResponse | None = None
        self.family_id: str | None = None
        self.family_email = ""
        self.family_notes = ""
        self.drafts: dict[str, MemberDraft] = {}
        self.results: list[RSVPResponse] = []

    def _transition(self, target: RSVPStep) -> None:
        if target not in TRANSITIONS[self.step]:
            raise InvalidTransitionError(self.step, target)
        logger.debug("RSVP step %s -> %s", self.step.value, target.value)
        self.step = target

    async def verify(self, name: str) -> bool:
        """
        Look the name up. Returns False when the guest list does not know it,
        leaving the session on the verify step.
        """
        if self.step is not RSVPStep.VERIFY:
            raise InvalidTransitionError(self.step, RSVPStep.FAMILY_LIST)
        if not name.strip():
            raise ValueError("Name is required")

        try:
            result = await self._api.verify_name(name)
        except ApiClientError as e:
            if e.status_code == 404:
                return False
            raise

        self.guest = result.guest
        self.family_id = result.family_id
        self.family_email = result.family_email or ""
        self.family_notes = result.family_notes or ""
        self.drafts = {member.id: MemberDraft.from_guest(member) for member in result.family_members}
        if result.family_id:
            self.cache.set(("guests", "family", result.family_id), result.family_members)

        self._transition(RSVPStep.FAMILY_LIST)
        return True

    @property
    def family_members(self) -> list[GuestResponse]:
        if not self.family_id:
            return []
        return self.cache.get(("guests", "family", self.family_id)) or []

    async def family_guests(self) -> list[GuestResponse]:
        """The family's guests, fetched through the session cache."""
        if not self.family_id:
            return []
        family_id = self.family_id

        async def fetch() -> list[GuestResponse]:
            return (await self._api.list_family_guests(family_id)).guests

        return await self.cache.get_or_fetch(("guests", "family", family_id), fetch)

    def begin_rsvp(self) -> None:
        self._transition(RSVPStep.RSVP)

    def update_member(self, guest_id: str, **changes) -> MemberDraft:
        if self.step is not RSVPStep.RSVP:
            raise InvalidTransitionError(self.step, RSVPStep.RSVP)
        if guest_id not in self.drafts:
            raise KeyError(guest_id)

        draft = replace(self.drafts[guest_id], **changes)
        # no reception means no meal and no transfer
        if not draft.lakodalom:
            draft = replace(draft, dietary_restrictions="", transfer=False)
        self.drafts[guest_id] = draft
        return draft

    def _checked_email(self) -> str:
        email = self.family_email.strip()
        if not email:
            raise SubmissionError("Family email is required")
        try:
            return str(_email_adapter.validate_python(email))
        except ValidationError:
            raise SubmissionError("A valid family email is required")

    def build_requests(self) -> list[RSVPRequest]:
        email = self._checked_email()
        if not self.drafts:
            raise SubmissionError("Nothing to submit")

        return [
            RSVPRequest(
                guestId=draft.guest_id,
                szertartas=draft.szertartas,
                lakodalom=draft.lakodalom,
                dietaryRestrictions=draft.dietary_restrictions,
                transfer=draft.transfer,
                familyEmail=email,
                familyId=self.family_id,
                familyNotes=self.family_notes.strip() or None,
            )
            for draft in self.drafts.values()
        ]

    async def submit(self) -> list[RSVPResponse]:
        """
        Send every member's RSVP concurrently. On any failure the first one
        (in member order) is raised and the session stays on the RSVP step.
        """
        if self.step is not RSVPStep.RSVP:
            raise InvalidTransitionError(self.step, RSVPStep.SUCCESS)

        requests = self.build_requests()
        outcomes = await asyncio.gather(
            *(self._api.submit_rsvp(request) for request in requests),
            return_exceptions=True,
        )

        for outcome in outcomes:
            if isinstance(outcome, ApiClientError):
                raise SubmissionError(outcome.message) from outcome
            if isinstance(outcome, BaseException):
                raise outcome
        if not all(outcome.success for outcome in outcomes):
            raise SubmissionError("Some RSVPs could not be submitted")

        self.results = list(outcomes)
        self.cache.invalidate(("guests",))
        self._transition(RSVPStep.SUCCESS)
        return self.results
