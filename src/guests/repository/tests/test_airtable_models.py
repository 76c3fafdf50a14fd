"""Airtable read/write models against a mocked HTTP client."""

import pytest

from src.airtable.tests.mock_http import MockHttpClient, MockResponse, create_client, records_page
from src.config.settings import Settings
from src.guests.dtos import FamilyUpdateDTO, GuestUpdateDTO
from src.guests.repository.read_models import AirtableGuestReadModel
from src.guests.repository.write_models import AirtableGuestWriteModel


@pytest.fixture
def config():
    return Settings(_env_file=None, airtable_api_key="patSECRET", airtable_base_id="appTEST")


def guest_record(record_id: str, name: str, **fields) -> dict:
    return {"id": record_id, "fields": {"Name": name, **fields}}


@pytest.mark.asyncio
async def test_find_guests_by_name_uses_exact_lowercase_match(config):
    http = MockHttpClient().add_get(records_page(guest_record("rec1", "Kovács Anna")))
    read_model = AirtableGuestReadModel(client=create_client(http), config=config)

    guests = await read_model.find_guests_by_name('Kovács "Anna"')

    assert [g.id for g in guests] == ["rec1"]
    assert http.get_calls[0]["params"]["filterByFormula"] == 'LOWER({Name}) = "kovács \\"anna\\""'


@pytest.mark.asyncio
async def test_get_guests_by_ids_is_one_batched_call(config):
    http = MockHttpClient().add_get(
        records_page(guest_record("rec1", "A"), guest_record("rec2", "B"), guest_record("rec3", "C"))
    )
    read_model = AirtableGuestReadModel(client=create_client(http), config=config)

    guests = await read_model.get_guests_by_ids(["rec1", "rec2", "rec3"])

    assert len(guests) == 3
    assert len(http.get_calls) == 1
    assert http.get_calls[0]["params"]["filterByFormula"] == (
        'OR(RECORD_ID() = "rec1", RECORD_ID() = "rec2", RECORD_ID() = "rec3")'
    )


@pytest.mark.asyncio
async def test_get_guests_by_ids_without_ids_skips_the_call(config):
    http = MockHttpClient()
    read_model = AirtableGuestReadModel(client=create_client(http), config=config)

    assert await read_model.get_guests_by_ids([]) == []
    assert http.get_calls == []


@pytest.mark.asyncio
async def test_get_family(config):
    http = MockHttpClient().add_get(
        MockResponse(json_data={"id": "recF", "fields": {"Members": ["rec1"], "Notes": "hi"}})
    )
    read_model = AirtableGuestReadModel(client=create_client(http), config=config)

    family = await read_model.get_family("recF")

    assert family.member_ids == ["rec1"]
    assert family.notes == "hi"
    assert http.get_calls[0]["url"].endswith("/appTEST/Families/recF")


@pytest.mark.asyncio
async def test_list_guests_by_family_resolves_members_through_family(config):
    """The linked Family column holds display names in formulas, so it is never filtered on."""
    http = (
        MockHttpClient()
        .add_get(MockResponse(json_data={"id": "recF", "fields": {"Members": ["rec2", "rec1"]}}))
        .add_get(
            records_page(
                guest_record("rec1", "A", Family=["recF"]),
                guest_record("rec2", "B", Family=["recF"]),
            )
        )
    )
    read_model = AirtableGuestReadModel(client=create_client(http), config=config)

    guests = await read_model.list_guests_by_family("recF")

    assert [g.id for g in guests] == ["rec2", "rec1"]
    assert len(http.get_calls) == 2
    assert http.get_calls[0]["url"].endswith("/appTEST/Families/recF")
    assert http.get_calls[1]["url"].endswith("/appTEST/Guests")
    assert http.get_calls[1]["params"]["filterByFormula"] == (
        'OR(RECORD_ID() = "rec2", RECORD_ID() = "rec1")'
    )
    assert "{Family}" not in http.get_calls[1]["params"]["filterByFormula"]


@pytest.mark.asyncio
async def test_list_guests_by_family_unknown_family(config):
    http = MockHttpClient().add_get(
        MockResponse(json_data={"error": "NOT_FOUND"}, status_code=404)
    )
    read_model = AirtableGuestReadModel(client=create_client(http), config=config)

    assert await read_model.list_guests_by_family("recGONE") == []
    assert len(http.get_calls) == 1


@pytest.mark.asyncio
async def test_list_guests_by_family_without_members(config):
    http = MockHttpClient().add_get(MockResponse(json_data={"id": "recF", "fields": {}}))
    read_model = AirtableGuestReadModel(client=create_client(http), config=config)

    assert await read_model.list_guests_by_family("recF") == []
    assert len(http.get_calls) == 1


@pytest.mark.asyncio
async def test_update_guest_sends_only_given_fields(config):
    stored = guest_record("rec123", "Kovács Anna", **{"Lakodalom": False, "Dietary Restrictions": "vegetarian"})
    http = MockHttpClient().add_patch(records_page(stored))
    write_model = AirtableGuestWriteModel(client=create_client(http), config=config)

    guest = await write_model.update_guest("rec123", GuestUpdateDTO(lakodalom=False))

    assert http.patch_calls[0]["json"] == {
        "records": [{"id": "rec123", "fields": {"Lakodalom": False}}]
    }
    # the response is what Airtable stored, not an echo of the input
    assert guest.dietary_restrictions == "vegetarian"


@pytest.mark.asyncio
async def test_update_family_writes_non_empty_fields(config):
    http = MockHttpClient().add_patch(records_page({"id": "recF", "fields": {}}))
    write_model = AirtableGuestWriteModel(client=create_client(http), config=config)

    await write_model.update_family("recF", FamilyUpdateDTO(email="f@example.com", notes=""))

    call = http.patch_calls[0]
    assert call["url"].endswith("/appTEST/Families")
    assert call["json"] == {"records": [{"id": "recF", "fields": {"Email": "f@example.com"}}]}


@pytest.mark.asyncio
async def test_update_family_without_values_skips_the_call(config):
    http = MockHttpClient()
    write_model = AirtableGuestWriteModel(client=create_client(http), config=config)

    await write_model.update_family("recF", FamilyUpdateDTO())

    assert http.patch_calls == []
