"""Upstream failures served through the real Airtable read model never reveal the token."""

import logging

import pytest

from src.airtable.tests.mock_http import MockConfig, MockHttpClient, MockResponse, connect_error, create_client
from src.config.settings import Settings
from src.guests.dependencies import get_guest_read_model
from src.guests.repository.read_models import AirtableGuestReadModel
from src.guests.urls import LIST_FAMILY_GUESTS_URL, LIST_GUESTS_URL, VERIFY_NAME_URL

TOKEN = MockConfig.airtable_api_key


def unauthorized() -> MockResponse:
    return MockResponse(
        json_data={"error": {"type": "AUTHENTICATION_REQUIRED", "message": "Authentication required"}},
        status_code=401,
    )


@pytest.fixture
def config():
    return Settings(_env_file=None, airtable_api_key=TOKEN, airtable_base_id="appTEST")


def overrides_for(http: MockHttpClient, config: Settings) -> dict:
    read_model = AirtableGuestReadModel(client=create_client(http), config=config)
    return {get_guest_read_model: lambda: read_model}


async def send(client, endpoint: str):
    if endpoint == VERIFY_NAME_URL:
        return await client.post(VERIFY_NAME_URL, json={"name": "Kovács Anna"})
    return await client.get(endpoint)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "endpoint", [VERIFY_NAME_URL, LIST_GUESTS_URL, LIST_FAMILY_GUESTS_URL.format(family_id="recFAM1")]
)
@pytest.mark.parametrize(
    "failure, expected_error",
    [
        (unauthorized, "Authentication required"),
        (connect_error, "Could not reach Airtable: Connection refused"),
    ],
)
async def test_upstream_failure_hides_token(client_factory, config, caplog, endpoint, failure, expected_error):
    http = MockHttpClient().add_get(failure())

    with caplog.at_level(logging.DEBUG):
        async with client_factory(overrides_for(http, config)) as client:
            response = await send(client, endpoint)

    assert response.status_code == 500
    assert response.json() == {"error": expected_error}
    assert TOKEN not in response.text
    assert all(TOKEN not in value for value in response.headers.values())
    assert TOKEN not in caplog.text
    # the token did go upstream, it just never comes back
    assert http.get_calls[0]["headers"]["Authorization"] == f"Bearer {TOKEN}"


@pytest.mark.asyncio
async def test_successive_failures_hide_token(client_factory, config):
    """A 401 followed by a dropped connection, across both endpoints."""
    http = MockHttpClient().add_get(unauthorized()).add_get(connect_error())

    async with client_factory(overrides_for(http, config)) as client:
        responses = [
            await client.post(VERIFY_NAME_URL, json={"name": "Kovács Anna"}),
            await client.get(LIST_GUESTS_URL),
        ]

    assert [r.status_code for r in responses] == [500, 500]
    for response in responses:
        assert TOKEN not in response.text
        assert TOKEN not in str(response.headers)
