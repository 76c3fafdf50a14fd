"""Async client for the RSVP proxy, typed with the proxy's own schemas."""

from urllib.parse import quote

import httpx

from src.guests import urls
from src.guests.schemas import (
    GuestsResponse,
    RSVPRequest,
    RSVPResponse,
    VerifyNameRequest,
    VerifyNameResponse,
)

# Reported when the proxy never answered
UNREACHABLE_STATUS = 503


class ApiClientError(Exception):
    """Raised for any non-success answer from the proxy."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class RSVPApiClient:
    def __init__(
        self,
        base_url: str,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._base_url = base_url.rstrip("/")
        self._http_client_class = http_client_class

    async def verify_name(self, name: str) -> VerifyNameResponse:
        body = VerifyNameRequest(name=name).model_dump(by_alias=True)
        data = await self._request("POST", urls.VERIFY_NAME_URL, json=body)
        return VerifyNameResponse.model_validate(data)

    async def submit_rsvp(self, request: RSVPRequest) -> RSVPResponse:
        body = request.model_dump(mode="json", by_alias=True, exclude_none=True)
        data = await self._request("POST", urls.SUBMIT_RSVP_URL, json=body)
        return RSVPResponse.model_validate(data)

    async def list_guests(self) -> GuestsResponse:
        data = await self._request("GET", urls.LIST_GUESTS_URL)
        return GuestsResponse.model_validate(data)

    async def list_family_guests(self, family_id: str) -> GuestsResponse:
        path = urls.LIST_FAMILY_GUESTS_URL.format(family_id=quote(family_id, safe=""))
        data = await self._request("GET", path)
        return GuestsResponse.model_validate(data)

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        try:
            async with self._http_client_class() as client:
                response = await client.request(method, f"{self._base_url}{path}", **kwargs)
        except httpx.HTTPError as e:
            raise ApiClientError(UNREACHABLE_STATUS, f"Could not reach the RSVP API: {e}") from e

        if not response.is_success:
            raise ApiClientError(response.status_code, self._error_message(response))
        return response.json()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        fallback = f"HTTP error! status: {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            return fallback
        if isinstance(data, dict) and isinstance(data.get("error"), str):
            return data["error"] or fallback
        return fallback
