import logging
from collections.abc import Awaitable
from typing import Any, Protocol
from urllib.parse import quote

import httpx

from src.config.settings import settings

logger = logging.getLogger(__name__)


class AirtableError(Exception):
    """Raised when Airtable is unreachable or answers with a failure."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class AirtableConfig(Protocol):
    airtable_api_key: str
    airtable_base_id: str
    airtable_api_url: str


class AirtableClient:
    """
    Thin async wrapper around the Airtable REST API.

    Every call is attempted exactly once and opens its own HTTP client, so an
    instance holds no connection state between calls.
    """

    def __init__(
        self,
        config: AirtableConfig = settings,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self._http_client_class = http_client_class

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.airtable_api_key}",
            "Content-Type": "application/json",
        }

    def _table_url(self, table: str) -> str:
        base_url = self._config.airtable_api_url.rstrip("/")
        return f"{base_url}/{self._config.airtable_base_id}/{quote(table, safe='')}"

    async def list_records(self, table: str, formula: str | None = None) -> list[dict[str, Any]]:
        """Return every record of ``table`` matching ``formula``, following pagination."""
        params: dict[str, str] = {}
        if formula:
            params["filterByFormula"] = formula

        records: list[dict[str, Any]] = []
        async with self._http_client_class() as client:
            while True:
                response = await self._send(
                    client.get(self._table_url(table), params=params, headers=self._headers)
                )
                data = self._decode(response)
                page = data.get("records", [])
                if not isinstance(page, list):
                    raise AirtableError("Malformed response from Airtable")
                records.extend(page)

                offset = data.get("offset")
                if not offset:
                    break
                params = {**params, "offset": offset}

        logger.debug("Fetched %d records from %s", len(records), table)
        return records

    async def get_record(self, table: str, record_id: str) -> dict[str, Any] | None:
        """Fetch one record by id. Returns None if Airtable does not know it."""
        url = f"{self._table_url(table)}/{quote(record_id, safe='')}"
        async with self._http_client_class() as client:
            response = await self._send(client.get(url, headers=self._headers))

        if response.status_code == 404:
            return None
        return self._decode(response)

    async def update_record(
        self, table: str, record_id: str, fields: dict[str, Any]
    ) -> dict[str, Any]:
        """PATCH the given fields of one record and return the stored record."""
        payload = {"records": [{"id": record_id, "fields": fields}]}
        async with self._http_client_class() as client:
            response = await self._send(
                client.patch(self._table_url(table), json=payload, headers=self._headers)
            )

        data = self._decode(response)
        records = data.get("records")
        if not isinstance(records, list) or not records:
            raise AirtableError("No records returned from update")
        return records[0]

    async def _send(self, request: Awaitable[httpx.Response]) -> httpx.Response:
        try:
            return await request
        except httpx.HTTPError as e:
            raise AirtableError(f"Could not reach Airtable: {e}") from e

    def _decode(self, response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            raise AirtableError(
                self._error_message(data, response.status_code),
                status_code=response.status_code,
            )
        if not isinstance(data, dict):
            raise AirtableError("Malformed response from Airtable", status_code=response.status_code)
        return data

    @staticmethod
    def _error_message(data: Any, status_code: int) -> str:
        # Airtable answers either {"error": {"type", "message"}} or {"error": "NOT_FOUND"}
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and (error.get("message") or error.get("type")):
                return error.get("message") or error["type"]
            if isinstance(error, str) and error:
                return error
        return f"Airtable request failed with status {status_code}"
