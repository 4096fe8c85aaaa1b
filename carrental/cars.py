"""Request of the car list endpoint."""

from __future__ import annotations

from typing import Any

import httpx

from carrental.base import ApiError, ApiRequest
from carrental.car_orders import ERROR_CODE_PREFIX
from carrental.dto import GetCarsDto
from carrental.responses import GetCarsResponse


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class GetCarsRequest(ApiRequest):
    """Fetches one page of the cars offered for rent."""

    path = "/v1/Car/GetCars"

    def __init__(
        self,
        base_url: str,
        token: str,
        query: GetCarsDto,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, client)
        self.token = token
        self.query = query

    def set_query(self, query: GetCarsDto) -> None:
        """Replace the paging and sorting used by the next request."""
        self.query = query

    def prepare(self) -> httpx.Request:
        return self.client.build_request(
            "GET",
            self._url(self.path),
            params=self.query.to_query(),
            headers=self._headers(self.token),
        )

    def handle(self, response: httpx.Response) -> GetCarsResponse:
        """Return the page of cars; raise ApiError carrying the HTTP status on failure."""
        if response.is_error:
            raise ApiError(f"{ERROR_CODE_PREFIX}{response.status_code}")
        document = _json_or_none(response)
        return GetCarsResponse.from_json(document if isinstance(document, dict) else {})