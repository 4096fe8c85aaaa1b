"""Requests of the carsharing user profile endpoints."""

from __future__ import annotations

from typing import Any

import httpx

from carrental.base import ApiError, ApiRequest
from carrental.dto import (
    CarsharingUserDto,
    CreateOrUpdateCarsharingUserRequestBody,
    LoginResponse,
)

PROFILE_UPDATED_MESSAGE = "Данные успешно обновлены"
_UNAVAILABLE_MESSAGE = "Сервер временно недоступен"


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _raise_error_codes(response: httpx.Response) -> None:
    document = _json_or_none(response)
    items = document if isinstance(document, list) else []
    codes = []
    for item in items:
        code = item.get("Code") if isinstance(item, dict) else None
        codes.append(code if isinstance(code, str) else "")
    raise ApiError("; ".join(codes), codes)


class CreateOrUpdateCarsharingUserRequest(ApiRequest):
    """Creates a carsharing user profile, or updates the existing one."""

    path = "/v1/CarsharingUser/CreateOrUpdateCarsharingUser"
    unavailable_message = _UNAVAILABLE_MESSAGE

    def __init__(
        self,
        base_url: str,
        credentials: LoginResponse,
        body: CreateOrUpdateCarsharingUserRequestBody,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, client)
        self.credentials = credentials
        self.body = body

    def prepare(self) -> httpx.Request:
        return self.client.build_request(
            "POST",
            self._url(self.path),
            headers=self._headers(self.credentials.token),
            content=self.body.to_json(),
        )

    def handle(self, response: httpx.Response) -> str:
        """Return the confirmation; raise ApiError whose details list the error codes."""
        if response.is_error:
            _raise_error_codes(response)
        return PROFILE_UPDATED_MESSAGE


class GetCarsharingUserRequest(ApiRequest):
    """Fetches the carsharing profile of the logged-in user."""

    path = "/v1/CarsharingUser/GetCarsharingUserByUserId"
    unavailable_message = _UNAVAILABLE_MESSAGE

    def __init__(
        self,
        base_url: str,
        credentials: LoginResponse,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, client)
        self.credentials = credentials

    def prepare(self) -> httpx.Request:
        return self.client.build_request(
            "GET",
            self._url(self.path),
            params=[("userId", self.credentials.user_id)],
            headers=self._headers(self.credentials.token),
        )

    def handle(self, response: httpx.Response) -> CarsharingUserDto:
        """Return the profile; raise ApiError whose details list the error codes."""
        if response.is_error:
            _raise_error_codes(response)
        document = _json_or_none(response)
        return CarsharingUserDto.from_json(document if isinstance(document, dict) else {})