"""Requests of the car booking endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import httpx

from carrental.base import ApiError, ApiMismatchError, ApiRequest
from carrental.datetimes import parse_server_datetime
from carrental.dto import CreateCarOrderDto, GetClosedCarReservations
from carrental.responses import (
    OpenedCarReservationResponse,
    PaginatedClosedCarReservationsResponse,
)

ORDER_CREATED_MESSAGE = "Заказ успешно создан, мы скоро свяжемся с вами!"
ORDER_UPDATED_MESSAGE = "Данные заказа были обновлены, мы скоро свяжемся с вами!"
ERROR_CODE_PREFIX = "Код ошибки: "


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _error_string(response: httpx.Response) -> str:
    reason = response.reason_phrase or "Error"
    return f"Server replied: {response.status_code} {reason}"


class CreateCarOrderRequest(ApiRequest):
    """Creates a car order, or updates an existing one."""

    path = "/v1/CarBooking/CreateOrUpdateCarOrder"

    def __init__(
        self,
        base_url: str,
        token: str,
        order: CreateCarOrderDto,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, client)
        self.token = token
        self.order = order

    def prepare(self) -> httpx.Request:
        return self.client.build_request(
            "POST",
            self._url(self.path),
            headers=self._headers(self.token),
            content=self.order.to_json(),
        )

    def handle(self, response: httpx.Response) -> str:
        """Return the confirmation message; raise ApiError on a rejected lease."""
        document = _json_or_none(response)
        body = document if isinstance(document, dict) else {}

        if response.is_error and response.status_code == 400:
            errors = body.get("errors")
            if isinstance(errors, dict):
                lease_errors = errors.get("LeaseDateTime")
                if isinstance(lease_errors, list) and lease_errors:
                    first = lease_errors[0]
                    raise ApiError(first if isinstance(first, str) else "", errors)

        status = body.get("status")
        if status == 200:
            return ORDER_CREATED_MESSAGE
        if status == 204:
            return ORDER_UPDATED_MESSAGE
        raise ApiMismatchError(
            "CreateCarOrderReplyHandler.Handle.Failure;"
            " occures some validation problems api has some request->response missmatches"
        )


class GetClosedCarReservationsRequest(ApiRequest):
    """Fetches one page of a user's closed reservations."""

    path = "/v1/CarBooking/GetClosedCarReservationsByCarsharingUserId"

    def __init__(
        self,
        base_url: str,
        token: str,
        query: GetClosedCarReservations,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, client)
        self.token = token
        self.query = query

    def prepare(self) -> httpx.Request:
        return self.client.build_request(
            "GET",
            self._url(self.path),
            params=self.query.to_query(),
            headers=self._headers(self.token),
        )

    def handle(self, response: httpx.Response) -> PaginatedClosedCarReservationsResponse:
        if response.is_error:
            raise ApiError(_error_string(response))
        document = _json_or_none(response)
        return PaginatedClosedCarReservationsResponse.from_json(
            document if isinstance(document, dict) else {}
        )


class GetOpenedCarOrdersRequest(ApiRequest):
    """Fetches the reservations of a user that are still open."""

    path = "/v1/CarBooking/GetOpenedCarReservationsByCarsharingUserId"

    def __init__(
        self,
        base_url: str,
        token: str,
        user_id: str,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, client)
        self.token = token
        self.user_id = user_id

    def prepare(self) -> httpx.Request:
        return self.client.build_request(
            "GET",
            self._url(self.path),
            params=[("carsharingUserId", self.user_id)],
            headers=self._headers(self.token),
        )

    def handle(self, response: httpx.Response) -> list[OpenedCarReservationResponse]:
        if response.is_error:
            raise ApiError(_error_string(response))
        document = _json_or_none(response)
        items = document if isinstance(document, list) else []
        return [
            OpenedCarReservationResponse.from_json(item if isinstance(item, dict) else {})
            for item in items
        ]


class GetServerTimeRequest(ApiRequest):
    """Asks the server for its current date and time, shifted by an hour offset."""

    path = "/v1/CarBooking/GetServerDateTime"

    def __init__(
        self,
        base_url: str,
        token: str,
        hours_offset: int,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, client)
        self.token = token
        self.hours_offset = hours_offset

    def set_hours_offset(self, hours_offset: int) -> None:
        self.hours_offset = hours_offset

    def prepare(self) -> httpx.Request:
        return self.client.build_request(
            "GET",
            self._url(self.path),
            params=[("hoursOffset", str(self.hours_offset))],
            headers=self._headers(self.token),
        )

    def handle(self, response: httpx.Response) -> datetime:
        """Return the server time; raise ApiError carrying the HTTP status on failure."""
        if response.is_error:
            raise ApiError(f"{ERROR_CODE_PREFIX}{response.status_code}")
        return parse_server_datetime(response.content.decode("utf-8", errors="replace"))