"""Response records the API returns for cars and car reservations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from carrental.datetimes import parse_iso_datetime


def _as_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _as_float(value: Any) -> float:
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    return 0.0


def _as_objects(value: Any) -> list[Mapping[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, Mapping) else {} for item in value]


@dataclass
class CarDto:
    """A car offered for rent."""

    id: str = ""
    brand: str = ""
    model: str = ""
    car_image_uri: str = ""
    car_class: str = ""
    base_rental_price_per_hour: float = 0.0
    acceleration: float = 0.0
    power: int = 0

    @classmethod
    def from_json(cls, document: Mapping[str, Any]) -> CarDto:
        return cls(
            id=_as_str(document.get("id")),
            brand=_as_str(document.get("brand")),
            model=_as_str(document.get("model")),
            car_image_uri=_as_str(document.get("carImageURI")),
            car_class=_as_str(document.get("carClass")),
            base_rental_price_per_hour=_as_float(document.get("baseRentalPricePerHour")),
            acceleration=_as_float(document.get("accelerationTo100")),
            power=_as_int(document.get("power")),
        )


@dataclass
class ClosedCarReservationResponse:
    """A finished car reservation."""

    id: str
    car_id: str
    carsharing_user_id: str
    start_of_lease: datetime
    end_of_lease: datetime
    status: str
    comment: str
    car_image_uri: str
    car_name: str
    price: float

    @classmethod
    def from_json(cls, document: Mapping[str, Any]) -> ClosedCarReservationResponse:
        """Build from a server document; raises ValueError on a bad lease date."""
        return cls(
            id=_as_str(document.get("id")),
            car_id=_as_str(document.get("carId")),
            carsharing_user_id=_as_str(document.get("carharingUserId")),
            start_of_lease=parse_iso_datetime(_as_str(document.get("startOfLease"))),
            end_of_lease=parse_iso_datetime(_as_str(document.get("endOfLease"))),
            status=_as_str(document.get("status")),
            comment=_as_str(document.get("comment")),
            car_image_uri=_as_str(document.get("carImageURI")),
            car_name=_as_str(document.get("carName")),
            price=_as_float(document.get("price")),
        )


@dataclass
class GetCarsResponse:
    """One page of the car list."""

    cars: list[CarDto] = field(default_factory=list)
    total_item: int = 0
    page_number: int = 0
    page_size: int = 0

    @classmethod
    def from_json(cls, document: Mapping[str, Any]) -> GetCarsResponse:
        return cls(
            cars=[CarDto.from_json(item) for item in _as_objects(document.get("cars"))],
            total_item=_as_int(document.get("totalItem")),
            page_number=_as_int(document.get("pageNumber")),
            page_size=_as_int(document.get("pageSize")),
        )


@dataclass
class OpenedCarReservationResponse:
    """A car reservation that is still running."""

    id: str
    car_id: str
    car_name: str
    car_image_uri: str
    rental_time_remain_in_seconds: int
    price: float
    deadline_date_time: datetime
    start_of_lease: datetime
    status: str
    comment: str

    @classmethod
    def from_json(cls, document: Mapping[str, Any]) -> OpenedCarReservationResponse:
        """Build from a server document; raises ValueError on a bad date."""
        return cls(
            id=_as_str(document.get("id")),
            car_id=_as_str(document.get("carId")),
            car_name=_as_str(document.get("carName")),
            car_image_uri=_as_str(document.get("carImageUri")),
            rental_time_remain_in_seconds=_as_int(document.get("rentalTimeRemainInSeconds")),
            price=_as_float(document.get("price")),
            deadline_date_time=parse_iso_datetime(_as_str(document.get("deadlineDateTime"))),
            start_of_lease=parse_iso_datetime(_as_str(document.get("startOfLease"))),
            status=_as_str(document.get("status")),
            comment=_as_str(document.get("comment")),
        )


@dataclass
class PaginatedClosedCarReservationsResponse:
    """One page of a user's closed reservations."""

    total_items: int = 0
    page: int = 0
    page_size: int = 0
    items: list[ClosedCarReservationResponse] = field(default_factory=list)

    @classmethod
    def from_json(cls, document: Mapping[str, Any]) -> PaginatedClosedCarReservationsResponse:
        return cls(
            total_items=_as_int(document.get("totalItems")),
            page=_as_int(document.get("page")),
            page_size=_as_int(document.get("pageSize")),
            items=[
                ClosedCarReservationResponse.from_json(item)
                for item in _as_objects(document.get("items"))
            ],
        )