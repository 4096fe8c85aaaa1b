"""Request bodies, query builders and simple response records of the API."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping


def _number(value: float) -> float | int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _encode(payload: Mapping[str, Any]) -> bytes:
    text = json.dumps(payload, indent=4, sort_keys=True, ensure_ascii=False)
    return (text + "\n").encode("utf-8")


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


@dataclass
class LoginDto:
    """Credentials sent to log in."""

    email: str = ""
    password: str = ""

    def to_json(self) -> bytes:
        return _encode({"Email": self.email, "Password": self.password})


@dataclass
class RegistrateDto:
    """Data sent to begin and end a registration."""

    username: str = ""
    email: str = ""
    password: str = ""

    def to_json(self) -> bytes:
        return _encode(
            {"Email": self.email, "Password": self.password, "Username": self.username}
        )


@dataclass
class CreateCarOrderDto:
    """Body of a request creating or updating a car order."""

    car_id: str = ""
    carsharing_user_id: str = ""
    start_of_lease: str = ""
    end_of_lease: str = ""
    comment: str = ""
    approximate_price: float = 0.0

    def to_json(self) -> bytes:
        return _encode(
            {
                "CarId": self.car_id,
                "CarsharingUserId": self.carsharing_user_id,
                "LeaseDateTime": {
                    "StartOfLease": self.start_of_lease,
                    "EndOfLease": self.end_of_lease,
                },
                "Comment": self.comment,
                "ApproximatePrice": _number(self.approximate_price),
            }
        )


@dataclass
class CarsharingUserDto:
    """Profile of a carsharing user."""

    id: str = ""
    name: str = ""
    surname: str = ""
    patronymic: str = ""
    email: str = ""
    phone: str = ""
    age: int = 0

    @classmethod
    def from_json(cls, document: Mapping[str, Any]) -> CarsharingUserDto:
        return cls(
            id=_as_str(document.get("id")),
            name=_as_str(document.get("name")),
            surname=_as_str(document.get("surname")),
            patronymic=_as_str(document.get("patronymic")),
            email=_as_str(document.get("email")),
            phone=_as_str(document.get("phone")),
            age=_as_int(document.get("age")),
        )


@dataclass
class CreateOrUpdateCarsharingUserRequestBody:
    """Body of a request creating or updating a carsharing user profile."""

    user_id: str = ""
    name: str = ""
    surname: str = ""
    patronymic: str = ""
    phone: str = ""
    age: int = 0

    @classmethod
    def from_user(cls, user: CarsharingUserDto) -> CreateOrUpdateCarsharingUserRequestBody:
        return cls(
            user_id=user.id,
            name=user.name,
            surname=user.surname,
            patronymic=user.patronymic,
            phone=user.phone,
            age=user.age,
        )

    def to_json(self) -> bytes:
        return _encode(
            {
                "UserId": self.user_id,
                "Name": self.name,
                "Surname": self.surname,
                "Patronymic": self.patronymic,
                "Age": self.age,
                "Phone": self.phone,
            }
        )


@dataclass
class GetCarsDto:
    """Paging and sorting of the car list."""

    page_number: int
    page_size: int
    sort_order: str
    sort_by: str

    def to_json(self) -> bytes:
        return _encode(
            {
                "PageNumber": self.page_number,
                "PageSize": self.page_size,
                "SortOrder": self.sort_order,
                "SortBy": self.sort_by,
            }
        )

    def to_query(self) -> list[tuple[str, str]]:
        return [
            ("pageNumber", str(self.page_number)),
            ("pageSize", str(self.page_size)),
            ("sortBy", self.sort_by),
            ("sortOrder", self.sort_order),
        ]


@dataclass
class CarOrdersFilter:
    start_of_lease: str = ""
    end_of_lease: str = ""
    price: str = ""


@dataclass
class SortParams:
    order_by_field: str = ""
    sort_direction: int = 0


@dataclass
class PageParams:
    page: int = 0
    page_size: int = 0


@dataclass
class GetClosedCarReservations:
    """Query for a user's closed car reservations."""

    filter: CarOrdersFilter = field(default_factory=CarOrdersFilter)
    sort: SortParams = field(default_factory=SortParams)
    page: PageParams = field(default_factory=PageParams)
    carsharing_user_id: str = ""

    def to_query(self) -> list[tuple[str, str]]:
        return [
            ("carsharingUserId", self.carsharing_user_id),
            ("startOfLease", self.filter.start_of_lease),
            ("endOfLease", self.filter.end_of_lease),
            ("price", self.filter.price),
            ("sortDirection", str(self.sort.sort_direction)),
            ("orderByField", self.sort.order_by_field),
            ("page", str(self.page.page)),
            ("pageSize", str(self.page.page_size)),
        ]


@dataclass
class LoginResponse:
    """Bearer token and user id returned by a successful login."""

    token: str = ""
    user_id: str = ""

    @classmethod
    def from_json(cls, document: Mapping[str, Any]) -> LoginResponse:
        return cls(
            token=_as_str(document.get("token")),
            user_id=_as_str(document.get("userId")),
        )