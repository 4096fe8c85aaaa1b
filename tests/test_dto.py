import json

from carrental.dto import (
    CarOrdersFilter,
    CarsharingUserDto,
    CreateCarOrderDto,
    CreateOrUpdateCarsharingUserRequestBody,
    GetCarsDto,
    GetClosedCarReservations,
    LoginDto,
    LoginResponse,
    PageParams,
    RegistrateDto,
    SortParams,
)

EMAIL = "user@example.com"


def test_login_dto_wire_bytes():
    password = "password"
    body = LoginDto(email=EMAIL, password=password).to_json()
    assert body == b'{\n    "Email": "user@example.com",\n    "Password": "password"\n}\n'


def test_registrate_dto_fields():
    password = "password"
    body = RegistrateDto(username="driver", email=EMAIL, password=password).to_json()
    assert json.loads(body) == {"Email": EMAIL, "Password": password, "Username": "driver"}


def test_create_car_order_nests_lease_times():
    order = CreateCarOrderDto(
        car_id="car-1",
        carsharing_user_id="user-1",
        start_of_lease="2024-10-09T10:00:00",
        end_of_lease="2024-10-10T10:00:00",
        comment="Please wash the car",
        approximate_price=1500.5,
    )
    assert json.loads(order.to_json()) == {
        "CarId": "car-1",
        "CarsharingUserId": "user-1",
        "LeaseDateTime": {
            "StartOfLease": "2024-10-09T10:00:00",
            "EndOfLease": "2024-10-10T10:00:00",
        },
        "Comment": "Please wash the car",
        "ApproximatePrice": 1500.5,
    }


def test_create_car_order_keeps_non_ascii_comment():
    order = CreateCarOrderDto(comment="Привет")
    assert "Привет".encode("utf-8") in order.to_json()


def test_carsharing_user_from_json():
    document = {
        "id": "u1",
        "name": "Ivan",
        "surname": "Petrov",
        "patronymic": "Sergeevich",
        "phone": "+0000000",
        "email": EMAIL,
        "age": 30,
    }
    user = CarsharingUserDto.from_json(document)
    assert user == CarsharingUserDto(
        id="u1",
        name="Ivan",
        surname="Petrov",
        patronymic="Sergeevich",
        email=EMAIL,
        phone="+0000000",
        age=30,
    )


def test_carsharing_user_from_json_defaults_for_missing_or_wrong_types():
    user = CarsharingUserDto.from_json({"name": 5, "age": "30"})
    assert user == CarsharingUserDto()


def test_request_body_from_user_round_trip():
    user = CarsharingUserDto(
        id="u1", name="Ivan", surname="Petrov", patronymic="S", email=EMAIL, phone="+0000000", age=41
    )
    body = CreateOrUpdateCarsharingUserRequestBody.from_user(user)
    assert json.loads(body.to_json()) == {
        "UserId": user.id,
        "Name": user.name,
        "Surname": user.surname,
        "Patronymic": user.patronymic,
        "Age": user.age,
        "Phone": user.phone,
    }


def test_get_cars_query_order():
    dto = GetCarsDto(page_number=2, page_size=10, sort_order="asc", sort_by="brand")
    assert dto.to_query() == [
        ("pageNumber", "2"),
        ("pageSize", "10"),
        ("sortBy", "brand"),
        ("sortOrder", "asc"),
    ]


def test_get_cars_json():
    dto = GetCarsDto(page_number=1, page_size=20, sort_order="desc", sort_by="power")
    assert json.loads(dto.to_json()) == {
        "PageNumber": 1,
        "PageSize": 20,
        "SortOrder": "desc",
        "SortBy": "power",
    }


def test_closed_reservations_query():
    query = GetClosedCarReservations(
        filter=CarOrdersFilter("2024-01-01", "2024-02-01", "100"),
        sort=SortParams("price", 1),
        page=PageParams(3, 15),
        carsharing_user_id="user-7",
    )
    assert query.to_query() == [
        ("carsharingUserId", "user-7"),
        ("startOfLease", "2024-01-01"),
        ("endOfLease", "2024-02-01"),
        ("price", "100"),
        ("sortDirection", "1"),
        ("orderByField", "price"),
        ("page", "3"),
        ("pageSize", "15"),
    ]


def test_login_response_from_json():
    response = LoginResponse.from_json({"token": "token", "userId": "user-1"})
    assert response == LoginResponse(token="token", user_id="user-1")


def test_login_response_missing_fields_are_empty():
    response = LoginResponse.from_json({})
    assert (response.token, response.user_id) == ("", "")