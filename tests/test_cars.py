import httpx
import pytest

from carrental.base import ApiError, NotAuthorizedError, ServerUnavailableError
from carrental.cars import GetCarsRequest
from carrental.dto import GetCarsDto

BASE = "http://localhost:5000"


def _client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def _query():
    return GetCarsDto(page_number=1, page_size=10, sort_order="asc", sort_by="brand")


def test_prepare_builds_url_query_and_headers():
    request = GetCarsRequest(BASE, "token", _query(), _client(lambda r: httpx.Response(200)))
    built = request.prepare()
    assert built.method == "GET"
    assert built.url.path == "/v1/Car/GetCars"
    params = dict(built.url.params)
    assert params == {
        "pageNumber": "1",
        "pageSize": "10",
        "sortBy": "brand",
        "sortOrder": "asc",
    }
    assert built.headers["Authorization"] == "Bearer token"
    assert built.headers["Content-Type"] == "application/json"


def test_set_query_changes_next_request():
    request = GetCarsRequest(BASE, "token", _query(), _client(lambda r: httpx.Response(200)))
    request.set_query(GetCarsDto(page_number=3, page_size=5, sort_order="desc", sort_by="power"))
    params = dict(request.prepare().url.params)
    assert params["pageNumber"] == "3"
    assert params["pageSize"] == "5"
    assert params["sortOrder"] == "desc"
    assert params["sortBy"] == "power"


def test_send_parses_cars():
    document = {
        "pageNumber": 1,
        "pageSize": 10,
        "totalItem": 1,
        "cars": [{"id": "car-1", "brand": "Brand", "model": "Model", "power": 150}],
    }
    request = GetCarsRequest(
        BASE, "token", _query(), _client(lambda r: httpx.Response(200, json=document))
    )
    result = request.send()
    assert result.total_item == 1
    assert [car.id for car in result.cars] == ["car-1"]
    assert result.cars[0].power == 150


def test_error_status_reports_code():
    request = GetCarsRequest(BASE, "token", _query(), _client(lambda r: httpx.Response(500)))
    with pytest.raises(ApiError) as info:
        request.send()
    assert info.value.message == "Код ошибки: 500"


def test_connection_refused():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    request = GetCarsRequest(BASE, "token", _query(), _client(handler))
    with pytest.raises(ServerUnavailableError) as info:
        request.send()
    assert info.value.message == "Сервер временно недопустен"


def test_unauthorized():
    request = GetCarsRequest(BASE, "token", _query(), _client(lambda r: httpx.Response(401)))
    with pytest.raises(NotAuthorizedError):
        request.send()