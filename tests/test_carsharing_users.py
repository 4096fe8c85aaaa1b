import httpx
import pytest

from carrental.base import ApiError, ServerUnavailableError
from carrental.carsharing_users import (
    CreateOrUpdateCarsharingUserRequest,
    GetCarsharingUserRequest,
)
from carrental.dto import (
    CarsharingUserDto,
    CreateOrUpdateCarsharingUserRequestBody,
    LoginResponse,
)

BASE = "http://localhost:5000"
CREDENTIALS = LoginResponse(token="token", user_id="user-1")


def _client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


def _body():
    user = CarsharingUserDto(id="user-1", name="Ivan", surname="Ivanov", age=30)
    return CreateOrUpdateCarsharingUserRequestBody.from_user(user)


def test_update_posts_body_with_bearer():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["auth"] = request.headers["Authorization"]
        seen["content"] = request.content
        return httpx.Response(200)

    body = _body()
    request = CreateOrUpdateCarsharingUserRequest(BASE, CREDENTIALS, body, _client(handler))
    assert request.send() == "Данные успешно обновлены"
    assert seen["method"] == "POST"
    assert seen["path"] == "/v1/CarsharingUser/CreateOrUpdateCarsharingUser"
    assert seen["auth"] == "Bearer token"
    assert seen["content"] == body.to_json()


def test_update_error_collects_codes():
    errors = [{"Code": "Phone.Invalid"}, {"Code": "Age.Invalid"}]
    request = CreateOrUpdateCarsharingUserRequest(
        BASE, CREDENTIALS, _body(), _client(lambda r: httpx.Response(400, json=errors))
    )
    with pytest.raises(ApiError) as info:
        request.send()
    assert info.value.details == ["Phone.Invalid", "Age.Invalid"]


def test_update_connection_refused():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    request = CreateOrUpdateCarsharingUserRequest(BASE, CREDENTIALS, _body(), _client(handler))
    with pytest.raises(ServerUnavailableError) as info:
        request.send()
    assert info.value.message == "Сервер временно недоступен"


def test_get_user_query_and_result():
    seen = {}
    document = {"id": "user-1", "name": "Ivan", "email": "ivan@example.com", "age": 30}

    def handler(request):
        seen["params"] = dict(request.url.params)
        seen["path"] = request.url.path
        return httpx.Response(200, json=document)

    request = GetCarsharingUserRequest(BASE, CREDENTIALS, _client(handler))
    user = request.send()
    assert seen["params"] == {"userId": "user-1"}
    assert seen["path"] == "/v1/CarsharingUser/GetCarsharingUserByUserId"
    assert user == CarsharingUserDto.from_json(document)
    assert user.email == "ivan@example.com"


def test_get_user_error_collects_codes():
    request = GetCarsharingUserRequest(
        BASE,
        CREDENTIALS,
        _client(lambda r: httpx.Response(404, json=[{"Code": "NotFound"}])),
    )
    with pytest.raises(ApiError) as info:
        request.send()
    assert info.value.details == ["NotFound"]


def test_get_user_error_without_body_has_no_codes():
    request = GetCarsharingUserRequest(
        BASE, CREDENTIALS, _client(lambda r: httpx.Response(500))
    )
    with pytest.raises(ApiError) as info:
        request.send()
    assert info.value.details == []