"""Requests of the user account endpoints: login, registration and verification."""

from __future__ import annotations

from typing import Any

import httpx

from carrental.base import ApiError, ApiMismatchError, ApiRequest, ServerUnavailableError
from carrental.car_orders import ERROR_CODE_PREFIX
from carrental.dto import LoginDto, LoginResponse, RegistrateDto

CODE_SENT_MESSAGE = "Сообщение успешно отправлено на почту"
REGISTRATION_CODE_SENT_MESSAGE = "Код подтверждения регистрации отправлен на указанную почту"
ACCOUNT_REGISTERED_MESSAGE = "Аккаунт успешно зарегистрирован"
SERVER_SIDE_ERROR_MESSAGE = "Произошла ошибка на стороне сервера"
WRONG_CODE_MESSAGE = "Введенный вами код неверный"
OUTDATED_CODE_MESSAGE = "Введенный вами код устарел, запросите новый"

EMAIL_CONFLICT_CODE = "UserService.Registrate.Conflict.Email"
USERNAME_CONFLICT_CODE = "UserService.Registrate.Conflict.Username"


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _str_field(section: Any, key: str) -> str:
    value = section.get(key) if isinstance(section, dict) else None
    return value if isinstance(value, str) else ""


class GetVerificationCodeRequest(ApiRequest):
    """Asks the server to send the registration verification code again."""

    path = "/v1/User/SendVerificationCodeAgain"

    def __init__(self, base_url: str, email: str, client: httpx.Client | None = None) -> None:
        super().__init__(base_url, client)
        self.email = email

    def prepare(self) -> httpx.Request:
        return self.client.build_request(
            "GET",
            self._url(self.path),
            params=[("sendersEmail", self.email)],
            headers=self._headers(),
        )

    def handle(self, response: httpx.Response) -> str:
        """Return the confirmation; raise ApiError carrying the HTTP status on failure."""
        if response.is_error:
            raise ApiError(f"{ERROR_CODE_PREFIX}{response.status_code}")
        return CODE_SENT_MESSAGE


class LoginRequest(ApiRequest):
    """Logs a user in and obtains a bearer token."""

    path = "/v1/User/Login"
    unavailable_message = "Сервер недоступен"

    def __init__(self, base_url: str, login: LoginDto, client: httpx.Client | None = None) -> None:
        super().__init__(base_url, client)
        self.login = login

    def prepare(self) -> httpx.Request:
        return self.client.build_request(
            "POST",
            self._url(self.path),
            headers=self._headers(),
            content=self.login.to_json(),
        )

    def handle(self, response: httpx.Response) -> LoginResponse:
        """Return the credentials; raise ApiError with the server's description on failure."""
        document = _json_or_none(response)
        if response.is_error:
            if isinstance(document, dict):
                raise ApiError(_str_field(document, "description"), document)
            raise ApiMismatchError(
                "LoginUserReplyHandler.Handle.Failure;"
                " expected jsonObject is not object. Api request->response missmatch"
            )
        return LoginResponse.from_json(document if isinstance(document, dict) else {})


class RegistrateRequest(ApiRequest):
    """Begins a registration; the server mails a verification code."""

    path = "/v1/User/BeginRegistrateUser"

    def __init__(
        self,
        base_url: str,
        registration: RegistrateDto,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, client)
        self.registration = registration

    def prepare(self) -> httpx.Request:
        return self.client.build_request(
            "POST",
            self._url(self.path),
            headers=self._headers(),
            content=self.registration.to_json(),
        )

    def send(self) -> Any:
        """Send the request; an unreachable server is reported under the ``Server`` key."""
        try:
            return super().send()
        except ServerUnavailableError as exc:
            raise ServerUnavailableError(exc.message, {"Server": exc.message}) from exc

    def handle(self, response: httpx.Response) -> str:
        """Return the confirmation; raise ApiError whose details map fields to messages."""
        if not response.is_error:
            return REGISTRATION_CODE_SENT_MESSAGE
        if response.status_code == 400:
            raise ApiMismatchError(
                "RegistrateUserReplyHandler.Handle.Failure;"
                " occures some validation problems api has some request->response missmatches"
            )
        if response.status_code == 409:
            errors = self._conflicts(_json_or_none(response))
            raise ApiError("; ".join(errors.values()), errors)
        raise ApiError(SERVER_SIDE_ERROR_MESSAGE, {"Server": SERVER_SIDE_ERROR_MESSAGE})

    @staticmethod
    def _conflicts(document: Any) -> dict[str, str]:
        errors: dict[str, str] = {}
        if not isinstance(document, list):
            return errors
        for section in document:
            code = _str_field(section, "code")
            if code == EMAIL_CONFLICT_CODE:
                errors["Email"] = _str_field(section, "description")
            elif code == USERNAME_CONFLICT_CODE:
                errors["Username"] = _str_field(section, "description")
        return errors


class VerificationRequest(ApiRequest):
    """Ends a registration by confirming the mailed verification code."""

    path = "/v1/User/EndRegistrateUser"
    unavailable_message = "Сервер временно недоступен"

    def __init__(
        self,
        base_url: str,
        registration: RegistrateDto,
        code: str,
        client: httpx.Client | None = None,
    ) -> None:
        super().__init__(base_url, client)
        self.registration = registration
        self.code = code

    def prepare(self) -> httpx.Request:
        return self.client.build_request(
            "POST",
            self._url(self.path),
            params=[("code", self.code)],
            headers=self._headers(),
            content=self.registration.to_json(),
        )

    def handle(self, response: httpx.Response) -> str:
        """Return the confirmation; raise ApiError explaining a rejected code."""
        if not response.is_error:
            return ACCOUNT_REGISTERED_MESSAGE
        if response.status_code == 400:
            document = _json_or_none(response)
            if isinstance(document, list):
                for section in document:
                    code = _str_field(section, "code")
                    if code == "WrongCode":
                        raise ApiError(WRONG_CODE_MESSAGE)
                    if code == "Outdated":
                        raise ApiError(OUTDATED_CODE_MESSAGE)
            raise ApiMismatchError(
                "Undocumented exception occures on Process400Error at VerificateReplyHandler.Handle()"
            )
        raise ApiError(SERVER_SIDE_ERROR_MESSAGE)