"""Common machinery of API requests and the errors they raise."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import httpx

from carrental.config import ConfigurationManager

_SERVER_KEY = "localhost"


class ApiError(Exception):
    """A request failed; ``details`` holds any structured error data."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ServerUnavailableError(ApiError):
    """The server refused the connection."""


class NotAuthorizedError(ApiError):
    """The server asked for authentication."""


class ApiMismatchError(ApiError):
    """The server answered in a form the client does not expect."""


def server_base_url(config: ConfigurationManager) -> str:
    """Return the server base URL from the configuration."""
    value = config.get(_SERVER_KEY)
    return value if isinstance(value, str) else str(value)


class ApiRequest(ABC):
    """One API call: ``prepare`` builds it, ``handle`` turns the answer into a result."""

    unavailable_message = "Сервер временно недопустен"

    def __init__(self, base_url: str, client: httpx.Client | None = None) -> None:
        self.base_url = base_url
        self._owns_client = client is None
        self.client = client if client is not None else httpx.Client()

    @property
    def cookies(self) -> httpx.Cookies:
        return self.client.cookies

    def _url(self, path: str) -> str:
        return self.base_url + path

    @staticmethod
    def _headers(token: str | None = None) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @abstractmethod
    def prepare(self) -> httpx.Request:
        """Build the HTTP request to send."""

    @abstractmethod
    def handle(self, response: httpx.Response) -> Any:
        """Interpret the server's response, raising ApiError on failure."""

    def send(self) -> Any:
        """Send the request and return what ``handle`` makes of the answer."""
        request = self.prepare()
        try:
            response = self.client.send(request)
        except httpx.ConnectError as exc:
            raise ServerUnavailableError(self.unavailable_message) from exc
        except httpx.TransportError as exc:
            raise ApiError(str(exc)) from exc
        try:
            response.read()
        finally:
            response.close()
        if response.status_code == 401:
            raise NotAuthorizedError("Authentication required")
        return self.handle(response)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> ApiRequest:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()