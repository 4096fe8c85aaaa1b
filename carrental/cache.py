"""Process-wide cache of the logged-in user's data."""

from __future__ import annotations

import threading
from typing import Any, Iterable

from carrental.dto import CarsharingUserDto, LoginResponse

_BEARER_KEY = "bearer"
_USER_ID_KEY = "userId"


class MissingCredentialsError(RuntimeError):
    """Raised when login credentials are requested before they were saved."""


class ClientCache:
    """Thread-safe store of session values, car images and the user profile."""

    _instance: ClientCache | None = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._data: dict[str, str] = {}
        self._car_images: dict[str, Any] = {}
        self._user = CarsharingUserDto()

    @classmethod
    def instance(cls) -> ClientCache:
        """Return the shared cache, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def set_data(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def get_data(self, key: str) -> str:
        """Return the stored value, or an empty string when there is none."""
        with self._lock:
            return self._data.get(key, "")

    def save_login_credentials(self, credentials: LoginResponse) -> None:
        with self._lock:
            self._data[_BEARER_KEY] = credentials.token
            self._data[_USER_ID_KEY] = credentials.user_id

    def get_login_credentials(self) -> LoginResponse:
        with self._lock:
            if _BEARER_KEY not in self._data or _USER_ID_KEY not in self._data:
                raise MissingCredentialsError("This data should not be here yet")
            return LoginResponse(
                token=self._data[_BEARER_KEY], user_id=self._data[_USER_ID_KEY]
            )

    def save_car_image(self, car_order_id: str, image: Any) -> None:
        with self._lock:
            self._car_images[car_order_id] = image

    def get_car_image(self, car_order_id: str) -> Any:
        """Return the cached image for an order, or None."""
        with self._lock:
            return self._car_images.get(car_order_id)

    def clear_car_image_cache(self, keep_ids: Iterable[str]) -> None:
        """Drop every cached image whose order id is not in ``keep_ids``."""
        keep = set(keep_ids)
        with self._lock:
            self._car_images = {
                order_id: image
                for order_id, image in self._car_images.items()
                if order_id in keep
            }

    def save_user_profile(self, user: CarsharingUserDto) -> None:
        with self._lock:
            self._user = user

    def get_user_profile(self) -> CarsharingUserDto:
        with self._lock:
            return self._user