# carrental

A Python client for a car-sharing rental service's HTTP API, built on `httpx`.

| Module | What it holds |
| --- | --- |
| `carrental.config` | `ConfigurationManager`, lookup of top-level keys in a JSON settings file |
| `carrental.base` | `ApiRequest` base class, `server_base_url`, and the `ApiError` family |
| `carrental.dto` | request bodies and queries (`LoginDto`, `RegistrateDto`, `CreateCarOrderDto`, `GetCarsDto`, `GetClosedCarReservations`, ...) and `LoginResponse`, `CarsharingUserDto` |
| `carrental.responses` | `CarDto`, `GetCarsResponse`, `OpenedCarReservationResponse`, `ClosedCarReservationResponse`, `PaginatedClosedCarReservationsResponse` |
| `carrental.users` | `LoginRequest`, `RegistrateRequest`, `VerificationRequest`, `GetVerificationCodeRequest` |
| `carrental.cars` | `GetCarsRequest` |
| `carrental.carsharing_users` | `GetCarsharingUserRequest`, `CreateOrUpdateCarsharingUserRequest` |
| `carrental.car_orders` | `CreateCarOrderRequest`, `GetOpenedCarOrdersRequest`, `GetClosedCarReservationsRequest`, `GetServerTimeRequest` |
| `carrental.pricing` | `RentalPriceCalculator` |
| `carrental.datetimes` | `parse_server_datetime`, `parse_iso_datetime` |
| `carrental.cache` | `ClientCache`, a thread-safe process-wide session cache |
| `carrental.image_loader` | `SingleUrlImageLoader`, `ImageBatchLoader` |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Configuration

The server address is read from the `localhost` key of a JSON settings file
(`settings.json` in the working directory by default):

```json
{
  "localhost": "http://localhost:5000"
}
```

```python
from carrental.config import ConfigurationManager
from carrental.base import server_base_url

config = ConfigurationManager("settings.json")
base_url = server_base_url(config)
```

The file is read again on every `get`. `ConfigurationManager.get` raises
`ConfigurationError` when the file cannot be read, is not valid JSON, or has
no value (or `null`) under the requested key.

## Making requests

Every endpoint class derives from `ApiRequest`. `prepare()` builds the
`httpx.Request`, `handle(response)` interprets an answer, and `send()` does
both. A request takes an optional `httpx.Client`; without one it creates its
own, which `close()` (or leaving a `with` block) closes.

Failures are raised as exceptions derived from `carrental.base.ApiError`,
whose `message` holds the text and `details` any structured data:

- `ServerUnavailableError` when the connection is refused;
- `NotAuthorizedError` on an HTTP 401 answer;
- `ApiMismatchError` when the server answers in a shape the client does not expect.

### Logging in

```python
import httpx
from carrental.cache import ClientCache
from carrental.dto import LoginDto
from carrental.users import LoginRequest

password = "password"
with httpx.Client() as client:
    request = LoginRequest(base_url, LoginDto(email="user@example.com", password=password), client)
    credentials = request.send()   # LoginResponse(token=..., user_id=...)

ClientCache.instance().save_login_credentials(credentials)
```

On failure the server's `description` becomes the `ApiError` message.

### Registration

`RegistrateRequest(base_url, RegistrateDto(...)).send()` begins a
registration. On an HTTP 409 conflict the raised `ApiError.details` maps
`"Email"` and/or `"Username"` to the server's descriptions; an unreachable
server or any other error is reported under the `"Server"` key.
`VerificationRequest(base_url, registration, code).send()` completes it and
explains a wrong or outdated code in the error message.
`GetVerificationCodeRequest(base_url, email).send()` asks for the code again.

### Listing cars

```python
from carrental.cars import GetCarsRequest
from carrental.dto import GetCarsDto

query = GetCarsDto(page_number=1, page_size=10, sort_order="asc", sort_by="brand")
with httpx.Client() as client:
    page = GetCarsRequest(base_url, credentials.token, query, client).send()

for car in page.cars:
    print(car.brand, car.model, car.base_rental_price_per_hour)
```

`set_query` replaces the paging and sorting for the next call.

### Profiles and orders

- `GetCarsharingUserRequest(base_url, credentials).send()` returns a
  `CarsharingUserDto`; `CreateOrUpdateCarsharingUserRequest(base_url, credentials,
  CreateOrUpdateCarsharingUserRequestBody.from_user(user)).send()` saves one. Their
  errors carry the server's error codes as a list in `details`.
- `CreateCarOrderRequest(base_url, token, CreateCarOrderDto(...)).send()`
  returns a confirmation message; a rejected lease period raises `ApiError`
  with the server's first `LeaseDateTime` error.
- `GetOpenedCarOrdersRequest(base_url, token, user_id).send()` returns a list
  of `OpenedCarReservationResponse`.
- `GetClosedCarReservationsRequest(base_url, token, GetClosedCarReservations(...)).send()`
  returns a `PaginatedClosedCarReservationsResponse`.
- `GetServerTimeRequest(base_url, token, hours_offset).send()` returns the
  server's time as a `datetime`; `set_hours_offset` changes the offset.

Authenticated requests send an `Authorization: Bearer <token>` header.

## Estimating a rental price

```python
from datetime import datetime
from carrental.pricing import RentalPriceCalculator

calculator = RentalPriceCalculator(
    datetime(2024, 10, 1, 10, 0), datetime(2024, 10, 3, 12, 0), 50.0
)
print(calculator.calculate())  # 150.0: two calendar days plus one started day
```

## Parsing server timestamps

```python
from carrental.datetimes import parse_server_datetime, parse_iso_datetime

parse_server_datetime("10/09/2024 13:45:00")   # MM/DD/YYYY hh:mm:ss, naive
parse_iso_datetime("2024-10-09T13:45:00.123")  # naive without a zone designator
```

Both raise `ValueError` on text they cannot parse.

## Client cache

`ClientCache.instance()` returns one shared cache per process. It stores
string values (`set_data`/`get_data`, empty string when missing), login
credentials (`get_login_credentials` raises `MissingCredentialsError` before
they are saved), car images per order id (`get_car_image` returns `None` when
missing; `clear_car_image_cache(keep_ids)` drops the rest) and the user
profile.

## Downloading images

`SingleUrlImageLoader().load(url)` returns the image bytes, or `None` when the
download failed. `ImageBatchLoader(client, on_progress)` downloads a batch,
passing each image's bytes to its sink callable and calling
`on_progress(loaded, total)` after each one; once the count set by
`set_target_count` is reached, the call that finished the batch returns the
list of sinks (in URL order for `load_images_in_order`). Downloads run one
after another in the calling thread.

## What this package does not do

It is a library only: it has no graphical interface, no screens or forms, and
no command-line command. Images are handled as raw bytes; nothing here decodes
or displays them.