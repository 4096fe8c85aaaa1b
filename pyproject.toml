[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carrental"
version = "0.1.0"
description = "Client library for a car-sharing rental HTTP API: request and response records, endpoint calls, pricing and caching."
requires-python = ">=3.10"
dependencies = [
    "httpx",
]
keywords = ["car-rental", "carsharing", "api-client", "http", "reservations"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["carrental"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
