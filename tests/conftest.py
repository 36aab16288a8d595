"""
Shared pytest fixtures for Strata tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import dataclasses as _dataclasses
import enum as _enum
import os as _os
import typing as _typing

import pydantic as _pydantic
import pytest as _pytest

import strata.config as config


@_pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: _pytest.MonkeyPatch) -> _typing.Iterator[None]:
    """Clear STRATA_ environment variables and the cached settings around each test."""
    for key in list(_os.environ):
        if key.startswith("STRATA_"):
            monkeypatch.delenv(key, raising=False)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


# =============================================================================
# Sample values
# =============================================================================


class Color(_enum.Enum):
    """Enum that serializes to its value."""

    RED = "red"
    BLUE = "blue"


@_dataclasses.dataclass
class ServerConfig:
    """Dataclass that serializes to a map."""

    host: str = "localhost"
    port: int = 8080
    tags: list[str] = _dataclasses.field(default_factory=list)


class AppConfig(_pydantic.BaseModel):
    """Pydantic model with a nested dataclass and an enum."""

    name: str = "app"
    debug: bool = False
    color: Color = Color.RED
    server: ServerConfig = _pydantic.Field(default_factory=ServerConfig)


@_pytest.fixture
def server_config() -> ServerConfig:
    return ServerConfig(host="example.com", port=443, tags=["a", "b"])


@_pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(name="demo", debug=True)
