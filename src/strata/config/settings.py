"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with STRATA_ prefix

Example:
  STRATA_CAPTURE_LOCATION=false
"""

import functools as _functools

import pydantic_settings as _pydantic_settings

import strata.constants as _constants


class Settings(_pydantic_settings.BaseSettings):
    """
    Library-wide settings for Strata.

    These only affect diagnostics; they never change the data a provider
    produces.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=_constants.ENV_PREFIX,
        extra="ignore",
    )

    capture_location: bool = True
    """Record the call site of provider constructors."""

    qualified_names: bool = True
    """Use module-qualified type names (`builtins.dict`) in provider metadata."""


@_functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Return the process-wide settings, loading them on first use.

    Call `get_settings.cache_clear()` to reload after the environment changes.
    """
    return Settings()
