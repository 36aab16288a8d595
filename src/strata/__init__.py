"""
Strata - serialized configuration providers

Turns in-memory Python values into profile-scoped dictionaries that a
layered configuration system can merge.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("strata")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "Strata Contributors"

from strata.errors import ConfigError, SerializationError, TypeMismatch  # noqa: E402
from strata.metadata import Metadata, SourceLocation  # noqa: E402
from strata.profile import Profile  # noqa: E402
from strata.providers import Provider, Serialized  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "ConfigError",
    "Metadata",
    "Profile",
    "Provider",
    "SerializationError",
    "Serialized",
    "SourceLocation",
    "TypeMismatch",
]
