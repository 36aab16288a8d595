"""
Errors raised while producing configuration data.

All errors derive from ConfigError, which can be annotated with the
provider metadata, profile and key path it relates to so that callers can
render a precise diagnostic.
"""

from __future__ import annotations

import typing as _typing

import strata.constants as _constants

if _typing.TYPE_CHECKING:
    import strata.metadata as metadata
    import strata.profile as profile


class ConfigError(Exception):
    """
    Base error for configuration providers.

    Attributes:
        message: The error description without attribution.
        metadata: Metadata of the provider the error came from, if known.
        profile: Profile being produced when the error occurred, if known.
        path: Key path segments the error relates to.
    """

    def __init__(
        self,
        message: str,
        *,
        metadata: metadata.Metadata | None = None,
        profile: profile.Profile | None = None,
        path: tuple[str, ...] = (),
    ) -> None:
        self.message = message
        self.metadata = metadata
        self.profile = profile
        self.path = tuple(path)
        super().__init__(message)

    def with_metadata(self, metadata: metadata.Metadata) -> _typing.Self:
        """Attach provider metadata unless some is already set."""
        if self.metadata is None:
            self.metadata = metadata
        return self

    def with_profile(self, profile: profile.Profile) -> _typing.Self:
        """Attach the profile being produced unless one is already set."""
        if self.profile is None:
            self.profile = profile
        return self

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            if self.metadata is not None and self.profile is not None:
                key = self.metadata.interpolate(self.profile, self.path)
            else:
                key = _constants.KEY_DELIMITER.join(self.path)
            parts.append(f"for key {key!r}")
        if self.metadata is not None:
            parts.append(f"in {self.metadata}")
        return " ".join(parts)


class SerializationError(ConfigError):
    """The source value could not be serialized into a structured value."""

    def __init__(self, cause: BaseException, **kwargs: _typing.Any) -> None:
        self.cause = cause
        super().__init__(f"serialization failed: {cause}", **kwargs)


class TypeMismatch(ConfigError):
    """
    A value had the wrong shape.

    Attributes:
        actual: Kind of the value that was found (e.g. "integer").
        expected: Kind that was required (e.g. "map").
    """

    def __init__(
        self,
        actual: str,
        expected: str = _constants.EXPECTED_MAP,
        **kwargs: _typing.Any,
    ) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"invalid type: found {actual}, expected {expected}", **kwargs)
