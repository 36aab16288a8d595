"""
Provider that sources values directly from an in-memory Python object.

The object is serialized into a structured value each time data() is
called. Unkeyed, the object must serialize to a dictionary, which becomes
the data for the configured profile. Keyed with a path like "a.b.c", the
object may serialize to any value and is nested under one dictionary per
path segment:

    >>> Serialized.keyed("debug", "a.b.c", 42).data()
    {Profile('debug'): {'a': {'b': {'c': 42}}}}
"""

from __future__ import annotations

import dataclasses as _dataclasses
import functools as _functools
import logging as _logging
import typing as _typing

import strata.config as config
import strata.errors as errors
import strata.metadata as metadata
import strata.profile as profile
import strata.providers.base as base
import strata.value as value

_logger = _logging.getLogger(__name__)

T = _typing.TypeVar("T")

# Constructors call one another; skip our own frames when recording the caller
_SKIP_MODULES = (__name__,)


def _caller_location(
    location: metadata.SourceLocation | None,
) -> metadata.SourceLocation | None:
    if location is not None:
        return location
    if not config.get_settings().capture_location:
        return None
    return metadata.SourceLocation.from_caller(skip=_SKIP_MODULES)


def _nest(segments: _typing.Sequence[str], leaf: value.Value) -> value.Value:
    """Wrap `leaf` in one single-entry dict per segment, last segment innermost."""
    return _functools.reduce(
        lambda inner, segment: {segment: inner},
        reversed(segments),
        leaf,
    )


@_dataclasses.dataclass(frozen=True)
class Serialized(base.Provider, _typing.Generic[T]):
    """
    A provider that emits a serialized Python object to a profile.

    Metadata:
        Named after the type of the held value. The source location is the
        call site of the constructor.

    Data (unkeyed):
        The value must serialize to a dictionary, emitted as-is for the
        profile.

    Data (keyed):
        The value may serialize to anything. Nested dictionaries are created
        for every non-empty segment of the key path, each mapping to the
        next, with the value at the leaf. Empty segments ("a..b") add no
        level; a key with no non-empty segments behaves as unkeyed.

    Instances are immutable. with_profile() and with_key() return updated
    copies.
    """

    value: T
    """The object to serialize."""

    key: str | None = None
    """Key path (`a.b.c`) to emit the value under, or None for the root."""

    profile: profile.Profile = profile.Profile.DEFAULT
    """The profile to emit the value to."""

    location: metadata.SourceLocation | None = _dataclasses.field(
        default=None, compare=False
    )
    """Where this provider was constructed."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "profile", profile.coerce(self.profile))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_value(
        cls,
        value: T,
        profile: str,
        *,
        location: metadata.SourceLocation | None = None,
    ) -> Serialized[T]:
        """
        Emit `value`, which must serialize to a dictionary, to `profile`.

        Args:
            value: The object to serialize.
            profile: Target profile name.
            location: Explicit source location. Defaults to the caller's.
        """
        return cls(
            value=value,
            profile=profile,
            location=_caller_location(location),
        )

    @classmethod
    def defaults(
        cls, value: T, *, location: metadata.SourceLocation | None = None
    ) -> Serialized[T]:
        """Emit `value`, which must serialize to a dictionary, to the default profile."""
        return cls.from_value(value, profile.Profile.DEFAULT, location=location)

    @classmethod
    def globals(
        cls, value: T, *, location: metadata.SourceLocation | None = None
    ) -> Serialized[T]:
        """Emit `value`, which must serialize to a dictionary, to the global profile."""
        return cls.from_value(value, profile.Profile.GLOBAL, location=location)

    @classmethod
    def keyed(
        cls,
        profile: str,
        key: str,
        value: T,
        *,
        location: metadata.SourceLocation | None = None,
    ) -> Serialized[T]:
        """
        Emit `value` nested under `key` to `profile`.

        Equivalent to `Serialized.from_value(value, profile).with_key(key)`.
        """
        return cls.from_value(value, profile, location=location).with_key(key)

    @classmethod
    def default(
        cls, key: str, value: T, *, location: metadata.SourceLocation | None = None
    ) -> Serialized[T]:
        """Emit `value` nested under `key` to the default profile."""
        return cls.keyed(profile.Profile.DEFAULT, key, value, location=location)

    @classmethod
    def global_(
        cls, key: str, value: T, *, location: metadata.SourceLocation | None = None
    ) -> Serialized[T]:
        """Emit `value` nested under `key` to the global profile."""
        return cls.keyed(profile.Profile.GLOBAL, key, value, location=location)

    def with_profile(self, profile: str) -> Serialized[T]:
        """Return a copy emitting to `profile` instead."""
        return _dataclasses.replace(self, profile=profile)

    def with_key(self, key: str) -> Serialized[T]:
        """Return a copy emitting under key path `key` instead."""
        return _dataclasses.replace(self, key=key)

    # -------------------------------------------------------------------------
    # Provider interface
    # -------------------------------------------------------------------------

    def metadata(self) -> metadata.Metadata:
        """Name this provider after the held value's type, at its call site."""
        qualified = config.get_settings().qualified_names
        return metadata.Metadata(
            name=metadata.type_name(self.value, qualified=qualified),
            source=self.location,
        )

    def data(self) -> dict[profile.Profile, value.Dict]:
        """
        Serialize the held value and emit it to the configured profile.

        Returns:
            `{profile: dictionary}`.

        Raises:
            SerializationError: If the value cannot be serialized.
            TypeMismatch: If the (possibly keyed) result is not a dictionary.
        """
        try:
            serialized = value.serialize(self.value)
        except errors.SerializationError as e:
            _logger.debug("Serializing %s failed: %s", type(self.value).__name__, e.cause)
            e.with_metadata(self.metadata()).with_profile(self.profile)
            raise

        if self.key is not None:
            serialized = _nest(value.split_path(self.key), serialized)

        data = value.as_dict(serialized)
        if data is None:
            actual = value.kind_of(serialized)
            _logger.debug(
                "Serialized %s to %s, expected a map", type(self.value).__name__, actual
            )
            raise errors.TypeMismatch(
                actual,
                metadata=self.metadata(),
                profile=self.profile,
            )

        _logger.debug(
            "Emitting %d key(s) from %s to profile %r (key=%r)",
            len(data),
            type(self.value).__name__,
            str(self.profile),
            self.key,
        )
        return self.profile.collect(data)
