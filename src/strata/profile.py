"""
Profile identifiers.

A profile names one configuration layer ("default", "global", "debug", ...).
Providers emit their data keyed by profile so a merge engine can later
select between them.
"""

from __future__ import annotations

import typing as _typing

import strata.constants as _constants

if _typing.TYPE_CHECKING:
    import strata.value as value


class Profile(str):
    """
    A case-sensitive configuration profile name.

    Profiles are plain strings: two profiles are equal iff their names are
    equal, and a profile compares equal to the bare string it wraps.

    Example:
        >>> Profile("debug") == "debug"
        True
        >>> Profile.DEFAULT.collect({"port": 80})
        {Profile('default'): {'port': 80}}
    """

    __slots__ = ()

    DEFAULT: _typing.ClassVar[Profile]
    """The reserved "default" profile."""

    GLOBAL: _typing.ClassVar[Profile]
    """The reserved "global" profile."""

    def __repr__(self) -> str:
        return f"Profile({str(self)!r})"

    def is_custom(self) -> bool:
        """Check if this is a user-defined profile (not default or global)."""
        return self not in (_constants.DEFAULT_PROFILE, _constants.GLOBAL_PROFILE)

    def collect(self, data: value.Dict) -> dict[Profile, value.Dict]:
        """
        Associate a dictionary with this profile.

        Args:
            data: The dictionary to scope under this profile.

        Returns:
            Single-entry mapping of this profile to `data`.
        """
        return {self: data}


Profile.DEFAULT = Profile(_constants.DEFAULT_PROFILE)
Profile.GLOBAL = Profile(_constants.GLOBAL_PROFILE)


def coerce(profile: str) -> Profile:
    """Return `profile` as a Profile, reusing it if it already is one."""
    if isinstance(profile, Profile):
        return profile
    if not isinstance(profile, str):
        raise TypeError(f"profile must be a string, got {type(profile).__name__}")
    return Profile(profile)
