"""
Provider metadata used to attribute configuration values and errors.

Metadata is purely informational: it names a provider and records where in
the source it was created, so diagnostics can say which layer a bad value
came from. It never affects the data a provider produces.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import sys as _sys
import typing as _typing

import strata.constants as _constants


@_dataclasses.dataclass(frozen=True, slots=True)
class SourceLocation:
    """A position in Python source code."""

    file: str
    line: int
    function: str | None = None

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"

    @classmethod
    def from_caller(cls, skip: tuple[str, ...] = ()) -> SourceLocation | None:
        """
        Capture the location of the code calling this function.

        Args:
            skip: Module name prefixes to walk past. Frames belonging to
                these modules are treated as plumbing and the first frame
                outside them is recorded. Used by constructors that call
                each other so the user's call site is captured rather than
                the library's.

        Returns:
            The caller's location, or None if no frame is available.
        """
        frame: _typing.Any = _sys._getframe(1)
        while frame is not None and skip:
            module = frame.f_globals.get("__name__", "")
            if not module.startswith(skip):
                break
            frame = frame.f_back
        if frame is None:
            return None
        code = frame.f_code
        return cls(file=code.co_filename, line=frame.f_lineno, function=code.co_name)


@_dataclasses.dataclass(frozen=True, slots=True)
class Metadata:
    """
    Describes a provider for error attribution.

    Attributes:
        name: Human-readable provider name, e.g. the type of the held value.
        source: Where the provider was constructed, if recorded.
    """

    name: str
    source: SourceLocation | None = None

    def __str__(self) -> str:
        if self.source is None:
            return self.name
        return f"{self.name} at {self.source}"

    def interpolate(self, profile: str, keys: _typing.Sequence[str]) -> str:
        """
        Render a key path as it would be written in this provider.

        Example:
            >>> Metadata("app.Config").interpolate("debug", ["server", "port"])
            'debug.server.port'
        """
        return _constants.KEY_DELIMITER.join([str(profile), *keys])


def type_name(obj: _typing.Any, *, qualified: bool = True) -> str:
    """
    Name the runtime type of `obj`.

    Args:
        obj: Any object.
        qualified: Prefix the module name (`builtins.dict`, `app.Config`).

    Returns:
        The type name.
    """
    cls = type(obj)
    if not qualified:
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"
