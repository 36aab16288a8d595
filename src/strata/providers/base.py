"""
Abstract base class for configuration providers.

A provider supplies a mapping of profile to dictionary that a merge engine
layers with the output of other providers.
"""

from __future__ import annotations

import abc as _abc

import strata.metadata as metadata
import strata.profile as profile
import strata.value as value


class Provider(_abc.ABC):
    """
    Abstract base class for configuration providers.

    Subclasses must implement metadata() and data().
    """

    @_abc.abstractmethod
    def metadata(self) -> metadata.Metadata:
        """Describe this provider for error attribution."""
        ...

    @_abc.abstractmethod
    def data(self) -> dict[profile.Profile, value.Dict]:
        """
        Produce this provider's configuration data.

        Returns:
            Mapping of profile to the dictionary emitted for it.

        Raises:
            ConfigError: If the data cannot be produced. No partial data
                is ever returned.
        """
        ...

    def selected_profile(self) -> profile.Profile | None:
        """
        The profile this provider asks the merge engine to select, if any.

        Most providers only emit data and return None.
        """
        return None
