"""
Configuration providers.

A provider supplies a mapping of profile to dictionary for a merge engine.
"""

from strata.providers.base import Provider
from strata.providers.serialized import Serialized

__all__ = ["Provider", "Serialized"]
