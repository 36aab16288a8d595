"""
Shared constants for Strata.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

# Profile names
DEFAULT_PROFILE = "default"
"""Reserved profile holding baseline values."""

GLOBAL_PROFILE = "global"
"""Reserved profile whose values apply over every other profile."""

# Key paths
KEY_DELIMITER = "."
"""Separator between segments of a key path (`a.b.c`)."""

# Settings
ENV_PREFIX = "STRATA_"
"""Prefix for environment variables read by `strata.config.Settings`."""

EXPECTED_MAP = "map"
"""Kind name reported when a dictionary-shaped value was required."""
