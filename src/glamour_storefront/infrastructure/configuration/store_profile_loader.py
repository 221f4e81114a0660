"""
Store Profile Loader

Loads the storefront identity (name, country, currency, checkout fees)
from an optional YAML file, falling back to the built-in profile.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from glamour_storefront.core.domain.store_profile import StoreProfile
from glamour_storefront.core.exceptions.configuration_error import ConfigurationError


def load_store_profile(path: Path | None) -> StoreProfile:
    """
    Load the store profile.

    Args:
        path: YAML file with a top-level ``store`` mapping, or None for defaults

    Raises:
        ConfigurationError: If the file is missing, unreadable or invalid
    """
    if path is None:
        return StoreProfile()

    if not path.exists():
        raise ConfigurationError(f"Store profile not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to read store profile {path}: {e}") from e

    try:
        return StoreProfile.model_validate(content.get("store", {}))
    except (AttributeError, ValidationError) as e:
        raise ConfigurationError(f"Invalid store profile {path}: {e}") from e
