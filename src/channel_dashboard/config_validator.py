"""
Configuration validation utilities.

Environment lookups with placeholder detection and readable errors.
"""
import os
import warnings
from typing import Optional
from .exceptions import ConfigurationError

# Values copied from a .env template without being filled in
PLACEHOLDER_PATTERNS = ("your_", "placeholder", "xxx", "replace", "todo")


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key)
    if value is None:
        return default

    if _is_placeholder(value):
        warnings.warn(
            f"{key} appears to be a placeholder. Using the default instead.",
            UserWarning
        )
        return default

    return value


def get_int_env(key: str, default: int, minimum: int = 0) -> int:
    """
    Get an integer environment variable.

    :raises: ConfigurationError if the value is not an integer or below minimum
    """
    raw = get_optional_env(key)
    if raw is None or raw.strip() == "":
        return default

    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}.")

    if value < minimum:
        raise ConfigurationError(f"{key} must be at least {minimum}, got {value}.")

    return value


def _is_placeholder(value: str) -> bool:
    value_lower = value.lower()
    return any(pattern in value_lower for pattern in PLACEHOLDER_PATTERNS)


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate a data file path.

    :param path: Path to validate
    :param path_name: Setting name (for error messages)
    :param must_exist: Whether the file must already exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")

    if must_exist and not os.path.isfile(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Set {path_name} to the JSON file with the channel data."
        )

    return path
