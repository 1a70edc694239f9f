"""Environment variable utility functions for release-readiness."""

import json
import logging
import os

logger = logging.getLogger("release-readiness.utils")


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if environment variable is set to a standard truthy value.

    Considers 'true', '1', 'yes' as truthy values (case-insensitive).

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to a truthy value, False otherwise
    """
    return os.getenv(env_var_name, default).lower() in ("true", "1", "yes")


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def get_env_list(env_var_name: str) -> list[str]:
    """Split a comma separated environment variable into its non-empty items.

    Args:
        env_var_name: Name of the environment variable to read

    Returns:
        The stripped items, in order; empty when the variable is unset
    """
    raw = os.getenv(env_var_name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


def get_custom_headers(env_var_name: str) -> dict[str, str] | None:
    """Parse custom HTTP headers from a JSON object environment variable.

    Args:
        env_var_name: Name of the environment variable to read

    Returns:
        The headers, or None when unset or not a JSON object of strings
    """
    raw = os.getenv(env_var_name)
    if not raw:
        return None

    try:
        headers = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning(f"Ignoring {env_var_name}: not valid JSON")
        return None

    if not isinstance(headers, dict):
        logger.warning(f"Ignoring {env_var_name}: expected a JSON object")
        return None

    return {str(key): str(value) for key, value in headers.items()}
