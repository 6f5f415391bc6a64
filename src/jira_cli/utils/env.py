"""Environment variable utility functions for jira-cli."""

import os


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


def parse_env_list(
    env_var_name: str, default: tuple[str, ...] = ()
) -> tuple[str, ...]:
    """Read a comma-separated environment variable as a tuple of strings.

    Blank items are dropped. An unset or blank variable yields ``default``.
    """
    value = os.getenv(env_var_name)
    if value is None or not value.strip():
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())
