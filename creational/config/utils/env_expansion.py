"""Environment variable expansion for configuration values."""
import os
from typing import Any, Dict


def expand_env_vars(value: Any) -> Any:
    """
    Expand ``$VAR`` and ``${VAR}`` references in configuration values.

    Strings are expanded in place, dictionaries and lists are walked
    recursively and every other value is returned unchanged. References to
    variables that are not set are left as they are.

    Args:
        value: Value to expand

    Returns:
        Value with environment variables expanded
    """
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables in a whole configuration dictionary."""
    return expand_env_vars(config)
