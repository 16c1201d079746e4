"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import HuConfig

logger = logging.getLogger(__name__)

# Global cache to avoid reloading config multiple times per invocation
_config_cache: HuConfig | None = None


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """
    Get path to user configuration file.

    Returns:
        Path to ~/.config/hu/config.json (or XDG equivalent)
    """
    return get_xdg_config_home() / "hu" / "config.json"


def get_project_config_path(cwd: Path | None = None) -> Path:
    """
    Get path to project configuration file.

    Args:
        cwd: Working directory to search from (defaults to current directory)

    Returns:
        Path to .hu.json in the project root
    """
    if cwd is None:
        cwd = Path.cwd()
    return cwd / ".hu.json"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`.
    Nested dicts are merged, not replaced.

    Example:
        >>> deep_merge({"grep": {"limit": 5, "hidden": True}}, {"grep": {"limit": 10}})
        {'grep': {'limit': 10, 'hidden': True}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON as dict, or None if file doesn't exist or can't be parsed
    """
    if not path.exists():
        return None

    try:
        with path.open() as f:
            data = json.load(f)
            if isinstance(data, dict):
                return data
            return None
    except (json.JSONDecodeError, OSError) as e:
        # A broken config file should not stop a read-only command
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None


def _env_int(name: str, minimum: int) -> int | None:
    raw = os.environ.get(name)
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid %s value '%s', ignoring", name, raw)
        return None
    if value < minimum:
        logger.warning("%s must be >= %d, got %d, ignoring", name, minimum, value)
        return None
    return value


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Env vars have the highest precedence and override all config files.

    Supported env vars:
        HU_READ_CONTEXT - overrides read.context
        HU_GREP_LIMIT - overrides grep.limit
        HU_GREP_HIDDEN - overrides grep.hidden
        HU_DOCS_LIMIT - overrides docs.limit

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        Configuration dictionary with env var overrides applied
    """
    result = config_dict.copy()

    if (context := _env_int("HU_READ_CONTEXT", 0)) is not None:
        result["read"] = {**result.get("read", {}), "context": context}

    if (grep_limit := _env_int("HU_GREP_LIMIT", 1)) is not None:
        result["grep"] = {**result.get("grep", {}), "limit": grep_limit}

    if hidden_str := os.environ.get("HU_GREP_HIDDEN"):
        hidden = hidden_str.lower() not in ("false", "0", "")
        result["grep"] = {**result.get("grep", {}), "hidden": hidden}

    if (docs_limit := _env_int("HU_DOCS_LIMIT", 1)) is not None:
        result["docs"] = {**result.get("docs", {}), "limit": docs_limit}

    return result


def get_default_config() -> dict[str, Any]:
    """
    Get hardcoded default configuration.

    Returns:
        Dictionary with default configuration values
    """
    return {
        "read": {"context": 10},
        "grep": {"limit": None, "hidden": False},
        "docs": {"limit": None},
    }


def load_config(project_dir: Path | None = None, use_cache: bool = True) -> HuConfig:
    """
    Load configuration with multi-layer merging.

    Configuration precedence (highest to lowest):
        1. Environment variables (HU_*)
        2. Project config (.hu.json)
        3. User config (~/.config/hu/config.json)
        4. Hardcoded defaults

    Args:
        project_dir: Project directory to load .hu.json from (defaults to cwd)
        use_cache: If True, return cached config from previous load

    Returns:
        Validated HuConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    merged = get_default_config()

    if user_config := load_json_file(get_user_config_path()):
        merged = deep_merge(merged, user_config)

    if project_config := load_json_file(get_project_config_path(project_dir)):
        merged = deep_merge(merged, project_config)

    merged = apply_env_overrides(merged)

    config = HuConfig(**merged)
    _config_cache = config

    return config


def clear_cache() -> None:
    """
    Clear the cached configuration.

    Useful for testing or when config files change during execution.
    """
    global _config_cache
    _config_cache = None
