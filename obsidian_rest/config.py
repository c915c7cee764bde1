"""Configuration loading for the Local REST API connection."""

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from obsidian_rest.constants import (
    API_KEY_ENV,
    CONFIG_PATH,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_PROTOCOL,
    DEFAULT_TIMEOUT,
    DEFAULT_VERIFY_SSL,
)
from obsidian_rest.data_models import RemoteConfig

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"Setting '{name}' must be a boolean, got {value!r}")


def _parse_port(value: Any) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Setting 'port' must be an integer, got {value!r}") from exc
    if not 0 < port < 65536:
        raise ValueError(f"Setting 'port' must be between 1 and 65535, got {port}")
    return port


def _parse_timeout(value: Any) -> float:
    try:
        timeout = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Setting 'timeout' must be a number, got {value!r}") from exc
    if timeout <= 0:
        raise ValueError(f"Setting 'timeout' must be positive, got {timeout}")
    return timeout


def load_config_file(config_path: Path) -> dict[str, Any]:
    """Read the optional YAML settings file.

    Args:
        config_path: Path to the YAML file.

    Returns:
        The mapping found under the top-level ``obsidian`` key, or the whole
        document when that key is absent. An empty dict when the file is missing.

    Raises:
        ValueError: If the file exists but is not a mapping.
    """
    if not config_path.exists():
        logger.debug("No configuration file at %s, using defaults", config_path)
        return {}

    raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Configuration file {config_path} must contain a mapping")

    section = raw_config.get("obsidian", raw_config)
    if not isinstance(section, dict):
        raise ValueError("The 'obsidian' section of the configuration must be a mapping")
    return section


def load_remote_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RemoteConfig:
    """Build the :class:`RemoteConfig` used to reach the Local REST API.

    Values are resolved in order of precedence: environment variables
    (``OBSIDIAN_PROTOCOL``, ``OBSIDIAN_HOST``, ``OBSIDIAN_PORT``,
    ``OBSIDIAN_VERIFY_SSL``, ``OBSIDIAN_TIMEOUT``), then the YAML file, then
    built-in defaults. The API key is only read from ``OBSIDIAN_API_KEY``
    (or an ``api_key`` entry in the YAML file).

    Args:
        config_path: YAML file to read. Defaults to ``OBSIDIAN_CONFIG`` or
            ``obsidian.yaml`` at the project root.
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        A fully validated, immutable :class:`RemoteConfig`.

    Raises:
        ValueError: If the API key is missing or a setting is malformed.
    """
    env = os.environ if environ is None else environ
    if config_path is None:
        config_path = Path(env.get("OBSIDIAN_CONFIG", str(CONFIG_PATH))).expanduser()

    file_settings = load_config_file(config_path)

    def _setting(key: str, default: Any) -> Any:
        env_value = env.get(f"OBSIDIAN_{key.upper()}")
        if env_value not in (None, ""):
            return env_value
        return file_settings.get(key, default)

    api_key = env.get(API_KEY_ENV) or file_settings.get("api_key")
    if not isinstance(api_key, str) or not api_key.strip():
        raise ValueError(f"{API_KEY_ENV} environment variable is required")

    protocol = str(_setting("protocol", DEFAULT_PROTOCOL)).strip().lower()
    if protocol not in {"http", "https"}:
        raise ValueError(f"Setting 'protocol' must be 'http' or 'https', got {protocol!r}")

    host = str(_setting("host", DEFAULT_HOST)).strip()
    if not host:
        raise ValueError("Setting 'host' cannot be empty")

    return RemoteConfig(
        api_key=api_key.strip(),
        protocol=protocol,
        host=host,
        port=_parse_port(_setting("port", DEFAULT_PORT)),
        verify_ssl=_parse_bool("verify_ssl", _setting("verify_ssl", DEFAULT_VERIFY_SSL)),
        timeout=_parse_timeout(_setting("timeout", DEFAULT_TIMEOUT)),
    )
