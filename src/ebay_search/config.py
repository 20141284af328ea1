"""Configuration loading -- access token and search defaults from a TOML file."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ebay_search.client import DEFAULT_TIMEOUT
from ebay_search.query import DEFAULT_RESULT_LIMIT, DEFAULT_SEARCH_URL

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("config.toml")
CONFIG_FILE_ENV_VAR = "EBAY_SEARCH_CONFIG_FILE"
ACCESS_TOKEN_ENV_VAR = "EBAY_ACCESS_TOKEN"


class ConfigError(RuntimeError):
    """Raised when the configuration cannot be loaded."""


@dataclass(frozen=True)
class AppConfig:
    """Settings needed to run a search.

    Example ``config.toml``::

        [api_keys]
        ebay = "v^1.1#i^1#..."

        [ebay]
        app_id = "MyApp-SBX-..."
        cert_id = "SBX-..."
        limit = 5
    """

    access_token: str
    app_id: Optional[str] = None
    cert_id: Optional[str] = None
    search_url: str = DEFAULT_SEARCH_URL
    limit: int = DEFAULT_RESULT_LIMIT
    timeout: float = DEFAULT_TIMEOUT


def resolve_config_path(
    explicit: Union[Path, str, None] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Pick the config file: explicit path, then environment override, then ./config.toml."""
    if explicit is not None:
        return Path(explicit)
    env = environ if environ is not None else os.environ
    override = env.get(CONFIG_FILE_ENV_VAR)
    if override:
        return Path(override)
    return DEFAULT_CONFIG_FILE


def load_config(
    path: Union[Path, str, None] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """Load configuration from a TOML file.

    The access token is read from ``api_keys.ebay``; the ``EBAY_ACCESS_TOKEN``
    environment variable takes precedence when set to a non-blank value. A missing file is only an
    error if no token is available from the environment either.

    Args:
        path: Config file to read. Defaults to :func:`resolve_config_path`.
        environ: Environment mapping, ``os.environ`` when omitted.

    Returns:
        The loaded AppConfig.

    Raises:
        ConfigError: If the file is unreadable or malformed, or no token is found.
    """
    env = environ if environ is not None else os.environ
    config_path = resolve_config_path(path, env)
    raw = _read_config_file(config_path)

    api_keys = _section(raw, "api_keys")
    ebay = _section(raw, "ebay")

    env_token = (env.get(ACCESS_TOKEN_ENV_VAR) or "").strip()
    token = env_token or api_keys.get("ebay")
    if not token or not str(token).strip():
        raise ConfigError(
            f"Missing eBay access token: set api_keys.ebay in {config_path} "
            f"or the {ACCESS_TOKEN_ENV_VAR} environment variable"
        )
    if not isinstance(token, str):
        raise ConfigError("api_keys.ebay must be a string")

    config = AppConfig(
        access_token=token,
        app_id=_optional_str(ebay, "app_id"),
        cert_id=_optional_str(ebay, "cert_id"),
        search_url=_optional_str(ebay, "search_url") or DEFAULT_SEARCH_URL,
        limit=_int(ebay, "limit", DEFAULT_RESULT_LIMIT),
        timeout=_number(ebay, "timeout", DEFAULT_TIMEOUT),
    )
    logger.debug("Loaded configuration from %s", config_path)
    return config


def _read_config_file(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError:
        logger.debug("Config file %s not found", path)
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Malformed config file {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = raw.get(name, {})
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _optional_str(section: Mapping[str, Any], key: str) -> Optional[str]:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"ebay.{key} must be a string")
    return value


def _int(section: Mapping[str, Any], key: str, default: int) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"ebay.{key} must be an integer")
    return value


def _number(section: Mapping[str, Any], key: str, default: float) -> float:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"ebay.{key} must be a number")
    if value <= 0:
        raise ConfigError(f"ebay.{key} must be positive")
    return float(value)
