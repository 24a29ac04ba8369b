"""Settings loader: a YAML file plus ``VENUEKIT_`` environment overrides.

``VENUEKIT_EXCHANGES__COINBASE__SANDBOX=true`` sets
``exchanges.coinbase.sandbox``. Override values are parsed as YAML scalars,
except credentials, which are always taken verbatim so that an all-digit key
or passphrase stays a string.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .exchanges.factory import EXCHANGES
from .settings import ExchangeCredentials, Settings

logger = logging.getLogger(__name__)

ENV_PREFIX = "VENUEKIT_"
DEFAULT_CONFIG_PATH = "config.yml"

# Read by load_settings and configure_logging themselves.
_RESERVED_KEYS = frozenset({"CONFIG", "LOG_LEVEL"})

_CREDENTIAL_FIELDS = frozenset(ExchangeCredentials.model_fields)


def _is_credential(path: list[str]) -> bool:
    return len(path) == 4 and path[0] == "exchanges" and path[2] == "credentials" and path[3] in _CREDENTIAL_FIELDS


def _deep_set(obj: dict[str, Any], path: list[str], value: Any) -> None:
    cur = obj
    for key in path[:-1]:
        nxt = cur.get(key)
        if not isinstance(nxt, dict):
            nxt = {}
            cur[key] = nxt
        cur = nxt
    cur[path[-1]] = value


def _override_value(path: list[str], raw: str) -> Any:
    if _is_credential(path):
        return raw
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def _env_overrides(environ: dict[str, str]) -> list[tuple[list[str], str]]:
    overrides = []
    for key, raw in sorted(environ.items()):
        if not key.startswith(ENV_PREFIX):
            continue
        remainder = key[len(ENV_PREFIX) :]
        head = remainder.split("__", 1)[0]
        if head in _RESERVED_KEYS:
            continue
        path = [part.lower() for part in remainder.split("__") if part]
        if path:
            overrides.append((path, raw))
    return overrides


def _apply_env_overrides(data: dict[str, Any], environ: dict[str, str] | None = None) -> dict[str, Any]:
    merged = dict(data)
    for path, raw in _env_overrides(dict(os.environ) if environ is None else environ):
        logger.debug("Config override %s", ".".join(path))
        _deep_set(merged, path, _override_value(path, raw))
    return merged


def _check_exchanges(data: dict[str, Any]) -> None:
    """Reject venues without an adapter and credentials YAML did not read as text."""
    exchanges = data.get("exchanges") or {}
    if not isinstance(exchanges, dict):
        raise ValueError("Config 'exchanges' must be a mapping of venue name to settings")

    for name, venue in exchanges.items():
        if str(name).lower() not in EXCHANGES:
            raise ValueError(
                f"Unknown exchange {name!r} in configuration; expected one of: {', '.join(sorted(EXCHANGES))}"
            )
        credentials = venue.get("credentials") if isinstance(venue, dict) else None
        if not isinstance(credentials, dict):
            continue
        for field, value in credentials.items():
            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"Credential exchanges.{name}.credentials.{field} must be a string; quote it in the config file"
                )


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return {}

    loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config root must be a mapping, got: {type(loaded)!r}")
    return loaded


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from YAML, then apply ``VENUEKIT_A__B=value`` overrides.

    The file is ``config_path``, else ``$VENUEKIT_CONFIG``, else ``config.yml``;
    a missing file means defaults.

    Raises:
        ValueError: If the file root is not a mapping, an exchange has no
            adapter, a credential is not a string, or the result does not validate
    """
    if config_path is None:
        config_path = os.environ.get(f"{ENV_PREFIX}CONFIG", DEFAULT_CONFIG_PATH)

    data = _apply_env_overrides(_read_config_file(Path(config_path)))
    _check_exchanges(data)

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
