"""Settings loading: ``config.yml``, then ``GMOCOIN_*`` overrides, then the key pair.

Override names mirror the settings tree, ``GMOCOIN_<SECTION>__<FIELD>``
(``GMOCOIN_HTTP__TIMEOUT_SECONDS``, ``GMOCOIN_ENDPOINTS__PRIVATE``) or
``GMOCOIN_<FIELD>`` for top-level scalars. A name that matches no setting is
an error rather than a silent no-op. Values are handed to pydantic as the raw
strings, so an API key like ``0123`` keeps its leading zero.

``GMO_COIN_API_KEY`` / ``GMO_COIN_API_SECRET`` fill ``credentials`` when the
file and the overrides leave it unset.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from .errors import CredentialError
from .settings import CredentialSettings, EndpointSettings, HttpSettings, Settings
from .signing import Credentials

API_KEY_ENV = "GMO_COIN_API_KEY"
API_SECRET_ENV = "GMO_COIN_API_SECRET"
CONFIG_ENV = "GMOCOIN_CONFIG"
ENV_PREFIX = "GMOCOIN_"

# Read elsewhere, not settings
_NON_SETTING_ENV = {CONFIG_ENV, "GMOCOIN_LOG_LEVEL"}

_SECTIONS: dict[str, type[BaseModel]] = {
    "endpoints": EndpointSettings,
    "http": HttpSettings,
    "credentials": CredentialSettings,
}


def _override_path(env_name: str) -> tuple[str, ...]:
    parts = tuple(env_name[len(ENV_PREFIX) :].lower().split("__"))
    if len(parts) == 1 and parts[0] in Settings.model_fields and parts[0] not in _SECTIONS:
        return parts
    if len(parts) == 2 and parts[0] in _SECTIONS and parts[1] in _SECTIONS[parts[0]].model_fields:
        return parts
    raise ValueError(f"{env_name} does not name a setting")


def _override_value(path: tuple[str, ...], raw: str) -> Any:
    if path == ("http", "proxy") and raw == "":
        return None
    return raw


def _apply_env_overrides(data: dict[str, Any], environ: dict[str, str]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(data)
    for name in sorted(environ):
        if not name.startswith(ENV_PREFIX) or name in _NON_SETTING_ENV:
            continue
        path = _override_path(name)
        value = _override_value(path, environ[name])
        if len(path) == 1:
            merged[path[0]] = value
            continue
        section = merged.get(path[0])
        section = dict(section) if isinstance(section, dict) else {}
        section[path[1]] = value
        merged[path[0]] = section
    return merged


def _apply_key_pair(data: dict[str, Any], environ: dict[str, str]) -> dict[str, Any]:
    api_key = environ.get(API_KEY_ENV, "")
    api_secret = environ.get(API_SECRET_ENV, "")
    if data.get("credentials") is None and api_key and api_secret:
        return {**data, "credentials": {"api_key": api_key, "api_secret": api_secret}}
    return data


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from YAML plus environment.

    Raises:
        ValueError: If the file is not a mapping, an override names no setting,
            or validation fails
    """
    environ = dict(os.environ)
    if config_path is None:
        config_path = environ.get(CONFIG_ENV, "config.yml")

    path = Path(config_path)
    if path.exists():
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        if loaded is None:
            data: dict[str, Any] = {}
        elif isinstance(loaded, dict):
            data = loaded
        else:
            raise ValueError(f"Config root must be a mapping, got: {type(loaded)!r}")
    else:
        data = {}

    data = _apply_key_pair(_apply_env_overrides(data, environ), environ)

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc


def load_credentials(settings: Settings | None = None) -> Credentials:
    """Resolve credentials from settings, then from the environment.

    Raises:
        CredentialError: If no complete key pair is available
    """
    if settings is not None and settings.credentials is not None:
        return Credentials(
            settings.credentials.api_key.get_secret_value(),
            settings.credentials.api_secret.get_secret_value(),
        )

    api_key = os.environ.get(API_KEY_ENV, "")
    api_secret = os.environ.get(API_SECRET_ENV, "")
    if not api_key or not api_secret:
        raise CredentialError(f"Set {API_KEY_ENV} and {API_SECRET_ENV} or configure credentials")
    return Credentials(api_key, api_secret)
