"""Load ~/.mimeref.config (TOML) with env-var overrides."""
from __future__ import annotations
import os
try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Python < 3.11 backport
from pathlib import Path
from typing import Any

from mimeref.resolver import ConfigError, Resolver

_DEFAULT: dict[str, Any] = {
    "server": {
        "url": "http://localhost:8766",
    },
    # type string -> {source, extensions, compressible, charset}
    "override": {},
}


def _deep_merge(base: dict, override: dict) -> dict:
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def config_path() -> Path:
    # MIMEREF_CONFIG_PATH wins over the per-user default
    if "MIMEREF_CONFIG_PATH" in os.environ:
        return Path(os.environ["MIMEREF_CONFIG_PATH"])
    return Path.home() / ".mimeref.config"


def load_config() -> dict[str, Any]:
    cfg = dict(_DEFAULT)
    for section in cfg:
        cfg[section] = dict(cfg[section])

    path = config_path()
    if path.exists():
        with open(path, "rb") as f:
            user_cfg = tomllib.load(f)
        cfg = _deep_merge(cfg, user_cfg)

    # Env var overrides
    if url := os.environ.get("MIMEREF_SERVER"):
        cfg["server"]["url"] = url

    return cfg


# Module-level singleton — loaded once per process
_config: dict[str, Any] | None = None


def get_config() -> dict[str, Any]:
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_server_url() -> str:
    return get_config()["server"]["url"]


def get_overrides() -> dict[str, Any]:
    overrides = get_config().get("override", {})
    if not isinstance(overrides, dict):
        raise ConfigError("[override] in config must be a table")
    return overrides


def build_resolver(use_overrides: bool = True) -> Resolver:
    """
    Resolver for the configured overrides.
    Falls back to the shared base resolver when there are none.
    """
    overrides = get_overrides() if use_overrides else {}
    return Resolver(override=overrides) if overrides else Resolver()
