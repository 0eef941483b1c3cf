"""Resolver configuration.

Values come from the process environment (optionally seeded from a ``.env``
file by the CLI) or from a ``.yaml``/``.yml``/``.json`` config file.

Environment variables
---------------------
``ENTRYPOINT_ASSETS_APP_ROOT``     application root, defaults to the working directory
``ENTRYPOINT_ASSETS_MANIFEST``     explicit path to ``assets.json``
``ENTRYPOINT_ASSETS_HOST``         base URL for development-only assets, defaults to ``/assets/``
``ENTRYPOINT_ASSETS_DEVELOPMENT``  truthy value forces development mode
``NODE_ENV``                       ``development`` enables development mode
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError
from .manifest_loader import default_manifest_path

DEFAULT_ASSET_HOST = "/assets/"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class AssetsConfig:
    app_root: Path
    asset_host: str = DEFAULT_ASSET_HOST
    development: bool = False
    manifest_path: Path | None = None

    def __post_init__(self) -> None:
        if self.manifest_path is None:
            self.manifest_path = default_manifest_path(self.app_root)

    @classmethod
    def from_env(cls) -> AssetsConfig:
        app_root = Path(os.getenv("ENTRYPOINT_ASSETS_APP_ROOT") or Path.cwd())
        manifest = os.getenv("ENTRYPOINT_ASSETS_MANIFEST")
        return cls(
            app_root=app_root,
            asset_host=os.getenv("ENTRYPOINT_ASSETS_HOST", DEFAULT_ASSET_HOST),
            development=_development_from_env(),
            manifest_path=Path(manifest) if manifest else None,
        )


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def _development_from_env() -> bool:
    flag = os.getenv("ENTRYPOINT_ASSETS_DEVELOPMENT")
    if flag is not None:
        return _as_bool(flag)
    return os.getenv("NODE_ENV") == "development"


def _load_json_or_yaml(path: Path) -> dict[str, Any]:
    suffix = path.suffix.lower()
    content = path.read_text(encoding="utf-8")

    if suffix in {".yaml", ".yml"}:
        parsed = yaml.safe_load(content)
    elif suffix == ".json":
        parsed = json.loads(content)
    else:
        raise ConfigurationError(f"Unsupported config format: {path}")

    if not isinstance(parsed, dict):
        raise ConfigurationError("Config must be a top-level object/map")
    return parsed


def load_config_file(config_path: Path) -> AssetsConfig:
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        data = _load_json_or_yaml(config_path)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Unable to parse config file: {exc}") from exc

    # Relative paths are taken from the config file's directory.
    base = config_path.resolve().parent
    app_root = base / str(data.get("app_root", "."))
    manifest = data.get("manifest_path")
    return AssetsConfig(
        app_root=app_root,
        asset_host=str(data.get("asset_host", DEFAULT_ASSET_HOST)),
        development=_as_bool(data.get("development", False)),
        manifest_path=base / str(manifest) if manifest else None,
    )


def _parse_env_lines(text: str) -> Iterator[tuple[str, str]]:
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, sep, value = line.partition("=")
        key, value = key.strip(), value.strip()
        if line.startswith("#") or not sep or not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        yield key, value


def load_env_file(env_path: Path) -> dict[str, str]:
    """Seed ``os.environ`` from a ``.env`` file; variables already set win.

    Returns the variables that were added.
    """
    if not env_path.is_file():
        return {}

    added: dict[str, str] = {}
    for key, value in _parse_env_lines(env_path.read_text(encoding="utf-8")):
        if key not in os.environ:
            os.environ[key] = added[key] = value
    return added
