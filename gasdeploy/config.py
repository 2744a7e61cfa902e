"""
config.py

Responsibility: Load deploy configuration into a typed model.

Sources, lowest to highest precedence:
- built-in defaults
- an optional YAML file (`gas-deploy.yml` in the project root, or --config)
- environment variables (OPENAI_API_KEY, OPENAI_API_BASE)

The API key is only required once text generation is actually needed;
`require_api_key()` enforces that at the point of use.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from gasdeploy.project_files import DEFAULT_EXTENSIONS

CONFIG_FILENAME = "gas-deploy.yml"
DEFAULT_COMMIT_MESSAGE = "Automated update: synchronized with GAS project and updated README.md"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class DeployConfig:
    """Settings for one `gas-deploy` run."""

    api_key: str = ""
    api_base: str = "https://api.openai.com/v1"
    model: str = "gpt-3.5-turbo"
    max_tokens: int = 1500
    temperature: float = 0.3
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    extensions: tuple[str, ...] = field(default=DEFAULT_EXTENSIONS)
    docs_dir: str = "docs"
    skip_unchanged: bool = True
    push: bool = True

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigError("OPENAI_API_KEY must be set to generate documentation.")
        return self.api_key


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping/object at the top level.")
    return data


def _typed(data: dict[str, Any], key: str, kind: type | tuple[type, ...]) -> Any:
    value = data[key]
    # bool is an int subclass; do not accept `max_tokens: true`.
    if isinstance(value, bool) and kind is not bool:
        raise ConfigError(f"`{key}` has the wrong type.")
    if not isinstance(value, kind):
        raise ConfigError(f"`{key}` has the wrong type.")
    return value


def load_config(
    root: str | Path,
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> DeployConfig:
    """
    Build a DeployConfig for the project at `root`.

    An explicit `config_path` must exist; the default file is optional.
    """
    env = os.environ if environ is None else environ

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file does not exist: {path}")
        data = _read_yaml(path)
    else:
        path = Path(root) / CONFIG_FILENAME
        data = _read_yaml(path) if path.exists() else {}

    values: dict[str, Any] = {}
    for key in ("api_base", "model", "commit_message", "docs_dir"):
        if key in data:
            values[key] = _typed(data, key, str).strip()
    if "max_tokens" in data:
        values["max_tokens"] = _typed(data, "max_tokens", int)
    if "temperature" in data:
        values["temperature"] = float(_typed(data, "temperature", (int, float)))
    for key in ("skip_unchanged", "push"):
        if key in data:
            values[key] = _typed(data, key, bool)
    if "extensions" in data:
        exts = _typed(data, "extensions", list)
        if not all(isinstance(e, str) and e.startswith(".") for e in exts):
            raise ConfigError("`extensions` must be a list of suffixes like '.gs'.")
        values["extensions"] = tuple(exts)

    if "commit_message" in values and not values["commit_message"]:
        raise ConfigError("`commit_message` must not be empty.")

    values["api_key"] = env.get("OPENAI_API_KEY", "").strip()
    if env.get("OPENAI_API_BASE"):
        values["api_base"] = env["OPENAI_API_BASE"].strip()

    return DeployConfig(**values)
