from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from orgchart.settings import Settings


def _load_structured_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    ext = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if ext in {".yaml", ".yml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    elif ext == ".toml":
        data = tomllib.loads(text)
    elif ext == ".json":
        data = json.loads(text)
    else:
        raise ValueError(f"Unsupported config format '{ext}' for {path}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")
    return data


def load_settings(path: Path | None = None, overrides: Mapping[str, Any] | None = None) -> Settings:
    """Merge environment defaults, an optional config file and explicit overrides.

    ``None`` values in ``overrides`` are ignored so unset CLI flags fall back
    to the file or the environment.
    """

    values: Dict[str, Any] = Settings().model_dump()
    if path is not None:
        raw = _load_structured_file(path)
        # allow the settings to live under an [orgchart] table
        section = raw.get("orgchart", raw)
        if not isinstance(section, dict):
            raise ValueError(f"Config file {path} must contain a mapping under 'orgchart'")
        values.update(section)
    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value
    return Settings.model_validate(values)


__all__ = ["load_settings"]
