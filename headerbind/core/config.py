"""
Binder configuration.

Environment variables:
    HEADERBIND_TAG          dataclass metadata key holding the header name (default: header)
    HEADERBIND_OVERFLOW     error | wrap, how out-of-width numbers are handled (default: error)
    HEADERBIND_CONFIG_FILE  optional YAML/JSON file with the same keys (tag, overflow)

Explicit env vars win over values from the file.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from headerbind.core.convert import OVERFLOW_ERROR, OVERFLOW_POLICIES
from headerbind.core.errors import ConfigError
from headerbind.core.types import DEFAULT_TAG, SKIP_MARKER

_log = logging.getLogger("headerbind.config")


@dataclass(frozen=True)
class BindConfig:
    tag: str = DEFAULT_TAG
    skip_marker: str = SKIP_MARKER
    overflow: str = OVERFLOW_ERROR

    def __post_init__(self):
        if not self.tag:
            raise ConfigError("tag must be a non-empty string")
        if self.overflow not in OVERFLOW_POLICIES:
            raise ConfigError(f"Unsupported overflow policy: {self.overflow!r} (expected one of {OVERFLOW_POLICIES})")


def load_config_file(path: Path) -> Dict[str, Any]:
    """
    Read a flat mapping from a YAML or JSON file.

    Returns {} if the file is absent or unreadable; a file that parses to
    something other than a mapping is a ConfigError.
    """
    if not path.exists():
        _log.warning("Config file %s does not exist; using defaults", path)
        return {}

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        _log.warning("Cannot read config file %s: %s", path, exc)
        return {}

    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse config file {path} as JSON or YAML: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must be a mapping, got {type(data).__name__}")
    return data


def get_bind_config(path: Optional[Path] = None) -> BindConfig:
    values: Dict[str, Any] = {}

    file_path = path
    if file_path is None:
        env_path = (os.getenv("HEADERBIND_CONFIG_FILE") or "").strip()
        file_path = Path(env_path) if env_path else None
    if file_path is not None:
        values.update(load_config_file(Path(file_path)))

    tag = (os.getenv("HEADERBIND_TAG") or "").strip()
    if tag:
        values["tag"] = tag
    overflow = (os.getenv("HEADERBIND_OVERFLOW") or "").strip().lower()
    if overflow:
        values["overflow"] = overflow

    unknown = sorted(set(values) - {"tag", "overflow"})
    if unknown:
        _log.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

    cfg = BindConfig(
        tag=str(values.get("tag", DEFAULT_TAG)),
        overflow=str(values.get("overflow", OVERFLOW_ERROR)).lower(),
    )
    _log.debug("headerbind config tag=%s overflow=%s", cfg.tag, cfg.overflow)
    return cfg
