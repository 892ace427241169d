"""Config loading and normalization for gqlcontext traces."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from gqlcontext.config.model import GqlContextConfig
from gqlcontext.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_DOCUMENT_GLOBS,
    DEFAULT_MAX_FILE_KB,
    DEFAULT_SCHEMA_PATHS,
    DEFAULT_TRACE_KINDS,
)
from gqlcontext.constants.kinds import TRACKED_KINDS
from gqlcontext.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> GqlContextConfig:
    """Load and validate trace config from ``gqlcontext.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config file at %s, using defaults", path)
        return GqlContextConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw.keys()) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"unknown config keys: {sorted(unknown)}")

    schema_raw = raw.get("schema", list(DEFAULT_SCHEMA_PATHS))
    if isinstance(schema_raw, str):
        schema_raw = [schema_raw]
    schema_paths = tuple(_ensure_string_list(schema_raw, "schema"))
    if not schema_paths:
        raise ConfigError("schema must name at least one SDL file")

    kinds = tuple(_ensure_string_list(raw.get("kinds", list(DEFAULT_TRACE_KINDS)), "kinds"))
    unknown_kinds = set(kinds) - TRACKED_KINDS
    if unknown_kinds:
        raise ConfigError(f"kinds must be drawn from {sorted(TRACKED_KINDS)}, got {sorted(unknown_kinds)}")

    max_file_kb = raw.get("max_file_kb", DEFAULT_MAX_FILE_KB)
    if isinstance(max_file_kb, bool) or not isinstance(max_file_kb, int) or max_file_kb <= 0:
        raise ConfigError("max_file_kb must be a positive integer")

    fail_on_unresolved = raw.get("fail_on_unresolved", False)
    if not isinstance(fail_on_unresolved, bool):
        raise ConfigError("fail_on_unresolved must be a boolean")

    document_globs = tuple(_ensure_string_list(raw.get("documents", list(DEFAULT_DOCUMENT_GLOBS)), "documents"))
    absolute_globs = [pattern for pattern in document_globs if Path(pattern).is_absolute()]
    if absolute_globs:
        raise ConfigError(f"documents patterns must be relative to the root, got {absolute_globs}")

    return GqlContextConfig(
        schema_paths=schema_paths,
        document_globs=document_globs,
        kinds=kinds,
        max_file_kb=max_file_kb,
        fail_on_unresolved=fail_on_unresolved,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return [item.strip() for item in value if item.strip()]
