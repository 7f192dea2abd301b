"""Config loading and normalization."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any

import yaml

from fhirconstraint.config.model import ValidatorConfig
from fhirconstraint.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME
from fhirconstraint.constants.engines import VALID_ERROR_POLICIES, VALID_FHIR_VERSIONS
from fhirconstraint.constants.reporting import VALID_OUTPUT_FORMATS
from fhirconstraint.exceptions import ConfigError


def load_config(root: Path | None = None, config_path: Path | None = None) -> ValidatorConfig:
    """Load and validate config from ``fhirconstraint.yaml`` or an explicit path.

    A missing default file yields the defaults; a missing explicit file is an
    error.
    """
    base = (root or Path.cwd()).resolve()
    path = config_path.resolve() if config_path else (base / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return ValidatorConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = set(raw) - ALLOWED_CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {sorted(unknown)}")

    return apply_overrides(ValidatorConfig(), **raw)


def apply_overrides(config: ValidatorConfig, **overrides: Any) -> ValidatorConfig:
    """Return *config* with non-None overrides validated and applied."""
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config

    if "fhir_version" in changes:
        _check_choice(changes["fhir_version"], VALID_FHIR_VERSIONS, "fhir_version")
    if "error_policy" in changes:
        _check_choice(changes["error_policy"], VALID_ERROR_POLICIES, "error_policy")
    if "output_format" in changes:
        _check_choice(changes["output_format"], VALID_OUTPUT_FORMATS, "output_format")
    if "exit_on_error" in changes and not isinstance(changes["exit_on_error"], bool):
        raise ConfigError("exit_on_error must be a boolean")

    try:
        return dataclasses.replace(config, **changes)
    except TypeError as exc:
        raise ConfigError(f"Unsupported config override: {exc}") from exc


def _check_choice(value: Any, allowed: frozenset[str], key_name: str) -> None:
    if not isinstance(value, str) or value not in allowed:
        raise ConfigError(f"{key_name} must be one of {sorted(allowed)}, got {value!r}")
