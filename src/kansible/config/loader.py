# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/config/loader.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

import yaml
from pydantic import ValidationError

from kansible.k8s.errors import SettingsError
from .models import RunnerSettings

log = logging.getLogger("kansible")

CONFIG_ENV = "KANSIBLE_CONFIG"


def resolve_kubeconfig_path(
    override: Optional[str | Path],
    environ: Mapping[str, str],
) -> Optional[Path]:
    """
    Pick the kubeconfig to use.

    1. explicit --kubeconfig
    2. $HOME/.kube/config
    3. $USERPROFILE/.kube/config (windows)

    None when nothing applies; the caller then falls back to in-cluster
    config.
    """
    if override:
        return Path(override).expanduser()

    home = environ.get("HOME") or environ.get("USERPROFILE")
    if home:
        return Path(home) / ".kube" / "config"
    return None


def resolve_settings_path(
    override: Optional[str | Path],
    environ: Mapping[str, str],
) -> Optional[Path]:
    """--config wins over $KANSIBLE_CONFIG; None means built-in defaults."""
    if override:
        return Path(override)
    env = environ.get(CONFIG_ENV)
    if env:
        return Path(env)
    return None


def _load_yaml(path: Path) -> dict:
    """Load a YAML file, expanding ${ENV_VAR} references."""
    raw = path.read_text()
    expanded = os.path.expandvars(raw)
    return yaml.safe_load(expanded) or {}


def load_settings(path: Optional[str | Path] = None) -> RunnerSettings:
    """
    Load and validate runner settings.

    With no path every field keeps its default, which reproduces the
    stock openshift-ansible single-namespace behaviour.
    """
    if path is None:
        log.debug("No settings file - using defaults")
        return RunnerSettings()

    path = Path(path)
    try:
        data = _load_yaml(path)
    except (OSError, yaml.YAMLError) as exc:
        raise SettingsError(f"cannot read settings file {path}: {exc}", exc) from exc

    if not isinstance(data, dict):
        raise SettingsError(f"settings file {path} must contain a mapping")

    try:
        settings = RunnerSettings.model_validate(data)
    except ValidationError as exc:
        raise SettingsError(f"invalid settings in {path}:\n{exc}", exc) from exc

    log.debug("Loaded settings from %s", path)
    return settings
