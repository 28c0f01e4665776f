# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/k8s/errors.py
from __future__ import annotations

from typing import Optional


class KansibleError(RuntimeError):
    """Base class for every failure the runner reports."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------
class FileReadError(KansibleError):
    """Inventory file missing or unreadable."""

class SettingsError(KansibleError):
    """Runner settings file unreadable or invalid."""

class ClientConfigError(KansibleError):
    """Kubeconfig (or in-cluster config) could not be loaded."""

class ClientConstructionError(KansibleError):
    """API client could not be built from a loaded config."""


# ---------------------------------------------------------------------
# Inventory ConfigMap
# ---------------------------------------------------------------------
class CreateFailed(KansibleError):
    """ConfigMap create failed for a reason other than AlreadyExists."""

class UpdateFailed(KansibleError):
    """ConfigMap replace (after AlreadyExists) failed."""


# ---------------------------------------------------------------------
# Playbook Job
# ---------------------------------------------------------------------
class SubmitFailed(KansibleError):
    """Job create failed for a reason other than AlreadyExists."""

class ReplaceFailed(KansibleError):
    """Job replace (after AlreadyExists) failed."""
