# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/ansible/inventory.py
from __future__ import annotations

import logging
from pathlib import Path

from kansible.config import defaults
from kansible.k8s.errors import CreateFailed, FileReadError, UpdateFailed
from kansible.k8s.upsert import (
    UpsertAction,
    UpsertCreateError,
    UpsertReplaceError,
    upsert,
)

log = logging.getLogger("kansible")


def read_inventory(path: str | Path) -> str:
    """
    Read the inventory verbatim. Contents are not validated.

    Bytes are decoded as UTF-8 with no newline translation, so CRLF and
    lone CR reach the ConfigMap unchanged.
    """
    path = Path(path)
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(f"cannot read inventory file {path}: {exc}", exc) from exc


def build_inventory_configmap(namespace: str, name: str, inventory: str) -> dict:
    return {
        "apiVersion": "v1",
        "kind": "ConfigMap",
        "metadata": {"name": name, "namespace": namespace},
        "data": {defaults.INVENTORY_KEY: inventory},
    }


def publish_inventory(core_api, namespace: str, name: str, inventory: str) -> UpsertAction:
    """
    Create the inventory ConfigMap, or replace it wholesale if it exists.

    Raises CreateFailed / UpdateFailed wrapping the ApiException.
    """
    if not namespace:
        raise ValueError("namespace must not be empty")

    body = build_inventory_configmap(namespace, name, inventory)

    try:
        return upsert(
            lambda: core_api.create_namespaced_config_map(namespace=namespace, body=body),
            lambda: core_api.replace_namespaced_config_map(name=name, namespace=namespace, body=body),
            kind="ConfigMap",
            name=name,
            namespace=namespace,
        )
    except UpsertCreateError as exc:
        log.debug("error creating %s configmap: %s", name, exc)
        raise CreateFailed(f"error creating configmap {namespace}/{name}: {exc}", exc.cause) from exc.cause
    except UpsertReplaceError as exc:
        log.debug("error updating %s configmap: %s", name, exc)
        raise UpdateFailed(f"error updating configmap {namespace}/{name}: {exc}", exc.cause) from exc.cause
