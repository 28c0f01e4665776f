# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/k8s/client.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml
from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

from kansible.k8s.errors import ClientConfigError, ClientConstructionError

log = logging.getLogger("kansible")


@dataclass(frozen=True)
class ClusterClients:
    """The two API groups the runner talks to."""

    core: Any    # client.CoreV1Api
    batch: Any   # client.BatchV1Api


def load_client_configuration(kubeconfig: Optional[Path]) -> client.Configuration:
    """
    Load cluster access settings.

    kubeconfig=None means we are running inside a pod and use the service
    account mounted by the cluster.
    """
    cfg = client.Configuration()
    try:
        if kubeconfig is None:
            config.load_incluster_config(client_configuration=cfg)
            log.debug("using in-cluster config")
        else:
            config.load_kube_config(
                config_file=str(kubeconfig),
                client_configuration=cfg,
                persist_config=False,
            )
            log.debug("using kubeconfig %s", kubeconfig)
    except (ConfigException, yaml.YAMLError, OSError) as exc:
        where = kubeconfig if kubeconfig is not None else "in-cluster"
        raise ClientConfigError(f"cannot load cluster config ({where}): {exc}", exc) from exc
    return cfg


def build_clients(cfg: client.Configuration) -> ClusterClients:
    try:
        api_client = client.ApiClient(configuration=cfg)
        return ClusterClients(
            core=client.CoreV1Api(api_client),
            batch=client.BatchV1Api(api_client),
        )
    except Exception as exc:
        raise ClientConstructionError(f"cannot build kubernetes client: {exc}", exc) from exc


def connect(kubeconfig: Optional[Path]) -> ClusterClients:
    return build_clients(load_client_configuration(kubeconfig))
