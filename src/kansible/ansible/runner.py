# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/ansible/runner.py
from __future__ import annotations

import logging
import uuid
from typing import Optional

from kansible.ansible.inventory import publish_inventory
from kansible.ansible.job import submit_playbook_job
from kansible.config.models import RunnerSettings
from kansible.k8s.client import ClusterClients
from kansible.k8s.errors import KansibleError
from kansible.observers.dispatcher import EventBus
from kansible.observers.events import (
    InventoryPublished,
    JobSubmitted,
    RunFailed,
    new_ctx,
)

log = logging.getLogger("kansible")


class AnsibleRunner:
    """
    Stages an inventory as a ConfigMap and launches one ansible-playbook Job
    that mounts it.
    """

    def __init__(
        self,
        clients: ClusterClients,
        settings: Optional[RunnerSettings] = None,
        *,
        bus: Optional[EventBus] = None,
        run_id: Optional[str] = None,
    ):
        self.clients = clients
        self.settings = settings or RunnerSettings()
        self.bus = bus or EventBus()
        # one id for every event of this runner
        self.run_id = run_id or str(uuid.uuid4())

    @property
    def namespace(self) -> str:
        return self.settings.namespace

    @property
    def image(self) -> str:
        return self.settings.image

    def _ctx(self) -> dict:
        return new_ctx(self.namespace, self.run_id)

    def _fail(self, stage: str, exc: KansibleError) -> None:
        self.bus.emit(RunFailed(**self._ctx(), stage=stage, error=str(exc)))

    def run_playbook(self, inventory: str, playbook: Optional[str] = None) -> None:
        """
        Publish the inventory, then submit the job. Stops at the first error;
        the job is never submitted if the inventory could not be published.
        """
        s = self.settings
        playbook = playbook or s.playbook

        try:
            action = publish_inventory(
                self.clients.core, self.namespace, s.inventory_configmap, inventory
            )
        except KansibleError as exc:
            self._fail("publish", exc)
            raise
        self.bus.emit(
            InventoryPublished(**self._ctx(), name=s.inventory_configmap, action=action.value)
        )

        try:
            action = submit_playbook_job(
                self.clients.batch, self.namespace, s.job_name, self.image, playbook, s
            )
        except KansibleError as exc:
            self._fail("submit", exc)
            raise
        self.bus.emit(
            JobSubmitted(
                **self._ctx(),
                name=s.job_name,
                image=self.image,
                playbook=playbook,
                action=action.value,
            )
        )
        log.info("job %s/%s submitted (%s)", self.namespace, s.job_name, action.value)
