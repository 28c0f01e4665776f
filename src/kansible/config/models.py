# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/config/models.py

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from . import defaults


class RunnerSettings(BaseModel):
    """Everything the runner needs besides the inventory itself."""

    model_config = ConfigDict(extra="forbid")

    # Where
    namespace: str = Field(defaults.NAMESPACE, min_length=1)

    # Object names (singletons per namespace)
    inventory_configmap: str = Field(defaults.INVENTORY_CONFIGMAP, min_length=1)
    job_name: str = Field(defaults.JOB_NAME, min_length=1)
    ssh_secret: str = Field(defaults.SSH_PRIVATE_KEY_SECRET, min_length=1)
    ssh_secret_key: str = Field(defaults.SSH_PRIVATE_KEY_SECRET_KEY, min_length=1)
    service_account: str = Field(defaults.OPENSHIFT_ANSIBLE_SERVICE_ACCOUNT, min_length=1)

    # What
    image: str = Field(defaults.OPENSHIFT_ANSIBLE_IMAGE, min_length=1)
    playbook: str = Field(defaults.PLAYBOOK, min_length=1)
    playbook_root: str = defaults.PLAYBOOK_ROOT

    # How
    run_as_user: int = Field(defaults.RUN_AS_USER, ge=0)
    host_network: bool = defaults.HOST_NETWORK
    active_deadline_seconds: int = Field(defaults.ACTIVE_DEADLINE_SECONDS, gt=0)
    verbosity: int = Field(defaults.VERBOSITY, ge=0, le=6)

    log_dir: Optional[Path] = None

    def ansible_opts(self) -> str:
        """Value of the OPTS env var handed to the image's run script."""
        flags = f"-{'v' * self.verbosity} " if self.verbosity else ""
        return f"{flags}--private-key={defaults.PRIVATE_KEY_FILE}"
