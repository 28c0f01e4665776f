# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/ansible/job.py
from __future__ import annotations

import logging
import posixpath
from pathlib import Path
from typing import Optional

from kansible.config import defaults
from kansible.config.models import RunnerSettings
from kansible.k8s.errors import ReplaceFailed, SubmitFailed
from kansible.k8s.upsert import (
    UpsertAction,
    UpsertCreateError,
    UpsertReplaceError,
    upsert,
)
from kansible.utils.template_renderer import TemplateRenderer

log = logging.getLogger("kansible")

TEMPLATES_DIR = Path(__file__).parent / "templates"
JOB_TEMPLATE = "playbook-job.yaml.j2"


def resolve_playbook(playbook: str, playbook_root: str) -> str:
    """Relative playbooks live under the openshift-ansible checkout in the image."""
    if posixpath.isabs(playbook) or not playbook_root:
        return playbook
    return posixpath.join(playbook_root, playbook)


def playbook_command(playbook: str, playbook_root: str = defaults.PLAYBOOK_ROOT) -> list[str]:
    return [
        "ansible-playbook",
        "-i", defaults.INVENTORY_FILE,
        "--private-key", defaults.PRIVATE_KEY_FILE,
        resolve_playbook(playbook, playbook_root),
    ]


def build_playbook_job(
    namespace: str,
    job_name: str,
    image: str,
    playbook: str,
    settings: Optional[RunnerSettings] = None,
) -> dict:
    """
    Render the Job manifest.

    namespace, job_name, image and playbook are explicit so callers can run
    several jobs side by side; everything else comes from settings.
    """
    settings = settings or RunnerSettings()

    if settings.run_as_user == 0:
        log.warning(
            "job %s/%s runs as uid 0; needs security review before wider use",
            namespace, job_name,
        )

    env = [
        ("INVENTORY_FILE", defaults.INVENTORY_FILE),
        ("PLAYBOOK_FILE", playbook),
        ("ANSIBLE_HOST_KEY_CHECKING", "False"),
        ("OPTS", settings.ansible_opts()),
    ]

    context = {
        "namespace": namespace,
        "job_name": job_name,
        "image": image,
        "command": playbook_command(playbook, settings.playbook_root),
        "env": env,
        "service_account": settings.service_account,
        "host_network": settings.host_network,
        "run_as_user": settings.run_as_user,
        "completions": defaults.COMPLETIONS,
        "active_deadline_seconds": settings.active_deadline_seconds,
        "inventory_configmap": settings.inventory_configmap,
        "inventory_mount_path": defaults.INVENTORY_MOUNT_PATH,
        "ssh_secret": settings.ssh_secret,
        "ssh_secret_key": settings.ssh_secret_key,
        "ssh_mount_path": defaults.SSH_MOUNT_PATH,
        "private_key_filename": defaults.PRIVATE_KEY_FILENAME,
        "ssh_key_file_mode": defaults.SSH_KEY_FILE_MODE,
    }

    return TemplateRenderer(TEMPLATES_DIR).render_manifest(JOB_TEMPLATE, context)


def submit_playbook_job(
    batch_api,
    namespace: str,
    job_name: str,
    image: str,
    playbook: str,
    settings: Optional[RunnerSettings] = None,
) -> UpsertAction:
    """
    Create the Job, or replace it if one with the same name exists.

    The job is not watched afterwards; the cluster owns retries and the
    deadline. Raises SubmitFailed / ReplaceFailed.
    """
    job = build_playbook_job(namespace, job_name, image, playbook, settings)

    try:
        return upsert(
            lambda: batch_api.create_namespaced_job(namespace=namespace, body=job),
            lambda: batch_api.replace_namespaced_job(name=job_name, namespace=namespace, body=job),
            kind="Job",
            name=job_name,
            namespace=namespace,
        )
    except UpsertCreateError as exc:
        log.debug("error submitting job %s: %s", job_name, exc)
        raise SubmitFailed(f"error submitting job {namespace}/{job_name}: {exc}", exc.cause) from exc.cause
    except UpsertReplaceError as exc:
        log.debug("error replacing job %s: %s", job_name, exc)
        raise ReplaceFailed(f"error replacing job {namespace}/{job_name}: {exc}", exc.cause) from exc.cause
