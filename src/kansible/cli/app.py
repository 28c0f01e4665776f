# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/cli/app.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer

from kansible.ansible.inventory import read_inventory
from kansible.ansible.runner import AnsibleRunner
from kansible.config.loader import (
    load_settings,
    resolve_kubeconfig_path,
    resolve_settings_path,
)
from kansible.k8s.client import connect
from kansible.k8s.errors import KansibleError
from kansible.logging.log import init_logging
from kansible.observers.dispatcher import EventBus
from kansible.observers.logger import LoggerObserver


# ------------------------------------------------------------------------------
# CLI setup
# ------------------------------------------------------------------------------

app = typer.Typer(
    help="Run an openshift-ansible playbook as a Kubernetes Job",
    add_completion=False,
)


def _abort(exc: Exception) -> None:
    typer.secho(f"error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


# ------------------------------------------------------------------------------
# Run command
# ------------------------------------------------------------------------------

@app.command()
def run(
    inventory: Path = typer.Argument(..., help="Path to the ansible inventory file"),
    kubeconfig: Optional[Path] = typer.Option(
        None,
        "--kubeconfig",
        help="(optional) absolute path to the kubeconfig file [default: ~/.kube/config]",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Runner settings YAML (falls back to $KANSIBLE_CONFIG)",
    ),
    debug: bool = typer.Option(False, "--debug"),
):
    # Settings and the inventory come first: nothing touches the cluster
    # until both are in hand.
    try:
        settings = load_settings(resolve_settings_path(config, os.environ))
        logger, run_id, log_path = init_logging(base_dir=settings.log_dir, verbose=debug)
    except KansibleError as exc:
        _abort(exc)

    try:
        inventory_text = read_inventory(inventory)
        logger.debug("inventory %s (%d bytes)", inventory, len(inventory_text))

        kubeconfig_path = resolve_kubeconfig_path(kubeconfig, os.environ)
        clients = connect(kubeconfig_path)

        runner = AnsibleRunner(
            clients,
            settings,
            bus=EventBus([LoggerObserver(logger)]),
            run_id=run_id,
        )
        runner.run_playbook(inventory_text)
    except KansibleError as exc:
        _abort(exc)

    typer.echo(f"Job {settings.namespace}/{settings.job_name} submitted")
    typer.echo(f"  Run ID   : {run_id}")
    typer.echo(f"  Logs     : {log_path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
