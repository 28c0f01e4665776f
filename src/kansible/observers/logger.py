# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/observers/logger.py
from __future__ import annotations
import logging
from .events import BaseEvent, InventoryPublished, JobSubmitted, RunFailed


class LoggerObserver:
    """Turns run events into one log line each; failures at ERROR."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def _line(self, event: BaseEvent) -> str:
        if isinstance(event, InventoryPublished):
            return f"inventory configmap {event.namespace}/{event.name} {event.action}"
        if isinstance(event, JobSubmitted):
            return (
                f"job {event.namespace}/{event.name} {event.action} "
                f"(image={event.image} playbook={event.playbook})"
            )
        if isinstance(event, RunFailed):
            return f"run failed during {event.stage} in {event.namespace}: {event.error}"
        d = event.dict()
        return ", ".join(f"{k}={v}" for k, v in d.items() if k not in ("ts", "run_id"))

    def notify(self, event: BaseEvent) -> None:
        level = logging.ERROR if isinstance(event, RunFailed) else logging.INFO
        self.logger.log(
            level,
            "[EVENT] %s run=%s: %s",
            event.__class__.__name__, event.run_id, self._line(event),
        )
