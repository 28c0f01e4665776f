# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/observers/events.py

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any, Optional
from datetime import datetime, timezone
import uuid


# ---------------------------------------------------------------------
# Base context and helper
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class BaseEvent:
    ts: str           # ISO timestamp
    run_id: str       # correlates all events in a single invocation
    namespace: str    # target namespace

    def dict(self) -> Dict[str, Any]:
        return asdict(self)


def new_ctx(namespace: str, run_id: Optional[str] = None) -> Dict[str, Any]:
    return {
        "ts": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "run_id": run_id or str(uuid.uuid4()),
        "namespace": namespace,
    }


# ---------------------------------------------------------------------
# Inventory
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class InventoryPublished(BaseEvent):
    name: str
    action: str       # created / replaced


# ---------------------------------------------------------------------
# Job
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class JobSubmitted(BaseEvent):
    name: str
    image: str
    playbook: str
    action: str


# ---------------------------------------------------------------------
# Failure
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class RunFailed(BaseEvent):
    stage: str        # publish / submit
    error: str
