# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

#src/kansible/logging/log.py

from __future__ import annotations

import logging
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional
import uuid

from kansible.k8s.errors import SettingsError

# kubernetes client chatter (request lines, retries) goes to the run file only
CLIENT_LOGGERS = ("kubernetes", "urllib3")

FILE_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)-7s | %(message)s"


def _reset(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def _open_log_file(base_dir: Path, name: str, run_id: str) -> logging.FileHandler:
    ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    log_path = base_dir / f"{name}-{ts}-{run_id}.log"
    try:
        base_dir.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path, encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"cannot open log file under {base_dir}: {exc}", exc) from exc


def init_logging(
    *,
    base_dir: Path | None = None,
    name: str = "kansible",
    verbose: bool = False,
    run_id: Optional[str] = None,
) -> tuple[logging.Logger, str, Path]:
    """
    Per-run logging for one playbook submission.

    - DEBUG trace of the run, plus kubernetes/urllib3 client logs, in
      ~/.kansible/logs/<name>-<ts>-<run_id>.log
    - console at INFO, DEBUG when verbose
    - run_id is reused for the events so log file and events line up

    Raises SettingsError if the log directory cannot be written.
    """
    run_id = run_id or str(uuid.uuid4())

    if base_dir is None:
        base_dir = Path.home() / ".kansible" / "logs"

    fh = _open_log_file(base_dir, name, run_id)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    _reset(logger)
    logger.propagate = False

    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    ch.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logger.addHandler(fh)
    logger.addHandler(ch)

    for client_name in CLIENT_LOGGERS:
        client_logger = logging.getLogger(client_name)
        _reset(client_logger)
        client_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
        client_logger.addHandler(fh)
        client_logger.propagate = False

    logger.info("=== kansible run started ===")
    logger.info("run_id=%s", run_id)
    logger.info("log_file=%s", fh.baseFilename)

    return logger, run_id, Path(fh.baseFilename)
