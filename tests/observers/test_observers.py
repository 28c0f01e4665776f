import logging

from kansible.observers.dispatcher import EventBus
from kansible.observers.events import InventoryPublished, JobSubmitted, RunFailed, new_ctx
from kansible.observers.logger import LoggerObserver

LOGGER = "kansible-test-events"


def _emit(caplog, event):
    logger = logging.getLogger(LOGGER)
    caplog.set_level(logging.INFO, logger=LOGGER)
    EventBus([LoggerObserver(logger)]).emit(event)
    (rec,) = caplog.records
    return rec


def test_new_ctx_carries_run_id_and_namespace():
    ctx = new_ctx("ops", "r1")
    assert ctx["run_id"] == "r1"
    assert ctx["namespace"] == "ops"
    assert ctx["ts"].endswith("Z")


def test_job_submitted_logged_at_info(caplog):
    rec = _emit(caplog, JobSubmitted(**new_ctx("ops", "r1"), name="job", image="img", playbook="p.yml", action="created"))
    assert rec.levelno == logging.INFO
    msg = rec.getMessage()
    assert msg.startswith("[EVENT] JobSubmitted run=r1:")
    assert "job ops/job created" in msg and "playbook=p.yml" in msg


def test_inventory_published_logged_at_info(caplog):
    rec = _emit(caplog, InventoryPublished(**new_ctx("ops", "r1"), name="ansible-inventory", action="replaced"))
    assert rec.levelno == logging.INFO
    assert "inventory configmap ops/ansible-inventory replaced" in rec.getMessage()


def test_run_failed_logged_at_error(caplog):
    rec = _emit(caplog, RunFailed(**new_ctx("ops", "r1"), stage="publish", error="HTTP 403 Forbidden"))
    assert rec.levelno == logging.ERROR
    assert "run failed during publish in ops: HTTP 403 Forbidden" in rec.getMessage()
