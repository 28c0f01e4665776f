import pytest
from kubernetes.client.exceptions import ApiException

from kansible.k8s.upsert import (
    ApiErrorKind,
    UpsertAction,
    UpsertCreateError,
    UpsertReplaceError,
    classify_api_error,
    upsert,
)


class Recorder:
    def __init__(self, create_exc=None, replace_exc=None):
        self.calls = []
        self.create_exc = create_exc
        self.replace_exc = replace_exc

    def create(self):
        self.calls.append("create")
        if self.create_exc:
            raise self.create_exc

    def replace(self):
        self.calls.append("replace")
        if self.replace_exc:
            raise self.replace_exc


def _upsert(rec):
    return upsert(rec.create, rec.replace, kind="Thing", name="t", namespace="ns")


def test_classify_already_exists_vs_conflict(api_error):
    assert classify_api_error(api_error(409, "AlreadyExists")) is ApiErrorKind.ALREADY_EXISTS
    assert classify_api_error(api_error(409, "Conflict")) is ApiErrorKind.CONFLICT


def test_classify_409_without_body_counts_as_already_exists():
    assert classify_api_error(ApiException(status=409, reason="Conflict")) is ApiErrorKind.ALREADY_EXISTS


def test_classify_other_statuses(api_error):
    assert classify_api_error(api_error(404, "NotFound")) is ApiErrorKind.NOT_FOUND
    assert classify_api_error(api_error(403, "Forbidden")) is ApiErrorKind.FORBIDDEN
    assert classify_api_error(api_error(422, "Invalid")) is ApiErrorKind.INVALID
    assert classify_api_error(ApiException(status=500, reason="Internal")) is ApiErrorKind.OTHER


def test_create_success_skips_replace():
    rec = Recorder()
    assert _upsert(rec) is UpsertAction.CREATED
    assert rec.calls == ["create"]


def test_already_exists_falls_back_to_replace(api_error):
    rec = Recorder(create_exc=api_error(409, "AlreadyExists"))
    assert _upsert(rec) is UpsertAction.REPLACED
    assert rec.calls == ["create", "replace"]


def test_other_create_error_is_not_retried_as_replace(api_error):
    forbidden = api_error(403, "Forbidden")
    rec = Recorder(create_exc=forbidden)
    with pytest.raises(UpsertCreateError) as ei:
        _upsert(rec)
    assert ei.value.kind is ApiErrorKind.FORBIDDEN
    assert ei.value.cause is forbidden
    assert rec.calls == ["create"]


def test_replace_error_is_raised_with_kind(api_error):
    rec = Recorder(create_exc=api_error(409, "AlreadyExists"), replace_exc=api_error(422, "Invalid"))
    with pytest.raises(UpsertReplaceError) as ei:
        _upsert(rec)
    assert ei.value.kind is ApiErrorKind.INVALID
    assert rec.calls == ["create", "replace"]


def test_transport_error_on_create_is_other():
    from urllib3.exceptions import MaxRetryError

    rec = Recorder(create_exc=MaxRetryError(None, "/api/v1", "connection refused"))
    with pytest.raises(UpsertCreateError) as ei:
        _upsert(rec)
    assert ei.value.kind is ApiErrorKind.OTHER
    assert rec.calls == ["create"]
