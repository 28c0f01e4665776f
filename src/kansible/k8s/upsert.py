# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/kansible/k8s/upsert.py
from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Callable, Optional, Union

from kubernetes.client.exceptions import ApiException
from urllib3.exceptions import HTTPError

ApiCallError = Union[ApiException, HTTPError]

log = logging.getLogger("kansible")


class ApiErrorKind(str, Enum):
    ALREADY_EXISTS = "AlreadyExists"
    CONFLICT = "Conflict"
    NOT_FOUND = "NotFound"
    FORBIDDEN = "Forbidden"
    INVALID = "Invalid"
    OTHER = "Other"


class UpsertAction(str, Enum):
    CREATED = "created"
    REPLACED = "replaced"


class UpsertCreateError(RuntimeError):
    def __init__(self, kind: ApiErrorKind, cause: ApiCallError):
        super().__init__(f"create failed ({kind.value}): {_describe(cause)}")
        self.kind = kind
        self.cause = cause


class UpsertReplaceError(RuntimeError):
    def __init__(self, kind: ApiErrorKind, cause: ApiCallError):
        super().__init__(f"replace failed ({kind.value}): {_describe(cause)}")
        self.kind = kind
        self.cause = cause


def _status_reason(exc: ApiCallError) -> Optional[str]:
    """Pull metav1.Status.reason out of the response body, if there is one."""
    body = getattr(exc, "body", None)
    if not body:
        return None
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        status = json.loads(body)
    except (TypeError, ValueError):
        return None
    if isinstance(status, dict):
        return status.get("reason")
    return None


def _describe(exc: ApiCallError) -> str:
    if not isinstance(exc, ApiException):
        return f"{type(exc).__name__}: {exc}"
    reason = _status_reason(exc) or exc.reason
    return f"HTTP {exc.status} {reason}".strip()


def classify_api_error(exc: ApiCallError) -> ApiErrorKind:
    """
    Map an ApiException to the kind the upsert logic cares about.

    409 is split on the Status reason: AlreadyExists (create of an existing
    name) vs Conflict (stale resourceVersion). A 409 without a parseable
    body comes from a create here, so it counts as AlreadyExists.
    Transport errors never reached the apiserver and are OTHER.
    """
    if not isinstance(exc, ApiException):
        return ApiErrorKind.OTHER
    if exc.status == 409:
        reason = _status_reason(exc)
        if reason in (None, ApiErrorKind.ALREADY_EXISTS.value):
            return ApiErrorKind.ALREADY_EXISTS
        return ApiErrorKind.CONFLICT
    if exc.status == 404:
        return ApiErrorKind.NOT_FOUND
    if exc.status == 403:
        return ApiErrorKind.FORBIDDEN
    if exc.status == 422:
        return ApiErrorKind.INVALID
    return ApiErrorKind.OTHER


def _attempt(call: Callable[[], Any]) -> Optional[ApiCallError]:
    try:
        call()
    except (ApiException, HTTPError) as exc:
        return exc
    return None


def upsert(
    create: Callable[[], Any],
    replace: Callable[[], Any],
    *,
    kind: str,
    name: str,
    namespace: str,
) -> UpsertAction:
    """
    Create-if-absent, else fully replace.

    Only an AlreadyExists outcome on create leads to the replace step; any
    other create failure, or any replace failure, is raised with its kind.
    """
    err = _attempt(create)
    if err is None:
        log.info("%s %s/%s created", kind, namespace, name)
        return UpsertAction.CREATED

    err_kind = classify_api_error(err)
    if err_kind is not ApiErrorKind.ALREADY_EXISTS:
        log.debug("%s %s/%s create failed: %s", kind, namespace, name, _describe(err))
        raise UpsertCreateError(err_kind, err) from err

    log.info("%s %s/%s already exists, attempting update...", kind, namespace, name)
    err = _attempt(replace)
    if err is None:
        log.info("%s %s/%s replaced", kind, namespace, name)
        return UpsertAction.REPLACED

    log.debug("%s %s/%s replace failed: %s", kind, namespace, name, _describe(err))
    raise UpsertReplaceError(classify_api_error(err), err) from err
