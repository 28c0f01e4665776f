import json

import pytest
from kubernetes.client.exceptions import ApiException


def api_error(status, reason):
    """ApiException shaped like the ones the apiserver returns."""
    exc = ApiException(status=status, reason=reason)
    exc.body = json.dumps({"kind": "Status", "status": "Failure", "reason": reason, "code": status})
    return exc


class FakeStore:
    """Namespaced name -> body, with apiserver-like create/replace semantics."""

    def __init__(self):
        self.objects = {}
        self.calls = []
        self.fail = {}   # verb -> ApiException to raise

    def _check(self, verb):
        self.calls.append(verb)
        if verb in self.fail:
            raise self.fail[verb]

    def create(self, namespace, body):
        self._check("create")
        key = (namespace, body["metadata"]["name"])
        if key in self.objects:
            raise api_error(409, "AlreadyExists")
        self.objects[key] = body
        return body

    def replace(self, name, namespace, body):
        self._check("replace")
        key = (namespace, name)
        if key not in self.objects:
            raise api_error(404, "NotFound")
        self.objects[key] = body
        return body


class FakeCoreV1Api:
    def __init__(self):
        self.store = FakeStore()

    def create_namespaced_config_map(self, namespace, body):
        return self.store.create(namespace, body)

    def replace_namespaced_config_map(self, name, namespace, body):
        return self.store.replace(name, namespace, body)


class FakeBatchV1Api:
    def __init__(self):
        self.store = FakeStore()

    def create_namespaced_job(self, namespace, body):
        return self.store.create(namespace, body)

    def replace_namespaced_job(self, name, namespace, body):
        return self.store.replace(name, namespace, body)


@pytest.fixture
def core_api():
    return FakeCoreV1Api()


@pytest.fixture
def batch_api():
    return FakeBatchV1Api()


@pytest.fixture(name="api_error")
def api_error_fixture():
    return api_error
