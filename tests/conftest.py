import json

import httpx
import pytest

from loan_tracker.api import ApiClient
from loan_tracker.store import LoanTrackerStore


class FakeBackend:
    """In-memory stand-in for the REST backend behind an httpx.MockTransport."""

    def __init__(self):
        self.collections = {
            "/api/customers": [],
            "/api/partners": [],
            "/api/loans": [],
        }
        self.failures = {}
        self.requests = []
        self._next_id = 1

    def fail(self, method, path, status=500, body="boom"):
        self.failures[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        failure = self.failures.get((request.method, path))
        if failure:
            status, body = failure
            return httpx.Response(status, text=body)
        if path not in self.collections:
            return httpx.Response(404, text="Not Found")

        if request.method == "GET":
            return httpx.Response(200, json=self.collections[path])

        record = dict(json.loads(request.content), id=self._next_id)
        self._next_id += 1
        self.collections[path].append(record)
        return httpx.Response(201, json=record)

    def posted(self, path):
        return [
            json.loads(r.content)
            for r in self.requests
            if r.method == "POST" and r.url.path == path
        ]


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def client(backend):
    return ApiClient("http://backend.test", transport=httpx.MockTransport(backend.handler))


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(client, clock):
    return LoanTrackerStore(client, clock=clock)
