"""Shared fixtures: fake HTTP session, in-memory history, sample documents."""
import json

import pytest

from leadfolder.backend_client import BackendClient
from leadfolder.history_store import HistoryStore, MemoryStore
from leadfolder.pipeline import GenerationPipeline
from leadfolder.state import SessionState


CANONICAL_FOLDER = """## 1. Project Overview
FlowDesk AI is a proposal workspace.

## 2. Final Project Brief
Objectives and risks.

## 3. Proposal
Scope, timeline, investment.

## 4. Mini-Spec (Technical Specification)
Pages and data models.

## 5. Wireframes / Prototype (Text-Based)
User → Landing → Signup
"""


class FakeResponse:
    def __init__(self, status_code=200, payload=None, body=None):
        self.status_code = status_code
        self._payload = payload
        self._body = body

    def json(self):
        if self._body is not None:
            return json.loads(self._body)
        if self._payload is None:
            raise ValueError("No JSON body")
        return self._payload


class FakeSession:
    """Records every post() and replays a queued response or raises an exception."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def canonical_folder() -> str:
    return CANONICAL_FOLDER


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def history(memory_store) -> HistoryStore:
    store = HistoryStore(memory_store)
    store.load()
    return store


@pytest.fixture
def state() -> SessionState:
    return SessionState()


@pytest.fixture
def make_pipeline(state, history):
    """Build a pipeline around a FakeSession; returns (pipeline, session)."""
    def _make(response=None, exc=None):
        session = FakeSession(response=response, exc=exc)
        client = BackendClient("http://backend.test", session=session)
        counter = iter(range(1, 10_000))
        pipeline = GenerationPipeline(state, history, client, make_id=lambda: f"id-{next(counter)}")
        return pipeline, session
    return _make
