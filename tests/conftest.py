import json

import pytest
import requests

from jobscan.config import PipelineConfig
from jobscan.models import SearchCriteria
from jobscan.transport import Transport

TEST_KEY = "test-secret-key-123"

VIENNA_REPLY = (
    '```json\n[{"id":1,"title":"X","company":"Y","location":"Vienna","type":"Internship",'
    '"description":"d","url":"https://e.co/1"}]\n```'
)

INSIGHTS_REPLY = """Here you go:
```json
{"analysis": "One relevant internship.", "suggestions": "Add nearby towns.",
 "keywordsToAdd": ["trainee", "praktikum"], "keywordsToRemove": []}
```"""


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        if text is None:
            text = json.dumps(body) if body is not None else ""
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


def envelope(text):
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


class FakePost:
    """Stands in for requests.post; replays items, repeating the last one."""

    def __init__(self, *items):
        self.items = list(items)
        self.calls = []

    def __call__(self, url, **kwargs):
        self.calls.append((url, kwargs))
        item = self.items[min(len(self.calls), len(self.items)) - 1]
        if isinstance(item, BaseException):
            raise item
        return item


class ScriptedTransport(Transport):
    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def send(self, endpoint, payload, credentials):
        self.calls.append({"endpoint": endpoint, "payload": payload, "credentials": credentials})
        self.attempts = 1
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply


@pytest.fixture
def config():
    return PipelineConfig(api_key=TEST_KEY)


@pytest.fixture
def vienna():
    return SearchCriteria.build(
        location="Vienna",
        include_keywords=["intern"],
        exclude_keywords=[],
        job_types=["Internship"],
    )


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def fake_post(monkeypatch):
    def install(*items):
        fake = FakePost(*items)
        monkeypatch.setattr(requests, "post", fake)
        return fake

    return install
