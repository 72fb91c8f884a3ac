import json

import azure.functions as func
import pytest


@pytest.fixture
def make_request():
    def _make(body=None, method="POST", raw=None):
        if raw is None:
            raw = b"" if body is None else json.dumps(body).encode("utf-8")
        return func.HttpRequest(
            method=method,
            url="/api/chat-bot",
            headers={"Content-Type": "application/json"},
            body=raw,
        )
    return _make
