import json
from typing import Any, Dict, List, Optional

import pytest

from party.errors import TransportError
from party.protocol import ShareCodec


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        if self._payload is None:
            raise ValueError("no body")
        return self._payload


class FakeAPI:
    """Stands in for LCUAPI: GET routes from a dict, POSTs are recorded"""

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes: Dict[str, Any] = dict(routes or {})
        self.posts: List[tuple] = []
        self.post_status: Dict[str, int] = {}
        self.post_payloads: Dict[str, Any] = {}

    def get(self, path: str, timeout: float = None):
        return self.routes.get(path)

    def fetch_json(self, path: str, timeout: float = None):
        if path not in self.routes:
            raise TransportError(f"GET {path} returned 404", status=404)
        return self.routes[path]

    def post(self, path: str, json_data: Any, timeout: float = None):
        self.posts.append((path, json_data))
        status = self.post_status.get(path, 200)
        if status is None:
            return None
        return FakeResponse(status, self.post_payloads.get(path, {}))


def chat_message(mid, body, sender="2002", timestamp=None):
    msg = {"id": mid, "body": body, "type": "chat", "fromSummonerId": sender}
    if timestamp is not None:
        msg["timestamp"] = timestamp
    return msg


def tagged(envelope: dict) -> str:
    return "OSS:" + json.dumps(envelope, separators=(",", ":"))


@pytest.fixture
def fake_api():
    return FakeAPI()


class StaticConfig:
    """ConfigManager stand-in returning a fixed PartyModeConfig"""

    def __init__(self, cfg):
        self.cfg = cfg

    def get(self):
        return self.cfg


class FakeChat:
    """ChatTransport stand-in: records sends, serves queued inbound messages once"""

    def __init__(self, failing=()):
        self.codec = ShareCodec(epoch=1)
        self.sent = []
        self.failing = set(failing)
        self.inbound = []

    def send_message(self, friend_id, message):
        if friend_id in self.failing:
            raise TransportError("send failed", status=500)
        self.sent.append((friend_id, message))

    def poll(self):
        inbound, self.inbound = self.inbound, []
        return inbound
