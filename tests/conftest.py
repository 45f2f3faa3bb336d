import json
import os

import pytest

EVENTS_DIR = os.path.join(os.path.dirname(__file__), "events")

TWILIO_PARAMS = {
    "TWILIO_ACCOUNT_SID": "ACxxx",
    "TWILIO_AUTH_TOKEN": "tok",
    "TWILIO_WHATSAPP_FROM": "whatsapp:+1234567890",
}


class StubLogger:
    """Records (level, rendered message) pairs instead of emitting JSON."""

    def __init__(self):
        self.records = []

    def _log(self, level, msg, *args, **kwargs):
        self.records.append((level, msg % args if args else msg))

    def debug(self, msg, *args, **kwargs):
        self._log("debug", msg, *args)

    def info(self, msg, *args, **kwargs):
        self._log("info", msg, *args)

    def warning(self, msg, *args, **kwargs):
        self._log("warning", msg, *args)

    def error(self, msg, *args, **kwargs):
        self._log("error", msg, *args)

    def exception(self, msg, *args, **kwargs):
        self._log("error", msg, *args)

    def messages(self, level):
        return [m for lvl, m in self.records if lvl == level]


class StubTwilioMsg:
    def __init__(self, sid="SM123456", status="queued"):
        self.sid = sid
        self.status = status


class StubMessages:
    def __init__(self, error=None):
        self.sent = []
        self._error = error

    # Twilio SDK uses .messages.create(from_=..., to=..., body=...)
    def create(self, from_, to, body):
        self.sent.append({"from": from_, "to": to, "body": body})
        if self._error is not None:
            raise self._error
        return StubTwilioMsg()


class StubTwilioClient:
    def __init__(self, error=None):
        self.messages = StubMessages(error)
        self.credentials = None


def load_event(name):
    with open(os.path.join(EVENTS_DIR, name), "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_WHATSAPP_FROM", "TWILIO_SECRET_NAME"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def stub_logger():
    return StubLogger()


@pytest.fixture
def stub_twilio(monkeypatch):
    """Patch the Twilio client class; returns the client every call gets."""
    client = StubTwilioClient()

    def fake_client(account_sid, auth_token):
        client.credentials = (account_sid, auth_token)
        return client

    monkeypatch.setattr("order_notification.utils.twilio_client.TwilioClient", fake_client)
    return client
