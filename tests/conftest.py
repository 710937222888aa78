import pytest

from fintxn.core.fees import WithdrawalFee


class RecordingNotifier:
    """Fake notification channel that remembers every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, identifier, balance):
        self.calls.append((identifier, balance))


class FixedCallback:
    """Fake callback returning a fixed outcome and recording what it saw."""

    def __init__(self, outcome=True):
        self.outcome = outcome
        self.seen = []

    def __call__(self, pending):
        self.seen.append(pending)
        return self.outcome


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


@pytest.fixture
def fee():
    return WithdrawalFee()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def ok_callback():
    return FixedCallback(True)


@pytest.fixture
def failing_callback():
    return FixedCallback(False)


@pytest.fixture
def fake_post(monkeypatch):
    """
    Replace requests.post with a recorder.

    Use `fake_post.respond(status)` or set `fake_post.error` to an
    exception instance before the call.
    """
    import requests

    class _Post:
        def __init__(self):
            self.calls = []
            self.response = FakeResponse(200)
            self.error = None

        def respond(self, status_code, text=""):
            self.response = FakeResponse(status_code, text)

        def __call__(self, url, **kwargs):
            self.calls.append((url, kwargs))
            if self.error is not None:
                raise self.error
            return self.response

    post = _Post()
    monkeypatch.setattr(requests, "post", post)
    return post


@pytest.fixture
def make_callback():
    """Factory for FixedCallback fakes: make_callback(outcome)."""
    return FixedCallback


@pytest.fixture
def make_notifier():
    """Factory for fresh RecordingNotifier fakes."""
    return RecordingNotifier
