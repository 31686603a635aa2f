from typing import Optional

import pytest
import requests

ENV_VARS = ("TOKEN", "AOC_TOKEN", "AOC_CACHE_DIR", "AOC_USER_AGENT", "AOC_TIMEOUT")


def make_response(status: int, body: bytes, url: str = "") -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r.reason = "OK" if status < 400 else "Error"
    r.url = url
    r._content = body
    r._content_consumed = True
    return r


class FakeSession:
    """Stands in for requests.Session and records every GET."""

    def __init__(
        self,
        status: int = 200,
        body: bytes = b"1721\n979\n366\n",
        exc: Optional[Exception] = None,
    ) -> None:
        self.status = status
        self.body = body
        self.exc = exc
        self.calls: list[tuple[str, dict]] = []
        self.closed = False

    def get(self, url: str, **kwargs) -> requests.Response:
        self.calls.append((url, kwargs))
        if self.exc is not None:
            raise self.exc
        return make_response(self.status, self.body, url)

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    yield work


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "cache"


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def make_session():
    return FakeSession
