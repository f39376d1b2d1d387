"""Pytest configuration and fixtures."""

import pytest
from pubsub import pub

from goph.interfaces import Connector, Stream


class ScriptedStream(Stream):
    """In-memory stream that replays canned response chunks."""

    def __init__(self, pages, recv_error=None, short_write=False):
        self._pages = pages
        self._chunks = []
        self.recv_error = recv_error
        self.short_write = short_write
        self.sent = []
        self.closed = False

    def send(self, data: bytes) -> int:
        self.sent.append(data)
        selector = data.decode("utf-8").rstrip("\r\n")
        self._chunks = list(self._pages.get(selector, []))
        if self.short_write:
            return len(data) - 1
        return len(data)

    def recv(self, size: int) -> bytes:
        if self._chunks:
            return self._chunks.pop(0)
        if self.recv_error is not None:
            raise self.recv_error
        return b""

    def close(self) -> None:
        self.closed = True


class ScriptedConnector(Connector):
    """Connector serving canned pages keyed by selector."""

    def __init__(self, pages=None):
        self.pages = pages or {}
        self.endpoints = None
        self.resolve_error = None
        self.open_errors = []
        self.recv_error = None
        self.short_write = False
        self.resolved = []
        self.opened = []
        self.streams = []

    def resolve(self, host, port):
        self.resolved.append((host, port))
        if self.resolve_error is not None:
            raise self.resolve_error
        if self.endpoints is not None:
            return list(self.endpoints)
        return [(host, port)]

    def open(self, endpoint):
        self.opened.append(endpoint)
        if self.open_errors:
            error = self.open_errors.pop(0)
            if error is not None:
                raise error
        stream = ScriptedStream(self.pages, recv_error=self.recv_error, short_write=self.short_write)
        self.streams.append(stream)
        return stream

    def requests(self):
        """Selectors requested so far, in order."""
        return [s.sent[0].decode("utf-8").rstrip("\r\n") for s in self.streams if s.sent]


@pytest.fixture
def connector():
    """Scripted connector with a small gopherhole."""
    return ScriptedConnector({
        "": [
            b"iWelcome to the test hole\tnull\tnull\t0\r\n",
            b"1Documents\t/docs\tlocalhost\t70\r\n",
            b"0About\t/about.txt\tlocalhost\t70\r\n.\r\n",
        ],
        "/docs": [b"0Readme\t/docs/readme.txt\tlocalhost\t70\r\n.\r\n"],
        "/docs/readme.txt": [b"Read me first.\r\nSecond line.\r\n.\r\n"],
        "/about.txt": [b"About this server\r\n.\r\n"],
    })


@pytest.fixture(autouse=True)
def reset_pubsub():
    """Drop listeners registered during a test."""
    yield
    pub.unsubAll()


@pytest.fixture
def make_connector():
    """Factory for scripted connectors with custom pages."""
    return ScriptedConnector
