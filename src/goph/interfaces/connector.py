"""Abstract interface for the network layer."""

from abc import ABC, abstractmethod
from typing import Any


class Stream(ABC):
    """An open, bidirectional byte stream to a server."""

    @abstractmethod
    def send(self, data: bytes) -> int:
        """Write data in a single call and return the number of bytes written."""
        pass

    @abstractmethod
    def recv(self, size: int) -> bytes:
        """Read up to size bytes. Returns b"" at end of stream."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the stream."""
        pass


class Connector(ABC):
    """Resolves hosts and opens streams to them."""

    @abstractmethod
    def resolve(self, host: str, port: int) -> list[Any]:
        """Resolve host and port to candidate endpoints, in preference order."""
        pass

    @abstractmethod
    def open(self, endpoint: Any) -> Stream:
        """Open a stream to a single endpoint."""
        pass
