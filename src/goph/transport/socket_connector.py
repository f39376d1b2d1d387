"""TCP socket-based connector."""

import logging
import socket

from ..interfaces import Connector, Stream

logger = logging.getLogger(__name__)


class SocketStream(Stream):
    """Stream backed by a connected TCP socket."""

    def __init__(self, sock: socket.socket):
        self._sock = sock

    def send(self, data: bytes) -> int:
        return self._sock.send(data)

    def recv(self, size: int) -> bytes:
        return self._sock.recv(size)

    def close(self) -> None:
        self._sock.close()


class SocketConnector(Connector):
    """Connector using the operating system's resolver and TCP sockets."""

    def __init__(self, timeout: float | None = None):
        """
        Initialize the connector.

        Args:
            timeout: Socket timeout in seconds for connect and reads.
                     None blocks indefinitely.
        """
        self.timeout = timeout

    def resolve(self, host: str, port: int) -> list[tuple]:
        """
        Resolve host and port with getaddrinfo.

        Raises:
            OSError: If resolution fails.
        """
        return socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)

    def open(self, endpoint: tuple) -> SocketStream:
        """
        Connect to one getaddrinfo endpoint.

        Raises:
            OSError: If the connection cannot be established.
        """
        family, socktype, proto, _, address = endpoint
        sock = socket.socket(family, socktype, proto)
        try:
            sock.settimeout(self.timeout)
            logger.debug(f"Connecting to {address}")
            sock.connect(address)
        except OSError:
            sock.close()
            raise
        return SocketStream(sock)
