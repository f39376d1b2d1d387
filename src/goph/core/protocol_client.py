"""Gopher protocol round-trip: connect, send selector, receive lines."""

import logging
from typing import Callable

from ..interfaces import Connector, Stream
from .errors import (
    ConnectError,
    LineError,
    ReceiveError,
    ResolveError,
    SendError,
)

logger = logging.getLogger(__name__)

CR = 0x0D
LF = 0x0A


class LineSplitter:
    """Splits a byte stream into lines ending at CR, LF or CRLF.

    A CR immediately followed by LF in the same chunk counts as one
    terminator. A CR at the end of one chunk and an LF at the start of
    the next are two terminators, so an extra empty line is produced.
    Lines longer than max_length are cut to max_length and the rest of
    the line is dropped.
    """

    def __init__(self, max_length: int = 512):
        self.max_length = max_length
        self.truncated = 0
        self._buffer = bytearray()
        self._overflow = False

    def feed(self, chunk: bytes) -> list[bytes]:
        """
        Consume a chunk of received data.

        Returns:
            The lines completed by this chunk, without terminators.
        """
        lines = []
        i = 0
        size = len(chunk)
        while i < size:
            byte = chunk[i]
            if byte == CR or byte == LF:
                if byte == CR and i + 1 < size and chunk[i + 1] == LF:
                    i += 1
                if self._overflow:
                    self._overflow = False
                else:
                    lines.append(bytes(self._buffer))
                self._buffer.clear()
            elif not self._overflow:
                if len(self._buffer) == self.max_length:
                    logger.warning(f"Line longer than {self.max_length} bytes, truncating")
                    self.truncated += 1
                    lines.append(bytes(self._buffer))
                    self._buffer.clear()
                    self._overflow = True
                else:
                    self._buffer.append(byte)
            i += 1
        return lines

    def flush(self) -> bytes | None:
        """Return the pending partial line, if any, and reset."""
        if self._overflow or not self._buffer:
            self._buffer.clear()
            self._overflow = False
            return None
        line = bytes(self._buffer)
        self._buffer.clear()
        return line


class ProtocolClient:
    """Performs one gopher request at a time over a Connector.

    Each response line is handed to a caller-supplied handler. Handlers
    signal a malformed line by raising LineError, which is logged and
    does not stop the fetch.
    """

    TERMINATOR = "."
    LINE_ENDING = b"\r\n"

    def __init__(
        self,
        connector: Connector,
        max_line_length: int = 512,
        chunk_size: int = 4096,
    ):
        """
        Initialize the protocol client.

        Args:
            connector: Network layer used to resolve and connect.
            max_line_length: Longest line in bytes before truncation.
            chunk_size: Bytes requested per read.
        """
        self.connector = connector
        self.max_line_length = max_line_length
        self.chunk_size = chunk_size

    def fetch(
        self,
        selector: str,
        host: str,
        port: int,
        line_handler: Callable[[str], object],
    ) -> int:
        """
        Request selector from host:port and feed each response line to
        line_handler.

        The response ends at a line consisting of ".", or at end of
        stream. The connection is closed on every exit path.

        Returns:
            Number of lines handed to line_handler.

        Raises:
            ResolveError: If the host cannot be resolved.
            ConnectError: If no resolved endpoint accepts a connection.
            SendError: If the request cannot be encoded or written in one call.
            ReceiveError: If reading the response fails.
        """
        logger.info(f"Fetching {selector!r} from {host}:{port}")
        stream = self._connect(host, port)
        try:
            self._send(stream, selector)
            handled = self._receive(stream, line_handler)
        finally:
            stream.close()
        logger.info(f"Received {handled} line(s) from {host}:{port}")
        return handled

    def _connect(self, host: str, port: int) -> Stream:
        try:
            endpoints = self.connector.resolve(host, port)
        except (OSError, UnicodeError) as e:
            raise ResolveError(f"{host}:{port}: {e}", e) from e

        if not endpoints:
            raise ConnectError(f"{host}:{port}: no addresses")

        last_error = None
        for endpoint in endpoints:
            try:
                return self.connector.open(endpoint)
            except OSError as e:
                logger.debug(f"Connection attempt to {host}:{port} failed: {e}")
                last_error = e

        raise ConnectError(f"{host}:{port}: {last_error}", last_error) from last_error

    def _send(self, stream: Stream, selector: str) -> None:
        try:
            request = selector.encode("utf-8") + self.LINE_ENDING
        except UnicodeEncodeError as e:
            raise SendError(f"cannot encode selector: {e}", e) from e

        try:
            written = stream.send(request)
        except OSError as e:
            raise SendError(str(e), e) from e

        if written != len(request):
            raise SendError(f"short write ({written} of {len(request)} bytes)")
        logger.debug(f"Sent {written} bytes")

    def _receive(self, stream: Stream, line_handler: Callable[[str], object]) -> int:
        splitter = LineSplitter(self.max_line_length)
        handled = 0

        while True:
            try:
                chunk = stream.recv(self.chunk_size)
            except OSError as e:
                raise ReceiveError(str(e), e) from e

            if not chunk:
                break

            for raw in splitter.feed(chunk):
                line = raw.decode("utf-8", errors="replace")
                if line == self.TERMINATOR:
                    logger.debug("End of response")
                    return handled
                self._deliver(line, line_handler)
                handled += 1

        pending = splitter.flush()
        if pending is not None:
            line = pending.decode("utf-8", errors="replace")
            if line == self.TERMINATOR:
                return handled
            logger.debug("Response ended without terminator")
            self._deliver(line, line_handler)
            handled += 1

        return handled

    def _deliver(self, line: str, line_handler: Callable[[str], object]) -> None:
        try:
            line_handler(line)
        except LineError as e:
            logger.warning(f"Skipping malformed line {line!r}: {e}")
