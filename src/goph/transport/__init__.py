"""Network transports for the Gopher client."""

from .socket_connector import SocketConnector, SocketStream

__all__ = ["SocketConnector", "SocketStream"]
