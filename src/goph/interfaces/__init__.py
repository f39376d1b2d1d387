"""Abstract interfaces for the Gopher client."""

from .connector import Connector, Stream

__all__ = ["Connector", "Stream"]
