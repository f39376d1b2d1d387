"""goph - a Gopher protocol client and navigation engine."""

__version__ = "0.1.0"
