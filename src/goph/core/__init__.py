"""Core components for the Gopher client."""

from .command_parser import (
    CommandParser,
    Command,
    SelectCommand,
    GoCommand,
    BackCommand,
    ForwardCommand,
    ReloadCommand,
    HomeCommand,
    HelpCommand,
    QuitCommand,
    InvalidCommand,
)
from .errors import (
    GophError,
    ParseError,
    InvalidPortError,
    FetchError,
    ResolveError,
    ConnectError,
    SendError,
    ReceiveError,
    LineError,
    EmptyLineError,
    MissingFieldError,
    InvalidEntryPortError,
)
from .history import History
from .location import Location, parse_location, format_title, DEFAULT_PORT
from .menu import Item, Menu
from .menu_renderer import MenuRenderer
from .protocol_client import ProtocolClient, LineSplitter
from .session import Session

__all__ = [
    "CommandParser",
    "Command",
    "SelectCommand",
    "GoCommand",
    "BackCommand",
    "ForwardCommand",
    "ReloadCommand",
    "HomeCommand",
    "HelpCommand",
    "QuitCommand",
    "InvalidCommand",
    "GophError",
    "ParseError",
    "InvalidPortError",
    "FetchError",
    "ResolveError",
    "ConnectError",
    "SendError",
    "ReceiveError",
    "LineError",
    "EmptyLineError",
    "MissingFieldError",
    "InvalidEntryPortError",
    "History",
    "Location",
    "parse_location",
    "format_title",
    "DEFAULT_PORT",
    "Item",
    "Menu",
    "MenuRenderer",
    "ProtocolClient",
    "LineSplitter",
    "Session",
]
