"""Per-client navigation state."""

from dataclasses import dataclass, field

from .errors import GophError
from .history import History
from .menu import Menu

DEFAULT_TITLE = "goph"


@dataclass
class Session:
    """Navigation state owned by a single client.

    Attributes:
        menu: Items of the current page.
        history: Visited locations with the back/forward cursor.
        title: Title of the last successfully fetched page.
        last_error: The most recent navigation error, cleared on success.
    """

    menu: Menu = field(default_factory=Menu)
    history: History = field(default_factory=History)
    title: str = DEFAULT_TITLE
    last_error: GophError | None = None
