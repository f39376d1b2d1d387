"""GopherClient - Navigation controller for the Gopher client."""

import logging

from pubsub import pub

from .interfaces import Connector
from .core import (
    FetchError,
    GophError,
    Item,
    Location,
    ParseError,
    ProtocolClient,
    Session,
    format_title,
    parse_location,
)
from .config import Config

logger = logging.getLogger(__name__)

MENU_CHANGED = "goph.menu.changed"
NAVIGATION_FAILED = "goph.navigation.failed"

MENU_TYPE = "1"


class GopherClient:
    """Orchestrates location parsing, fetching, the menu and history.

    Every navigation runs to completion before returning. Listeners are
    told about changes through pubsub: MENU_CHANGED is sent with
    ``session`` after each fetch attempt, NAVIGATION_FAILED with
    ``error`` whenever a navigation fails.
    """

    def __init__(
        self,
        connector: Connector,
        config: Config | None = None,
        session: Session | None = None,
    ):
        """
        Initialize the client.

        Args:
            connector: Network layer used for fetches.
            config: Client configuration (uses defaults if None).
            session: Navigation state (a fresh one if None).
        """
        self.config = config or Config()
        self.session = session or Session()
        self.protocol = ProtocolClient(
            connector,
            max_line_length=self.config.max_line_length,
            chunk_size=self.config.recv_chunk_size,
        )

    @property
    def items(self) -> tuple[Item, ...]:
        """Items of the current page, in display order."""
        return self.session.menu.items

    @property
    def title(self) -> str:
        """Title of the current page."""
        return self.session.title

    @property
    def history(self) -> tuple[Item, ...]:
        """Visited locations, oldest first."""
        return self.session.history.items

    def go_to_location(self, raw: str) -> bool:
        """
        Parse a location string and navigate to it.

        On a parse error the current menu is left untouched.

        Returns:
            True if the page was fetched.
        """
        try:
            location = parse_location(raw)
        except ParseError as e:
            logger.error(f"Cannot open {raw!r}: {e}")
            self._report(e)
            return False

        return self.navigate(location, add_history=True)

    def go_home(self) -> bool:
        """Navigate to the configured home location."""
        return self.go_to_location(self.config.home)

    def select_item(self, index: int) -> bool:
        """
        Navigate to the item at a 0-based index of the current menu.

        Informational lines and out-of-range indexes are ignored.

        Returns:
            True if the page was fetched.
        """
        if index < 0 or index >= len(self.session.menu):
            logger.debug(f"Selection {index} out of range")
            return False

        item = self.session.menu[index]
        if item.is_info():
            logger.debug(f"Selection {index} is an info line")
            return False

        location = Location(
            item_type=item.type,
            selector=item.selector,
            host=item.host,
            port=item.port,
        )
        return self.navigate(location, add_history=True)

    def go_back(self, delta: int = 1) -> bool:
        """
        Move delta entries back in history (forward if negative) and
        re-fetch that page without recording a new visit.

        Returns:
            True if the page was fetched.
        """
        location = self.session.history.go_back(delta)
        if location is None:
            logger.debug(f"No history entry {delta} step(s) back")
            return False

        logger.info(f"History position {self.session.history.position}/{len(self.session.history)}")
        return self.navigate(location, add_history=False)

    def go_forward(self, delta: int = 1) -> bool:
        """Move delta entries forward in history."""
        return self.go_back(-delta)

    def reload(self) -> bool:
        """Re-fetch the current history entry."""
        return self.go_back(0)

    def navigate(self, location: Location, add_history: bool = True) -> bool:
        """
        Fetch a location into the current menu.

        The menu is cleared first. Only menu-type locations are parsed
        as structured entries; every other type is kept as raw text.
        The title is updated (and the visit recorded when add_history is
        set) only on success.

        Args:
            location: The location to fetch.
            add_history: Record the visit in history.

        Returns:
            True on success, False if the fetch failed.
        """
        menu = self.session.menu
        menu.clear()

        if location.item_type == MENU_TYPE:
            handler = menu.parse_entry_line
        else:
            handler = menu.parse_text_line

        try:
            self.protocol.fetch(location.selector, location.host, location.port, handler)
        except FetchError as e:
            logger.error(f"Failed to fetch {format_title(location)}: {e}")
            self._report(e)
            pub.sendMessage(MENU_CHANGED, session=self.session)
            return False

        title = format_title(location)
        self.session.title = title
        self.session.last_error = None
        if add_history:
            self.session.history.record_visit(location, title)

        logger.info(f"Loaded {title} ({len(menu)} item(s))")
        pub.sendMessage(MENU_CHANGED, session=self.session)
        return True

    def _report(self, error: GophError) -> None:
        self.session.last_error = error
        pub.sendMessage(NAVIGATION_FAILED, error=error)
