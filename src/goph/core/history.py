"""Navigation history with a back/forward cursor."""

import logging

from .location import Location
from .menu import Item, Menu

logger = logging.getLogger(__name__)


class History(Menu):
    """Menu of visited locations with a movable cursor.

    ``position`` is the next slot to write, i.e. the index of the
    current entry plus one. Always ``0 <= position <= len(self)``.
    """

    def __init__(self):
        super().__init__()
        self.position = 0

    def truncate(self, length: int) -> None:
        super().truncate(length)
        self.position = min(self.position, len(self))

    def record_visit(self, location: Location, title: str) -> None:
        """
        Record a new visit after the current entry.

        Any entries ahead of the cursor are discarded first.

        Args:
            location: The visited location.
            title: Display title stored as the entry name.
        """
        dropped = len(self) - self.position
        if dropped:
            logger.debug(f"Discarding {dropped} forward history entries")
        self.truncate(self.position)
        self.append(
            Item(
                type=location.item_type,
                name=title,
                selector=location.selector,
                host=location.host,
                port=location.port,
            )
        )
        self.position += 1

    def go_back(self, delta: int) -> Location | None:
        """
        Move the cursor ``delta`` entries back (forward when negative).

        Returns:
            The location of the new current entry, or None if the move
            would leave the history. The cursor is unchanged in that case.
        """
        new_position = self.position - delta
        if new_position <= 0 or new_position > len(self):
            logger.debug(f"Refusing history move by {delta} from position {self.position}")
            return None

        self.position = new_position
        entry = self[new_position - 1]
        return Location(
            item_type=entry.type,
            selector=entry.selector,
            host=entry.host,
            port=entry.port,
        )

    def current(self) -> Item | None:
        """Get the current entry, or None if history is empty."""
        if self.position == 0:
            return None
        return self[self.position - 1]
