"""In-memory menu model."""

from dataclasses import dataclass
from typing import Iterator

from .errors import EmptyLineError, MissingFieldError, InvalidEntryPortError
from .location import parse_port

INFO_TYPE = "i"
NULL_FIELD = "null"


@dataclass(frozen=True)
class Item:
    """One line of a menu.

    Informational lines have type 'i' and carry the sentinel
    selector/host "null" and port 0.
    """

    type: str
    name: str
    selector: str
    host: str
    port: int

    def is_info(self) -> bool:
        """Check if this is an informational (non-navigable) line."""
        return self.type == INFO_TYPE


class Menu:
    """Ordered collection of menu items, in response order."""

    FIELDS = ("name", "selector", "host", "port")

    def __init__(self, items: list[Item] | tuple[Item, ...] | None = None):
        self._items: list[Item] = list(items) if items else []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Item:
        return self._items[index]

    @property
    def items(self) -> tuple[Item, ...]:
        """Snapshot of the current items."""
        return tuple(self._items)

    def append(self, item: Item) -> None:
        """Append an item at the end of the menu."""
        self._items.append(item)

    def clear(self) -> None:
        """Remove all items."""
        self.truncate(0)

    def truncate(self, length: int) -> None:
        """Discard every item at index >= length."""
        del self._items[max(length, 0):]

    def parse_entry_line(self, line: str) -> Item:
        """
        Parse a ``Tname<TAB>selector<TAB>host<TAB>port`` line and append it.

        Fields after the port (gopher+ markers) are ignored.

        Args:
            line: The raw response line, type character included.

        Returns:
            The appended Item.

        Raises:
            EmptyLineError: If the line is empty.
            MissingFieldError: If fewer than four fields follow the type.
            InvalidEntryPortError: If the port is not a number in [0, 32767].
        """
        if not line:
            raise EmptyLineError()

        item_type, rest = line[0], line[1:]
        fields = rest.split("\t")
        if len(fields) < len(self.FIELDS):
            raise MissingFieldError(self.FIELDS[len(fields)])

        name, selector, host, port_text = fields[:4]
        port = parse_port(port_text.strip())
        if port is None:
            raise InvalidEntryPortError(port_text)

        item = Item(type=item_type, name=name, selector=selector, host=host, port=port)
        self.append(item)
        return item

    def parse_text_line(self, line: str) -> Item:
        """Append a line of plain text as an informational item."""
        item = Item(type=INFO_TYPE, name=line, selector=NULL_FIELD, host=NULL_FIELD, port=0)
        self.append(item)
        return item
