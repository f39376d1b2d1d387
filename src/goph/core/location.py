"""Location parsing and title formatting."""

from dataclasses import dataclass

from .errors import InvalidPortError

DEFAULT_PORT = 70
DEFAULT_TYPE = "1"
MAX_PORT = 32767
SCHEME = "gopher://"


@dataclass(frozen=True)
class Location:
    """A resolved gopher location: item type, selector, host and port."""

    item_type: str = DEFAULT_TYPE
    selector: str = ""
    host: str = ""
    port: int = DEFAULT_PORT

    def title(self) -> str:
        """Canonical display title for this location."""
        return format_title(self)


def parse_port(text: str) -> int | None:
    """
    Parse a decimal port number.

    Returns:
        The port, or None if text is not a number in [0, MAX_PORT].
    """
    if not text or not (text.isascii() and text.isdigit()):
        return None
    port = int(text)
    if port > MAX_PORT:
        return None
    return port


def parse_location(raw: str) -> Location:
    """
    Parse a location string of the form
    ``[gopher://]host[:port][/type selector]``.

    Args:
        raw: The location string.

    Returns:
        The parsed Location.

    Raises:
        InvalidPortError: If a port is given but is not valid.
    """
    rest = raw
    if rest[:len(SCHEME)].lower() == SCHEME:
        rest = rest[len(SCHEME):]

    # Host runs up to the first ':' or '/'
    end = len(rest)
    for i, ch in enumerate(rest):
        if ch in ":/":
            end = i
            break
    host, rest = rest[:end], rest[end:]

    port = DEFAULT_PORT
    if rest.startswith(":"):
        port_text, slash, tail = rest[1:].partition("/")
        parsed = parse_port(port_text)
        if parsed is None:
            raise InvalidPortError(port_text)
        port = parsed
        rest = slash + tail

    if rest.startswith("/"):
        rest = rest[1:]

    if rest:
        item_type, selector = rest[0], rest[1:]
    else:
        item_type, selector = DEFAULT_TYPE, ""

    return Location(item_type=item_type, selector=selector, host=host, port=port)


def format_title(location: Location) -> str:
    """Format ``host[:port]/type+selector``, omitting the default port."""
    if location.port == DEFAULT_PORT:
        address = location.host
    else:
        address = f"{location.host}:{location.port}"
    return f"{address}/{location.item_type}{location.selector}"
