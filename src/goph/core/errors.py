"""Exception hierarchy for the Gopher client."""


class GophError(Exception):
    """Base class for all client errors."""

    pass


class ParseError(GophError):
    """A location string could not be parsed."""

    pass


class InvalidPortError(ParseError):
    """The port of a location is not a number in [0, 32767]."""

    def __init__(self, port: str):
        super().__init__(f"Invalid port: {port!r}")
        self.port = port


class FetchError(GophError):
    """A network round-trip failed.

    Attributes:
        cause: The underlying exception, if any.
    """

    stage = "fetch"

    def __init__(self, detail: str, cause: BaseException | None = None):
        super().__init__(f"{self.stage} failed: {detail}")
        self.detail = detail
        self.cause = cause


class ResolveError(FetchError):
    """The host name could not be resolved."""

    stage = "resolve"


class ConnectError(FetchError):
    """No resolved address accepted a connection."""

    stage = "connect"


class SendError(FetchError):
    """The request could not be written in a single call."""

    stage = "send"


class ReceiveError(FetchError):
    """Reading the response failed."""

    stage = "receive"


class LineError(GophError):
    """A single response line is malformed."""

    pass


class EmptyLineError(LineError):
    """A menu line is empty."""

    def __init__(self):
        super().__init__("Empty line")


class MissingFieldError(LineError):
    """A menu line lacks one of its tab-separated fields."""

    def __init__(self, field: str):
        super().__init__(f"Missing field: {field}")
        self.field = field


class InvalidEntryPortError(LineError):
    """The port of a menu line is not a number in [0, 32767]."""

    def __init__(self, port: str):
        super().__init__(f"Invalid port: {port!r}")
        self.port = port
