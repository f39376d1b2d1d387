"""Command parser for interpreting shell input."""

from abc import ABC
from dataclasses import dataclass


class Command(ABC):
    """Base class for all commands."""

    pass


@dataclass(frozen=True)
class SelectCommand(Command):
    """Command to select a menu line by number (1-based)."""

    index: int


@dataclass(frozen=True)
class GoCommand(Command):
    """Command to open a location."""

    location: str


@dataclass(frozen=True)
class BackCommand(Command):
    """Command to go back in history."""

    pass


@dataclass(frozen=True)
class ForwardCommand(Command):
    """Command to go forward in history."""

    pass


@dataclass(frozen=True)
class ReloadCommand(Command):
    """Command to re-fetch the current page."""

    pass


@dataclass(frozen=True)
class HomeCommand(Command):
    """Command to open the configured home location."""

    pass


@dataclass(frozen=True)
class HelpCommand(Command):
    """Command to display help information."""

    pass


@dataclass(frozen=True)
class QuitCommand(Command):
    """Command to leave the shell."""

    pass


@dataclass(frozen=True)
class InvalidCommand(Command):
    """Represents an invalid or unrecognized command."""

    original_input: str
    reason: str = "Unknown command"


class CommandParser:
    """Parses user input strings into Command objects."""

    # Command mappings
    BACK_COMMANDS = {"b", "back"}
    FORWARD_COMMANDS = {"f", "forward"}
    RELOAD_COMMANDS = {"r", "reload"}
    HOME_COMMANDS = {"h", "home"}
    HELP_COMMANDS = {"?", "help"}
    QUIT_COMMANDS = {"q", "quit"}
    GO_COMMANDS = {"g", "go"}

    def parse(self, input_str: str) -> Command:
        """
        Parse a user input string into a Command object.

        Args:
            input_str: The raw input string from the user.

        Returns:
            A Command object representing the parsed input.
        """
        stripped = input_str.strip()
        if not stripped:
            return InvalidCommand(
                original_input=input_str, reason="Empty input"
            )

        # Locations are case sensitive, so only the verb is normalized
        verb, _, argument = stripped.partition(" ")
        verb = verb.lower()
        argument = argument.strip()

        if verb in self.GO_COMMANDS:
            if not argument:
                return InvalidCommand(
                    original_input=input_str, reason="Missing location"
                )
            return GoCommand(location=argument)

        if argument:
            return InvalidCommand(
                original_input=input_str, reason="Unexpected argument"
            )

        if verb in self.BACK_COMMANDS:
            return BackCommand()

        if verb in self.FORWARD_COMMANDS:
            return ForwardCommand()

        if verb in self.RELOAD_COMMANDS:
            return ReloadCommand()

        if verb in self.HOME_COMMANDS:
            return HomeCommand()

        if verb in self.HELP_COMMANDS:
            return HelpCommand()

        if verb in self.QUIT_COMMANDS:
            return QuitCommand()

        # Try to parse as number
        try:
            number = int(verb)
            if number < 1:
                return InvalidCommand(
                    original_input=input_str,
                    reason="Selection must be positive",
                )
            return SelectCommand(index=number)
        except ValueError:
            pass

        return InvalidCommand(
            original_input=input_str, reason="Unknown command"
        )
