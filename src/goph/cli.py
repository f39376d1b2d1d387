"""Command-line interface for the Gopher client."""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable

import yaml
from pubsub import pub

from .config import Config, load_config
from .core import (
    BackCommand,
    Command,
    CommandParser,
    ForwardCommand,
    GoCommand,
    HelpCommand,
    HomeCommand,
    InvalidCommand,
    MenuRenderer,
    QuitCommand,
    ReloadCommand,
    SelectCommand,
    Session,
)
from .client import GopherClient, MENU_CHANGED
from .transport import SocketConnector

HELP_TEXT = """Commands:
[num]      - Open menu line
g LOCATION - Open a location
b          - Back
f          - Forward
r          - Reload
h          - Home
?          - This help
q          - Quit"""


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="goph - Gopher protocol client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Open the configured home
  %(prog)s gopher.floodgap.com              # Open a server's root menu
  %(prog)s gopher://example.com:7070/0/news # Open a text document
  %(prog)s --once example.com               # Print one menu and exit
  %(prog)s -c goph.yaml                     # Use specific config file
""",
    )

    parser.add_argument(
        "location",
        nargs="?",
        help="Location to open ([gopher://]host[:port][/type selector])",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--timeout",
        metavar="SECONDS",
        type=float,
        help="Socket timeout in seconds",
    )

    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the page and exit instead of starting the shell",
    )

    return parser.parse_args(argv)


class ConsoleView:
    """Prints the current page whenever the menu changes."""

    def __init__(self, renderer: MenuRenderer | None = None, out=None):
        self.renderer = renderer or MenuRenderer()
        self.out = out or sys.stdout

    def on_menu_changed(self, session: Session) -> None:
        print(self.renderer.render(session.menu, title=session.title), file=self.out)


def handle_command(client: GopherClient, command: Command, out=None) -> bool:
    """
    Execute one shell command.

    Returns:
        False if the shell should exit, True otherwise.
    """
    out = out or sys.stdout

    if isinstance(command, QuitCommand):
        return False

    if isinstance(command, HelpCommand):
        print(HELP_TEXT, file=out)
    elif isinstance(command, InvalidCommand):
        print(f"{command.reason}: {command.original_input.strip()}\nSend ? for help", file=out)
    elif isinstance(command, GoCommand):
        client.go_to_location(command.location)
    elif isinstance(command, HomeCommand):
        client.go_home()
    elif isinstance(command, BackCommand):
        if not client.go_back():
            print("No previous page", file=out)
    elif isinstance(command, ForwardCommand):
        if not client.go_forward():
            print("No next page", file=out)
    elif isinstance(command, ReloadCommand):
        if not client.reload():
            print("Nothing to reload", file=out)
    elif isinstance(command, SelectCommand):
        items = client.items
        if command.index > len(items) or items[command.index - 1].is_info():
            print(f"Invalid selection: {command.index}", file=out)
        else:
            client.select_item(command.index - 1)

    return True


def run_shell(
    client: GopherClient,
    input_func: Callable[[str], str] = input,
    out=None,
) -> None:
    """Read and execute commands until quit or end of input."""
    parser = CommandParser()
    while True:
        try:
            line = input_func(f"{client.title}> ")
        except EOFError:
            break
        if not handle_command(client, parser.parse(line), out=out):
            break


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
        except yaml.YAMLError as e:
            logger.error(f"Invalid config file {args.config}: {e}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.timeout is not None:
        config = replace(config, timeout_seconds=args.timeout)

    location = args.location or config.home

    client = GopherClient(SocketConnector(timeout=config.timeout_seconds), config)
    view = ConsoleView()
    pub.subscribe(view.on_menu_changed, MENU_CHANGED)

    try:
        ok = client.go_to_location(location)
        if args.once:
            return 0 if ok else 1
        run_shell(client)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        pub.unsubscribe(view.on_menu_changed, MENU_CHANGED)

    return 0


if __name__ == "__main__":
    sys.exit(main())
