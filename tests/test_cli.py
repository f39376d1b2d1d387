"""Tests for the CLI module."""

import io
import logging
import pytest
from unittest.mock import patch, MagicMock

from goph.cli import setup_logging, parse_args, main, handle_command, run_shell, ConsoleView
from goph.client import GopherClient
from goph.config import Config
from goph.core import (
    BackCommand,
    ForwardCommand,
    GoCommand,
    HelpCommand,
    InvalidCommand,
    QuitCommand,
    ReloadCommand,
    SelectCommand,
    Session,
)


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_default_level_is_info(self):
        """Default logging level is INFO."""
        with patch("logging.basicConfig") as mock_config:
            setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.INFO

    def test_verbose_level_is_debug(self):
        """Verbose logging level is DEBUG."""
        with patch("logging.basicConfig") as mock_config:
            setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG


class TestParseArgs:
    """Tests for parse_args function."""

    def test_no_args(self):
        """No arguments uses defaults."""
        args = parse_args([])
        assert args.location is None
        assert args.config is None
        assert args.verbose is False
        assert args.timeout is None
        assert args.once is False

    def test_location(self):
        args = parse_args(["gopher://example.com/1/"])
        assert args.location == "gopher://example.com/1/"

    def test_config_file(self):
        """--config specifies config file."""
        args = parse_args(["-c", "goph.yaml"])
        assert args.config == "goph.yaml"

    def test_verbose_flag(self):
        """--verbose enables verbose mode."""
        args = parse_args(["-v"])
        assert args.verbose is True

    def test_timeout(self):
        args = parse_args(["--timeout", "2.5"])
        assert args.timeout == 2.5

    def test_invalid_timeout(self):
        with pytest.raises(SystemExit):
            parse_args(["--timeout", "soon"])

    def test_reads_sys_argv(self):
        with patch("sys.argv", ["goph", "--once", "example.com"]):
            args = parse_args()
            assert args.once is True
            assert args.location == "example.com"


class TestHandleCommand:
    """Tests for handle_command."""

    @pytest.fixture
    def client(self, connector):
        client = GopherClient(connector, Config(home="localhost"))
        client.go_to_location("localhost")
        return client

    def test_quit_stops(self, client):
        assert handle_command(client, QuitCommand(), out=io.StringIO()) is False

    def test_help(self, client):
        out = io.StringIO()
        assert handle_command(client, HelpCommand(), out=out) is True
        assert "Commands:" in out.getvalue()

    def test_invalid(self, client):
        out = io.StringIO()
        handle_command(client, InvalidCommand(original_input="xyzzy"), out=out)
        assert "Unknown command: xyzzy" in out.getvalue()

    def test_select_is_one_based(self, client):
        handle_command(client, SelectCommand(index=2), out=io.StringIO())
        assert client.title == "localhost/1/docs"

    def test_select_info_line(self, client):
        out = io.StringIO()
        handle_command(client, SelectCommand(index=1), out=out)
        assert "Invalid selection: 1" in out.getvalue()
        assert client.title == "localhost/1"

    def test_select_out_of_range(self, client):
        out = io.StringIO()
        handle_command(client, SelectCommand(index=9), out=out)
        assert "Invalid selection: 9" in out.getvalue()

    def test_back_forward_reload(self, client):
        out = io.StringIO()
        handle_command(client, SelectCommand(index=2), out=out)
        handle_command(client, BackCommand(), out=out)
        assert client.title == "localhost/1"
        handle_command(client, ForwardCommand(), out=out)
        assert client.title == "localhost/1/docs"
        handle_command(client, ReloadCommand(), out=out)
        assert client.title == "localhost/1/docs"
        assert out.getvalue() == ""

    def test_back_without_history(self, client):
        out = io.StringIO()
        handle_command(client, BackCommand(), out=out)
        assert "No previous page" in out.getvalue()

    def test_forward_without_history(self, client):
        out = io.StringIO()
        handle_command(client, ForwardCommand(), out=out)
        assert "No next page" in out.getvalue()

    def test_go(self, client):
        handle_command(client, GoCommand(location="localhost/0/about.txt"), out=io.StringIO())
        assert client.title == "localhost/0/about.txt"


class TestRunShell:
    """Tests for run_shell."""

    def test_runs_until_quit(self, connector):
        client = GopherClient(connector)
        inputs = iter(["g localhost", "2", "b", "q", "never read"])
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return next(inputs)

        run_shell(client, input_func=fake_input, out=io.StringIO())

        assert len(prompts) == 4
        assert prompts[2] == "localhost/1/docs> "
        assert client.title == "localhost/1"

    def test_stops_at_end_of_input(self, connector):
        client = GopherClient(connector)
        input_func = MagicMock(side_effect=EOFError)
        run_shell(client, input_func=input_func, out=io.StringIO())
        input_func.assert_called_once()


class TestConsoleView:
    """Tests for ConsoleView."""

    def test_prints_menu(self):
        out = io.StringIO()
        session = Session(title="localhost/1")
        session.menu.parse_entry_line("1Docs\t/docs\tlocalhost\t70")
        ConsoleView(out=out).on_menu_changed(session)
        assert "[localhost/1]" in out.getvalue()
        assert "1. [1] Docs" in out.getvalue()


class TestMain:
    """Tests for main function."""

    def test_config_file_not_found(self):
        """Returns 1 when config file not found."""
        assert main(["-c", "/nonexistent/config.yaml", "--once"]) == 1

    def test_invalid_config_file(self, tmp_path):
        config_file = tmp_path / "goph.yaml"
        config_file.write_text("client: [unclosed")
        assert main(["-c", str(config_file), "--once"]) == 1

    @patch("goph.cli.SocketConnector")
    def test_once_prints_menu(self, mock_connector, connector, capsys):
        """--once fetches the location, prints it and exits."""
        mock_connector.return_value = connector

        result = main(["--once", "localhost"])

        assert result == 0
        output = capsys.readouterr().out
        assert "[localhost/1]" in output
        assert "Documents" in output

    @patch("goph.cli.SocketConnector")
    def test_once_failure(self, mock_connector, connector):
        """--once returns 1 when the fetch fails."""
        connector.resolve_error = OSError("down")
        mock_connector.return_value = connector
        assert main(["--once", "localhost"]) == 1

    @patch("goph.cli.SocketConnector")
    def test_once_bad_location(self, mock_connector, connector):
        mock_connector.return_value = connector
        assert main(["--once", "localhost:99999"]) == 1

    @patch("goph.cli.SocketConnector")
    def test_timeout_override(self, mock_connector, connector, tmp_path):
        """--timeout overrides the config file."""
        config_file = tmp_path / "goph.yaml"
        config_file.write_text("network:\n  timeout_seconds: 10\n")
        mock_connector.return_value = connector

        main(["-c", str(config_file), "--timeout", "3", "--once", "localhost"])

        mock_connector.assert_called_once_with(timeout=3.0)

    @patch("goph.cli.SocketConnector")
    def test_uses_home_without_location(self, mock_connector, connector, tmp_path):
        config_file = tmp_path / "goph.yaml"
        config_file.write_text("client:\n  home: localhost/1/docs\n")
        mock_connector.return_value = connector

        assert main(["-c", str(config_file), "--once"]) == 0
        assert connector.requests() == ["/docs"]

    @patch("goph.cli.run_shell")
    @patch("goph.cli.SocketConnector")
    def test_interactive_runs_shell(self, mock_connector, mock_shell, connector):
        mock_connector.return_value = connector
        assert main(["localhost"]) == 0
        mock_shell.assert_called_once()

    @patch("goph.cli.run_shell")
    @patch("goph.cli.SocketConnector")
    def test_interrupt_exits_cleanly(self, mock_connector, mock_shell, connector):
        mock_connector.return_value = connector
        mock_shell.side_effect = KeyboardInterrupt
        assert main(["localhost"]) == 0
