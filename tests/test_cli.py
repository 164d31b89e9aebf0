"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
import unittest.mock
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, patch

if TYPE_CHECKING:
    from pathlib import Path

import pytest

from city_weather.board import SearchState, SlotState
from city_weather.cli import (
    cmd_build,
    cmd_info,
    cmd_search,
    cmd_serve,
    cmd_show,
    create_parser,
    main,
)
from city_weather.reference.cities import PREDEFINED_CITIES
from city_weather.schemas import CurrentConditions, SearchResult, SearchStatus

SUNNY = CurrentConditions(temperature_2m=31.4, precipitation_probability=5, weather_code=2)


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "city-weather"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_show_command(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["show"])
        assert args.command == "show"

    def test_parser_search_command(self) -> None:
        """Search takes a positional query."""
        parser = create_parser()
        args = parser.parse_args(["search", "New York"])
        assert args.command == "search"
        assert args.query == "New York"

    def test_parser_search_requires_query(self) -> None:
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["search"])

    def test_parser_build_command(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["build"])
        assert args.command == "build"
        assert args.search is None

    def test_parser_build_with_search(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["build", "--search", "Paris"])
        assert args.search == "Paris"

    def test_parser_serve_command(self) -> None:
        """Parser accepts serve command with optional --port."""
        parser = create_parser()
        args = parser.parse_args(["serve"])
        assert args.command == "serve"
        assert args.port is None

    def test_parser_serve_with_port(self) -> None:
        """Parser accepts serve --port."""
        parser = create_parser()
        args = parser.parse_args(["serve", "--port", "3000"])
        assert args.port == 3000


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        """Info command returns exit code 0."""
        exit_code = cmd_info(argparse.Namespace())
        assert exit_code == 0

    def test_prints_app_info(self) -> None:
        """Info command prints application information."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_info(argparse.Namespace())
            output = mock_stdout.getvalue()
            assert "Application: city-weather" in output
            assert "Version" in output


class TestCmdShow:
    """Tests for cmd_show function."""

    def test_prints_one_line_per_city(self) -> None:
        slots = tuple(SlotState.succeeded(SUNNY) for _ in PREDEFINED_CITIES)

        with (
            patch("city_weather.cli.WeatherBoard.load_cities", new=AsyncMock(return_value=slots)),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_show(argparse.Namespace())

        assert exit_code == 0
        lines = mock_stdout.getvalue().splitlines()
        assert len(lines) == len(PREDEFINED_CITIES)
        assert lines[0] == "Delhi: 31.4°C  |  Rain Prob. 5%  |  Mainly Clear"

    def test_failed_city_still_exits_zero(self) -> None:
        slots = (SlotState.failed(),) + tuple(
            SlotState.succeeded(SUNNY) for _ in PREDEFINED_CITIES[1:]
        )

        with (
            patch("city_weather.cli.WeatherBoard.load_cities", new=AsyncMock(return_value=slots)),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_show(argparse.Namespace())

        assert exit_code == 0
        assert "Delhi: Error" in mock_stdout.getvalue()


class TestCmdSearch:
    """Tests for cmd_search function."""

    def test_resolved_returns_zero(self) -> None:
        result = SearchResult(display_name="Paris", country="France", conditions=SUNNY)
        state = SearchState(status=SearchStatus.RESOLVED, result=result)

        with (
            patch("city_weather.cli.WeatherBoard.search", new=AsyncMock(return_value=state)),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_search(argparse.Namespace(query="paris"))

        assert exit_code == 0
        assert mock_stdout.getvalue().startswith("Paris, France: ")

    def test_not_found_returns_one(self) -> None:
        state = SearchState(status=SearchStatus.NOT_FOUND, message="City not found")

        with (
            patch("city_weather.cli.WeatherBoard.search", new=AsyncMock(return_value=state)),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = cmd_search(argparse.Namespace(query="Atlantis"))

        assert exit_code == 1
        assert "City not found" in mock_stderr.getvalue()

    def test_errored_returns_one(self) -> None:
        state = SearchState(status=SearchStatus.ERRORED, message="Error fetching weather")

        with (
            patch("city_weather.cli.WeatherBoard.search", new=AsyncMock(return_value=state)),
            patch("sys.stderr", new=StringIO()) as mock_stderr,
        ):
            exit_code = cmd_search(argparse.Namespace(query="Paris"))

        assert exit_code == 1
        assert "Error fetching weather" in mock_stderr.getvalue()

    def test_blank_query_makes_no_lookup(self) -> None:
        with (
            patch("city_weather.cli.WeatherBoard.search") as mock_search,
            patch("sys.stderr", new=StringIO()),
        ):
            exit_code = cmd_search(argparse.Namespace(query="   "))

        assert exit_code == 2
        mock_search.assert_not_called()


class TestCmdBuild:
    """Tests for cmd_build function."""

    def test_returns_zero(self) -> None:
        with patch("city_weather.cli.build_site", new=AsyncMock(return_value={"pages": 1})):
            exit_code = cmd_build(argparse.Namespace(search=None))
        assert exit_code == 0

    def test_passes_search_query(self) -> None:
        with patch("city_weather.cli.build_site", new=AsyncMock(return_value={})) as mock_build:
            cmd_build(argparse.Namespace(search="Paris"))
        mock_build.assert_awaited_once_with(query="Paris")


class TestCmdServe:
    """Tests for cmd_serve function."""

    def _mock_server(self) -> unittest.mock.MagicMock:
        mock_server = unittest.mock.MagicMock()
        mock_server.__enter__ = unittest.mock.Mock(return_value=mock_server)
        mock_server.__exit__ = unittest.mock.Mock(return_value=False)
        mock_server.serve_forever = unittest.mock.Mock(side_effect=KeyboardInterrupt)
        return mock_server

    def test_missing_site_dir_returns_one(self, tmp_path: Path) -> None:
        """Serve returns 1 when the site directory doesn't exist."""
        with patch("city_weather.cli.get_settings") as mock_settings:
            mock_settings.return_value.site_dir = tmp_path / "no-such-dir"
            mock_settings.return_value.api_port = 8000
            exit_code = cmd_serve(argparse.Namespace(port=8080))
        assert exit_code == 1

    def test_uses_port_from_args(self, tmp_path: Path) -> None:
        """Serve uses --port when provided."""
        with (
            patch("city_weather.cli.get_settings") as mock_settings,
            patch(
                "city_weather.cli.http.server.HTTPServer", return_value=self._mock_server()
            ) as mock_ctor,
        ):
            mock_settings.return_value.site_dir = tmp_path
            cmd_serve(argparse.Namespace(port=9999))
            mock_ctor.assert_called_once()
            assert mock_ctor.call_args[0][0] == ("", 9999)

    def test_uses_port_from_settings_when_none(self, tmp_path: Path) -> None:
        """Serve falls back to api_port from settings."""
        with (
            patch("city_weather.cli.get_settings") as mock_settings,
            patch(
                "city_weather.cli.http.server.HTTPServer", return_value=self._mock_server()
            ) as mock_ctor,
        ):
            mock_settings.return_value.site_dir = tmp_path
            mock_settings.return_value.api_port = 5555
            cmd_serve(argparse.Namespace(port=None))
            assert mock_ctor.call_args[0][0] == ("", 5555)

    def test_serves_site_dir(self, tmp_path: Path) -> None:
        """The handler is bound to the configured site directory."""
        with (
            patch("city_weather.cli.get_settings") as mock_settings,
            patch(
                "city_weather.cli.http.server.HTTPServer", return_value=self._mock_server()
            ) as mock_ctor,
        ):
            mock_settings.return_value.site_dir = tmp_path
            cmd_serve(argparse.Namespace(port=8000))
            handler = mock_ctor.call_args[0][1]
            assert handler.keywords["directory"] == str(tmp_path)


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        """No command shows help and exits 0."""
        with patch("sys.argv", ["city-weather"]):
            exit_code = main()
            assert exit_code == 0

    @pytest.mark.parametrize(
        ("argv", "handler"),
        [
            (["info"], "cmd_info"),
            (["show"], "cmd_show"),
            (["search", "Paris"], "cmd_search"),
            (["build"], "cmd_build"),
            (["serve"], "cmd_serve"),
        ],
    )
    def test_command_dispatch(self, argv: list[str], handler: str) -> None:
        with (
            patch("sys.argv", ["city-weather", *argv]),
            patch(f"city_weather.cli.{handler}") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            exit_code = main()
            assert exit_code == 0
            mock_cmd.assert_called_once()

    def test_handler_exit_code_propagates(self) -> None:
        with (
            patch("sys.argv", ["city-weather", "search", "Atlantis"]),
            patch("city_weather.cli.cmd_search", return_value=1),
        ):
            assert main() == 1

    def test_unknown_command_shows_help(self) -> None:
        """Unknown command shows help and returns 1."""
        # argparse would normally catch unknown commands
        with (
            patch("sys.argv", ["city-weather", "info"]),
            patch("city_weather.cli.create_parser") as mock_parser,
        ):
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(
                command="unknown", debug=False
            )
            exit_code = main()
            assert exit_code == 1
