"""Tests for the server entry point and logging setup."""

from unittest.mock import patch

import pytest
import structlog

from servers.culture_api.__main__ import main, parse_args
from servers.culture_api.logging_setup import configure_logging


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])

        assert args.host == "127.0.0.1"
        assert args.port == 8000

    def test_overrides(self):
        args = parse_args(["--host", "0.0.0.0", "--port", "9000"])

        assert args.host == "0.0.0.0"
        assert args.port == 9000


class TestMain:
    def teardown_method(self):
        structlog.reset_defaults()

    def run_main(self, env: dict[str, str], argv: list[str]):
        with patch.dict("os.environ", env, clear=True), patch(
            "servers.culture_api.__main__.uvicorn.run"
        ) as run:
            main(argv)
        return run

    def test_runs_uvicorn_with_env_settings(self):
        run = self.run_main({"KOPIS_API_KEY": "kopis", "LOG_LEVEL": "warning"}, ["--port", "9000"])

        app = run.call_args.args[0]
        assert app.state.services.settings.kopis_api_key == "kopis"
        assert run.call_args.kwargs == {"host": "127.0.0.1", "port": 9000, "log_level": "warning"}

    @pytest.mark.parametrize(
        "env_level, server_level",
        [("WARN", "warning"), ("debug", "debug"), ("verbose", "info")],
    )
    def test_server_gets_resolved_level(self, env_level, server_level):
        """Aliases and unknown names reach uvicorn as a level it accepts."""
        run = self.run_main({"LOG_LEVEL": env_level}, [])

        assert run.call_args.kwargs["log_level"] == server_level


class TestConfigureLogging:
    def teardown_method(self):
        structlog.reset_defaults()

    def test_sets_level(self):
        assert configure_logging("warning") == "WARNING"

        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.make_filtering_bound_logger(30)

    def test_alias_resolves_to_standard_name(self):
        assert configure_logging("WARN") == "WARNING"

    def test_unknown_level_falls_back_to_info(self):
        assert configure_logging("LOUD") == "INFO"

        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.make_filtering_bound_logger(20)
