"""
Tests for geolistings.server — command-line bootstrap.
"""
from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.exc import OperationalError

from geolistings import server


class TestParser:
    def test_defaults(self):
        args = server.build_parser().parse_args([])
        assert args.port == 3000
        assert args.host == "0.0.0.0"

    def test_flags(self):
        args = server.build_parser().parse_args(["--port", "8080", "--database", "sqlite://"])
        assert args.port == 8080
        assert args.database == "sqlite://"


class TestMain:
    @patch("geolistings.server.uvicorn.run")
    @patch("geolistings.server.deps.check_statement")
    @patch("geolistings.server.deps.make_engine")
    def test_serves_app_on_port(self, mock_make, mock_check, mock_run):
        engine = MagicMock()
        mock_make.return_value = engine
        server.main(["--port", "4000", "--database", "postgresql://x"])

        mock_make.assert_called_once_with("postgresql://x")
        mock_check.assert_called_once()
        app = mock_run.call_args.args[0]
        assert app.state.engine is engine
        assert mock_run.call_args.kwargs["port"] == 4000
        engine.dispose.assert_called_once()

    @patch("geolistings.server.uvicorn.run")
    @patch("geolistings.server.deps.check_statement")
    @patch("geolistings.server.deps.make_engine")
    def test_startup_failure_is_fatal(self, mock_make, mock_check, mock_run):
        mock_check.side_effect = OperationalError("SELECT", {}, Exception("no such table"))
        with pytest.raises(SystemExit) as exc:
            server.main(["--database", "postgresql://x"])
        assert exc.value.code == 1
        mock_run.assert_not_called()
