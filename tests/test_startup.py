"""
Startup and configuration tests.

Verifies:
- the server refuses to start without MONGO_URI
- the lifespan connects before serving and fails fast
- settings derive the public base URL from PORT
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

import main
from adapters import mongo_adapter
from app.exceptions import ConnectionFailed
from repositories.menu_repository import MenuRepository
from test_fixtures import make_settings


# =============================================================================
# PROCESS STARTUP
# =============================================================================


def test_run_exits_without_mongo_uri(tmp_path):
    cfg = make_settings(tmp_path, mongo_uri=None)

    with patch.object(main.uvicorn, "run") as mock_run:
        with pytest.raises(SystemExit) as exc_info:
            main.run(cfg)

    assert exc_info.value.code == 1
    mock_run.assert_not_called()


def test_run_starts_uvicorn_with_settings(tmp_path):
    cfg = make_settings(tmp_path, port=8123)

    with patch.object(main.uvicorn, "run") as mock_run:
        main.run(cfg)

    mock_run.assert_called_once()
    assert mock_run.call_args.kwargs["port"] == 8123
    assert mock_run.call_args.kwargs["reload"] is False

    served_app = mock_run.call_args.args[0]
    assert served_app.state.settings is cfg
    assert served_app.state.blob_store.directory == Path(cfg.upload_dir)


def test_run_with_reload_uses_import_string(tmp_path):
    cfg = make_settings(tmp_path, environment="development", debug=True)

    with patch.object(main.uvicorn, "run") as mock_run:
        main.run(cfg)

    assert mock_run.call_args.args[0] == "main:app"
    assert mock_run.call_args.kwargs["reload"] is True


# =============================================================================
# LIFESPAN
# =============================================================================


def test_lifespan_connects_and_closes(tmp_path):
    cfg = make_settings(tmp_path, mongo_db_name="menu_test")
    fake_client = MagicMock()
    application = main.create_app(cfg)

    with patch.object(mongo_adapter, "connect", return_value=fake_client) as mock_connect:
        with TestClient(application) as client:
            assert isinstance(application.state.menu_repository, MenuRepository)
            assert client.get("/").status_code == 200

    mock_connect.assert_called_once_with(cfg.mongo_uri, cfg.mongo_timeout_ms)
    fake_client.close.assert_called_once()


def test_lifespan_fails_fast_when_mongo_unreachable(tmp_path):
    application = main.create_app(make_settings(tmp_path))

    with patch.object(mongo_adapter, "connect", side_effect=ConnectionFailed("unreachable")):
        with pytest.raises(ConnectionFailed):
            with TestClient(application):
                pass


# =============================================================================
# MONGO ADAPTER
# =============================================================================


def test_connect_requires_uri():
    with pytest.raises(ConnectionFailed):
        mongo_adapter.connect("")


def test_connect_pings_server():
    with patch("adapters.mongo_adapter.MongoClient") as mock_client_cls:
        client = mongo_adapter.connect("mongodb://db:27017", timeout_ms=250)

    mock_client_cls.assert_called_once_with("mongodb://db:27017", serverSelectionTimeoutMS=250)
    client.admin.command.assert_called_once_with("ping")


def test_connect_closes_client_when_ping_fails():
    with patch("adapters.mongo_adapter.MongoClient") as mock_client_cls:
        mock_client_cls.return_value.admin.command.side_effect = ServerSelectionTimeoutError("timeout")
        with pytest.raises(ConnectionFailed):
            mongo_adapter.connect("mongodb://db:27017")

    mock_client_cls.return_value.close.assert_called_once()


# =============================================================================
# SETTINGS
# =============================================================================


def test_public_base_url_defaults_to_port(tmp_path):
    cfg = make_settings(tmp_path, base_url=None, port=4000)

    assert cfg.public_base_url() == "http://localhost:4000"


def test_public_base_url_strips_trailing_slash(tmp_path):
    cfg = make_settings(tmp_path, base_url="https://menu.example.com/")

    assert cfg.public_base_url() == "https://menu.example.com"


def test_blank_mongo_uri_counts_as_unset(tmp_path):
    assert make_settings(tmp_path, mongo_uri="  ").mongo_uri is None


def test_default_upload_limit_is_two_mib(tmp_path):
    assert make_settings(tmp_path).max_upload_bytes == 2 * 1024 * 1024
