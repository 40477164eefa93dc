"""
tests/test_cli.py — Tests for the command-line scripts.

The scripts live outside any package, so they are loaded by file path.
"""

import importlib.util
import io
import json
import logging
import os
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"


def _load_script(name: str):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def cli():
    return _load_script("classify_leads")


@pytest.fixture(scope="module")
def server_script():
    return _load_script("run_server")


class TestClassifyLeadsCli:
    def test_array_input_to_stdout(self, cli, tmp_path, capsys):
        leads = [{"email": "jane@acme.com"}, {"email": "info@gmail.com"}]
        src = tmp_path / "leads.json"
        src.write_text(json.dumps(leads))

        assert cli.main([str(src)]) == 0

        out, err = capsys.readouterr()
        results = json.loads(out)
        assert [r["isJunk"] for r in results] == [False, True]
        assert results[1]["received"] == leads[1]
        assert "Classified 2 leads: 1 junk, 1 valid (50% junk)." in err

    def test_single_object_input(self, cli, tmp_path, capsys):
        src = tmp_path / "lead.json"
        src.write_text(json.dumps({"jobTitle": "Student"}))

        assert cli.main([str(src)]) == 0

        results = json.loads(capsys.readouterr().out)
        assert len(results) == 1
        assert results[0]["reason"] == "Missing or invalid email; Non-business title: student"

    def test_output_file(self, cli, tmp_path):
        src = tmp_path / "leads.json"
        dst = tmp_path / "out.json"
        src.write_text(json.dumps([{"email": "a@mailinator.com", "company": "Acme"}]))

        assert cli.main([str(src), "--output", str(dst)]) == 0

        results = json.loads(dst.read_text())
        assert results[0]["reason"] == "Disposable email domain"

    def test_stdin_input(self, cli, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('[{"lastName": "Test", "email": "x@acme.com"}]'))

        assert cli.main(["-"]) == 0

        results = json.loads(capsys.readouterr().out)
        assert results[0]["reason"] == "Test data"

    def test_invalid_json_exits_nonzero(self, cli, tmp_path):
        src = tmp_path / "bad.json"
        src.write_text("{oops")
        assert cli.main([str(src)]) == 1


class TestRunServer:
    @pytest.fixture
    def uvicorn_calls(self, server_script, monkeypatch):
        """Capture uvicorn.run kwargs and restore settings/env afterwards."""
        from app.config import settings

        monkeypatch.setattr(settings, "port", settings.port)
        monkeypatch.setattr(settings, "host", settings.host)
        monkeypatch.setenv("PORT", str(settings.port))
        monkeypatch.setenv("HOST", settings.host)

        calls = []
        monkeypatch.setattr(
            server_script.uvicorn, "run",
            lambda app_path, **kwargs: calls.append((app_path, kwargs)),
        )
        return calls

    def test_defaults_come_from_settings(self, server_script, uvicorn_calls):
        server_script.main([])

        app_path, kwargs = uvicorn_calls[0]
        assert app_path == "api.main:app"
        assert kwargs["port"] == 3000
        assert kwargs["reload"] is False

    def test_port_override_reaches_startup_log(self, server_script, uvicorn_calls, caplog):
        from api.main import app

        server_script.main(["--port", "8765", "--host", "127.0.0.1"])

        assert uvicorn_calls[0][1]["port"] == 8765
        assert uvicorn_calls[0][1]["host"] == "127.0.0.1"
        with caplog.at_level(logging.INFO, logger="api.main"):
            with TestClient(app):
                pass
        assert "Lead classifier running on port 8765" in caplog.text
        assert "port 3000" not in caplog.text

    def test_port_override_exported_for_reload_worker(self, server_script, uvicorn_calls):
        server_script.main(["--port", "9001"])

        assert os.environ["PORT"] == "9001"
