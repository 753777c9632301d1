import json
import runpy
import sys
from pathlib import Path

import pytest

import scripts.mangopay_cli as cli
from mangopay_provider.provider import MangopayProvider


@pytest.fixture()
def use_backend(monkeypatch, backend):
    """Route the CLI's provider through the in-memory API."""
    monkeypatch.setattr(cli, "MangopayProvider", lambda version: MangopayProvider(version=version, http=backend))
    return backend


SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "mangopay_cli.py"
CREDENTIALS = ["--client-id", "test-client", "--client-secret", "test-secret"]


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 0
    assert "usage" in capsys.readouterr().out


def test_missing_credentials_abort_before_network(monkeypatch, capsys, use_backend):
    assert cli.main(["hooks"]) == 1
    err = capsys.readouterr().err
    assert "Missing Mangopay API Client ID" in err
    assert use_backend.requests == []


def test_credentials_from_environment(monkeypatch, capsys, use_backend):
    monkeypatch.setenv("MANGOPAY_CLIENT_ID", "test-client")
    monkeypatch.setenv("MANGOPAY_CLIENT_SECRET", "test-secret")

    assert cli.main(["hooks"]) == 0
    assert json.loads(capsys.readouterr().out) == {"hooks": []}


def test_client_command_prints_profile(capsys, use_backend):
    assert cli.main(CREDENTIALS + ["client"]) == 0
    state = json.loads(capsys.readouterr().out)
    assert state["name"] == "Test Platform"


def test_hook_create_then_read(capsys, use_backend):
    assert cli.main(CREDENTIALS + ["hook-create", "--url", "https://example.com/h", "--event-type", "KYC_SUCCEEDED", "--tag", "t"]) == 0
    created = json.loads(capsys.readouterr().out)

    assert cli.main(CREDENTIALS + ["hook-read", "--id", created["id"]]) == 0
    read = json.loads(capsys.readouterr().out)

    assert read["url"] == "https://example.com/h"
    assert read["event_type"] == "KYC_SUCCEEDED"
    assert read["tag"] == "t"


def test_hook_update_disables_hook(capsys, use_backend):
    hook = use_backend.add_hook("https://example.com/h", "PAYIN_NORMAL_FAILED")

    assert cli.main(CREDENTIALS + ["hook-update", "--id", hook["Id"], "--url", "https://example.com/v2", "--status", "DISABLED"]) == 0

    state = json.loads(capsys.readouterr().out)
    assert state["status"] == "DISABLED"
    assert use_backend.hooks[hook["Id"]]["Url"] == "https://example.com/v2"


def test_hook_update_unknown_id_fails(capsys, use_backend):
    assert cli.main(CREDENTIALS + ["hook-update", "--id", "nope", "--url", "https://example.com/v2"]) == 1
    assert "Error Reading Mangopay Hook" in capsys.readouterr().err


def test_invalid_status_rejected_by_parser(use_backend):
    with pytest.raises(SystemExit):
        cli.main(CREDENTIALS + ["hook-update", "--id", "1", "--url", "https://x", "--status", "PAUSED"])


def test_runs_as_a_standalone_script(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", [str(SCRIPT)])
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_path(str(SCRIPT), run_name="__main__")
    assert excinfo.value.code == 0
    assert "usage" in capsys.readouterr().out


def test_no_console_entry_point_into_scripts_directory():
    pyproject = (SCRIPT.parents[1] / "pyproject.toml").read_text()
    assert "[project.scripts]" not in pyproject
    assert "scripts.mangopay_cli" not in pyproject
