"""
Tests for the Typer command-line interface.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from suttaplex_csv import __version__
from suttaplex_csv.cli import app as cli_app

runner = CliRunner()


def flat(output: str) -> str:
    """Joins Rich line wrapping back into single spaces."""
    return " ".join(output.split())


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Points the CLI at a config file inside the test's temporary directory."""
    config_file = tmp_path / "config" / "config.ini"
    monkeypatch.setattr(cli_app, "CONFIG_FILE", config_file)
    return config_file


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps({"books": {"mn": ["mn1", "mn2"]}, "authors": ["sujato", "bodhi"]}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def mock_client():
    """Replaces the SuttaCentral client used by the build command."""
    client = MagicMock()
    client.author_available = AsyncMock(side_effect=lambda uid, author: uid == "mn1")
    client.close = AsyncMock()
    with patch.object(cli_app, "SuttaCentralClient", return_value=client):
        yield client


def test_version():
    result = runner.invoke(cli_app.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_shows_collections_and_authors():
    result = runner.invoke(cli_app.app, ["list"])
    assert result.exit_code == 0
    assert "MN" in result.output
    assert "152" in result.output
    assert "Sujato" in result.output


def test_build_writes_report(tmp_path, catalog_file, mock_client):
    out_dir = tmp_path / "out"
    result = runner.invoke(
        cli_app.app,
        ["build", "-c", "mn", "-a", "sujato", "-o", str(out_dir), "--delay-ms", "0", "--catalog", str(catalog_file)],
    )

    assert result.exit_code == 0, result.output
    report = out_dir / "mn_sujato_translations.csv"
    assert report.read_text(encoding="utf-8") == (
        '"UID","Author_Available"\n"mn1","true"\n"mn2","false"'
    )
    assert "has been downloaded successfully!" in flat(result.output)
    assert mock_client.author_available.await_count == 2
    mock_client.close.assert_awaited_once()


def test_build_without_collection_fails_validation(tmp_path, mock_client):
    result = runner.invoke(cli_app.app, ["build", "-a", "sujato", "-o", str(tmp_path)])

    assert result.exit_code == 1
    assert "Please select both a book collection and an author." in flat(result.output)
    mock_client.author_available.assert_not_awaited()
    assert list(tmp_path.glob("*.csv")) == []


def test_build_interactive_prompts_for_missing_author(tmp_path, catalog_file, mock_client):
    result = runner.invoke(
        cli_app.app,
        ["build", "-c", "mn", "-i", "-o", str(tmp_path), "--delay-ms", "0", "--catalog", str(catalog_file)],
        input="Bodhi\n",
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "mn_bodhi_translations.csv").is_file()


def test_build_interactive_asks_by_display_label(tmp_path, catalog_file, mock_client):
    result = runner.invoke(
        cli_app.app,
        ["build", "-i", "-o", str(tmp_path), "--delay-ms", "0", "--catalog", str(catalog_file)],
        input="MN\nSujato\n",
    )

    assert result.exit_code == 0, result.output
    output = flat(result.output)
    assert output.index("Select a book collection and author to begin.") < output.index("Book collection")
    assert "[MN]" in output
    assert "[Sujato/Bodhi]" in output
    assert (tmp_path / "mn_sujato_translations.csv").is_file()


def test_prompt_falls_back_to_keys_when_labels_collide():
    with patch.object(cli_app.Prompt, "ask", return_value="MN") as ask:
        key = cli_app._prompt_selection("Book collection", ["mn", "MN"], "", cli_app.collection_label)

    assert key == "MN"
    assert ask.call_args.kwargs["choices"] == ["mn", "MN"]


def test_build_with_bad_catalog_reports_error(tmp_path):
    bad = tmp_path / "catalog.json"
    bad.write_text("not json", encoding="utf-8")

    result = runner.invoke(cli_app.app, ["build", "-c", "mn", "-a", "sujato", "--catalog", str(bad)])

    assert result.exit_code == 1
    assert "not valid JSON" in flat(result.output)


def test_build_rejects_invalid_delay(mock_client):
    result = runner.invoke(cli_app.app, ["build", "-c", "mn", "-a", "sujato", "--delay-ms=-1"])

    assert result.exit_code == 1
    mock_client.author_available.assert_not_awaited()


def test_init_writes_config(isolated_config):
    result = runner.invoke(cli_app.app, ["init"])

    assert result.exit_code == 0
    assert isolated_config.is_file()
    assert "request_delay_ms = 100" in isolated_config.read_text(encoding="utf-8")


def test_init_refuses_overwrite_without_confirmation(isolated_config):
    runner.invoke(cli_app.app, ["init"])
    result = runner.invoke(cli_app.app, ["init"], input="n\n")

    assert result.exit_code == 1


def test_validate_with_defaults():
    result = runner.invoke(cli_app.app, ["validate"])
    assert result.exit_code == 0
    assert "Validated Settings" in result.output


def test_show_config():
    result = runner.invoke(cli_app.app, ["--show-config"])
    assert result.exit_code == 0
    assert "request_delay_ms = 100" in result.output
