"""
Tests for INI configuration loading, saving and migration.
"""

import pytest

from suttaplex_csv.exceptions import ConfigurationError
from suttaplex_csv.models.config import AppConfig
from suttaplex_csv.storage.config_manager import ConfigManager


def test_missing_file_gives_defaults(tmp_path):
    config = ConfigManager(tmp_path / "config.ini").load_config()

    assert config.api_base_url == "https://suttacentral.net/api"
    assert config.request_delay_ms == 100
    assert config.request_timeout == 30
    assert config.output_dir == "."
    assert config.catalog_path == ""
    assert config.config_path == str(tmp_path)


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "config.ini"
    manager = ConfigManager(path)
    manager.save_new_config({"request_delay_ms": 250, "output_dir": "/srv/reports"})

    config = ConfigManager(path).load_config()

    assert config.request_delay_ms == 250
    assert config.output_dir == "/srv/reports"
    assert config.request_timeout == 30


def test_cli_options_override_file(tmp_path):
    path = tmp_path / "config.ini"
    ConfigManager(path).save_new_config({"request_delay_ms": 250})

    config = ConfigManager(path).load_config({"request_delay_ms": 0})

    assert config.request_delay_ms == 0


def test_missing_keys_are_migrated(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[DEFAULT]\nrequest_delay_ms = 500\n", encoding="utf-8")

    config = ConfigManager(path).load_config()

    assert config.request_delay_ms == 500
    text = path.read_text(encoding="utf-8")
    for key in AppConfig.get_ini_keys():
        assert key in text


def test_percent_signs_in_file_are_read_literally(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(
        "[DEFAULT]\noutput_dir = %USERPROFILE%\\reports\ncatalog_path = /data/50%/catalog.json\n",
        encoding="utf-8",
    )

    config = ConfigManager(path).load_config()

    assert config.output_dir == "%USERPROFILE%\\reports"
    assert config.catalog_path == "/data/50%/catalog.json"


def test_percent_signs_survive_save_and_load(tmp_path):
    path = tmp_path / "config.ini"
    ConfigManager(path).save_new_config({"output_dir": "/srv/100%"})

    config = ConfigManager(path).load_config()

    assert config.output_dir == "/srv/100%"


@pytest.mark.parametrize(
    "content",
    [
        "[DEFAULT]\nrequest_delay_ms = -5\n",
        "[DEFAULT]\nrequest_delay_ms = soon\n",
        "[DEFAULT]\nrequest_timeout = 0\n",
        "[DEFAULT]\napi_base_url = ftp://suttacentral.net/api\n",
        "not an ini file",
    ],
)
def test_invalid_values_raise(tmp_path, content):
    path = tmp_path / "config.ini"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        ConfigManager(path).load_config()


def test_base_url_trailing_slash_removed():
    assert AppConfig(api_base_url="https://example.org/api/").api_base_url == "https://example.org/api"
