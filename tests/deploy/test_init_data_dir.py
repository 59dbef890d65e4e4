"""Tests for deploy/init_data_dir.py and configuration loading."""

import json
import os
from pathlib import Path
import sys

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from deploy.init_data_dir import init_data_dir
from app.config import AppConfig, load_env_file_fallback
from app.contact import load_form_settings


def test_init_data_dir_writes_defaults(config):
    assert init_data_dir(config) is True

    assert config.submissions_dir.is_dir()
    settings = load_form_settings(config.settings_path)
    assert settings.auto_reply is True
    assert settings.notification_recipient is None


def test_init_data_dir_keeps_existing_settings(config, write_settings):
    write_settings(notification_email="owner@example.org")

    assert init_data_dir(config) is False
    data = json.loads(config.settings_path.read_text())
    assert data == {"form_settings": {"notification_email": "owner@example.org"}}


def test_config_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("CONTACT_DATA_DIR", str(tmp_path / "site"))
    monkeypatch.setenv("CONTACT_TRANSPORT", "Simulated")
    monkeypatch.setenv("APP_DEBUG", "true")
    monkeypatch.delenv("CONTACT_SETTINGS_PATH", raising=False)
    monkeypatch.delenv("CONTACT_SUBMISSIONS_DIR", raising=False)

    config = AppConfig.from_env()

    assert config.debug is True
    assert config.transport == "simulated"
    assert config.submissions_dir == tmp_path / "site" / "submissions"
    assert config.settings_path == tmp_path / "site" / "contact.json"


def test_env_file_does_not_override(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text('# comment\nCONTACT_TEST_A="from-file"\nCONTACT_TEST_B=from-file\n')
    monkeypatch.setenv("CONTACT_TEST_B", "from-env")
    monkeypatch.delenv("CONTACT_TEST_A", raising=False)

    assert load_env_file_fallback([env_file]) == 1
    assert os.environ["CONTACT_TEST_A"] == "from-file"
    assert os.environ["CONTACT_TEST_B"] == "from-env"
    monkeypatch.delenv("CONTACT_TEST_A")
