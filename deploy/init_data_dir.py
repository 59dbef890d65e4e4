#!/usr/bin/env python3
"""
Prepare the contact form data directory.
Creates the submissions directory and a default contact.json if none exists.
"""
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import AppConfig, load_env_file_fallback
from app.contact.settings import PLACEHOLDER_NOTIFICATION_EMAIL

DEFAULT_SETTINGS = {
    "form_settings": {
        "notification_email": PLACEHOLDER_NOTIFICATION_EMAIL,
        "auto_reply": True,
    }
}


def init_data_dir(config: AppConfig) -> bool:
    """Create the data layout. Returns True if a settings file was written."""
    config.submissions_dir.mkdir(parents=True, exist_ok=True)
    print(f"Submissions directory ready: {config.submissions_dir}")

    if config.settings_path.exists():
        print(f"Settings file already exists, leaving it alone: {config.settings_path}")
        return False

    config.settings_path.parent.mkdir(parents=True, exist_ok=True)
    config.settings_path.write_text(json.dumps(DEFAULT_SETTINGS, indent=2), encoding="utf-8")
    print(f"Wrote default settings to {config.settings_path}")
    print("Set form_settings.notification_email to a real address to receive notifications.")
    return True


if __name__ == "__main__":
    load_env_file_fallback()
    init_data_dir(AppConfig.from_env())
