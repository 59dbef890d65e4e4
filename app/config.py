"""Application configuration loaded from environment variables."""

import os
from os import getenv
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

ENV_FILE_PATHS = [
    Path(__file__).parent.parent / ".env",
    Path.cwd() / ".env",
]

DEFAULT_ENDPOINT = "http://localhost:8000/api/contact"


def load_env_file_fallback(paths: Optional[list[Path]] = None) -> int:
    """Load KEY=VALUE lines from the first existing .env file.

    Values already present in the environment are left alone.
    Returns the number of variables that were set.
    """
    for env_file in paths or ENV_FILE_PATHS:
        if not (env_file.exists() and env_file.is_file()):
            continue
        loaded_count = 0
        with open(env_file, "r") as f:
            for line in f:
                line = line.strip()
                # Skip empty lines and comments
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip()
                if value[:1] == value[-1:] and value[:1] in ('"', "'"):
                    value = value[1:-1]
                if key and value and key not in os.environ:
                    os.environ[key] = value
                    loaded_count += 1
        return loaded_count
    return 0


class AppConfig(BaseModel):
    """Runtime settings for the intake handler and the form client."""
    debug: bool = False
    submissions_dir: Path = Path("_data") / "submissions"
    settings_path: Path = Path("_data") / "contact.json"
    transport: str = "http"
    endpoint: str = DEFAULT_ENDPOINT

    @classmethod
    def from_env(cls) -> "AppConfig":
        data_dir = Path(getenv("CONTACT_DATA_DIR", "_data"))
        return cls(
            debug=getenv("APP_DEBUG", "false").lower() == "true",
            submissions_dir=Path(getenv("CONTACT_SUBMISSIONS_DIR", str(data_dir / "submissions"))),
            settings_path=Path(getenv("CONTACT_SETTINGS_PATH", str(data_dir / "contact.json"))),
            transport=getenv("CONTACT_TRANSPORT", "http").lower(),
            endpoint=getenv("CONTACT_ENDPOINT", DEFAULT_ENDPOINT),
        )
