"""Form settings read from the site's contact.json."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

logger = logging.getLogger("Contact.settings")

PLACEHOLDER_NOTIFICATION_EMAIL = "admin@yourcompany.com"


class FormSettings(BaseModel):
    notification_email: Optional[str] = None
    auto_reply: bool = False

    @property
    def notification_recipient(self) -> Optional[str]:
        """Configured notification address, or None when unset or still the placeholder."""
        email = (self.notification_email or "").strip()
        if not email or email == PLACEHOLDER_NOTIFICATION_EMAIL:
            return None
        return email


class ContactSettingsFile(BaseModel):
    form_settings: FormSettings = FormSettings()


def load_form_settings(path: Path) -> Optional[FormSettings]:
    """
    Read ``form_settings`` from ``path``.

    Returns None if the file is missing or cannot be parsed; callers treat
    that as notifications disabled and auto-reply skipped.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
        return ContactSettingsFile.model_validate_json(raw).form_settings
    except (OSError, ValueError) as e:
        logger.debug(f"Could not load form settings from {path}: {e}")
        return None
