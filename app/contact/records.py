"""Submission record model."""

import re
from datetime import datetime, timezone
from typing import Mapping, Optional

from pydantic import BaseModel

DEFAULT_SERVICE = "General Inquiry"
UNKNOWN = "unknown"
MAX_SLUG_BYTES = 100


def isoformat_utc(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def slugify(name: str) -> str:
    """
    Lowercase and collapse whitespace runs (and path separators) to hyphens.

    The slug is cut to MAX_SLUG_BYTES of UTF-8 so the file name stays under
    the filesystem limit for any name length.
    """
    slug = re.sub(r"[\s/\\]+", "-", name.strip().lower())
    slug = slug.encode("utf-8")[:MAX_SLUG_BYTES].decode("utf-8", errors="ignore")
    return slug.rstrip("-") or "-"


def client_ip(headers: Mapping[str, str]) -> str:
    return headers.get("x-forwarded-for") or headers.get("x-real-ip") or UNKNOWN


class SubmissionRecord(BaseModel):
    """A single accepted contact form submission, as written to disk."""
    name: str
    email: str
    service: str = DEFAULT_SERVICE
    message: str
    date: str
    ip: str = UNKNOWN
    status: str = "New"
    user_agent: str = UNKNOWN

    @classmethod
    def from_form(
        cls,
        fields: Mapping[str, str],
        headers: Mapping[str, str],
        received_at: Optional[datetime] = None,
    ) -> "SubmissionRecord":
        received_at = received_at or datetime.now(timezone.utc)
        service = (fields.get("service") or "").strip()
        return cls(
            name=fields["name"].strip(),
            email=fields["email"].strip(),
            service=service or DEFAULT_SERVICE,
            message=fields["message"].strip(),
            date=isoformat_utc(received_at),
            ip=client_ip(headers),
            user_agent=headers.get("user-agent") or UNKNOWN,
        )

    @property
    def filename(self) -> str:
        timestamp = re.sub(r"[:.]", "-", self.date)
        return f"{timestamp}-{slugify(self.name)}.json"
