"""Filesystem persistence for submission records."""

import logging
from pathlib import Path

from app.contact.records import SubmissionRecord

logger = logging.getLogger("Contact.storage")


class SubmissionStore:
    """Writes one JSON file per submission into ``directory``."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def save(self, record: SubmissionRecord) -> str:
        """
        Persist ``record`` and return its submission id (filename without extension).

        The file is opened in exclusive mode so an existing submission is
        never overwritten; a clash surfaces as ``FileExistsError``.
        """
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / record.filename
        with open(path, "x", encoding="utf-8") as f:
            f.write(record.model_dump_json(indent=2))
        logger.info(f"Submission saved to {path}")
        return path.stem
