"""Tests for submission records, validation and storage."""

import json
from datetime import datetime, timezone

import pytest

from app.contact import (
    ContactValidationError,
    SubmissionRecord,
    SubmissionStore,
    is_valid_email,
    slugify,
    validate_submission,
)

FIXED = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_slugify():
    assert slugify("Jane Doe") == "jane-doe"
    assert slugify("  Jane \t  Q.\nDoe ") == "jane-q.-doe"
    assert slugify("../etc/passwd") == "..-etc-passwd"


def test_email_pattern():
    assert is_valid_email("jane@example.com")
    assert is_valid_email("a.b+c@sub.example.co")
    assert not is_valid_email("jane@example")
    assert not is_valid_email("jane@@example.com")
    assert not is_valid_email("jane doe@example.com")
    assert not is_valid_email("jane@example.com\n")


def test_validate_submission_checks_presence_before_format():
    with pytest.raises(ContactValidationError) as exc_info:
        validate_submission({"email": "bad", "message": "Hi"})
    assert exc_info.value.error == "Missing required fields"
    assert exc_info.value.status_code == 400

    with pytest.raises(ContactValidationError, match="Invalid email format"):
        validate_submission({"name": "Jane", "email": "bad", "message": "Hi"})


def test_record_from_form_trims_and_defaults():
    record = SubmissionRecord.from_form(
        {"name": " Jane Doe ", "email": " jane@example.com", "message": "Hello\n", "service": ""},
        {"x-real-ip": "198.51.100.2"},
        received_at=FIXED,
    )
    assert record.name == "Jane Doe"
    assert record.email == "jane@example.com"
    assert record.message == "Hello"
    assert record.service == "General Inquiry"
    assert record.date == "2024-01-01T00:00:00.000Z"
    assert record.ip == "198.51.100.2"
    assert record.user_agent == "unknown"
    assert record.status == "New"
    assert record.filename == "2024-01-01T00-00-00-000Z-jane-doe.json"


def test_store_creates_directory_and_writes_json(tmp_path):
    store = SubmissionStore(tmp_path / "nested" / "submissions")
    record = SubmissionRecord.from_form(
        {"name": "Jane Doe", "email": "jane@example.com", "message": "Hello", "service": "Consulting"},
        {},
        received_at=FIXED,
    )

    submission_id = store.save(record)

    path = tmp_path / "nested" / "submissions" / f"{submission_id}.json"
    assert submission_id == "2024-01-01T00-00-00-000Z-jane-doe"
    assert json.loads(path.read_text()) == record.model_dump()
    assert path.read_text().startswith('{\n  "name": "Jane Doe"')


def test_store_never_overwrites(tmp_path):
    store = SubmissionStore(tmp_path)
    record = SubmissionRecord.from_form(
        {"name": "Jane", "email": "jane@example.com", "message": "first"}, {}, received_at=FIXED
    )
    store.save(record)

    with pytest.raises(FileExistsError):
        store.save(record.model_copy(update={"message": "second"}))
    assert json.loads((tmp_path / record.filename).read_text())["message"] == "first"


def test_slugify_caps_length():
    assert len(slugify("a" * 300).encode("utf-8")) == 100
    # Multi-byte names are cut on a character boundary
    slug = slugify("é" * 300)
    assert slug == "é" * 50
    assert slugify("word " * 60).endswith("word")


def test_store_accepts_very_long_name(tmp_path):
    record = SubmissionRecord.from_form(
        {"name": "Jane " * 100, "email": "jane@example.com", "message": "Hello"}, {}, received_at=FIXED
    )
    submission_id = SubmissionStore(tmp_path).save(record)

    path = tmp_path / f"{submission_id}.json"
    assert json.loads(path.read_text())["name"] == ("Jane " * 100).strip()
