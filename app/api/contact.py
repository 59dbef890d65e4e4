"""Contact form intake endpoint."""

import logging
from typing import Mapping
from urllib.parse import parse_qsl

from litestar import Controller, Request, route
from litestar.enums import HttpMethod
from litestar.response import Response
from litestar.status_codes import HTTP_200_OK

from app.config import AppConfig
from app.contact import (
    InternalError,
    MethodNotAllowed,
    Notifier,
    SubmissionRecord,
    SubmissionStore,
    dispatch_all,
    validate_submission,
)

logger = logging.getLogger("Contact.intake")

HONEYPOT_FIELD = "bot-field"
SUCCESS_MESSAGE = "Thank you for your message! We'll get back to you soon."
SPAM_MESSAGE = "Thank you for your message!"


def parse_form_body(body: bytes) -> dict[str, str]:
    """Decode a URL-encoded body; the first occurrence of a field wins."""
    fields: dict[str, str] = {}
    for key, value in parse_qsl(body.decode("utf-8", errors="replace"), keep_blank_values=True):
        fields.setdefault(key, value)
    return fields


def is_spam(fields: Mapping[str, str]) -> bool:
    return bool(fields.get(HONEYPOT_FIELD))


# --- Controller ---

class ContactController(Controller):
    """Accepts contact form submissions."""

    path = "/api/contact"
    tags = ["contact"]

    # Every method is routed here so non-POST requests get the contact error body
    @route(
        "/",
        http_method=[
            HttpMethod.GET,
            HttpMethod.POST,
            HttpMethod.PUT,
            HttpMethod.PATCH,
            HttpMethod.DELETE,
            HttpMethod.OPTIONS,
        ],
    )
    async def submit_contact(self, request: Request) -> Response:
        """Validate, store and announce a contact form submission."""
        if request.method != HttpMethod.POST:
            raise MethodNotAllowed()

        config: AppConfig = request.app.state.config
        notifier: Notifier = request.app.state.notifier

        fields = parse_form_body(await request.body())
        validate_submission(fields)

        if is_spam(fields):
            # Silent rejection: looks like a normal success to the sender
            logger.info(f"Honeypot triggered, discarding submission from {fields.get('email')}")
            return Response(
                content={"success": True, "message": SPAM_MESSAGE},
                status_code=HTTP_200_OK,
            )

        record = SubmissionRecord.from_form(fields, request.headers)
        try:
            submission_id = SubmissionStore(config.submissions_dir).save(record)
        except OSError as e:
            raise InternalError() from e

        logger.info(f"Contact submission {submission_id} from {record.email} ({record.name})")

        for result in await dispatch_all(record, config.settings_path, notifier):
            if result.failed:
                logger.warning(f"{result.name} failed for {submission_id}")
            elif result.skipped_reason:
                logger.debug(f"{result.name} skipped for {submission_id}: {result.skipped_reason}")

        return Response(
            content={
                "success": True,
                "message": SUCCESS_MESSAGE,
                "submissionId": submission_id,
            },
            status_code=HTTP_200_OK,
            headers={"Access-Control-Allow-Origin": "*"},
        )
