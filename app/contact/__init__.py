"""Contact form intake: validation, records, storage and notifications."""

from app.contact.errors import ContactError, MethodNotAllowed, ContactValidationError, InternalError
from app.contact.notifications import DispatchResult, LoggingNotifier, Notifier, dispatch_all
from app.contact.records import SubmissionRecord, slugify
from app.contact.settings import FormSettings, load_form_settings
from app.contact.storage import SubmissionStore
from app.contact.validation import is_valid_email, validate_submission

__all__ = [
    "ContactError",
    "MethodNotAllowed",
    "ContactValidationError",
    "InternalError",
    "DispatchResult",
    "LoggingNotifier",
    "Notifier",
    "dispatch_all",
    "SubmissionRecord",
    "slugify",
    "FormSettings",
    "load_form_settings",
    "SubmissionStore",
    "is_valid_email",
    "validate_submission",
]
