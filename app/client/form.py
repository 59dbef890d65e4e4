"""Contact form state and submit flow.

Models what the page does around the form: inline field errors shown on
blur, a page-level banner, the busy submit button and the service dropdown.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urlencode

from app.client.transports import Transport
from app.contact.validation import is_valid_email

logger = logging.getLogger("Contact.client")

REQUIRED_MESSAGE = "This field is required"
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
FIX_ERRORS_MESSAGE = "Please fix the errors above"
SUCCESS_MESSAGE = "Thank you for your message! We'll get back to you soon."
FAILURE_MESSAGE = "Sorry, there was an error sending your message. Please try again."
BUSY_LABEL = "Sending..."
SUCCESS_DISMISS_SECONDS = 5.0


class SubmissionFailed(Exception):
    """The endpoint answered with a non-success status."""


@dataclass
class FormField:
    name: str
    type: str = "text"
    required: bool = False
    value: str = ""
    # Error messages rendered under the field's group
    errors: list[str] = field(default_factory=list)

    @property
    def has_error(self) -> bool:
        return bool(self.errors)


def validate_field(form_field: FormField) -> Optional[str]:
    """Return the error message for ``form_field``, or None if it is valid."""
    value = form_field.value.strip()
    if not value and form_field.required:
        return REQUIRED_MESSAGE
    if form_field.type == "email" and value and not is_valid_email(value):
        return INVALID_EMAIL_MESSAGE
    return None


@dataclass
class FormMessage:
    text: str
    kind: str  # "success" or "error"


@dataclass
class ServiceDropdown:
    """Selected service of the custom dropdown widget."""
    options: list[str]
    placeholder: str = "Service"
    selected: Optional[str] = None

    @property
    def current(self) -> str:
        return self.selected or self.placeholder

    def select(self, option: str) -> None:
        option = option.strip()
        if option not in self.options:
            raise ValueError(f"Unknown service option: {option!r}")
        self.selected = option

    def reset(self) -> None:
        self.selected = None


@dataclass
class SubmitButton:
    label: str = "Send Message"
    disabled: bool = False
    idle_label: str = ""

    def __post_init__(self) -> None:
        self.idle_label = self.idle_label or self.label


class ContactForm:
    """A contact form bound to a transport."""

    def __init__(
        self,
        fields: list[FormField],
        transport: Transport,
        dropdown: Optional[ServiceDropdown] = None,
        submit_button: Optional[SubmitButton] = None,
        dismiss_after: float = SUCCESS_DISMISS_SECONDS,
    ) -> None:
        self.fields = {f.name: f for f in fields}
        self.transport = transport
        self.dropdown = dropdown
        self.submit_button = submit_button or SubmitButton()
        self.dismiss_after = dismiss_after
        self.message: Optional[FormMessage] = None
        self._dismiss_handle: Optional[asyncio.TimerHandle] = None

    @classmethod
    def default(cls, transport: Transport, services: Optional[list[str]] = None, **kwargs) -> "ContactForm":
        """The standard name/email/message form with its hidden honeypot."""
        fields = [
            FormField("name", required=True),
            FormField("email", type="email", required=True),
            FormField("message", type="textarea", required=True),
            FormField("bot-field", type="hidden"),
        ]
        dropdown = ServiceDropdown(services) if services else None
        return cls(fields, transport, dropdown=dropdown, **kwargs)

    @property
    def required_fields(self) -> list[FormField]:
        return [f for f in self.fields.values() if f.required]

    @property
    def submitting(self) -> bool:
        return self.submit_button.disabled

    # --- Field events ---

    def input(self, name: str, value: str) -> None:
        form_field = self.fields[name]
        form_field.value = value
        self.clear_error(form_field)

    def blur(self, name: str) -> bool:
        return self.validate(self.fields[name])

    def validate(self, form_field: FormField) -> bool:
        self.clear_error(form_field)
        error = validate_field(form_field)
        if error:
            form_field.errors.append(error)
        return error is None

    def clear_error(self, form_field: FormField) -> None:
        form_field.errors.clear()

    def validate_all(self) -> bool:
        # Validate every field so each one gets its error, not just the first
        results = [self.validate(f) for f in self.required_fields]
        return all(results)

    # --- Submission ---

    def encode(self) -> str:
        pairs = [(name, f.value) for name, f in self.fields.items()]
        if self.dropdown and self.dropdown.selected:
            pairs.append(("service", self.dropdown.selected))
        return urlencode(pairs)

    async def submit(self) -> bool:
        """Validate and send the form. Returns True when the submission was accepted."""
        if self.submitting:
            return False

        if not self.validate_all():
            self.show_message(FIX_ERRORS_MESSAGE, "error")
            return False

        self.set_loading(True)
        try:
            response = await self.transport.send(self.encode())
            if not response.ok:
                raise SubmissionFailed(f"Endpoint answered {response.status}")
            self.show_message(SUCCESS_MESSAGE, "success")
            self.reset()
            return True
        except Exception as e:
            # Any transport failure ends in the generic banner
            logger.error(f"Form submission error: {type(e).__name__}: {e}", exc_info=e)
            self.show_message(FAILURE_MESSAGE, "error")
            return False
        finally:
            self.set_loading(False)

    def set_loading(self, loading: bool) -> None:
        button = self.submit_button
        button.disabled = loading
        button.label = BUSY_LABEL if loading else button.idle_label

    def reset(self) -> None:
        for form_field in self.fields.values():
            form_field.value = ""
            self.clear_error(form_field)
        if self.dropdown:
            self.dropdown.reset()

    # --- Banner ---

    def show_message(self, text: str, kind: str) -> FormMessage:
        """Replace the current banner; success banners dismiss themselves."""
        if self._dismiss_handle is not None:
            self._dismiss_handle.cancel()
            self._dismiss_handle = None

        message = FormMessage(text=text, kind=kind)
        self.message = message
        if kind == "success":
            loop = asyncio.get_running_loop()
            self._dismiss_handle = loop.call_later(self.dismiss_after, self._dismiss, message)
        return message

    def _dismiss(self, message: FormMessage) -> None:
        if self.message is message:
            self.message = None
        self._dismiss_handle = None
