"""Contact form client: field validation, submit flow and transports."""

from app.client.form import ContactForm, FormField, FormMessage, ServiceDropdown, validate_field
from app.client.transports import (
    HttpTransport,
    SimulatedTransport,
    Transport,
    TransportResponse,
    build_transport,
)

__all__ = [
    "ContactForm",
    "FormField",
    "FormMessage",
    "ServiceDropdown",
    "validate_field",
    "HttpTransport",
    "SimulatedTransport",
    "Transport",
    "TransportResponse",
    "build_transport",
]
