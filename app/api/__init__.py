"""Contact API routes."""

from app.api.contact import ContactController

__all__ = ["ContactController"]
