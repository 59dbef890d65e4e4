"""Transports used by the form client to deliver a submission."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

import httpx

from app.config import AppConfig

logger = logging.getLogger("Contact.client")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass
class TransportResponse:
    ok: bool
    status: int
    payload: dict = field(default_factory=dict)


class Transport(Protocol):
    async def send(self, body: str) -> TransportResponse: ...


class SimulatedTransport:
    """Pretends the submission succeeded after a short delay (local development)."""

    def __init__(self, delay: float = 1.0) -> None:
        self.delay = delay

    async def send(self, body: str) -> TransportResponse:
        logger.debug(f"Simulating submission ({len(body)} bytes)")
        await asyncio.sleep(self.delay)
        return TransportResponse(
            ok=True,
            status=200,
            payload={"message": "Form submitted successfully (local mode)"},
        )


class HttpTransport:
    """POSTs the URL-encoded form to the intake endpoint."""

    def __init__(self, endpoint: str, client: Optional[httpx.AsyncClient] = None) -> None:
        self.endpoint = endpoint
        self.client = client

    async def send(self, body: str) -> TransportResponse:
        headers = {"Content-Type": FORM_CONTENT_TYPE}
        if self.client is not None:
            response = await self.client.post(self.endpoint, content=body, headers=headers)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.post(self.endpoint, content=body, headers=headers)

        try:
            payload = response.json()
        except ValueError:
            payload = {}
        return TransportResponse(ok=response.is_success, status=response.status_code, payload=payload)


def build_transport(config: AppConfig) -> Transport:
    """Pick the transport named by ``config.transport``."""
    if config.transport == "simulated":
        return SimulatedTransport()
    if config.transport == "http":
        return HttpTransport(config.endpoint)
    raise ValueError(f"Unknown contact transport: {config.transport!r}")
