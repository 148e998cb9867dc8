"""Ping utility used by the API health-check."""

from wealthcalc import __version__
from wealthcalc.schemas.ping import PingResponse


def get_ping_message() -> str:
    """Return a static ping message."""
    return "pong"


def build_ping_response() -> PingResponse:
    return PingResponse(message=get_ping_message(), version=__version__)
