"""Reject HTTP responses whose Content-Type the request's Accept header did not ask for."""
from .middleware.accept_middleware import AcceptAdapter, AcceptMiddleware, AcceptSession, check_response_hook
from .negotiator.accept import AcceptNegotiator, ContentTypeMismatch, Settings
from .negotiator.parse_header import MediaRange, parse_accept_header, parse_header

__all__ = (
    "AcceptAdapter",
    "AcceptMiddleware",
    "AcceptNegotiator",
    "AcceptSession",
    "ContentTypeMismatch",
    "MediaRange",
    "Settings",
    "check_response_hook",
    "parse_accept_header",
    "parse_header",
)
