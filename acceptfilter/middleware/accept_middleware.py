import logging

import requests
from requests.adapters import HTTPAdapter

from ..negotiator.accept import AcceptNegotiator, ContentTypeMismatch

log = logging.getLogger(__name__)


def get_accept_headers(request):
    # requests folds repeated headers into one comma separated value
    accept = request.headers.get('Accept')
    if accept is None:
        return []
    return [accept]


def check_response(negotiator, request, accept, response):
    content_type = response.headers.get('Content-Type')
    log.debug(f'Checking Content-Type {content_type!r} of {request.method} {request.url}')
    try:
        negotiator.check_content_type(accept, content_type, request=request, response=response)
    except ContentTypeMismatch:
        # the body is never read, so hand the connection back to the pool now
        if response.raw is not None:
            response.close()
        raise
    return response


class AcceptMiddleware:
    """Wrap an HTTP handler so responses must have a Content-Type the request's
    Accept header allows.

    The handler is called as ``next_handler(request, **kwargs)`` with a
    ``requests.PreparedRequest`` and must return a ``requests.Response``.
    Requests without an Accept header are passed through unchecked.
    """
    def __init__(self, next_handler, settings=None):
        self.next_handler = next_handler
        self.negotiator = AcceptNegotiator(settings)

    def __call__(self, request, **kwargs):
        accept = get_accept_headers(request)
        if not accept:
            return self.next_handler(request, **kwargs)
        response = self.next_handler(request, **kwargs)
        return check_response(self.negotiator, request, accept, response)


class AcceptAdapter(HTTPAdapter):
    __attrs__ = HTTPAdapter.__attrs__ + ['settings']

    def __init__(self, *args, settings=None, **kwargs):
        self.settings = settings
        super().__init__(*args, **kwargs)

    def send(self, request, **kwargs):
        return AcceptMiddleware(super().send, self.settings)(request, **kwargs)


class AcceptSession(requests.Session):
    """A requests Session that rejects responses whose Content-Type was not
    asked for in the Accept header.

    The default ``Accept: */*`` header requests adds is dropped, so only Accept
    headers the caller sets are enforced.
    """
    def __init__(self, settings=None):
        super().__init__()
        self.headers.pop('Accept', None)
        adapter = AcceptAdapter(settings=settings)
        self.mount('https://', adapter)
        self.mount('http://', adapter)


def check_response_hook(response, *args, **kwargs):
    """Response hook, for ``requests.get(url, hooks={'response': check_response_hook})``."""
    request = response.request
    accept = get_accept_headers(request)
    if not accept:
        return response
    return check_response(AcceptNegotiator(), request, accept, response)
