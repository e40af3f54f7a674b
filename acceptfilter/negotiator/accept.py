import logging

from requests.exceptions import RequestException

from .parse_header import parse_accept_header, parse_header

log = logging.getLogger(__name__)


class ContentTypeMismatch(RequestException):
    def __init__(self, content_type, *args, **kwargs):
        self.content_type = content_type
        super().__init__(f'Not allowed content type: {content_type or ""}', *args, **kwargs)


class Settings:
    """Negotiation settings.

    There are no options yet; the object exists so callers have one place to
    pass them once there are.
    """
    def __init__(self, **options):
        if options:
            raise TypeError(f'Unknown negotiation option(s): {", ".join(sorted(options))}')

    def __repr__(self):
        return '<Settings>'


class AcceptNegotiator:
    def __init__(self, settings=None):
        self.settings = settings or Settings()

    def acceptable_types(self, accept_headers):
        """Fold every range of every Accept header into a dict keyed by
        lowercased media type. Later ranges replace earlier ones."""
        acceptable = {}
        for header in accept_headers:
            for media_range in parse_accept_header(header):
                acceptable[media_range.media_type.lower()] = media_range
        return acceptable

    def is_acceptable(self, accept_headers, content_type):
        """Determine whether *content_type* is one the *accept_headers* allow.

        Returns a tuple of (acceptable, matching MediaRange). No Accept headers
        at all means anything is acceptable, and the range is None.
        """
        if not accept_headers:
            return True, None
        acceptable = self.acceptable_types(accept_headers)
        if content_type is None:
            log.debug('Response has no Content-Type')
            return False, None
        media_type = parse_header(content_type)[0][0]
        media_range = acceptable.get(media_type.lower())
        if media_range is None:
            log.debug(f'{media_type!r} is not in accepted types {sorted(acceptable)}')
            return False, None
        return True, media_range

    def check_content_type(self, accept_headers, content_type, request=None, response=None):
        acceptable, media_range = self.is_acceptable(accept_headers, content_type)
        if not acceptable:
            log.warning(f'Rejecting response with Content-Type {content_type!r}')
            raise ContentTypeMismatch(content_type, request=request, response=response)
        return media_range
