import logging
import re

log = logging.getLogger(__name__)

# leading decimal number, as far as it goes; "0.5xyz" is 0.5 and "xyz" is 0.0
_NUMBER_PREFIX = re.compile(r'\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


class MediaRange:
    def __init__(self, media_type, params=(), q=1.0):
        self.media_type = media_type
        self.params = list(params)
        self.q = q

    def with_quality(self, q):
        return MediaRange(self.media_type, self.params, q)

    def get_param(self, name):
        for k, v in self.params:
            if k == name:
                return v
        return None

    def __repr__(self):
        params = ''.join(f';{k}={v}' for k, v in self.params)
        return f'<MediaRange {self.media_type}{params} q={self.q}>'

    def __eq__(self, other):
        if not isinstance(other, MediaRange):
            return NotImplemented
        return (self.media_type, self.params, self.q) == (other.media_type, other.params, other.q)


def parse_quality(value):
    """Parse a q-value permissively: anything without a numeric prefix is 0.0."""
    match = _NUMBER_PREFIX.match(value)
    if match is None:
        return 0.0
    return float(match.group())


def _split_param(part):
    # parameters without "=" get an empty value
    key, _, value = part.lstrip().partition('=')
    return key, value


def parse_header(line):
    """Parse a header such as Content-Type into (media_type, params) pairs.

    No quality handling and no reordering; the media type is kept as given.
    """
    result = []
    for media_range in line.split(','):
        media_type, *parts = media_range.split(';')
        result.append((media_type, [_split_param(part) for part in parts]))
    return result


def parse_accept_header(accept):
    """Parse the Accept header *accept* into a list of MediaRange ordered by
    descending q value.

    Ranges of equal quality keep the order they were given in, which the
    webkit workaround below relies on.
    """
    bestq = 0.0
    ranges = []
    for media_range in accept.split(','):
        media_type, *parts = media_range.split(';')
        params = []
        q = 1.0
        for part in parts:
            key, value = _split_param(part)
            if key == 'q':
                q = parse_quality(value)
            else:
                params.append((key, value))
        if q > bestq:
            bestq = q
        ranges.append(MediaRange(media_type.strip(), params, q))

    ordered = sorted(enumerate(ranges), key=lambda item: (-item[1].q, item[0]))
    result = webkit_workaround(bestq, [r for i, r in ordered])
    log.debug(f'Parsed Accept {accept!r} as {result}')
    return result


def webkit_workaround(bestq, ranges):
    """Work around webkit browsers putting application/xml first in their
    Accept headers.

    If application/xml is the first entry of best quality and an xhtml or html
    entry also has best quality, application/xml is moved to be the last entry
    of best quality.

    If only an xhtml entry has best quality but the header contains an html
    entry with lower quality, that html entry is promoted to best quality and
    placed directly in front of application/xml.
    """
    if not ranges or ranges[0].media_type != 'application/xml':
        return ranges

    best = []
    hashtml = hasxhtml = False
    idxhtml = None
    for i, media_range in enumerate(ranges):
        media_type = media_range.media_type.lower()
        if media_range.q == bestq:
            best.append(media_range)
            if media_type == 'application/xhtml+xml':
                hasxhtml = True
            if media_type == 'text/html':
                hashtml = True
        if media_type == 'text/html':
            idxhtml = i
    length = len(best)

    if not (hashtml or hasxhtml) or length <= 1:
        return ranges

    remaining = list(ranges)
    result = best[1:]
    if not hashtml and idxhtml:
        result.append(remaining.pop(idxhtml).with_quality(bestq))
    result.append(best[0])
    result.extend(remaining[length:])
    log.debug(f'Moved application/xml behind {length - 1} range(s) of quality {bestq}')
    return result
