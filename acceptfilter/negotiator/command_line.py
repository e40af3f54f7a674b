import argparse
import logging
import os

import requests
from colorama import init

from ..__version__ import __version__
from ..middleware.accept_middleware import AcceptSession
from .accept import AcceptNegotiator, ContentTypeMismatch
from .parse_header import parse_accept_header
from .result import CaptureResult

parser = argparse.ArgumentParser(description='Rank Accept headers and check Content-Types against them')

parser.add_argument('-a', '--accept', metavar='ACCEPT', action='append', default=None,
                    help='an Accept header value; may be specified multiple times. '
                         'May also be provided in the ACCEPTFILTER_ACCEPT environment variable')

parser.add_argument('-t', '--content-type', default=None,
                    help='a response Content-Type to check against the Accept headers')

parser.add_argument('-u', '--url', default=None,
                    help='GET this URL with the Accept headers and check the Content-Type of the response')

parser.add_argument('-v', '--verbose', default=False, action='store_true',
                    help='output more information about the check')

parser.add_argument('-q', '--quiet', default=False, action='store_true',
                    help='output less information about the check')

parser.add_argument('-V', '--version', default=False, action='version', version=f'%(prog)s {__version__}')


def main(argv=None):
    init(autoreset=True)
    args = parser.parse_args(argv)
    accept = get_accept_headers(args)
    if args.url:
        success = check_url(args.url, accept, get_log_level(args))
    elif args.content_type is not None:
        success = check_content_type(args.content_type, accept, get_log_level(args))
    else:
        if not accept:
            print('At least one Accept header is required')
            return 1
        for header in accept:
            print_ranking(header)
        return 0
    return int(not success)


def get_log_level(args):
    if args.quiet:
        result_log_level = logging.WARNING
    elif args.verbose:
        result_log_level = logging.DEBUG
    else:
        result_log_level = logging.INFO
    return result_log_level


def get_accept_headers(args):
    if args.accept:
        return args.accept
    env_accept = os.environ.get('ACCEPTFILTER_ACCEPT')
    if env_accept:
        return [env_accept]
    return []


def print_ranking(header):
    print(f'Accept: {header}')
    for media_range in parse_accept_header(header):
        params = ''.join(f';{k}={v}' for k, v in media_range.params)
        print(f'  {media_range.q:<6g}{media_range.media_type}{params}')


def check_content_type(content_type, accept, level):
    result = CaptureResult(level=level)
    result.start(f'Content-Type: {content_type}')
    try:
        acceptable, media_range = AcceptNegotiator().is_acceptable(accept, content_type)
        if not acceptable:
            result.fail(f'Not allowed content type: {content_type}')
        elif media_range is None:
            result.info('No Accept header given, any content type is allowed')
        else:
            result.info(f'Matched {media_range}')
    finally:
        result.end()
    return result.success


def check_url(url, accept, level):
    result = CaptureResult(level=level)
    result.start(f'GET {url}')
    try:
        headers = {'Accept': ', '.join(accept)} if accept else {}
        with AcceptSession() as session:
            response = session.get(url, headers=headers)
        result.info(f'Received {response.status_code} with Content-Type {response.headers.get("Content-Type")!r}')
    except ContentTypeMismatch as e:
        result.fail(str(e))
    except requests.exceptions.RequestException as e:
        result.fail(f'Request failed: {e}')
    finally:
        result.end()
    return result.success


if __name__ == '__main__':
    import sys
    sys.exit(main())
