#!/usr/bin/env python
"""
Print an OAuth 1.0 Authorization header for a request.

Credentials are read from OAUTH1_CONSUMER_KEY, OAUTH1_CONSUMER_SECRET,
OAUTH1_TOKEN and OAUTH1_TOKEN_SECRET (environment or .env file).

Usage:
  oauth1-header GET https://example.com/resource foo=bar page=2
  oauth1-header --nonce abc --timestamp 1191242096 GET https://example.com
"""

import argparse
import sys
from typing import Dict, List, Optional

from oauth1_header.auth import RequestSigner, current_timestamp, generate_nonce
from oauth1_header.config import get_credentials
from oauth1_header.errors import OAuth1HeaderError
from oauth1_header.models.http_method import HttpMethod


def parse_param(text: str) -> tuple:
    """Split a key=value argument."""
    if '=' not in text:
        raise argparse.ArgumentTypeError(f"expected key=value, got '{text}'")
    key, value = text.split('=', 1)
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Generate an OAuth 1.0 (HMAC-SHA1) Authorization header.'
    )
    parser.add_argument('method', help='HTTP method (unknown methods fall back to GET)')
    parser.add_argument('url', help='Base URL without query string')
    parser.add_argument('params', nargs='*', type=parse_param, metavar='key=value',
                        help='Request parameters to include in the signature')
    parser.add_argument('--nonce', help='Use a fixed nonce instead of a random one')
    parser.add_argument('--timestamp', type=int, help='Use a fixed Unix timestamp')
    parser.add_argument('--verbose', action='store_true', help='Print status messages to stderr')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to print a signed header."""
    args = build_parser().parse_args(argv)

    credentials = get_credentials(verbose=args.verbose)

    nonce_provider = (lambda: args.nonce) if args.nonce is not None else generate_nonce
    clock = (lambda: args.timestamp) if args.timestamp is not None else current_timestamp
    signer = RequestSigner(credentials, nonce_provider=nonce_provider, clock=clock)

    method = HttpMethod.parse(args.method)
    if method.value != args.method.strip().upper():
        print(f"Warning: unknown method '{args.method}', using {method.value}", file=sys.stderr)

    params: Dict[str, str] = dict(args.params)

    try:
        header = signer.sign_request(method, args.url, params)
    except OAuth1HeaderError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(header)
    return 0


if __name__ == '__main__':
    sys.exit(main())
