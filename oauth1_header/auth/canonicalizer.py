"""
Canonicalization of OAuth 1.0 requests into a signature base string.

The base string is built from the request method, the base URL and the
normalized parameter string:

    METHOD&percent_encode(base_url)&percent_encode(params_string)

The parameter string holds the six oauth_* protocol parameters merged with
the application parameters, each name and value percent-encoded, formatted as
name=value, sorted by the encoded pair and joined with "&".
"""
from typing import Dict, Mapping, Optional, Union

from ..errors import ReservedParameterError
from ..models.http_method import HttpMethod
from .percent_encoding import percent_encode

SIGNATURE_METHOD = 'HMAC-SHA1'
OAUTH_VERSION = '1.0'

RESERVED_PARAMS = frozenset({
    'oauth_consumer_key',
    'oauth_nonce',
    'oauth_signature_method',
    'oauth_timestamp',
    'oauth_token',
    'oauth_version',
})


def protocol_params(
    consumer_key: str,
    nonce: str,
    timestamp: int,
    token: str
) -> Dict[str, str]:
    """
    Build the six OAuth protocol parameters for one request.

    Args:
        consumer_key: Consumer key
        nonce: Per-request nonce
        timestamp: Seconds since the Unix epoch
        token: Access token

    Returns:
        Dictionary of protocol parameter names to values
    """
    return {
        'oauth_consumer_key': consumer_key,
        'oauth_nonce': nonce,
        'oauth_signature_method': SIGNATURE_METHOD,
        'oauth_timestamp': str(timestamp),
        'oauth_token': token,
        'oauth_version': OAUTH_VERSION,
    }


def merge_params(
    oauth_params: Mapping[str, str],
    params: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """
    Merge protocol parameters with application parameters.

    Args:
        oauth_params: Protocol parameters from protocol_params()
        params: Application parameters (may be None or empty)

    Returns:
        New dictionary holding both sets

    Raises:
        ReservedParameterError: If an application parameter uses a protocol name
    """
    merged = dict(oauth_params)
    if not params:
        return merged

    collisions = RESERVED_PARAMS.intersection(params)
    if collisions:
        raise ReservedParameterError(collisions)

    merged.update(params)
    return merged


def params_string(params: Mapping[str, str]) -> str:
    """
    Normalize parameters into the OAuth parameter string.

    Sorting happens on the encoded "name=value" strings, so names that share a
    prefix order by their encoded form.

    Args:
        params: All request parameters, protocol parameters included

    Returns:
        Normalized parameter string
    """
    pairs = [
        f"{percent_encode(name)}={percent_encode(value)}"
        for name, value in params.items()
    ]
    pairs.sort()
    return '&'.join(pairs)


def signature_base_string(
    method: Union[HttpMethod, str],
    base_url: str,
    normalized_params: str
) -> str:
    """
    Build the signature base string.

    Args:
        method: HTTP method (HttpMethod or verb string, stripped and upper-cased here)
        base_url: Absolute URL without query string
        normalized_params: Output of params_string()

    Returns:
        Signature base string
    """
    if isinstance(method, HttpMethod):
        method_name = method.value
    else:
        method_name = method.strip().upper()

    return '&'.join([
        method_name,
        percent_encode(base_url),
        percent_encode(normalized_params)
    ])
