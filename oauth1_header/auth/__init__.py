"""
Signing components: canonicalization, HMAC-SHA1 signing and header assembly.
"""
from .percent_encoding import percent_encode
from .canonicalizer import (
    RESERVED_PARAMS,
    SIGNATURE_METHOD,
    OAUTH_VERSION,
    protocol_params,
    merge_params,
    params_string,
    signature_base_string,
)
from .signer import sign, signing_key
from .header import OAuthHeader
from .providers import generate_nonce, current_timestamp
from .request_signer import RequestSigner, auth_header

__all__ = [
    'percent_encode',
    'RESERVED_PARAMS',
    'SIGNATURE_METHOD',
    'OAUTH_VERSION',
    'protocol_params',
    'merge_params',
    'params_string',
    'signature_base_string',
    'sign',
    'signing_key',
    'OAuthHeader',
    'generate_nonce',
    'current_timestamp',
    'RequestSigner',
    'auth_header',
]
