"""
HMAC-SHA1 signing of an OAuth 1.0 signature base string.
"""
import base64
import hashlib
import hmac

from .percent_encoding import percent_encode


def signing_key(consumer_secret: str, token_secret: str) -> str:
    """
    Form the HMAC key from the two secrets.

    The secrets are joined with "&" as given, without percent-encoding them.
    """
    return f"{consumer_secret}&{token_secret}"


def compute_digest(base_string: str, consumer_secret: str, token_secret: str) -> bytes:
    """
    Compute the raw HMAC-SHA1 digest of the base string.

    Args:
        base_string: Signature base string
        consumer_secret: Consumer secret
        token_secret: Token secret

    Returns:
        20-byte digest
    """
    key = signing_key(consumer_secret, token_secret)
    return hmac.new(
        key.encode('utf-8'),
        base_string.encode('utf-8'),
        hashlib.sha1
    ).digest()


def sign(base_string: str, consumer_secret: str, token_secret: str) -> str:
    """
    Compute the oauth_signature value for a base string.

    The digest is base64-encoded and the result percent-encoded, since base64
    output can contain "+", "/" and "=".

    Args:
        base_string: Signature base string
        consumer_secret: Consumer secret
        token_secret: Token secret

    Returns:
        Percent-encoded, base64-encoded HMAC-SHA1 signature
    """
    digest = compute_digest(base_string, consumer_secret, token_secret)
    return percent_encode(base64.b64encode(digest).decode('ascii'))
