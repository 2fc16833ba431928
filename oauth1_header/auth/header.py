"""
Assembly of the OAuth 1.0 Authorization header value.
"""
from dataclasses import dataclass

from .canonicalizer import OAUTH_VERSION, SIGNATURE_METHOD


@dataclass(frozen=True)
class OAuthHeader:
    """
    The OAuth protocol parameters as sent in the Authorization header.

    Values are placed in the header exactly as held: consumer_key and token
    are raw, signature is already percent-encoded.

    Attributes:
        consumer_key: Consumer key
        nonce: Nonce used when signing
        signature: Percent-encoded signature
        timestamp: Seconds since the Unix epoch used when signing
        token: Access token
        signature_method: Signature method name
        version: OAuth protocol version
    """
    consumer_key: str
    nonce: str
    signature: str
    timestamp: int
    token: str
    signature_method: str = SIGNATURE_METHOD
    version: str = OAUTH_VERSION

    def to_header(self) -> str:
        """
        Format the Authorization header value.

        Returns:
            Header value starting with "OAuth "
        """
        return (
            f'OAuth oauth_consumer_key="{self.consumer_key}", '
            f'oauth_nonce="{self.nonce}", '
            f'oauth_signature="{self.signature}", '
            f'oauth_signature_method="{self.signature_method}", '
            f'oauth_timestamp="{self.timestamp}", '
            f'oauth_token="{self.token}", '
            f'oauth_version="{self.version}"'
        )

    def __str__(self) -> str:
        return self.to_header()

    def to_dict(self) -> dict:
        """
        Convert to dictionary for logging/serialization.

        Returns:
            Dictionary keyed by oauth_* parameter name
        """
        return {
            'oauth_consumer_key': self.consumer_key,
            'oauth_nonce': self.nonce,
            'oauth_signature': self.signature,
            'oauth_signature_method': self.signature_method,
            'oauth_timestamp': str(self.timestamp),
            'oauth_token': self.token,
            'oauth_version': self.version
        }
