"""
Request signing utility producing OAuth 1.0 Authorization headers.
"""
import logging
from typing import Callable, Mapping, Optional, Union

from ..models.credentials import Credentials
from ..models.http_method import HttpMethod
from .canonicalizer import merge_params, params_string, protocol_params, signature_base_string
from .header import OAuthHeader
from .providers import current_timestamp, generate_nonce
from .signer import sign

logger = logging.getLogger(__name__)


class RequestSigner:
    """
    Client-side OAuth 1.0 request signer (HMAC-SHA1).

    Generates the value of the HTTP Authorization header for a request:
    OAuth oauth_consumer_key="..", oauth_nonce="..", oauth_signature="..",
    oauth_signature_method="HMAC-SHA1", oauth_timestamp="..", oauth_token="..",
    oauth_version="1.0"

    The signer keeps no per-request state. One instance (and one Credentials
    object) can be shared between threads.
    """

    def __init__(
        self,
        credentials: Credentials,
        nonce_provider: Callable[[], str] = generate_nonce,
        clock: Callable[[], int] = current_timestamp
    ):
        """
        Initialize the request signer.

        Args:
            credentials: Consumer and token credentials
            nonce_provider: Callable returning a fresh nonce per request
            clock: Callable returning the current Unix timestamp
        """
        self.credentials = credentials
        self.nonce_provider = nonce_provider
        self.clock = clock

    def build_header(
        self,
        method: Union[HttpMethod, str],
        base_url: str,
        params: Optional[Mapping[str, str]] = None
    ) -> OAuthHeader:
        """
        Sign a request and return the structured header.

        Args:
            method: HTTP method (GET, POST, etc.)
            base_url: Absolute request URL without query string
            params: Application parameters (query or form parameters)

        Returns:
            OAuthHeader holding the protocol parameters and signature

        Raises:
            ReservedParameterError: If params contains an oauth_* protocol name
        """
        credentials = self.credentials
        nonce = self.nonce_provider()
        timestamp = self.clock()

        oauth_params = protocol_params(
            consumer_key=credentials.consumer_key,
            nonce=nonce,
            timestamp=timestamp,
            token=credentials.token
        )
        normalized = params_string(merge_params(oauth_params, params))
        base_string = signature_base_string(method, base_url, normalized)

        logger.debug("Computed signature base string", extra={
            'base_url': base_url,
            'base_string': base_string
        })

        signature = sign(base_string, credentials.consumer_secret, credentials.token_secret)

        return OAuthHeader(
            consumer_key=credentials.consumer_key,
            nonce=nonce,
            signature=signature,
            timestamp=timestamp,
            token=credentials.token
        )

    def sign_request(
        self,
        method: Union[HttpMethod, str],
        base_url: str,
        params: Optional[Mapping[str, str]] = None
    ) -> str:
        """
        Generate the OAuth Authorization header for a request.

        Args:
            method: HTTP method (GET, POST, etc.)
            base_url: Absolute request URL without query string
            params: Application parameters (query or form parameters)

        Returns:
            Authorization header value
        """
        return self.build_header(method, base_url, params).to_header()

    def sign_get(self, base_url: str, params: Optional[Mapping[str, str]] = None) -> str:
        """Sign a GET request."""
        return self.sign_request(HttpMethod.GET, base_url, params)

    def sign_post(self, base_url: str, params: Optional[Mapping[str, str]] = None) -> str:
        """Sign a POST request."""
        return self.sign_request(HttpMethod.POST, base_url, params)

    def sign_put(self, base_url: str, params: Optional[Mapping[str, str]] = None) -> str:
        """Sign a PUT request."""
        return self.sign_request(HttpMethod.PUT, base_url, params)

    def sign_delete(self, base_url: str, params: Optional[Mapping[str, str]] = None) -> str:
        """Sign a DELETE request."""
        return self.sign_request(HttpMethod.DELETE, base_url, params)


def auth_header(
    credentials: Credentials,
    method: Union[HttpMethod, str],
    base_url: str,
    params: Optional[Mapping[str, str]] = None
) -> str:
    """
    Return the OAuth Authorization header value for a single request.

    Uses a fresh random nonce and the current system time.
    """
    return RequestSigner(credentials).sign_request(method, base_url, params)
