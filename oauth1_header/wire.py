"""
Byte-string boundary for callers outside the Python process.

Callers hand in NUL-terminated UTF-8 buffers (method, URL, credentials) and a
flat array of alternating key/value buffers with an explicit count. Every
buffer is bounds-checked and strictly decoded before it reaches the signer.

The header comes back as NUL-terminated UTF-8 bytes. Ownership of that buffer
passes to the caller; it is an ordinary bytes object, so there is no matching
release call to make.
"""
import logging
from collections.abc import Sequence as SequenceABC
from typing import Callable, Dict, Optional, Sequence

from .auth.request_signer import RequestSigner
from .errors import ForeignInputError
from .models.credentials import Credentials
from .models.http_method import HttpMethod

logger = logging.getLogger(__name__)

BUFFER_TYPES = (bytes, bytearray, memoryview)


def decode_c_string(buffer: Optional[bytes], field: str) -> str:
    """
    Decode a NUL-terminated UTF-8 buffer.

    The buffer is cut at the first NUL byte. A buffer without a NUL is taken
    whole.

    Args:
        buffer: Raw bytes (bytes, bytearray or memoryview)
        field: Name of the argument, used in error messages

    Returns:
        Decoded string

    Raises:
        ForeignInputError: If the buffer is None, not bytes-like, or not valid UTF-8
    """
    if buffer is None:
        raise ForeignInputError(f"{field}: null buffer")
    if not isinstance(buffer, BUFFER_TYPES):
        raise ForeignInputError(
            f"{field}: expected a byte buffer, got {type(buffer).__name__}"
        )

    raw = bytes(buffer)
    end = raw.find(b'\x00')
    if end != -1:
        raw = raw[:end]

    try:
        return raw.decode('utf-8')
    except UnicodeDecodeError as e:
        raise ForeignInputError(f"{field}: invalid UTF-8 at byte {e.start}") from e


def pairs_to_params(items: Sequence[str]) -> Dict[str, str]:
    """
    Turn an alternating [key, value, key, value, ...] list into a dict.

    Args:
        items: Flat list of strings

    Returns:
        Parameter dictionary (a repeated key keeps its last value)

    Raises:
        ForeignInputError: If the list has an odd length
    """
    if len(items) % 2 != 0:
        raise ForeignInputError(f"params: odd number of items ({len(items)})")
    return {items[i]: items[i + 1] for i in range(0, len(items), 2)}


def decode_params(buffers: Optional[Sequence[Optional[bytes]]], count: int) -> Dict[str, str]:
    """
    Decode an array of alternating key/value buffers.

    Args:
        buffers: Array of NUL-terminated UTF-8 buffers
        count: Number of entries to read from the array (twice the pair count)

    Returns:
        Parameter dictionary

    Raises:
        ForeignInputError: On a null or non-array argument, a non-integer, odd or
            out-of-range count, or a bad entry
    """
    if buffers is None:
        raise ForeignInputError("params: null buffer array")
    if isinstance(buffers, BUFFER_TYPES + (str,)) or not isinstance(buffers, SequenceABC):
        raise ForeignInputError(
            f"params: expected an array of byte buffers, got {type(buffers).__name__}"
        )
    if isinstance(count, bool) or not isinstance(count, int):
        raise ForeignInputError(f"params: count must be an integer, got {type(count).__name__}")
    if count < 0 or count > len(buffers):
        raise ForeignInputError(
            f"params: count {count} out of range for array of {len(buffers)}"
        )
    if count % 2 != 0:
        raise ForeignInputError(f"params: odd number of items ({count})")

    items = [decode_c_string(buffers[i], f"params[{i}]") for i in range(count)]
    return pairs_to_params(items)


def auth_header_from_buffers(
    consumer_key: Optional[bytes],
    consumer_secret: Optional[bytes],
    token: Optional[bytes],
    token_secret: Optional[bytes],
    method: Optional[bytes],
    base_url: Optional[bytes],
    params: Optional[Sequence[Optional[bytes]]],
    params_count: int,
    signer_factory: Callable[[Credentials], RequestSigner] = RequestSigner
) -> bytes:
    """
    Compute the Authorization header from raw byte buffers.

    An unrecognised method falls back to GET instead of failing.

    Args:
        consumer_key: Consumer key buffer
        consumer_secret: Consumer secret buffer
        token: Token buffer
        token_secret: Token secret buffer
        method: HTTP method buffer
        base_url: Base URL buffer
        params: Array of alternating key/value buffers
        params_count: Number of entries in params to read
        signer_factory: Builds the signer for the decoded credentials

    Returns:
        NUL-terminated header value, owned by the caller

    Raises:
        ForeignInputError: If any buffer breaks the input contract
    """
    credentials = Credentials(
        consumer_key=decode_c_string(consumer_key, 'consumer_key'),
        consumer_secret=decode_c_string(consumer_secret, 'consumer_secret'),
        token=decode_c_string(token, 'token'),
        token_secret=decode_c_string(token_secret, 'token_secret')
    )
    method_name = decode_c_string(method, 'method')
    url = decode_c_string(base_url, 'base_url')
    decoded_params = decode_params(params, params_count)

    http_method = HttpMethod.parse(method_name)
    if http_method.value != method_name.strip().upper():
        logger.warning("Unrecognised HTTP method, falling back to default", extra={
            'method': method_name,
            'fallback': http_method.value
        })

    header = signer_factory(credentials).sign_request(http_method, url, decoded_params)
    # Consumer key and token are inserted raw, so the header may be non-ASCII
    return header.encode('utf-8') + b'\x00'
