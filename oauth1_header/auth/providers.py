"""
Nonce and clock sources used when signing.

Both are plain callables so callers and tests can substitute fixed values.
"""
import logging
import secrets
import string
import time
from typing import Callable

logger = logging.getLogger(__name__)

NONCE_ALPHABET = string.ascii_letters + string.digits
NONCE_LENGTH = 32

# Returned when the system clock reports a time before the Unix epoch
FALLBACK_TIMESTAMP = 1234567890


def generate_nonce(length: int = NONCE_LENGTH) -> str:
    """
    Generate a random alphanumeric nonce.

    Args:
        length: Number of characters (default: 32)

    Returns:
        Nonce drawn uniformly from [A-Za-z0-9]
    """
    return ''.join(secrets.choice(NONCE_ALPHABET) for _ in range(length))


def current_timestamp(now: Callable[[], float] = time.time) -> int:
    """
    Get the current time in whole seconds since the Unix epoch.

    Args:
        now: Clock returning fractional epoch seconds (default: time.time)

    Returns:
        Epoch seconds, or FALLBACK_TIMESTAMP if the clock is before the epoch
    """
    seconds = now()
    if seconds < 0:
        logger.warning("System clock is before the Unix epoch, using fallback timestamp", extra={
            'clock_value': seconds,
            'fallback_timestamp': FALLBACK_TIMESTAMP
        })
        return FALLBACK_TIMESTAMP
    return int(seconds)
