"""
Percent-encoding with the OAuth 1.0a unreserved character set.
"""
from urllib.parse import quote

# Characters left as-is besides ASCII letters and digits.
UNRESERVED_PUNCTUATION = '-._~'


def percent_encode(value: str) -> str:
    """
    Percent-encode a string for use in an OAuth signature base string.

    Every UTF-8 byte is escaped as %XX (upper-case hex) except ASCII letters,
    digits and "-", ".", "_", "~". Unlike a generic URL encoder, "/" and
    spaces are escaped too (a space becomes %20, never "+").

    Args:
        value: Text to encode

    Returns:
        Encoded text
    """
    return quote(value, safe=UNRESERVED_PUNCTUATION, encoding='utf-8', errors='strict')
