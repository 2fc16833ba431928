"""
HttpMethod model for request signing.
"""
from enum import Enum
from typing import Optional, Union


class HttpMethod(Enum):
    """HTTP methods accepted by the signer."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(
        cls,
        value: Union['HttpMethod', str, None],
        default: Optional['HttpMethod'] = None
    ) -> 'HttpMethod':
        """
        Parse a method token, falling back to a default when it is not recognised.

        Args:
            value: HttpMethod instance or method name (case-insensitive)
            default: Method returned for unknown input (default: GET)

        Returns:
            HttpMethod instance
        """
        if isinstance(value, cls):
            return value

        if default is None:
            default = cls.GET

        if not value:
            return default

        try:
            return cls[value.strip().upper()]
        except KeyError:
            return default
