"""
OAuth 1.0 Authorization header generation.
"""
from .models import Credentials, HttpMethod
from .auth import RequestSigner, auth_header
from .errors import (
    OAuth1HeaderError,
    ForeignInputError,
    ReservedParameterError,
    ConfigurationError,
)

__all__ = [
    'Credentials',
    'HttpMethod',
    'RequestSigner',
    'auth_header',
    'OAuth1HeaderError',
    'ForeignInputError',
    'ReservedParameterError',
    'ConfigurationError',
]
