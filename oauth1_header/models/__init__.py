"""
Data models for the OAuth 1.0 header generator.
"""
from .http_method import HttpMethod
from .credentials import Credentials

__all__ = [
    'HttpMethod',
    'Credentials',
]
