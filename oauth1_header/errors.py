"""
Exceptions raised by the OAuth 1.0 header generator.
"""


class OAuth1HeaderError(Exception):
    """Base class for all errors raised by this package."""


class ForeignInputError(OAuth1HeaderError, ValueError):
    """
    Raised when a byte buffer handed in across the foreign boundary breaks the
    input contract (missing buffer, odd parameter count, invalid UTF-8).
    """


class ReservedParameterError(OAuth1HeaderError, ValueError):
    """Raised when an application parameter reuses a reserved oauth_* name."""

    def __init__(self, names):
        self.names = sorted(names)
        super().__init__(
            f"Reserved OAuth parameter name(s) supplied by caller: {', '.join(self.names)}"
        )


class ConfigurationError(OAuth1HeaderError):
    """Raised when required configuration is missing."""
