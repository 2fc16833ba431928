"""
Credentials model holding the four OAuth 1.0 secrets.
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """
    The consumer key, consumer secret, token and token secret used in OAuth 1.0.

    Instances are immutable, so one object can be shared by any number of
    concurrent signing calls.

    Attributes:
        consumer_key: Identifies the client to the server
        consumer_secret: Shared secret for the consumer key
        token: Access token
        token_secret: Shared secret for the token
    """
    consumer_key: str
    consumer_secret: str = field(repr=False)
    token: str
    token_secret: str = field(repr=False)

    def __post_init__(self) -> None:
        for name in ('consumer_key', 'consumer_secret', 'token', 'token_secret'):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be a string")

    @classmethod
    def from_dict(cls, data: dict) -> 'Credentials':
        """
        Create a Credentials instance from a dictionary.

        Args:
            data: Dictionary containing the four credential fields

        Returns:
            Credentials instance
        """
        return cls(
            consumer_key=data['consumer_key'],
            consumer_secret=data['consumer_secret'],
            token=data['token'],
            token_secret=data['token_secret']
        )

    def to_dict(self, include_secrets: bool = False) -> dict:
        """
        Convert to dictionary for logging/serialization.

        Args:
            include_secrets: Whether to include the consumer and token secrets

        Returns:
            Dictionary representation of the credentials
        """
        data = {
            'consumer_key': self.consumer_key,
            'token': self.token
        }
        if include_secrets:
            data['consumer_secret'] = self.consumer_secret
            data['token_secret'] = self.token_secret
        return data
