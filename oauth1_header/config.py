"""
Configuration loaded from environment variables (and a .env file).
"""
import os
import sys
from typing import Mapping, Optional
from dotenv import load_dotenv

from .errors import ConfigurationError
from .models.credentials import Credentials

# Load environment variables from .env file
load_dotenv()

CREDENTIAL_VARIABLES = {
    'consumer_key': 'OAUTH1_CONSUMER_KEY',
    'consumer_secret': 'OAUTH1_CONSUMER_SECRET',
    'token': 'OAUTH1_TOKEN',
    'token_secret': 'OAUTH1_TOKEN_SECRET',
}

DEFAULT_PORT = 7844


def load_credentials(environ: Optional[Mapping[str, str]] = None) -> Credentials:
    """
    Build Credentials from environment variables.

    Environment variables:
        OAUTH1_CONSUMER_KEY: Consumer key (required)
        OAUTH1_CONSUMER_SECRET: Consumer secret (required)
        OAUTH1_TOKEN: Access token (required)
        OAUTH1_TOKEN_SECRET: Token secret (required)

    Args:
        environ: Mapping to read from (default: os.environ)

    Returns:
        Credentials instance

    Raises:
        ConfigurationError: If any of the variables is unset
    """
    if environ is None:
        environ = os.environ

    missing = [var for var in CREDENTIAL_VARIABLES.values() if environ.get(var) is None]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variable(s): {', '.join(missing)}"
        )

    return Credentials(**{
        field: environ[var] for field, var in CREDENTIAL_VARIABLES.items()
    })


def get_credentials(verbose: bool = True) -> Credentials:
    """
    Load credentials for scripts, exiting with a message when they are missing.

    Args:
        verbose: Whether to print status messages

    Returns:
        Credentials instance

    Raises:
        SystemExit: If required environment variables are missing
    """
    try:
        credentials = load_credentials()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if verbose:
        print(f"Using consumer key '{credentials.consumer_key}'", file=sys.stderr)
    return credentials


def get_port() -> int:
    """Port for the signing service (PORT, default 7844)."""
    return int(os.environ.get('PORT', DEFAULT_PORT))
