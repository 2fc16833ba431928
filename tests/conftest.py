"""
Pytest configuration and fixtures for OAuth 1.0 header tests.

RFC_* values are the worked example from OAuth Core 1.0
(Appendix A.5), whose expected signature is tR3+Ty81lMeYAr/Fid0kMTYa/WM=.
"""
import pytest

from oauth1_header import Credentials, RequestSigner
from oauth1_header.app import create_app
from oauth1_header.config import CREDENTIAL_VARIABLES


RFC_CONSUMER_KEY = 'dpf43f3p2l4k3l03'
RFC_CONSUMER_SECRET = 'kd94hf93k423kf44'
RFC_TOKEN = 'nnch734d00sl2jdk'
RFC_TOKEN_SECRET = 'pfkkdhi9sl3r4s00'
RFC_NONCE = 'kllo9940pd9333jh'
RFC_TIMESTAMP = 1191242096
RFC_URL = 'http://photos.example.net/photos'
RFC_PARAMS = {'file': 'vacation.jpg', 'size': 'original'}
RFC_SIGNATURE = 'tR3%2BTy81lMeYAr%2FFid0kMTYa%2FWM%3D'

RFC_PARAMS_STRING = (
    'file=vacation.jpg&oauth_consumer_key=dpf43f3p2l4k3l03&oauth_nonce=kllo9940pd9333jh'
    '&oauth_signature_method=HMAC-SHA1&oauth_timestamp=1191242096&oauth_token=nnch734d00sl2jdk'
    '&oauth_version=1.0&size=original'
)

RFC_BASE_STRING = (
    'GET&http%3A%2F%2Fphotos.example.net%2Fphotos&file%3Dvacation.jpg%26'
    'oauth_consumer_key%3Ddpf43f3p2l4k3l03%26oauth_nonce%3Dkllo9940pd9333jh%26'
    'oauth_signature_method%3DHMAC-SHA1%26oauth_timestamp%3D1191242096%26'
    'oauth_token%3Dnnch734d00sl2jdk%26oauth_version%3D1.0%26size%3Doriginal'
)

FIXED_NONCE = 'abcdefghijklmnopqrstuvwxyzABCDEF'
FIXED_TIMESTAMP = 1700000000


@pytest.fixture
def credentials():
    """Credentials used in the library's usage example."""
    return Credentials(
        consumer_key='some-consumer-key',
        consumer_secret='some-consumer-secret',
        token='some-token',
        token_secret='some-token-secret'
    )


@pytest.fixture
def rfc_credentials():
    """Credentials from the OAuth Core 1.0 worked example."""
    return Credentials(
        consumer_key=RFC_CONSUMER_KEY,
        consumer_secret=RFC_CONSUMER_SECRET,
        token=RFC_TOKEN,
        token_secret=RFC_TOKEN_SECRET
    )


@pytest.fixture
def fixed_signer(credentials):
    """Signer with a fixed nonce and timestamp."""
    return RequestSigner(
        credentials,
        nonce_provider=lambda: FIXED_NONCE,
        clock=lambda: FIXED_TIMESTAMP
    )


@pytest.fixture
def rfc_signer(rfc_credentials):
    """Signer reproducing the OAuth Core 1.0 worked example."""
    return RequestSigner(
        rfc_credentials,
        nonce_provider=lambda: RFC_NONCE,
        clock=lambda: RFC_TIMESTAMP
    )


@pytest.fixture
def no_credential_env(monkeypatch):
    """Remove all credential variables from the environment."""
    for var in CREDENTIAL_VARIABLES.values():
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def credential_env(monkeypatch):
    """Set the RFC example credentials in the environment."""
    monkeypatch.setenv('OAUTH1_CONSUMER_KEY', RFC_CONSUMER_KEY)
    monkeypatch.setenv('OAUTH1_CONSUMER_SECRET', RFC_CONSUMER_SECRET)
    monkeypatch.setenv('OAUTH1_TOKEN', RFC_TOKEN)
    monkeypatch.setenv('OAUTH1_TOKEN_SECRET', RFC_TOKEN_SECRET)


@pytest.fixture
def client(fixed_signer):
    """Flask test client with a fixed signer."""
    app = create_app(signer=fixed_signer)
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client
