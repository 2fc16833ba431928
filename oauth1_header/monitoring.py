"""
Metrics and log formatting for the OAuth 1.0 signing service.

Counters are labelled by HTTP method (the signed request's, not /sign's own)
and by outcome: "signed" or "rejected". Unexpected failures are counted
separately by exception type.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
import logging
import os
from pythonjsonlogger import jsonlogger


SIGN_REQUESTS_TOTAL = Counter(
    'oauth1_sign_requests_total',
    'Total number of header signing requests',
    ['result', 'method']
)

SIGN_DURATION_SECONDS = Histogram(
    'oauth1_sign_duration_seconds',
    'Header signing request duration in seconds',
    ['method'],
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25)
)

SIGN_ERRORS_TOTAL = Counter(
    'oauth1_sign_errors_total',
    'Total number of header signing errors',
    ['error_type']
)


def setup_json_logging(app=None):
    """
    Route every log record through one JSON handler on stderr.

    Signing logs carry consumer key, nonce and timestamp as extra fields;
    the JSON formatter keeps them as separate keys. LOG_LEVEL picks the
    level (INFO when unset or unknown).

    Args:
        app: Flask app to attach the handler to as well (optional)

    Returns:
        The Flask app logger when app is given, otherwise the root logger
    """
    handler = logging.StreamHandler()
    handler.setFormatter(jsonlogger.JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(message)s',
        timestamp=True
    ))
    level = getattr(logging, os.environ.get('LOG_LEVEL', 'INFO').upper(), logging.INFO)

    targets = [logging.root] if app is None else [logging.root, app.logger]
    for target in targets:
        target.handlers = [handler]
        target.setLevel(level)

    return targets[-1]


def get_metrics():
    """Render the default registry for the /metrics endpoint as (body, content_type)."""
    return generate_latest(), CONTENT_TYPE_LATEST
