"""
Flask application exposing OAuth 1.0 header signing over HTTP.

Lets services that cannot link the library ask for an Authorization header
computed with the credentials this service is configured with.
"""
import logging
from typing import Optional
from flask import Flask

from oauth1_header.auth import RequestSigner
from oauth1_header.blueprints import sign_bp, health_bp, metrics_bp
from oauth1_header.config import load_credentials, get_port
from oauth1_header.errors import ConfigurationError
from oauth1_header.models.credentials import Credentials
from oauth1_header.monitoring import setup_json_logging

logger = logging.getLogger(__name__)


def _create_signer(credentials: Optional[Credentials]) -> Optional[RequestSigner]:
    """
    Create the request signer from explicit or environment credentials.

    Args:
        credentials: Credentials instance or None to read the environment

    Returns:
        RequestSigner instance, or None if no credentials are configured
    """
    if credentials is None:
        try:
            credentials = load_credentials()
        except ConfigurationError as e:
            logger.warning("Signing disabled (credentials not configured)", extra={
                'error_message': str(e)
            })
            return None

    logger.info("Request signer initialized", extra={
        'consumer_key': credentials.consumer_key
    })
    return RequestSigner(credentials)


def create_app(
    credentials: Optional[Credentials] = None,
    signer: Optional[RequestSigner] = None
) -> Flask:
    """
    Create and configure Flask application.

    Args:
        credentials: Optional credentials (for testing). If None, read from env.
        signer: Optional signer instance (for testing). Takes precedence over credentials.

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    if signer is None:
        signer = _create_signer(credentials)

    # Store in app config for access in route handlers
    app.config['SIGNER'] = signer

    # Register blueprints
    app.register_blueprint(sign_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(metrics_bp)

    return app


if __name__ == '__main__':
    setup_json_logging()
    app = create_app()
    port = get_port()
    logger.info("Starting OAuth 1.0 signing service", extra={
        'port': port,
        'endpoints': ['/sign', '/health', '/metrics']
    })
    app.run(host='0.0.0.0', port=port, debug=False)
