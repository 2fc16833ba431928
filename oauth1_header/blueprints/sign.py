"""
Signing endpoint blueprint.

Computes OAuth 1.0 Authorization headers with the credentials the service was
configured with.
"""
import json
import time
import logging
from flask import Blueprint, request, jsonify, make_response, current_app
from oauth1_header.errors import OAuth1HeaderError
from oauth1_header.models.http_method import HttpMethod
from oauth1_header.wire import pairs_to_params
from oauth1_header.monitoring import (
    SIGN_REQUESTS_TOTAL,
    SIGN_DURATION_SECONDS,
    SIGN_ERRORS_TOTAL
)

logger = logging.getLogger(__name__)

sign_bp = Blueprint('sign', __name__)


def _parse_params(raw):
    """
    Validate the "params" field of a signing request.

    Accepts a JSON object of string values or a flat [key, value, ...] list.
    """
    if raw is None:
        return {}

    if isinstance(raw, list):
        if not all(isinstance(item, str) for item in raw):
            raise ValueError("params list must contain only strings")
        return pairs_to_params(raw)

    if isinstance(raw, dict):
        if not all(isinstance(value, str) for value in raw.values()):
            raise ValueError("params values must be strings")
        return raw

    raise ValueError("params must be an object or a list of alternating keys and values")


@sign_bp.route('/sign', methods=['POST'])
def sign():
    """
    Compute an Authorization header.

    Request body (JSON, UTF-8):
        {
            "method": "GET",
            "url": "https://example.com/resource",
            "params": {"foo": "bar"}  or  ["foo", "bar"]
        }

    An unrecognised method falls back to GET.

    Returns:
        200 OK: {"authorization": "OAuth oauth_consumer_key=..."}
        400 Bad Request: Body is not valid UTF-8/JSON or a field is invalid
        503 Service Unavailable: No credentials configured
        500 Internal Server Error: System error
    """
    start_time = time.time()
    method_label = 'unknown'

    try:
        signer = current_app.config.get('SIGNER')
        if signer is None:
            logger.error("Signing request rejected - no credentials configured")
            return make_response('OAuth credentials are not configured', 503)

        try:
            payload = json.loads(request.get_data().decode('utf-8'))
        except UnicodeDecodeError:
            return _reject('Request body is not valid UTF-8', method_label)
        except json.JSONDecodeError:
            return _reject('Request body is not valid JSON', method_label)

        if not isinstance(payload, dict):
            return _reject('Request body must be a JSON object', method_label)

        base_url = payload.get('url')
        if not isinstance(base_url, str) or not base_url:
            return _reject('Missing required field: url', method_label)

        raw_method = payload.get('method')
        if raw_method is not None and not isinstance(raw_method, str):
            return _reject('method must be a string', method_label)

        method = HttpMethod.parse(raw_method)
        method_label = method.value
        if raw_method and method.value != raw_method.strip().upper():
            logger.warning("Unrecognised HTTP method, falling back to default", extra={
                'method': raw_method,
                'fallback': method.value
            })

        try:
            params = _parse_params(payload.get('params'))
            header = signer.build_header(method, base_url, params)
        except (OAuth1HeaderError, ValueError) as e:
            return _reject(str(e), method_label)

        duration = time.time() - start_time

        SIGN_REQUESTS_TOTAL.labels(result='signed', method=method_label).inc()
        SIGN_DURATION_SECONDS.labels(method=method_label).observe(duration)

        logger.info("Signed request", extra={
            'consumer_key': header.consumer_key,
            'method': method_label,
            'url': base_url,
            'param_count': len(params),
            'oauth_nonce': header.nonce,
            'oauth_timestamp': header.timestamp,
            'duration_ms': round(duration * 1000, 2)
        })

        return jsonify({'authorization': header.to_header()}), 200

    except Exception as e:
        duration = time.time() - start_time

        SIGN_ERRORS_TOTAL.labels(error_type=type(e).__name__).inc()

        logger.error("Signing error", extra={
            'method': method_label,
            'error_type': type(e).__name__,
            'error_message': str(e),
            'duration_ms': round(duration * 1000, 2)
        }, exc_info=True)

        return make_response('Internal server error', 500)


def _reject(reason: str, method_label: str):
    """Count and log a rejected signing request, returning a 400 response."""
    SIGN_REQUESTS_TOTAL.labels(result='rejected', method=method_label).inc()
    logger.warning("Signing request rejected", extra={
        'method': method_label,
        'reason': reason
    })
    return make_response(reason, 400)
