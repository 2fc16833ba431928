"""
/metrics blueprint: Prometheus scrape target for the signing service.
"""
from flask import Blueprint, Response
from oauth1_header.monitoring import get_metrics

metrics_bp = Blueprint('metrics', __name__)


@metrics_bp.route('/metrics', methods=['GET'])
def prometheus_metrics():
    """
    Expose the oauth1_sign_* counters and latency histogram.

    Only header-signing traffic on /sign is measured; /health and /metrics
    requests are not counted.
    """
    body, content_type = get_metrics()
    return Response(body, mimetype=content_type)
