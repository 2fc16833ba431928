"""
Flask blueprints for the OAuth 1.0 signing service.
"""

from .sign import sign_bp
from .health import health_bp
from .metrics import metrics_bp

__all__ = ['sign_bp', 'health_bp', 'metrics_bp']
