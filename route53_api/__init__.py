"""
Route 53 API client
Versioned, XML-marshalling client for the Amazon Route 53 DNS hosting API
"""

__version__ = "0.1.0"

from route53_api.api import (  # noqa: E402
    BaseRoute53API,
    Route53Client,
    Route53API20110505,
    Route53API20130401,
    get_route53_api,
)

__all__ = [
    "__version__",
    "BaseRoute53API",
    "Route53Client",
    "Route53API20110505",
    "Route53API20130401",
    "get_route53_api",
]
