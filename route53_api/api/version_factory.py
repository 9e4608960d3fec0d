"""
Route 53 API Version Factory
Creates the API implementation for a requested version
"""

from typing import Optional

from route53_api.api.base_api import BaseRoute53API
from route53_api.api.client import Route53Client
from route53_api.api.v20110505 import Route53API20110505
from route53_api.api.v20130401 import Route53API20130401
from route53_api.utils.config import get_settings, Settings
from route53_api.utils.logger import get_logger

logger = get_logger(__name__)


SUPPORTED_VERSIONS = {
    Route53API20110505.api_version: Route53API20110505,
    Route53API20130401.api_version: Route53API20130401,
}


def get_route53_api(
    version: Optional[str] = None,
    config: Optional[Settings] = None,
    client: Optional[Route53Client] = None
) -> BaseRoute53API:
    """
    Factory function to create Route 53 API instances.

    Args:
        version: API version ("2011-05-05" or "2013-04-01").
                 If None, reads from config.
        config: Optional Settings instance. Uses default if None.
        client: Optional base client. Built from config if None.

    Returns:
        Versioned API instance

    Raises:
        ValueError: If version is not supported

    Example:
        # Use configured version and credentials
        api = get_route53_api()

        # Explicit version and client
        api = get_route53_api("2011-05-05", client=Route53Client(id="AKIA...", key="..."))
    """
    if version is None or client is None:
        config = config or get_settings()

    if version is None:
        version = config.route53_api_version

    api_class = SUPPORTED_VERSIONS.get(version)
    if api_class is None:
        raise ValueError(
            f"Unknown Route 53 API version: {version}. "
            f"Valid options are: {', '.join(sorted(SUPPORTED_VERSIONS))}"
        )

    if client is None:
        client = Route53Client.from_settings(config)

    logger.info(f"Creating Route 53 API client: {version}")

    return api_class(client)
