"""
API Layer - Route 53 base client and versioned API implementations
"""

# Base client and interface
from route53_api.api.client import Route53Client
from route53_api.api.base_api import BaseRoute53API

# Version implementations
from route53_api.api.v20110505 import Route53API20110505
from route53_api.api.v20130401 import Route53API20130401

# Version factory
from route53_api.api.version_factory import get_route53_api, SUPPORTED_VERSIONS

# Exceptions
from route53_api.api.exceptions import (
    Route53APIError,
    AuthenticationError,
    HostedZoneNotFoundError,
    ChangeNotFoundError,
    HostedZoneAlreadyExistsError,
    HostedZoneNotEmptyError,
    InvalidChangeBatchError,
    InvalidInputError,
    RateLimitError,
    NetworkError,
    ServerError,
    MalformedResponseError
)

__all__ = [
    # Base
    "Route53Client",
    "BaseRoute53API",

    # Versions
    "Route53API20110505",
    "Route53API20130401",

    # Factory
    "get_route53_api",
    "SUPPORTED_VERSIONS",

    # Exceptions
    "Route53APIError",
    "AuthenticationError",
    "HostedZoneNotFoundError",
    "ChangeNotFoundError",
    "HostedZoneAlreadyExistsError",
    "HostedZoneNotEmptyError",
    "InvalidChangeBatchError",
    "InvalidInputError",
    "RateLimitError",
    "NetworkError",
    "ServerError",
    "MalformedResponseError"
]
