"""
Custom exceptions for Route 53 API operations
"""


class Route53APIError(Exception):
    """Base exception for all API errors"""

    def __init__(self, message: str, status_code: int = None, error_info=None):
        self.message = message
        self.status_code = status_code
        self.error_info = error_info
        super().__init__(self.message)

    @property
    def code(self):
        """Provider error code, e.g. 'NoSuchHostedZone'"""
        return self.error_info.code if self.error_info else None

    def __str__(self):
        if self.status_code:
            return f"Route53APIError (HTTP {self.status_code}): {self.message}"
        return f"Route53APIError: {self.message}"


class AuthenticationError(Route53APIError):
    """Raised when credentials are missing or rejected"""
    pass


class HostedZoneNotFoundError(Route53APIError):
    """Raised when a hosted zone does not exist"""
    pass


class ChangeNotFoundError(Route53APIError):
    """Raised when a change batch id is unknown"""
    pass


class HostedZoneAlreadyExistsError(Route53APIError):
    """Raised when the caller reference has already been used"""
    pass


class HostedZoneNotEmptyError(Route53APIError):
    """Raised when deleting a zone that still holds non-default record sets"""
    pass


class InvalidChangeBatchError(Route53APIError):
    """Raised when Route 53 rejects a change batch"""
    pass


class InvalidInputError(Route53APIError):
    """Raised when Route 53 rejects request parameters"""
    pass


class RateLimitError(Route53APIError):
    """Raised when requests are throttled"""
    pass


class NetworkError(Route53APIError):
    """Raised when network/connection errors occur"""
    pass


class ServerError(Route53APIError):
    """Raised when Route 53 returns 5xx errors"""
    pass


class MalformedResponseError(Route53APIError):
    """Raised when a successful response body is not readable XML"""
    pass


ERROR_CODE_MAP = {
    "InvalidClientTokenId": AuthenticationError,
    "SignatureDoesNotMatch": AuthenticationError,
    "IncompleteSignature": AuthenticationError,
    "AccessDenied": AuthenticationError,
    "NoSuchHostedZone": HostedZoneNotFoundError,
    "NoSuchChange": ChangeNotFoundError,
    "HostedZoneAlreadyExists": HostedZoneAlreadyExistsError,
    "HostedZoneNotEmpty": HostedZoneNotEmptyError,
    "InvalidChangeBatch": InvalidChangeBatchError,
    "InvalidInput": InvalidInputError,
    "InvalidDomainName": InvalidInputError,
    "Throttling": RateLimitError,
    "PriorRequestNotComplete": RateLimitError,
}


def exception_for(code: str, status_code: int) -> type:
    """
    Pick the exception class for an error response.

    The provider error code wins; the HTTP status is the fallback. A 404
    without a code stays a plain Route53APIError.
    """
    if code in ERROR_CODE_MAP:
        return ERROR_CODE_MAP[code]
    if status_code in (401, 403):
        return AuthenticationError
    if status_code == 429:
        return RateLimitError
    if status_code == 400:
        return InvalidInputError
    if 500 <= status_code < 600:
        return ServerError
    return Route53APIError
