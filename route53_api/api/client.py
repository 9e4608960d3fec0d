"""
Route 53 base client
Holds credentials and the shared HTTP session, signs and dispatches requests
"""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Optional

import requests
from botocore.auth import SigV3Auth
from botocore.awsrequest import AWSRequest
from botocore.credentials import Credentials
from tenacity import (
    Retrying,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type
)

from route53_api import __version__
from route53_api.api.exceptions import (
    AuthenticationError,
    MalformedResponseError,
    NetworkError,
    RateLimitError,
    ServerError,
    exception_for
)
from route53_api.api.models import ErrorInfo
from route53_api.api.xml_codec import OrderedFields, ordered_fields, parse_error_body
from route53_api.utils.config import DEFAULT_BASE_URL
from route53_api.utils.logger import get_logger


logger = get_logger(__name__)

USER_AGENT = f"route53-api/{__version__} (Python)"

# Route 53 rejects signatures made more than five minutes off its clock
MAX_CLOCK_SKEW = 300


class Route53Client:
    """
    Base client shared by every API version.

    Holds the credential pair, one requests.Session and the error from the
    most recent failed request. Not safe for concurrent use: the error slot
    belongs to the whole instance.
    """

    def __init__(
        self,
        id: Optional[str] = None,
        key: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30,
        max_attempts: int = 1,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Missing credentials only log a warning here; requests fail later,
        before anything is sent.

        Args:
            id: AWS access key id
            key: AWS secret access key
            base_url: Route 53 endpoint (with trailing slash)
            timeout: HTTP timeout in seconds
            max_attempts: Attempts per request for transient failures
            session: Optional pre-built requests.Session
        """
        if id is None:
            logger.warning("Required parameter 'id' is not defined")

        if key is None:
            logger.warning("Required parameter 'key' is not defined")

        self.id = id
        self.key = key
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout
        self.max_attempts = max(1, int(max_attempts))

        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = USER_AGENT

        self._error: Optional[ErrorInfo] = None

    @classmethod
    def from_settings(cls, settings) -> "Route53Client":
        """Build a client from a Settings instance"""
        return cls(
            id=settings.aws_access_key_id,
            key=settings.aws_secret_access_key,
            base_url=settings.route53_base_url,
            timeout=settings.request_timeout,
            max_attempts=settings.max_attempts
        )

    # --- Error slot ---

    @property
    def error(self) -> Optional[ErrorInfo]:
        """Error from the most recent failed request, or None"""
        return self._error

    def clear_error(self) -> None:
        self._error = None

    # --- Ordered-field encoder ---

    @staticmethod
    def ordered_fields(*pairs) -> OrderedFields:
        """Build request data whose element order is preserved on serialization"""
        return ordered_fields(*pairs)

    # --- Signing ---

    def get_server_date(self) -> Optional[str]:
        """
        Read the provider's clock from the Date header of a lightweight request.

        Returns:
            The Date header value, or None if it is missing
        """
        url = self.base_url + "date"
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            self._error = ErrorInfo(code="ServerDateUnavailable", message=str(e))
            raise NetworkError(f"Can't get Amazon server date: {str(e)}", error_info=self._error)

        date = response.headers.get("Date")

        if not date:
            logger.warning("Can't get Amazon server date")

        return date

    def sign(self, method: str, url: str, data: Optional[bytes] = None) -> Dict[str, str]:
        """
        AWS3-HTTPS authentication headers for one request.

        botocore's SigV3Auth stamps the request date and signs it:
        X-Amzn-Authorization: AWS3-HTTPS AWSAccessKeyId=<id>,
        Algorithm=HmacSHA256,Signature=<base64 HMAC-SHA256 of the date>.

        Returns:
            Date, x-amz-date and X-Amzn-Authorization headers
        """
        request = AWSRequest(method=method, url=url, data=data)
        SigV3Auth(Credentials(self.id, self.key)).add_auth(request)

        date = request.headers["Date"]
        return {
            "Date": date,
            "x-amz-date": date,
            "X-Amzn-Authorization": request.headers["X-Amzn-Authorization"]
        }

    def check_clock_skew(self, server_date: str) -> Optional[float]:
        """
        Compare the local clock with the provider's.

        Returns:
            Skew in seconds (local minus server), or None if the date
            can't be parsed
        """
        try:
            server_time = parsedate_to_datetime(server_date)
        except (TypeError, ValueError):
            logger.warning(f"Unreadable Amazon server date: {server_date!r}")
            return None

        skew = (datetime.now(timezone.utc) - server_time).total_seconds()
        if abs(skew) > MAX_CLOCK_SKEW:
            logger.warning(
                f"Local clock is {skew:+.0f}s off Amazon server time ({server_date}); "
                f"requests may be rejected"
            )
        return skew

    def malformed_response(self, response: requests.Response, error: Exception) -> MalformedResponseError:
        """
        Record a 2xx response whose body is not valid XML and build its error.
        """
        self._error = ErrorInfo(
            code="MalformedResponse",
            message=f"Response body is not valid XML: {str(error)}",
            status_code=response.status_code
        )
        logger.error(f"Route 53 returned an unreadable body (HTTP {response.status_code}) - {str(error)}")
        return MalformedResponseError(self._error.message, status_code=response.status_code, error_info=self._error)

    # --- Dispatch ---

    def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[str] = None
    ) -> requests.Response:
        """
        Sign and send a request, raising a typed error on failure.

        Args:
            method: HTTP method (GET, POST, DELETE)
            url: Absolute URL
            params: Query parameters, URL-escaped by requests
            data: XML request body

        Returns:
            The successful response

        Raises:
            AuthenticationError: If credentials are missing (nothing is sent)
            Route53APIError subclasses for error responses
            NetworkError: On timeouts and connection failures
        """
        self.clear_error()

        if not self.id or not self.key:
            self._error = ErrorInfo(code="MissingCredentials", message="AWS credentials are not configured")
            raise AuthenticationError(
                "AWS credentials are not configured. Pass id and key, or set "
                "AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY."
            )

        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=2, max=10),
            retry=retry_if_exception_type((NetworkError, ServerError, RateLimitError)),
            reraise=True
        )

        return retrying(self._send, method, url, params, data)

    def _send(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]],
        data: Optional[str]
    ) -> requests.Response:
        # A retried attempt starts clean
        self.clear_error()

        server_date = self.get_server_date()
        if server_date:
            self.check_clock_skew(server_date)

        body = data.encode("utf-8") if data is not None else None

        headers = self.sign(method, url, body)
        if data is not None:
            headers["Content-Type"] = "text/xml; charset=UTF-8"

        logger.debug(f"{method} {url}")
        if params:
            logger.debug(f"Params: {params}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                data=body,
                headers=headers,
                timeout=self.timeout
            )
        except requests.exceptions.Timeout:
            self._error = ErrorInfo(code="Timeout", message=f"Request timed out after {self.timeout} seconds")
            raise NetworkError(f"Request timed out after {self.timeout} seconds", error_info=self._error)
        except requests.exceptions.ConnectionError as e:
            self._error = ErrorInfo(code="ConnectionError", message=str(e))
            raise NetworkError(f"Connection error: {str(e)}", error_info=self._error)
        except requests.exceptions.RequestException as e:
            self._error = ErrorInfo(code="RequestException", message=str(e))
            raise NetworkError(f"Network error: {str(e)}", error_info=self._error)

        if not response.ok:
            self._parse_error(response)

        return response

    def _parse_error(self, response: requests.Response) -> None:
        """
        Record an error response in the error slot and raise the matching exception.
        """
        details = parse_error_body(response.content)
        self._error = ErrorInfo(status_code=response.status_code, **details)

        message = self._error.message or response.reason or "Unknown error"
        if self._error.code:
            message = f"{self._error.code}: {message}"

        logger.error(f"Route 53 request failed (HTTP {response.status_code}) - {message}")

        exc_class = exception_for(self._error.code, response.status_code)
        raise exc_class(message, status_code=response.status_code, error_info=self._error)
