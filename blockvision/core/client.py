"""
Core HTTP client for the BlockVision API.

Handles authentication headers, the request round trip, response decoding and
error handling.
"""

import hmac
import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from collections.abc import Callable
from typing import Any, TypeVar

from blockvision.core.types import ApiResponse

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_BASE_URL = "https://api.blockvision.org/v2/sui/"
API_KEY_HEADER = "x-api-key"

T = TypeVar("T")


class ClientError(Exception):
    """Base error class for client errors."""

    kind = "other"

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result: dict[str, Any] = {"error": self.message, "kind": self.kind}
        if self.details:
            result["details"] = self.details
        return result


class HttpError(ClientError):
    """Transport failure: connection, TLS or timeout."""

    kind = "http"


class JsonError(ClientError):
    """Response body was not valid JSON or did not match the expected shape."""

    kind = "json"

    def __init__(self, message: str, payload: str, details: dict | None = None):
        super().__init__(message, details)
        self.payload = payload

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result = super().to_dict()
        result["payload"] = self.payload
        return result


class ApiError(ClientError):
    """Failure reported by the API in the response envelope."""

    def __init__(self, message: str, status: int = 0, details: dict | None = None):
        super().__init__(message, details)
        self.status = status

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON output."""
        result = super().to_dict()
        if self.status:
            result["status"] = self.status
        return result


class ApiKey:
    """API key that keeps its value out of reprs and logs."""

    __slots__ = ("_value",)

    def __init__(self, value: str):
        self._value = value

    def expose_secret(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return "ApiKey('**********')"

    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiKey):
            return NotImplemented
        return hmac.compare_digest(self._value.encode("utf-8"), other._value.encode("utf-8"))

    # Never hash the secret
    __hash__ = None


def with_default_headers(request: urllib.request.Request, api_key: ApiKey) -> urllib.request.Request:
    """Attach the JSON content type and API key headers to a request."""
    request.add_header("Content-Type", "application/json")
    request.add_header(API_KEY_HEADER, api_key.expose_secret())
    return request


def json_or_err(raw: bytes, parser: Callable[[Any], T] | None = None) -> T:
    """
    Decode a JSON response body, optionally passing it through a parser.

    Args:
        raw: Complete response body
        parser: Optional function building a typed value from the decoded JSON

    Returns:
        Parsed value

    Raises:
        JsonError: If the body is not JSON or the parser rejects it. The error
            carries the body as text, with invalid UTF-8 replaced.

    """
    try:
        data = json.loads(raw)
        return parser(data) if parser else data
    except (ValueError, TypeError, KeyError, AttributeError, RecursionError) as e:
        response_text = raw.decode("utf-8", errors="replace")
        logger.warning("Failed to decode response: %s", e)
        raise JsonError(
            f"JSON parse error: {e}. Response: {response_text}",
            payload=response_text,
        ) from e


class APIClient:
    """
    Low-level HTTP client for the BlockVision API.

    Handles:
    - Authentication via API key
    - GET requests with query parameters
    - Transport error handling
    """

    def __init__(
        self,
        api_key: str | ApiKey,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize the API client.

        Args:
            api_key: BlockVision API key
            base_url: API base URL, defaults to the public Sui endpoint
            timeout: Request timeout in seconds, unset for the transport default

        Raises:
            ClientError: If the API key is empty or the base URL is not http(s)

        """
        self.api_key = api_key if isinstance(api_key, ApiKey) else ApiKey(api_key)
        if not self.api_key.expose_secret():
            raise ClientError("API key is required")

        base_url = base_url or DEFAULT_BASE_URL
        parts = urllib.parse.urlsplit(base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ClientError(f"Invalid base URL: {base_url}")
        # urljoin drops the last path segment unless the base ends with a slash
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout

    def __repr__(self) -> str:
        return f"APIClient(base_url={self.base_url!r}, api_key={self.api_key!r})"

    def build_url(self, path: str, params: dict[str, Any] | None = None) -> str:
        """Build full URL from a path relative to the base URL."""
        url = urllib.parse.urljoin(self.base_url, path.lstrip("/"))
        if params:
            filtered_params = {k: v for k, v in params.items() if v is not None}
            if filtered_params:
                url = f"{url}?{urllib.parse.urlencode(filtered_params)}"
        return url

    def get(self, path: str, params: dict[str, Any] | None = None) -> bytes:
        """
        Make a GET request and return the raw response body.

        Non-2xx responses are returned like any other, since the API reports
        its failures in the body envelope.

        Raises:
            HttpError: On connection, TLS, timeout or HTTP protocol errors

        """
        url = self.build_url(path, params)
        kwargs: dict[str, Any] = {}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        logger.debug("GET %s", url)
        try:
            req = with_default_headers(urllib.request.Request(url, method="GET"), self.api_key)
            with urllib.request.urlopen(req, **kwargs) as response:
                return response.read()

        except urllib.error.HTTPError as e:
            logger.debug("GET %s returned HTTP %s", url, e.code)
            try:
                return e.read()
            except (http.client.HTTPException, OSError) as read_error:
                raise HttpError(f"HTTP error: {read_error!r}") from read_error
            finally:
                e.close()

        except urllib.error.URLError as e:
            raise HttpError(f"Connection error: {e.reason}") from e

        except TimeoutError as e:
            raise HttpError(f"Request timed out after {self.timeout} seconds") from e

        except (http.client.HTTPException, OSError) as e:
            raise HttpError(f"HTTP error: {e!r}") from e

        except ValueError as e:
            raise HttpError(f"Invalid request: {e}") from e

    def get_envelope(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        parser: Callable[[Any], T] | None = None,
    ) -> ApiResponse[T]:
        """
        GET an endpoint and decode its envelope.

        Returns:
            ApiResponse whose result has been passed through ``parser``

        Raises:
            HttpError: On transport errors
            JsonError: If the body is not a valid envelope
            ApiError: If the envelope reports a failure

        """
        raw = self.get(path, params)
        parsed = json_or_err(raw, lambda data: ApiResponse.from_dict(data, parser))
        if not parsed.is_success:
            logger.warning("API error from %s: %s (code %s)", path, parsed.message, parsed.code)
            raise ApiError(parsed.message, status=parsed.code)
        return parsed
