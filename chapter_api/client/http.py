"""
HTTP Client Builder
===================

Builds the httpx clients every endpoint suite uses. A client carries the
base URL, JSON content headers and, when a token is given, a bearer
Authorization header. Requests and responses are logged through structlog.
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from chapter_api.client.endpoints import Endpoint, get_endpoint
from chapter_api.config.logging import get_logger
from chapter_api.config.settings import Settings, get_settings

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"

# Request extension key holding the send time, read back by the response hook
_STARTED_AT = "chapter_api.started_at"


class ApiConfigurationError(Exception):
    """Raised when the client cannot be configured from settings."""

    pass


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of the API reachability probe."""

    reachable: bool
    reason: str = ""


def auth_headers(token: Optional[str] = None) -> Dict[str, str]:
    """Default request headers, with Authorization only when a token is given."""
    headers = {"Content-Type": JSON_CONTENT_TYPE, "Accept": JSON_CONTENT_TYPE}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


async def _log_request(request: httpx.Request) -> None:
    request.extensions[_STARTED_AT] = time.perf_counter()
    logger.debug(
        "API request",
        method=request.method,
        url=str(request.url),
        authenticated="authorization" in request.headers,
    )


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    started_at = request.extensions.get(_STARTED_AT)
    elapsed_ms = None
    if started_at is not None:
        elapsed_ms = round((time.perf_counter() - started_at) * 1000, 1)
    logger.debug(
        "API response",
        method=request.method,
        url=str(request.url),
        status=response.status_code,
        content_type=response.headers.get("content-type"),
        elapsed_ms=elapsed_ms,
    )


def build_client(
    token: Optional[str] = None,
    *,
    settings: Optional[Settings] = None,
    headers: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Build an async client for the API under test.

    Args:
        token: Bearer token. None or empty omits the Authorization header,
            which is how unauthenticated paths are exercised.
        settings: Suite settings; the global instance when omitted.
        headers: Extra headers merged over the defaults.
        transport: Custom transport, e.g. ``httpx.MockTransport`` in unit tests.
    """
    settings = settings or get_settings()
    if not settings.base_url:
        raise ApiConfigurationError("API base URL is not configured")

    default_headers = auth_headers(token)
    if headers:
        default_headers.update(headers)

    try:
        return httpx.AsyncClient(
            base_url=settings.base_url,
            headers=default_headers,
            timeout=httpx.Timeout(settings.request_timeout),
            transport=transport,
            event_hooks={"request": [_log_request], "response": [_log_response]},
        )
    except httpx.InvalidURL as e:
        raise ApiConfigurationError(f"Invalid API base URL {settings.base_url!r}: {e}") from e


async def send(
    client: httpx.AsyncClient,
    endpoint: Union[Endpoint, str],
    *,
    json: Any = None,
    params: Optional[Mapping[str, Any]] = None,
    content: Optional[Union[str, bytes]] = None,
    headers: Optional[Mapping[str, str]] = None,
    **path_params: Any,
) -> httpx.Response:
    """Issue a request to a catalog endpoint.

    HTTP error statuses are returned, never raised; suites assert on them.
    ``content`` sends a raw body, e.g. malformed JSON.
    """
    if isinstance(endpoint, str):
        endpoint = get_endpoint(endpoint)

    kwargs: Dict[str, Any] = {}
    if json is not None:
        kwargs["json"] = json
    if content is not None:
        kwargs["content"] = content
    if params is not None:
        kwargs["params"] = params
    if headers is not None:
        kwargs["headers"] = headers

    return await client.request(endpoint.method, endpoint.path(**path_params), **kwargs)


def probe_api(
    settings: Optional[Settings] = None,
    timeout: float = 5.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> ProbeResult:
    """Check whether the API base URL accepts connections.

    Any HTTP status counts as reachable; only transport failures do not.
    """
    settings = settings or get_settings()
    try:
        with httpx.Client(timeout=timeout, transport=transport) as client:
            response = client.get(settings.base_url)
    except httpx.TransportError as e:
        logger.warning("API unreachable", base_url=settings.base_url, error=str(e))
        return ProbeResult(reachable=False, reason=f"{type(e).__name__}: {e}")
    except httpx.InvalidURL as e:
        raise ApiConfigurationError(f"Invalid API base URL {settings.base_url!r}: {e}") from e

    logger.info("API reachable", base_url=settings.base_url, status=response.status_code)
    return ProbeResult(reachable=True, reason=f"HTTP {response.status_code}")
