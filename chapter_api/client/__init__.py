"""
API Client
==========

HTTP client builder and endpoint catalog shared by every endpoint suite.
"""

from .endpoints import Endpoint, get_endpoint, endpoints_in_group, ENDPOINTS, GROUPS
from .http import build_client, auth_headers, send, probe_api, ProbeResult, ApiConfigurationError

__all__ = [
    "Endpoint",
    "get_endpoint",
    "endpoints_in_group",
    "ENDPOINTS",
    "GROUPS",
    "build_client",
    "auth_headers",
    "send",
    "probe_api",
    "ProbeResult",
    "ApiConfigurationError",
]
