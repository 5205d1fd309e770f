"""
Core layer - Raw types and HTTP client.

This layer provides:
- Typed dataclasses matching the API payloads
- Low-level HTTP client with auth and error handling
"""

from blockvision.core.client import (
    APIClient,
    ApiError,
    ApiKey,
    ClientError,
    HttpError,
    JsonError,
    json_or_err,
    with_default_headers,
)
from blockvision.core.types import (
    ApiResponse,
    CoinDetail,
    CoinDetailResponse,
    CoinDexPool,
    CoinDexPoolsResponse,
)

__all__ = [
    "APIClient",
    "ApiError",
    "ApiKey",
    "ApiResponse",
    "ClientError",
    "CoinDetail",
    "CoinDetailResponse",
    "CoinDexPool",
    "CoinDexPoolsResponse",
    "HttpError",
    "JsonError",
    "json_or_err",
    "with_default_headers",
]
