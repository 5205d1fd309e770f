"""
BlockVision client - typed access to BlockVision's Sui API.

Layers:
- core: Payload types and HTTP client
- sui: SuiClient with typed query methods
"""

from blockvision.core.client import ApiError, ApiKey, ClientError, HttpError, JsonError
from blockvision.core.types import CoinDetail, CoinDexPool
from blockvision.sui import SuiClient

__version__ = "0.1.0"
__all__ = [
    "ApiError",
    "ApiKey",
    "ClientError",
    "CoinDetail",
    "CoinDexPool",
    "HttpError",
    "JsonError",
    "SuiClient",
]
