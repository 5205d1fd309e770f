"""
Sui client - typed queries against BlockVision's Sui endpoints.

Built on top of the core APIClient.
"""

import logging

from blockvision.core.client import APIClient, ApiKey
from blockvision.core.types import CoinDetail, CoinDexPool, parse_dex_pools

logger = logging.getLogger(__name__)


class SuiClient:
    """
    BlockVision Sui API client.

    Example:
        client = SuiClient("my-api-key")

        detail = client.get_coin_detail("0x2::sui::SUI")
        pools = client.get_coin_dex_pools("0x2::sui::SUI")

    Every method performs a single request. Failures raise a ClientError
    subclass: HttpError, JsonError or ApiError.
    """

    def __init__(
        self,
        api_key: str | ApiKey,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize the Sui client.

        Args:
            api_key: BlockVision API key
            base_url: API base URL, defaults to the public Sui endpoint
            timeout: Request timeout in seconds

        """
        self._client = APIClient(api_key=api_key, base_url=base_url, timeout=timeout)

    def __repr__(self) -> str:
        return f"SuiClient(base_url={self.base_url!r})"

    @property
    def base_url(self) -> str:
        """Get the API base URL."""
        return self._client.base_url

    def get_coin_dex_pools(self, coin_type: str) -> list[CoinDexPool]:
        """
        Retrieve the DEX liquidity pools a coin trades in.

        Args:
            coin_type: Coin type as shown on the SuiVision coin page

        Returns:
            List of CoinDexPool, empty if the API returned no result

        """
        parsed = self._client.get_envelope("coin/dex/pools", {"coinType": coin_type}, parse_dex_pools)
        if parsed.result is None:
            logger.debug("No pools returned for %s", coin_type)
            return []
        return parsed.result

    def get_coin_detail(self, coin_type: str) -> CoinDetail | None:
        """
        Retrieve coin metadata, market data, supply and verification status.

        Reference: https://docs.blockvision.org/reference/retrieve-coin-detail

        Args:
            coin_type: Coin type as shown on the SuiVision coin page

        Returns:
            CoinDetail, or None if the API returned no result

        """
        parsed = self._client.get_envelope("coin/detail", {"coinType": coin_type}, CoinDetail.from_dict)
        return parsed.result
