"""
Core types for the BlockVision Sui API.

These dataclasses mirror the JSON payloads returned by the API. Wire names are
camelCase; attributes use snake_case.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# =============================================================================
# Envelope
# =============================================================================


def parse_status_code(value: Any) -> int:
    """Parse an envelope status code sent either as a number or as numeric text."""
    if isinstance(value, bool):
        raise ValueError(f"invalid status code: {value!r}")
    if isinstance(value, str):
        value = value.strip()
        if not value.isdigit():
            raise ValueError(f"invalid status code: {value!r}")
        value = int(value)
    if not isinstance(value, int) or not 100 <= value <= 999:
        raise ValueError(f"invalid status code: {value!r}")
    return value


_REQUIRED = object()


def _ensure_object(data: Any) -> None:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")


def typed_field(data: dict[str, Any], key: str, kind: type, default: Any = _REQUIRED) -> Any:
    """
    Read a payload field, rejecting values of the wrong JSON type.

    Fields without a default must be present. Optional fields that are
    missing or null take the default. Booleans are not accepted as ints.
    """
    if default is _REQUIRED:
        value = data[key]
    else:
        value = data.get(key)
        if value is None:
            return default

    if kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise TypeError(f"{key} must be {kind.__name__}, got {type(value).__name__}")
    return value


@dataclass
class ApiResponse(Generic[T]):
    """Standard BlockVision response envelope: code, message and result."""

    code: int
    message: str
    result: T | None = None

    @property
    def is_success(self) -> bool:
        """Check if the code is a 2xx status."""
        return 200 <= self.code < 300

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        parser: Callable[[Any], T] | None = None,
    ) -> "ApiResponse[T]":
        """
        Create from API response dict.

        The result is only parsed for successful envelopes; on failure it is
        dropped since the API gives it no meaning.
        """
        _ensure_object(data)

        code = parse_status_code(data["code"])
        message = typed_field(data, "message", str, "")

        raw = data.get("result")
        result = None
        if 200 <= code < 300 and raw is not None:
            result = parser(raw) if parser else raw

        return cls(code=code, message=message, result=result)


# =============================================================================
# Coin Detail
# =============================================================================


@dataclass
class CoinDetail:
    """Coin metadata, market data, supply and verification status."""

    name: str
    symbol: str
    decimals: int
    logo: str = ""
    price: str = ""
    price_change_percentage_24h: str = ""
    holders: int = 0
    market_cap: str = ""
    website: str = ""
    creator: str = ""
    created_time: int = 0  # milliseconds
    verified: bool = False
    circulating: str = ""
    scam_flag: int = 0

    @property
    def is_scam(self) -> bool:
        """Check if SuiVision labels this coin as a scam."""
        return bool(self.scam_flag)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CoinDetail":
        """Create from API response dict."""
        _ensure_object(data)
        return cls(
            name=typed_field(data, "name", str),
            symbol=typed_field(data, "symbol", str),
            decimals=typed_field(data, "decimals", int),
            logo=typed_field(data, "logo", str, ""),
            price=typed_field(data, "price", str, ""),
            price_change_percentage_24h=typed_field(data, "priceChangePercentage24H", str, ""),
            holders=typed_field(data, "holders", int, 0),
            market_cap=typed_field(data, "marketCap", str, ""),
            website=typed_field(data, "website", str, ""),
            creator=typed_field(data, "creator", str, ""),
            created_time=typed_field(data, "createdTime", int, 0),
            verified=typed_field(data, "verified", bool, False),
            circulating=typed_field(data, "circulating", str, ""),
            scam_flag=typed_field(data, "scamFlag", int, 0),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API's wire format."""
        return {
            "name": self.name,
            "symbol": self.symbol,
            "decimals": self.decimals,
            "logo": self.logo,
            "price": self.price,
            "priceChangePercentage24H": self.price_change_percentage_24h,
            "holders": self.holders,
            "marketCap": self.market_cap,
            "website": self.website,
            "creator": self.creator,
            "createdTime": self.created_time,
            "verified": self.verified,
            "circulating": self.circulating,
            "scamFlag": self.scam_flag,
        }


# Name used by the API reference for this payload
CoinDetailResponse = CoinDetail


# =============================================================================
# Coin DEX Pools
# =============================================================================


@dataclass
class CoinDexPool:
    """A DEX liquidity pool that trades a given coin."""

    dex: str
    pool_id: str
    link: str = ""
    balance: str = ""
    price: str = ""
    coin_list: list[str] = field(default_factory=list)
    tvl: str = ""
    apr: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CoinDexPool":
        """Create from API response dict."""
        _ensure_object(data)
        coin_list = typed_field(data, "coinList", list, [])
        for coin in coin_list:
            if not isinstance(coin, str):
                raise TypeError(f"coinList entries must be str, got {type(coin).__name__}")

        return cls(
            dex=typed_field(data, "dex", str),
            pool_id=typed_field(data, "poolId", str),
            link=typed_field(data, "link", str, ""),
            balance=typed_field(data, "balance", str, ""),
            price=typed_field(data, "price", str, ""),
            coin_list=list(coin_list),
            tvl=typed_field(data, "tvl", str, ""),
            apr=typed_field(data, "apr", str, None),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API's wire format."""
        result: dict[str, Any] = {
            "dex": self.dex,
            "link": self.link,
            "poolId": self.pool_id,
            "balance": self.balance,
            "price": self.price,
            "coinList": list(self.coin_list),
            "tvl": self.tvl,
        }
        if self.apr is not None:
            result["apr"] = self.apr
        return result


CoinDexPoolsResponse = CoinDexPool


def parse_dex_pools(data: Any) -> list[CoinDexPool]:
    """Parse the pools result, which is normally a list but may be a single pool."""
    if isinstance(data, dict):
        return [CoinDexPool.from_dict(data)]
    if not isinstance(data, list):
        raise TypeError(f"expected a list of pools, got {type(data).__name__}")
    return [CoinDexPool.from_dict(item) for item in data]
