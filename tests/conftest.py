"""Pytest configuration - loads .env for integration tests."""

import http.client
import io
import json
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)


class FakeResponse(io.BytesIO):
    """Stand-in for the object returned by urllib.request.urlopen."""

    status = 200


class TruncatedResponse(FakeResponse):
    """Response whose body ends before Content-Length is reached."""

    def read(self, *args):
        raise http.client.IncompleteRead(b'{"co', 100)


def envelope(code=200, message="OK", result=None, **extra) -> bytes:
    """Encode a BlockVision response envelope."""
    data = {"code": code, "message": message, "result": result}
    data.update(extra)
    return json.dumps(data).encode("utf-8")


COIN_DETAIL = {
    "name": "Sui",
    "symbol": "SUI",
    "decimals": 9,
    "logo": "https://example.com/sui.png",
    "price": "3.51",
    "priceChangePercentage24H": "-1.25",
    "holders": 1203344,
    "marketCap": "11234000000",
    "website": "https://sui.io",
    "creator": "0x0000000000000000000000000000000000000000000000000000000000000002",
    "createdTime": 1683062400000,
    "verified": True,
    "circulating": "3200000000",
    "scamFlag": 0,
}

POOL = {
    "dex": "momentum",
    "link": "https://app.mmt.finance/pool/0xabc",
    "poolId": "0xabc",
    "balance": "1000.5",
    "price": "3.50",
    "coinList": ["0x2::sui::SUI", "0xdba3::usdc::USDC"],
    "tvl": "2500000",
    "apr": "12.5",
}
