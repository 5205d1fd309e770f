"""
Smoke tests against the real BlockVision API.

Run with: python -m pytest tests/test_live.py -v -s
Requires: BLOCKVISION_API_KEY environment variable (or a .env file)
"""

import os

import pytest

from blockvision import CoinDetail, CoinDexPool, SuiClient

API_KEY = os.environ.get("BLOCKVISION_API_KEY")
SUI_COIN_TYPE = "0x2::sui::SUI"

pytestmark = pytest.mark.skipif(not API_KEY, reason="BLOCKVISION_API_KEY not set")


@pytest.fixture(scope="module")
def client():
    return SuiClient(API_KEY, timeout=30)


def test_coin_detail(client):
    detail = client.get_coin_detail(SUI_COIN_TYPE)
    assert isinstance(detail, CoinDetail)
    assert detail.symbol == "SUI"
    assert detail.decimals == 9


def test_coin_dex_pools(client):
    pools = client.get_coin_dex_pools(SUI_COIN_TYPE)
    assert isinstance(pools, list)
    for pool in pools:
        assert isinstance(pool, CoinDexPool)
        assert pool.pool_id
