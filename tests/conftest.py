"""Pytest configuration and fixtures."""

import pytest

from v2lib.reserves import InMemoryReserveSource
from v2lib.routing.multihop import MultihopQuoter
from tests.helpers import (
    DAI,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    UNISWAP_V2_FACTORY,
    USDC,
    WETH,
    make_reserve_source,
)


@pytest.fixture
def factory() -> str:
    """The mainnet UniswapV2 factory address."""
    return UNISWAP_V2_FACTORY


@pytest.fixture
def reserve_source() -> InMemoryReserveSource:
    """Synthetic A/B and B/C pairs, 1000/1000 each."""
    return make_reserve_source(
        {
            (TOKEN_A, TOKEN_B): (1000, 1000),
            (TOKEN_B, TOKEN_C): (1000, 1000),
        }
    )


@pytest.fixture
def mainnet_reserve_source() -> InMemoryReserveSource:
    """USDC/WETH and WETH/DAI pairs at ~2500 USD per WETH."""
    return make_reserve_source(
        {
            (USDC, WETH): (25_000_000 * 10**6, 10_000 * 10**18),
            (WETH, DAI): (10_000 * 10**18, 25_000_000 * 10**18),
        }
    )


@pytest.fixture
def quoter(reserve_source: InMemoryReserveSource) -> MultihopQuoter:
    """A quoter reading from the synthetic reserve source."""
    return MultihopQuoter(reserve_source)
