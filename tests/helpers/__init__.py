"""Test helpers module for shared test utilities.

- constants: Token, factory and pair addresses
- factories: Reserve source builders
"""

from tests.helpers.constants import (
    DAI,
    DAI_WETH_PAIR,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    TOKEN_D,
    UNISWAP_V2_FACTORY,
    USDC,
    USDC_WETH_PAIR,
    WETH,
    ZERO,
)
from tests.helpers.factories import make_reserve_source

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "UNISWAP_V2_FACTORY",
    "USDC_WETH_PAIR",
    "DAI_WETH_PAIR",
    "TOKEN_A",
    "TOKEN_B",
    "TOKEN_C",
    "TOKEN_D",
    "ZERO",
    # Factories
    "make_reserve_source",
]
