"""Shared token constants for tests.

All addresses are lowercase for consistency with normalize_address().

Usage:
    from tests.helpers import WETH, USDC
    # or
    from tests.helpers.constants import WETH, USDC
"""

# =============================================================================
# Mainnet tokens and pairs
# =============================================================================

WETH = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"  # Wrapped Ether (18 decimals)
USDC = "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"  # USD Coin (6 decimals)
DAI = "0x6b175474e89094c44da98b954eedeac495271d0f"  # Dai Stablecoin (18 decimals)

UNISWAP_V2_FACTORY = "0x5c69bee701ef814a2b6a3edd4b1652cb9cc5aa6f"

# Deployed UniswapV2 pairs, as listed on Etherscan
USDC_WETH_PAIR = "0xb4e16d0168e52d35cacd2c6185b44281ec28c9dc"
DAI_WETH_PAIR = "0xa478c2975ab1ea89e8196811f51a7b7ade33eb11"

# =============================================================================
# Synthetic tokens (ordered: TOKEN_A < TOKEN_B < TOKEN_C)
# =============================================================================

TOKEN_A = "0x" + "11" * 20
TOKEN_B = "0x" + "22" * 20
TOKEN_C = "0x" + "33" * 20
TOKEN_D = "0x" + "44" * 20

ZERO = "0x" + "00" * 20


__all__ = [
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
]
