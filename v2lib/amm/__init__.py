"""AMM (Automated Market Maker) pricing math."""

from v2lib.amm.base import AMM
from v2lib.amm.uniswap_v2 import UniswapV2, get_amount_in, get_amount_out, quote, uniswap_v2

__all__ = [
    # Base classes
    "AMM",
    # UniswapV2
    "UniswapV2",
    "uniswap_v2",
    "quote",
    "get_amount_out",
    "get_amount_in",
]
