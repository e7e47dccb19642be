"""UniswapV2 Library - pair addressing and constant-product quoting."""

from v2lib.amm.uniswap_v2 import get_amount_in, get_amount_out, quote
from v2lib.config import DEFAULT_CONFIG, LibraryConfig
from v2lib.pairs import pair_for, sort_tokens
from v2lib.reserves import (
    InMemoryReserveSource,
    ReserveSource,
    Web3ReserveSource,
    get_pair_reserves,
    get_reserves,
)
from v2lib.routing.multihop import MultihopQuoter, get_amounts_in, get_amounts_out

__version__ = "0.1.0"
__all__ = [
    "sort_tokens",
    "pair_for",
    "get_reserves",
    "get_pair_reserves",
    "ReserveSource",
    "InMemoryReserveSource",
    "Web3ReserveSource",
    "quote",
    "get_amount_out",
    "get_amount_in",
    "get_amounts_out",
    "get_amounts_in",
    "MultihopQuoter",
    "LibraryConfig",
    "DEFAULT_CONFIG",
    "__version__",
]
