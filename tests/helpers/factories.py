"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_reserve_source

    source = make_reserve_source({(TOKEN_A, TOKEN_B): (1000, 1000)})
"""

from v2lib.reserves import InMemoryReserveSource
from tests.helpers.constants import UNISWAP_V2_FACTORY


def make_reserve_source(
    pairs: dict[tuple[str, str], tuple[int, int]],
    factory: str = UNISWAP_V2_FACTORY,
) -> InMemoryReserveSource:
    """Create an in-memory reserve source preloaded with pairs.

    Args:
        pairs: Mapping of (token_a, token_b) -> (reserve_a, reserve_b),
               reserves given in key order
        factory: Factory the pairs belong to (default: mainnet UniswapV2)

    Returns:
        InMemoryReserveSource ready for quoting
    """
    source = InMemoryReserveSource()
    for (token_a, token_b), (reserve_a, reserve_b) in pairs.items():
        source.set_reserves(factory, token_a, token_b, reserve_a, reserve_b)
    return source
