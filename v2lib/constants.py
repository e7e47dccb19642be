"""Protocol constants for UniswapV2 pair addressing and quoting.

Centralizes well-known addresses and protocol parameters.
"""

from v2lib.models.types import is_valid_address

# UniswapV2 factory (mainnet)
UNISWAP_V2_FACTORY = "0x5c69bee701ef814a2b6a3edd4b1652cb9cc5aa6f"

# keccak256 of the UniswapV2Pair creation bytecode
# Pair addresses are CREATE2(factory, keccak256(token0 ++ token1), INIT_CODE_HASH)
INIT_CODE_HASH = "0x96e8ac4277198ff8b6f785478aa9a39f403cb768dd02cbee326c3e7da348845f"

# EIP-1014 CREATE2 prefix byte
CREATE2_PREFIX = b"\xff"

# 0.3% swap fee, applied to the input amount as amount_in * 997 / 1000
FEE_NUMERATOR = 997
FEE_DENOMINATOR = 1000

# UniswapV2Pair.getReserves() selector
GET_RESERVES_SELECTOR = "0x0902f1ac"


def _validate_token_address(name: str, address: str) -> str:
    """Validate and return a token address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Well-known token addresses on mainnet (lowercase for consistency)
# All addresses are validated at import time to catch typos early
WETH = _validate_token_address("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")
USDC = _validate_token_address("USDC", "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48")
DAI = _validate_token_address("DAI", "0x6b175474e89094c44da98b954eedeac495271d0f")
