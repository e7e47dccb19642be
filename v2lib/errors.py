"""Error classes for pair addressing and constant-product quoting.

These errors map to the revert reasons of the UniswapV2Library contract.
"""


class UniswapV2LibraryError(Exception):
    """Base error for library operations."""

    pass


class IdenticalAssetsError(UniswapV2LibraryError):
    """IDENTICAL_ADDRESSES: both sides of a pair are the same token."""

    pass


class ZeroAddressError(UniswapV2LibraryError):
    """ZERO_ADDRESS: the sorted token0 is the zero address."""

    pass


class InvalidAddressError(UniswapV2LibraryError, ValueError):
    """Input is not a 20-byte hex address."""

    pass


class InsufficientAmountError(UniswapV2LibraryError):
    """INSUFFICIENT_AMOUNT: quote() called with a zero amount."""

    pass


class InsufficientInputAmountError(UniswapV2LibraryError):
    """INSUFFICIENT_INPUT_AMOUNT: get_amount_out() called with a zero input."""

    pass


class InsufficientOutputAmountError(UniswapV2LibraryError):
    """INSUFFICIENT_OUTPUT_AMOUNT: get_amount_in() called with a zero output."""

    pass


class InsufficientLiquidityError(UniswapV2LibraryError):
    """INSUFFICIENT_LIQUIDITY: a reserve is zero or cannot cover the output."""

    pass


class InvalidPathError(UniswapV2LibraryError):
    """INVALID_PATH: a swap path needs at least two tokens."""

    pass


class PairNotFoundError(UniswapV2LibraryError, LookupError):
    """No pair is deployed (or known) at the derived address."""

    pass
