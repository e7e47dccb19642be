"""UniswapV2 AMM math.

UniswapV2 uses the constant product formula: x * y = k
With a 0.3% fee on input amounts.
"""

from __future__ import annotations

from typing import ClassVar

from v2lib.amm.base import AMM
from v2lib.constants import FEE_DENOMINATOR, FEE_NUMERATOR
from v2lib.errors import (
    InsufficientAmountError,
    InsufficientInputAmountError,
    InsufficientLiquidityError,
    InsufficientOutputAmountError,
)
from v2lib.models.types import validate_uint256
from v2lib.safe_int import S


class UniswapV2(AMM):
    """UniswapV2 pricing math.

    Formula: amount_out = (amount_in * 997 * reserve_out) / (reserve_in * 1000 + amount_in * 997)

    The 997/1000 factor accounts for the 0.3% fee. Every result rounds in
    favour of the pool: outputs round down, required inputs round up.
    """

    FEE_NUMERATOR: ClassVar[int] = FEE_NUMERATOR
    FEE_DENOMINATOR: ClassVar[int] = FEE_DENOMINATOR

    def quote(self, amount_a: int, reserve_a: int, reserve_b: int) -> int:
        """Convert an amount of asset A into the equivalent amount of B at the pool ratio.

        No fee is applied; this is the ratio used when adding liquidity.

        Formula: amount_b = amount_a * reserve_b / reserve_a

        Raises:
            InsufficientAmountError: If amount_a is zero
            InsufficientLiquidityError: If either reserve is zero
        """
        amount_a, reserve_a, reserve_b = _uints(amount_a, reserve_a, reserve_b)
        if amount_a == 0:
            raise InsufficientAmountError("quote: amount_a must be greater than zero")
        if reserve_a == 0 or reserve_b == 0:
            raise InsufficientLiquidityError(
                f"quote: empty reserves ({reserve_a}, {reserve_b})"
            )

        return ((S(amount_a) * S(reserve_b)) // S(reserve_a)).value

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate output amount using constant product formula.

        Formula: amount_out = (in * 997 * res_out) / (res_in * 1000 + in * 997)

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Output token amount, rounded down

        Raises:
            InsufficientInputAmountError: If amount_in is zero
            InsufficientLiquidityError: If either reserve is zero
            Uint256Overflow: If an intermediate product exceeds uint256
        """
        amount_in, reserve_in, reserve_out = _uints(amount_in, reserve_in, reserve_out)
        if amount_in == 0:
            raise InsufficientInputAmountError("get_amount_out: amount_in must be greater than zero")
        if reserve_in == 0 or reserve_out == 0:
            raise InsufficientLiquidityError(
                f"get_amount_out: empty reserves ({reserve_in}, {reserve_out})"
            )

        amount_in_with_fee = S(amount_in) * S(self.FEE_NUMERATOR)
        numerator = amount_in_with_fee * S(reserve_out)
        denominator = S(reserve_in) * S(self.FEE_DENOMINATOR) + amount_in_with_fee

        return (numerator // denominator).value

    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate required input for desired output.

        Formula: amount_in = (res_in * out * 1000) / ((res_out - out) * 997) + 1

        The trailing +1 rounds up, so the returned input always buys at
        least amount_out.

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Required input token amount

        Raises:
            InsufficientOutputAmountError: If amount_out is zero
            InsufficientLiquidityError: If either reserve is zero, or
                amount_out is not strictly below reserve_out
            Uint256Overflow: If an intermediate product exceeds uint256
        """
        amount_out, reserve_in, reserve_out = _uints(amount_out, reserve_in, reserve_out)
        if amount_out == 0:
            raise InsufficientOutputAmountError(
                "get_amount_in: amount_out must be greater than zero"
            )
        if reserve_in == 0 or reserve_out == 0:
            raise InsufficientLiquidityError(
                f"get_amount_in: empty reserves ({reserve_in}, {reserve_out})"
            )
        if amount_out >= reserve_out:
            # Can't extract the whole reserve
            raise InsufficientLiquidityError(
                f"get_amount_in: amount_out {amount_out} >= reserve_out {reserve_out}"
            )

        numerator = S(reserve_in) * S(amount_out) * S(self.FEE_DENOMINATOR)
        denominator = (S(reserve_out) - S(amount_out)) * S(self.FEE_NUMERATOR)

        return ((numerator // denominator) + S(1)).value


def _uints(*values: int) -> tuple[int, ...]:
    """Validate that every argument is a uint256."""
    return tuple(validate_uint256(v) for v in values)


# Singleton instance
uniswap_v2 = UniswapV2()

quote = uniswap_v2.quote
get_amount_out = uniswap_v2.get_amount_out
get_amount_in = uniswap_v2.get_amount_in


__all__ = [
    "UniswapV2",
    "uniswap_v2",
    "quote",
    "get_amount_out",
    "get_amount_in",
]
