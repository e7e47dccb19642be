"""Multi-hop quoting through chains of UniswapV2 pairs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

import structlog

from v2lib.amm.base import AMM
from v2lib.amm.uniswap_v2 import uniswap_v2
from v2lib.constants import INIT_CODE_HASH
from v2lib.errors import InvalidPathError
from v2lib.models.types import normalize_address, validate_uint256
from v2lib.reserves import ReserveSource, Web3ReserveSource, get_pair_reserves
from v2lib.routing.types import HopQuote, RouteQuote

if TYPE_CHECKING:
    from v2lib.config import LibraryConfig

logger = structlog.get_logger()


class MultihopQuoter:
    """Quotes exact-input and exact-output swaps along a token path.

    Each adjacent pair of tokens in the path names one pair contract. The
    quoter reads every pair's reserves through the injected ReserveSource
    and chains the single-hop formulas. Any hop failure propagates; there
    is no partial result.

    Reserves are read one hop at a time, so within a single quote they are
    only as consistent as the source makes them.
    """

    def __init__(
        self,
        reserve_source: ReserveSource,
        init_code_hash: str | bytes = INIT_CODE_HASH,
        amm: AMM = uniswap_v2,
    ) -> None:
        """Initialize the quoter.

        Args:
            reserve_source: Where pair reserves are read from
            init_code_hash: Pair bytecode hash used for address derivation
            amm: Pricing math for a single hop
        """
        self.reserve_source = reserve_source
        self.init_code_hash = init_code_hash
        self.amm = amm

    @classmethod
    def from_config(
        cls,
        config: LibraryConfig,
        reserve_source: ReserveSource | None = None,
    ) -> MultihopQuoter:
        """Build a quoter from configuration.

        Without an explicit reserve_source, a Web3ReserveSource is created
        from config.rpc_url.

        Raises:
            ValueError: If no reserve_source is given and rpc_url is unset
        """
        if reserve_source is None:
            if config.rpc_url is None:
                raise ValueError("rpc_url is required when no reserve_source is given")
            reserve_source = Web3ReserveSource(config.rpc_url)
        return cls(reserve_source, init_code_hash=config.init_code_hash)

    def quote_exact_input(self, factory: str, amount_in: int, path: Sequence[str]) -> RouteQuote:
        """Quote selling exactly amount_in of path[0] along path.

        Walks forward: each hop's output is the next hop's input.
        """
        _check_path(path)

        amounts = [validate_uint256(amount_in)]
        hops: list[HopQuote] = []
        for i in range(len(path) - 1):
            pair, reserve_in, reserve_out = get_pair_reserves(
                self.reserve_source, factory, path[i], path[i + 1], self.init_code_hash
            )
            amount_out = self.amm.get_amount_out(amounts[i], reserve_in, reserve_out)
            hops.append(self._hop(pair, path, i, reserve_in, reserve_out, amounts[i], amount_out))
            amounts.append(amount_out)

        return RouteQuote(path=[normalize_address(t) for t in path], amounts=amounts, hops=hops)

    def quote_exact_output(self, factory: str, amount_out: int, path: Sequence[str]) -> RouteQuote:
        """Quote buying exactly amount_out of path[-1] along path.

        Walks backward: each hop's required input is the previous hop's
        required output.
        """
        _check_path(path)

        amounts = [0] * len(path)
        amounts[-1] = validate_uint256(amount_out)
        hops: list[HopQuote] = []
        for i in range(len(path) - 1, 0, -1):
            pair, reserve_in, reserve_out = get_pair_reserves(
                self.reserve_source, factory, path[i - 1], path[i], self.init_code_hash
            )
            amounts[i - 1] = self.amm.get_amount_in(amounts[i], reserve_in, reserve_out)
            hops.append(
                self._hop(pair, path, i - 1, reserve_in, reserve_out, amounts[i - 1], amounts[i])
            )

        hops.reverse()
        return RouteQuote(path=[normalize_address(t) for t in path], amounts=amounts, hops=hops)

    def get_amounts_out(self, factory: str, amount_in: int, path: Sequence[str]) -> list[int]:
        """Amounts at every node of path when selling amount_in of path[0]."""
        return self.quote_exact_input(factory, amount_in, path).amounts

    def get_amounts_in(self, factory: str, amount_out: int, path: Sequence[str]) -> list[int]:
        """Amounts at every node of path needed to buy amount_out of path[-1]."""
        return self.quote_exact_output(factory, amount_out, path).amounts

    def _hop(
        self,
        pair: str,
        path: Sequence[str],
        i: int,
        reserve_in: int,
        reserve_out: int,
        amount_in: int,
        amount_out: int,
    ) -> HopQuote:
        hop = HopQuote(
            pair=pair,
            token_in=normalize_address(path[i]),
            token_out=normalize_address(path[i + 1]),
            reserve_in=reserve_in,
            reserve_out=reserve_out,
            amount_in=amount_in,
            amount_out=amount_out,
        )
        logger.debug(
            "hop_quoted",
            hop=i,
            pair=hop.pair,
            amount_in=amount_in,
            amount_out=amount_out,
        )
        return hop


def _check_path(path: Sequence[str]) -> None:
    if len(path) < 2:
        raise InvalidPathError(f"Path needs at least 2 tokens, got {len(path)}")


def get_amounts_out(
    reserve_source: ReserveSource,
    factory: str,
    amount_in: int,
    path: Sequence[str],
    init_code_hash: str | bytes = INIT_CODE_HASH,
) -> list[int]:
    """Chain get_amount_out along path, returning the amount at each node.

    Raises:
        InvalidPathError: If path has fewer than two tokens
        Any single-hop error, aborting the whole chain
    """
    return MultihopQuoter(reserve_source, init_code_hash).get_amounts_out(factory, amount_in, path)


def get_amounts_in(
    reserve_source: ReserveSource,
    factory: str,
    amount_out: int,
    path: Sequence[str],
    init_code_hash: str | bytes = INIT_CODE_HASH,
) -> list[int]:
    """Chain get_amount_in backward along path, returning the amount at each node.

    Raises:
        InvalidPathError: If path has fewer than two tokens
        Any single-hop error, aborting the whole chain
    """
    return MultihopQuoter(reserve_source, init_code_hash).get_amounts_in(factory, amount_out, path)


__all__ = ["MultihopQuoter", "get_amounts_out", "get_amounts_in"]
