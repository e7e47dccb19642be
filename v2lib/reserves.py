"""Pair reserve lookup.

Reserves live in the pair contracts, outside this library. They are read
through a ReserveSource, which is injected by the caller so the quoting
code can run against fixture reserves in tests and against a node in
production. Reserves are fetched fresh on every call and never cached.
"""

from __future__ import annotations

from typing import Any, Protocol

import structlog
from eth_abi import decode  # type: ignore[attr-defined]
from eth_utils import to_checksum_address

from v2lib.constants import GET_RESERVES_SELECTOR, INIT_CODE_HASH
from v2lib.errors import PairNotFoundError
from v2lib.models.types import normalize_address
from v2lib.pairs import pair_for, sort_tokens
from v2lib.safe_int import UINT32_MAX, UINT112_MAX

logger = structlog.get_logger()


class ReserveSource(Protocol):
    """Read-only view of pair reserves.

    This allows swapping between a real RPC-backed source and in-memory
    fixtures for testing.
    """

    def get_reserves(self, pair: str) -> tuple[int, int, int]:
        """Get the stored reserves of a pair.

        Args:
            pair: Pair contract address

        Returns:
            (reserve0, reserve1, block_timestamp_last) in canonical token order

        Raises:
            PairNotFoundError: If nothing is known at the address
        """
        ...


class InMemoryReserveSource:
    """Reserve source backed by a dict, for tests and offline quoting.

    Configure pairs with set_reserves(), and track calls for assertions.
    """

    def __init__(self, init_code_hash: str | bytes = INIT_CODE_HASH) -> None:
        self.init_code_hash = init_code_hash
        self._reserves: dict[str, tuple[int, int, int]] = {}
        self.calls: list[str] = []

    def set_reserves(
        self,
        factory: str,
        token_a: str,
        token_b: str,
        reserve_a: int,
        reserve_b: int,
        block_timestamp_last: int = 0,
    ) -> str:
        """Store reserves for the pair of token_a and token_b.

        Reserves are given in (token_a, token_b) order and stored in
        canonical order, the way the pair contract keeps them.

        Returns:
            The derived pair address
        """
        for reserve in (reserve_a, reserve_b):
            if not 0 <= reserve <= UINT112_MAX:
                raise ValueError(f"Reserve out of uint112 range: {reserve}")
        if not 0 <= block_timestamp_last <= UINT32_MAX:
            raise ValueError(f"Timestamp out of uint32 range: {block_timestamp_last}")

        token0, _ = sort_tokens(token_a, token_b)
        pair = pair_for(factory, token_a, token_b, self.init_code_hash)
        if normalize_address(token_a) == token0:
            self._reserves[pair] = (reserve_a, reserve_b, block_timestamp_last)
        else:
            self._reserves[pair] = (reserve_b, reserve_a, block_timestamp_last)
        return pair

    def get_reserves(self, pair: str) -> tuple[int, int, int]:
        pair = normalize_address(pair)
        self.calls.append(pair)
        try:
            return self._reserves[pair]
        except KeyError:
            raise PairNotFoundError(f"No reserves known for pair {pair}") from None


class Web3ReserveSource:
    """Reserve source that calls getReserves() on the pair via RPC.

    This makes actual eth_call requests; nothing is retried or cached.
    """

    def __init__(self, web3_provider: str | None = None, *, w3: Any = None) -> None:
        """Initialize with an RPC URL or an existing Web3 instance.

        Args:
            web3_provider: HTTP RPC URL (e.g., "https://eth.llamarpc.com")
            w3: Pre-built Web3 instance, used instead of web3_provider
        """
        if w3 is None:
            if web3_provider is None:
                raise ValueError("Either web3_provider or w3 is required")
            try:
                from web3 import Web3
            except ImportError as e:
                raise ImportError(
                    "web3 package required for Web3ReserveSource. Install with: pip install web3"
                ) from e
            w3 = Web3(Web3.HTTPProvider(web3_provider))
        self.w3 = w3

    def get_reserves(self, pair: str) -> tuple[int, int, int]:
        try:
            raw = self.w3.eth.call(
                {"to": to_checksum_address(pair), "data": GET_RESERVES_SELECTOR}
            )
        except Exception as e:
            logger.warning("reserve_fetch_failed", pair=pair, error=str(e))
            raise

        if not raw:
            raise PairNotFoundError(f"No pair deployed at {pair}")

        reserve0, reserve1, block_timestamp_last = decode(
            ["uint112", "uint112", "uint32"], bytes(raw)
        )
        return int(reserve0), int(reserve1), int(block_timestamp_last)


def get_reserves(
    reserve_source: ReserveSource,
    factory: str,
    token_a: str,
    token_b: str,
    init_code_hash: str | bytes = INIT_CODE_HASH,
) -> tuple[int, int]:
    """Fetch a pair's reserves ordered as (reserve_a, reserve_b).

    Args:
        reserve_source: Where to read pair reserves from
        factory: Factory address the pair was deployed by
        token_a: Token whose reserve is returned first
        token_b: Token whose reserve is returned second
        init_code_hash: Pair bytecode hash used for address derivation

    Returns:
        (reserve_a, reserve_b) matching the argument order

    Raises:
        Address errors from sort_tokens, and whatever the source raises
    """
    _, reserve_a, reserve_b = get_pair_reserves(
        reserve_source, factory, token_a, token_b, init_code_hash
    )
    return reserve_a, reserve_b


def get_pair_reserves(
    reserve_source: ReserveSource,
    factory: str,
    token_a: str,
    token_b: str,
    init_code_hash: str | bytes = INIT_CODE_HASH,
) -> tuple[str, int, int]:
    """Like get_reserves, but also return the derived pair address.

    Returns:
        (pair, reserve_a, reserve_b)
    """
    token0, _ = sort_tokens(token_a, token_b)
    pair = pair_for(factory, token_a, token_b, init_code_hash)
    reserve0, reserve1, _ = reserve_source.get_reserves(pair)

    if normalize_address(token_a) == token0:
        reserve_a, reserve_b = reserve0, reserve1
    else:
        reserve_a, reserve_b = reserve1, reserve0

    logger.debug(
        "reserves_fetched",
        pair=pair,
        token_a=normalize_address(token_a),
        token_b=normalize_address(token_b),
        reserve_a=reserve_a,
        reserve_b=reserve_b,
    )
    return pair, reserve_a, reserve_b


__all__ = [
    "ReserveSource",
    "InMemoryReserveSource",
    "Web3ReserveSource",
    "get_reserves",
    "get_pair_reserves",
]
