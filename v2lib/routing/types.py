"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HopQuote:
    """Quote for a single hop of a path."""

    pair: str
    token_in: str
    token_out: str
    reserve_in: int
    reserve_out: int
    amount_in: int
    amount_out: int


@dataclass(frozen=True)
class RouteQuote:
    """Quote for a full path.

    amounts[i] is the amount of path[i] entering (or leaving) hop i, so
    amounts[0] is the total input and amounts[-1] the final output.
    """

    path: list[str]
    amounts: list[int]
    hops: list[HopQuote] = field(default_factory=list)

    @property
    def amount_in(self) -> int:
        return self.amounts[0]

    @property
    def amount_out(self) -> int:
        return self.amounts[-1]

    @property
    def is_multihop(self) -> bool:
        """Check if the route crosses more than one pair."""
        return len(self.path) > 2


__all__ = ["HopQuote", "RouteQuote"]
