"""Multi-hop quoting along token paths."""

from v2lib.routing.multihop import MultihopQuoter, get_amounts_in, get_amounts_out
from v2lib.routing.types import HopQuote, RouteQuote

__all__ = [
    "MultihopQuoter",
    "get_amounts_out",
    "get_amounts_in",
    "HopQuote",
    "RouteQuote",
]
