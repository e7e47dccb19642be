"""Shared types for addresses, hashes and amounts."""

from v2lib.models.types import (
    ZERO_ADDRESS,
    Address,
    Bytes32,
    is_valid_address,
    normalize_address,
    validate_uint256,
)

__all__ = [
    "ZERO_ADDRESS",
    "Address",
    "Bytes32",
    "is_valid_address",
    "normalize_address",
    "validate_uint256",
]
