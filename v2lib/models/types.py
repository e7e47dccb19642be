"""Shared type definitions for addresses, hashes and amounts."""

import re
from typing import Annotated, Any

from pydantic import Field

from v2lib.safe_int import UINT256_MAX

ZERO_ADDRESS = "0x" + "00" * 20

_ADDRESS_RE = re.compile(r"0x[a-fA-F0-9]{40}")


def validate_uint256(value: Any) -> int:
    """Validate that a value is a valid uint256.

    Only real ints are accepted; decimal strings, floats and bools are
    rejected rather than converted.

    Args:
        value: Value to validate

    Returns:
        The value, unchanged

    Raises:
        TypeError: If value is not an int (bools included)
        ValueError: If value is negative or exceeds 2^256-1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Uint256 must be int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")

    return value


# Ethereum address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# 32-byte hash, e.g. a contract init code hash
Bytes32 = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{64}$")]


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.
                  If False (default), returns normalized form without validation.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        ValueError: If validate=True and address is not a valid Ethereum address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address.

    Args:
        address: String to validate

    Returns:
        True if valid Ethereum address format
    """
    if not isinstance(address, str):
        return False
    return _ADDRESS_RE.fullmatch(address) is not None


def address_to_bytes(address: str) -> bytes:
    """Convert a 0x-prefixed address to its 20 raw bytes."""
    return bytes.fromhex(address[2:])


def hex_to_bytes32(value: str) -> bytes:
    """Convert a 32-byte hex string (with or without 0x) to bytes.

    Raises:
        ValueError: If the value does not decode to exactly 32 bytes
    """
    raw = bytes.fromhex(value[2:] if value.startswith("0x") else value)
    if len(raw) != 32:
        raise ValueError(f"Expected 32 bytes, got {len(raw)}: {value}")
    return raw
