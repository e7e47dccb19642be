"""Canonical token ordering and deterministic pair address derivation.

UniswapV2 factories deploy every pair with CREATE2, salting the deployment
with the sorted token addresses. The pair address for any two tokens can
therefore be computed off-chain, without asking the factory:

    salt = keccak256(token0 ++ token1)
    pair = keccak256(0xff ++ factory ++ salt ++ init_code_hash)[12:]
"""

from __future__ import annotations

import structlog
from eth_abi.packed import encode_packed
from eth_utils import keccak

from v2lib.constants import CREATE2_PREFIX, INIT_CODE_HASH
from v2lib.errors import IdenticalAssetsError, InvalidAddressError, ZeroAddressError
from v2lib.models.types import (
    ZERO_ADDRESS,
    address_to_bytes,
    hex_to_bytes32,
    is_valid_address,
    normalize_address,
)

logger = structlog.get_logger()


def _checked_address(name: str, address: str) -> str:
    if not isinstance(address, str):
        raise InvalidAddressError(f"{name} must be a hex string, got {type(address).__name__}")
    addr = normalize_address(address)
    if not is_valid_address(addr):
        raise InvalidAddressError(f"Invalid {name} address: {address}")
    return addr


def sort_tokens(token_a: str, token_b: str) -> tuple[str, str]:
    """Return the pair's tokens in canonical (token0, token1) order.

    Tokens are ordered by numeric value; for fixed-width lowercase hex
    strings that is the same as string order.

    Args:
        token_a: First token address
        token_b: Second token address

    Returns:
        Normalized (token0, token1) with token0 < token1

    Raises:
        InvalidAddressError: If either input is not a 20-byte hex address
        IdenticalAssetsError: If both inputs name the same token
        ZeroAddressError: If token0 is the zero address
    """
    addr_a = _checked_address("token_a", token_a)
    addr_b = _checked_address("token_b", token_b)

    if addr_a == addr_b:
        raise IdenticalAssetsError(f"Identical addresses: {addr_a}")

    token0, token1 = (addr_a, addr_b) if addr_a < addr_b else (addr_b, addr_a)
    if token0 == ZERO_ADDRESS:
        raise ZeroAddressError(f"Zero address in pair with {token1}")

    return token0, token1


def compute_create2_address(deployer: str, salt: bytes, init_code_hash: str | bytes) -> str:
    """Compute the address a CREATE2 deployment will land at.

    Args:
        deployer: Address of the deploying contract
        salt: 32-byte salt
        init_code_hash: keccak256 of the creation bytecode (hex or raw bytes)

    Returns:
        Lowercase 0x-prefixed address (the low 20 bytes of the hash)
    """
    deployer_bytes = address_to_bytes(_checked_address("deployer", deployer))
    if len(salt) != 32:
        raise ValueError(f"CREATE2 salt must be 32 bytes, got {len(salt)}")
    if isinstance(init_code_hash, str):
        init_code_hash = hex_to_bytes32(init_code_hash)
    elif len(init_code_hash) != 32:
        raise ValueError(f"Init code hash must be 32 bytes, got {len(init_code_hash)}")

    digest = keccak(CREATE2_PREFIX + deployer_bytes + salt + init_code_hash)
    return "0x" + digest[12:].hex()


def pair_salt(token0: str, token1: str) -> bytes:
    """CREATE2 salt for an already sorted pair: keccak256(abi.encodePacked(token0, token1))."""
    return keccak(encode_packed(["address", "address"], [token0, token1]))


def pair_for(
    factory: str,
    token_a: str,
    token_b: str,
    init_code_hash: str | bytes = INIT_CODE_HASH,
) -> str:
    """Compute the pair address for two tokens without any external call.

    The result does not depend on argument order.

    Args:
        factory: Factory (pair deployer) address
        token_a: First token address
        token_b: Second token address
        init_code_hash: Pair bytecode hash (defaults to mainnet UniswapV2)

    Returns:
        Lowercase 0x-prefixed pair address

    Raises:
        InvalidAddressError: If any address is malformed
        IdenticalAssetsError: If token_a and token_b are the same token
        ZeroAddressError: If the sorted token0 is the zero address
    """
    token0, token1 = sort_tokens(token_a, token_b)
    pair = compute_create2_address(factory, pair_salt(token0, token1), init_code_hash)

    logger.debug(
        "pair_address_computed",
        factory=normalize_address(factory),
        token0=token0,
        token1=token1,
        pair=pair,
    )
    return pair


__all__ = [
    "sort_tokens",
    "compute_create2_address",
    "pair_salt",
    "pair_for",
]
