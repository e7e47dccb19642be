"""Library configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from v2lib.constants import INIT_CODE_HASH, UNISWAP_V2_FACTORY
from v2lib.models.types import Address, Bytes32

# Environment variables read by LibraryConfig.from_env()
ENV_FACTORY = "V2LIB_FACTORY"
ENV_INIT_CODE_HASH = "V2LIB_INIT_CODE_HASH"
ENV_RPC_URL = "V2LIB_RPC_URL"


class LibraryConfig(BaseModel):
    """Which factory deployment to address, and where to read reserves.

    Forks of UniswapV2 deploy their own factory with their own pair
    bytecode, so both values must match for derived pair addresses to be
    correct.

    Attributes:
        factory: Factory (pair deployer) address
        init_code_hash: keccak256 of the pair creation bytecode
        rpc_url: HTTP RPC endpoint for on-chain reserve reads (optional)
    """

    model_config = ConfigDict(frozen=True)

    factory: Address = UNISWAP_V2_FACTORY
    init_code_hash: Bytes32 = INIT_CODE_HASH
    rpc_url: str | None = Field(default=None, min_length=1)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LibraryConfig:
        """Load configuration from environment variables.

        - V2LIB_FACTORY: factory address (default: UniswapV2 mainnet)
        - V2LIB_INIT_CODE_HASH: pair init code hash (default: UniswapV2 mainnet)
        - V2LIB_RPC_URL: RPC endpoint (default: unset)

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if ENV_FACTORY in env:
            values["factory"] = env[ENV_FACTORY]
        if ENV_INIT_CODE_HASH in env:
            values["init_code_hash"] = env[ENV_INIT_CODE_HASH]
        if ENV_RPC_URL in env:
            values["rpc_url"] = env[ENV_RPC_URL]
        return cls.model_validate(values)


# Default configuration instance
DEFAULT_CONFIG = LibraryConfig()
