"""Tests for library configuration."""

import pytest
from pydantic import ValidationError

from v2lib.config import DEFAULT_CONFIG, LibraryConfig
from v2lib.constants import INIT_CODE_HASH, UNISWAP_V2_FACTORY
from v2lib.reserves import Web3ReserveSource
from v2lib.routing.multihop import MultihopQuoter
from tests.helpers import TOKEN_A, TOKEN_B, make_reserve_source


class TestLibraryConfig:
    """Tests for LibraryConfig defaults and validation."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.factory == UNISWAP_V2_FACTORY
        assert DEFAULT_CONFIG.init_code_hash == INIT_CODE_HASH
        assert DEFAULT_CONFIG.rpc_url is None

    def test_invalid_factory(self):
        with pytest.raises(ValidationError):
            LibraryConfig(factory="0x1234")

    def test_invalid_init_code_hash(self):
        with pytest.raises(ValidationError):
            LibraryConfig(init_code_hash="0x" + "ab" * 31)

    def test_frozen(self):
        config = LibraryConfig()
        with pytest.raises(ValidationError):
            config.factory = TOKEN_A  # type: ignore[misc]


class TestFromEnv:
    """Tests for environment loading."""

    def test_empty_environment_uses_defaults(self):
        assert LibraryConfig.from_env({}) == DEFAULT_CONFIG

    def test_reads_variables(self):
        config = LibraryConfig.from_env(
            {
                "V2LIB_FACTORY": TOKEN_A,
                "V2LIB_INIT_CODE_HASH": "0x" + "ab" * 32,
                "V2LIB_RPC_URL": "http://localhost:8545",
            }
        )
        assert config.factory == TOKEN_A
        assert config.init_code_hash == "0x" + "ab" * 32
        assert config.rpc_url == "http://localhost:8545"

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("V2LIB_RPC_URL", "http://node:8545")
        assert LibraryConfig.from_env().rpc_url == "http://node:8545"

    def test_invalid_variable(self):
        with pytest.raises(ValidationError):
            LibraryConfig.from_env({"V2LIB_FACTORY": "factory"})


class TestQuoterFromConfig:
    """Tests for building a quoter from configuration."""

    def test_with_explicit_source(self):
        source = make_reserve_source({(TOKEN_A, TOKEN_B): (1000, 1000)})
        quoter = MultihopQuoter.from_config(DEFAULT_CONFIG, reserve_source=source)

        assert quoter.reserve_source is source
        assert quoter.get_amounts_out(DEFAULT_CONFIG.factory, 100, [TOKEN_A, TOKEN_B]) == [100, 90]

    def test_without_source_needs_rpc_url(self):
        with pytest.raises(ValueError):
            MultihopQuoter.from_config(DEFAULT_CONFIG)

    def test_builds_web3_source(self):
        config = LibraryConfig(rpc_url="http://localhost:8545")
        quoter = MultihopQuoter.from_config(config)
        assert isinstance(quoter.reserve_source, Web3ReserveSource)
