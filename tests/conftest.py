"""Pytest configuration and shared fixtures."""

import pytest

from marlowe.models import NetworkSpec

# Valid secp256k1 scalar, never use outside tests
TEST_PRIVATE_KEY = "0x" + "11" * 32
OTHER_PRIVATE_KEY = "0x" + "22" * 32


@pytest.fixture
def main_spec():
    """Single mainnet spec used by the literal scenarios."""
    return [NetworkSpec(name="main", url_var="MAINNET_URL", key_var="PRIVATE_KEY")]


@pytest.fixture
def full_env():
    """Environment with every variable Marlowe reads."""
    return {
        "ROPSTEN_URL": "https://ropsten.example",
        "RINKEBY_URL": "https://rinkeby.example",
        "POLYGON_URL": "https://polygon.example",
        "POLYGONMUMBAI_URL": "https://mumbai.example",
        "MAINNET_URL": "https://mainnet.example",
        "PRIVATE_KEY": TEST_PRIVATE_KEY,
        "REPORT_GAS": "true",
        "COINMARKETCAP_API": "cmc-secret-key",
        "ETHERSCAN_API_KEY": "etherscan-secret-key",
    }


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory so no stray .env file is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def private_key():
    return TEST_PRIVATE_KEY


@pytest.fixture
def other_private_key():
    return OTHER_PRIVATE_KEY
