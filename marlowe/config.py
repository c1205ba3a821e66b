#!/usr/bin/env python3
"""
Configuration module for Marlowe.
Declares the deployment networks and the environment variables they read.
Values are never read here; see marlowe.environment for the snapshot.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from marlowe.models import NetworkSpec

# Shared signing credential for every remote network
PRIVATE_KEY_VAR = "PRIVATE_KEY"

# Plugin switches and API keys
REPORT_GAS_VAR = "REPORT_GAS"
COINMARKETCAP_API_VAR = "COINMARKETCAP_API"
ETHERSCAN_API_KEY_VAR = "ETHERSCAN_API_KEY"


# Remote deployment targets in declaration order
# Structure: (name, endpoint variable)
_REMOTE_NETWORKS: List[Tuple[str, str]] = [
    ("ropsten", "ROPSTEN_URL"),
    ("rinkeby", "RINKEBY_URL"),
    ("polygon", "POLYGON_URL"),
    ("polygonMumbai", "POLYGONMUMBAI_URL"),
    ("mainnet", "MAINNET_URL"),
]

DEFAULT_NETWORKS: Tuple[NetworkSpec, ...] = tuple(
    NetworkSpec(name=name, url_var=url_var, key_var=PRIVATE_KEY_VAR)
    for name, url_var in _REMOTE_NETWORKS
)


# In-process development network, no endpoint and no accounts
LOCAL_NETWORK_NAME = "hardhat"
LOCAL_NETWORK: Mapping[str, Any] = MappingProxyType({
    "initialBaseFeePerGas": 0,  # solidity-coverage issue 652
})


# Gas reporter constants
GAS_REPORTER_CURRENCY = "USD"
GAS_REPORTER_GAS_PRICE = 200
GAS_REPORTER_SHOW_TIME_SPENT = True


def get_network_spec(
    name: str,
    specs: Tuple[NetworkSpec, ...] = DEFAULT_NETWORKS
) -> Optional[NetworkSpec]:
    """
    Get the spec for a network by name.

    Args:
        name: Network name (e.g., "mainnet", "polygonMumbai")
        specs: Specs to search, defaults to the built-in table

    Returns:
        NetworkSpec, or None if not found
    """
    for spec in specs:
        if spec.name == name:
            return spec
    return None


def list_environment_variables() -> Dict[str, str]:
    """Map every environment variable Marlowe reads to what it controls."""
    variables = {spec.url_var: f"{spec.name} endpoint" for spec in DEFAULT_NETWORKS}
    variables[PRIVATE_KEY_VAR] = "signing key for all remote networks"
    variables[REPORT_GAS_VAR] = "enables the gas reporter when set"
    variables[COINMARKETCAP_API_VAR] = "gas reporter price lookup"
    variables[ETHERSCAN_API_KEY_VAR] = "block explorer verification"
    return variables
