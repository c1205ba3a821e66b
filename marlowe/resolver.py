"""Network configuration resolver.

Maps an environment snapshot to per-network connection descriptors. Missing
variables never raise: an unset endpoint resolves to ``""`` and an unset or
empty signing key resolves to no accounts, so only the network actually used
for a live operation fails, and it fails inside the deployment framework.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Sequence

from marlowe import config
from marlowe.exceptions import DuplicateNetworkError
from marlowe.models import (
    EtherscanSettings,
    GasReporterSettings,
    NetworkProfile,
    NetworkSpec,
    ProjectConfig,
)


def _non_empty(env: Mapping[str, str], key: str) -> Optional[str]:
    value = env.get(key)
    return value if value else None


def check_unique_names(specs: Iterable[NetworkSpec]) -> None:
    """Raise DuplicateNetworkError if two specs share a name."""
    seen = set()
    for spec in specs:
        if spec.name in seen:
            raise DuplicateNetworkError(f"Network {spec.name!r} is declared more than once")
        seen.add(spec.name)


def resolve_network(env: Mapping[str, str], spec: NetworkSpec) -> NetworkProfile:
    """Resolve a single network from the environment."""
    url = env.get(spec.url_var, "")
    key = _non_empty(env, spec.key_var)
    accounts = (key,) if key is not None else ()
    return NetworkProfile(name=spec.name, url=url, accounts=accounts)


def resolve(
    env: Mapping[str, str],
    network_specs: Sequence[NetworkSpec] = config.DEFAULT_NETWORKS,
) -> Mapping[str, NetworkProfile]:
    """
    Resolve every network spec against an environment snapshot.

    Args:
        env: Environment variables, usually from snapshot_environment()
        network_specs: Networks to resolve, in output order

    Returns:
        Read-only mapping from network name to NetworkProfile

    Raises:
        DuplicateNetworkError: If network_specs repeats a name
    """
    check_unique_names(network_specs)
    profiles: Dict[str, NetworkProfile] = {
        spec.name: resolve_network(env, spec) for spec in network_specs
    }
    return MappingProxyType(profiles)


def resolve_gas_reporter(env: Mapping[str, str]) -> GasReporterSettings:
    # Presence alone enables reporting, REPORT_GAS="" included
    return GasReporterSettings(
        enabled=config.REPORT_GAS_VAR in env,
        currency=config.GAS_REPORTER_CURRENCY,
        gas_price=config.GAS_REPORTER_GAS_PRICE,
        show_time_spent=config.GAS_REPORTER_SHOW_TIME_SPENT,
        coinmarketcap=_non_empty(env, config.COINMARKETCAP_API_VAR),
    )


def resolve_etherscan(env: Mapping[str, str]) -> EtherscanSettings:
    return EtherscanSettings(api_key=_non_empty(env, config.ETHERSCAN_API_KEY_VAR))


def resolve_project(
    env: Mapping[str, str],
    network_specs: Sequence[NetworkSpec] = config.DEFAULT_NETWORKS,
) -> ProjectConfig:
    """Resolve networks and plugin settings into one ProjectConfig."""
    return ProjectConfig(
        networks=resolve(env, network_specs),
        gas_reporter=resolve_gas_reporter(env),
        etherscan=resolve_etherscan(env),
        local_network=config.LOCAL_NETWORK,
        local_network_name=config.LOCAL_NETWORK_NAME,
    )
