"""Data models for Marlowe."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class NetworkSpec:
    """Declares where a network's settings come from."""
    name: str
    url_var: str
    key_var: str


@dataclass(frozen=True)
class NetworkProfile:
    """Resolved connection descriptor for one network."""
    name: str
    url: str = ""
    accounts: Tuple[str, ...] = ()

    @property
    def is_configured(self) -> bool:
        return bool(self.url)

    def to_framework(self) -> Dict[str, Any]:
        return {"url": self.url, "accounts": list(self.accounts)}


@dataclass(frozen=True)
class GasReporterSettings:
    """Gas reporter plugin settings."""
    enabled: bool = False
    currency: str = "USD"
    gas_price: int = 200
    show_time_spent: bool = True
    coinmarketcap: str | None = None

    def to_framework(self) -> Dict[str, Any]:
        return {
            "enabled": self.enabled,
            "currency": self.currency,
            "gasPrice": self.gas_price,
            "showTimeSpent": self.show_time_spent,
            "coinmarketcap": self.coinmarketcap,
        }


@dataclass(frozen=True)
class EtherscanSettings:
    """Block explorer verification settings."""
    api_key: str | None = None

    def to_framework(self) -> Dict[str, Any]:
        return {"apiKey": self.api_key}


@dataclass(frozen=True)
class ProjectConfig:
    """Everything the deployment framework reads from the environment."""
    networks: Mapping[str, NetworkProfile]
    gas_reporter: GasReporterSettings = field(default_factory=GasReporterSettings)
    etherscan: EtherscanSettings = field(default_factory=EtherscanSettings)
    local_network: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    local_network_name: str = "hardhat"

    def network_names(self) -> List[str]:
        return list(self.networks.keys())

    def to_framework(self) -> Dict[str, Any]:
        """
        Build the mapping consumed by the deployment framework.

        The local network comes first and carries only its static options.
        Remote networks follow in declaration order as
        ``{"url": ..., "accounts": [...]}``.
        """
        networks: Dict[str, Any] = {}
        if self.local_network:
            networks[self.local_network_name] = dict(self.local_network)
        for name, profile in self.networks.items():
            networks[name] = profile.to_framework()

        return {
            "networks": networks,
            "gasReporter": self.gas_reporter.to_framework(),
            "etherscan": self.etherscan.to_framework(),
        }
