"""
marlowe: resolve deployment network configuration from the environment
"""

from importlib.metadata import PackageNotFoundError, version

from .environment import snapshot_environment
from .exceptions import (
    DuplicateNetworkError,
    EnvFileNotFoundError,
    InvalidPrivateKeyError,
    MarloweError,
    OutputWriteError,
    UnknownNetworkError,
)
from .models import (
    EtherscanSettings,
    GasReporterSettings,
    NetworkProfile,
    NetworkSpec,
    ProjectConfig,
)
from .resolver import resolve, resolve_project

try:
    __version__ = version("marlowe")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "resolve",
    "resolve_project",
    "snapshot_environment",
    "NetworkSpec",
    "NetworkProfile",
    "GasReporterSettings",
    "EtherscanSettings",
    "ProjectConfig",
    "MarloweError",
    "DuplicateNetworkError",
    "UnknownNetworkError",
    "InvalidPrivateKeyError",
    "EnvFileNotFoundError",
    "OutputWriteError",
]
