"""Environment snapshot for Marlowe."""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from dotenv import dotenv_values, find_dotenv

from marlowe.exceptions import EnvFileNotFoundError


def load_env_file(env_file: Optional[Union[str, Path]] = None) -> Dict[str, str]:
    """
    Read variables from a .env file without touching os.environ.

    Args:
        env_file: Explicit path. When omitted, a .env file is searched for
            from the current working directory upwards.

    Returns:
        Variables defined in the file. Bare names without ``=`` are skipped.

    Raises:
        EnvFileNotFoundError: If an explicit path does not exist
    """
    if env_file is None:
        path = find_dotenv(usecwd=True)
        if not path:
            return {}
    else:
        path = str(env_file)
        if not os.path.isfile(path):
            raise EnvFileNotFoundError(f"Env file not found: {path}")

    # Values are taken literally, ${VAR} references are not expanded
    values = dotenv_values(path, interpolate=False)
    return {key: value for key, value in values.items() if value is not None}


def snapshot_environment(
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[Union[str, Path]] = None,
    use_env_file: bool = True,
) -> Mapping[str, str]:
    """
    Take a read-only snapshot of the configuration environment.

    Values from the .env file are overlaid by the real environment, so an
    exported variable always wins over the file.

    Args:
        environ: Environment to snapshot, defaults to os.environ
        env_file: Optional explicit .env path
        use_env_file: Set to False to ignore .env files entirely

    Returns:
        Immutable mapping from variable name to value
    """
    values: Dict[str, str] = {}
    if use_env_file:
        values.update(load_env_file(env_file))
    values.update(os.environ if environ is None else environ)
    return MappingProxyType(values)
