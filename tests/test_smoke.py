#!/usr/bin/env python3
"""Smoke tests for Marlowe to verify basic functionality."""


def test_imports():
    """Test that all modules can be imported."""
    import marlowe
    from marlowe import accounts, cli, config, environment, exceptions, models, resolver, utils

    assert marlowe.resolve is resolver.resolve


def test_cli_initialization():
    """Test that CLI can be initialized."""
    from marlowe.cli import MarloweCLI
    from marlowe.resolver import resolve_project

    cli = MarloweCLI(resolve_project({}))
    assert set(cli.actions) == {"networks", "show", "export", "accounts"}
    assert hasattr(cli, 'run')


def test_utils_functions():
    """Test that utility functions are callable."""
    from marlowe import utils
    assert callable(utils.print_banner)
    assert callable(utils.error)
    assert callable(utils.warn)
    assert callable(utils.info)
    assert callable(utils.success)


def test_mask_secret():
    from marlowe.utils import mask_secret

    assert mask_secret(None) == "<unset>"
    assert mask_secret("") == "<unset>"
    assert mask_secret("short") == "*****"
    assert mask_secret("0123456789") == "******6789"


def test_config():
    """Test that config module is accessible."""
    from marlowe import config
    assert [spec.name for spec in config.DEFAULT_NETWORKS] == ["ropsten", "rinkeby", "polygon", "polygonMumbai", "mainnet"]
    assert config.get_network_spec("mainnet").url_var == "MAINNET_URL"
    assert config.get_network_spec("goerli") is None
    assert "PRIVATE_KEY" in config.list_environment_variables()


def test_entry_point():
    """Test that the main entry point can be imported."""
    from marlowe.cli import main
    assert callable(main)


def test_mask_url():
    from marlowe.utils import mask_url

    assert mask_url("") == ""
    assert mask_url("https://rpc.example/path") == "https://rpc.example/path"
    assert mask_url("https://eth.alchemy.com/v2/abcdefghijklmnop1234") == (
        "https://eth.alchemy.com/v2/" + "*" * 16 + "1234"
    )
