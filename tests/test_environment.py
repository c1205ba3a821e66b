"""Tests for environment snapshots and .env loading."""

import pytest

from marlowe.environment import load_env_file, snapshot_environment
from marlowe.exceptions import EnvFileNotFoundError


def test_snapshot_of_explicit_environ(isolated_cwd):
    env = snapshot_environment({"MAINNET_URL": "https://mainnet.example"})

    assert dict(env) == {"MAINNET_URL": "https://mainnet.example"}


def test_snapshot_is_read_only(isolated_cwd):
    env = snapshot_environment({"A": "1"})

    with pytest.raises(TypeError):
        env["A"] = "2"


def test_snapshot_is_detached_from_source(isolated_cwd):
    source = {"A": "1"}
    env = snapshot_environment(source)
    source["A"] = "2"

    assert env["A"] == "1"


def test_snapshot_defaults_to_process_environment(isolated_cwd, monkeypatch):
    monkeypatch.setenv("MARLOWE_TEST_VAR", "from-process")

    env = snapshot_environment()

    assert env["MARLOWE_TEST_VAR"] == "from-process"


def test_env_file_is_read(tmp_path):
    env_file = tmp_path / "custom.env"
    env_file.write_text("MAINNET_URL=https://file.example\nPRIVATE_KEY=0xabc\n")

    env = snapshot_environment({}, env_file=env_file)

    assert env["MAINNET_URL"] == "https://file.example"
    assert env["PRIVATE_KEY"] == "0xabc"


def test_process_environment_overrides_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("MAINNET_URL=https://file.example\n")

    env = snapshot_environment({"MAINNET_URL": "https://process.example"}, env_file=env_file)

    assert env["MAINNET_URL"] == "https://process.example"


def test_env_file_found_in_working_directory(isolated_cwd):
    (isolated_cwd / ".env").write_text("ROPSTEN_URL=https://ropsten.example\n")

    env = snapshot_environment({})

    assert env["ROPSTEN_URL"] == "https://ropsten.example"


def test_env_file_can_be_ignored(isolated_cwd):
    (isolated_cwd / ".env").write_text("ROPSTEN_URL=https://ropsten.example\n")

    env = snapshot_environment({}, use_env_file=False)

    assert "ROPSTEN_URL" not in env


def test_missing_explicit_env_file_raises(tmp_path):
    with pytest.raises(EnvFileNotFoundError):
        load_env_file(tmp_path / "missing.env")


def test_missing_env_file_is_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError):
        snapshot_environment({}, env_file=tmp_path / "missing.env")


def test_no_env_file_found(isolated_cwd):
    assert load_env_file() == {}


def test_bare_names_are_skipped(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("REPORT_GAS\nPRIVATE_KEY=\n")

    values = load_env_file(env_file)

    assert "REPORT_GAS" not in values
    assert values["PRIVATE_KEY"] == ""


def test_env_file_values_are_not_interpolated(tmp_path, monkeypatch):
    monkeypatch.setenv("INFURA_KEY", "from-process")
    env_file = tmp_path / ".env"
    env_file.write_text("MAINNET_URL=https://mainnet.infura.io/v3/${INFURA_KEY}\n")

    env = snapshot_environment({}, env_file=env_file)

    assert env["MAINNET_URL"] == "https://mainnet.infura.io/v3/${INFURA_KEY}"
    assert "INFURA_KEY" not in env
