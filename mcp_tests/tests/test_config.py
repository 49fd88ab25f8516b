import importlib
import logging

import pytest

import config


@pytest.fixture(autouse=True)
def _reload_config_after(monkeypatch):
    yield
    monkeypatch.undo()
    importlib.reload(config)


def test_config_defaults(monkeypatch):
    for name in ("AZ_CLI_PATH", "AZURE_STORAGE_ACCOUNT", "AZURE_STORAGE_CONTAINER", "AZURE_STORAGE_SAS_TOKEN", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    mod = importlib.reload(config)
    assert mod.AZ_CLI_PATH == "az"
    assert mod.AZURE_STORAGE_ACCOUNT == ""
    assert mod.LOG_LEVEL == logging.INFO


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("AZ_CLI_PATH", " /opt/az/bin/az ")
    monkeypatch.setenv("AZURE_STORAGE_ACCOUNT", "acct")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    mod = importlib.reload(config)
    assert mod.AZ_CLI_PATH == "/opt/az/bin/az"
    assert mod.AZURE_STORAGE_ACCOUNT == "acct"
    assert mod.LOG_LEVEL == logging.DEBUG


def test_config_invalid_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert importlib.reload(config).LOG_LEVEL == logging.INFO
