"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used by the server and tools (e.g.
AZ_CLI_PATH, the default storage account/container/SAS token, LOG_LEVEL).
"""

from __future__ import annotations

import logging
import os


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip()


def _env_log_level(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


# Azure CLI executable
AZ_CLI_PATH = _env_str("AZ_CLI_PATH", "az") or "az"

# Storage defaults used by the MCP tools when a call omits them
AZURE_STORAGE_ACCOUNT = _env_str("AZURE_STORAGE_ACCOUNT", "")
AZURE_STORAGE_CONTAINER = _env_str("AZURE_STORAGE_CONTAINER", "")
AZURE_STORAGE_SAS_TOKEN = _env_str("AZURE_STORAGE_SAS_TOKEN", "")

# Logging
LOG_LEVEL = _env_log_level("LOG_LEVEL", logging.INFO)
