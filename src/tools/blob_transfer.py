"""MCP tools that move a single blob.

Registers 'download_blob' and 'upload_blob', which address one blob by
name with `az storage blob download|upload`.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from clients.az_cli_client import AzCliClient
from config import AZ_CLI_PATH
from core.errors import ValidationError
from tools.target import resolve_target


def _require(value: str, what: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Missing {what}")
    return value


def register(mcp: FastMCP, *, az_client: Optional[AzCliClient] = None) -> None:
    client = az_client or AzCliClient(az_path=AZ_CLI_PATH)

    @mcp.tool(name="download_blob")
    async def download_blob(
        remote_blob_path: str = "",
        local_file_path: str = "",
        account: Optional[str] = None,
        container: Optional[str] = None,
        token: Optional[str] = None,
    ) -> List[str]:
        """Download one blob to a local file.

        Params:
          - remote_blob_path: blob name inside the container (required).
          - local_file_path: destination file (required).
          - account, container, token: storage target; fall back to configuration.

        Returns:
          The az output lines.

        Raises:
          ValidationError for missing inputs; TransferError if az fails.
        """
        _require(remote_blob_path, "remote blob path")
        _require(local_file_path, "local file path")
        target = resolve_target(account, container, token)
        return await asyncio.to_thread(
            client.download_blob,
            remote_blob_path,
            local_file_path,
            account=target.account,
            container=target.container,
            token=target.token,
        )

    @mcp.tool(name="upload_blob")
    async def upload_blob(
        local_file_path: str = "",
        remote_blob_path: str = "",
        account: Optional[str] = None,
        container: Optional[str] = None,
        token: Optional[str] = None,
        overwrite: bool = False,
    ) -> List[str]:
        """Upload one local file as a blob.

        Params:
          - local_file_path: source file (required).
          - remote_blob_path: blob name inside the container (required).
          - account, container, token: storage target; fall back to configuration.
          - overwrite: replace an existing blob (default: False).

        Returns:
          The az output lines.

        Raises:
          ValidationError for missing inputs; TransferError if az fails.
        """
        _require(local_file_path, "local file path")
        _require(remote_blob_path, "remote blob path")
        target = resolve_target(account, container, token)
        return await asyncio.to_thread(
            client.upload_blob,
            local_file_path,
            remote_blob_path,
            account=target.account,
            container=target.container,
            token=target.token,
            overwrite=overwrite,
        )
