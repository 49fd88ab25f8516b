"""MCP tools that copy a whole blob prefix to or from a local directory.

Registers 'batch_download' and 'batch_upload', both recursive
`az storage copy` runs against the container URL.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from clients.az_cli_client import AzCliClient
from config import AZ_CLI_PATH
from tools.target import resolve_target


def register(mcp: FastMCP, *, az_client: Optional[AzCliClient] = None) -> None:
    client = az_client or AzCliClient(az_path=AZ_CLI_PATH)

    @mcp.tool(name="batch_download")
    async def batch_download(
        remote_prefix: str = "",
        local_dir: str = ".",
        account: Optional[str] = None,
        container: Optional[str] = None,
        token: Optional[str] = None,
    ) -> List[str]:
        """Recursively download every blob under a prefix into a local directory.

        Params:
          - remote_prefix: directory inside the container; must end with "/"
            when given (default: "" for the whole container).
          - local_dir: destination directory (default: ".").
          - account, container, token: storage target; fall back to
            AZURE_STORAGE_ACCOUNT / AZURE_STORAGE_CONTAINER / AZURE_STORAGE_SAS_TOKEN.
            The token is appended to the URL as-is, so include the leading "?".

        Returns:
          The az output lines.

        Raises:
          ValidationError if the target is incomplete; TransferError if az fails.
        """
        target = resolve_target(account, container, token)
        return await asyncio.to_thread(
            client.batch_download,
            remote_prefix,
            local_dir,
            account=target.account,
            container=target.container,
            token=target.token,
        )

    @mcp.tool(name="batch_upload")
    async def batch_upload(
        remote_prefix: str = "",
        local_dir: str = ".",
        account: Optional[str] = None,
        container: Optional[str] = None,
        token: Optional[str] = None,
    ) -> List[str]:
        """Recursively upload a local directory under a prefix in the container.

        Params:
          - remote_prefix: destination directory inside the container; must end
            with "/" when given (default: "").
          - local_dir: source directory (default: ".").
          - account, container, token: as for batch_download.

        Returns:
          The az output lines.

        Raises:
          ValidationError if the target is incomplete; TransferError if az fails.
        """
        target = resolve_target(account, container, token)
        return await asyncio.to_thread(
            client.batch_upload,
            remote_prefix,
            local_dir,
            account=target.account,
            container=target.container,
            token=target.token,
        )
