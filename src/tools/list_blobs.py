"""MCP tool that lists blob names under a prefix.

Registers 'list_blobs', which returns names in the order az reports them.
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

    @mcp.tool(name="list_blobs")
    async def list_blobs(
        remote_prefix: str = "",
        account: Optional[str] = None,
        container: Optional[str] = None,
        token: Optional[str] = None,
    ) -> List[str]:
        """List the names of all blobs under a prefix.

        Params:
          - remote_prefix: directory inside the container (default: "").
          - account, container, token: storage target; fall back to configuration.

        Returns:
          Blob names, unsorted, in provider order. The listing is not capped
          (az is run with --num-results "*").

        Raises:
          ValidationError if the target is incomplete; ListError if az fails
          or its output is not a JSON array of named blobs.
        """
        target = resolve_target(account, container, token)
        return await asyncio.to_thread(
            client.list_blobs,
            remote_prefix,
            account=target.account,
            container=target.container,
            token=target.token,
        )
