"""Server bootstrap for the blob utilities MCP service.

Creates the FastMCP instance, wires one shared Azure CLI client into the
blob tools and starts the MCP server (stdio transport).
"""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from clients.az_cli_client import AzCliClient
from config import AZ_CLI_PATH, LOG_LEVEL

from tools.batch_transfer import register as register_batch_transfer
from tools.blob_transfer import register as register_blob_transfer
from tools.list_blobs import register as register_list_blobs

logger = logging.getLogger(__name__)

mcp = FastMCP("blob-utils-mcp")


def register_tools() -> None:
    az_client = AzCliClient(az_path=AZ_CLI_PATH)

    register_batch_transfer(mcp, az_client=az_client)
    register_blob_transfer(mcp, az_client=az_client)
    register_list_blobs(mcp, az_client=az_client)


register_tools()


def main() -> None:
    # stdout carries the MCP stream, so logs go to stderr
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
        stream=sys.stderr,
    )
    logger.info("Starting blob-utils-mcp (az=%s)", AZ_CLI_PATH)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
