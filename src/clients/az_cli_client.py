"""Azure CLI client: batch copy, single-blob transfer and listing.

Wraps `az storage ...` commands behind five blocking methods. Each method
builds an argument vector, runs it once through the injected runner and
maps any failure (non-zero exit or a process that could not start) to the
operation's error kind. There is no retry and no partial-result recovery.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Type

from core import commands
from core.errors import CommandError, ListError, TransferError
from core.interfaces import CommandRunner
from core.listing import blob_names, parse_blob_listing
from core.models import CommandResult
from core.runner import run_command

logger = logging.getLogger(__name__)

_STDERR_LOG_CHARS = 500


class AzCliClient:
    """Blocking facade over the Azure CLI storage commands.

    Purpose:
      - batch_download(remote_prefix, local_dir, ...) -> List[str]
      - batch_upload(remote_prefix, local_dir, ...) -> List[str]
      - download_blob(remote_blob_path, local_file_path, ...) -> List[str]
      - upload_blob(local_file_path, remote_blob_path, ...) -> List[str]
      - list_blobs(remote_prefix, ...) -> List[str]

    Transfer methods return the captured stdout lines. `list_blobs` returns
    blob names in the order the provider returned them.
    """

    def __init__(self, *, az_path: str = "az", runner: Optional[CommandRunner] = None) -> None:
        self._az = (az_path or "az").strip() or "az"
        self._runner = runner or run_command

    def batch_download(
        self,
        remote_prefix: str = "",
        local_dir: str = ".",
        *,
        account: str,
        container: str,
        token: str,
    ) -> List[str]:
        args = commands.batch_download_args(
            az=self._az,
            remote_prefix=remote_prefix,
            local_dir=local_dir,
            account=account,
            container=container,
            token=token,
        )
        result = self._run(args, token=token, error_cls=TransferError, action="download the blobs")
        logger.info("Downloaded %s/%s%s -> %s", account, container, remote_prefix, local_dir)
        return result.stdout_lines

    def batch_upload(
        self,
        remote_prefix: str = "",
        local_dir: str = ".",
        *,
        account: str,
        container: str,
        token: str,
    ) -> List[str]:
        args = commands.batch_upload_args(
            az=self._az,
            remote_prefix=remote_prefix,
            local_dir=local_dir,
            account=account,
            container=container,
            token=token,
        )
        result = self._run(args, token=token, error_cls=TransferError, action="upload the blobs")
        logger.info("Uploaded %s -> %s/%s%s", local_dir, account, container, remote_prefix)
        return result.stdout_lines

    def download_blob(
        self,
        remote_blob_path: str,
        local_file_path: str,
        *,
        account: str,
        container: str,
        token: str,
    ) -> List[str]:
        args = commands.download_blob_args(
            az=self._az,
            remote_blob_path=remote_blob_path,
            local_file_path=local_file_path,
            account=account,
            container=container,
            token=token,
        )
        result = self._run(args, token=token, error_cls=TransferError, action=f"download blob '{remote_blob_path}'")
        logger.info("Downloaded blob %s/%s -> %s", container, remote_blob_path, local_file_path)
        return result.stdout_lines

    def upload_blob(
        self,
        local_file_path: str,
        remote_blob_path: str,
        *,
        account: str,
        container: str,
        token: str,
        overwrite: bool = False,
    ) -> List[str]:
        args = commands.upload_blob_args(
            az=self._az,
            local_file_path=local_file_path,
            remote_blob_path=remote_blob_path,
            account=account,
            container=container,
            token=token,
            overwrite=overwrite,
        )
        result = self._run(args, token=token, error_cls=TransferError, action=f"upload blob '{remote_blob_path}'")
        logger.info("Uploaded %s -> blob %s/%s", local_file_path, container, remote_blob_path)
        return result.stdout_lines

    def list_blobs(
        self,
        remote_prefix: str = "",
        *,
        account: str,
        container: str,
        token: str,
    ) -> List[str]:
        """List blob names under `remote_prefix`, in provider order."""
        args = commands.list_blobs_args(
            az=self._az,
            remote_prefix=remote_prefix,
            account=account,
            container=container,
            token=token,
        )
        result = self._run(args, token=token, error_cls=ListError, action="list the directory")

        names = blob_names(parse_blob_listing(result.stdout_lines))
        logger.info("Listed %d blobs under %s/%s", len(names), container, remote_prefix)
        return names

    # --- Internal execution ---
    def _run(
        self,
        args: Sequence[str],
        *,
        token: str,
        error_cls: Type[CommandError],
        action: str,
    ) -> CommandResult:
        rendered = commands.redact(args, token)
        logger.debug("Running: %s", rendered)

        try:
            result = self._runner(args)
        except OSError as e:
            logger.error("Could not start %s: %s", self._az, e)
            raise error_cls(f"Failed to {action}: could not run '{self._az}': {e}") from e

        if not result.ok:
            stderr = result.stderr.replace(token, commands.REDACTED) if token else result.stderr
            logger.error(
                "Command failed (exit code %d): %s\n%s",
                result.returncode,
                rendered,
                stderr[:_STDERR_LOG_CHARS],
            )
            raise error_cls(
                f"Failed to {action} (exit code {result.returncode})",
                returncode=result.returncode,
                stderr=stderr,
            )

        return result
