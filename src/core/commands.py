"""Argument builders for the Azure CLI storage commands.

Every builder is pure: it returns the argv list and never touches the
process table. The SAS token is inserted verbatim, no escaping is done.
"""

from __future__ import annotations

import shlex
from typing import List, Sequence

BLOB_HOST_SUFFIX = "blob.core.windows.net"
REDACTED = "***"


def blob_url(account: str, container: str, path: str = "", token: str = "") -> str:
    # Callers own the trailing "/" on path and the leading "?" on token.
    return f"https://{account}.{BLOB_HOST_SUFFIX}/{container}/{path}{token}"


def batch_download_args(
    *,
    az: str,
    remote_prefix: str,
    local_dir: str,
    account: str,
    container: str,
    token: str,
) -> List[str]:
    source = blob_url(account, container, remote_prefix, token)
    return [az, "storage", "copy", "-s", source, "-d", local_dir, "--recursive"]


def batch_upload_args(
    *,
    az: str,
    remote_prefix: str,
    local_dir: str,
    account: str,
    container: str,
    token: str,
) -> List[str]:
    destination = blob_url(account, container, remote_prefix, token)
    return [az, "storage", "copy", "-d", destination, "-s", local_dir, "--recursive"]


def download_blob_args(
    *,
    az: str,
    remote_blob_path: str,
    local_file_path: str,
    account: str,
    container: str,
    token: str,
) -> List[str]:
    return [
        az, "storage", "blob", "download",
        "-c", container,
        "--account-name", account,
        "-n", remote_blob_path,
        "-f", local_file_path,
        "--sas-token", token,
    ]


def upload_blob_args(
    *,
    az: str,
    local_file_path: str,
    remote_blob_path: str,
    account: str,
    container: str,
    token: str,
    overwrite: bool = False,
) -> List[str]:
    args = [
        az, "storage", "blob", "upload",
        "-c", container,
        "--account-name", account,
        "-n", remote_blob_path,
        "-f", local_file_path,
        "--sas-token", token,
    ]
    if overwrite:
        args.append("--overwrite")
    return args


def list_blobs_args(
    *,
    az: str,
    remote_prefix: str,
    account: str,
    container: str,
    token: str,
) -> List[str]:
    return [
        az, "storage", "blob", "list",
        "-c", container,
        "--account-name", account,
        "--prefix", remote_prefix,
        "--sas-token", token,
        "--num-results", "*",
        "--output", "json",
    ]


def redact(args: Sequence[str], token: str) -> str:
    """Render args as a shell-like string with the SAS token masked.

    Only the value after `--sas-token` and the token suffix of a blob URL are
    replaced; the rest of the command is left as built.
    """
    out: List[str] = []
    mask_next = False
    for a in args:
        if mask_next:
            out.append(REDACTED)
            mask_next = False
        elif a == "--sas-token":
            out.append(a)
            mask_next = True
        elif token and a.startswith("https://") and a.endswith(token):
            out.append(a[: len(a) - len(token)] + REDACTED)
        else:
            out.append(a)
    return shlex.join(out)
