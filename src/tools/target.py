"""Resolution of the storage target shared by every blob tool.

Explicit tool arguments win; missing values fall back to the configured
AZURE_STORAGE_* defaults. The token is passed through untouched.
"""

from __future__ import annotations

from typing import Optional

import config
from core.errors import ValidationError
from core.models import StorageTarget


def resolve_target(
    account: Optional[str] = None,
    container: Optional[str] = None,
    token: Optional[str] = None,
) -> StorageTarget:
    acct = (account or "").strip() or config.AZURE_STORAGE_ACCOUNT
    cont = (container or "").strip() or config.AZURE_STORAGE_CONTAINER
    tok = token if token else config.AZURE_STORAGE_SAS_TOKEN

    if not acct:
        raise ValidationError("Missing storage account (argument or AZURE_STORAGE_ACCOUNT)")
    if not cont:
        raise ValidationError("Missing container (argument or AZURE_STORAGE_CONTAINER)")
    if not tok:
        raise ValidationError("Missing SAS token (argument or AZURE_STORAGE_SAS_TOKEN)")

    return StorageTarget(account=acct, container=cont, token=tok)
