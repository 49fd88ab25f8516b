"""Parsing of `az storage blob list` JSON output."""

from __future__ import annotations

import json
from typing import Iterable, List

from core.errors import ListError
from core.models import BlobEntry


def parse_blob_listing(lines: Iterable[str]) -> List[BlobEntry]:
    # az may pretty-print the array across many lines; rejoin before decoding
    raw = "\n".join(lines).strip()
    if not raw:
        return []

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ListError(f"Listing output is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise ListError("Listing output is not a JSON array")

    entries: List[BlobEntry] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or not isinstance(item.get("name"), str):
            raise ListError(f"Listing element {i} has no string 'name'")
        props = {k: v for k, v in item.items() if k != "name"}
        entries.append(BlobEntry(name=item["name"], properties=props))
    return entries


def blob_names(entries: Iterable[BlobEntry]) -> List[str]:
    return [e.name for e in entries]
