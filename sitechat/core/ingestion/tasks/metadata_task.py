"""
Metadata budgeting task.

The vector index stores a chunk's metadata and its text together under a hard
per-vector ceiling (40 000 bytes). ``pack`` returns a copy of the metadata that
serializes within whatever the chunk's text leaves over:

1. Normalize: drop ``None`` and anything that is not a flat scalar or a list
   of strings; cut ``url``/``title`` to their fixed caps.
2. Shrink: while over budget, halve the longest string field (ties go to the
   smallest key) or delete it once halving no longer shortens it.

Non-string fields are never dropped, so a limit below their own size leaves the
result over budget; that is a configuration problem, not a runtime failure.

Dependencies: json (stdlib)
System role: Second stage of document ingestion pipeline
"""

import json
import logging
import math
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

METADATA_LIMIT_BYTES = 40_000
TRUNCATION_MARKER = "…"
DEFAULT_FIELD_CAPS: Mapping[str, int] = {"url": 2000, "title": 1000}


def serialized_size(payload: Mapping[str, Any]) -> int:
    """UTF-8 byte length of the compact JSON encoding of ``payload``."""
    encoded = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return len(encoded.encode("utf-8"))


def reserved_bytes_for(text: str, text_key: str = "text") -> int:
    """Bytes taken by a chunk's own text payload."""
    return serialized_size({text_key: text})


def _truncate(value: str, max_length: int) -> str:
    """Cut ``value`` so that it plus the marker is exactly ``max_length`` long."""
    keep = max(max_length - len(TRUNCATION_MARKER), 0)
    return value[:keep] + TRUNCATION_MARKER


def _is_storable(value: Any) -> bool:
    if isinstance(value, (str, bool, int)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, (list, tuple)):
        return all(isinstance(item, str) for item in value)
    return False


def normalize_metadata(
    metadata: Mapping[str, Any],
    field_caps: Mapping[str, int] = DEFAULT_FIELD_CAPS,
) -> dict[str, Any]:
    """
    Keep only flat, storable values and apply the per-field caps.

    Args:
        metadata: Raw chunk metadata
        field_caps: Maximum character length per field name

    Returns:
        dict: New mapping, input order preserved
    """
    result: dict[str, Any] = {}
    for key, value in metadata.items():
        if value is None or not _is_storable(value):
            continue
        if isinstance(value, str):
            cap = field_caps.get(key)
            result[key] = _truncate(value, cap) if cap is not None and len(value) > cap else value
        elif isinstance(value, (list, tuple)):
            result[key] = list(value)
        else:
            result[key] = value
    return result


def _shrink_once(metadata: dict[str, Any]) -> dict[str, Any] | None:
    """
    Return a copy with the longest string field halved or removed.

    Returns None when no string field is left to shrink.
    """
    string_keys = [key for key, value in metadata.items() if isinstance(value, str)]
    if not string_keys:
        return None

    key = min(string_keys, key=lambda k: (-len(metadata[k]), k))
    value = metadata[key]
    halved = value[: len(value) // 2] + TRUNCATION_MARKER

    shrunk = dict(metadata)
    if len(halved) >= len(value):
        del shrunk[key]
    else:
        shrunk[key] = halved
    return shrunk


def pack(
    metadata: Mapping[str, Any],
    reserved_bytes: int,
    limit_bytes: int = METADATA_LIMIT_BYTES,
    field_caps: Mapping[str, int] = DEFAULT_FIELD_CAPS,
) -> dict[str, Any]:
    """
    Fit metadata into the space left after ``reserved_bytes``.

    Args:
        metadata: Chunk metadata (left untouched)
        reserved_bytes: Bytes already used by the chunk's text payload
        limit_bytes: Provider ceiling for metadata plus text
        field_caps: Maximum character length per field name

    Returns:
        dict: Packed metadata; ``{}`` in the worst case
    """
    budget = limit_bytes - reserved_bytes
    packed = normalize_metadata(metadata, field_caps)

    while serialized_size(packed) > budget:
        shrunk = _shrink_once(packed)
        if shrunk is None:
            logger.warning(
                f"{__name__}:pack - Non-string metadata exceeds budget",
                extra={"budget": budget, "size": serialized_size(packed)},
            )
            break
        packed = shrunk

    return packed


class MetadataBudgetTask:
    """Pack chunk metadata under the vector index's per-vector ceiling."""

    def __init__(
        self,
        limit_bytes: int = METADATA_LIMIT_BYTES,
        field_caps: Mapping[str, int] | None = None,
        text_key: str = "text",
    ) -> None:
        """
        Args:
            limit_bytes: Provider ceiling for metadata plus chunk text
            field_caps: Per-field character caps (url/title by default)
            text_key: Metadata key under which the store keeps chunk text
        """
        self.limit_bytes = limit_bytes
        self.field_caps = dict(field_caps if field_caps is not None else DEFAULT_FIELD_CAPS)
        self.text_key = text_key

    def pack(self, metadata: Mapping[str, Any], reserved_bytes: int) -> dict[str, Any]:
        return pack(metadata, reserved_bytes, self.limit_bytes, self.field_caps)

    def pack_for_chunk(self, text: str, metadata: Mapping[str, Any]) -> dict[str, Any]:
        """Pack metadata using the chunk text's own payload as the reservation."""
        return self.pack(metadata, reserved_bytes_for(text, self.text_key))
