"""
Read-only page metadata records.

The mortgage-rates chart is produced by an external pipeline that also
writes a small JSON record with the date it was last updated. This module
only reads that record; it never writes or regenerates it.
"""

import json
import logging
import os


LOGGER = logging.getLogger(__name__)
UPDATED_FALLBACK = "Unknown"


class MetadataError(RuntimeError):
    """Raised when a page metadata record cannot be used."""


def load_page_metadata(path: str) -> dict:
    """
    Load a page metadata record from a JSON file.

    :param path: Path to a JSON object with an ``updated`` string.
    :raises MetadataError: If the file is missing, unreadable, or malformed.
    :returns: Dict with the ``updated`` display string.
    """

    if not os.path.exists(path):
        raise MetadataError(f"Metadata file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as handle:
            record = json.load(handle)
    except (OSError, ValueError) as exc:
        raise MetadataError(f"Metadata file could not be read: {path}") from exc

    if not isinstance(record, dict):
        raise MetadataError(f"Metadata file must hold a JSON object: {path}")

    updated = record.get("updated")
    if not isinstance(updated, str) or not updated.strip():
        raise MetadataError(f"Metadata file has no 'updated' string: {path}")

    LOGGER.debug("Loaded page metadata from %s", path)
    return {"updated": updated}


def fallback_metadata() -> dict:
    """Metadata shown when the record is unavailable."""

    return {"updated": UPDATED_FALLBACK}


METADATA_ERRORS = (MetadataError,)
