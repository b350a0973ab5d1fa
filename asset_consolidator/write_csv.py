"""
Write FlatRecords to the consolidated CSV file.
"""

from __future__ import annotations

import contextlib
import csv
import json
import logging
import os
from dataclasses import asdict
from typing import Any, Dict, List, Optional, Sequence, Tuple

from asset_consolidator.errors import CsvWriteError
from asset_consolidator.map_assets import FlatRecord

logger = logging.getLogger(__name__)

CSV_EXT = ".csv"

# (FlatRecord attribute, CSV header title), in output order
CSV_COLUMNS: List[Tuple[str, str]] = [
    ("customerKey", "customerKey"),
    ("dataExtensionKey", "DataExtensionKey"),
    ("assetType", "assetType"),
    ("assetName", "assetName"),
    ("description", "Description"),
    ("ownerName", "ownerName"),
    ("createdDate", "createdDate"),
    ("modifiedDate", "modifiedDate"),
    ("status", "status"),
    ("folderPath", "folderPath"),
    ("folderContentType", "FolderContentType"),
    ("fieldName", "FieldName"),
    ("fieldType", "FieldType"),
    ("fieldMaxLength", "MaxLength"),
    ("fieldDefaultValue", "DefaultValue"),
    ("fieldIsRequired", "IsRequired"),
    ("fieldIsPrimaryKey", "IsPrimaryKey"),
]

CSV_HEADER: List[str] = [title for _, title in CSV_COLUMNS]


def ensure_csv_extension(name: str) -> str:
    """Append .csv unless the name already ends in exactly that extension."""
    _, ext = os.path.splitext(name)
    if ext != CSV_EXT:
        return name + CSV_EXT
    return name


def render_cell(value: Any) -> str:
    """Render one JSON scalar (or nested value) as CSV cell text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


def record_to_row(record: FlatRecord) -> Dict[str, str]:
    values = asdict(record)
    return {title: render_cell(values[attr]) for attr, title in CSV_COLUMNS}


def write_csv(records: Sequence[FlatRecord], output_path: str) -> Optional[str]:
    """
    Write records under the fixed 17-column header.

    Nothing is written for an empty record list.

    Returns:
        the path written, or None when there was nothing to write

    Raises:
        CsvWriteError: if the file cannot be written
    """
    if not records:
        logger.debug("No records to write; skipping CSV output")
        return None

    tmp = os.path.join(
        os.path.dirname(output_path) or ".",
        f".{os.path.basename(output_path)}.tmp",
    )
    try:
        with open(tmp, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_HEADER, lineterminator="\n")
            writer.writeheader()
            for record in records:
                writer.writerow(record_to_row(record))
        os.replace(tmp, output_path)
    except OSError as e:
        logger.error(f"Failed to write {output_path}: {e}")
        with contextlib.suppress(OSError):
            os.remove(tmp)
        raise CsvWriteError(output_path, str(e)) from e

    logger.info(f"Wrote {len(records)} rows to {output_path}")
    return output_path
