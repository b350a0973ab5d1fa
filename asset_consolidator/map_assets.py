"""
map_assets.py — exported asset JSON → flat CSV records

Every exported asset becomes at least one FlatRecord. Data extensions are the
exception that expands: one record per entry of their `Fields` array, each
repeating the asset's base fields.

Key rules:
- Base fields resolve through fallback chains (lowercase and capitalized keys
  both occur depending on asset type)
- null counts as absent; "" and false do not
- Every record carries all 17 fields so the CSV stays rectangular
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from asset_consolidator.errors import FileParseError
from asset_consolidator.lookup import first_present, get_path

logger = logging.getLogger(__name__)

DATA_EXTENSION_CONTENT_TYPE = "dataextension"


@dataclass(frozen=True)
class FlatRecord:
    # Base fields shared by every asset type
    customerKey: Any = ""
    dataExtensionKey: Any = ""
    assetType: Any = ""
    assetName: Any = ""
    description: Any = ""
    ownerName: Any = ""
    createdDate: Any = ""
    modifiedDate: Any = ""
    status: Any = ""
    folderPath: Any = ""
    folderContentType: Any = ""
    # Data extension field columns
    fieldName: Any = ""
    fieldType: Any = ""
    fieldMaxLength: Any = ""
    fieldDefaultValue: Any = ""
    fieldIsRequired: Any = ""
    fieldIsPrimaryKey: Any = ""


def _reject_constant(value: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {value}")


def load_document(path: str) -> Any:
    """
    Read and parse one JSON file.

    Raises:
        FileParseError: if the file cannot be read, decoded or parsed,
            including NaN/Infinity constants, oversized integers and
            nesting too deep for the decoder
    """
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            return json.load(f, parse_constant=_reject_constant)
    except (OSError, ValueError, RecursionError) as e:
        raise FileParseError(path, str(e)) from e


def resolve_base_fields(doc: Any) -> Dict[str, Any]:
    """Resolve the fields common to all asset types."""
    return {
        "customerKey": first_present(doc, "customerKey", "CustomerKey"),
        # For data extensions the asset's own CustomerKey is its DE key
        "dataExtensionKey": first_present(doc, "CustomerKey", "r__dataExtension_key"),
        "assetType": first_present(doc, "assetType.displayName"),
        "assetName": first_present(doc, "Name", "name"),
        "description": first_present(doc, "Description", "description"),
        "ownerName": first_present(doc, "owner.name"),
        "createdDate": first_present(doc, "createdDate"),
        "modifiedDate": first_present(doc, "modifiedDate"),
        "status": first_present(doc, "status.name"),
        "folderPath": first_present(doc, "r__folder_Path"),
        "folderContentType": first_present(doc, "r__folder_ContentType"),
    }


def resolve_field_columns(field: Any) -> Dict[str, Any]:
    """Resolve the columns describing one data extension field."""
    return {
        "fieldName": first_present(field, "Name"),
        "fieldType": first_present(field, "FieldType"),
        "fieldMaxLength": first_present(field, "MaxLength"),
        "fieldDefaultValue": first_present(field, "DefaultValue"),
        "fieldIsRequired": first_present(field, "IsRequired", default=False),
        "fieldIsPrimaryKey": first_present(field, "IsPrimaryKey", default=False),
    }


def is_data_extension(doc: Any, base: Dict[str, Any]) -> bool:
    return (
        base["folderContentType"] == DATA_EXTENSION_CONTENT_TYPE
        and isinstance(get_path(doc, "Fields"), list)
    )


def map_document_to_records(doc: Any) -> List[FlatRecord]:
    """
    Flatten one parsed asset document into FlatRecords.

    Returns:
        one record per `Fields` entry for a data extension (none when the
        list is empty), otherwise exactly one record with blank field columns
    """
    base = resolve_base_fields(doc)

    if not is_data_extension(doc, base):
        return [FlatRecord(**base)]

    fields = doc["Fields"]
    logger.debug(f"Expanding data extension {base['dataExtensionKey']!r} into {len(fields)} rows")
    return [FlatRecord(**base, **resolve_field_columns(field)) for field in fields]
