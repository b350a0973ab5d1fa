#!/usr/bin/env python3
"""
consolidate.py — exported asset folder → one CSV

Interactive entrypoint. Asks for the folder holding the exported JSON assets
and for the output file name, then:

1. discovers every .json file under the folder (sorted, best effort)
2. parses and flattens each file, skipping files that fail to parse
3. writes all rows to a single CSV once discovery completes

Usage:
    asset-consolidate [-v]
    python -m asset_consolidator.consolidate [-v]
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from asset_consolidator.errors import CsvWriteError, FileParseError, FolderNotFoundError
from asset_consolidator.find_json import find_json_files
from asset_consolidator.map_assets import FlatRecord, load_document, map_document_to_records
from asset_consolidator.write_csv import ensure_csv_extension, write_csv

logger = logging.getLogger(__name__)

PROMPT_FOLDER = "Enter the name of the starting folder: "
PROMPT_OUTPUT = "Enter the name for the output CSV file: "


@dataclass
class SkippedFile:
    path: str
    reason: str


@dataclass
class ConsolidationResult:
    source_dir: str
    output_path: Optional[str]
    files_found: int = 0
    rows_written: int = 0
    skipped: List[SkippedFile] = field(default_factory=list)

    @property
    def files_processed(self) -> int:
        return self.files_found - len(self.skipped)


def collect_records(paths: Sequence[str]) -> Tuple[List[FlatRecord], List[SkippedFile]]:
    """Load and flatten each file in order; a bad file contributes no rows."""
    records: List[FlatRecord] = []
    skipped: List[SkippedFile] = []

    for path in paths:
        try:
            doc = load_document(path)
        except FileParseError as e:
            logger.warning(f"Could not process file {os.path.basename(path)}. Skipping.")
            logger.debug(f"{path}: {e.reason}")
            skipped.append(SkippedFile(path=path, reason=e.reason))
            continue
        records.extend(map_document_to_records(doc))

    return records, skipped


def run_consolidation(
    folder_name: str,
    output_name: str,
    base_dir: Optional[str] = None,
) -> ConsolidationResult:
    """
    Consolidate every JSON asset under folder_name into one CSV.

    Args:
        folder_name: source folder, resolved against base_dir
        output_name: output CSV name, relative to the working directory;
            .csv is appended when missing
        base_dir: directory the source folder is resolved against
            (default: current working directory)

    Returns:
        ConsolidationResult; output_path is None when no rows were produced

    Raises:
        FolderNotFoundError: if the resolved source folder does not exist
        CsvWriteError: if the output CSV cannot be written
    """
    source_dir = os.path.join(base_dir if base_dir is not None else os.getcwd(), folder_name)
    if not os.path.exists(source_dir):
        raise FolderNotFoundError(folder_name, source_dir)

    output_path = ensure_csv_extension(output_name)
    logger.info(f"Scanning {source_dir}")

    paths = find_json_files(source_dir)
    records, skipped = collect_records(paths)
    written = write_csv(records, output_path)

    return ConsolidationResult(
        source_dir=source_dir,
        output_path=written,
        files_found=len(paths),
        rows_written=len(records) if written else 0,
        skipped=skipped,
    )


def prompt_inputs(input_func: Optional[Callable[[str], str]] = None) -> Tuple[str, str]:
    """Ask for the source folder and the output file name."""
    input_func = input_func or input
    folder_name = input_func(PROMPT_FOLDER)
    output_name = input_func(PROMPT_OUTPUT)
    return folder_name, output_name.strip()


def report_result(result: ConsolidationResult) -> None:
    if result.output_path is None:
        print("\nℹ️ No JSON files were found. The CSV file was not created.")
        return

    print(
        f"\n✅ Success! Consolidated {result.files_processed} files into "
        f"{result.rows_written} rows in '{result.output_path}'."
    )
    if result.skipped:
        print(f"⚠️ {len(result.skipped)} file(s) could not be processed and were skipped.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Consolidate a folder of exported JSON assets into one CSV file."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        folder_name, output_name = prompt_inputs()
    except (EOFError, KeyboardInterrupt):
        print("\nAborted.", file=sys.stderr)
        return 1

    try:
        result = run_consolidation(folder_name, output_name)
    except FolderNotFoundError as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        return 0
    except CsvWriteError as e:
        logger.error(f"Failed: {e}")
        raise SystemExit(1) from e

    report_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
