"""
Spreadsheet Loader
Decodes uploaded order files into UploadedSource objects.

The first row of the first worksheet is the header; every later row becomes
a raw row keyed by header name. The consolidation engine never sees files.
"""
from __future__ import annotations

import csv
import os
import zipfile
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Sequence

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

import config
from order_consolidation.models import RawRow, UploadedSource
from utils.logger import get_logger


class SourceLoadError(Exception):
    """A spreadsheet could not be read"""


class UnsupportedSourceError(SourceLoadError):
    """The file extension is not a supported spreadsheet format"""


def _header_names(header_cells: Sequence) -> List[Optional[str]]:
    """
    Clean header cells: blanks become None (column dropped), repeated names
    get _1, _2 suffixes so every key stays unique. A suffix that would clash
    with a name already taken keeps counting up.
    """
    names: List[Optional[str]] = []
    taken = set()
    counters: Dict[str, int] = {}
    for cell in header_cells:
        name = "" if cell is None else str(cell).strip()
        if not name:
            names.append(None)
            continue
        if name in taken:
            base = name
            while name in taken:
                counters[base] = counters.get(base, 0) + 1
                name = f"{base}_{counters[base]}"
        taken.add(name)
        names.append(name)
    return names


def rows_from_table(table: Iterable[Sequence]) -> List[RawRow]:
    """
    Turn a header row + data rows into raw rows

    Args:
        table: Rows of cell values, header first

    Returns:
        One dict per data row; empty cells become "" and fully blank rows
        are skipped
    """
    iterator = iter(table)
    try:
        header = _header_names(next(iterator))
    except StopIteration:
        return []

    rows: List[RawRow] = []
    for cells in iterator:
        cells = list(cells or ())
        if all(c is None or (isinstance(c, str) and not c.strip()) for c in cells):
            continue

        row: RawRow = {}
        for idx, name in enumerate(header):
            if name is None:
                continue
            value = cells[idx] if idx < len(cells) else None
            row[name] = "" if value is None else value
        rows.append(row)
    return rows


def _read_xlsx(path: str) -> List[RawRow]:
    try:
        wb = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError, ValueError) as e:
        raise SourceLoadError(f"Cannot open workbook {path}: {e}") from e

    try:
        ws = wb.worksheets[0]
        return rows_from_table(ws.iter_rows(values_only=True))
    finally:
        wb.close()


def _read_csv(path: str) -> List[RawRow]:
    try:
        with open(path, newline="", encoding="utf-8-sig") as f:
            return rows_from_table(csv.reader(f))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise SourceLoadError(f"Cannot read CSV {path}: {e}") from e


_READERS = {
    'xlsx': _read_xlsx,
    'xlsm': _read_xlsx,
    'csv': _read_csv,
}


def load_source(path: str) -> UploadedSource:
    """
    Load one spreadsheet file

    Args:
        path: .xlsx / .xlsm / .csv file

    Returns:
        UploadedSource named after the file
    """
    extension = os.path.splitext(path)[1].lower().lstrip('.')
    if extension not in _READERS or extension not in config.SUPPORTED_SOURCE_EXTENSIONS:
        raise UnsupportedSourceError(
            f"Unsupported file type '.{extension}' for {os.path.basename(path)} "
            f"(supported: {', '.join(config.SUPPORTED_SOURCE_EXTENSIONS)})"
        )
    if not os.path.exists(path):
        raise SourceLoadError(f"File not found: {path}")

    rows = _READERS[extension](path)
    name = os.path.basename(path)
    get_logger().log_source_loaded(name, len(rows))
    return UploadedSource.create(name, rows)


def load_sources(paths: Iterable[str], max_workers: Optional[int] = None) -> List[UploadedSource]:
    """
    Load several files in parallel

    Returns:
        Sources in the same order as paths. The first failing file raises.
    """
    paths = list(paths)
    if not paths:
        return []

    # Set up the shared logger before worker threads reach it
    get_logger()
    workers = min(max_workers or config.MAX_LOADER_WORKERS, len(paths))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(load_source, paths))
