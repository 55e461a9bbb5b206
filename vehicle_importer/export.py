"""
Workbook assembly and Excel export for the working list.
"""
import logging
import os
import tempfile
from typing import List, NamedTuple, Optional

import pandas as pd

from .config import config
from .models import VehicleRecord
from .rows import (
    Row,
    build_accessory_sheet_rows,
    build_pricing_sheet_rows,
    build_tire_sheet_rows,
    build_vehicle_sheet_rows,
    format_vehicle_row,
)
from .schema import (
    ACCESSORY_SHEET,
    FLAT_SHEET,
    PRICING_SHEET,
    SHEET_HEADERS,
    TIRE_SHEET,
    VEHICLE_SHEET,
)
from .session import WorkingList
from .utils import date_tag

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """The workbook could not be written."""


class EmptyWorkingListError(ExportError):
    """Export was requested with no records in the working list."""


class Sheet(NamedTuple):
    name: str
    header: List[str]
    rows: List[Row]


def build_workbook(records: List[VehicleRecord]) -> List[Sheet]:
    """Project records into the five export sheets, in workbook order.

    Sheets with no rows are still returned with their header.
    """
    rows_by_sheet = {
        FLAT_SHEET: [format_vehicle_row(r) for r in records],
        VEHICLE_SHEET: build_vehicle_sheet_rows(records),
        PRICING_SHEET: build_pricing_sheet_rows(records),
        ACCESSORY_SHEET: build_accessory_sheet_rows(records),
        TIRE_SHEET: build_tire_sheet_rows(records),
    }
    return [
        Sheet(name=name, header=list(SHEET_HEADERS[name]), rows=rows)
        for name, rows in rows_by_sheet.items()
    ]


def sheet_to_frame(sheet: Sheet) -> pd.DataFrame:
    """Lay a sheet out under its full header, padding absent cells with ''."""
    padded = [{col: row.get(col, "") for col in sheet.header} for row in sheet.rows]
    return pd.DataFrame(padded, columns=sheet.header, dtype=object)


def write_workbook(sheets: List[Sheet], out_path: str) -> None:
    """Write sheets to an .xlsx file, one worksheet per sheet."""
    with pd.ExcelWriter(out_path, engine="openpyxl") as writer:
        for sheet in sheets:
            sheet_to_frame(sheet).to_excel(writer, sheet_name=sheet.name, index=False)


def default_export_path() -> str:
    return os.path.join(config.EXPORT_DIR, f"{config.FILE_PREFIX}-{date_tag()}.xlsx")


def export_records(records: List[VehicleRecord], out_path: str) -> str:
    """Assemble and write a workbook for ``records``.

    The file is written next to ``out_path`` first and moved into place only
    once complete, so a failed write leaves nothing behind.
    """
    if not records:
        raise EmptyWorkingListError("Add at least one vehicle before exporting.")

    sheets = build_workbook(records)
    out_dir = os.path.dirname(os.path.abspath(out_path))
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(suffix=".xlsx", dir=out_dir)
        os.close(fd)
        write_workbook(sheets, tmp_path)
        os.replace(tmp_path, out_path)
    except Exception as e:
        logger.exception(f"Excel export to {out_path} failed")
        if tmp_path and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise ExportError("Excel export failed. Check the log for details.") from e

    logger.info(f">>> Saved {len(records)} vehicles ({', '.join(s.name for s in sheets)}) to {out_path}")
    return out_path


def export_working_list(working_list: WorkingList, out_path: Optional[str] = None) -> str:
    """Export the working list and clear it once the file is written.

    On any failure the working list is left untouched so the export can be
    retried.
    """
    out_path = out_path or default_export_path()
    written = export_records(working_list.snapshot(), out_path)
    working_list.clear()
    return written
