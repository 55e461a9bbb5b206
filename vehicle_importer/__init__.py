"""
Vehicle Importer Package
"""
from .models import (
    AccessoryItem,
    PricingRateRange,
    PricingTerm,
    TireOption,
    VehicleInfo,
    VehicleRecord,
    create_empty_pricing_table,
)
from .schema import FLAT_COLUMNS, PRICING_TERM_METADATA, SHEET_NAMES
from .encoding import normalize_list_field, encode_entity_list, decode_entity_list
from .rows import (
    format_vehicle_row,
    build_vehicle_sheet_rows,
    build_pricing_sheet_rows,
    build_accessory_sheet_rows,
    build_tire_sheet_rows
)
from .schemas import parse_record
from .session import WorkingList
from .export import (
    Sheet,
    ExportError,
    EmptyWorkingListError,
    build_workbook,
    export_records,
    export_working_list
)
from .utils import init_logger, now_iso

__version__ = "1.0.0"

__all__ = [
    "AccessoryItem",
    "PricingRateRange",
    "PricingTerm",
    "TireOption",
    "VehicleInfo",
    "VehicleRecord",
    "create_empty_pricing_table",
    "FLAT_COLUMNS",
    "PRICING_TERM_METADATA",
    "SHEET_NAMES",
    "normalize_list_field",
    "encode_entity_list",
    "decode_entity_list",
    "format_vehicle_row",
    "build_vehicle_sheet_rows",
    "build_pricing_sheet_rows",
    "build_accessory_sheet_rows",
    "build_tire_sheet_rows",
    "parse_record",
    "WorkingList",
    "Sheet",
    "ExportError",
    "EmptyWorkingListError",
    "build_workbook",
    "export_records",
    "export_working_list",
    "init_logger",
    "now_iso"
]
