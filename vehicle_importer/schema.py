"""
Static export schema: financing terms, rate tiers and sheet headers.

Every column list used by the row builders and the workbook writer is derived
here. Changing a term's rate count changes the flat sheet's columns and is a
breaking change for anything importing the exported files.
"""
from dataclasses import fields
from typing import Dict, List, NamedTuple

from .models import VehicleInfo


class TermMeta(NamedTuple):
    label: str
    rate_count: int


# Ordered short -> long; every projection iterates terms in this order.
PRICING_TERM_METADATA: Dict[str, TermMeta] = {
    "3y": TermMeta(label="36 months", rate_count=3),
    "4y": TermMeta(label="48 months", rate_count=4),
    "5y": TermMeta(label="60 months", rate_count=5),
}

PRICING_TERM_KEYS: List[str] = list(PRICING_TERM_METADATA)

# Scalar pricing fields in column order.
PRICING_SCALAR_FIELDS = ("monthly_avg", "final_min", "final_max", "down_min", "down_max")

VEHICLE_FIELDS: List[str] = [f.name for f in fields(VehicleInfo)]

# Sheet names, in workbook order.
FLAT_SHEET = "importable_vehicle"
VEHICLE_SHEET = "vehicles"
PRICING_SHEET = "pricing"
ACCESSORY_SHEET = "accessories"
TIRE_SHEET = "tires"

SHEET_NAMES = (FLAT_SHEET, VEHICLE_SHEET, PRICING_SHEET, ACCESSORY_SHEET, TIRE_SHEET)


def rate_count(term_key: str) -> int:
    return PRICING_TERM_METADATA[term_key].rate_count


def max_rate_count() -> int:
    """Widest rate ladder across all terms."""
    return max(meta.rate_count for meta in PRICING_TERM_METADATA.values())


def _pricing_columns(term_key: str) -> List[str]:
    prefix = f"pricing_{term_key}"
    cols = [f"{prefix}_{name}" for name in PRICING_SCALAR_FIELDS]
    for i in range(1, rate_count(term_key) + 1):
        cols.append(f"{prefix}_rate_{i}_min")
        cols.append(f"{prefix}_rate_{i}_max")
    return cols


def build_flat_columns() -> List[str]:
    """Column list of the flat sheet: vehicle fields, term blocks, child encodings."""
    cols = list(VEHICLE_FIELDS)
    for term_key in PRICING_TERM_KEYS:
        cols.extend(_pricing_columns(term_key))
    cols.extend(["accessories", "tire_options"])
    return cols


FLAT_COLUMNS: List[str] = build_flat_columns()

VEHICLE_SHEET_HEADER: List[str] = ["vehicle_id"] + VEHICLE_FIELDS


def build_pricing_header() -> List[str]:
    """Pricing sheet header spanning the widest rate ladder.

    All ``rate_i_min`` columns come first, then all ``rate_i_max`` columns.
    """
    span = range(1, max_rate_count() + 1)
    return (
        ["vehicle_id", "term", *PRICING_SCALAR_FIELDS]
        + [f"rate_{i}_min" for i in span]
        + [f"rate_{i}_max" for i in span]
    )


PRICING_SHEET_HEADER: List[str] = build_pricing_header()

ACCESSORY_SHEET_HEADER: List[str] = ["vehicle_id", "name", "price"]

TIRE_SHEET_HEADER: List[str] = ["vehicle_id", "label", "price"]

SHEET_HEADERS: Dict[str, List[str]] = {
    FLAT_SHEET: FLAT_COLUMNS,
    VEHICLE_SHEET: VEHICLE_SHEET_HEADER,
    PRICING_SHEET: PRICING_SHEET_HEADER,
    ACCESSORY_SHEET: ACCESSORY_SHEET_HEADER,
    TIRE_SHEET: TIRE_SHEET_HEADER,
}
