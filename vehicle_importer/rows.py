"""
Row builders turning vehicle records into sheet rows.

Every function here is pure: rows are plain ``dict`` objects keyed by column
name and nothing is read from or written to disk.
"""
from typing import Dict, List

from .encoding import encode_entity_list, normalize_list_field
from .models import VehicleRecord
from .schema import FLAT_COLUMNS, PRICING_SCALAR_FIELDS, PRICING_TERM_KEYS, VEHICLE_FIELDS

Row = Dict[str, str]


def _vehicle_fields(record: VehicleRecord) -> Row:
    vehicle = record.vehicle
    row = {name: getattr(vehicle, name) for name in VEHICLE_FIELDS}
    row["standard_equipment"] = normalize_list_field(vehicle.standard_equipment)
    return row


def format_vehicle_row(record: VehicleRecord) -> Row:
    """Flatten one record into a row of the importable sheet.

    The row always carries exactly ``FLAT_COLUMNS``; accessories and tires are
    packed into the two trailing cells.
    """
    row: Row = {column: "" for column in FLAT_COLUMNS}
    row.update(_vehicle_fields(record))

    for term_key in PRICING_TERM_KEYS:
        term = record.pricing[term_key]
        prefix = f"pricing_{term_key}"
        for name in PRICING_SCALAR_FIELDS:
            row[f"{prefix}_{name}"] = getattr(term, name)
        for i, rate in enumerate(term.rates, start=1):
            row[f"{prefix}_rate_{i}_min"] = rate.min
            row[f"{prefix}_rate_{i}_max"] = rate.max

    row["accessories"] = encode_entity_list(record.accessories, "name", "price")
    row["tire_options"] = encode_entity_list(record.tires, "label", "price")
    return row


def build_vehicle_sheet_rows(records: List[VehicleRecord]) -> List[Row]:
    rows = []
    for record in records:
        row = {"vehicle_id": record.id}
        row.update(_vehicle_fields(record))
        rows.append(row)
    return rows


def build_pricing_sheet_rows(records: List[VehicleRecord]) -> List[Row]:
    """One row per record and term.

    A row only carries the rate columns of its own term, so rows for ``3y``
    stop at ``rate_3_*`` while rows for ``5y`` run to ``rate_5_*``.
    """
    rows = []
    for record in records:
        for term_key in PRICING_TERM_KEYS:
            term = record.pricing[term_key]
            row: Row = {"vehicle_id": record.id, "term": term_key}
            for name in PRICING_SCALAR_FIELDS:
                row[name] = getattr(term, name)
            for i, rate in enumerate(term.rates, start=1):
                row[f"rate_{i}_min"] = rate.min
                row[f"rate_{i}_max"] = rate.max
            rows.append(row)
    return rows


def build_accessory_sheet_rows(records: List[VehicleRecord]) -> List[Row]:
    return [
        {"vehicle_id": record.id, "name": item.name, "price": item.price}
        for record in records
        for item in record.accessories
    ]


def build_tire_sheet_rows(records: List[VehicleRecord]) -> List[Row]:
    return [
        {"vehicle_id": record.id, "label": item.label, "price": item.price}
        for record in records
        for item in record.tires
    ]
