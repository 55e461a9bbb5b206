"""
Tests for the sheet row builders.
"""
import pytest

from .encoding import decode_entity_list
from .models import create_empty_pricing_table
from .rows import (
    build_accessory_sheet_rows,
    build_pricing_sheet_rows,
    build_tire_sheet_rows,
    build_vehicle_sheet_rows,
    format_vehicle_row,
)
from .schema import FLAT_COLUMNS, PRICING_TERM_KEYS


@pytest.mark.parametrize("n_children", [0, 1, 7])
def test_flat_row_has_exact_column_set(make_record, n_children):
    record = make_record(
        accessories=[(f"acc {i}", str(i)) for i in range(n_children)],
        tires=[("winter", str(i)) for i in range(n_children)],
    )
    row = format_vehicle_row(record)
    assert list(row) == FLAT_COLUMNS


def test_flat_row_values(make_record):
    record = make_record(
        standard_equipment="ABS\n\n Airbag \nClima",
        fuel_type="diesel",
        accessories=[("Tow hook", "440.00"), ("", "10"), ("Camera", "165.00")],
        tires=[("all_season", "22.23")],
    )
    row = format_vehicle_row(record)
    assert row["brand"] == "Fiat"
    assert row["fuel_type"] == "diesel"
    assert row["kilometers"] == ""
    assert row["standard_equipment"] == "ABS|Airbag|Clima"
    assert row["pricing_4y_monthly_avg"] == "4y-avg"
    assert row["pricing_5y_down_max"] == "5y-dmax"
    assert row["pricing_3y_rate_3_max"] == "3y-r3-max"
    assert row["accessories"] == "Tow hook:440.00|Camera:165.00"
    assert row["tire_options"] == "all_season:22.23"


def test_flat_row_with_empty_pricing(make_record):
    row = format_vehicle_row(make_record(pricing=None))
    assert all(row[c] == "" for c in FLAT_COLUMNS if c.startswith("pricing_"))


def test_flat_row_round_trip(make_record):
    """Child lists and rate ladders can be read back out of the flat row."""
    accessories = [("Gancio traino", "440.00"), ("Telecamera", "165.00")]
    tires = [("summer_winter", "31.95")]
    record = make_record(accessories=accessories, tires=tires)
    row = format_vehicle_row(record)

    assert decode_entity_list(row["accessories"]) == accessories
    assert decode_entity_list(row["tire_options"]) == tires
    for term_key in PRICING_TERM_KEYS:
        rates = record.pricing[term_key].rates
        assert len(rates) == {"3y": 3, "4y": 4, "5y": 5}[term_key]
        for i, rate in enumerate(rates, start=1):
            assert row[f"pricing_{term_key}_rate_{i}_min"] == rate.min
            assert row[f"pricing_{term_key}_rate_{i}_max"] == rate.max


def test_flat_row_is_deterministic(make_record):
    record = make_record(accessories=[("x", "1")])
    assert format_vehicle_row(record) == format_vehicle_row(record)


def test_vehicle_sheet_rows(make_record):
    records = [
        make_record("r1", brand="Fiat", standard_equipment="a\nb"),
        make_record("r2", brand="BMW"),
    ]
    rows = build_vehicle_sheet_rows(records)
    assert [r["vehicle_id"] for r in rows] == ["r1", "r2"]
    assert [r["brand"] for r in rows] == ["Fiat", "BMW"]
    assert rows[0]["standard_equipment"] == "a|b"
    assert len(rows[0]) == 25
    # the record itself is untouched
    assert records[0].vehicle.standard_equipment == "a\nb"


def test_pricing_sheet_rows_one_term_filled(make_record):
    pricing = create_empty_pricing_table()
    pricing["4y"].monthly_avg = "410.00"
    pricing["4y"].rates[3].max = "165.00"
    rows = build_pricing_sheet_rows([make_record(pricing=pricing)])

    assert len(rows) == 3
    assert [r["term"] for r in rows] == ["3y", "4y", "5y"]
    assert rows[1]["monthly_avg"] == "410.00"
    assert rows[1]["rate_4_max"] == "165.00"
    assert rows[0]["monthly_avg"] == ""
    for row, count in zip(rows, (3, 4, 5)):
        rate_cols = [k for k in row if k.startswith("rate_")]
        assert len(rate_cols) == 2 * count
        assert f"rate_{count}_min" in row
        assert f"rate_{count + 1}_min" not in row


def test_pricing_sheet_rows_order(make_record):
    rows = build_pricing_sheet_rows([make_record("a"), make_record("b")])
    assert [(r["vehicle_id"], r["term"]) for r in rows] == [
        ("a", "3y"), ("a", "4y"), ("a", "5y"),
        ("b", "3y"), ("b", "4y"), ("b", "5y"),
    ]
    assert rows[5]["rate_5_min"] == "5y-r5-min"


def test_accessory_sheet_rows_keep_blank_names(make_record):
    records = [
        make_record("a", accessories=[("Tow hook", "440.00"), ("", "10")]),
        make_record("b"),
        make_record("c", accessories=[("Camera", "165.00")]),
    ]
    rows = build_accessory_sheet_rows(records)
    assert len(rows) == sum(len(r.accessories) for r in records) == 3
    assert rows == [
        {"vehicle_id": "a", "name": "Tow hook", "price": "440.00"},
        {"vehicle_id": "a", "name": "", "price": "10"},
        {"vehicle_id": "c", "name": "Camera", "price": "165.00"},
    ]


def test_tire_sheet_rows(make_record):
    records = [
        make_record("a", tires=[("winter", "1"), ("winter", "2")]),
        make_record("b", tires=[("summer", "3")]),
    ]
    rows = build_tire_sheet_rows(records)
    assert [(r["vehicle_id"], r["label"], r["price"]) for r in rows] == [
        ("a", "winter", "1"),
        ("a", "winter", "2"),
        ("b", "summer", "3"),
    ]


def test_builders_on_empty_list():
    assert build_vehicle_sheet_rows([]) == []
    assert build_pricing_sheet_rows([]) == []
    assert build_accessory_sheet_rows([]) == []
    assert build_tire_sheet_rows([]) == []
