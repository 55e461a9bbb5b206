"""
Shared pytest fixtures.
"""
import pytest

from .models import (
    AccessoryItem,
    PricingRateRange,
    PricingTerm,
    TireOption,
    VehicleInfo,
    VehicleRecord,
    create_empty_pricing_table,
)
from .schema import PRICING_TERM_METADATA


def filled_pricing_table():
    """Pricing with distinct values in every cell, e.g. ``4y`` rate 2 min is ``4y-r2-min``."""
    pricing = {}
    for term_key, meta in PRICING_TERM_METADATA.items():
        pricing[term_key] = PricingTerm(
            monthly_avg=f"{term_key}-avg",
            final_min=f"{term_key}-fmin",
            final_max=f"{term_key}-fmax",
            down_min=f"{term_key}-dmin",
            down_max=f"{term_key}-dmax",
            rates=[
                PricingRateRange(label=f"rate_{i}", min=f"{term_key}-r{i}-min", max=f"{term_key}-r{i}-max")
                for i in range(1, meta.rate_count + 1)
            ],
        )
    return pricing


@pytest.fixture
def make_record():
    """Factory for records; pass ``pricing=None`` for an all-empty pricing table."""
    def _make(record_id="rec-1", brand="Fiat", accessories=(), tires=(), pricing="filled", **vehicle):
        if pricing == "filled":
            pricing = filled_pricing_table()
        elif pricing is None:
            pricing = create_empty_pricing_table()
        return VehicleRecord(
            id=record_id,
            vehicle=VehicleInfo(brand=brand, model="500", trim="Pop", **vehicle),
            pricing=pricing,
            accessories=[AccessoryItem(name=n, price=p) for n, p in accessories],
            tires=[TireOption(label=label, price=p) for label, p in tires],
        )
    return _make


@pytest.fixture
def valid_payload():
    """Raw JSON-style record as accepted by ``parse_record``."""
    def term(count):
        return {
            "monthly_avg": "100",
            "final_min": "1",
            "final_max": "2",
            "down_min": "3",
            "down_max": "4",
            "rates": [{"label": f"rate_{i}", "min": str(i), "max": str(i * 10)} for i in range(1, count + 1)],
        }

    return {
        "id": "abc",
        "vehicle": {"brand": "Peugeot", "model": "208", "trim": "Style", "fuel_type": "benzina"},
        "pricing": {"3y": term(3), "4y": term(4), "5y": term(5)},
        "accessories": [{"id": "a1", "name": "Gancio traino", "price": "440.00"}],
        "tires": [{"id": "t1", "label": "winter", "price": "31.95"}],
    }
