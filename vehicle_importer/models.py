"""
Data models for vehicle import records.
"""
import uuid
from dataclasses import dataclass, field
from typing import Dict, List


CONDITION_OPTIONS = ("km0", "used", "new")

FUEL_TYPE_OPTIONS = (
    "benzina",
    "diesel",
    "gpl",
    "metano",
    "ibrido_full",
    "ibrido_plug_in",
    "mild_hybrid",
    "elettrico",
)

VISIBILITY_OPTIONS = (
    "visible_orderable",
    "visible_requestable",
    "hidden",
    "url_only",
)

TRANSMISSION_OPTIONS = (
    "manual",
    "automatic",
    "cvt",
    "dual_clutch",
    "single_speed",
)

TIRE_OPTION_LABELS = ("all_season", "summer_winter", "winter", "summer")


def generate_id() -> str:
    """Return a new opaque unique identifier."""
    return uuid.uuid4().hex


@dataclass
class VehicleInfo:
    """Vehicle attributes, kept as entered until export."""

    # Identity
    brand: str = ""
    model: str = ""
    trim: str = ""
    condition: str = ""
    category: str = ""
    registration_date: str = ""
    kilometers: str = ""

    # Links
    url: str = ""
    configuration_url: str = ""

    # Technical specs
    engine_size: str = ""
    fuel_type: str = ""
    transmission: str = ""
    power_kw: str = ""
    power_cv: str = ""
    seats: str = ""
    doors: str = ""

    # Listing
    status: str = ""
    visibility: str = ""
    images: str = ""

    # Appearance
    exterior_color: str = ""
    interior_color: str = ""
    wheels: str = ""

    pair_to_save_daily: str = ""
    standard_equipment: str = ""  # multi-line, one item per line


@dataclass
class PricingRateRange:
    label: str
    min: str = ""
    max: str = ""


@dataclass
class PricingTerm:
    """Financing figures for one term plus its fixed-length rate ladder."""

    monthly_avg: str = ""
    final_min: str = ""
    final_max: str = ""
    down_min: str = ""
    down_max: str = ""
    rates: List[PricingRateRange] = field(default_factory=list)


# Keyed by term key ("3y", "4y", "5y"); see schema.PRICING_TERM_KEYS.
PricingTable = Dict[str, PricingTerm]


@dataclass
class AccessoryItem:
    name: str
    price: str = ""
    id: str = field(default_factory=generate_id)


@dataclass
class TireOption:
    label: str
    price: str = ""
    id: str = field(default_factory=generate_id)


@dataclass
class VehicleRecord:
    """A complete vehicle entry as held in the working list."""

    vehicle: VehicleInfo
    pricing: PricingTable
    accessories: List[AccessoryItem] = field(default_factory=list)
    tires: List[TireOption] = field(default_factory=list)
    id: str = field(default_factory=generate_id)


def create_empty_pricing_term(rate_count: int) -> PricingTerm:
    """Return a blank term with ``rate_count`` labelled rate entries."""
    return PricingTerm(
        rates=[PricingRateRange(label=f"rate_{i + 1}") for i in range(rate_count)]
    )


def create_empty_pricing_table() -> PricingTable:
    from .schema import PRICING_TERM_METADATA

    return {
        term_key: create_empty_pricing_term(meta.rate_count)
        for term_key, meta in PRICING_TERM_METADATA.items()
    }
