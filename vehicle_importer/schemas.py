"""
Pydantic models validating incoming record data.

Records arrive as JSON, either written by hand, stored in the working list
database or dumped from the browser version of the tool (camelCase pricing
keys). Validation here is the only place the fixed rate arity is enforced;
the row builders trust it.
"""
from dataclasses import asdict
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .models import (
    CONDITION_OPTIONS,
    FUEL_TYPE_OPTIONS,
    TIRE_OPTION_LABELS,
    TRANSMISSION_OPTIONS,
    VISIBILITY_OPTIONS,
    AccessoryItem,
    PricingRateRange,
    PricingTerm,
    TireOption,
    VehicleInfo,
    VehicleRecord,
    generate_id,
)
from .schema import PRICING_TERM_KEYS, rate_count

REQUIRED_VEHICLE_FIELDS = ("brand", "model", "trim")

_CLOSED_SETS = {
    "condition": CONDITION_OPTIONS,
    "fuel_type": FUEL_TYPE_OPTIONS,
    "transmission": TRANSMISSION_OPTIONS,
    "visibility": VISIBILITY_OPTIONS,
}


class VehicleInfoIn(BaseModel):
    """Input model for vehicle attributes."""
    brand: str
    model: str
    trim: str
    condition: str = ""
    category: str = ""
    registration_date: str = ""
    kilometers: str = ""
    url: str = ""
    configuration_url: str = ""
    engine_size: str = ""
    fuel_type: str = ""
    transmission: str = ""
    power_kw: str = ""
    power_cv: str = ""
    seats: str = ""
    doors: str = ""
    status: str = ""
    visibility: str = ""
    images: str = ""
    exterior_color: str = ""
    interior_color: str = ""
    wheels: str = ""
    pair_to_save_daily: str = ""
    standard_equipment: str = ""

    @field_validator(*REQUIRED_VEHICLE_FIELDS)
    @classmethod
    def _required(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator(*_CLOSED_SETS)
    @classmethod
    def _closed_set(cls, v: str, info) -> str:
        allowed = _CLOSED_SETS[info.field_name]
        if v and v not in allowed:
            raise ValueError(f"must be empty or one of: {', '.join(allowed)}")
        return v


class RateIn(BaseModel):
    label: str = ""
    min: str = ""
    max: str = ""


class PricingTermIn(BaseModel):
    """Input model for one financing term."""
    monthly_avg: str = Field("", alias="monthlyAvg")
    final_min: str = Field("", alias="finalMin")
    final_max: str = Field("", alias="finalMax")
    down_min: str = Field("", alias="downMin")
    down_max: str = Field("", alias="downMax")
    rates: List[RateIn]

    model_config = ConfigDict(populate_by_name=True)


class AccessoryIn(BaseModel):
    id: str = Field(default_factory=generate_id)
    name: str
    price: str = ""


class TireIn(BaseModel):
    id: str = Field(default_factory=generate_id)
    label: str
    price: str = ""

    @field_validator("label")
    @classmethod
    def _known_label(cls, v: str) -> str:
        if v not in TIRE_OPTION_LABELS:
            raise ValueError(f"must be one of: {', '.join(TIRE_OPTION_LABELS)}")
        return v


class RecordIn(BaseModel):
    """Input model for a complete vehicle record."""
    id: str = Field(default_factory=generate_id)
    vehicle: VehicleInfoIn
    pricing: Dict[str, PricingTermIn]
    accessories: List[AccessoryIn] = []
    tires: List[TireIn] = []

    @model_validator(mode="after")
    def _check_pricing(self) -> "RecordIn":
        missing = [k for k in PRICING_TERM_KEYS if k not in self.pricing]
        if missing:
            raise ValueError(f"pricing is missing terms: {', '.join(missing)}")
        unknown = sorted(set(self.pricing) - set(PRICING_TERM_KEYS))
        if unknown:
            raise ValueError(f"pricing has unknown terms: {', '.join(unknown)}")
        for term_key in PRICING_TERM_KEYS:
            expected = rate_count(term_key)
            got = len(self.pricing[term_key].rates)
            if got != expected:
                raise ValueError(
                    f"pricing term {term_key} needs {expected} rates, got {got}"
                )
        return self

    def to_record(self) -> VehicleRecord:
        """Build the domain record, with terms in canonical order."""
        pricing = {}
        for term_key in PRICING_TERM_KEYS:
            term = self.pricing[term_key]
            pricing[term_key] = PricingTerm(
                monthly_avg=term.monthly_avg,
                final_min=term.final_min,
                final_max=term.final_max,
                down_min=term.down_min,
                down_max=term.down_max,
                rates=[
                    PricingRateRange(label=r.label or f"rate_{i}", min=r.min, max=r.max)
                    for i, r in enumerate(term.rates, start=1)
                ],
            )
        return VehicleRecord(
            id=self.id,
            vehicle=VehicleInfo(**self.vehicle.model_dump()),
            pricing=pricing,
            accessories=[AccessoryItem(**a.model_dump()) for a in self.accessories],
            tires=[TireOption(**t.model_dump()) for t in self.tires],
        )


def parse_record(data: dict) -> VehicleRecord:
    """Validate a raw dict and return a ``VehicleRecord``.

    Raises ``pydantic.ValidationError`` on invalid data.
    """
    return RecordIn.model_validate(data).to_record()


def validate_record(record: VehicleRecord) -> None:
    """Apply the input rules to a record built in code.

    Raises ``pydantic.ValidationError`` if the record could not be read back
    with ``parse_record``.
    """
    RecordIn.model_validate(asdict(record))
