"""
Sample vehicles for trying out the export without typing a full record.
"""
import random
from typing import Optional

from .models import (
    AccessoryItem,
    PricingRateRange,
    PricingTerm,
    TireOption,
    VehicleInfo,
    VehicleRecord,
)

SAMPLE_VEHICLES = [
    VehicleInfo(
        brand="Peugeot",
        model="208",
        trim="Style",
        condition="km0",
        category="city_car",
        registration_date="2024-12-01",
        kilometers="1",
        url="https://www.brescianiautomobilisrl.it/auto/km0/bergamo/peugeot/208/benzina/208-puretech-75-stop-start-5-porte-style/9392176/",
        configuration_url="https://vendite.whipair.it/peugeot-208-style-km0-1-configurazione-riepilogo-ordine/",
        engine_size="1199",
        fuel_type="benzina",
        transmission="automatic",
        power_kw="110",
        power_cv="110",
        seats="5",
        doors="5",
        status="available",
        visibility="visible_orderable",
        exterior_color="Grigio artense",
        interior_color="Tessuto Renzo / Rimini",
        wheels='Cerchi in lamiera da 16" monti con copricerchio',
        pair_to_save_daily="12.00",
        standard_equipment=(
            "6 Airbags (frontali, laterali, a tendina)\n"
            "Climatizzatore manuale monozona\n"
            "Sensori di parcheggio posteriori"
        ),
    ),
    VehicleInfo(
        brand="Fiat",
        model="500",
        trim="Pop",
        condition="used",
        category="city_car",
        registration_date="2022-05-15",
        kilometers="25000",
        url="https://example.com/fiat-500-used",
        configuration_url="https://example.com/fiat-500-config",
        engine_size="1242",
        fuel_type="benzina",
        transmission="manual",
        power_kw="51",
        power_cv="69",
        seats="4",
        doors="3",
        status="available",
        visibility="visible_orderable",
        exterior_color="Bianco",
        interior_color="Tela nera",
        wheels="Cerchi in acciaio",
        pair_to_save_daily="8.50",
        standard_equipment="ABS\nAirbag conducente\nClimatizzatore manuale",
    ),
    VehicleInfo(
        brand="Tesla",
        model="Model 3",
        trim="Standard Range Plus",
        condition="new",
        category="electric",
        registration_date="2025-01-01",
        kilometers="0",
        url="https://example.com/tesla-model3-new",
        configuration_url="https://example.com/tesla-model3-config",
        fuel_type="elettrico",
        transmission="single_speed",
        power_kw="140",
        power_cv="190",
        seats="5",
        doors="4",
        status="available",
        visibility="visible_orderable",
        exterior_color="Nero",
        interior_color="Vegan leather",
        wheels="Cerchi Aero",
        pair_to_save_daily="0.00",
        standard_equipment="Autopilot\nSupercharger access\nGlass roof",
    ),
    VehicleInfo(
        brand="BMW",
        model="X3",
        trim="xDrive20d",
        condition="km0",
        category="suv",
        registration_date="2024-11-01",
        kilometers="500",
        url="https://example.com/bmw-x3-km0",
        configuration_url="https://example.com/bmw-x3-config",
        engine_size="1995",
        fuel_type="diesel",
        transmission="automatic",
        power_kw="140",
        power_cv="190",
        seats="5",
        doors="5",
        status="available",
        visibility="visible_requestable",
        exterior_color="Blu metallizzato",
        interior_color="Pelle nera",
        wheels='Cerchi in lega 18"',
        pair_to_save_daily="25.00",
        standard_equipment="Navigazione\nSedili riscaldati\nSensori parcheggio",
    ),
    VehicleInfo(
        brand="Renault",
        model="Clio",
        trim="Intens",
        condition="used",
        category="city_car",
        registration_date="2021-03-20",
        kilometers="45000",
        url="https://example.com/renault-clio-used",
        configuration_url="https://example.com/renault-clio-config",
        engine_size="999",
        fuel_type="benzina",
        transmission="manual",
        power_kw="75",
        power_cv="102",
        seats="5",
        doors="5",
        status="available",
        visibility="visible_orderable",
        exterior_color="Rosso",
        interior_color="Tela grigia",
        wheels="Cerchi in acciaio",
        pair_to_save_daily="10.00",
        standard_equipment="Radio DAB\nClimatizzatore automatico\nSensori pioggia",
    ),
]

# (monthly_avg, final_min, final_max, down_min, down_max, [(rate_min, rate_max), ...])
SAMPLE_PRICING = {
    "3y": ("520.00", "15000.00", "20000.00", "3000.00", "6000.00",
           [("550.00", "200.00"), ("520.00", "190.00"), ("490.00", "180.00")]),
    "4y": ("410.00", "14000.00", "19000.00", "2500.00", "5500.00",
           [("440.00", "195.00"), ("420.00", "185.00"), ("380.00", "175.00"),
            ("340.00", "165.00")]),
    "5y": ("360.00", "13000.00", "18500.00", "2000.00", "5000.00",
           [("400.00", "160.00"), ("360.00", "150.00"), ("320.00", "145.00"),
            ("300.00", "140.00"), ("280.00", "135.00")]),
}

SAMPLE_ACCESSORIES = [
    ("Infotainment (media display)", "300.00"),
    ("Gancio traino", "440.00"),
    ("Telecamera di retromarcia", "165.00"),
]

SAMPLE_TIRES = [
    ("all_season", "22.23"),
    ("summer_winter", "31.95"),
]


def sample_pricing_table():
    pricing = {}
    for term_key, (monthly, fmin, fmax, dmin, dmax, rates) in SAMPLE_PRICING.items():
        pricing[term_key] = PricingTerm(
            monthly_avg=monthly,
            final_min=fmin,
            final_max=fmax,
            down_min=dmin,
            down_max=dmax,
            rates=[
                PricingRateRange(label=f"rate_{i}", min=lo, max=hi)
                for i, (lo, hi) in enumerate(rates, start=1)
            ],
        )
    return pricing


def create_sample_record(rng: Optional[random.Random] = None) -> VehicleRecord:
    """Build a complete record from a randomly picked sample vehicle."""
    rng = rng or random.Random()
    vehicle = rng.choice(SAMPLE_VEHICLES)
    return VehicleRecord(
        vehicle=VehicleInfo(**vars(vehicle)),
        pricing=sample_pricing_table(),
        accessories=[AccessoryItem(name=n, price=p) for n, p in SAMPLE_ACCESSORIES],
        tires=[TireOption(label=label, price=p) for label, p in SAMPLE_TIRES],
    )
