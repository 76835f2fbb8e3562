"""Application configuration and derived spray metrics models."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

from spray_planner.models.area import AreaSpec
from spray_planner.models.product import ProductApplication, ProductTotal


class PressureStatus(Enum):
    """Required pressure relative to the nozzle's operating window."""

    OK = "ok"
    LOW = "low"  # below min_pressure_bar
    HIGH = "high"  # above max_pressure_bar


def round_up_tanks(tanks: float) -> int:
    """Whole tank fills for a fractional tank count; 0 when nothing to spray."""
    if tanks <= 0 or not math.isfinite(tanks):
        return 0
    return math.ceil(tanks)


@dataclass(frozen=True)
class ApplicationConfig:
    """Sprayer setup, areas and products of one spray application.

    Values are not range checked here so the calculator can be driven with
    transient edge input. Use ``spray_planner.validation.build_application_config``
    to build a config from untrusted data.

    Attributes:
        nozzle_id: Catalog key of the nozzle fitted to the boom
        spray_volume_l_ha: Target application rate in liters per hectare
        nozzle_spacing_m: Distance between nozzles along the boom in meters
        nozzle_count: Number of nozzles on the boom
        speed_km_h: Driving speed in km/h (3-12 for a valid application)
        tank_size_l: Tank capacity in liters
        areas: Zones covered by the application
        products: Products in the tank mix, in display order
    """

    nozzle_id: str
    spray_volume_l_ha: float
    nozzle_spacing_m: float
    nozzle_count: int
    speed_km_h: float
    tank_size_l: float
    areas: Tuple[AreaSpec, ...] = field(default_factory=tuple)
    products: Tuple[ProductApplication, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Store sequences as tuples so the config stays hashable."""
        object.__setattr__(self, "areas", tuple(self.areas))
        object.__setattr__(self, "products", tuple(self.products))

    @property
    def boom_width_m(self) -> float:
        """Sprayer working width in meters."""
        return self.nozzle_spacing_m * self.nozzle_count


@dataclass(frozen=True)
class SprayMetrics:
    """Derived operating figures for an application.

    Never stored; recompute from the ApplicationConfig whenever it is shown.

    Attributes:
        flow_per_nozzle_l_min: Output of a single nozzle in L/min
        required_pressure_bar: Pressure needed to reach that flow in bar
        speed_km_h: Driving speed the figures were computed for
        pressure_status: Required pressure against the nozzle's window
        total_area_ha: Sum of all area sizes in hectares
        total_spray_volume_l: Liquid needed for the whole application in liters
        tanks_required: Tank fills needed, fractional (e.g. 3.75)
        spray_time_minutes: Lower-bound spraying time, assuming continuous
            spraying with no turns, refills or overlap
        product_totals: One entry per input product, in input order
    """

    flow_per_nozzle_l_min: float
    required_pressure_bar: float
    speed_km_h: float
    pressure_status: PressureStatus
    total_area_ha: float
    total_spray_volume_l: float
    tanks_required: float
    spray_time_minutes: float
    product_totals: Tuple[ProductTotal, ...] = ()

    @property
    def whole_tanks_required(self) -> int:
        """Number of tank fills, rounded up to whole tanks."""
        return round_up_tanks(self.tanks_required)
