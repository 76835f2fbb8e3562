"""Area, volume, tank, spray time and product total aggregation."""

import logging
import math
from typing import Iterable, List, Sequence

from spray_planner.models.application import round_up_tanks
from spray_planner.models.area import AreaSpec
from spray_planner.models.product import (
    PRODUCT_TYPE_TOTAL_UNITS,
    ProductApplication,
    ProductTotal,
)

logger = logging.getLogger(__name__)

# Converts m * km/h into ha/h (1000 m/km / 10000 m²/ha)
COVERAGE_CONVERSION_FACTOR = 10.0

MINUTES_PER_HOUR = 60.0


def calculate_total_area(areas: Iterable[AreaSpec]) -> float:
    """
    Sum area sizes in hectares.

    Non-finite sizes (NaN, +/-infinity) count as 0 instead of propagating,
    so a half-edited form still yields usable totals.

    Args:
        areas: Areas covered by the application

    Returns:
        Total area in hectares (0.0 for no areas)
    """
    total = 0.0
    for area in areas:
        if math.isfinite(area.size_ha):
            total += area.size_ha
        else:
            logger.debug(f"Ignoring non-finite area size {area.size_ha!r}")
    return total


def calculate_total_spray_volume(total_area_ha: float, spray_volume_l_ha: float) -> float:
    """Liquid needed to cover the area, in liters."""
    return total_area_ha * spray_volume_l_ha


def calculate_tanks_required(total_spray_volume_l: float, tank_size_l: float) -> float:
    """
    Calculate the fractional number of tank fills.

    This is the canonical tank figure; round it with whole_tanks_required()
    only for display or trip planning.

    Args:
        total_spray_volume_l: Liquid needed in liters
        tank_size_l: Tank capacity in liters

    Returns:
        volume / tank size, or 0.0 when either is zero

    Examples:
        >>> calculate_tanks_required(1500.0, 400.0)
        3.75
        >>> calculate_tanks_required(1500.0, 0.0)
        0.0
    """
    if total_spray_volume_l == 0 or tank_size_l == 0:
        return 0.0
    return total_spray_volume_l / tank_size_l


def whole_tanks_required(total_spray_volume_l: float, tank_size_l: float) -> int:
    """
    Calculate the number of tank fills rounded up to whole tanks.

    Examples:
        >>> whole_tanks_required(1500.0, 400.0)
        4
        >>> whole_tanks_required(0.0, 400.0)
        0
    """
    return round_up_tanks(calculate_tanks_required(total_spray_volume_l, tank_size_l))


def calculate_spray_time(
    total_area_ha: float,
    nozzle_spacing_m: float,
    nozzle_count: int,
    speed_km_h: float,
) -> float:
    """
    Estimate the time to spray the area, in minutes.

    This is a lower bound: it assumes continuous spraying in a single pass
    with no turns, refills or overlap.

    Args:
        total_area_ha: Area to cover in hectares
        nozzle_spacing_m: Distance between nozzles in meters
        nozzle_count: Number of nozzles on the boom
        speed_km_h: Driving speed in km/h

    Returns:
        Spray time in minutes, 0.0 when the sprayer covers no ground

    Examples:
        >>> round(calculate_spray_time(5.0, 0.5, 11, 5.0), 2)
        109.09
    """
    sprayer_width_m = nozzle_spacing_m * nozzle_count
    area_per_hour_ha = (sprayer_width_m * speed_km_h) / COVERAGE_CONVERSION_FACTOR
    if area_per_hour_ha <= 0:
        return 0.0
    return (total_area_ha / area_per_hour_ha) * MINUTES_PER_HOUR


def calculate_product_totals(
    products: Sequence[ProductApplication], total_area_ha: float
) -> List[ProductTotal]:
    """
    Calculate the total amount of each product for the area.

    Args:
        products: Products in the tank mix
        total_area_ha: Area to cover in hectares

    Returns:
        One ProductTotal per product, in the same order, with the amount in
        kg (SOLUBLE) or L (LIQUID)
    """
    return [
        ProductTotal(
            product_id=product.product_id,
            product_name=product.product_name,
            product_type=product.product_type,
            rate_per_ha=product.rate_per_ha,
            total_amount=total_area_ha * product.rate_per_ha,
            unit=PRODUCT_TYPE_TOTAL_UNITS[product.product_type],
        )
        for product in products
    ]
