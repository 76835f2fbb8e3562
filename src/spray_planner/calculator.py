"""Spray metrics calculation.

This module provides compute_spray_metrics(), the pure function that turns an
application's sprayer setup, areas and products into its operating figures,
and the SprayCalculator class that binds it to a nozzle catalog.

Example:
    >>> from spray_planner.calculator import compute_spray_metrics
    >>> from spray_planner.models import ApplicationConfig, AreaSpec
    >>>
    >>> config = ApplicationConfig(
    ...     nozzle_id="syngenta-025-xc",
    ...     spray_volume_l_ha=300.0,
    ...     nozzle_spacing_m=0.5,
    ...     nozzle_count=11,
    ...     speed_km_h=5.0,
    ...     tank_size_l=400.0,
    ...     areas=[AreaSpec(size_ha=5.0)],
    ... )
    >>> metrics = compute_spray_metrics(config)
    >>> metrics.flow_per_nozzle_l_min
    1.25
"""

import logging
from typing import Iterable, List, Optional

from spray_planner.catalog import NozzleCatalog
from spray_planner.coverage import (
    calculate_product_totals,
    calculate_spray_time,
    calculate_tanks_required,
    calculate_total_area,
    calculate_total_spray_volume,
)
from spray_planner.flow_calculator import (
    calculate_nozzle_flow,
    calculate_required_pressure,
    classify_pressure,
)
from spray_planner.models.application import ApplicationConfig, SprayMetrics

logger = logging.getLogger(__name__)


def compute_spray_metrics(
    config: ApplicationConfig, catalog: Optional[NozzleCatalog] = None
) -> SprayMetrics:
    """Compute all derived metrics for an application.

    The calculation has no side effects: the same config and catalog always
    give the same metrics. Input ranges are assumed to be validated already;
    out-of-range values give meaningless but finite-where-guarded results
    rather than errors.

    Args:
        config: Sprayer setup, areas and products
        catalog: Nozzle catalog to resolve config.nozzle_id in
            (default: the built-in catalog)

    Returns:
        SprayMetrics snapshot with product totals in input order

    Raises:
        NozzleNotFoundError: If config.nozzle_id is not in the catalog
    """
    if catalog is None:
        catalog = NozzleCatalog.default()

    nozzle = catalog.get(config.nozzle_id)

    # Nozzle and pressure
    flow = calculate_nozzle_flow(
        config.spray_volume_l_ha, config.speed_km_h, config.nozzle_spacing_m
    )
    pressure = calculate_required_pressure(
        config.spray_volume_l_ha, config.speed_km_h, config.nozzle_spacing_m, nozzle
    )
    status = classify_pressure(pressure, nozzle)

    # Area and tank
    total_area = calculate_total_area(config.areas)
    total_volume = calculate_total_spray_volume(total_area, config.spray_volume_l_ha)
    tanks = calculate_tanks_required(total_volume, config.tank_size_l)

    spray_time = calculate_spray_time(
        total_area, config.nozzle_spacing_m, config.nozzle_count, config.speed_km_h
    )

    product_totals = calculate_product_totals(config.products, total_area)

    logger.debug(
        f"Metrics for nozzle {nozzle.id}: flow={flow:.3f} L/min, "
        f"pressure={pressure:.3f} bar ({status.value}), area={total_area:.3f} ha"
    )

    return SprayMetrics(
        flow_per_nozzle_l_min=flow,
        required_pressure_bar=pressure,
        speed_km_h=config.speed_km_h,
        pressure_status=status,
        total_area_ha=total_area,
        total_spray_volume_l=total_volume,
        tanks_required=tanks,
        spray_time_minutes=spray_time,
        product_totals=tuple(product_totals),
    )


class SprayCalculator:
    """Spray metrics calculator bound to a nozzle catalog.

    Holds no state besides the catalog, so one instance can serve any number
    of callers.

    Args:
        catalog: Nozzle catalog used to resolve nozzle ids.
                 Default: the built-in catalog
        logger: Logger instance. Default: this module's logger

    Example:
        >>> calculator = SprayCalculator()
        >>> metrics = calculator.calculate(config)
    """

    def __init__(
        self,
        catalog: Optional[NozzleCatalog] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.catalog = catalog if catalog is not None else NozzleCatalog.default()
        self.logger = logger or logging.getLogger(__name__)

    def calculate(self, config: ApplicationConfig) -> SprayMetrics:
        """Compute metrics for one application.

        Raises:
            NozzleNotFoundError: If the config's nozzle is not in the catalog
        """
        self.logger.debug(f"Calculating spray metrics for nozzle {config.nozzle_id}")
        return compute_spray_metrics(config, self.catalog)

    def calculate_many(self, configs: Iterable[ApplicationConfig]) -> List[SprayMetrics]:
        """Compute metrics for several applications, in order."""
        return [self.calculate(config) for config in configs]

    def __repr__(self) -> str:
        """Return string representation of the calculator."""
        return f"SprayCalculator(nozzles={len(self.catalog)})"
