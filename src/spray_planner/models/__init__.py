"""Core data models for spray planning.

This package contains all model classes and the product unit tables.
"""

from spray_planner.models.application import ApplicationConfig, PressureStatus, SprayMetrics
from spray_planner.models.area import AreaSpec, AreaType
from spray_planner.models.nozzle import NozzleSpec
from spray_planner.models.product import (
    PRODUCT_TYPE_LABELS,
    PRODUCT_TYPE_TOTAL_UNITS,
    PRODUCT_TYPE_UNITS,
    ProductApplication,
    ProductTotal,
    ProductType,
)

__all__ = [
    "ApplicationConfig",
    "AreaSpec",
    "AreaType",
    "NozzleSpec",
    "PressureStatus",
    "ProductApplication",
    "ProductTotal",
    "ProductType",
    "PRODUCT_TYPE_LABELS",
    "PRODUCT_TYPE_TOTAL_UNITS",
    "PRODUCT_TYPE_UNITS",
    "SprayMetrics",
]
