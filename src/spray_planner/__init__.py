"""Spray application planning for golf course sprayers."""

from .calculator import SprayCalculator, compute_spray_metrics
from .catalog import NozzleCatalog
from .errors import NozzleNotFoundError, ValidationError
from .models import (
    ApplicationConfig,
    AreaSpec,
    AreaType,
    NozzleSpec,
    PressureStatus,
    ProductApplication,
    ProductType,
    SprayMetrics,
)
from .validation import build_application_config

__all__ = [
    "ApplicationConfig",
    "AreaSpec",
    "AreaType",
    "NozzleCatalog",
    "NozzleNotFoundError",
    "NozzleSpec",
    "PressureStatus",
    "ProductApplication",
    "ProductType",
    "SprayCalculator",
    "SprayMetrics",
    "ValidationError",
    "build_application_config",
    "compute_spray_metrics",
]
