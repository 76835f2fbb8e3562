"""Product dosing models and unit tables for spray planning."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class ProductType(Enum):
    """Dosing unit family of a product."""

    SOLUBLE = "SOLUBLE"  # dosed by mass
    LIQUID = "LIQUID"  # dosed by volume


PRODUCT_TYPE_LABELS: Dict[ProductType, str] = {
    ProductType.SOLUBLE: "Soluble",
    ProductType.LIQUID: "Liquid",
}

PRODUCT_TYPE_UNITS: Dict[ProductType, str] = {
    ProductType.SOLUBLE: "kg/ha",
    ProductType.LIQUID: "L/ha",
}

PRODUCT_TYPE_TOTAL_UNITS: Dict[ProductType, str] = {
    ProductType.SOLUBLE: "kg",
    ProductType.LIQUID: "L",
}


@dataclass(frozen=True)
class ProductApplication:
    """One product's dosing within an application.

    Attributes:
        product_id: Product identifier
        product_name: Display name
        product_type: SOLUBLE (kg/ha) or LIQUID (L/ha)
        rate_per_ha: Amount of product per hectare, in the type's per-hectare unit
    """

    product_id: str
    product_name: str
    product_type: ProductType
    rate_per_ha: float

    @property
    def rate_unit(self) -> str:
        """Per-hectare unit, "kg/ha" or "L/ha"."""
        return PRODUCT_TYPE_UNITS[self.product_type]


@dataclass(frozen=True)
class ProductTotal:
    """Total amount of a product needed for an application."""

    product_id: str
    product_name: str
    product_type: ProductType
    rate_per_ha: float
    total_amount: float
    unit: str
