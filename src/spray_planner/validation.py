"""Input validation for spray applications.

Turns loosely typed form data (strings or numbers, camelCase keys) into the
typed models. All field errors are collected and reported together in one
ValidationError, keyed by field path.

Example:
    >>> config = build_application_config({
    ...     "nozzleId": "teejet-aixr11004",
    ...     "sprayVolumeLHa": "300",
    ...     "nozzleSpacingM": "0.5",
    ...     "nozzleCount": "24",
    ...     "speedKmH": "6",
    ...     "tankSizeL": "600",
    ...     "areas": [{"areaId": "a1", "type": "FAIRWAY", "sizeHa": 2.5}],
    ...     "products": [],
    ... })
    >>> config.nozzle_count
    24
"""

import math
from collections import defaultdict
from typing import Any, Dict, List, Mapping, Optional, Sequence

from spray_planner.catalog import NozzleCatalog
from spray_planner.errors import ValidationError
from spray_planner.models.application import ApplicationConfig
from spray_planner.models.area import AreaSpec, AreaType
from spray_planner.models.product import ProductApplication, ProductType

MIN_SPEED_KM_H = 3.0
MAX_SPEED_KM_H = 12.0
MAX_NOZZLE_SPACING_M = 10.0
MAX_NOZZLE_COUNT = 200
MAX_RATE_PER_HA = 1000.0


class _ErrorCollector:
    """Accumulates field errors under a common path prefix."""

    def __init__(self, prefix: str = "", errors: Optional[Dict[str, List[str]]] = None) -> None:
        self.prefix = prefix
        self.errors: Dict[str, List[str]] = errors if errors is not None else defaultdict(list)

    def nested(self, prefix: str) -> "_ErrorCollector":
        """Collector for a sub-record that reports into the same errors."""
        return _ErrorCollector(prefix=f"{self.prefix}{prefix}", errors=self.errors)

    def add(self, field: str, message: str) -> None:
        self.errors[f"{self.prefix}{field}"].append(message)

    def number(self, data: Mapping[str, Any], field: str) -> Optional[float]:
        """Coerce a field to float, recording an error when impossible."""
        value = data.get(field)
        if value is None or isinstance(value, bool):
            self.add(field, "Expected a number")
            return None
        if isinstance(value, str):
            value = value.strip()
            if not value:
                self.add(field, "Expected a number")
                return None
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            self.add(field, "Expected a number")
            return None
        if not math.isfinite(number):
            self.add(field, "Expected a finite number")
            return None
        return number

    def raise_if_errors(self) -> None:
        if self.errors:
            raise ValidationError(dict(self.errors))


def _sequence_field(
    collector: _ErrorCollector, data: Mapping[str, Any], field: str
) -> Sequence[Any]:
    """List or tuple field, empty when missing; other types are an error."""
    value = data.get(field)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        collector.add(field, "Expected a list")
        return []
    return value


def _check_area(collector: _ErrorCollector, data: Mapping[str, Any]) -> Optional[AreaSpec]:
    size = collector.number(data, "sizeHa")
    if size is not None and not size > 0:
        collector.add("sizeHa", "Size must be greater than 0")

    area_type: Optional[AreaType] = None
    raw_type = data.get("type", AreaType.OTHER.value)
    try:
        area_type = raw_type if isinstance(raw_type, AreaType) else AreaType(raw_type)
    except ValueError:
        collector.add("type", f"Unknown area type: {raw_type!r}")

    area_id = data.get("areaId")
    if area_id is not None and not isinstance(area_id, str):
        collector.add("areaId", "Expected a string")
        area_id = None

    if size is None or area_type is None:
        return None
    return AreaSpec(
        size_ha=size,
        type=area_type,
        name=data.get("name"),
        area_id=area_id,
    )


def _check_product(
    collector: _ErrorCollector, data: Mapping[str, Any]
) -> Optional[ProductApplication]:
    product_id = data.get("productId")
    if not isinstance(product_id, str) or not product_id:
        collector.add("productId", "Product is required")

    product_type: Optional[ProductType] = None
    raw_type = data.get("productType")
    try:
        product_type = raw_type if isinstance(raw_type, ProductType) else ProductType(raw_type)
    except ValueError:
        collector.add("productType", f"Unknown product type: {raw_type!r}")

    rate = collector.number(data, "ratePerHa")
    if rate is not None:
        if not rate > 0:
            collector.add("ratePerHa", "Application rate must be positive")
        elif rate > MAX_RATE_PER_HA:
            collector.add("ratePerHa", "Application rate must be less than 1000")

    if product_type is None or rate is None or not isinstance(product_id, str):
        return None
    return ProductApplication(
        product_id=product_id,
        product_name=str(data.get("productName", "")),
        product_type=product_type,
        rate_per_ha=rate,
    )


def validate_area(data: Mapping[str, Any]) -> AreaSpec:
    """
    Validate one area record.

    Args:
        data: Mapping with "sizeHa", optional "type", "name" and "areaId"

    Returns:
        The validated AreaSpec

    Raises:
        ValidationError: If the size is not a positive number or the type is unknown
    """
    collector = _ErrorCollector()
    area = _check_area(collector, data)
    collector.raise_if_errors()
    return area  # type: ignore[return-value]


def validate_product(data: Mapping[str, Any]) -> ProductApplication:
    """
    Validate one product dosing record.

    Args:
        data: Mapping with "productId", "productName", "productType" and "ratePerHa"

    Returns:
        The validated ProductApplication

    Raises:
        ValidationError: If any field is missing or out of range
    """
    collector = _ErrorCollector()
    product = _check_product(collector, data)
    collector.raise_if_errors()
    return product  # type: ignore[return-value]


def build_application_config(
    data: Mapping[str, Any], catalog: Optional[NozzleCatalog] = None
) -> ApplicationConfig:
    """
    Validate form data and build an ApplicationConfig.

    Rules:
        - nozzleId: required, must exist in the catalog
        - sprayVolumeLHa, tankSizeL: greater than 0
        - nozzleSpacingM: greater than 0 and less than 10
        - nozzleCount: whole number from 1 to 200
        - speedKmH: between 3 and 12 inclusive
        - areas: at least one, valid, no duplicate areaId
        - products: each valid (rate above 0, at most 1000)

    Args:
        data: Raw application data; numbers may be given as strings
        catalog: Catalog used to check the nozzle (default: built-in catalog)

    Returns:
        A config that satisfies every rule above

    Raises:
        ValidationError: With every failing field when any rule is broken
    """
    if catalog is None:
        catalog = NozzleCatalog.default()

    collector = _ErrorCollector()

    nozzle_id = data.get("nozzleId")
    if not isinstance(nozzle_id, str) or not nozzle_id:
        collector.add("nozzleId", "Select a nozzle")
    elif nozzle_id not in catalog:
        collector.add("nozzleId", f"Unknown nozzle: {nozzle_id}")

    spray_volume = collector.number(data, "sprayVolumeLHa")
    if spray_volume is not None and not spray_volume > 0:
        collector.add("sprayVolumeLHa", "Spray volume must be greater than 0")

    spacing = collector.number(data, "nozzleSpacingM")
    if spacing is not None:
        if not spacing > 0:
            collector.add("nozzleSpacingM", "Nozzle spacing must be greater than 0")
        elif not spacing < MAX_NOZZLE_SPACING_M:
            collector.add("nozzleSpacingM", "Nozzle spacing must be less than 10m")

    count = collector.number(data, "nozzleCount")
    if count is not None:
        if not count.is_integer():
            collector.add("nozzleCount", "Nozzle count must be a whole number")
        elif count <= 0:
            collector.add("nozzleCount", "Nozzle count must be greater than 0")
        elif count > MAX_NOZZLE_COUNT:
            collector.add("nozzleCount", "Nozzle count seems too large")

    tank_size = collector.number(data, "tankSizeL")
    if tank_size is not None and not tank_size > 0:
        collector.add("tankSizeL", "Tank size must be greater than 0")

    speed = collector.number(data, "speedKmH")
    if speed is not None:
        if speed < MIN_SPEED_KM_H:
            collector.add("speedKmH", "Min 3 km/h")
        elif speed > MAX_SPEED_KM_H:
            collector.add("speedKmH", "Max 12 km/h")

    areas: List[AreaSpec] = []
    raw_areas = _sequence_field(collector, data, "areas")
    if not raw_areas and "areas" not in collector.errors:
        collector.add("areas", "Add at least one area for this application")
    area_ids = [
        a.get("areaId")
        for a in raw_areas
        if isinstance(a, Mapping) and isinstance(a.get("areaId"), str) and a.get("areaId")
    ]
    if len(set(area_ids)) != len(area_ids):
        collector.add("areas", "Duplicate areas are not allowed")
    for index, raw_area in enumerate(raw_areas):
        if not isinstance(raw_area, Mapping):
            collector.add(f"areas[{index}]", "Expected an object")
            continue
        area = _check_area(collector.nested(f"areas[{index}]."), raw_area)
        if area is not None:
            areas.append(area)

    products: List[ProductApplication] = []
    for index, raw_product in enumerate(_sequence_field(collector, data, "products")):
        if not isinstance(raw_product, Mapping):
            collector.add(f"products[{index}]", "Expected an object")
            continue
        product = _check_product(collector.nested(f"products[{index}]."), raw_product)
        if product is not None:
            products.append(product)

    collector.raise_if_errors()

    return ApplicationConfig(
        nozzle_id=nozzle_id,  # type: ignore[arg-type]
        spray_volume_l_ha=spray_volume,  # type: ignore[arg-type]
        nozzle_spacing_m=spacing,  # type: ignore[arg-type]
        nozzle_count=int(count),  # type: ignore[arg-type]
        speed_km_h=speed,  # type: ignore[arg-type]
        tank_size_l=tank_size,  # type: ignore[arg-type]
        areas=tuple(areas),
        products=tuple(products),
    )
