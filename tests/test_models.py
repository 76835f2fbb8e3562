"""Tests for core data models."""

import math

import pytest

from spray_planner.coverage import calculate_tanks_required, whole_tanks_required
from spray_planner.models import (
    PRODUCT_TYPE_LABELS,
    PRODUCT_TYPE_TOTAL_UNITS,
    PRODUCT_TYPE_UNITS,
    ApplicationConfig,
    AreaSpec,
    AreaType,
    NozzleSpec,
    PressureStatus,
    ProductApplication,
    ProductType,
    SprayMetrics,
)


class TestNozzleSpec:
    """Tests for the NozzleSpec model."""

    def test_valid_nozzle_creation(self):
        """Test creating a valid nozzle spec."""
        nozzle = NozzleSpec(
            id="teejet-aixr11004",
            label="TeeJet AIXR11004",
            brand="teejet",
            k_factor=0.91,
            min_pressure_bar=1,
            max_pressure_bar=6,
        )
        assert nozzle.k_factor == 0.91
        assert nozzle.min_pressure_bar == 1
        assert nozzle.max_pressure_bar == 6

    def test_zero_k_factor_raises_error(self):
        """Test that a zero k-factor raises ValueError."""
        with pytest.raises(ValueError, match="k_factor must be positive"):
            NozzleSpec("n", "N", "b", k_factor=0.0, min_pressure_bar=1, max_pressure_bar=4)

    def test_negative_k_factor_raises_error(self):
        """Test that a negative k-factor raises ValueError."""
        with pytest.raises(ValueError, match="k_factor must be positive"):
            NozzleSpec("n", "N", "b", k_factor=-0.5, min_pressure_bar=1, max_pressure_bar=4)

    def test_min_above_max_raises_error(self):
        """Test that an inverted pressure window raises ValueError."""
        with pytest.raises(ValueError, match="must not exceed max_pressure_bar"):
            NozzleSpec("n", "N", "b", k_factor=1.0, min_pressure_bar=5, max_pressure_bar=4)

    def test_negative_min_pressure_raises_error(self):
        """Test that a negative minimum pressure raises ValueError."""
        with pytest.raises(ValueError, match="min_pressure_bar must be non-negative"):
            NozzleSpec("n", "N", "b", k_factor=1.0, min_pressure_bar=-1, max_pressure_bar=4)

    def test_empty_id_raises_error(self):
        """Test that an empty id raises ValueError."""
        with pytest.raises(ValueError, match="id must be a non-empty string"):
            NozzleSpec("", "N", "b", k_factor=1.0, min_pressure_bar=1, max_pressure_bar=4)

    def test_equal_bounds_allowed(self):
        """Test that a single-point operating window is accepted."""
        nozzle = NozzleSpec("n", "N", "b", k_factor=1.0, min_pressure_bar=3, max_pressure_bar=3)
        assert nozzle.in_operating_range(3.0)

    def test_in_operating_range_inclusive(self):
        """Test that both window bounds count as in range."""
        nozzle = NozzleSpec("n", "N", "b", k_factor=1.0, min_pressure_bar=1, max_pressure_bar=4)
        assert nozzle.in_operating_range(1.0)
        assert nozzle.in_operating_range(4.0)
        assert not nozzle.in_operating_range(0.99)
        assert not nozzle.in_operating_range(4.01)

    def test_nozzle_immutability(self):
        """Test that NozzleSpec is immutable (frozen dataclass)."""
        nozzle = NozzleSpec("n", "N", "b", k_factor=1.0, min_pressure_bar=1, max_pressure_bar=4)
        with pytest.raises(Exception):  # FrozenInstanceError
            nozzle.k_factor = 2.0


class TestAreaSpec:
    """Tests for the AreaSpec model and AreaType enum."""

    def test_default_type_is_other(self):
        """Test that areas default to OTHER type."""
        area = AreaSpec(size_ha=1.5)
        assert area.type == AreaType.OTHER
        assert area.name is None

    def test_non_finite_size_is_accepted(self):
        """Test that AreaSpec does not reject non-finite sizes."""
        area = AreaSpec(size_ha=float("nan"))
        assert math.isnan(area.size_ha)

    def test_area_type_labels(self):
        """Test human readable area type labels."""
        assert AreaType.GREEN.label == "Green"
        assert AreaType.FIRST_CUT.label == "First Cut"

    def test_all_course_zones_present(self):
        """Test the closed set of area types."""
        assert {t.value for t in AreaType} == {
            "GREEN",
            "TEE",
            "FAIRWAY",
            "ROUGH",
            "FIRST_CUT",
            "APRON",
            "COLLAR",
            "PATH",
            "OTHER",
        }


class TestProductTables:
    """Tests for product types and their unit tables."""

    def test_per_hectare_units(self):
        """Test per-hectare units per product type."""
        assert PRODUCT_TYPE_UNITS[ProductType.SOLUBLE] == "kg/ha"
        assert PRODUCT_TYPE_UNITS[ProductType.LIQUID] == "L/ha"

    def test_total_units(self):
        """Test total units per product type."""
        assert PRODUCT_TYPE_TOTAL_UNITS[ProductType.SOLUBLE] == "kg"
        assert PRODUCT_TYPE_TOTAL_UNITS[ProductType.LIQUID] == "L"

    def test_labels(self):
        """Test display labels per product type."""
        assert PRODUCT_TYPE_LABELS[ProductType.SOLUBLE] == "Soluble"
        assert PRODUCT_TYPE_LABELS[ProductType.LIQUID] == "Liquid"

    def test_every_type_has_units(self):
        """Test that the unit tables cover every product type."""
        for product_type in ProductType:
            assert product_type in PRODUCT_TYPE_UNITS
            assert product_type in PRODUCT_TYPE_TOTAL_UNITS

    def test_product_rate_unit(self):
        """Test ProductApplication.rate_unit follows the type."""
        product = ProductApplication("p1", "Iron", ProductType.SOLUBLE, 2.0)
        assert product.rate_unit == "kg/ha"


class TestApplicationConfig:
    """Tests for the ApplicationConfig model."""

    def test_lists_are_stored_as_tuples(self):
        """Test that area and product lists are frozen into tuples."""
        config = ApplicationConfig(
            nozzle_id="syngenta-025-xc",
            spray_volume_l_ha=300.0,
            nozzle_spacing_m=0.5,
            nozzle_count=11,
            speed_km_h=5.0,
            tank_size_l=400.0,
            areas=[AreaSpec(size_ha=5.0)],
            products=[ProductApplication("p1", "Iron", ProductType.SOLUBLE, 2.0)],
        )
        assert isinstance(config.areas, tuple)
        assert isinstance(config.products, tuple)
        assert hash(config) == hash(config)

    def test_defaults_to_no_areas_or_products(self):
        """Test that areas and products default to empty."""
        config = ApplicationConfig("syngenta-025-xc", 300.0, 0.5, 11, 5.0, 400.0)
        assert config.areas == ()
        assert config.products == ()

    def test_boom_width(self):
        """Test boom width = spacing * nozzle count."""
        config = ApplicationConfig("syngenta-025-xc", 300.0, 0.5, 11, 5.0, 400.0)
        assert config.boom_width_m == pytest.approx(5.5)

    def test_no_range_validation(self):
        """Test that out-of-range values can still be represented."""
        config = ApplicationConfig("syngenta-025-xc", 300.0, 0.0, 11, -5.0, 0.0)
        assert config.speed_km_h == -5.0


class TestSprayMetrics:
    """Tests for SprayMetrics derived properties."""

    def _metrics(self, tanks):
        return SprayMetrics(
            flow_per_nozzle_l_min=1.25,
            required_pressure_bar=2.0,
            speed_km_h=5.0,
            pressure_status=PressureStatus.OK,
            total_area_ha=5.0,
            total_spray_volume_l=1500.0,
            tanks_required=tanks,
            spray_time_minutes=109.09,
        )

    def test_whole_tanks_rounds_up(self):
        """Test that whole tanks round partial tanks up."""
        assert self._metrics(3.75).whole_tanks_required == 4

    def test_whole_tanks_exact(self):
        """Test that an exact number of tanks is not rounded up."""
        assert self._metrics(3.0).whole_tanks_required == 3

    def test_whole_tanks_zero(self):
        """Test that zero tanks stays zero."""
        assert self._metrics(0.0).whole_tanks_required == 0

    def test_whole_tanks_non_finite(self):
        """Test that infinite or NaN tanks give zero fills."""
        assert self._metrics(math.inf).whole_tanks_required == 0
        assert self._metrics(math.nan).whole_tanks_required == 0

    def test_whole_tanks_matches_coverage(self):
        """Test that the property and the coverage helper round the same way."""
        for volume, tank in ((1500.0, 400.0), (1200.0, 400.0), (0.0, 400.0), (1500.0, 0.0)):
            tanks = calculate_tanks_required(volume, tank)
            assert self._metrics(tanks).whole_tanks_required == whole_tanks_required(
                volume, tank
            )

    def test_pressure_status_values(self):
        """Test the string values of PressureStatus."""
        assert PressureStatus.OK.value == "ok"
        assert PressureStatus.LOW.value == "low"
        assert PressureStatus.HIGH.value == "high"
