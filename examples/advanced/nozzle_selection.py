"""Nozzle selection example.

This example demonstrates:
- Comparing every catalog nozzle for the same sprayer setup
- Finding the speed window that keeps a nozzle in its pressure range
- Using a custom (regional) nozzle catalog instead of the built-in one

Shows how to pick a nozzle and speed for a target spray volume.
"""

import os
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import save_pressure_plots

from spray_planner import (
    ApplicationConfig,
    AreaSpec,
    AreaType,
    NozzleCatalog,
    NozzleSpec,
    SprayCalculator,
)
from spray_planner.catalog import DEFAULT_NOZZLES
from spray_planner.flow_calculator import calculate_required_pressure
from spray_planner.validation import MAX_SPEED_KM_H, MIN_SPEED_KM_H


def create_fairway_config(nozzle_id):
    """Fairway application at 250 L/ha with a 12 m boom.

    Args:
        nozzle_id: Nozzle to fit

    Returns:
        ApplicationConfig
    """
    return ApplicationConfig(
        nozzle_id=nozzle_id,
        spray_volume_l_ha=250.0,
        nozzle_spacing_m=0.5,
        nozzle_count=24,
        speed_km_h=7.0,
        tank_size_l=1000.0,
        areas=(
            AreaSpec(size_ha=12.5, type=AreaType.FAIRWAY, name="Front nine fairways"),
            AreaSpec(size_ha=11.8, type=AreaType.FAIRWAY, name="Back nine fairways"),
        ),
    )


def speed_window(config, nozzle):
    """Range of valid speeds that keep the nozzle within its pressure window.

    Returns:
        (min_speed, max_speed) in km/h, or None if no valid speed works
    """
    speeds = np.linspace(MIN_SPEED_KM_H, MAX_SPEED_KM_H, 181)
    pressures = np.array(
        [
            calculate_required_pressure(
                config.spray_volume_l_ha, speed, config.nozzle_spacing_m, nozzle
            )
            for speed in speeds
        ]
    )
    ok = speeds[(pressures >= nozzle.min_pressure_bar) & (pressures <= nozzle.max_pressure_bar)]
    if ok.size == 0:
        return None
    return float(ok.min()), float(ok.max())


def compare_nozzles(calculator, brand=None):
    """Print metrics and speed windows for the catalog nozzles.

    Args:
        calculator: SprayCalculator holding the catalog
        brand: Only list nozzles of this brand (default: all)
    """
    if brand is None:
        nozzles = list(calculator.catalog.values())
    else:
        nozzles = calculator.catalog.by_brand(brand)

    print(f"\n  {'Nozzle':<20} {'Flow':<10} {'Pressure':<10} {'Status':<8} {'Speed window'}")
    print(f"  {'':<20} {'(L/min)':<10} {'(bar)':<10} {'':<8} {'(km/h)'}")
    print("  " + "-" * 70)

    for nozzle in nozzles:
        config = create_fairway_config(nozzle.id)
        metrics = calculator.calculate(config)
        window = speed_window(config, nozzle)
        window_text = f"{window[0]:.1f} - {window[1]:.1f}" if window else "none"
        print(
            f"  {nozzle.label:<20} {metrics.flow_per_nozzle_l_min:<10.2f} "
            f"{metrics.required_pressure_bar:<10.2f} {metrics.pressure_status.value:<8} "
            f"{window_text}"
        )


def main():
    """Compare nozzles for a fairway application."""

    print("=" * 80)
    print("NOZZLE SELECTION")
    print("=" * 80)

    print("\n" + "=" * 80)
    print("SCENARIO 1: BUILT-IN CATALOG")
    print("=" * 80)
    compare_nozzles(SprayCalculator())

    print("\n" + "=" * 80)
    print("SCENARIO 2: REGIONAL CATALOG")
    print("=" * 80)
    regional = NozzleCatalog(
        list(DEFAULT_NOZZLES)
        + [
            NozzleSpec(
                id="lechler-id3-03",
                label="Lechler ID3 03",
                brand="lechler",
                k_factor=0.69,
                min_pressure_bar=2,
                max_pressure_bar=8,
            )
        ]
    )
    compare_nozzles(SprayCalculator(catalog=regional))

    print("\n" + "=" * 80)
    print("SCENARIO 3: TEEJET NOZZLES ONLY")
    print("=" * 80)
    compare_nozzles(SprayCalculator(), brand="teejet")

    config = create_fairway_config("teejet-aixr11004")
    metrics = SprayCalculator().calculate(config)
    print(
        f"\n  Fairways: {metrics.total_area_ha:.1f} ha, {metrics.total_spray_volume_l:.0f} L, "
        f"{metrics.tanks_required:.2f} tanks ({metrics.whole_tanks_required} fills)"
    )

    save_pressure_plots(
        config, "nozzle_selection", os.path.dirname(os.path.abspath(__file__)), catalog=regional
    )


if __name__ == "__main__":
    main()
