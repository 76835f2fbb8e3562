"""Basic usage example.

This example demonstrates:
- Validating submitted form data into an ApplicationConfig
- Computing spray metrics with the built-in nozzle catalog
- Printing the live calculations report
- Saving pressure plots

This is the simplest way to use the spray planner.
"""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import save_pressure_plots

from spray_planner import ValidationError, build_application_config, compute_spray_metrics
from spray_planner.logger import setup_logger
from spray_planner.report import format_metrics


def main():
    """Plan a greens and tees application."""
    setup_logger(log_level="INFO")

    print("=" * 80)
    print("BASIC SPRAY PLANNER USAGE")
    print("=" * 80)

    # Values as they arrive from a form: numbers may be strings
    form_data = {
        "nozzleId": "teejet-aixr11004",
        "sprayVolumeLHa": "300",
        "nozzleSpacingM": "0.5",
        "nozzleCount": "24",
        "speedKmH": "6",
        "tankSizeL": "600",
        "areas": [
            {"areaId": "g1-18", "name": "Greens 1-18", "type": "GREEN", "sizeHa": 1.1},
            {"areaId": "t1-18", "name": "Tees 1-18", "type": "TEE", "sizeHa": 0.9},
            {"areaId": "ap", "name": "Aprons", "type": "APRON", "sizeHa": 0.45},
        ],
        "products": [
            {
                "productId": "fe-01",
                "productName": "Iron Sulphate",
                "productType": "SOLUBLE",
                "ratePerHa": "2.5",
            },
            {
                "productId": "wa-02",
                "productName": "Wetting Agent",
                "productType": "LIQUID",
                "ratePerHa": "4",
            },
        ],
    }

    try:
        config = build_application_config(form_data)
    except ValidationError as e:
        print("\nInvalid input:")
        for field, messages in e.errors.items():
            print(f"  {field}: {', '.join(messages)}")
        return

    print("\nInput Configuration:")
    print(f"  Nozzle: {config.nozzle_id}")
    print(
        f"  Boom: {config.nozzle_count} nozzles x {config.nozzle_spacing_m} m "
        f"= {config.boom_width_m:.1f} m"
    )
    print(f"  Speed: {config.speed_km_h} km/h, spray volume: {config.spray_volume_l_ha} L/ha")
    print(f"  Areas: {len(config.areas)}, products: {len(config.products)}\n")

    metrics = compute_spray_metrics(config)

    print("Live calculations:")
    print("  " + "-" * 70)
    for line in format_metrics(metrics, spray_volume_l_ha=config.spray_volume_l_ha).splitlines():
        print(f"  {line}")

    print("\n" + "=" * 80)
    print("GENERATING PLOTS")
    print("=" * 80)
    save_pressure_plots(config, "basic_usage", os.path.dirname(os.path.abspath(__file__)))
    print()


if __name__ == "__main__":
    main()
