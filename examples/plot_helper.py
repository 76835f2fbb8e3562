"""Helper functions for saving matplotlib plots in examples."""

import os
from typing import Optional

from spray_planner import ApplicationConfig, NozzleCatalog
from spray_planner.visualize import plot_nozzle_comparison, plot_pressure_curve


def save_pressure_plots(
    config: ApplicationConfig,
    name: str,
    output_dir: str,
    catalog: Optional[NozzleCatalog] = None,
) -> None:
    """Save the pressure curve and nozzle comparison plots for a config.

    Args:
        config: Application configuration
        name: Base name for the files (e.g., "basic_usage")
        output_dir: Directory to write the PNG files to
        catalog: Optional nozzle catalog (default: built-in catalog)
    """
    curve_path = os.path.join(output_dir, f"{name}_pressure_curve.png")
    plot_pressure_curve(config, catalog=catalog, show=False, save_path=curve_path)
    print(f"  Plot saved: {curve_path}")

    comparison_path = os.path.join(output_dir, f"{name}_nozzles.png")
    plot_nozzle_comparison(config, catalog=catalog, show=False, save_path=comparison_path)
    print(f"  Plot saved: {comparison_path}")
