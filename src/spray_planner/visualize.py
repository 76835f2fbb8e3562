"""Visualization utilities for spray application analysis.

This module provides functions to visualize required nozzle pressure against
the nozzle's operating window, across driving speeds and across nozzles.
"""

from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from spray_planner.catalog import NozzleCatalog
from spray_planner.flow_calculator import calculate_required_pressure, classify_pressure
from spray_planner.models.application import ApplicationConfig, PressureStatus
from spray_planner.models.nozzle import NozzleSpec
from spray_planner.validation import MAX_SPEED_KM_H, MIN_SPEED_KM_H

STATUS_COLORS = {
    PressureStatus.OK: "tab:green",
    PressureStatus.LOW: "tab:orange",
    PressureStatus.HIGH: "tab:red",
}


def _pressure_over_speeds(
    config: ApplicationConfig, nozzle: NozzleSpec, speeds: np.ndarray
) -> np.ndarray:
    """Required pressure for each speed, all other settings fixed.

    Args:
        config: Application configuration
        nozzle: Nozzle spec providing the k-factor
        speeds: Driving speeds in km/h

    Returns:
        Array of required pressures in bar
    """
    return np.array(
        [
            calculate_required_pressure(
                config.spray_volume_l_ha, speed, config.nozzle_spacing_m, nozzle
            )
            for speed in speeds
        ]
    )


def plot_pressure_curve(
    config: ApplicationConfig,
    catalog: Optional[NozzleCatalog] = None,
    speeds: Optional[Sequence[float]] = None,
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot required pressure across driving speeds.

    Shows the nozzle's min/max operating pressure as a shaded band and marks
    the configured speed, so it is easy to read off which speeds keep the
    nozzle in range for the chosen spray volume.

    Args:
        config: Application configuration
        catalog: Nozzle catalog (default: built-in catalog)
        speeds: Speeds to evaluate in km/h (default: 3 to 12 km/h)
        title: Optional custom title (default: auto-generated)
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Raises:
        NozzleNotFoundError: If the config's nozzle is not in the catalog
        ValueError: If speeds is empty

    Example:
        >>> plot_pressure_curve(config, show=False, save_path="pressure.png")
    """
    if catalog is None:
        catalog = NozzleCatalog.default()
    nozzle = catalog.get(config.nozzle_id)

    if speeds is None:
        speed_values = np.linspace(MIN_SPEED_KM_H, MAX_SPEED_KM_H, 91)
    else:
        speed_values = np.asarray(speeds, dtype=float)
    if speed_values.size == 0:
        raise ValueError("Cannot plot empty speed range")

    pressures = _pressure_over_speeds(config, nozzle, speed_values)
    current = calculate_required_pressure(
        config.spray_volume_l_ha, config.speed_km_h, config.nozzle_spacing_m, nozzle
    )
    status = classify_pressure(current, nozzle)

    fig, ax = plt.subplots(figsize=(10, 5))

    if title is None:
        title = (
            f"Required Pressure vs Speed\n"
            f"Nozzle: {nozzle.label} (k={nozzle.k_factor}) | "
            f"{config.spray_volume_l_ha:g} L/ha, {config.nozzle_spacing_m:g} m spacing"
        )
    fig.suptitle(title, fontsize=14, fontweight="bold")

    ax.plot(speed_values, pressures, linewidth=2, label="Required pressure")
    ax.axhspan(
        nozzle.min_pressure_bar,
        nozzle.max_pressure_bar,
        color="green",
        alpha=0.15,
        label=f"Operating range ({nozzle.min_pressure_bar:g}-{nozzle.max_pressure_bar:g} bar)",
    )
    ax.plot(
        [config.speed_km_h],
        [current],
        marker="o",
        markersize=9,
        linestyle="none",
        color=STATUS_COLORS[status],
        label=f"Current: {current:.2f} bar ({status.value})",
    )
    ax.set_xlabel("Speed (km/h)")
    ax.set_ylabel("Pressure (bar)")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig


def plot_nozzle_comparison(
    config: ApplicationConfig,
    catalog: Optional[NozzleCatalog] = None,
    title: str = "Required Pressure by Nozzle",
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot the required pressure of every catalog nozzle for one setup.

    Bars are colored by pressure status; each nozzle's operating window is
    drawn as an error bar from min to max pressure.

    Args:
        config: Application configuration; its nozzle_id is ignored
        catalog: Nozzle catalog (default: built-in catalog)
        title: Plot title
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Raises:
        ValueError: If the catalog is empty
    """
    if catalog is None:
        catalog = NozzleCatalog.default()
    if len(catalog) == 0:
        raise ValueError("Cannot plot empty nozzle catalog")

    nozzles = list(catalog.values())
    labels: List[str] = [nozzle.label for nozzle in nozzles]
    pressures = np.array(
        [
            calculate_required_pressure(
                config.spray_volume_l_ha, config.speed_km_h, config.nozzle_spacing_m, nozzle
            )
            for nozzle in nozzles
        ]
    )
    colors = [
        STATUS_COLORS[classify_pressure(pressure, nozzle)]
        for pressure, nozzle in zip(pressures, nozzles)
    ]
    lows = np.array([nozzle.min_pressure_bar for nozzle in nozzles])
    highs = np.array([nozzle.max_pressure_bar for nozzle in nozzles])
    positions = np.arange(len(nozzles))

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(positions, pressures, color=colors, alpha=0.8, label="Required pressure")
    ax.errorbar(
        positions,
        (lows + highs) / 2,
        yerr=(highs - lows) / 2,
        fmt="none",
        ecolor="black",
        capsize=6,
        label="Operating range",
    )
    ax.set_xticks(positions)
    ax.set_xticklabels(labels, rotation=20, ha="right")
    ax.set_ylabel("Pressure (bar)")
    ax.set_title(title)
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig
