"""Plain-text rendering of spray metrics for display."""

import math
from typing import List, Optional

from spray_planner.models.application import PressureStatus, SprayMetrics
from spray_planner.models.product import PRODUCT_TYPE_UNITS

SPRAY_TIME_NOTE = (
    "Estimated time to spray the entire area in a single pass without stopping. "
    "Actual time will be higher due to turns, fills, and overlaps."
)

PRESSURE_GUIDANCE = {
    PressureStatus.LOW: (
        "Pressure is below the recommended range - "
        "consider increasing speed or increasing spray volume."
    ),
    PressureStatus.HIGH: (
        "Pressure is above the recommended range - "
        "consider reducing speed or reducing spray volume."
    ),
}


def format_duration(minutes: float) -> str:
    """
    Format a duration in minutes as hours and minutes.

    Rounds half up to whole minutes and omits a zero hour part.

    Examples:
        >>> format_duration(109.09)
        '1h 49m'
        >>> format_duration(120.0)
        '2h'
        >>> format_duration(0.2)
        '0m'
    """
    total_minutes = int(math.floor(minutes + 0.5)) if math.isfinite(minutes) else 0
    hours, mins = divmod(total_minutes, 60)

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if mins > 0 or not parts:
        parts.append(f"{mins}m")
    return " ".join(parts)


def pressure_guidance(status: PressureStatus) -> Optional[str]:
    """Advice for bringing pressure back into range, None when it is OK."""
    return PRESSURE_GUIDANCE.get(status)


def format_metrics(metrics: SprayMetrics, spray_volume_l_ha: Optional[float] = None) -> str:
    """
    Render metrics as the lines of the live calculations panel.

    Args:
        metrics: Metrics to render
        spray_volume_l_ha: Spray volume to mention next to the total volume

    Returns:
        Multi-line text, no trailing newline
    """
    volume_line = f"Spray volume:   {metrics.total_spray_volume_l:.2f} L"
    if spray_volume_l_ha is not None:
        volume_line += f" (at {spray_volume_l_ha:g} L/ha)"

    lines: List[str] = [
        f"Nozzle flow:    {metrics.flow_per_nozzle_l_min:.2f} L/min",
        f"Pressure:       {metrics.required_pressure_bar:.2f} bar "
        f"({metrics.pressure_status.value})",
        f"Speed:          {metrics.speed_km_h:.2f} km/h",
        f"Total area:     {metrics.total_area_ha:.3f} ha",
        volume_line,
        f"Tanks:          {metrics.tanks_required:.2f} "
        f"({metrics.whole_tanks_required} fills)",
        f"Spray time:     {format_duration(metrics.spray_time_minutes)}",
        f"                {SPRAY_TIME_NOTE}",
    ]

    guidance = pressure_guidance(metrics.pressure_status)
    if guidance:
        lines.append(f"Warning: {guidance}")

    if metrics.product_totals:
        lines.append("Products:")
        for product in metrics.product_totals:
            lines.append(
                f"  {product.product_name}: {product.total_amount:.2f} {product.unit} "
                f"(rate {product.rate_per_ha:.2f} {PRODUCT_TYPE_UNITS[product.product_type]})"
            )

    return "\n".join(lines)
