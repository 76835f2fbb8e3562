"""Nozzle flow rate, required pressure and pressure range checking."""

from spray_planner.models.application import PressureStatus
from spray_planner.models.nozzle import NozzleSpec

# Converts L/ha * km/h * m into L/min
FLOW_CONVERSION_FACTOR = 600.0


def calculate_nozzle_flow(
    spray_volume_l_ha: float, speed_km_h: float, nozzle_spacing_m: float
) -> float:
    """Calculate the output of one nozzle needed to hit the target spray volume.

    flow = spray_volume * speed * spacing / 600

    Args:
        spray_volume_l_ha: Target application rate in L/ha
        speed_km_h: Driving speed in km/h
        nozzle_spacing_m: Distance between nozzles in meters

    Returns:
        Flow per nozzle in L/min

    Examples:
        >>> calculate_nozzle_flow(300.0, 5.0, 0.5)
        1.25
    """
    return (spray_volume_l_ha * speed_km_h * nozzle_spacing_m) / FLOW_CONVERSION_FACTOR


def calculate_required_pressure(
    spray_volume_l_ha: float,
    speed_km_h: float,
    nozzle_spacing_m: float,
    nozzle: NozzleSpec,
) -> float:
    """Calculate the pressure a nozzle needs to deliver the required flow.

    From flow = k * sqrt(pressure):

        pressure = (spray_volume * speed * spacing / (600 * k)) ** 2

    Args:
        spray_volume_l_ha: Target application rate in L/ha
        speed_km_h: Driving speed in km/h
        nozzle_spacing_m: Distance between nozzles in meters
        nozzle: Nozzle providing the k-factor

    Returns:
        Required pressure in bar

    Examples:
        >>> nozzle = NozzleSpec("n", "N", "b", k_factor=1.0,
        ...                     min_pressure_bar=1, max_pressure_bar=4)
        >>> calculate_required_pressure(600.0, 2.0, 0.5, nozzle)
        1.0
    """
    ratio = (spray_volume_l_ha * speed_km_h * nozzle_spacing_m) / (
        FLOW_CONVERSION_FACTOR * nozzle.k_factor
    )
    return ratio**2


def classify_pressure(pressure_bar: float, nozzle: NozzleSpec) -> PressureStatus:
    """Classify a pressure against the nozzle's operating window.

    Both bounds are inclusive: a pressure equal to min or max is OK.

    Args:
        pressure_bar: Pressure to check in bar
        nozzle: Nozzle providing the operating window

    Returns:
        OK inside the window, LOW below the minimum, otherwise HIGH
        (a NaN pressure is never OK)

    Examples:
        >>> nozzle = NozzleSpec("n", "N", "b", k_factor=1.0,
        ...                     min_pressure_bar=1, max_pressure_bar=4)
        >>> classify_pressure(4.0, nozzle)
        <PressureStatus.OK: 'ok'>
        >>> classify_pressure(0.5, nozzle)
        <PressureStatus.LOW: 'low'>
    """
    if nozzle.in_operating_range(pressure_bar):
        return PressureStatus.OK
    if pressure_bar < nozzle.min_pressure_bar:
        return PressureStatus.LOW
    return PressureStatus.HIGH
