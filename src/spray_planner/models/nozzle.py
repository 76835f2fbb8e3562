"""Nozzle specification model for spray planning."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NozzleSpec:
    """Physical constants of a spray nozzle model.

    Attributes:
        id: Unique catalog key (e.g., "teejet-aixr11004")
        label: Display name (e.g., "TeeJet AIXR11004")
        brand: Manufacturer key (e.g., "teejet")
        k_factor: Flow coefficient relating pressure to flow, flow = k * sqrt(pressure)
        min_pressure_bar: Lowest recommended operating pressure in bar (inclusive)
        max_pressure_bar: Highest recommended operating pressure in bar (inclusive)
    """

    id: str
    label: str
    brand: str
    k_factor: float
    min_pressure_bar: float
    max_pressure_bar: float

    def __post_init__(self) -> None:
        """Validate nozzle constants."""
        if not self.id:
            raise ValueError("id must be a non-empty string")
        if self.k_factor <= 0:
            raise ValueError(f"k_factor must be positive, got {self.k_factor}")
        if self.min_pressure_bar < 0:
            raise ValueError(
                f"min_pressure_bar must be non-negative, got {self.min_pressure_bar}"
            )
        if self.min_pressure_bar > self.max_pressure_bar:
            raise ValueError(
                f"min_pressure_bar must not exceed max_pressure_bar, "
                f"got {self.min_pressure_bar} > {self.max_pressure_bar}"
            )

    def in_operating_range(self, pressure_bar: float) -> bool:
        """Whether a pressure lies within the nozzle's operating window."""
        return self.min_pressure_bar <= pressure_bar <= self.max_pressure_bar
