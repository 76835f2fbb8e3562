"""Golf course area model for spray planning."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class AreaType(Enum):
    """Kinds of golf course zones an application can cover."""

    GREEN = "GREEN"
    TEE = "TEE"
    FAIRWAY = "FAIRWAY"
    ROUGH = "ROUGH"
    FIRST_CUT = "FIRST_CUT"
    APRON = "APRON"
    COLLAR = "COLLAR"
    PATH = "PATH"
    OTHER = "OTHER"

    @property
    def label(self) -> str:
        """Human readable name, e.g. "First Cut"."""
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class AreaSpec:
    """A sprayable zone referenced by an application.

    Note:
        Sizes are not validated here. Aggregations treat a non-finite size
        (NaN or infinity) as 0 so that half-edited input never poisons totals.

    Attributes:
        size_ha: Zone size in hectares
        type: Zone category, for display only
        name: Optional zone name
        area_id: Optional identifier of the stored area
    """

    size_ha: float
    type: AreaType = AreaType.OTHER
    name: Optional[str] = None
    area_id: Optional[str] = None
