"""Exception hierarchy for spray planning."""

from typing import Dict, List, Optional


class SprayPlannerError(Exception):
    """Base class for all spray planner errors."""


class NozzleNotFoundError(SprayPlannerError, LookupError):
    """Raised when a nozzle identifier does not resolve in a catalog."""

    def __init__(self, nozzle_id: str) -> None:
        self.nozzle_id = nozzle_id
        super().__init__(f"Unknown nozzle identifier: {nozzle_id!r}")


class CatalogError(SprayPlannerError, ValueError):
    """Raised when a nozzle catalog cannot be built or loaded."""


class ValidationError(SprayPlannerError, ValueError):
    """Raised when application input fails schema validation.

    Attributes:
        errors: Mapping of field path (e.g. ``areas[1].sizeHa``) to the list
            of messages reported for that field
    """

    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None) -> None:
        self.errors = errors
        if message is None:
            details = "; ".join(
                f"{field}: {', '.join(messages)}" for field, messages in errors.items()
            )
            message = f"Invalid application input ({details})"
        super().__init__(message)


class WorkflowError(SprayPlannerError):
    """Raised when an application status transition is not allowed."""
