"""Application status workflow: Draft -> Scheduled -> Completed.

Transitions are pure: each returns a new ApplicationRecord and leaves the
original untouched. Stored records keep only the inputs; metrics() recomputes
the derived figures on demand.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Optional

from spray_planner.calculator import compute_spray_metrics
from spray_planner.catalog import NozzleCatalog
from spray_planner.errors import WorkflowError
from spray_planner.models.application import ApplicationConfig, SprayMetrics

logger = logging.getLogger(__name__)


class ApplicationStatus(Enum):
    """Lifecycle state of a spray application."""

    DRAFT = "DRAFT"
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class ApplicationRecord:
    """A named spray application with its status and completion details.

    Attributes:
        name: Application name
        config: Sprayer setup, areas and products
        status: Current lifecycle state
        scheduled_date: Planned spray date (set once scheduled)
        completed_date: Actual spray date (set once completed)
        operator: Who sprayed, recorded on completion
        weather_conditions: Conditions at spray time, recorded on completion
        notes: Free-form completion notes
    """

    name: str
    config: ApplicationConfig
    status: ApplicationStatus = ApplicationStatus.DRAFT
    scheduled_date: Optional[date] = None
    completed_date: Optional[date] = None
    operator: Optional[str] = None
    weather_conditions: Optional[str] = None
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the application name."""
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")
        if len(self.name) > 100:
            raise ValueError(f"name must be at most 100 characters, got {len(self.name)}")

    def metrics(self, catalog: Optional[NozzleCatalog] = None) -> SprayMetrics:
        """Recompute spray metrics from the stored inputs."""
        return compute_spray_metrics(self.config, catalog)


def _clear_completion(record: ApplicationRecord, **changes) -> ApplicationRecord:
    return replace(
        record,
        completed_date=None,
        operator=None,
        weather_conditions=None,
        notes=None,
        **changes,
    )


def schedule(record: ApplicationRecord, scheduled_date: date) -> ApplicationRecord:
    """
    Schedule an application for a date.

    Allowed from any state. Scheduling a completed application discards its
    completion details.

    Args:
        record: Application to schedule
        scheduled_date: Planned spray date

    Returns:
        New record in SCHEDULED state
    """
    logger.debug(f"Scheduling {record.name!r} for {scheduled_date} (was {record.status.value})")
    return _clear_completion(
        record, status=ApplicationStatus.SCHEDULED, scheduled_date=scheduled_date
    )


def complete(
    record: ApplicationRecord,
    completed_date: date,
    operator: Optional[str] = None,
    weather_conditions: Optional[str] = None,
    notes: Optional[str] = None,
) -> ApplicationRecord:
    """
    Mark an application as sprayed.

    Args:
        record: Draft or scheduled application
        completed_date: Date the spraying happened
        operator: Who sprayed
        weather_conditions: Conditions at spray time
        notes: Free-form notes

    Returns:
        New record in COMPLETED state

    Raises:
        WorkflowError: If the application is already completed
    """
    if record.status == ApplicationStatus.COMPLETED:
        raise WorkflowError(f"Application {record.name!r} is already completed")

    logger.debug(f"Completing {record.name!r} on {completed_date}")
    return replace(
        record,
        status=ApplicationStatus.COMPLETED,
        completed_date=completed_date,
        operator=operator,
        weather_conditions=weather_conditions,
        notes=notes,
    )


def revert_to_draft(record: ApplicationRecord) -> ApplicationRecord:
    """Return an application to DRAFT, dropping its schedule and completion details."""
    logger.debug(f"Reverting {record.name!r} to draft (was {record.status.value})")
    return _clear_completion(record, status=ApplicationStatus.DRAFT, scheduled_date=None)


def revert_to_scheduled(record: ApplicationRecord) -> ApplicationRecord:
    """
    Undo the completion of an application.

    The scheduled date is kept; completion details are dropped.

    Raises:
        WorkflowError: If the application is not completed
    """
    if record.status != ApplicationStatus.COMPLETED:
        raise WorkflowError("Can only revert completed applications")

    logger.debug(f"Reverting {record.name!r} to scheduled")
    return _clear_completion(record, status=ApplicationStatus.SCHEDULED)
