"""Row types for repositories and workflow runs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID


@dataclass(frozen=True)
class RepositoryRow:
    """A repository belonging to an organisation."""

    id: int
    name: str
    org_id: UUID


@dataclass(frozen=True)
class WorkflowRunRow:
    """A single workflow run recorded at a point in time."""

    time: datetime
    workflow_name: str
    repository_id: int
    duration: timedelta