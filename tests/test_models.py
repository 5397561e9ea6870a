import dataclasses
from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest

from workflowstats.models import RepositoryRow, WorkflowRunRow

ORG = UUID("9bfeff91-ba3c-4eef-9479-3407a59ded6b")


def test_repository_row_fields():
    row = RepositoryRow(id=1, name="periodic-wing", org_id=ORG)
    assert (row.id, row.name, row.org_id) == (1, "periodic-wing", ORG)


def test_repository_row_equality():
    assert RepositoryRow(1, "a", ORG) == RepositoryRow(1, "a", ORG)
    assert RepositoryRow(1, "a", ORG) != RepositoryRow(2, "a", ORG)


def test_workflow_run_row_is_frozen():
    run = WorkflowRunRow(
        time=datetime(2024, 1, 1, tzinfo=timezone.utc),
        workflow_name="handy-range",
        repository_id=2,
        duration=timedelta(seconds=5),
    )
    with pytest.raises(dataclasses.FrozenInstanceError):
        run.repository_id = 3
    assert run.repository_id == 2
    assert run.duration == timedelta(seconds=5)


def test_workflow_run_row_replace():
    run = WorkflowRunRow(
        datetime(2024, 1, 1, tzinfo=timezone.utc), "oval-knot", 1, timedelta(seconds=7)
    )
    changed = dataclasses.replace(run, repository_id=3)
    assert changed.repository_id == 3
    assert changed.workflow_name == run.workflow_name