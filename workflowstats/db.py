"""Schema and queries for the repositories and workflow_runs tables."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    Interval,
    MetaData,
    Table,
    Text,
    Uuid,
    create_engine,
    insert,
    select,
)
from sqlalchemy.engine import Connection, Engine

from workflowstats.models import WorkflowRunRow

log = logging.getLogger(__name__)

metadata = MetaData()

repositories = Table(
    "repositories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=False),
    Column("name", Text, nullable=False),
    Column("org_id", Uuid, nullable=False),
)

workflow_runs = Table(
    "workflow_runs",
    metadata,
    Column("time", DateTime(timezone=True), nullable=False),
    Column("workflow_name", Text, nullable=False),
    Column("repository_id", Integer, nullable=False),
    Column("duration", Interval, nullable=False),
)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def create_tables(bind) -> None:
    """Create any missing tables on the given engine or connection."""
    metadata.create_all(bind)


def connect(url: str) -> Engine:
    """Create an engine for ``url`` and make sure the schema exists."""
    engine = create_engine(url)
    create_tables(engine)
    return engine


def read(conn: Connection) -> list[WorkflowRunRow]:
    """Return every stored workflow run."""
    statement = select(
        workflow_runs.c.time,
        workflow_runs.c.workflow_name,
        workflow_runs.c.repository_id,
        workflow_runs.c.duration,
    )
    return [
        WorkflowRunRow(
            time=_as_utc(row.time),
            workflow_name=row.workflow_name,
            repository_id=row.repository_id,
            duration=row.duration,
        )
        for row in conn.execute(statement)
    ]


def create_repository(repo_id: int, name: str, org_id: UUID, conn: Connection) -> None:
    """Insert a repository row."""
    log.info("Inserting id = %s, name = %s, org = %s!", repo_id, name, org_id)
    conn.execute(insert(repositories).values(id=repo_id, name=name, org_id=org_id))


def create_workflow_run(run: WorkflowRunRow, conn: Connection) -> None:
    """Insert a workflow run row; its time is stored in UTC."""
    conn.execute(
        insert(workflow_runs).values(
            time=_as_utc(run.time),
            workflow_name=run.workflow_name,
            repository_id=run.repository_id,
            duration=run.duration,
        )
    )