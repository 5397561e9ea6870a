import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.exc import IntegrityError

from workflowstats import db
from workflowstats.models import WorkflowRunRow

ORG = UUID("0a65112c-62df-4f36-a748-f1ba4ef30c3b")


@pytest.fixture
def conn():
    engine = create_engine("sqlite://")
    db.create_tables(engine)
    with engine.begin() as connection:
        yield connection
    engine.dispose()


def test_read_empty(conn):
    assert db.read(conn) == []


def test_create_repository_inserts_row(conn):
    db.create_repository(2, "fascinated-feet", ORG, conn)
    rows = conn.execute(select(db.repositories)).all()
    assert [(r.id, r.name, r.org_id) for r in rows] == [(2, "fascinated-feet", ORG)]


def test_create_repository_logs(conn, caplog):
    caplog.set_level(logging.INFO)
    db.create_repository(1, "periodic-wing", ORG, conn)
    assert f"Inserting id = 1, name = periodic-wing, org = {ORG}!" in caplog.messages


def test_duplicate_repository_rejected(conn):
    db.create_repository(3, "testy-legs", ORG, conn)
    with pytest.raises(IntegrityError):
        db.create_repository(3, "testy-legs", ORG, conn)


def test_workflow_run_round_trip(conn):
    runs = [
        WorkflowRunRow(
            datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
            "cloistered-lip",
            1,
            timedelta(seconds=42),
        ),
        WorkflowRunRow(
            datetime(2024, 5, 1, 12, 5, tzinfo=timezone.utc),
            "handy-range",
            3,
            timedelta(seconds=0),
        ),
    ]
    for run in runs:
        db.create_workflow_run(run, conn)
    assert sorted(db.read(conn), key=lambda r: r.time) == runs


def test_workflow_run_time_stored_as_utc(conn):
    local = timezone(timedelta(hours=2))
    moment = datetime(2024, 5, 1, 14, 0, tzinfo=local)
    db.create_workflow_run(WorkflowRunRow(moment, "oval-knot", 2, timedelta(seconds=9)), conn)
    (stored,) = db.read(conn)
    assert stored.time == moment
    assert stored.time.tzinfo == timezone.utc


def test_connect_creates_schema(tmp_path):
    engine = db.connect(f"sqlite:///{tmp_path / 'runs.db'}")
    try:
        with engine.connect() as connection:
            assert db.read(connection) == []
    finally:
        engine.dispose()