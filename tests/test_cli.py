import logging
import random
from datetime import datetime, timezone

import pytest
from sqlalchemy import create_engine

from workflowstats import cli, db, seed


def test_count_runs_empty():
    engine = create_engine("sqlite://")
    db.create_tables(engine)
    with engine.connect() as conn:
        assert cli.count_runs(conn) == 0
    engine.dispose()


def test_count_runs_after_seed():
    engine = create_engine("sqlite://")
    db.create_tables(engine)
    with engine.begin() as conn:
        _, runs = seed.seed(conn, datetime(2024, 6, 15, tzinfo=timezone.utc), random.Random(5))
        assert cli.count_runs(conn) == len(runs)
    engine.dispose()


def test_main_logs_count(tmp_path, monkeypatch, caplog):
    url = f"sqlite:///{tmp_path / 'cli.db'}"
    assert seed.main(["--database-url", url]) == 0
    monkeypatch.setenv("DATABASE_URL", url)
    caplog.set_level(logging.INFO)
    assert cli.main([]) == 0
    assert "500" in caplog.messages


def test_main_requires_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2