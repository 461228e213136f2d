"""Shared fixtures for API tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from preorder.db import session as db_session
from preorder.db.base import Base
from preorder.main import app


def _build_test_engine(db_file: Path) -> Engine:
    return create_engine(
        f"sqlite:///{db_file}",
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def client(tmp_path: Path, monkeypatch) -> Iterator[TestClient]:
    engine = _build_test_engine(tmp_path / "test_preorder.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", testing_session_local)

    with TestClient(app) as test_client:
        yield test_client
    engine.dispose()
