"""Pytest fixtures for service and API tests."""

import os
from collections.abc import AsyncGenerator, Generator

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from verdure_admin.api.deps import get_db
from verdure_admin.db import models  # noqa: F401  # Imported for side effects
from verdure_admin.db.base import Base
from verdure_admin.db.models import Fixit, FixitStatus, Vocab
from verdure_admin.main import create_app
from verdure_admin.repositories import SqlAuditRepository, SqlFixitRepository, SqlVocabRepository
from verdure_admin.services.audit import AuditService
from verdure_admin.services.fixit import FixitService
from verdure_admin.services.vocab import VocabService
from verdure_admin.utils.exceptions import PersistenceError


@pytest.fixture(scope="session")
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session(db_engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, expire_on_commit=False, bind=db_engine
    )
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()


@pytest.fixture()
def audit_service(db_session) -> AuditService:
    return AuditService(SqlAuditRepository(db_session))


class FailingAuditRepository(SqlAuditRepository):
    """Audit storage that rejects every write."""

    def create(self, record):
        raise PersistenceError("audit table unavailable")


@pytest.fixture()
def failing_audit_service(db_session) -> AuditService:
    return AuditService(FailingAuditRepository(db_session))


@pytest.fixture()
def vocab_service(db_session, audit_service) -> VocabService:
    return VocabService(SqlVocabRepository(db_session), audit_service)


@pytest.fixture()
def fixit_service(db_session, audit_service) -> FixitService:
    return FixitService(SqlFixitRepository(db_session), audit_service)


@pytest.fixture()
def client(db_session: Session) -> Generator[TestClient, None, None]:
    app = create_app()

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture()
async def async_client(db_session: Session) -> AsyncGenerator["httpx.AsyncClient", None]:
    import httpx

    app = create_app()

    async def override_get_db() -> AsyncGenerator[Session, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture()
def ser_vocab(db_session) -> Vocab:
    vocab = Vocab(
        learning_lang="ser",
        first_lang="to be",
        alternatives="Alternative",
        skill="Beginner",
        infinitive="ser",
        pos="verb",
        hint="A hint",
        num_learning_words=1,
        known_lang_code="en",
        learning_lang_code="es",
    )
    db_session.add(vocab)
    db_session.commit()
    return vocab


@pytest.fixture()
def pending_fixit(db_session, ser_vocab) -> Fixit:
    fixit = Fixit(
        vocab_id=ser_vocab.id,
        status=FixitStatus.PENDING,
        field_name="hint",
        comments="hint gives the answer away",
        created_by="tester",
    )
    db_session.add(fixit)
    db_session.commit()
    return fixit
