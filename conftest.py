"""
Pytest fixtures for the jabones API tests.
Every test runs against a fresh in-memory SQLite database.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, build_engine, get_db
from app.db.models import Tienda, Jabon
from app.main import app


@pytest.fixture
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== Data Fixtures ==============

@pytest.fixture
def tienda(db):
    """Create a tienda with no jabones"""
    db_tienda = Tienda(nombre="Tienda A", direccion="Calle 1")
    db.add(db_tienda)
    db.commit()
    db.refresh(db_tienda)
    return db_tienda


@pytest.fixture
def tienda_con_jabones(db, tienda):
    """Attach two jabones to the tienda fixture"""
    db.add_all([
        Jabon(nombre="Jabon X", marca="Marca 1", precio=3.5, stock=10, tienda=tienda),
        Jabon(nombre="Jabon Y", marca="Marca 2", precio=2.0, stock=4, tienda=tienda),
    ])
    db.commit()
    db.refresh(tienda)
    return tienda
