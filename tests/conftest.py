import os
import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("PYTEST_RUNNING", "1")

from user_api.api.main import create_app
from user_api.db import database, models
from user_api.utils.feature_flags import refresh_feature_flag_cache


@pytest.fixture(scope="session")
def engine():
    """One in-memory SQLite engine shared by the whole session (StaticPool)."""
    eng = database.build_engine()
    models.Base.metadata.create_all(bind=eng)
    yield eng
    models.Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture(autouse=True)
def clean_data(engine):
    """Truncate all tables between tests without dropping metadata (faster)."""
    with engine.begin() as connection:
        for table in reversed(models.Base.metadata.sorted_tables):
            connection.execute(table.delete())
    yield


@pytest.fixture(autouse=True)
def _fresh_feature_flags():
    refresh_feature_flag_cache()
    yield
    refresh_feature_flag_cache()


@pytest.fixture
def db_session(engine):
    db = database.build_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def app(engine):
    return create_app(engine=engine)


@pytest.fixture
def client(app):
    # Context manager form runs the lifespan startup/shutdown hooks
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user_factory(db_session):
    def _create(first_name: str, last_name: str = "Doe", age: int | None = 30):
        user = models.User(first_name=first_name, last_name=last_name, age=age)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _create
