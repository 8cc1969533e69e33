import pytest
from httpx import AsyncClient, ASGITransport

from hostel_api.core.config import Settings
from hostel_api.core.database import init_db
from hostel_api.main import create_app

HOSTEL = "H1"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        upload_dir=str(tmp_path / "uploads"),
        log_level="warning",
    )


@pytest.fixture
async def app(settings):
    app = create_app(settings)
    # httpx does not run the lifespan, so create the schema here
    await init_db(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def db_session(app):
    async with app.state.session_factory() as session:
        yield session


@pytest.fixture
def add_student(client):
    async def _add(name, room_number="101", hostel_code=HOSTEL, **fields):
        payload = {"hostel_code": hostel_code, "name": name, "room_number": room_number, **fields}
        response = await client.post("/api/students", json=payload)
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        return body["student"]
    return _add
