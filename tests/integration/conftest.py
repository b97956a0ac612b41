import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from credential_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from credential_service.app.services.credential_policy import CredentialPolicy
from credential_service.depends import get_credential_policy, get_notifier, get_unit_of_work
from tests.fixtures.json_loader import AccountDataLoader
from tests.fixtures.recording_notifier import RecordingNotifier


@pytest.fixture
def test_data():
    return AccountDataLoader()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def policy():
    return CredentialPolicy()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, notifier, policy):
    from credential_service.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_credential_policy] = lambda: policy

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
