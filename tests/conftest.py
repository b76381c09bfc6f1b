"""Test fixtures and configuration."""

import logging
import os
import sys

# Settings are read at import time; point them at test values first.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./record_shop_test.db"
os.environ["ENVIRONMENT"] = "testing"
os.environ["SECRET_KEY"] = "test_secret_key_with_enough_length_for_hs256"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
import pytest_asyncio
import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from tests.factories import ADMIN_EMAIL, DEFAULT_PASSWORD, USER_EMAIL, bearer, make_client


# --- Structlog Configuration for Tests ---
@pytest.fixture(autouse=True, scope="session")
def configure_structlog_for_tests():
    """Configure structlog for proper capsys capture in tests."""
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=False),
        foreign_pre_chain=processors[:-1],
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)

    yield

    structlog.reset_defaults()


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Create a throwaway SQLite database with the full schema for one test.

    Each test gets its own database file, so tests never share rows and no
    rollback bookkeeping is needed.
    """
    from record_shop.database import Base
    import record_shop.models  # noqa: F401

    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'record_shop.db'}",
        echo=False,
        poolclass=NullPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    """Session maker bound to the test database, also used by API handlers."""
    from record_shop import database

    maker = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    previous = database.set_test_session_maker(maker)
    yield maker
    database.set_test_session_maker(previous)


@pytest_asyncio.fixture
async def db(session_maker):
    """Session for arranging and asserting data directly."""
    async with session_maker() as session:
        yield session


async def _create_user(session_maker, email: str, role, first_name: str):
    from record_shop.models import User
    from record_shop.repositories import UserRepository
    from record_shop.security import hash_password

    async with session_maker() as session:
        user = User(
            first_name=first_name,
            last_name=first_name,
            email=email,
            password_hash=hash_password(DEFAULT_PASSWORD),
            role=role,
            active=True,
        )
        return await UserRepository(session).save(user)


@pytest_asyncio.fixture
async def admin_user(session_maker):
    from record_shop.models import UserRole

    return await _create_user(session_maker, ADMIN_EMAIL, UserRole.ADMIN, "admin")


@pytest_asyncio.fixture
async def regular_user(session_maker):
    from record_shop.models import UserRole

    return await _create_user(session_maker, USER_EMAIL, UserRole.USER, "user")


@pytest_asyncio.fixture
async def public_client(session_maker):
    """Async test client without auth headers."""
    async with make_client() as client:
        yield client


@pytest_asyncio.fixture
async def admin_client(session_maker, admin_user):
    async with make_client(bearer(admin_user.email)) as client:
        yield client


@pytest_asyncio.fixture
async def user_client(session_maker, regular_user):
    async with make_client(bearer(regular_user.email)) as client:
        yield client
