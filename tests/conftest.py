"""テスト共通のフィクスチャ定義."""

import os
from collections.abc import AsyncGenerator, Iterator
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# avenger_api.database.database はインポート時に設定を読み込む
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from avenger_api.database.database import get_async_db_session  # noqa: E402
from avenger_api.main import app  # noqa: E402


def _create_tables(db_path: Path) -> None:
    sync_engine = create_engine(f"sqlite:///{db_path}")
    SQLModel.metadata.create_all(sync_engine)
    sync_engine.dispose()


def _async_engine(db_path: Path) -> AsyncEngine:
    return create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)


def _client_for(engine: AsyncEngine, *, raise_server_exceptions: bool) -> Iterator[TestClient]:
    async def override_session() -> AsyncGenerator[AsyncSession]:
        async with AsyncSession(engine) as session:
            yield session

    app.dependency_overrides[get_async_db_session] = override_session
    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """avengerテーブル作成済みの一時SQLiteファイル."""
    path = tmp_path / "avengers.db"
    _create_tables(path)
    return path


@pytest.fixture
def client(db_path: Path) -> Iterator[TestClient]:
    yield from _client_for(_async_engine(db_path), raise_server_exceptions=True)


@pytest.fixture
def broken_client(tmp_path: Path) -> Iterator[TestClient]:
    """avengerテーブルが存在しないDBに接続するクライアント."""
    engine = _async_engine(tmp_path / "empty.db")
    yield from _client_for(engine, raise_server_exceptions=False)


@pytest_asyncio.fixture
async def session(db_path: Path) -> AsyncGenerator[AsyncSession]:
    engine = _async_engine(db_path)
    async with AsyncSession(engine) as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def broken_session(tmp_path: Path) -> AsyncGenerator[AsyncSession]:
    engine = _async_engine(tmp_path / "empty.db")
    async with AsyncSession(engine) as session:
        yield session
    await engine.dispose()
