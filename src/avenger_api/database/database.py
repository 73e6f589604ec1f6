"""データベース接続とセッション管理を提供するモジュール."""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from avenger_api.database import model  # noqa: F401  テーブル定義をmetadataへ登録
from avenger_api.settings.settings import get_settings

settings = get_settings()

async_engine = create_async_engine(
    url=settings.sqlalchemy_url,
    echo=settings.sql_log,
    pool_pre_ping=True,
)


async def get_async_db_session() -> AsyncGenerator[AsyncSession]:
    """非同期データベースセッションを生成する.

    FastAPIの依存性注入で使用されるジェネレーター関数。
    セッションのライフサイクルを管理し、リクエスト終了時に自動的にクローズする。

    Yields
    ------
        AsyncSession: 非同期データベースセッション

    """
    async with AsyncSession(async_engine) as session:
        yield session


async def create_db_and_tables() -> None:
    """未作成のテーブルを作成する."""
    async with async_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
