"""FastAPIアプリケーションのメインエントリーポイント."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from avenger_api.avenger.router import router as avenger_router
from avenger_api.common.log_prefix import LogPrefix
from avenger_api.database.database import async_engine, create_db_and_tables
from avenger_api.settings.settings import get_settings

settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """アプリケーションの起動・終了処理.

    ``auto_create_tables`` が有効な場合は起動時にテーブルを作成し、
    終了時にはエンジンのコネクションプールを破棄する。
    """
    logger.info(
        f"{LogPrefix.APP_LIFECYCLE} Starting environment={settings.environment}"
    )
    if settings.auto_create_tables:
        await create_db_and_tables()
        logger.info(f"{LogPrefix.APP_LIFECYCLE} Tables created")
    yield
    await async_engine.dispose()
    logger.info(f"{LogPrefix.APP_LIFECYCLE} Stopped")


app = FastAPI(
    title="Avengers API",
    description="アベンジャーの一覧取得・登録・削除を提供するAPI",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(avenger_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """ヘルスチェックエンドポイント."""
    return {"status": "healthy"}
