"""アベンジャーAPIのコマンドラインエントリーポイント.

APIサーバーの起動と、テーブルの初期作成を提供する。
"""

import asyncio
import logging
from typing import Annotated

import typer
import uvicorn

from avenger_api.database.database import async_engine, create_db_and_tables
from avenger_api.settings.settings import get_settings

app = typer.Typer()

settings = get_settings()
logger = logging.getLogger(__name__)


@app.command()
def serve(
    host: Annotated[str | None, typer.Option(help="待受ホスト")] = None,
    port: Annotated[int | None, typer.Option(help="待受ポート")] = None,
    reload: Annotated[bool, typer.Option(help="コード変更時に自動リロード")] = False,
) -> None:
    """APIサーバーを起動する."""
    uvicorn.run(
        "avenger_api.main:app",
        host=host if host is not None else settings.api_host,
        port=port if port is not None else settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("init-db")
def init_db() -> None:
    """avengerテーブルが未作成であれば作成する."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(_init_db())


async def _init_db() -> None:
    logger.info("Creating tables if absent")
    try:
        await create_db_and_tables()
    finally:
        await async_engine.dispose()
    logger.info("Done")


if __name__ == "__main__":
    app()
