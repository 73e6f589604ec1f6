"""Avengerテーブルのリポジトリモジュール."""

import logging
from collections.abc import Sequence
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import delete, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from avenger_api.common.log_prefix import LogPrefix
from avenger_api.database.database import get_async_db_session
from avenger_api.database.model.avenger import Avenger

logger = logging.getLogger(__name__)


class AvengerRepository:
    """Avengerテーブルへのデータアクセスを提供するリポジトリ.

    各操作はSQL文を1つだけ発行する。

    Attributes
    ----------
        session: 非同期DBセッション

    """

    def __init__(self, session: AsyncSession) -> None:
        """AvengerRepositoryを初期化.

        Args:
        ----
            session: 非同期DBセッション

        """
        self.session = session

    async def get_all(self) -> Sequence[Avenger]:
        """全アベンジャーをID昇順で取得.

        Returns
        -------
            Avengerオブジェクトのリスト(0件の場合は空リスト)

        """
        stmt = select(Avenger).order_by(col(Avenger.id).asc())
        result = await self.session.exec(stmt)
        avengers = result.all()
        logger.debug(f"{LogPrefix.LIST_AVENGER} fetched {len(avengers)} rows")
        return avengers

    async def create(self, name: str) -> Avenger:
        """アベンジャーを登録し、採番されたIDを含む行を返す.

        採番IDはINSERT文のRETURNINGで同時に取得する。

        Args:
        ----
            name: アベンジャーの名前

        Returns:
        -------
            永続化されたAvenger

        Raises:
        ------
            SQLAlchemyError: DB登録エラー時

        """
        stmt = insert(Avenger).values(name=name).returning(col(Avenger.id))
        try:
            result = await self.session.exec(stmt)  # type: ignore[call-overload]
            new_id = result.scalar_one()
            await self.session.commit()
        except SQLAlchemyError as error:
            await self.session.rollback()
            self._log_sql_error(
                prefix=LogPrefix.INSERT_AVENGER,
                stmt=stmt,
                params={"name": name},
                error=error,
            )
            raise

        logger.info(f"{LogPrefix.INSERT_AVENGER} created id=%s", new_id)
        return Avenger(id=new_id, name=name)

    async def delete(self, avenger_id: int) -> int:
        """指定IDのアベンジャーを削除.

        該当行が存在しなくてもエラーにはしない。

        Args:
        ----
            avenger_id: 削除対象のID

        Returns:
        -------
            削除した行数(0または1)

        Raises:
        ------
            SQLAlchemyError: DB削除エラー時

        """
        stmt = delete(Avenger).where(col(Avenger.id) == avenger_id)
        try:
            result = await self.session.exec(stmt)  # type: ignore[call-overload]
            await self.session.commit()
        except SQLAlchemyError as error:
            await self.session.rollback()
            self._log_sql_error(
                prefix=LogPrefix.DELETE_AVENGER,
                stmt=stmt,
                params={"id": avenger_id},
                error=error,
            )
            raise

        deleted_count = result.rowcount
        logger.debug(
            f"{LogPrefix.DELETE_AVENGER} id=%s deleted=%s",
            avenger_id,
            deleted_count,
        )
        return deleted_count

    def _log_sql_error(
        self,
        *,
        prefix: str,
        stmt: Any,
        params: dict[str, Any],
        error: SQLAlchemyError,
    ) -> None:
        """SQL実行エラーをSQL文とパラメータ付きでログ出力."""
        bind = self.session.bind
        sql = str(stmt.compile(dialect=bind.dialect)) if bind else str(stmt)
        orig = getattr(error, "orig", None)
        logger.error(
            f"{prefix} error sql=%s params=%s sqlstate=%s message=%s",
            sql,
            params,
            getattr(orig, "sqlstate", None),
            str(error),
        )


async def get_avenger_repository(
    session: Annotated[AsyncSession, Depends(get_async_db_session)],
) -> AvengerRepository:
    """FastAPI DI用のAvengerRepositoryファクトリ.

    Returns
    -------
        AvengerRepository

    """
    return AvengerRepository(session)
