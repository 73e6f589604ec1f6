"""AvengerRepositoryのテスト."""
import logging

import pytest
from sqlalchemy.exc import SQLAlchemyError

from avenger_api.database.repository import AvengerRepository


class TestAvengerRepository:

    async def test_get_all_on_empty_table(self, session):
        repo = AvengerRepository(session)
        assert list(await repo.get_all()) == []

    async def test_create_returns_persisted_row(self, session):
        repo = AvengerRepository(session)
        thor = await repo.create("Thor")

        assert thor.id is not None
        assert thor.name == "Thor"
        stored = await repo.get_all()
        assert [(a.id, a.name) for a in stored] == [(thor.id, "Thor")]

    async def test_get_all_orders_by_id(self, session):
        repo = AvengerRepository(session)
        created = [await repo.create(name) for name in ("Hulk", "Ant-Man", "Thor")]

        stored = await repo.get_all()
        assert [a.id for a in stored] == sorted(a.id for a in created)
        assert [a.name for a in stored] == ["Hulk", "Ant-Man", "Thor"]

    async def test_delete_reports_affected_rows(self, session):
        repo = AvengerRepository(session)
        hulk = await repo.create("Hulk")
        thor = await repo.create("Thor")

        assert await repo.delete(hulk.id) == 1
        assert await repo.delete(hulk.id) == 0
        assert [a.id for a in await repo.get_all()] == [thor.id]

    async def test_create_failure_rolls_back_and_logs(self, broken_session, caplog):
        repo = AvengerRepository(broken_session)

        with caplog.at_level(logging.ERROR), pytest.raises(SQLAlchemyError):
            await repo.create("Thor")

        assert "[INSERT_AVENGER]" in caplog.text
        assert "Thor" in caplog.text

    async def test_delete_failure_logs_and_raises(self, broken_session, caplog):
        repo = AvengerRepository(broken_session)

        with caplog.at_level(logging.ERROR), pytest.raises(SQLAlchemyError):
            await repo.delete(1)

        assert "[DELETE_AVENGER]" in caplog.text
