"""Unit tests for ProductStore statement building and connection handling."""

import asyncio
from datetime import UTC, datetime

import pytest
from sqlalchemy.dialects import sqlite
from sqlalchemy.exc import OperationalError

from src.catalog.entities.product import ProductStore
from src.catalog.entities.product.repository import like_pattern
from tests.fixtures.dummies import DummyConnection, DummyConnectionFactory, DummyResult
from tests.utils import make_record, make_row


def _compiled(statement):
    return statement.compile(dialect=sqlite.dialect())


class TestLikePattern:
    """Test search pattern escaping."""

    def test_plain_term(self):
        assert like_pattern("widget") == "%widget%"

    def test_empty_term_matches_everything(self):
        assert like_pattern("") == "%%"

    def test_wildcards_escaped(self):
        assert like_pattern("50%_off") == "%50\\%\\_off%"

    def test_escape_character_escaped(self):
        assert like_pattern("a\\b") == "%a\\\\b%"


class TestStatements:
    """Test that values travel as bound parameters."""

    @pytest.mark.asyncio
    async def test_search_binds_single_parameter(self):
        connection = DummyConnection(DummyResult(rows=[]))
        store = ProductStore(DummyConnectionFactory(connection))
        hostile = "'; DROP TABLE Products; --"

        await store.search(hostile)

        (statement,) = connection.statements
        compiled = _compiled(statement)
        assert compiled.params["search_term"] == like_pattern(hostile)
        assert "DROP TABLE" not in str(compiled)

    @pytest.mark.asyncio
    async def test_insert_binds_values(self):
        connection = DummyConnection(DummyResult(inserted_primary_key=(17,)))
        store = ProductStore(DummyConnectionFactory(connection))

        new_id = await store.insert(make_record(name="O'Brien's Widget"))

        assert new_id == 17
        assert connection.committed
        compiled = _compiled(connection.statements[0])
        assert compiled.params["Name"] == "O'Brien's Widget"
        assert "O'Brien" not in str(compiled)

    @pytest.mark.asyncio
    async def test_update_reports_rowcount(self):
        connection = DummyConnection(DummyResult(rowcount=1))
        store = ProductStore(DummyConnectionFactory(connection))

        assert await store.update(make_record(id=5, updated_at=datetime.now(UTC))) is True
        assert connection.committed

    @pytest.mark.asyncio
    async def test_soft_delete_only_matches_active(self):
        connection = DummyConnection(DummyResult(rowcount=0))
        store = ProductStore(DummyConnectionFactory(connection))

        assert await store.soft_delete(5, datetime.now(UTC)) is False

        sql = str(_compiled(connection.statements[0]))
        assert "IsActive" in sql
        assert "WHERE" in sql

    @pytest.mark.asyncio
    async def test_rows_mapped_to_records(self):
        connection = DummyConnection(DummyResult(rows=[make_row(id=1), make_row(id=2, name="Gadget")]))
        store = ProductStore(DummyConnectionFactory(connection))

        records = await store.fetch_all()

        assert [(r.id, r.name) for r in records] == [(1, "Widget"), (2, "Gadget")]


class TestConnectionRelease:
    """Test that the connection is closed on every exit path."""

    @pytest.mark.asyncio
    async def test_closed_after_success(self):
        connection = DummyConnection(DummyResult(rows=[make_row(id=1)]))
        factory = DummyConnectionFactory(connection)
        store = ProductStore(factory)

        record = await store.fetch_by_id(1)

        assert record is not None
        assert factory.created == 1
        assert connection.closed

    @pytest.mark.asyncio
    async def test_closed_after_error(self):
        """Driver errors propagate unchanged and the connection is still released."""
        error = OperationalError("SELECT", {}, Exception("no such table: Products"))
        connection = DummyConnection(error=error)
        store = ProductStore(DummyConnectionFactory(connection))

        with pytest.raises(OperationalError) as exc_info:
            await store.fetch_all()

        assert exc_info.value is error
        assert connection.closed
        assert not connection.committed

    @pytest.mark.asyncio
    async def test_closed_after_cancellation(self):
        """Cancelling an in-flight operation ends it and releases the connection."""
        connection = DummyConnection(block=True)
        store = ProductStore(DummyConnectionFactory(connection))

        task = asyncio.create_task(store.search("widget"))
        await connection.executing.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert connection.closed

    @pytest.mark.asyncio
    async def test_cancelled_write_not_committed(self):
        connection = DummyConnection(block=True)
        store = ProductStore(DummyConnectionFactory(connection))

        task = asyncio.create_task(store.insert(make_record()))
        await connection.executing.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert not connection.committed
        assert connection.closed
