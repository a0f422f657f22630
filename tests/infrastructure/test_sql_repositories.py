"""Tests for the SQLAlchemy repositories against a temporary SQLite store."""

import asyncio
from decimal import Decimal

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from storefront.domain.exceptions import PersistenceError
from storefront.domain.model.order import Customer, Order, OrderLineItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.infrastructure.persistence.sql_order_repository import SqlOrderRepository
from storefront.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from storefront.infrastructure.persistence.tables import OrderItemTable, OrderTable
from tests.store_helpers import count_rows


def _with_session_factory(url, action):
    async def _run():
        engine = create_async_engine(url)
        try:
            return await action(async_sessionmaker(engine, expire_on_commit=False))
        finally:
            await engine.dispose()

    return asyncio.run(_run())


def _order(*lines: tuple[int, int, str], name: str = "Alice") -> Order:
    return Order.create(
        Customer.of(name, email="alice@example.test"),
        [
            OrderLineItem(product_id=pid, quantity=Quantity(qty), unit_price=Money.of(price))
            for pid, qty, price in lines
        ],
    )


class BrokenItemsOrderRepository(SqlOrderRepository):
    """Writes the header, then an item row the store refuses."""

    @staticmethod
    def _item_rows(order_id, order):
        rows = SqlOrderRepository._item_rows(order_id, order)
        rows.append(OrderItemTable(order_id=order_id, product_id=1, quantity=None, unit_price=None))
        return rows


class TestSqlProductRepository:

    def test_lists_seeded_catalog_by_id(self, sqlite_url):
        products = _with_session_factory(
            sqlite_url, lambda sf: SqlProductRepository(sf, 5).list_all()
        )
        assert [p.id for p in products] == list(range(1, 9))
        assert products[2].name == "USB-C Fast Charger"
        assert products[2].price == Money.of("19.99")

    def test_get_by_id(self, sqlite_url):
        product = _with_session_factory(
            sqlite_url, lambda sf: SqlProductRepository(sf, 5).get_by_id(4)
        )
        assert product.name == "Bluetooth Speaker"

    def test_get_by_id_missing(self, sqlite_url):
        product = _with_session_factory(
            sqlite_url, lambda sf: SqlProductRepository(sf, 5).get_by_id(999)
        )
        assert product is None

    def test_get_by_id_beyond_column_range(self, sqlite_url):
        product = _with_session_factory(
            sqlite_url, lambda sf: SqlProductRepository(sf, 5).get_by_id(2**63)
        )
        assert product is None

    def test_get_many_skips_ids_beyond_column_range(self, sqlite_url):
        found = _with_session_factory(
            sqlite_url, lambda sf: SqlProductRepository(sf, 5).get_many([2**63, 3])
        )
        assert sorted(found) == [3]

    def test_get_many_omits_unknown_ids(self, sqlite_url):
        found = _with_session_factory(
            sqlite_url, lambda sf: SqlProductRepository(sf, 5).get_many([3, 999, 1])
        )
        assert sorted(found) == [1, 3]

    def test_read_failure_becomes_persistence_error(self, tmp_path):
        # schema never created
        url = f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}"
        with pytest.raises(PersistenceError, match="Failed to list products"):
            _with_session_factory(url, lambda sf: SqlProductRepository(sf, 5).list_all())


class TestSqlOrderRepository:

    def test_writes_header_and_items(self, sqlite_url):
        order = _order((3, 2, "19.99"), (1, 1, "39.99"))
        order_id = _with_session_factory(
            sqlite_url, lambda sf: SqlOrderRepository(sf, 5).create(order)
        )

        async def _load(sf):
            async with sf() as session:
                header = await session.get(OrderTable, order_id)
                items = (await session.scalars(
                    select(OrderItemTable)
                    .where(OrderItemTable.order_id == order_id)
                    .order_by(OrderItemTable.id)
                )).all()
                return header, items

        header, items = _with_session_factory(sqlite_url, _load)
        assert header.customer_name == "Alice"
        assert header.email == "alice@example.test"
        assert header.address is None
        assert header.total_amount == Decimal("79.97")
        assert [(i.product_id, i.quantity, i.unit_price) for i in items] == [
            (3, 2, Decimal("19.99")),
            (1, 1, Decimal("39.99")),
        ]

    def test_ids_are_generated_by_the_store(self, sqlite_url):
        async def _two(sf):
            repo = SqlOrderRepository(sf, 5)
            return await repo.create(_order((1, 1, "39.99"))), await repo.create(_order((2, 1, "14.99")))

        first, second = _with_session_factory(sqlite_url, _two)
        assert second == first + 1

    def test_failed_item_insert_leaves_nothing_behind(self, sqlite_url):
        order = _order((3, 2, "19.99"))
        with pytest.raises(PersistenceError, match="Checkout failed"):
            _with_session_factory(
                sqlite_url, lambda sf: BrokenItemsOrderRepository(sf, 5).create(order)
            )
        assert count_rows(sqlite_url, OrderTable) == 0
        assert count_rows(sqlite_url, OrderItemTable) == 0

    def test_concurrent_orders_do_not_mix_lines(self, sqlite_url):
        async def _many(sf):
            repo = SqlOrderRepository(sf, 5)
            orders = [_order((pid, pid, "1.00"), (pid, 1, "2.00")) for pid in range(1, 6)]
            return await asyncio.gather(*(repo.create(o) for o in orders))

        order_ids = _with_session_factory(sqlite_url, _many)

        async def _lines(sf):
            async with sf() as session:
                rows = (await session.scalars(select(OrderItemTable))).all()
                return {(r.order_id, r.product_id) for r in rows}

        lines = _with_session_factory(sqlite_url, _lines)
        assert len(set(order_ids)) == 5
        assert count_rows(sqlite_url, OrderItemTable) == 10
        # every order's lines all refer to one product
        assert len({pid for _, pid in lines}) == 5
        assert len(lines) == 5
