"""
Shared fixtures for the order service tests.

The coordinator is exercised against an in-memory repository and a stub user
client, so no database or user service is needed.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from services.order_service.models import DEFAULT_ORDER_STATUS, Order
from services.order_service.schemas import UserRecord
from services.order_service.service import OrderService


class InMemoryOrderRepository:
    """Dict-backed stand-in for OrderRepository that records its calls."""

    def __init__(self) -> None:
        self.orders: dict[int, Order] = {}
        self.saved: list[Order] = []
        self.deleted: list[int] = []
        self._next_id = 1

    def add(self, **fields) -> Order:
        order = Order(**fields)
        order.id = self._next_id
        self._next_id += 1
        if order.status is None:
            order.status = DEFAULT_ORDER_STATUS
        order.created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.orders[order.id] = order
        return order

    async def save(self, order: Order) -> Order:
        self.saved.append(order)
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        if order.status is None:
            order.status = DEFAULT_ORDER_STATUS
        if order.created_at is None:
            order.created_at = datetime.now(timezone.utc)
        self.orders[order.id] = order
        return order

    async def find_by_id(self, order_id: int) -> Order | None:
        return self.orders.get(order_id)

    async def find_all(self) -> list[Order]:
        return list(self.orders.values())

    async def find_by_user_id(self, user_id: int) -> list[Order]:
        return [o for o in self.orders.values() if o.user_id == user_id]

    async def delete_by_id(self, order_id: int) -> None:
        self.deleted.append(order_id)
        self.orders.pop(order_id, None)


class StubUserClient:
    """User client that knows a fixed set of user ids."""

    def __init__(self, known_ids: set[int] | None = None) -> None:
        self.known_ids = set(known_ids or ())
        self.lookups: list[int] = []

    async def get_user_by_id(self, user_id: int) -> UserRecord | None:
        self.lookups.append(user_id)
        if user_id not in self.known_ids:
            return None
        return UserRecord(id=user_id, name=f"user-{user_id}")


@pytest.fixture()
def repo() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture()
def user_client() -> StubUserClient:
    return StubUserClient(known_ids={7})


@pytest.fixture()
def order_service(repo: InMemoryOrderRepository, user_client: StubUserClient) -> OrderService:
    return OrderService(repository=repo, user_client=user_client)
