from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import delete, select
from .models import Order

class OrderRepository:
    """Storage collaborator for orders, bound to one request-scoped session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, order: Order) -> Order:
        self.db.add(order)
        await self.db.commit()
        await self.db.refresh(order)
        return order

    async def find_by_id(self, order_id: int) -> Order | None:
        result = await self.db.execute(select(Order).where(Order.id == order_id))
        return result.scalars().first()

    async def find_all(self) -> list[Order]:
        result = await self.db.execute(select(Order))
        return list(result.scalars().all())

    async def find_by_user_id(self, user_id: int) -> list[Order]:
        result = await self.db.execute(select(Order).where(Order.user_id == user_id))
        return list(result.scalars().all())

    async def delete_by_id(self, order_id: int) -> None:
        # No-op when nothing matches
        await self.db.execute(delete(Order).where(Order.id == order_id))
        await self.db.commit()
