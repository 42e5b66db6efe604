import structlog
from shared.observability.metrics import (
    orders_created_total,
    orders_deleted_total,
    orders_status_updates_total,
    orders_user_lookup_total,
)
from .clients import UserServiceClient
from .exceptions import OrderNotFoundError, UserNotFoundError
from .models import Order
from .repository import OrderRepository
from .schemas import OrderCreate

logger = structlog.get_logger(__name__)

class OrderService:
    """Order lifecycle operations.

    Creation is the only operation that talks to the user service; everything
    else is a pass-through to the repository.
    """

    def __init__(self, repository: OrderRepository, user_client: UserServiceClient):
        self.repository = repository
        self.user_client = user_client

    async def create_order(self, data: OrderCreate) -> Order:
        try:
            user = await self.user_client.get_user_by_id(data.user_id)
        except Exception:
            orders_user_lookup_total.labels(result="error").inc()
            logger.exception("user_lookup_failed", user_id=data.user_id)
            raise
        if user is None:
            orders_user_lookup_total.labels(result="not_found").inc()
            orders_created_total.labels(status="rejected").inc()
            logger.warning("order_rejected_unknown_user", user_id=data.user_id)
            raise UserNotFoundError(data.user_id)
        orders_user_lookup_total.labels(result="found").inc()

        fields = dict(
            user_id=data.user_id,
            product_id=data.product_id,
            quantity=data.quantity,
            total_price=data.unit_price * data.quantity,
        )
        if data.status is not None:
            fields["status"] = data.status

        order = await self.repository.save(Order(**fields))
        orders_created_total.labels(status="success").inc()
        logger.info("order_created", order_id=order.id, user_id=order.user_id)
        return order

    async def get_order_by_id(self, order_id: int) -> Order | None:
        return await self.repository.find_by_id(order_id)

    async def get_all_orders(self) -> list[Order]:
        return await self.repository.find_all()

    async def get_orders_by_user_id(self, user_id: int) -> list[Order]:
        return await self.repository.find_by_user_id(user_id)

    async def update_order_status(self, order_id: int, status: str) -> Order:
        order = await self.repository.find_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)

        previous = order.status
        order.status = status
        order = await self.repository.save(order)
        orders_status_updates_total.inc()
        logger.info("order_status_updated", order_id=order_id, previous=previous, status=status)
        return order

    async def delete_order(self, order_id: int) -> None:
        await self.repository.delete_by_id(order_id)
        orders_deleted_total.inc()
        logger.info("order_deleted", order_id=order_id)
