from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from shared.config.database import get_db
from .clients import UserServiceClient
from .exceptions import OrderNotFoundError, UserNotFoundError
from .repository import OrderRepository
from .schemas import OrderCreate, OrderResponse, OrderStatusUpdate
from .service import OrderService

router = APIRouter()
public_router = APIRouter()  # For any public endpoints (e.g. health check)


def get_user_client() -> UserServiceClient:
    return UserServiceClient()


def get_order_service(
    db: AsyncSession = Depends(get_db),
    user_client: UserServiceClient = Depends(get_user_client),
) -> OrderService:
    return OrderService(OrderRepository(db), user_client)


@public_router.get("/health")
async def health_check():
    return {"service": "order", "status": "running"}

@router.post("/", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(order: OrderCreate, service: OrderService = Depends(get_order_service)):
    try:
        return await service.create_order(order)
    except UserNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/", response_model=list[OrderResponse])
async def list_orders(service: OrderService = Depends(get_order_service)):
    return await service.get_all_orders()

@router.get("/user/{user_id}", response_model=list[OrderResponse])
async def list_orders_for_user(user_id: int, service: OrderService = Depends(get_order_service)):
    return await service.get_orders_by_user_id(user_id)

@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    order = await service.get_order_by_id(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order

@router.patch("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: int,
    payload: OrderStatusUpdate,
    service: OrderService = Depends(get_order_service),
):
    try:
        return await service.update_order_status(order_id, payload.status)
    except OrderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    await service.delete_order(order_id)
