from fastapi import FastAPI
from shared.config.database import engine, init_schema
from shared.observability import setup_observability
from .router import router, public_router
from .models import Order # Import to register with Base

ORDER_SCHEMA = Order.__table__.schema

order_app = FastAPI(title="Order Service", version="1.0.0")

setup_observability(order_app, "order_service")

order_app.include_router(public_router)
order_app.include_router(router)

# Only fires when order_app is served directly; the root app bootstraps when mounting it
@order_app.on_event("startup")
async def startup_event():
    await init_schema(ORDER_SCHEMA)

@order_app.on_event("shutdown")
async def shutdown_event():
    await engine.dispose()
