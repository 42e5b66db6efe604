from fastapi import FastAPI
from shared.config.database import engine, init_schema

from services.order_service.main import order_app, ORDER_SCHEMA

app = FastAPI(title="Order Management")

@app.on_event("startup")
async def startup_event():
    # Mounted apps don't receive startup events, so bootstrap here
    await init_schema(ORDER_SCHEMA)

@app.on_event("shutdown")
async def shutdown_event():
    await engine.dispose()

app.mount("/api/orders", order_app)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8082)
